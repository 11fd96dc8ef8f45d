"""Common settings for the PO translation tools"""

from ol_po_translations.constants import DEFAULT_WRAP_WIDTH


def apply_common_settings(settings):
    """
    Apply default PO translation settings.
    """
    settings.PO_TRANSLATIONS_STRICT = True
    settings.PO_TRANSLATIONS_DRY_RUN = False
    settings.PO_TRANSLATIONS_FORCE = False
    # Length ratio warnings are noisy across languages
    settings.PO_TRANSLATIONS_CHECK_LENGTH = False
    settings.PO_TRANSLATIONS_WRAP_WIDTH = DEFAULT_WRAP_WIDTH


def plugin_settings(settings):
    """
    Populate settings
    """
    apply_common_settings(settings)
