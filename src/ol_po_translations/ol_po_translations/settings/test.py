"""
Settings for ol-po-translations tests
"""

from .common import plugin_settings


class SettingsClass:
    """dummy settings class"""


SETTINGS = SettingsClass()
plugin_settings(SETTINGS)
vars().update(SETTINGS.__dict__)


SECRET_KEY = "ol-po-translations-test"  # noqa: S105  # pragma: allowlist secret
INSTALLED_APPS = ["ol_po_translations.apps.OLPoTranslationsConfig"]
USE_TZ = True
