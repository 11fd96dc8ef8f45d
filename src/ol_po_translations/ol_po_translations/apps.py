"""
ol_po_translations Django application initialization.
"""

from django.apps import AppConfig


class OLPoTranslationsConfig(AppConfig):
    """
    Configuration for the ol_po_translations Django application.
    """

    name = "ol_po_translations"
    verbose_name = "PO Translations"
