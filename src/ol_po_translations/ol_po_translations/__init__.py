"""
ol_po_translations: analyze, validate and merge gettext PO translations.
"""

__version__ = "0.1.0"
