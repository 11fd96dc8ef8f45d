"""
Exceptions for ol-po-translations
"""


class PoTranslationsError(Exception):
    """
    Base exception for PO translation errors
    """

    def __init__(self, message):
        super().__init__(str(message))


class PoFileNotFoundError(PoTranslationsError):
    """
    Exception to throw when a PO file path is missing or is not a regular file
    """


class PoParseError(PoTranslationsError):
    """
    Exception to throw when a PO file cannot be read or is not valid PO syntax
    """
