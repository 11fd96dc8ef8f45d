"""
Management command to report translation coverage of a PO file.

Usage:
    ./manage.py analyze_po_file /path/to/locale/tr/LC_MESSAGES/django.po
"""

import logging

from django.core.management.base import BaseCommand, CommandError

from ol_po_translations.api import analyze_po_file
from ol_po_translations.exceptions import PoTranslationsError
from ol_po_translations.utils.command_utils import dump_json

logger = logging.getLogger(__name__)


class Command(BaseCommand):
    """Analyze a PO file and print statistics, untranslated and fuzzy entries."""

    help = (
        "Analyze a .po file and return statistics, untranslated entries, "
        "and fuzzy entries as JSON."
    )

    def add_arguments(self, parser) -> None:
        """Entry point for subclassed commands to add custom arguments."""
        parser.add_argument(
            "po_file_path",
            help="Path to the .po file (e.g. locale/tr/LC_MESSAGES/django.po)",
        )
        parser.add_argument(
            "--locale",
            dest="locale",
            default=None,
            help="Locale of the file, e.g. `tr`. Informational only.",
        )

    def handle(self, *args, **options) -> None:  # noqa: ARG002
        """Handle the analyze_po_file command."""
        try:
            result = analyze_po_file(options["po_file_path"], options["locale"])
        except PoTranslationsError as e:
            logger.exception("PO file analysis failed")
            error_msg = f"PO file analysis failed: {e}"
            raise CommandError(error_msg) from e

        self.stdout.write(dump_json(result))
