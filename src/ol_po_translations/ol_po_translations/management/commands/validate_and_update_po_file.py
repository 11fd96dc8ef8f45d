"""
Management command to validate proposed translations and merge them into a
PO file.

Usage:
    ./manage.py validate_and_update_po_file /path/to/django.po \\
        --translations-file proposals.json --dry-run
"""

import logging

from django.core.management.base import BaseCommand

from ol_po_translations.api import validate_and_update_po_file
from ol_po_translations.constants import DEFAULT_WRAP_WIDTH
from ol_po_translations.utils.command_utils import (
    dump_json,
    get_bool_config_value,
    get_config_value,
    load_translations_file,
)

logger = logging.getLogger(__name__)


class Command(BaseCommand):
    """Validate translations and update the PO file in one operation."""

    help = (
        "Validate translations (variables, HTML, URLs, JavaScript) and update "
        "the .po file if they are valid. Use --force to update anyway."
    )

    def add_arguments(self, parser) -> None:
        """Entry point for subclassed commands to add custom arguments."""
        parser.add_argument(
            "po_file_path",
            help="Path to the .po file (e.g. locale/tr/LC_MESSAGES/django.po)",
        )
        parser.add_argument(
            "--translations-file",
            dest="translations_file",
            required=True,
            help=(
                "JSON file with a list of translations, each an object with "
                "`msgid`, `msgstr` and optionally `context`, `skipped`."
            ),
        )
        parser.add_argument(
            "--strict",
            dest="strict",
            action="store_true",
            default=None,
            help="Enable all structural checks (default).",
        )
        parser.add_argument(
            "--no-strict",
            dest="strict",
            action="store_false",
            default=None,
            help="Disable the structural checks; only empty translations fail.",
        )
        parser.add_argument(
            "--dry-run",
            dest="dry_run",
            action="store_true",
            default=None,
            help="Preview changes without writing the file.",
        )
        parser.add_argument(
            "--force",
            dest="force",
            action="store_true",
            default=None,
            help="Update the file even if some translations are invalid.",
        )
        parser.add_argument(
            "--check-length",
            dest="check_length",
            action="store_true",
            default=None,
            help="Warn about translations with a very different length.",
        )

    def handle(self, *args, **options) -> None:  # noqa: ARG002
        """Handle the validate_and_update_po_file command."""
        translations = load_translations_file(options["translations_file"])
        strict = get_bool_config_value("strict", options, default=True)
        dry_run = get_bool_config_value("dry_run", options, default=False)
        force = get_bool_config_value("force", options, default=False)
        check_length = get_bool_config_value("check_length", options, default=False)
        wrapwidth = int(get_config_value("wrap_width", options, DEFAULT_WRAP_WIDTH))

        logger.info(
            "Validating %d translation(s) for %s (strict=%s, dry_run=%s, force=%s)",
            len(translations),
            options["po_file_path"],
            strict,
            dry_run,
            force,
        )
        result = validate_and_update_po_file(
            options["po_file_path"],
            translations,
            strict=strict,
            dry_run=dry_run,
            force=force,
            check_length=check_length,
            wrapwidth=wrapwidth,
        )

        self.stdout.write(dump_json(result))
        update = result["update"]
        if update is not None and update["success"]:
            self.stderr.write(self.style.SUCCESS(result["message"]))
        else:
            self.stderr.write(self.style.WARNING(result["message"]))
