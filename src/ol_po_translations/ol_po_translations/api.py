"""
Analyze and validate-and-update operations over PO files.
"""

import logging
from collections.abc import Iterable
from pathlib import Path
from typing import Any, TypedDict

from ol_po_translations.constants import DEFAULT_WRAP_WIDTH
from ol_po_translations.exceptions import PoFileNotFoundError
from ol_po_translations.utils.po_parser import (
    PoStatistics,
    get_fuzzy_entries,
    get_untranslated_entries,
    load_po_file,
)
from ol_po_translations.utils.po_update import UpdateResult, update_po_file
from ol_po_translations.utils.validation import (
    TranslationEntry,
    ValidationOptions,
    ValidationReport,
    validate_translations,
)

logger = logging.getLogger(__name__)


class AnalyzeResult(TypedDict):
    file_path: str
    locale: str | None
    statistics: PoStatistics
    untranslated_entries: list[dict[str, Any]]
    fuzzy_entries: list[dict[str, Any]]


class ValidateAndUpdateResult(TypedDict):
    validation: ValidationReport
    update: UpdateResult | None
    skipped: int
    message: str


def resolve_po_file_path(po_file_path: str | Path) -> Path:
    """
    Resolve a PO file path to an absolute path of an existing regular file.

    Raises:
        PoFileNotFoundError: If the path does not exist or is not a file
    """
    absolute_path = Path(po_file_path).resolve()
    if not absolute_path.exists():
        msg = f"PO file not found: {absolute_path}"
        raise PoFileNotFoundError(msg)
    if not absolute_path.is_file():
        msg = f"Path is not a file: {absolute_path}"
        raise PoFileNotFoundError(msg)
    return absolute_path


def analyze_po_file(
    po_file_path: str | Path, locale: str | None = None
) -> AnalyzeResult:
    """
    Report coverage statistics plus untranslated and fuzzy entries.

    Args:
        po_file_path: Path to the .po file
        locale: Advisory locale hint, echoed back only

    Raises:
        PoFileNotFoundError: If the path is missing or not a regular file
        PoParseError: If the file is not valid PO syntax
    """
    absolute_path = resolve_po_file_path(po_file_path)
    data = load_po_file(absolute_path)
    entries = data["entries"]
    logger.info(
        "Analyzed %s: %d/%d translated",
        absolute_path,
        data["statistics"].translated,
        data["statistics"].total,
    )
    return {
        "file_path": str(absolute_path),
        "locale": locale,
        "statistics": data["statistics"],
        "untranslated_entries": get_untranslated_entries(entries),
        "fuzzy_entries": get_fuzzy_entries(entries),
    }


def _build_message(
    validation: ValidationReport, update: UpdateResult, *, dry_run: bool
) -> str:
    """
    Human-readable outcome of a validate-and-update run.

    Only called once an update was attempted, so an invalid verdict means
    the update was forced.
    """
    if not update["success"]:
        return f"Update failed: {'; '.join(update['errors'])}"

    summary = validation["summary"]
    updated = update["updated_entries"]
    if validation["overall_valid"]:
        if dry_run:
            return (
                f"All {summary['valid']} translations valid. "
                f"Would update {updated} entries."
            )
        return f"Successfully validated and updated {updated} translations."
    if dry_run:
        return (
            f"{summary['invalid']} invalid translations found. "
            f"Would force update {updated} entries."
        )
    return (
        f"Force updated {updated} translations "
        f"({summary['invalid']} were invalid)."
    )


def validate_and_update_po_file(  # noqa: PLR0913
    po_file_path: str | Path,
    translations: Iterable[TranslationEntry],
    *,
    strict: bool = True,
    dry_run: bool = False,
    force: bool = False,
    check_length: bool = False,
    wrapwidth: int = DEFAULT_WRAP_WIDTH,
) -> ValidateAndUpdateResult:
    """
    Validate proposals and merge the accepted ones into the PO file.

    Without force, nothing is written unless the overall verdict is valid,
    and only proposals whose own result is valid are merged. With force,
    every non-skipped proposal is merged.
    """
    translations = list(translations)
    skipped = sum(1 for translation in translations if translation.skipped)
    options = ValidationOptions.from_strict(strict, check_length=check_length)
    validation = validate_translations(translations, options)

    if not validation["overall_valid"] and not force:
        logger.info(
            "Not updating %s: %d invalid translation(s)",
            po_file_path,
            validation["summary"]["invalid"],
        )
        return {
            "validation": validation,
            "update": None,
            "skipped": skipped,
            "message": (
                f"Validation failed: {validation['summary']['invalid']} invalid "
                "translations found. Use force=true to update anyway."
            ),
        }

    to_update = translations
    if not force:
        valid_msgids = {
            result.msgid for result in validation["validation_results"] if result.valid
        }
        to_update = [
            translation
            for translation in translations
            if translation.skipped or translation.msgid in valid_msgids
        ]

    update = update_po_file(
        po_file_path, to_update, dry_run=dry_run, wrapwidth=wrapwidth
    )
    return {
        "validation": validation,
        "update": update,
        "skipped": skipped,
        "message": _build_message(validation, update, dry_run=dry_run),
    }
