"""Merge accepted translations back into a PO file."""

import difflib
import logging
from collections.abc import Iterable
from pathlib import Path
from typing import TypedDict

import polib  # type: ignore[import-untyped]

from ol_po_translations.constants import DEFAULT_WRAP_WIDTH, FUZZY_FLAG
from ol_po_translations.exceptions import PoParseError
from ol_po_translations.utils.po_parser import PoCatalog, parse_po_catalog
from ol_po_translations.utils.validation import TranslationEntry

logger = logging.getLogger(__name__)


class UpdateResult(TypedDict):
    """Outcome of merging translations into a PO file."""

    success: bool
    updated_entries: int
    skipped_entries: int
    file_path: str
    dry_run: bool
    diff: str
    errors: list[str]


def _remove_fuzzy_flag(entry: polib.POEntry) -> None:
    """Drop the fuzzy flag, keeping other flags in order."""
    if FUZZY_FLAG in entry.flags:
        entry.flags = [flag for flag in entry.flags if flag != FUZZY_FLAG]


def _set_translation(entry: polib.POEntry, msgstr: str) -> None:
    """Write msgstr, or the first plural form for plural entries."""
    if entry.msgid_plural:
        logger.warning(
            "Only the first plural form is updated for msgid=%r", entry.msgid[:60]
        )
        entry.msgstr_plural[0] = msgstr
    else:
        entry.msgstr = msgstr


def apply_translations(
    catalog: PoCatalog, translations: dict[str, TranslationEntry]
) -> int:
    """
    Apply proposals to every catalog entry whose msgid they match.

    Context is not part of the key: entries sharing a msgid across contexts
    all receive the same translation.

    Returns:
        Number of entries updated
    """
    updated = 0
    for context, entries in catalog.items():
        for msgid, entry in entries.items():
            translation = translations.get(msgid)
            if translation is None:
                continue
            _set_translation(entry, translation.msgstr)
            _remove_fuzzy_flag(entry)
            updated += 1
            logger.debug("Updated msgid=%r (context=%r)", msgid[:60], context)
    return updated


def build_diff(original: str, updated: str, file_path: str) -> str:
    """Unified diff between the current and re-serialized file content."""
    return "".join(
        difflib.unified_diff(
            original.splitlines(keepends=True),
            updated.splitlines(keepends=True),
            fromfile=f"a/{file_path}",
            tofile=f"b/{file_path}",
        )
    )


def update_po_file(
    file_path: Path | str,
    translations: Iterable[TranslationEntry],
    *,
    dry_run: bool = False,
    wrapwidth: int = DEFAULT_WRAP_WIDTH,
) -> UpdateResult:
    """
    Merge translations into a PO file and re-serialize it.

    The file is parsed afresh. Failures (missing file, parse error, write
    error) are reported in the result instead of being raised.

    Args:
        file_path: Path to the .po file
        translations: Proposals; skipped ones are counted but not applied
        dry_run: Compute the result and diff without writing the file
        wrapwidth: Line width used by polib when serializing

    Returns:
        UpdateResult
    """
    file_path = str(file_path)
    lookup: dict[str, TranslationEntry] = {}
    skipped = 0
    for translation in translations:
        if translation.skipped:
            skipped += 1
            continue
        lookup[translation.msgid] = translation

    result: UpdateResult = {
        "success": False,
        "updated_entries": 0,
        "skipped_entries": skipped,
        "file_path": file_path,
        "dry_run": dry_run,
        "diff": "",
        "errors": [],
    }

    try:
        if not Path(file_path).is_file():
            msg = f"PO file not found: {file_path}"
            raise FileNotFoundError(msg)  # noqa: TRY301

        po, catalog = parse_po_catalog(file_path, wrapwidth=wrapwidth)
        updated = apply_translations(catalog, lookup)
        new_content = str(po)
        # The header charset may not cover new msgstrs; encode before writing
        data = new_content.encode(po.encoding)

        if dry_run:
            result["diff"] = build_diff(
                Path(file_path).read_text(encoding="utf-8"), new_content, file_path
            )
            logger.info(
                "Dry run: would update %d entries in %s", updated, file_path
            )
        else:
            Path(file_path).write_bytes(data)
            logger.info("Updated %d entries in %s", updated, file_path)
    except (OSError, ValueError, PoParseError) as e:
        logger.warning("Failed to update PO file %s: %s", file_path, e)
        result["errors"].append(str(e))
        return result

    result["success"] = True
    result["updated_entries"] = updated
    return result
