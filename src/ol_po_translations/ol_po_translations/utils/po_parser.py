"""PO file loading, normalization and line-number recovery built on polib."""

import logging
import re
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, TypedDict

import polib  # type: ignore[import-untyped]

from ol_po_translations.constants import (
    DEFAULT_WRAP_WIDTH,
    FUZZY_FLAG,
    OBSOLETE_PREVIOUS_VALUE_MARKER,
)
from ol_po_translations.exceptions import PoParseError

logger = logging.getLogger(__name__)

_MSGID_LINE_RE = re.compile(r'^msgid\s+"(.*)"')
_CONTINUATION_LINE_RE = re.compile(r'^"(.*)"')

# context ("" when absent) -> msgid -> mutable polib entry
PoCatalog = dict[str, dict[str, polib.POEntry]]


@dataclass(frozen=True)
class PoEntry:
    """One translatable unit of a PO file (read-only view)."""

    msgid: str
    msgstr: str = ""
    context: str | None = None
    reference: str = ""
    line_number: int | None = None
    flags: tuple[str, ...] = field(default_factory=tuple)

    @property
    def is_fuzzy(self) -> bool:
        return FUZZY_FLAG in self.flags

    def to_dict(self) -> dict[str, Any]:
        """Public view of the entry, without flags."""
        return {
            "msgid": self.msgid,
            "msgstr": self.msgstr,
            "context": self.context,
            "reference": self.reference,
            "line_number": self.line_number,
        }


@dataclass(frozen=True)
class PoStatistics:
    """Translation coverage over the non-header entries of a PO file."""

    translated: int = 0
    untranslated: int = 0
    fuzzy: int = 0
    total: int = 0


class PoFileData(TypedDict):
    """Result of loading a PO file."""

    entries: list[PoEntry]
    statistics: PoStatistics
    headers: dict[str, str]


def normalize_po_content(content: str) -> str:
    """
    Drop obsolete previous-value comment lines (#~| ...) from PO text.

    All other lines are kept untouched and in order, so line numbers computed
    on the result stay consistent with what the parser sees.
    """
    lines = content.split("\n")
    kept = [
        line
        for line in lines
        if not line.strip().startswith(OBSOLETE_PREVIOUS_VALUE_MARKER)
    ]
    return "\n".join(kept)


def build_line_number_map(content: str) -> dict[str, int]:
    """
    Map each unescaped msgid to the 1-based line of its msgid keyword.

    Scans the raw text independently of polib. Multi-line msgids are joined
    before unescaping so the keys match polib's msgid values. When the same
    msgid occurs in several contexts the last occurrence wins.
    """
    line_map: dict[str, int] = {}
    current_msgid: str | None = None
    msgid_start_line: int | None = None
    collecting = False

    for line_number, raw_line in enumerate(content.split("\n"), start=1):
        line = raw_line.strip()

        if line.startswith("msgid "):
            match = _MSGID_LINE_RE.match(line)
            if match:
                current_msgid = match.group(1)
                msgid_start_line = line_number
                collecting = True
        elif line.startswith("msgid_plural"):
            # Plural source continuations belong to msgid_plural
            collecting = False
        elif current_msgid is not None and collecting and line.startswith('"'):
            match = _CONTINUATION_LINE_RE.match(line)
            if match:
                current_msgid += match.group(1)
        elif line.startswith("msgstr") and current_msgid is not None:
            line_map[polib.unescape(current_msgid)] = msgid_start_line
            current_msgid = None
            msgid_start_line = None
            collecting = False

    return line_map


def read_po_content(file_path: Path | str) -> str:
    """Read a PO file as UTF-8 text and strip unsupported constructs."""
    try:
        content = Path(file_path).read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as e:
        msg = f"Failed to parse PO file: {e}"
        raise PoParseError(msg) from e
    return normalize_po_content(content)


def parse_po_content(
    content: str, wrapwidth: int = DEFAULT_WRAP_WIDTH
) -> polib.POFile:
    """Parse normalized PO text with polib."""
    try:
        return polib.pofile(content, wrapwidth=wrapwidth)
    except (OSError, ValueError) as e:
        msg = f"Failed to parse PO file: {e}"
        raise PoParseError(msg) from e


def _iter_active_entries(po: polib.POFile):
    """Yield entries that are neither the header nor obsolete."""
    for entry in po:
        if entry.obsolete or not entry.msgid:
            continue
        yield entry


def _entry_msgstr(entry: polib.POEntry) -> str:
    """Return the singular translation, or the first plural form."""
    if entry.msgid_plural:
        return entry.msgstr_plural.get(0, "") or ""
    return entry.msgstr or ""


def _entry_reference(entry: polib.POEntry) -> str:
    """Format occurrences as space separated file:line locators."""
    return " ".join(
        f"{occ[0]}:{occ[1]}" if occ[1] else occ[0] for occ in entry.occurrences
    )


def load_po_file(
    file_path: Path | str, wrapwidth: int = DEFAULT_WRAP_WIDTH
) -> PoFileData:
    """
    Load a PO file into flattened entries plus coverage statistics.

    Args:
        file_path: Path to the .po file
        wrapwidth: Line width polib uses when the file is re-serialized

    Returns:
        PoFileData with entries (header and obsolete entries excluded),
        statistics and header metadata

    Raises:
        PoParseError: If the file cannot be read or is not valid PO syntax
    """
    content = read_po_content(file_path)
    po = parse_po_content(content, wrapwidth=wrapwidth)
    line_map = build_line_number_map(content)

    entries = []
    translated = 0
    untranslated = 0
    fuzzy = 0

    for entry in _iter_active_entries(po):
        po_entry = PoEntry(
            msgid=entry.msgid,
            msgstr=_entry_msgstr(entry),
            context=entry.msgctxt or None,
            reference=_entry_reference(entry),
            line_number=line_map.get(entry.msgid),
            flags=tuple(entry.flags or ()),
        )
        entries.append(po_entry)

        if po_entry.is_fuzzy:
            fuzzy += 1
        elif not po_entry.msgstr:
            untranslated += 1
        else:
            translated += 1

    statistics = PoStatistics(
        translated=translated,
        untranslated=untranslated,
        fuzzy=fuzzy,
        total=len(entries),
    )
    logger.debug(
        "Loaded %s: %d entries (%d translated, %d untranslated, %d fuzzy)",
        file_path,
        statistics.total,
        translated,
        untranslated,
        fuzzy,
    )
    return {
        "entries": entries,
        "statistics": statistics,
        "headers": dict(po.metadata),
    }


def get_untranslated_entries(entries: list[PoEntry]) -> list[dict[str, Any]]:
    """Return non-fuzzy entries with an empty translation."""
    return [
        entry.to_dict() for entry in entries if not entry.msgstr and not entry.is_fuzzy
    ]


def get_fuzzy_entries(entries: list[PoEntry]) -> list[dict[str, Any]]:
    """Return entries carrying the fuzzy flag."""
    return [entry.to_dict() for entry in entries if entry.is_fuzzy]


def build_po_catalog(po: polib.POFile) -> PoCatalog:
    """
    Group the active entries of a parsed file by context, then msgid.

    Mapping order follows file order. The values are the polib entries
    themselves, so changes made through the catalog are serialized with `po`.
    """
    catalog: PoCatalog = {}
    for entry in _iter_active_entries(po):
        if not isinstance(entry, polib.POEntry):
            msg = f"Unexpected entry type in PO file: {type(entry).__name__}"
            raise PoParseError(msg)
        context_entries = catalog.setdefault(entry.msgctxt or "", {})
        if entry.msgid in context_entries:
            logger.warning(
                "Duplicate msgid %r in context %r, keeping the first entry",
                entry.msgid[:60],
                entry.msgctxt or "",
            )
            continue
        context_entries[entry.msgid] = entry
    return catalog


def parse_po_catalog(
    file_path: Path | str, wrapwidth: int = DEFAULT_WRAP_WIDTH
) -> tuple[polib.POFile, PoCatalog]:
    """
    Parse a PO file into its mutable polib structure for merging.

    Returns:
        (po, catalog) where catalog indexes the entries of po

    Raises:
        PoParseError: If the file cannot be read or is not valid PO syntax
    """
    content = read_po_content(file_path)
    po = parse_po_content(content, wrapwidth=wrapwidth)
    return po, build_po_catalog(po)


def validate_po_format(file_path: Path | str) -> dict[str, Any]:
    """Check whether a file parses as PO, without raising."""
    try:
        parse_po_content(read_po_content(file_path))
    except PoParseError as e:
        return {"valid": False, "error": str(e)}
    return {"valid": True, "error": None}
