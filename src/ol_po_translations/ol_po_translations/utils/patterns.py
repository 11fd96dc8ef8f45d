"""Structural token extraction for translation validation."""

import re
from collections.abc import Iterable, Mapping
from dataclasses import dataclass

from ol_po_translations.constants import (
    PATTERN_CODE,
    PATTERN_LINKS,
    PATTERN_PLACEHOLDERS,
    PATTERN_TABLE,
    PATTERN_TAGS,
)

PatternTable = Mapping[str, Iterable[re.Pattern]]


@dataclass(frozen=True)
class ExtractedPatterns:
    """
    Structural tokens found in one text.

    Each category holds distinct token strings in order of first occurrence.
    """

    placeholders: tuple[str, ...] = ()
    tags: tuple[str, ...] = ()
    links: tuple[str, ...] = ()
    code: tuple[str, ...] = ()


def _find_unique(text: str, patterns: Iterable[re.Pattern]) -> tuple[str, ...]:
    """Return the distinct matches of all patterns, first occurrence first."""
    found: dict[str, None] = {}
    for pattern in patterns:
        for match in pattern.finditer(text):
            found.setdefault(match.group(0), None)
    return tuple(found)


def extract_patterns(
    text: str, pattern_table: PatternTable = PATTERN_TABLE
) -> ExtractedPatterns:
    """
    Extract placeholders, markup tags, links and inline code from text.

    Args:
        text: Source or translated string. Empty text yields no tokens.
        pattern_table: Category -> patterns. Categories missing from the
            table are left empty, which lets callers disable a category
            without touching module state.

    Returns:
        ExtractedPatterns for the text
    """
    if not text:
        return ExtractedPatterns()

    return ExtractedPatterns(
        placeholders=_find_unique(text, pattern_table.get(PATTERN_PLACEHOLDERS, ())),
        tags=_find_unique(text, pattern_table.get(PATTERN_TAGS, ())),
        links=_find_unique(text, pattern_table.get(PATTERN_LINKS, ())),
        code=_find_unique(text, pattern_table.get(PATTERN_CODE, ())),
    )
