"""Validation of proposed translations for structural fidelity."""

import logging
from collections.abc import Iterable
from dataclasses import dataclass
from typing import Any, TypedDict

from ol_po_translations.constants import MAX_LENGTH_RATIO, MIN_LENGTH_RATIO
from ol_po_translations.utils.patterns import extract_patterns

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class TranslationEntry:
    """A proposed translation supplied by the caller."""

    msgid: str
    msgstr: str
    previous_msgstr: str = ""
    context: str | None = None
    line_number: int | None = None
    reference: str = ""
    skipped: bool = False
    skip_reason: str | None = None

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "TranslationEntry":
        """
        Build a proposal from decoded JSON.

        Raises:
            ValueError: If msgid or msgstr is missing or not a string
        """
        if not isinstance(data, dict):
            msg = f"Translation entry must be an object, got {type(data).__name__}"
            raise ValueError(msg)  # noqa: TRY004
        for key in ("msgid", "msgstr"):
            if not isinstance(data.get(key), str):
                msg = f"Translation entry field '{key}' must be a string"
                raise ValueError(msg)
        return cls(
            msgid=data["msgid"],
            msgstr=data["msgstr"],
            previous_msgstr=data.get("previous_msgstr") or "",
            context=data.get("context") or None,
            line_number=data.get("line_number"),
            reference=data.get("reference") or "",
            skipped=bool(data.get("skipped", False)),
            skip_reason=data.get("skip_reason"),
        )


@dataclass(frozen=True)
class ValidationOptions:
    """Checks to run over each proposal."""

    strict: bool = True
    check_variables: bool = True
    check_html: bool = True
    check_urls: bool = True
    check_javascript: bool = True
    check_length: bool = False
    length_ratio_bounds: tuple[float, float] = (MIN_LENGTH_RATIO, MAX_LENGTH_RATIO)

    @classmethod
    def from_strict(
        cls, strict: bool, *, check_length: bool = False  # noqa: FBT001
    ) -> "ValidationOptions":
        """Enable or disable the four structural checks together."""
        return cls(
            strict=strict,
            check_variables=strict,
            check_html=strict,
            check_urls=strict,
            check_javascript=strict,
            check_length=check_length,
        )


@dataclass(frozen=True)
class ValidationResult:
    """Outcome of validating one proposal."""

    msgid: str
    msgstr: str
    valid: bool
    issues: tuple[str, ...] = ()
    warnings: tuple[str, ...] = ()


class ValidationSummary(TypedDict):
    total: int
    valid: int
    invalid: int
    has_warnings: int


class ValidationReport(TypedDict):
    validation_results: list[ValidationResult]
    summary: ValidationSummary
    overall_valid: bool


def _missing_and_extra(
    source: Iterable[str], translation: Iterable[str]
) -> tuple[list[str], list[str]]:
    """Return tokens only in source, and tokens only in translation."""
    source = list(source)
    translation = list(translation)
    missing = [token for token in source if token not in translation]
    extra = [token for token in translation if token not in source]
    return missing, extra


def _check_length(
    msgid: str, msgstr: str, bounds: tuple[float, float]
) -> str | None:
    """Return a warning if the length ratio falls outside bounds."""
    if not msgid:
        return None
    ratio = len(msgstr) / len(msgid)
    low, high = bounds
    if ratio < low or ratio > high:
        return f"Translation length significantly different (ratio: {ratio:.2f})"
    return None


def validate_entry(
    translation: TranslationEntry, options: ValidationOptions
) -> tuple[list[str], list[str]]:
    """
    Compare the structural tokens of a proposal against its source.

    Returns:
        (issues, warnings) before any strict-mode folding
    """
    issues: list[str] = []
    warnings: list[str] = []
    msgid = translation.msgid
    msgstr = translation.msgstr

    source_patterns = extract_patterns(msgid)
    translation_patterns = extract_patterns(msgstr)

    if options.check_variables:
        missing, extra = _missing_and_extra(
            source_patterns.placeholders, translation_patterns.placeholders
        )
        if missing:
            issues.append(f"Missing variables: {', '.join(missing)}")
        if extra:
            issues.append(f"Extra variables: {', '.join(extra)}")

    if options.check_html:
        missing, extra = _missing_and_extra(
            source_patterns.tags, translation_patterns.tags
        )
        if missing:
            issues.append(f"Missing HTML tags: {', '.join(missing)}")
        if extra:
            issues.append(f"Extra HTML tags: {', '.join(extra)}")

    # Links and code must be preserved bit for bit
    if options.check_urls:
        missing, extra = _missing_and_extra(
            source_patterns.links, translation_patterns.links
        )
        issues.extend(f"URL changed or missing: {url}" for url in missing)
        issues.extend(f"Unexpected new URL: {url}" for url in extra)

    if options.check_javascript:
        missing, extra = _missing_and_extra(
            source_patterns.code, translation_patterns.code
        )
        issues.extend(f"JavaScript code changed or missing: {code}" for code in missing)
        issues.extend(f"Unexpected new JavaScript code: {code}" for code in extra)

    if options.check_length:
        warning = _check_length(msgid, msgstr, options.length_ratio_bounds)
        if warning:
            warnings.append(warning)

    if not msgstr or not msgstr.strip():
        issues.append("Translation is empty")

    return issues, warnings


def validate_translations(
    translations: Iterable[TranslationEntry],
    options: ValidationOptions | None = None,
) -> ValidationReport:
    """
    Validate proposals and compute an overall verdict.

    Skipped proposals are ignored. In strict mode warnings are folded into
    issues, which makes the entry invalid and empties its warnings. The
    summary counts hard issues before folding, so the overall verdict also
    fails in strict mode when any entry carried a warning.
    """
    if options is None:
        options = ValidationOptions()

    results: list[ValidationResult] = []
    valid_count = 0
    invalid_count = 0
    warnings_count = 0

    for translation in translations:
        if translation.skipped:
            continue

        issues, warnings = validate_entry(translation, options)
        is_valid = not issues
        has_warnings = bool(warnings)

        if is_valid:
            valid_count += 1
        else:
            invalid_count += 1
        if has_warnings:
            warnings_count += 1

        if options.strict and has_warnings:
            issues.extend(warnings)
            warnings = []

        if issues:
            logger.debug(
                "Invalid translation for msgid=%r: %s",
                translation.msgid[:60],
                "; ".join(issues),
            )

        results.append(
            ValidationResult(
                msgid=translation.msgid,
                msgstr=translation.msgstr,
                valid=not issues,
                issues=tuple(issues),
                warnings=tuple(warnings),
            )
        )

    overall_valid = invalid_count == 0 and (not options.strict or warnings_count == 0)
    logger.info(
        "Validated %d translation(s): %d valid, %d invalid, %d with warnings",
        len(results),
        valid_count,
        invalid_count,
        warnings_count,
    )
    return {
        "validation_results": results,
        "summary": {
            "total": len(results),
            "valid": valid_count,
            "invalid": invalid_count,
            "has_warnings": warnings_count,
        },
        "overall_valid": overall_valid,
    }
