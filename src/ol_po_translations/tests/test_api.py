"""
Tests for the analyze and validate-and-update operations
"""

import pytest
from ol_po_translations.api import (
    analyze_po_file,
    resolve_po_file_path,
    validate_and_update_po_file,
)
from ol_po_translations.exceptions import PoFileNotFoundError, PoParseError
from ol_po_translations.utils.po_parser import load_po_file
from ol_po_translations.utils.validation import TranslationEntry

LONG_TRANSLATION = "Merhaba Dünya, bugün nasılsın, her şey yolunda mı?"


def test_analyze_po_file(po_file):
    """Analyze reports statistics plus untranslated and fuzzy entries"""
    result = analyze_po_file(str(po_file), locale="tr")

    assert result["file_path"] == str(po_file.resolve())
    assert result["locale"] == "tr"
    assert result["statistics"].total == 5
    assert [entry["msgid"] for entry in result["untranslated_entries"]] == [
        "Hello",
        "Hello World",
    ]
    assert [entry["msgid"] for entry in result["fuzzy_entries"]] == [
        "You have %(count)s items"
    ]


def test_analyze_po_file_not_found(tmp_path):
    """A missing path is a NotFound error"""
    with pytest.raises(PoFileNotFoundError, match="PO file not found"):
        analyze_po_file(tmp_path / "missing.po")


def test_analyze_po_file_directory(tmp_path):
    """A directory is not a PO file"""
    with pytest.raises(PoFileNotFoundError, match="Path is not a file"):
        resolve_po_file_path(tmp_path)


def test_analyze_po_file_parse_error(write_po):
    """Invalid syntax surfaces as a ParseError"""
    with pytest.raises(PoParseError):
        analyze_po_file(write_po("garbage\n"))


def test_validate_and_update_valid(po_file):
    """Valid translations are merged and reported"""
    result = validate_and_update_po_file(
        po_file,
        [
            TranslationEntry("Hello", "Merhaba"),
            TranslationEntry("You have %(count)s items", "%(count)s öğeniz var"),
        ],
    )

    assert result["validation"]["overall_valid"] is True
    assert result["update"]["updated_entries"] == 2
    assert result["message"] == "Successfully validated and updated 2 translations."
    assert load_po_file(po_file)["statistics"].translated == 4


def test_validate_and_update_valid_dry_run(po_file):
    """A dry run validates and counts without writing"""
    original = po_file.read_bytes()

    result = validate_and_update_po_file(
        po_file, [TranslationEntry("Hello", "Merhaba")], dry_run=True
    )

    assert po_file.read_bytes() == original
    assert result["message"] == "All 1 translations valid. Would update 1 entries."


def test_validate_and_update_invalid_without_force(po_file):
    """An invalid batch is not merged unless forced"""
    original = po_file.read_bytes()

    result = validate_and_update_po_file(
        po_file,
        [
            TranslationEntry("Hello", "Merhaba"),
            TranslationEntry("Welcome {name}", "Hoş geldin"),
        ],
    )

    assert result["update"] is None
    assert result["message"] == (
        "Validation failed: 1 invalid translations found. "
        "Use force=true to update anyway."
    )
    assert po_file.read_bytes() == original


@pytest.mark.parametrize(
    ("dry_run", "expected_message"),
    [
        (False, "Force updated 2 translations (1 were invalid)."),
        (True, "1 invalid translations found. Would force update 2 entries."),
    ],
)
def test_validate_and_update_force(po_file, dry_run, expected_message):
    """Forcing merges every non-skipped proposal"""
    result = validate_and_update_po_file(
        po_file,
        [
            TranslationEntry("Hello", "Merhaba"),
            TranslationEntry("Welcome {name}", "Hoş geldin"),
            TranslationEntry("Hello World", "", skipped=True),
        ],
        force=True,
        dry_run=dry_run,
    )

    assert result["update"]["updated_entries"] == 2
    assert result["update"]["skipped_entries"] == 1
    assert result["skipped"] == 1
    assert result["message"] == expected_message


def test_validate_and_update_non_strict_filters_warnings(po_file):
    """Non-strict runs merge entries whose only problems are warnings"""
    result = validate_and_update_po_file(
        po_file,
        [TranslationEntry("Hello World", LONG_TRANSLATION)],
        strict=False,
        check_length=True,
    )

    assert result["validation"]["validation_results"][0].warnings
    assert result["update"]["updated_entries"] == 1


def test_validate_and_update_strict_length_warning_blocks(po_file):
    """In strict mode a length warning blocks the update"""
    result = validate_and_update_po_file(
        po_file,
        [TranslationEntry("Hello World", LONG_TRANSLATION)],
        check_length=True,
    )

    assert result["validation"]["summary"]["invalid"] == 0
    assert result["validation"]["overall_valid"] is False
    assert result["update"] is None


def test_validate_and_update_missing_file(tmp_path):
    """A missing file fails softly in the update report"""
    path = tmp_path / "missing.po"

    result = validate_and_update_po_file(path, [TranslationEntry("Hello", "Merhaba")])

    assert result["update"]["success"] is False
    assert result["message"] == f"Update failed: PO file not found: {path}"
