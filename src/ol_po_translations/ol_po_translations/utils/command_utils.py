"""
Utility functions for management commands.

This module provides reusable helpers for the PO translation management
commands: configuration lookup, translations file decoding and JSON output.
"""

import dataclasses
import json
import os
from pathlib import Path
from typing import Any

from django.conf import settings
from django.core.management.base import CommandError

from ol_po_translations.constants import DEFAULT_JSON_INDENT
from ol_po_translations.utils.validation import TranslationEntry

_TRUE_VALUES = {"1", "true", "yes", "on"}
_FALSE_VALUES = {"0", "false", "no", "off", ""}

# ============================================================================
# Configuration Helpers
# ============================================================================


def get_config_value(key: str, options: dict, default: Any = None) -> Any:
    """
    Get configuration value from options, settings, or environment.

    An option explicitly passed on the command line (not None) wins, then
    the PO_TRANSLATIONS_<KEY> setting, then the environment variable of the
    same name, then the default.
    """
    if options.get(key) is not None:
        return options[key]
    setting_key = f"PO_TRANSLATIONS_{key.upper().replace('-', '_')}"
    if hasattr(settings, setting_key):
        return getattr(settings, setting_key)
    return os.environ.get(setting_key, default)


def get_bool_config_value(key: str, options: dict, *, default: bool) -> bool:
    """Get a boolean configuration value, accepting env-style strings."""
    value = get_config_value(key, options, default)
    if isinstance(value, bool):
        return value
    normalized = str(value).strip().lower()
    if normalized in _TRUE_VALUES:
        return True
    if normalized in _FALSE_VALUES:
        return False
    msg = f"Invalid boolean value for {key}: {value}"
    raise CommandError(msg)


# ============================================================================
# Input / Output Helpers
# ============================================================================


def load_translations_file(file_path: str) -> list[TranslationEntry]:
    """
    Load proposals from a JSON file holding a list of translation objects.

    Raises:
        CommandError: If the file is unreadable or its content is invalid
    """
    path = Path(file_path)
    try:
        with path.open(encoding="utf-8") as f:
            data = json.load(f)
    except (OSError, json.JSONDecodeError) as e:
        msg = f"Error reading translations file {path}: {e}"
        raise CommandError(msg) from e

    if isinstance(data, dict):
        data = data.get("translations")
    if not isinstance(data, list):
        msg = f"Translations file {path} must contain a list of translations"
        raise CommandError(msg)

    try:
        return [TranslationEntry.from_dict(item) for item in data]
    except ValueError as e:
        msg = f"Invalid translation in {path}: {e}"
        raise CommandError(msg) from e


def _to_jsonable(value: Any) -> Any:
    """Convert dataclasses nested in dicts and lists to plain data."""
    if dataclasses.is_dataclass(value) and not isinstance(value, type):
        return dataclasses.asdict(value)
    if isinstance(value, dict):
        return {key: _to_jsonable(item) for key, item in value.items()}
    if isinstance(value, (list, tuple)):
        return [_to_jsonable(item) for item in value]
    return value


def dump_json(data: Any, indent: int = DEFAULT_JSON_INDENT) -> str:
    """Serialize a command result to JSON."""
    return json.dumps(_to_jsonable(data), ensure_ascii=False, indent=indent)
