"""Configuration loader service."""

from __future__ import annotations

from collections.abc import Mapping
from pathlib import Path
from typing import Any

import yaml

from .document_options import DocumentOptions

_OPTION_KEYS = ("preserve_names", "preserve_extensions", "preserve_extras")


class ConfigurationError(Exception):
    """Raised when the configuration file is invalid."""


def load_document_options(config_path: Path | str) -> DocumentOptions:
    """Load and validate document options from a YAML or JSON file."""
    path = Path(config_path)
    if not path.exists():
        raise ConfigurationError(f"Configuration file not found: {path}")

    text = path.read_text(encoding="utf-8")
    try:
        parsed = yaml.safe_load(text)
    except yaml.YAMLError as exc:
        raise ConfigurationError(f"Failed to parse configuration file: {exc}") from exc

    if parsed is None:
        parsed = {}

    if not isinstance(parsed, Mapping):
        raise ConfigurationError("Configuration root must be a mapping.")

    return parse_document_options(parsed.get("document"))


def parse_document_options(value: Any) -> DocumentOptions:
    """Validate the ``document`` section; a missing section yields the defaults."""
    if value is None:
        return DocumentOptions()
    if not isinstance(value, Mapping):
        raise ConfigurationError("Configuration section 'document' must be a mapping.")

    unknown = sorted(str(key) for key in value if key not in _OPTION_KEYS)
    if unknown:
        raise ConfigurationError(f"Unknown document options: {', '.join(unknown)}")

    return DocumentOptions(
        preserve_names=_optional_bool(value.get("preserve_names"), "document.preserve_names"),
        preserve_extensions=_optional_bool(
            value.get("preserve_extensions"), "document.preserve_extensions"
        ),
        preserve_extras=_optional_bool(value.get("preserve_extras"), "document.preserve_extras"),
    )


def _optional_bool(value: Any, field_name: str, default: bool = True) -> bool:
    if value is None:
        return default
    if not isinstance(value, bool):
        raise ConfigurationError(f"{field_name} must be a boolean.")
    return value
