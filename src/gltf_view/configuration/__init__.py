"""Configuration domain exports."""

from .config_scaffold_builder import (
    DEFAULT_CONFIG_FILENAME,
    build_placeholder_configuration,
    write_placeholder_configuration,
)
from .document_options import DocumentOptions
from .loader import ConfigurationError, load_document_options, parse_document_options

__all__ = [
    "DocumentOptions",
    "ConfigurationError",
    "load_document_options",
    "parse_document_options",
    "DEFAULT_CONFIG_FILENAME",
    "build_placeholder_configuration",
    "write_placeholder_configuration",
]
