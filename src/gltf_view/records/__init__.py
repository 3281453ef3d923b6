"""Typed record exports."""

from .record_models import (
    BufferRecord,
    BufferViewRecord,
    ExtensionBlock,
    ImageRecord,
    MagFilter,
    MinFilter,
    RootRecord,
    SamplerRecord,
    Target,
    TextureRecord,
    WrappingMode,
)
from .record_parser import RecordParseError, parse_root

__all__ = [
    "BufferRecord",
    "BufferViewRecord",
    "ExtensionBlock",
    "ImageRecord",
    "MagFilter",
    "MinFilter",
    "RootRecord",
    "SamplerRecord",
    "Target",
    "TextureRecord",
    "WrappingMode",
    "RecordParseError",
    "parse_root",
]
