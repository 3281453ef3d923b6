"""Typed glTF JSON records."""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass
from enum import IntEnum
from typing import Any


class Target(IntEnum):
    """GPU buffer binding hint of a buffer view."""

    ARRAY_BUFFER = 34962
    ELEMENT_ARRAY_BUFFER = 34963


class MagFilter(IntEnum):
    """Magnification filter of a sampler."""

    NEAREST = 9728
    LINEAR = 9729


class MinFilter(IntEnum):
    """Minification filter of a sampler."""

    NEAREST = 9728
    LINEAR = 9729
    NEAREST_MIPMAP_NEAREST = 9984
    LINEAR_MIPMAP_NEAREST = 9985
    NEAREST_MIPMAP_LINEAR = 9986
    LINEAR_MIPMAP_LINEAR = 9987


class WrappingMode(IntEnum):
    """Texture coordinate wrapping mode of a sampler."""

    CLAMP_TO_EDGE = 33071
    MIRRORED_REPEAT = 33648
    REPEAT = 10497


@dataclass(frozen=True)
class ExtensionBlock:
    """Contents of an ``extensions`` object, carried verbatim."""

    others: Mapping[str, Any]


@dataclass(frozen=True)
class BufferRecord:
    byte_length: int
    uri: str | None
    name: str | None
    extensions: ExtensionBlock | None
    extras: Any


@dataclass(frozen=True)
class BufferViewRecord:  # pylint: disable=too-many-instance-attributes
    buffer: int
    byte_length: int
    byte_offset: int | None
    byte_stride: int | None
    target: int | None
    name: str | None
    extensions: ExtensionBlock | None
    extras: Any


@dataclass(frozen=True)
class ImageRecord:
    """Image record; exactly one of ``buffer_view`` and ``uri`` is set in valid data."""

    buffer_view: int | None
    uri: str | None
    mime_type: str | None
    name: str | None
    extensions: ExtensionBlock | None
    extras: Any


@dataclass(frozen=True)
class SamplerRecord:
    """Sampler record; filter and wrapping constants are kept as stored."""

    mag_filter: int | None
    min_filter: int | None
    wrap_s: int | None
    wrap_t: int | None
    name: str | None
    extensions: ExtensionBlock | None
    extras: Any


@dataclass(frozen=True)
class TextureRecord:
    source: int
    sampler: int | None
    name: str | None
    extensions: ExtensionBlock | None
    extras: Any


@dataclass(frozen=True)
class RootRecord:
    """Top-level entity arrays of one glTF document."""

    buffers: tuple[BufferRecord, ...] = ()
    buffer_views: tuple[BufferViewRecord, ...] = ()
    images: tuple[ImageRecord, ...] = ()
    samplers: tuple[SamplerRecord, ...] = ()
    textures: tuple[TextureRecord, ...] = ()
    extensions_used: tuple[str, ...] = ()
    extensions_required: tuple[str, ...] = ()
