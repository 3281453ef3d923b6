"""Binary glTF (GLB) container parsing."""

from __future__ import annotations

import struct
from dataclasses import dataclass

GLB_MAGIC = b"glTF"
GLB_VERSION = 2
CHUNK_TYPE_JSON = 0x4E4F534A
CHUNK_TYPE_BIN = 0x004E4942

_HEADER = struct.Struct("<4sII")
_CHUNK_HEADER = struct.Struct("<II")


class GltfFormatError(Exception):
    """Raised when input is neither valid glTF JSON nor a valid GLB container."""


@dataclass(frozen=True)
class GlbContainer:
    """JSON and optional BIN chunk of a GLB file, as views over the input bytes."""

    json_chunk: memoryview
    bin_chunk: memoryview | None


def is_glb(data: bytes | memoryview) -> bool:
    return bytes(data[:4]) == GLB_MAGIC


def parse_glb(data: bytes | memoryview) -> GlbContainer:
    """Split a GLB file into its chunks without copying them."""
    view = memoryview(data)
    if len(view) < _HEADER.size:
        raise GltfFormatError("GLB data is shorter than its header.")
    magic, version, total_length = _HEADER.unpack_from(view, 0)
    if magic != GLB_MAGIC:
        raise GltfFormatError("GLB magic mismatch.")
    if version != GLB_VERSION:
        raise GltfFormatError(f"Unsupported GLB version: {version}")
    if total_length > len(view):
        raise GltfFormatError(
            f"GLB header declares {total_length} bytes but only {len(view)} are present."
        )

    chunks: list[tuple[int, memoryview]] = []
    offset = _HEADER.size
    while offset < total_length:
        if offset + _CHUNK_HEADER.size > total_length:
            raise GltfFormatError("Truncated GLB chunk header.")
        chunk_length, chunk_type = _CHUNK_HEADER.unpack_from(view, offset)
        start = offset + _CHUNK_HEADER.size
        end = start + chunk_length
        if end > total_length:
            raise GltfFormatError("GLB chunk extends past the end of the file.")
        chunks.append((chunk_type, view[start:end]))
        offset = end

    if not chunks or chunks[0][0] != CHUNK_TYPE_JSON:
        raise GltfFormatError("The first GLB chunk must be JSON.")
    bin_chunk = None
    if len(chunks) > 1 and chunks[1][0] == CHUNK_TYPE_BIN:
        bin_chunk = chunks[1][1]
    return GlbContainer(json_chunk=chunks[0][1], bin_chunk=bin_chunk)
