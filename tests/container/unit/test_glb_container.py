"""GLB container parsing tests."""

from __future__ import annotations

import struct

import pytest
from gltf_view.container import GltfFormatError, is_glb, parse_glb


def _chunk(chunk_type: int, payload: bytes) -> bytes:
    return struct.pack("<II", len(payload), chunk_type) + payload


def _glb(*chunks: bytes, version: int = 2) -> bytes:
    body = b"".join(chunks)
    return struct.pack("<4sII", b"glTF", version, 12 + len(body)) + body


_JSON = 0x4E4F534A
_BIN = 0x004E4942


def test_splits_json_and_bin_chunks() -> None:
    data = _glb(_chunk(_JSON, b'{"images":[]}   '), _chunk(_BIN, b"\x01\x02\x03\x04"))

    container = parse_glb(data)

    assert bytes(container.json_chunk) == b'{"images":[]}   '
    assert container.bin_chunk is not None
    assert bytes(container.bin_chunk) == b"\x01\x02\x03\x04"


def test_bin_chunk_is_optional() -> None:
    container = parse_glb(_glb(_chunk(_JSON, b"{}  ")))

    assert container.bin_chunk is None


def test_detects_glb_magic() -> None:
    assert is_glb(_glb(_chunk(_JSON, b"{}  ")))
    assert not is_glb(b'{"asset": {}}')


@pytest.mark.parametrize(
    ("data", "message"),
    [
        (b"glTF", "shorter than its header"),
        (struct.pack("<4sII", b"GLTF", 2, 12), "magic mismatch"),
        (_glb(_chunk(_JSON, b"{}  "), version=1), "Unsupported GLB version: 1"),
        (struct.pack("<4sII", b"glTF", 2, 400), "declares 400 bytes"),
        (_glb(_chunk(_BIN, b"\x00\x00\x00\x00")), "first GLB chunk must be JSON"),
        (_glb(), "first GLB chunk must be JSON"),
        (_glb(struct.pack("<I", 4)), "Truncated GLB chunk header"),
        (_glb(struct.pack("<II", 32, _JSON) + b"{}  "), "extends past the end"),
    ],
)
def test_malformed_containers_raise_format_error(data: bytes, message: str) -> None:
    with pytest.raises(GltfFormatError, match=message):
        parse_glb(data)
