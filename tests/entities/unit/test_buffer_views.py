"""Buffer and buffer view accessor tests."""

from __future__ import annotations

import json

import pytest
from gltf_view.document import Document
from gltf_view.entities import BufferBinSource, BufferUriSource, ContractViolation
from gltf_view.records import Target


def _document() -> Document:
    return Document.from_json(
        json.dumps(
            {
                "buffers": [
                    {"byteLength": 128},
                    {"byteLength": 32, "uri": "geometry.bin", "name": "geometry"},
                ],
                "bufferViews": [
                    {"buffer": 1, "byteLength": 24, "byteStride": 12, "target": 34962},
                    {"buffer": 0, "byteOffset": 64, "byteLength": 64},
                    {"buffer": 5, "byteLength": 1},
                ],
            }
        )
    )


def test_view_resolves_its_buffer() -> None:
    document = _document()
    view = document.views().nth(0)
    assert view is not None

    assert view.buffer() == document.buffers().nth(1)
    assert view.buffer().name() == "geometry"


def test_view_layout_accessors() -> None:
    views = _document().views()
    strided = views.nth(0)
    plain = views.nth(1)
    assert strided is not None
    assert plain is not None

    assert (strided.offset(), strided.length(), strided.stride()) == (0, 24, 12)
    assert strided.target() is Target.ARRAY_BUFFER
    assert (plain.offset(), plain.length(), plain.stride()) == (64, 64, None)
    assert plain.target() is None


def test_buffer_sources() -> None:
    buffers = _document().buffers()
    embedded = buffers.nth(0)
    external = buffers.nth(1)
    assert embedded is not None
    assert external is not None

    assert embedded.source() == BufferBinSource()
    assert external.source() == BufferUriSource(uri="geometry.bin")
    assert external.length() == 32


def test_view_with_missing_buffer_is_a_contract_violation() -> None:
    view = _document().views().nth(2)
    assert view is not None

    with pytest.raises(ContractViolation, match="missing buffer 5"):
        view.buffer()


def test_unknown_target_fails_only_when_read() -> None:
    document = Document.from_json(
        json.dumps(
            {
                "buffers": [{"byteLength": 4}],
                "bufferViews": [{"buffer": 0, "byteLength": 4, "target": 1}],
            }
        )
    )
    view = document.views().nth(0)
    assert view is not None

    assert view.length() == 4
    with pytest.raises(ContractViolation, match=r"bufferViews\[0\].target has unsupported value 1"):
        view.target()
