"""Texture and sampler accessor tests."""

from __future__ import annotations

import json

import pytest
from gltf_view.document import Document
from gltf_view.entities import ContractViolation, ImageUriSource
from gltf_view.records import MagFilter, MinFilter, WrappingMode


def _document() -> Document:
    return Document.from_json(
        json.dumps(
            {
                "images": [{"uri": "albedo.png"}, {"uri": "normal.png"}],
                "samplers": [
                    {"magFilter": 9729, "minFilter": 9987, "wrapS": 33071},
                    {},
                ],
                "textures": [
                    {"source": 1, "sampler": 0},
                    {"source": 0},
                    {"source": 4},
                    {"source": 0, "sampler": 9},
                ],
            }
        )
    )


def test_texture_resolves_image_and_sampler() -> None:
    document = _document()
    texture = document.textures().nth(0)
    assert texture is not None

    assert texture.source() == document.images().nth(1)
    assert texture.sampler() == document.samplers().nth(0)


def test_texture_without_sampler_returns_none() -> None:
    texture = _document().textures().nth(1)
    assert texture is not None

    assert texture.sampler() is None


def test_sampler_filters_and_default_wrapping() -> None:
    samplers = _document().samplers()
    configured = samplers.nth(0)
    defaults = samplers.nth(1)
    assert configured is not None
    assert defaults is not None

    assert configured.mag_filter() is MagFilter.LINEAR
    assert configured.min_filter() is MinFilter.LINEAR_MIPMAP_LINEAR
    assert configured.wrap_s() is WrappingMode.CLAMP_TO_EDGE
    assert configured.wrap_t() is WrappingMode.REPEAT
    assert defaults.mag_filter() is None
    assert defaults.min_filter() is None
    assert defaults.wrap_s() is WrappingMode.REPEAT


def test_texture_with_missing_image_is_a_contract_violation() -> None:
    texture = _document().textures().nth(2)
    assert texture is not None

    with pytest.raises(ContractViolation, match="missing image 4"):
        texture.source()


def test_texture_with_missing_sampler_is_a_contract_violation() -> None:
    texture = _document().textures().nth(3)
    assert texture is not None

    with pytest.raises(ContractViolation, match="missing sampler 9"):
        texture.sampler()


def test_unknown_sampler_constants_do_not_block_images() -> None:
    document = Document.from_json(
        json.dumps(
            {
                "images": [{"uri": "a.png"}],
                "samplers": [{"magFilter": 1, "wrapT": 7}],
            }
        )
    )
    image = document.images().nth(0)
    sampler = document.samplers().nth(0)
    assert image is not None
    assert sampler is not None

    assert image.source() == ImageUriSource(uri="a.png", mime_type=None)
    assert sampler.min_filter() is None
    assert sampler.wrap_s() is WrappingMode.REPEAT
    with pytest.raises(ContractViolation, match=r"samplers\[0\].magFilter has unsupported value 1"):
        sampler.mag_filter()
    with pytest.raises(ContractViolation, match=r"samplers\[0\].wrapT has unsupported value 7"):
        sampler.wrap_t()
