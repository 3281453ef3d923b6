"""Parsed glTF document and its index space."""

from __future__ import annotations

import json

from gltf_view.configuration.document_options import DocumentOptions
from gltf_view.entities.buffer import Buffer, View
from gltf_view.entities.image import Image
from gltf_view.entities.texture import Sampler, Texture
from gltf_view.records.record_models import (
    BufferRecord,
    BufferViewRecord,
    ImageRecord,
    RootRecord,
    SamplerRecord,
    TextureRecord,
)
from gltf_view.records.record_parser import RecordParseError, parse_root

from .entity_iteration import EntityIter


class Document:
    """Immutable glTF JSON content.

    Entity handles borrow the document; none of them copies record data.
    """

    def __init__(self, root: RootRecord, options: DocumentOptions | None = None) -> None:
        self._root = root
        self._options = options or DocumentOptions()

    @classmethod
    def from_json(cls, text: str | bytes, options: DocumentOptions | None = None) -> Document:
        """Parse glTF JSON text into a document."""
        options = options or DocumentOptions()
        try:
            decoded = json.loads(text)
        except (json.JSONDecodeError, UnicodeDecodeError) as exc:
            raise RecordParseError(f"Invalid glTF JSON: {exc}") from exc
        return cls(parse_root(decoded, options), options)

    @property
    def options(self) -> DocumentOptions:
        return self._options

    def buffers(self) -> EntityIter[Buffer, BufferRecord]:
        return EntityIter(self, self._root.buffers, Buffer)

    def views(self) -> EntityIter[View, BufferViewRecord]:
        return EntityIter(self, self._root.buffer_views, View)

    def images(self) -> EntityIter[Image, ImageRecord]:
        return EntityIter(self, self._root.images, Image)

    def samplers(self) -> EntityIter[Sampler, SamplerRecord]:
        return EntityIter(self, self._root.samplers, Sampler)

    def textures(self) -> EntityIter[Texture, TextureRecord]:
        return EntityIter(self, self._root.textures, Texture)

    def extensions_used(self) -> tuple[str, ...]:
        """Names of extensions used somewhere in the document."""
        return self._root.extensions_used

    def extensions_required(self) -> tuple[str, ...]:
        """Names of extensions a loader must support to read the document."""
        return self._root.extensions_required
