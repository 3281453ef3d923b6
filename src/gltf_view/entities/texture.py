"""Textures and samplers."""

from __future__ import annotations

from gltf_view.records.record_models import (
    MagFilter,
    MinFilter,
    SamplerRecord,
    TextureRecord,
    WrappingMode,
)

from .entity_handle import ContractViolation, EntityHandle
from .image import Image


class Sampler(EntityHandle[SamplerRecord]):
    """Texture filtering and wrapping settings."""

    __slots__ = ()
    _array_name = "samplers"

    def mag_filter(self) -> MagFilter | None:
        if self._record.mag_filter is None:
            return None
        return self._constant(MagFilter, self._record.mag_filter, "magFilter")

    def min_filter(self) -> MinFilter | None:
        if self._record.min_filter is None:
            return None
        return self._constant(MinFilter, self._record.min_filter, "minFilter")

    def wrap_s(self) -> WrappingMode:
        return self._wrapping(self._record.wrap_s, "wrapS")

    def wrap_t(self) -> WrappingMode:
        return self._wrapping(self._record.wrap_t, "wrapT")

    def _wrapping(self, raw: int | None, field_name: str) -> WrappingMode:
        if raw is None:
            return WrappingMode.REPEAT
        return self._constant(WrappingMode, raw, field_name)


class Texture(EntityHandle[TextureRecord]):
    """An image combined with the sampler used to read it."""

    __slots__ = ()
    _array_name = "textures"

    def source(self) -> Image:
        """Return the image this texture samples."""
        image = self._document.images().nth(self._record.source)
        if image is None:
            raise ContractViolation(
                f"textures[{self._index}] references missing image {self._record.source}"
            )
        return image

    def sampler(self) -> Sampler | None:
        """Return the sampler, or ``None`` when the texture uses default sampling."""
        if self._record.sampler is None:
            return None
        sampler = self._document.samplers().nth(self._record.sampler)
        if sampler is None:
            raise ContractViolation(
                f"textures[{self._index}] references missing sampler {self._record.sampler}"
            )
        return sampler
