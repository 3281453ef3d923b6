"""Buffers and buffer views."""

from __future__ import annotations

from dataclasses import dataclass

from gltf_view.records.record_models import BufferRecord, BufferViewRecord, Target

from .entity_handle import ContractViolation, EntityHandle


@dataclass(frozen=True)
class BufferBinSource:
    """Buffer data is the BIN chunk of the enclosing GLB container."""


@dataclass(frozen=True)
class BufferUriSource:
    """Buffer data lives at an external or data URI."""

    uri: str


BufferSource = BufferBinSource | BufferUriSource


class Buffer(EntityHandle[BufferRecord]):
    """A block of binary data referenced by buffer views."""

    __slots__ = ()
    _array_name = "buffers"

    def length(self) -> int:
        """Length of the buffer in bytes."""
        return self._record.byte_length

    def source(self) -> BufferSource:
        """Return where the buffer data lives."""
        if self._record.uri is None:
            return BufferBinSource()
        return BufferUriSource(uri=self._record.uri)


class View(EntityHandle[BufferViewRecord]):
    """A contiguous byte range of a buffer."""

    __slots__ = ()
    _array_name = "bufferViews"

    def buffer(self) -> Buffer:
        """Return the buffer this view slices."""
        buffer = self._document.buffers().nth(self._record.buffer)
        if buffer is None:
            raise ContractViolation(
                f"bufferViews[{self._index}] references missing buffer {self._record.buffer}"
            )
        return buffer

    def length(self) -> int:
        return self._record.byte_length

    def offset(self) -> int:
        return self._record.byte_offset or 0

    def stride(self) -> int | None:
        """Byte distance between vertex attributes, if the view is strided."""
        return self._record.byte_stride

    def target(self) -> Target | None:
        """GPU binding hint; an unknown constant is a contract violation."""
        if self._record.target is None:
            return None
        return self._constant(Target, self._record.target, "target")
