"""Restartable sequences of entity handles."""

from __future__ import annotations

from collections.abc import Callable, Iterator, Sequence
from typing import TYPE_CHECKING, Generic, TypeVar

if TYPE_CHECKING:
    from .document import Document

EntityT = TypeVar("EntityT")
RecordT = TypeVar("RecordT")


class EntityIter(Generic[EntityT, RecordT]):
    """All entities of one kind, in storage order.

    Handles are created on demand; iterating twice yields equal handles.
    """

    __slots__ = ("_document", "_records", "_factory")

    def __init__(
        self,
        document: Document,
        records: Sequence[RecordT],
        factory: Callable[[Document, int, RecordT], EntityT],
    ) -> None:
        self._document = document
        self._records = records
        self._factory = factory

    def __iter__(self) -> Iterator[EntityT]:
        for index, record in enumerate(self._records):
            yield self._factory(self._document, index, record)

    def __len__(self) -> int:
        return len(self._records)

    def nth(self, index: int) -> EntityT | None:
        """Return the handle at ``index``, or ``None`` when out of range."""
        if 0 <= index < len(self._records):
            return self._factory(self._document, index, self._records[index])
        return None
