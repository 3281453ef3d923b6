"""Shared behaviour of borrowed entity handles."""

from __future__ import annotations

from collections.abc import Mapping
from enum import IntEnum
from typing import TYPE_CHECKING, Any, ClassVar, Generic, Protocol, TypeVar

from gltf_view.records.record_models import ExtensionBlock

if TYPE_CHECKING:
    from gltf_view.document.document import Document


class ContractViolation(RuntimeError):
    """Raised when a document breaks an invariant that glTF validation guarantees.

    Never raised for legitimately absent optional data; those accessors
    return ``None`` instead.
    """


class CommonRecord(Protocol):
    @property
    def name(self) -> str | None: ...

    @property
    def extensions(self) -> ExtensionBlock | None: ...

    @property
    def extras(self) -> Any: ...


RecordT = TypeVar("RecordT", bound=CommonRecord)
EnumT = TypeVar("EnumT", bound=IntEnum)


class EntityHandle(Generic[RecordT]):
    """Handle to the record at ``index`` of one of the document's arrays.

    The handle keeps a reference to its document and record and copies
    nothing; every accessor derives its result on each call.
    """

    __slots__ = ("_document", "_index", "_record")

    _array_name: ClassVar[str] = "entities"

    def __init__(self, document: Document, index: int, record: RecordT) -> None:
        self._document = document
        self._index = index
        self._record = record

    def index(self) -> int:
        """Return the position of this entity in its owning array."""
        return self._index

    def name(self) -> str | None:
        """Optional user-defined name; ``None`` when names are not preserved."""
        return self._record.name

    def extensions(self) -> Mapping[str, Any] | None:
        """Return extension data unknown to this library.

        ``None`` means the record has no ``extensions`` object at all, which is
        different from an empty mapping.
        """
        block = self._record.extensions
        if block is None:
            return None
        return block.others

    def extension_value(self, ext_name: str) -> Any | None:
        """Look up one extension by exact name."""
        block = self._record.extensions
        if block is None:
            return None
        return block.others.get(ext_name)

    def extras(self) -> Any:
        """Optional application specific data."""
        return self._record.extras

    def _constant(self, enum_type: type[EnumT], raw: int, field_name: str) -> EnumT:
        try:
            return enum_type(raw)
        except ValueError as exc:
            raise ContractViolation(
                f"{self._array_name}[{self._index}].{field_name} has unsupported value {raw}"
            ) from exc

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, EntityHandle) or type(other) is not type(self):
            return NotImplemented
        return self._document is other._document and self._index == other._index

    def __hash__(self) -> int:
        return hash((type(self).__name__, id(self._document), self._index))

    def __repr__(self) -> str:
        return f"{type(self).__name__}(index={self._index})"
