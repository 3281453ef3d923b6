"""Images and their data sources."""

from __future__ import annotations

from dataclasses import dataclass

from gltf_view.records.record_models import ImageRecord

from .buffer import View
from .entity_handle import ContractViolation, EntityHandle


@dataclass(frozen=True)
class ImageViewSource:
    """Image data is contained in a buffer view."""

    view: View
    mime_type: str


@dataclass(frozen=True)
class ImageUriSource:
    """Image data is contained in an external data source.

    ``mime_type`` may be absent; callers infer it from the URI or the
    response that fetches it.
    """

    uri: str
    mime_type: str | None


ImageSource = ImageViewSource | ImageUriSource


class Image(EntityHandle[ImageRecord]):
    """Image data used to create a texture."""

    __slots__ = ()
    _array_name = "images"

    def source(self) -> ImageSource:
        """Return the image data source.

        Raises:
          ContractViolation: If the referenced buffer view does not exist, a
            buffer view source has a missing or empty MIME type, or neither ``bufferView``
            nor ``uri`` is set.
        """
        record = self._record
        if record.buffer_view is not None:
            view = self._document.views().nth(record.buffer_view)
            if view is None:
                raise ContractViolation(
                    f"images[{self._index}] references missing buffer view {record.buffer_view}"
                )
            if not record.mime_type:
                raise ContractViolation(
                    f"images[{self._index}] stores data in a buffer view without a mimeType"
                )
            return ImageViewSource(view=view, mime_type=record.mime_type)

        if record.uri is None:
            raise ContractViolation(f"images[{self._index}] has neither bufferView nor uri")
        return ImageUriSource(uri=record.uri, mime_type=record.mime_type)
