"""Loading glTF and GLB files into documents."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from pathlib import Path

from gltf_view.configuration.document_options import DocumentOptions
from gltf_view.document.document import Document
from gltf_view.entities.buffer import BufferBinSource, View
from gltf_view.entities.entity_handle import ContractViolation
from gltf_view.records.record_parser import RecordParseError

from .glb_container import GltfFormatError, is_glb, parse_glb

_LOGGER = logging.getLogger("gltf_view.container")
_LOGGER.addHandler(logging.NullHandler())


@dataclass(frozen=True)
class Gltf:
    """A document together with the GLB binary chunk, when there is one."""

    document: Document
    blob: memoryview | None = None

    def view_data(self, view: View) -> memoryview | None:
        """Return the bytes of ``view`` when its buffer is the GLB binary chunk.

        Returns ``None`` for views over URI buffers; fetching those is up to
        the caller.
        """
        buffer = view.buffer()
        if not isinstance(buffer.source(), BufferBinSource):
            return None
        if buffer.index() != 0:
            raise ContractViolation(
                f"buffers[{buffer.index()}] has no uri; only buffers[0] may refer to the "
                "GLB binary chunk"
            )
        if self.blob is None:
            raise ContractViolation(
                f"buffers[{buffer.index()}] refers to a GLB binary chunk that is not present"
            )
        start = view.offset()
        end = start + view.length()
        if end > len(self.blob):
            raise ContractViolation(
                f"bufferViews[{view.index()}] range {start}..{end} exceeds the binary chunk "
                f"of {len(self.blob)} bytes"
            )
        return self.blob[start:end]


def load_gltf_bytes(data: bytes, options: DocumentOptions | None = None) -> Gltf:
    """Parse ``.gltf`` JSON text or a ``.glb`` container."""
    try:
        if is_glb(data):
            container = parse_glb(data)
            document = Document.from_json(bytes(container.json_chunk), options)
            _LOGGER.debug(
                "loaded GLB document: %d images, %d buffer views, binary chunk %s",
                len(document.images()),
                len(document.views()),
                "present" if container.bin_chunk is not None else "absent",
            )
            return Gltf(document=document, blob=container.bin_chunk)
        document = Document.from_json(data, options)
    except RecordParseError as exc:
        raise GltfFormatError(str(exc)) from exc
    _LOGGER.debug(
        "loaded glTF JSON document: %d images, %d buffer views",
        len(document.images()),
        len(document.views()),
    )
    return Gltf(document=document)


def load_gltf(path: Path | str, options: DocumentOptions | None = None) -> Gltf:
    """Read and parse a glTF or GLB file."""
    source_path = Path(path)
    if not source_path.exists():
        raise GltfFormatError(f"glTF file not found: {source_path}")
    _LOGGER.debug("reading %s", source_path)
    return load_gltf_bytes(source_path.read_bytes(), options)
