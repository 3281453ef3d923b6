"""Read-only, lazily-resolved accessors over parsed glTF documents."""

from .configuration import ConfigurationError, DocumentOptions, load_document_options
from .container import Gltf, GltfFormatError, load_gltf, load_gltf_bytes
from .document import Document, EntityIter
from .entities import (
    Buffer,
    BufferBinSource,
    BufferSource,
    BufferUriSource,
    ContractViolation,
    Image,
    ImageSource,
    ImageUriSource,
    ImageViewSource,
    Sampler,
    Texture,
    View,
)
from .records import MagFilter, MinFilter, RecordParseError, Target, WrappingMode

__all__ = [
    "ConfigurationError",
    "DocumentOptions",
    "load_document_options",
    "Gltf",
    "GltfFormatError",
    "load_gltf",
    "load_gltf_bytes",
    "Document",
    "EntityIter",
    "Buffer",
    "BufferBinSource",
    "BufferSource",
    "BufferUriSource",
    "ContractViolation",
    "Image",
    "ImageSource",
    "ImageUriSource",
    "ImageViewSource",
    "Sampler",
    "Texture",
    "View",
    "MagFilter",
    "MinFilter",
    "RecordParseError",
    "Target",
    "WrappingMode",
]
