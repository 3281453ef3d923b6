"""Entity handle exports."""

from .buffer import Buffer, BufferBinSource, BufferSource, BufferUriSource, View
from .entity_handle import ContractViolation, EntityHandle
from .image import Image, ImageSource, ImageUriSource, ImageViewSource
from .texture import Sampler, Texture

__all__ = [
    "Buffer",
    "BufferBinSource",
    "BufferSource",
    "BufferUriSource",
    "View",
    "ContractViolation",
    "EntityHandle",
    "Image",
    "ImageSource",
    "ImageUriSource",
    "ImageViewSource",
    "Sampler",
    "Texture",
]
