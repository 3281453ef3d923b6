"""Container loading exports."""

from .asset_loader import Gltf, load_gltf, load_gltf_bytes
from .glb_container import GlbContainer, GltfFormatError, is_glb, parse_glb

__all__ = [
    "Gltf",
    "GlbContainer",
    "GltfFormatError",
    "is_glb",
    "load_gltf",
    "load_gltf_bytes",
    "parse_glb",
]
