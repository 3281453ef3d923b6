"""Conversion of decoded glTF JSON into typed records."""

from __future__ import annotations

from collections.abc import Callable, Mapping, Sequence
from types import MappingProxyType
from typing import Any, TypeVar

from gltf_view.configuration.document_options import DocumentOptions

from .record_models import (
    BufferRecord,
    BufferViewRecord,
    ExtensionBlock,
    ImageRecord,
    RootRecord,
    SamplerRecord,
    TextureRecord,
)

RecordT = TypeVar("RecordT")


class RecordParseError(Exception):
    """Raised when decoded JSON does not have the shape of a glTF record."""


def parse_root(root: Any, options: DocumentOptions) -> RootRecord:
    """Build the typed root record from a decoded JSON object."""
    if not isinstance(root, Mapping):
        raise RecordParseError("glTF root must be an object.")

    common = _CommonFields(options)
    return RootRecord(
        buffers=_parse_array(root, "buffers", lambda item, path: _parse_buffer(item, path, common)),
        buffer_views=_parse_array(
            root, "bufferViews", lambda item, path: _parse_buffer_view(item, path, common)
        ),
        images=_parse_array(root, "images", lambda item, path: _parse_image(item, path, common)),
        samplers=_parse_array(
            root, "samplers", lambda item, path: _parse_sampler(item, path, common)
        ),
        textures=_parse_array(
            root, "textures", lambda item, path: _parse_texture(item, path, common)
        ),
        extensions_used=_string_array(root.get("extensionsUsed"), "extensionsUsed"),
        extensions_required=_string_array(root.get("extensionsRequired"), "extensionsRequired"),
    )


class _CommonFields:
    """Reads the name/extensions/extras triple shared by every record."""

    def __init__(self, options: DocumentOptions) -> None:
        self._options = options

    def name(self, item: Mapping[str, Any], path: str) -> str | None:
        if not self._options.preserve_names:
            return None
        return _optional_str(item.get("name"), f"{path}.name")

    def extensions(self, item: Mapping[str, Any], path: str) -> ExtensionBlock | None:
        if not self._options.preserve_extensions or "extensions" not in item:
            return None
        value = item["extensions"]
        if not isinstance(value, Mapping):
            raise RecordParseError(f"{path}.extensions must be an object.")
        return ExtensionBlock(others=MappingProxyType(dict(value)))

    def extras(self, item: Mapping[str, Any]) -> Any:
        if not self._options.preserve_extras:
            return None
        return item.get("extras")


def _parse_array(
    root: Mapping[str, Any],
    key: str,
    parse_item: Callable[[Mapping[str, Any], str], RecordT],
) -> tuple[RecordT, ...]:
    value = root.get(key)
    if value is None:
        return ()
    if isinstance(value, str | bytes) or not isinstance(value, Sequence):
        raise RecordParseError(f"{key} must be an array.")
    records: list[RecordT] = []
    for position, item in enumerate(value):
        path = f"{key}[{position}]"
        if not isinstance(item, Mapping):
            raise RecordParseError(f"{path} must be an object.")
        records.append(parse_item(item, path))
    return tuple(records)


def _parse_buffer(item: Mapping[str, Any], path: str, common: _CommonFields) -> BufferRecord:
    return BufferRecord(
        byte_length=_required_int(item.get("byteLength"), f"{path}.byteLength"),
        uri=_optional_str(item.get("uri"), f"{path}.uri"),
        name=common.name(item, path),
        extensions=common.extensions(item, path),
        extras=common.extras(item),
    )


def _parse_buffer_view(
    item: Mapping[str, Any], path: str, common: _CommonFields
) -> BufferViewRecord:
    return BufferViewRecord(
        buffer=_required_int(item.get("buffer"), f"{path}.buffer"),
        byte_length=_required_int(item.get("byteLength"), f"{path}.byteLength"),
        byte_offset=_optional_int(item.get("byteOffset"), f"{path}.byteOffset"),
        byte_stride=_optional_int(item.get("byteStride"), f"{path}.byteStride"),
        target=_optional_int(item.get("target"), f"{path}.target"),
        name=common.name(item, path),
        extensions=common.extensions(item, path),
        extras=common.extras(item),
    )


def _parse_image(item: Mapping[str, Any], path: str, common: _CommonFields) -> ImageRecord:
    return ImageRecord(
        buffer_view=_optional_int(item.get("bufferView"), f"{path}.bufferView"),
        uri=_optional_str(item.get("uri"), f"{path}.uri"),
        mime_type=_optional_str(item.get("mimeType"), f"{path}.mimeType"),
        name=common.name(item, path),
        extensions=common.extensions(item, path),
        extras=common.extras(item),
    )


def _parse_sampler(item: Mapping[str, Any], path: str, common: _CommonFields) -> SamplerRecord:
    return SamplerRecord(
        mag_filter=_optional_int(item.get("magFilter"), f"{path}.magFilter"),
        min_filter=_optional_int(item.get("minFilter"), f"{path}.minFilter"),
        wrap_s=_optional_int(item.get("wrapS"), f"{path}.wrapS"),
        wrap_t=_optional_int(item.get("wrapT"), f"{path}.wrapT"),
        name=common.name(item, path),
        extensions=common.extensions(item, path),
        extras=common.extras(item),
    )


def _parse_texture(item: Mapping[str, Any], path: str, common: _CommonFields) -> TextureRecord:
    return TextureRecord(
        source=_required_int(item.get("source"), f"{path}.source"),
        sampler=_optional_int(item.get("sampler"), f"{path}.sampler"),
        name=common.name(item, path),
        extensions=common.extensions(item, path),
        extras=common.extras(item),
    )


def _required_int(value: Any, field_name: str) -> int:
    if value is None:
        raise RecordParseError(f"{field_name} is required.")
    return _checked_int(value, field_name)


def _optional_int(value: Any, field_name: str) -> int | None:
    if value is None:
        return None
    return _checked_int(value, field_name)


def _checked_int(value: Any, field_name: str) -> int:
    if isinstance(value, bool) or not isinstance(value, int):
        raise RecordParseError(f"{field_name} must be an integer.")
    if value < 0:
        raise RecordParseError(f"{field_name} must not be negative.")
    return value


def _optional_str(value: Any, field_name: str) -> str | None:
    if value is None:
        return None
    if not isinstance(value, str):
        raise RecordParseError(f"{field_name} must be a string.")
    return value


def _string_array(value: Any, field_name: str) -> tuple[str, ...]:
    if value is None:
        return ()
    if isinstance(value, str) or not isinstance(value, Sequence):
        raise RecordParseError(f"{field_name} must be an array of strings.")
    for item in value:
        if not isinstance(item, str):
            raise RecordParseError(f"{field_name} entries must be strings.")
    return tuple(value)
