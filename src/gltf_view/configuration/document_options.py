"""Configuration domain entities."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class DocumentOptions:
    """Capability flags applied once when a document is parsed.

    A disabled flag drops the corresponding data at parse time, so the
    matching accessors return ``None`` for every entity of the document.
    """

    preserve_names: bool = True
    preserve_extensions: bool = True
    preserve_extras: bool = True
