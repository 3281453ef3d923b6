"""Configuration scaffold generation helpers."""

from __future__ import annotations

from pathlib import Path

DEFAULT_CONFIG_FILENAME = "gltf-view.yaml"

_CONFIG_SCAFFOLD_TEMPLATE = """# Document options for gltf-view.
# Every option defaults to true; set one to false to drop that data at parse time.

document:
  # Keep human-readable names; name() returns None when disabled.
  preserve_names: true
  # Keep extension blocks; extensions() and extension_value() return None when disabled.
  preserve_extensions: true
  # Keep application-specific extras; extras() returns None when disabled.
  preserve_extras: true
"""


def build_placeholder_configuration() -> str:
    """Build a YAML configuration template with inline guidance."""
    return _CONFIG_SCAFFOLD_TEMPLATE


def write_placeholder_configuration(output_path: Path | str) -> Path:
    """Write the configuration template to the requested output path.

    Args:
      output_path: Destination file path for the scaffold.

    Returns:
      The resolved destination path.

    Raises:
      FileExistsError: If the destination file already exists.
      OSError: If writing the scaffold fails.
    """
    destination = Path(output_path)
    if destination.exists():
        raise FileExistsError(f"Configuration file already exists: {destination.resolve()}")
    destination.write_text(build_placeholder_configuration(), encoding="utf-8")
    return destination.resolve()
