"""Command line interface entry point."""

from __future__ import annotations

import json
import sys

import click

from gltf_view.configuration import (
    DEFAULT_CONFIG_FILENAME,
    ConfigurationError,
    DocumentOptions,
    load_document_options,
    write_placeholder_configuration,
)
from gltf_view.container import GltfFormatError, load_gltf
from gltf_view.entities import ContractViolation, Image, ImageUriSource, ImageViewSource


class CliError(Exception):
    """Custom CLI error."""


@click.group(context_settings={"help_option_names": ["-h", "--help"]})
@click.version_option(package_name="gltf-view")
def cli() -> None:
    """Inspect glTF documents."""


@cli.command(name="generate-config")
@click.option(
    "--output",
    "output_path",
    required=False,
    default=DEFAULT_CONFIG_FILENAME,
    show_default=True,
    type=click.Path(path_type=str),
    help="Path to the YAML configuration template to write",
)
def generate_config(output_path: str) -> None:
    """Generate a YAML configuration with the document options."""
    try:
        resolved_output = write_placeholder_configuration(output_path)
    except (FileExistsError, OSError) as exc:
        raise CliError(str(exc)) from exc
    click.echo(str(resolved_output))


@cli.command(name="images")
@click.argument("document_path", type=click.Path(path_type=str))
@click.option(
    "--config",
    "config_path",
    required=False,
    type=click.Path(path_type=str),
    help="Path to YAML/JSON configuration file with document options",
)
@click.option(
    "--extensions",
    "show_extensions",
    is_flag=True,
    default=False,
    help="Print each image's extensions block as JSON.",
)
def list_images(document_path: str, config_path: str | None, show_extensions: bool) -> None:
    """List the images of a glTF or GLB file and where their data lives."""
    try:
        options = load_document_options(config_path) if config_path else DocumentOptions()
        gltf = load_gltf(document_path, options)
        lines = [_describe_image(image, show_extensions) for image in gltf.document.images()]
    except (ConfigurationError, GltfFormatError, ContractViolation, OSError) as exc:
        raise CliError(str(exc)) from exc
    for line in lines:
        click.echo(line)


def _describe_image(image: Image, show_extensions: bool) -> str:
    fields = [str(image.index()), image.name() or "-"]
    source = image.source()
    if isinstance(source, ImageViewSource):
        fields.append(f"view:{source.view.index()}")
        fields.append(source.mime_type)
    elif isinstance(source, ImageUriSource):
        fields.append(f"uri:{source.uri}")
        fields.append(source.mime_type or "-")
    if show_extensions:
        extensions = image.extensions()
        fields.append("-" if extensions is None else json.dumps(dict(extensions), sort_keys=True))
    return "\t".join(fields)


def main(argv: list[str] | None = None) -> int:
    """CLI entry point for console_scripts wiring."""
    argv = argv if argv is not None else sys.argv[1:]
    try:
        cli.main(args=list(argv), standalone_mode=False)
    except CliError as exc:
        click.echo(str(exc), err=True)
        return 1
    except click.ClickException as exc:
        exc.show()
        return exc.exit_code
    except click.Abort:
        click.echo("Aborted.", err=True)
        return 1
    return 0


if __name__ == "__main__":  # pragma: no cover
    raise SystemExit(main())
