"""Command-line interface for inspecting template digests.

Reads templates from a directory tree (see ``FilesystemTemplateFinder``)::

    template-digestor digest topics/show --root app/views
    template-digestor deps topics/show --format json
    template-digestor tree topics/show
"""

from __future__ import annotations

import json
from pathlib import Path

import click
import structlog

from template_digestor import __version__
from template_digestor.application.digestor import (
    dependencies,
    digest,
    nested_dependencies,
)
from template_digestor.config import get_settings
from template_digestor.domain.entities import DigestOptions
from template_digestor.domain.exceptions import CircularDependencyError
from template_digestor.infrastructure.finders import FilesystemTemplateFinder
from template_digestor.logging_config import configure_logging

_root_option = click.option(
    "--root",
    "root",
    type=click.Path(exists=True, file_okay=False, path_type=Path),
    default=None,
    help="Template root directory (default: TEMPLATE_DIGESTOR_TEMPLATE_ROOT).",
)
_format_option = click.option(
    "--format", "-f", "fmt", default=None, help="Template format, e.g. html."
)


def _finder(root: Path | None) -> FilesystemTemplateFinder:
    return FilesystemTemplateFinder(root or get_settings().template_root)


@click.group()
@click.version_option(__version__, prog_name="template-digestor")
@click.option("--log-level", default=None, help="Log level (default from settings).")
@click.option("--json-logs", is_flag=True, default=False, help="Emit logs as JSON.")
def cli(log_level: str | None, json_logs: bool) -> None:
    """Compute dependency-aware template digests."""
    settings = get_settings()
    configure_logging(log_level or settings.log_level, json=json_logs or settings.log_json)


@cli.command("digest")
@click.argument("name")
@_format_option
@_root_option
@click.option("--partial", is_flag=True, default=False, help="Look the template up as a partial.")
def digest_cmd(name: str, fmt: str | None, root: Path | None, partial: bool) -> None:
    """Print the digest of template NAME."""
    fmt = fmt or get_settings().default_format
    try:
        value = digest(
            name,
            fmt,
            _finder(root),
            DigestOptions(partial=partial),
            logger=structlog.get_logger("template_digestor.digest"),
        )
    except CircularDependencyError as e:
        raise click.ClickException(e.message) from e
    if not value:
        raise click.ClickException(f"Template not found: {name}.{fmt}")
    click.echo(value)


@cli.command("deps")
@click.argument("name")
@_format_option
@_root_option
def deps_cmd(name: str, fmt: str | None, root: Path | None) -> None:
    """Print the direct dependencies of template NAME, one per line."""
    fmt = fmt or get_settings().default_format
    for dependency in dependencies(name, fmt, _finder(root)):
        click.echo(dependency)


@cli.command("tree")
@click.argument("name")
@_format_option
@_root_option
def tree_cmd(name: str, fmt: str | None, root: Path | None) -> None:
    """Print the nested dependency tree of template NAME as JSON."""
    fmt = fmt or get_settings().default_format
    try:
        tree = nested_dependencies(name, fmt, _finder(root))
    except CircularDependencyError as e:
        raise click.ClickException(e.message) from e
    click.echo(json.dumps(tree, indent=2))


def main() -> None:
    cli()


if __name__ == "__main__":
    main()
