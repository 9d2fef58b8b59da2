"""Output handling for the cutstock CLI.

Writes packing results in the requested format and reports job file
errors.
"""

from __future__ import annotations

from pathlib import Path

import typer

from cutstock.application.config import ConfigError
from cutstock.infrastructure.bin_packing import PackingResult
from cutstock.infrastructure.cut_diagram_renderer import CutDiagramRenderer
from cutstock.infrastructure.formatters import JsonExporter

__all__ = [
    "display_config_error",
    "write_result",
]


def write_result(
    result: PackingResult,
    output_format: str,
    output_file: Path | None = None,
) -> None:
    """Write a packing result to stdout or a file.

    Args:
        result: The packing result to write.
        output_format: One of summary, ascii, json, svg.
        output_file: Destination file. Required for svg; multiple sheets are
            written as ``<stem>_<n><suffix>``.
    """
    renderer = CutDiagramRenderer()

    if output_format == "svg":
        if output_file is None:
            typer.echo("Error: --output is required for svg format", err=True)
            raise typer.Exit(code=1)
        svgs = renderer.render_all_svg(result)
        for i, svg in enumerate(svgs):
            if len(svgs) == 1:
                svg_path = output_file
            else:
                suffix = output_file.suffix or ".svg"
                svg_path = output_file.parent / f"{output_file.stem}_{i + 1}{suffix}"
            svg_path.write_text(svg)
            typer.echo(f"SVG exported to: {svg_path}")
        typer.echo()
        typer.echo(renderer.render_waste_summary(result))
        return

    if output_format == "json":
        content = JsonExporter().export(result)
    elif output_format == "ascii":
        content = renderer.render_all_ascii(result)
    else:
        content = renderer.render_waste_summary(result)

    if output_file is not None:
        output_file.write_text(content)
        typer.echo(f"Output written to: {output_file}")
    else:
        typer.echo(content)


def display_config_error(error: ConfigError) -> None:
    """Display a job file loading error on stderr."""
    typer.echo("Errors:", err=True)
    if error.error_type == "file_not_found":
        typer.echo(f"  File not found: {error.path}", err=True)
    elif error.error_type == "json_parse":
        typer.echo("  Invalid JSON syntax", err=True)
        for detail in error.details:
            line = detail.get("line", "?")
            column = detail.get("column", "?")
            message = detail.get("message", "Unknown error")
            typer.echo(f"    Line {line}, Column {column}: {message}", err=True)
    elif error.error_type == "validation":
        for detail in error.details:
            path = detail.get("path", "unknown")
            message = detail.get("message", "Unknown error")
            typer.echo(f"  {path}: {message}", err=True)
            value = detail.get("value")
            if value is not None:
                typer.echo(f"    Value: {value!r}", err=True)
    else:
        typer.echo(f"  {error.message}", err=True)
