"""Typer CLI for cut optimization."""

import logging
from pathlib import Path
from typing import Annotated

import typer

from cutstock.application import OptimizeCommand
from cutstock.application.config import (
    ConfigError,
    OptimizationConfiguration,
    load_config,
    load_config_from_dict,
    merge_config_with_cli,
)
from cutstock.cli.commands import validate_command
from cutstock.cli.commands.output_handlers import display_config_error, write_result
from cutstock.domain import InvalidPieceDimensions

OUTPUT_FORMATS = ("summary", "ascii", "json", "svg")

app = typer.Typer(
    name="cutstock",
    help="Place rectangular pieces onto stock sheets with minimal waste.",
)

app.command(name="validate")(validate_command)


@app.callback()
def main(
    verbose: Annotated[
        bool,
        typer.Option("--verbose", "-v", help="Log packing progress to stderr"),
    ] = False,
) -> None:
    """Cut stock optimizer."""
    if verbose:
        logging.basicConfig(
            level=logging.DEBUG,
            format="%(levelname)s %(name)s: %(message)s",
        )


def parse_piece(value: str) -> dict[str, int]:
    """Parse a ``LxW`` or ``LxWxQ`` piece option.

    Raises:
        typer.BadParameter: If the value is not two or three positive integers.
    """
    parts = value.lower().split("x")
    try:
        numbers = [int(part) for part in parts]
    except ValueError:
        raise typer.BadParameter(f"Expected LxW or LxWxQ, got {value!r}")
    if len(numbers) not in (2, 3) or any(n <= 0 for n in numbers):
        raise typer.BadParameter(f"Expected LxW or LxWxQ, got {value!r}")

    length, width = numbers[0], numbers[1]
    quantity = numbers[2] if len(numbers) == 3 else 1
    return {"length": length, "width": width, "quantity": quantity}


@app.command()
def optimize(
    config_file: Annotated[
        Path | None,
        typer.Option("--config", "-c", help="Path to JSON job file"),
    ] = None,
    sheet_length: Annotated[
        int | None,
        typer.Option("--sheet-length", "-l", help="Sheet length", min=1),
    ] = None,
    sheet_width: Annotated[
        int | None,
        typer.Option("--sheet-width", "-w", help="Sheet width", min=1),
    ] = None,
    sheet_quantity: Annotated[
        int | None,
        typer.Option("--sheet-quantity", "-q", help="Maximum number of sheets", min=1),
    ] = None,
    pieces: Annotated[
        list[str] | None,
        typer.Option("--piece", "-p", help="Piece as LxW or LxWxQ (repeatable)"),
    ] = None,
    no_rotation: Annotated[
        bool,
        typer.Option("--no-rotation", help="Never turn pieces 90 degrees"),
    ] = False,
    output_format: Annotated[
        str,
        typer.Option("--format", "-f", help="Output format: summary, ascii, json, svg"),
    ] = "summary",
    output_file: Annotated[
        Path | None,
        typer.Option("--output", "-o", help="Output file (required for svg)"),
    ] = None,
) -> None:
    """Place pieces onto sheets and report the layout and waste.

    Values given on the command line override the job file.

    Example:
        cutstock optimize -l 96 -w 48 -p 24x12x4 -p 30x20 --format ascii
    """
    if output_format not in OUTPUT_FORMATS:
        typer.echo(
            f"Error: Unknown format '{output_format}'. "
            f"Choose from: {', '.join(OUTPUT_FORMATS)}",
            err=True,
        )
        raise typer.Exit(code=1)

    try:
        config = _build_config(
            config_file,
            sheet_length=sheet_length,
            sheet_width=sheet_width,
            sheet_quantity=sheet_quantity,
            pieces=[parse_piece(p) for p in pieces] if pieces else None,
            allow_rotation=False if no_rotation else None,
        )
    except typer.BadParameter as e:
        typer.echo(f"Error: {e}", err=True)
        raise typer.Exit(code=1)
    except ConfigError as e:
        display_config_error(e)
        raise typer.Exit(code=1)

    try:
        output = OptimizeCommand().execute_config(config)
    except InvalidPieceDimensions as e:
        typer.echo(f"Error: {e}", err=True)
        raise typer.Exit(code=1)

    write_result(output.result, output_format, output_file)


def _build_config(
    config_file: Path | None,
    **overrides,
) -> OptimizationConfiguration:
    """Load the job file (if any) and apply command line overrides.

    Raises:
        ConfigError: If the job file is invalid or required values are missing.
    """
    if config_file is not None:
        return merge_config_with_cli(load_config(config_file), **overrides)

    missing = [
        flag
        for flag, key in (("--sheet-length", "sheet_length"), ("--sheet-width", "sheet_width"))
        if overrides.get(key) is None
    ]
    if missing:
        raise ConfigError(
            message=f"Missing required options: {', '.join(missing)} (or use --config)",
            error_type="missing_options",
        )

    data = {
        "schema_version": "1.0",
        "sheet": {
            "length": overrides["sheet_length"],
            "width": overrides["sheet_width"],
            "quantity": overrides.get("sheet_quantity"),
        },
        "pieces": overrides.get("pieces") or [],
    }
    if overrides.get("allow_rotation") is not None:
        data["options"] = {"allow_rotation": overrides["allow_rotation"]}

    return load_config_from_dict(data)


@app.command()
def serve(
    host: Annotated[str, typer.Option("--host", help="Interface to bind")] = "127.0.0.1",
    port: Annotated[int, typer.Option("--port", help="Port to listen on")] = 5000,
    reload: Annotated[bool, typer.Option("--reload", help="Reload on code changes")] = False,
) -> None:
    """Run the REST API with uvicorn."""
    import uvicorn

    typer.echo(f"Server is running on http://{host}:{port}")
    uvicorn.run("cutstock.web:app", host=host, port=port, reload=reload)


if __name__ == "__main__":
    app()
