"""Validate command for checking job files.

Loads a JSON job file, checks it against the schema and verifies that
every piece fits on the configured sheet.
"""

from pathlib import Path
from typing import Annotated

import typer

from cutstock.application.config import (
    ConfigError,
    config_to_packing_config,
    config_to_pieces,
    load_config,
)
from cutstock.cli.commands.output_handlers import display_config_error
from cutstock.domain.exceptions import InvalidPieceDimensions
from cutstock.infrastructure.bin_packing import FirstFitGridPacker


def validate_command(
    config_file: Annotated[
        Path,
        typer.Argument(help="Path to the JSON job file to validate"),
    ],
) -> None:
    """Validate an optimization job file.

    Checks the job file for:
    - JSON syntax errors
    - Schema validation errors (missing fields, non-positive dimensions)
    - Pieces that cannot fit on the sheet in any allowed orientation

    Exit codes:
        0 - Job file is valid
        1 - Job file has errors

    Example:
        cutstock validate job.json
    """
    typer.echo(f"Validating {config_file}...")
    typer.echo()

    try:
        config = load_config(config_file)
    except ConfigError as e:
        display_config_error(e)
        typer.echo()
        typer.echo("Validation failed.", err=True)
        raise typer.Exit(code=1)

    pieces = config_to_pieces(config)
    try:
        FirstFitGridPacker(config_to_packing_config(config)).validate(pieces)
    except InvalidPieceDimensions as e:
        typer.echo("Errors:", err=True)
        typer.echo(f"  pieces: {e}", err=True)
        typer.echo()
        typer.echo("Validation failed.", err=True)
        raise typer.Exit(code=1)

    total = sum(piece.quantity for piece in pieces)
    cap = config.sheet.quantity if config.sheet.quantity is not None else "unlimited"
    typer.echo(
        f"Sheet {config.sheet.length}x{config.sheet.width} (cap: {cap}), "
        f"{len(pieces)} piece types, {total} pieces"
    )
    typer.echo("Validation passed.")
