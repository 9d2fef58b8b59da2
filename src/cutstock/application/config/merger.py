"""Merging of CLI options into a loaded job configuration.

Precedence is CLI args > job file values > defaults. Only non-None CLI
arguments override job file values.
"""

from typing import Any

from cutstock.application.config.loader import load_config_from_dict
from cutstock.application.config.schema import OptimizationConfiguration


def merge_config_with_cli(
    config: OptimizationConfiguration,
    *,
    sheet_length: int | None = None,
    sheet_width: int | None = None,
    sheet_quantity: int | None = None,
    pieces: list[dict[str, int]] | None = None,
    allow_rotation: bool | None = None,
) -> OptimizationConfiguration:
    """Merge CLI arguments with job file values.

    Pieces given on the command line replace the file's piece list rather
    than extending it.

    Args:
        config: The base configuration
        sheet_length: Override for sheet.length
        sheet_width: Override for sheet.width
        sheet_quantity: Override for sheet.quantity
        pieces: Override for the piece list
        allow_rotation: Override for options.allow_rotation

    Returns:
        A new, re-validated OptimizationConfiguration

    Raises:
        ConfigError: If the merged values fail schema validation.

    Example:
        >>> merged = merge_config_with_cli(config, sheet_quantity=2)
        >>> merged.sheet.quantity
        2
    """
    data: dict[str, Any] = config.model_dump()

    sheet_overrides = {
        "length": sheet_length,
        "width": sheet_width,
        "quantity": sheet_quantity,
    }
    for key, value in sheet_overrides.items():
        if value is not None:
            data["sheet"][key] = value

    if pieces is not None:
        data["pieces"] = pieces
    if allow_rotation is not None:
        data["options"]["allow_rotation"] = allow_rotation

    return load_config_from_dict(data)
