"""Conversion from job configuration models to domain objects."""

from cutstock.application.config.schema import OptimizationConfiguration
from cutstock.domain.value_objects import PieceSpec, SheetSpec
from cutstock.infrastructure.bin_packing import PackingConfig


def config_to_packing_config(config: OptimizationConfiguration) -> PackingConfig:
    """Build the packer configuration from a job configuration.

    An absent sheet quantity stays None, meaning unlimited sheets.
    """
    return PackingConfig(
        sheet=SheetSpec(length=config.sheet.length, width=config.sheet.width),
        sheet_quantity=config.sheet.quantity,
        allow_rotation=config.options.allow_rotation,
    )


def config_to_pieces(config: OptimizationConfiguration) -> list[PieceSpec]:
    """Convert configured pieces to domain piece specifications, in order."""
    return [
        PieceSpec(length=piece.length, width=piece.width, quantity=piece.quantity)
        for piece in config.pieces
    ]
