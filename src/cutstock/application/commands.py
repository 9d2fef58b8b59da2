"""Application commands (use cases) for cut optimization."""

from __future__ import annotations

import logging
from typing import Callable, Sequence

from cutstock.application.config import (
    OptimizationConfiguration,
    config_to_packing_config,
    config_to_pieces,
)
from cutstock.domain.value_objects import PieceSpec
from cutstock.infrastructure.bin_packing import FirstFitGridPacker, PackingConfig

from .dtos import OptimizationOutput

logger = logging.getLogger(__name__)


class OptimizeCommand:
    """Command to place a set of pieces onto stock sheets.

    A fresh packer is built per call from the given configuration, so one
    command instance can serve concurrent requests.
    """

    def __init__(
        self,
        packer_factory: Callable[[PackingConfig], FirstFitGridPacker] = FirstFitGridPacker,
    ) -> None:
        self.packer_factory = packer_factory

    def execute(
        self,
        pieces: Sequence[PieceSpec],
        config: PackingConfig,
    ) -> OptimizationOutput:
        """Run the packer.

        Args:
            pieces: Pieces to place, with quantities.
            config: Sheet size, optional sheet cap and rotation setting.

        Returns:
            OptimizationOutput with the packing result.

        Raises:
            InvalidPieceDimensions: If a piece cannot fit on any sheet.
        """
        logger.debug(
            "Optimizing %d piece types on %s sheets (cap: %s)",
            len(pieces),
            config.sheet,
            config.sheet_quantity,
        )
        result = self.packer_factory(config).pack(pieces)
        return OptimizationOutput(config=config, pieces=list(pieces), result=result)

    def execute_config(self, config: OptimizationConfiguration) -> OptimizationOutput:
        """Run the packer for a loaded job configuration."""
        return self.execute(config_to_pieces(config), config_to_packing_config(config))
