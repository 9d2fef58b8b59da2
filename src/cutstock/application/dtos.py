"""Data transfer objects for the application layer."""

from __future__ import annotations

from dataclasses import dataclass

from cutstock.domain.value_objects import PieceSpec
from cutstock.infrastructure.bin_packing import PackingConfig, PackingResult


@dataclass
class OptimizationOutput:
    """Output DTO for an optimization run.

    Attributes:
        config: Packer configuration the run used.
        pieces: Piece specifications as requested (not expanded).
        result: Packing result.
    """

    config: PackingConfig
    pieces: list[PieceSpec]
    result: PackingResult

    @property
    def requested_count(self) -> int:
        """Number of individual pieces requested."""
        return sum(piece.quantity for piece in self.pieces)

    @property
    def is_complete(self) -> bool:
        """True when every requested piece was placed."""
        return self.result.unplaced_count == 0
