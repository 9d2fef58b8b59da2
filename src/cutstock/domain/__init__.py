"""Domain layer - pieces, sheets and their errors."""

from .exceptions import InvalidPieceDimensions
from .value_objects import PieceSpec, SheetSpec

__all__ = [
    "InvalidPieceDimensions",
    "PieceSpec",
    "SheetSpec",
]
