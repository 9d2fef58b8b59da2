"""Value objects for pieces and sheets.

Dimensions are integer grid units. The unit itself (mm, cm, inches) is up
to the caller; the packer only needs pieces and sheets to share one.
"""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class PieceSpec:
    """A rectangular piece to be cut, with a required quantity.

    A spec with ``quantity == 1`` doubles as a single expanded unit.

    Attributes:
        length: Declared length (extends along sheet rows).
        width: Declared width (extends along sheet columns).
        quantity: Number of identical units required.
    """

    length: int
    width: int
    quantity: int = 1

    def __post_init__(self) -> None:
        if self.length <= 0 or self.width <= 0:
            raise ValueError("Piece dimensions must be positive")
        if self.quantity < 1:
            raise ValueError("Quantity must be at least 1")

    @property
    def area(self) -> int:
        """Area of a single unit."""
        return self.length * self.width

    @property
    def total_area(self) -> int:
        """Area of all units of this piece."""
        return self.area * self.quantity

    @property
    def key(self) -> str:
        """Dimension key in declared (unrotated) orientation, e.g. ``"4x2"``."""
        return f"{self.length}x{self.width}"

    def fits_within(self, sheet: SheetSpec, rotated: bool = False) -> bool:
        """Check whether one unit fits inside an empty sheet.

        Args:
            sheet: Sheet to check against.
            rotated: Test the orientation with length and width swapped.
        """
        if rotated:
            return self.width <= sheet.length and self.length <= sheet.width
        return self.length <= sheet.length and self.width <= sheet.width


@dataclass(frozen=True)
class SheetSpec:
    """Dimensions of a stock sheet."""

    length: int
    width: int

    def __post_init__(self) -> None:
        if self.length <= 0:
            raise ValueError("Sheet length must be positive")
        if self.width <= 0:
            raise ValueError("Sheet width must be positive")

    @property
    def area(self) -> int:
        return self.length * self.width

    def __str__(self) -> str:
        return f"{self.length}x{self.width}"
