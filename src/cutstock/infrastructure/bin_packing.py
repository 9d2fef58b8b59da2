"""Grid-based bin packing for rectangular sheet material.

This module holds the placement algorithm and the data structures that
describe its results. Pieces are validated against the sheet, expanded
into single units, sorted largest-area-first and then placed first-fit on
per-sheet occupancy grids, trying the declared orientation before the
rotated one at every anchor cell.

Result dataclasses are frozen. The occupancy grid and sheet pool are
mutable and only live for the duration of a single ``pack()`` call.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Iterator, Sequence

from cutstock.domain.exceptions import InvalidPieceDimensions
from cutstock.domain.value_objects import PieceSpec, SheetSpec
from cutstock.infrastructure.colors import ColorMap

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class PackingConfig:
    """Configuration for a packing run.

    Attributes:
        sheet: Dimensions of every sheet in the pool.
        sheet_quantity: Hard cap on the number of sheets, or None for
            unlimited growth. Zero is not a valid cap.
        allow_rotation: Whether pieces may be turned 90 degrees, both when
            validating and when placing.
    """

    sheet: SheetSpec
    sheet_quantity: int | None = None
    allow_rotation: bool = True

    def __post_init__(self) -> None:
        if self.sheet_quantity is not None and self.sheet_quantity < 1:
            raise ValueError("Sheet quantity must be positive when set")


@dataclass(frozen=True)
class PlacedPiece:
    """A single piece unit placed at an anchor cell of a sheet.

    Attributes:
        piece: The unit being placed (declared orientation).
        x: Row of the top-left anchor cell.
        y: Column of the top-left anchor cell.
        rotated: True if length and width are swapped on the sheet.
    """

    piece: PieceSpec
    x: int
    y: int
    rotated: bool = False

    def __post_init__(self) -> None:
        if self.x < 0 or self.y < 0:
            raise ValueError("Position coordinates must be non-negative")

    @property
    def placed_length(self) -> int:
        """Rows covered on the sheet (accounts for rotation)."""
        return self.piece.width if self.rotated else self.piece.length

    @property
    def placed_width(self) -> int:
        """Columns covered on the sheet (accounts for rotation)."""
        return self.piece.length if self.rotated else self.piece.width

    @property
    def bottom_edge(self) -> int:
        """First row past the piece."""
        return self.x + self.placed_length

    @property
    def right_edge(self) -> int:
        """First column past the piece."""
        return self.y + self.placed_width


@dataclass(frozen=True)
class SheetLayout:
    """Final occupancy of a single sheet.

    Attributes:
        sheet_index: Zero-based index of the sheet in pool order.
        sheet: Sheet dimensions.
        cells: Row-major grid; each cell is None or the dimension key of
            the piece occupying it.
        placements: Pieces placed on this sheet, in placement order.
    """

    sheet_index: int
    sheet: SheetSpec
    cells: tuple[tuple[str | None, ...], ...]
    placements: tuple[PlacedPiece, ...] = ()

    def __post_init__(self) -> None:
        if self.sheet_index < 0:
            raise ValueError("Sheet index must be non-negative")

    @property
    def used_area(self) -> int:
        """Number of occupied cells."""
        return sum(1 for row in self.cells for cell in row if cell is not None)

    @property
    def waste_area(self) -> int:
        """Number of unoccupied cells."""
        return self.sheet.area - self.used_area

    @property
    def waste_percentage(self) -> float:
        """Percentage of the sheet left unoccupied."""
        return self.waste_area / self.sheet.area * 100

    @property
    def piece_count(self) -> int:
        return len(self.placements)

    def to_grid(self, colors: dict[str, str]) -> list[list[str | bool]]:
        """Serialize cells as ``False`` or the occupying piece's colour."""
        return [
            [colors.get(cell, cell) if cell is not None else False for cell in row]
            for row in self.cells
        ]


@dataclass(frozen=True)
class PackingResult:
    """Complete result of a packing run.

    ``placed_area + unplaced_area`` always equals the area of every
    expanded piece: each unit is either placed or, when a capped pool is
    full, counted as unplaced.

    Attributes:
        layouts: Sheet layouts in pool order.
        placed_area: Area of all placed units.
        unplaced_area: Area of units rejected because the pool was full.
        unplaced_count: Number of units rejected because the pool was full.
        colors: Colour assigned to each dimension key that was placed.
    """

    layouts: tuple[SheetLayout, ...]
    placed_area: int = 0
    unplaced_area: int = 0
    unplaced_count: int = 0
    colors: dict[str, str] = field(default_factory=dict)

    def __post_init__(self) -> None:
        if self.placed_area < 0 or self.unplaced_area < 0:
            raise ValueError("Accounted areas must be non-negative")
        if self.placed_area > self.total_sheet_area:
            raise ValueError("Placed area cannot exceed total sheet area")

    @property
    def total_sheet_area(self) -> int:
        return sum(layout.sheet.area for layout in self.layouts)

    @property
    def total_piece_area(self) -> int:
        """Area of every expanded piece, placed or not."""
        return self.placed_area + self.unplaced_area

    @property
    def unused_area(self) -> int:
        """Sheet area left unoccupied."""
        return self.total_sheet_area - self.placed_area

    @property
    def waste(self) -> int:
        """Unused sheet area plus the area of pieces that did not fit.

        Unplaced area is added rather than subtracted, so over-demand on a
        capped pool can report more waste than the pool's total area.
        """
        return self.unused_area + self.unplaced_area

    @property
    def waste_percentage(self) -> float:
        """Unused sheet area as a percentage of total sheet area."""
        if self.total_sheet_area == 0:
            return 0.0
        return self.unused_area / self.total_sheet_area * 100

    @property
    def total_sheets(self) -> int:
        return len(self.layouts)

    @property
    def total_pieces_placed(self) -> int:
        return sum(layout.piece_count for layout in self.layouts)

    def placement_grids(self) -> list[list[list[str | bool]]]:
        """Occupancy grids of every sheet, cells tagged with colours."""
        return [layout.to_grid(self.colors) for layout in self.layouts]


class OccupancyGrid:
    """Mutable occupancy grid for one sheet during packing.

    ``cells[x][y]`` is None when free, otherwise the dimension key of the
    piece covering it. Rows run along the sheet length and columns along
    its width.
    """

    def __init__(self, index: int, sheet: SheetSpec) -> None:
        self.index = index
        self.sheet = sheet
        self.cells: list[list[str | None]] = [
            [None] * sheet.width for _ in range(sheet.length)
        ]
        self.placements: list[PlacedPiece] = []

    def can_place(
        self, piece: PieceSpec, x: int, y: int, rotated: bool = False
    ) -> bool:
        """Check that the footprint at (x, y) is in bounds and unoccupied."""
        length = piece.width if rotated else piece.length
        width = piece.length if rotated else piece.width

        if x < 0 or y < 0:
            return False
        if x + length > self.sheet.length or y + width > self.sheet.width:
            return False

        return not any(
            any(self.cells[row][y : y + width]) for row in range(x, x + length)
        )

    def place(
        self, piece: PieceSpec, x: int, y: int, rotated: bool = False
    ) -> PlacedPiece:
        """Mark the footprint at (x, y) as occupied by ``piece``.

        Raises:
            ValueError: If the footprint is out of bounds or overlaps.
        """
        if not self.can_place(piece, x, y, rotated):
            raise ValueError(
                f"Piece {piece.key} does not fit at ({x}, {y}) on sheet {self.index}"
            )

        placement = PlacedPiece(piece=piece, x=x, y=y, rotated=rotated)
        for row in range(x, placement.bottom_edge):
            self.cells[row][y : placement.right_edge] = [piece.key] * placement.placed_width
        self.placements.append(placement)
        return placement

    def find_position(
        self, piece: PieceSpec, allow_rotation: bool = True
    ) -> tuple[int, int, bool] | None:
        """Find the first admissible anchor in row-major order.

        At each anchor the declared orientation is tried before the
        rotated one.

        Returns:
            ``(x, y, rotated)`` of the first fit, or None.
        """
        orientations = [False]
        if allow_rotation and piece.length != piece.width:
            orientations.append(True)

        reach = min(piece.length, piece.width) if len(orientations) > 1 else None
        max_x = self.sheet.length - (reach or piece.length)
        max_y = self.sheet.width - (reach or piece.width)

        for x in range(max_x + 1):
            for y in range(max_y + 1):
                for rotated in orientations:
                    if self.can_place(piece, x, y, rotated):
                        return (x, y, rotated)
        return None

    @property
    def occupied_area(self) -> int:
        return sum(1 for row in self.cells for cell in row if cell is not None)

    def to_layout(self) -> SheetLayout:
        """Freeze the current state into a SheetLayout."""
        return SheetLayout(
            sheet_index=self.index,
            sheet=self.sheet,
            cells=tuple(tuple(row) for row in self.cells),
            placements=tuple(self.placements),
        )


class SheetPool:
    """Ordered, optionally capped, sequence of sheets.

    With a cap the pool is filled with exactly ``cap`` empty sheets up
    front and never grows. Without one it starts with a single empty
    sheet and grows on demand.
    """

    def __init__(self, sheet: SheetSpec, cap: int | None = None) -> None:
        if cap is not None and cap < 1:
            raise ValueError("Sheet quantity must be positive when set")
        self.sheet = sheet
        self.cap = cap
        self._sheets: list[OccupancyGrid] = []
        for _ in range(cap if cap is not None else 1):
            self._append()

    def _append(self) -> OccupancyGrid:
        grid = OccupancyGrid(len(self._sheets), self.sheet)
        self._sheets.append(grid)
        return grid

    @property
    def at_capacity(self) -> bool:
        """True when a cap is set and every allowed sheet exists."""
        return self.cap is not None and len(self._sheets) >= self.cap

    def create_sheet(self) -> OccupancyGrid:
        """Append and return a new empty sheet.

        Raises:
            RuntimeError: If the pool is already at its cap.
        """
        if self.at_capacity:
            raise RuntimeError(f"Sheet pool is capped at {self.cap} sheets")
        logger.debug("Creating sheet %d (%s)", len(self._sheets), self.sheet)
        return self._append()

    @property
    def sheets(self) -> tuple[OccupancyGrid, ...]:
        return tuple(self._sheets)

    @property
    def total_area(self) -> int:
        return len(self._sheets) * self.sheet.area

    def __len__(self) -> int:
        return len(self._sheets)

    def __iter__(self) -> Iterator[OccupancyGrid]:
        return iter(self._sheets)


def expand_pieces(pieces: Sequence[PieceSpec]) -> list[PieceSpec]:
    """Expand pieces into one single-quantity unit per required piece.

    Args:
        pieces: Piece specifications, possibly with quantity > 1.

    Returns:
        List of units, each with quantity 1, in input order.
    """
    expanded: list[PieceSpec] = []
    for piece in pieces:
        unit = PieceSpec(length=piece.length, width=piece.width)
        expanded.extend([unit] * piece.quantity)
    return expanded


def sort_by_area(pieces: Sequence[PieceSpec]) -> list[PieceSpec]:
    """Sort pieces by unit area, largest first.

    The sort is stable, so equal-area pieces keep their relative order.
    """
    return sorted(pieces, key=lambda p: p.area, reverse=True)


class FirstFitGridPacker:
    """First-fit decreasing packer over per-sheet occupancy grids.

    Every unit goes to the first (sheet, anchor, orientation) that admits
    it, scanning sheets in creation order and anchors in row-major order.
    There is no backtracking and no search for a better position.

    Attributes:
        config: Sheet size, optional sheet cap and rotation setting.
    """

    def __init__(self, config: PackingConfig) -> None:
        self.config = config

    def validate(self, pieces: Sequence[PieceSpec]) -> None:
        """Reject pieces that cannot fit an empty sheet.

        With rotation allowed a piece passes if either orientation fits;
        otherwise only the declared orientation counts.

        Raises:
            InvalidPieceDimensions: For the first piece that cannot fit.
        """
        sheet = self.config.sheet
        for piece in pieces:
            if piece.fits_within(sheet):
                continue
            if self.config.allow_rotation and piece.fits_within(sheet, rotated=True):
                continue
            raise InvalidPieceDimensions(
                piece.length, piece.width, sheet.length, sheet.width
            )

    def pack(self, pieces: Sequence[PieceSpec]) -> PackingResult:
        """Place pieces onto sheets.

        Args:
            pieces: Piece specifications (quantities are expanded).

        Returns:
            PackingResult with per-sheet layouts and area accounting.

        Raises:
            InvalidPieceDimensions: If a piece cannot fit any sheet. Raised
                before any sheet is allocated.
        """
        self.validate(pieces)

        units = sort_by_area(expand_pieces(pieces))
        logger.debug("Packing %d units onto %s sheets", len(units), self.config.sheet)

        pool = SheetPool(self.config.sheet, self.config.sheet_quantity)
        colors = ColorMap()
        placed_area = 0
        unplaced_area = 0
        unplaced_count = 0

        for unit in units:
            if self._place_on_existing(pool, unit):
                colors.color_for(unit.key)
                placed_area += unit.area
                continue

            if pool.at_capacity:
                logger.warning(
                    "No room for piece %s on %d capped sheets, counting as waste",
                    unit.key,
                    len(pool),
                )
                unplaced_area += unit.area
                unplaced_count += 1
                continue

            sheet = pool.create_sheet()
            position = sheet.find_position(unit, self.config.allow_rotation)
            if position is None:
                # Validation guarantees an empty sheet admits every unit
                raise RuntimeError(f"Piece {unit.key} does not fit an empty sheet")
            self._place(sheet, unit, position)
            colors.color_for(unit.key)
            placed_area += unit.area

        layouts = tuple(sheet.to_layout() for sheet in pool)
        if logger.isEnabledFor(logging.DEBUG):
            for layout in layouts:
                logger.debug(
                    "Sheet %d: %d pieces, %.1f%% waste",
                    layout.sheet_index,
                    layout.piece_count,
                    layout.waste_percentage,
                )

        result = PackingResult(
            layouts=layouts,
            placed_area=placed_area,
            unplaced_area=unplaced_area,
            unplaced_count=unplaced_count,
            colors=colors.as_dict(),
        )
        logger.info(
            "Packed %d of %d pieces onto %d sheets, waste %d",
            result.total_pieces_placed,
            len(units),
            result.total_sheets,
            result.waste,
        )
        return result

    def _place_on_existing(self, pool: SheetPool, unit: PieceSpec) -> bool:
        """Place ``unit`` on the earliest existing sheet that admits it."""
        for sheet in pool:
            position = sheet.find_position(unit, self.config.allow_rotation)
            if position is not None:
                self._place(sheet, unit, position)
                return True
        return False

    def _place(
        self,
        sheet: OccupancyGrid,
        unit: PieceSpec,
        position: tuple[int, int, bool],
    ) -> PlacedPiece:
        x, y, rotated = position
        placement = sheet.place(unit, x, y, rotated)
        if rotated:
            logger.debug(
                "Piece %s placed rotated at (%d, %d) on sheet %d",
                unit.key,
                x,
                y,
                sheet.index,
            )
        return placement
