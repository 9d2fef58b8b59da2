"""Text formatters for packing results."""

from __future__ import annotations

import json
from typing import Any

from cutstock.infrastructure.bin_packing import PackingResult, PlacedPiece


class JsonExporter:
    """Exports packing results as JSON.

    ``placements`` keeps the occupancy-grid wire format (``false`` or a
    colour per cell); ``sheets`` adds the anchor list per sheet.
    """

    def __init__(self, include_grids: bool = True) -> None:
        self.include_grids = include_grids

    def export(self, result: PackingResult) -> str:
        """Export a packing result as a JSON string."""
        return json.dumps(self.to_dict(result), indent=2)

    def to_dict(self, result: PackingResult) -> dict[str, Any]:
        data: dict[str, Any] = {
            "waste": result.waste,
            "waste_percentage": round(result.waste_percentage, 2),
            "sheet_count": result.total_sheets,
            "placed_area": result.placed_area,
            "unplaced_area": result.unplaced_area,
            "unplaced_count": result.unplaced_count,
            "colors": result.colors,
            "sheets": [
                {
                    "index": layout.sheet_index,
                    "length": layout.sheet.length,
                    "width": layout.sheet.width,
                    "pieces": [self._format_placement(p) for p in layout.placements],
                }
                for layout in result.layouts
            ],
        }
        if self.include_grids:
            data["placements"] = result.placement_grids()
        return data

    def _format_placement(self, placement: PlacedPiece) -> dict[str, Any]:
        return {
            "length": placement.piece.length,
            "width": placement.piece.width,
            "x": placement.x,
            "y": placement.y,
            "rotated": placement.rotated,
        }
