"""Infrastructure layer - packing algorithm, colours and renderers."""

from .bin_packing import (
    FirstFitGridPacker,
    OccupancyGrid,
    PackingConfig,
    PackingResult,
    PlacedPiece,
    SheetLayout,
    SheetPool,
    expand_pieces,
    sort_by_area,
)
from .colors import ColorMap, color_for_key
from .cut_diagram_renderer import CutDiagramRenderer
from .formatters import JsonExporter

__all__ = [
    # Bin packing
    "FirstFitGridPacker",
    "OccupancyGrid",
    "PackingConfig",
    "PackingResult",
    "PlacedPiece",
    "SheetLayout",
    "SheetPool",
    "expand_pieces",
    "sort_by_area",
    # Colours
    "ColorMap",
    "color_for_key",
    # Output
    "CutDiagramRenderer",
    "JsonExporter",
]
