"""Cut diagram rendering for packing results.

SVG and ASCII views of sheet layouts: piece outlines, dimension labels,
a rotation marker and a colour legend keyed by piece dimensions.

Sheet rows (the length axis) are drawn top to bottom and columns (the
width axis) left to right, matching the row-major occupancy grid.
"""

from __future__ import annotations

from cutstock.infrastructure.bin_packing import (
    PackingResult,
    PlacedPiece,
    SheetLayout,
)
from cutstock.infrastructure.colors import color_for_key

FONT = "Arial, sans-serif"
HEADER_HEIGHT = 30
LEGEND_COLUMNS = 3
LEGEND_ROW_HEIGHT = 25
SWATCH = 15


def _attrs(**attrs: object) -> str:
    # font_size -> font-size
    return " ".join(
        f'{name.replace("_", "-")}="{value}"'
        for name, value in attrs.items()
    )


def _rect(indent: int = 2, **attrs: object) -> str:
    return " " * indent + f"<rect {_attrs(**attrs)}/>"


def _text(content: str, indent: int = 2, **attrs: object) -> str:
    return " " * indent + f"<text {_attrs(**attrs)}>{content}</text>"


def _sheet_title(layout: SheetLayout, total_sheets: int) -> str:
    return (
        f"Sheet {layout.sheet_index + 1} of {total_sheets} - "
        f"{layout.sheet} - {layout.waste_percentage:.1f}% waste"
    )


def _plural(count: int, noun: str) -> str:
    return f"{count} {noun}" if count == 1 else f"{count} {noun}s"


class CutDiagramRenderer:
    """Renders cut diagrams in SVG and ASCII format.

    Attributes:
        scale: Pixels per grid unit for SVG rendering.
        piece_stroke: Stroke color for piece outlines.
        sheet_fill: Fill color for unoccupied sheet area.
        text_color: Color for labels and dimensions.
        show_dimensions: Whether to print dimensions inside pieces.
        show_legend: Whether to add a colour legend below each sheet.
    """

    def __init__(
        self,
        scale: float = 20.0,
        piece_stroke: str = "#000000",
        sheet_fill: str = "#D3D3D3",  # Light gray
        text_color: str = "#000000",
        show_dimensions: bool = True,
        show_legend: bool = True,
    ) -> None:
        self.scale = scale
        self.piece_stroke = piece_stroke
        self.sheet_fill = sheet_fill
        self.text_color = text_color
        self.show_dimensions = show_dimensions
        self.show_legend = show_legend

    def render_svg(
        self,
        layout: SheetLayout,
        colors: dict[str, str] | None = None,
        total_sheets: int = 1,
    ) -> str:
        """Draw one sheet as a standalone SVG document.

        Args:
            layout: Sheet to draw.
            colors: Colour per dimension key; keys not present get their
                derived colour.
            total_sheets: Sheet count shown in the header.
        """
        colors = colors or {}
        keys = sorted({p.piece.key for p in layout.placements})

        width = layout.sheet.width * self.scale
        sheet_height = layout.sheet.length * self.scale
        legend_top = HEADER_HEIGHT + sheet_height
        height = legend_top + self._legend_height(keys)

        lines = [
            f'<svg {_attrs(width=width, height=height)} '
            f'xmlns="http://www.w3.org/2000/svg">',
            _rect(x=0, y=0, width=width, height=height, fill="white"),
            _rect(x=0, y=0, width=width, height=HEADER_HEIGHT, fill="#E0E0E0"),
            _text(
                _sheet_title(layout, total_sheets),
                x=10,
                y=HEADER_HEIGHT - 8,
                font_family=FONT,
                font_size=14,
                fill=self.text_color,
            ),
            _rect(
                x=0,
                y=HEADER_HEIGHT,
                width=width,
                height=sheet_height,
                fill=self.sheet_fill,
                stroke=self.piece_stroke,
                stroke_width=2,
            ),
        ]
        for placement in layout.placements:
            key = placement.piece.key
            fill = colors.get(key) or color_for_key(key)
            lines.extend(self._piece_svg(placement, fill))
        if keys and self.show_legend:
            lines.extend(self._legend_svg(keys, colors, width, legend_top))
        lines.append("</svg>")
        return "\n".join(lines)

    def render_all_svg(self, result: PackingResult) -> list[str]:
        """One SVG document per sheet, in pool order."""
        return [
            self.render_svg(layout, result.colors, result.total_sheets)
            for layout in result.layouts
        ]

    def _piece_svg(self, placement: PlacedPiece, fill: str) -> list[str]:
        left = placement.y * self.scale
        top = HEADER_HEIGHT + placement.x * self.scale
        w = placement.placed_width * self.scale
        h = placement.placed_length * self.scale

        lines = [
            "  <g>",
            _rect(
                4, x=left, y=top, width=w, height=h, fill=fill, stroke=self.piece_stroke
            ),
        ]
        font_size = min(12, min(w, h) / 3)
        if self.show_dimensions and font_size >= 6:
            label = placement.piece.key + (" (R)" if placement.rotated else "")
            lines.append(
                _text(
                    label,
                    4,
                    x=left + w / 2,
                    y=top + h / 2 + font_size / 3,
                    text_anchor="middle",
                    font_family=FONT,
                    font_size=font_size,
                    fill=self.text_color,
                )
            )
        lines.append("  </g>")
        return lines

    def _legend_height(self, keys: list[str]) -> float:
        if not keys or not self.show_legend:
            return 0.0
        rows = -(-len(keys) // LEGEND_COLUMNS)
        # Title band, gap, one band per row, bottom margin
        return 30 + rows * LEGEND_ROW_HEIGHT + 10

    def _legend_svg(
        self,
        keys: list[str],
        colors: dict[str, str],
        width: float,
        top: float,
    ) -> list[str]:
        lines = [
            _rect(
                x=0,
                y=top,
                width=width,
                height=self._legend_height(keys),
                fill="#F5F5F5",
                stroke="#CCCCCC",
            ),
            _text(
                "Pieces:",
                x=10,
                y=top + 18,
                font_family=FONT,
                font_size=12,
                font_weight="bold",
                fill=self.text_color,
            ),
        ]
        column_width = width / LEGEND_COLUMNS
        for idx, key in enumerate(keys):
            row, column = divmod(idx, LEGEND_COLUMNS)
            x = column * column_width + 15
            y = top + 35 + row * LEGEND_ROW_HEIGHT
            lines.append(
                _rect(
                    x=x,
                    y=y,
                    width=SWATCH,
                    height=SWATCH,
                    fill=colors.get(key) or color_for_key(key),
                    stroke=self.piece_stroke,
                )
            )
            lines.append(
                _text(
                    key,
                    x=x + SWATCH + 5,
                    y=y + SWATCH - 3,
                    font_family=FONT,
                    font_size=10,
                    fill=self.text_color,
                )
            )
        return lines

    def render_ascii(
        self,
        layout: SheetLayout,
        width: int = 80,
        total_sheets: int = 1,
    ) -> str:
        """Draw one sheet as text.

        A sheet that fits the terminal is drawn cell for cell: each
        distinct piece size gets a letter and free cells are ``.``. Wider
        sheets fall back to scaled piece outlines.

        Args:
            layout: Sheet to draw.
            width: Terminal width in characters, borders included.
            total_sheets: Sheet count shown in the header.
        """
        inner = width - 2
        if layout.sheet.width <= inner:
            body = self._cell_rows(layout)
        else:
            body = self._outline_rows(layout, inner)

        border = "+" + "-" * len(body[0]) + "+" if body else "++"
        return "\n".join(
            [_sheet_title(layout, total_sheets), border]
            + [f"|{row}|" for row in body]
            + [border]
        )

    def _cell_rows(self, layout: SheetLayout) -> list[str]:
        letters: dict[str, str] = {}
        for placement in layout.placements:
            letters.setdefault(
                placement.piece.key, chr(ord("A") + len(letters) % 26)
            )
        return [
            "".join("." if cell is None else letters.get(cell, "#") for cell in row)
            for row in layout.cells
        ]

    def _outline_rows(self, layout: SheetLayout, columns: int) -> list[str]:
        sheet = layout.sheet
        # Terminal cells are about twice as tall as they are wide
        rows = max(int(columns * sheet.length / sheet.width / 2), 10)
        canvas = [[" "] * columns for _ in range(rows)]
        for placement in layout.placements:
            self._draw_outline(
                canvas, placement, columns / sheet.width, rows / sheet.length
            )
        return ["".join(line) for line in canvas]

    def _draw_outline(
        self,
        canvas: list[list[str]],
        placement: PlacedPiece,
        col_scale: float,
        row_scale: float,
    ) -> None:
        """Draw a piece's border and its dimension key onto the canvas."""
        last_row = len(canvas) - 1
        last_col = len(canvas[0]) - 1

        top = min(int(placement.x * row_scale), last_row)
        bottom = min(int(placement.bottom_edge * row_scale), last_row)
        left = min(int(placement.y * col_scale), last_col)
        right = min(int(placement.right_edge * col_scale), last_col)

        for col in range(left, right + 1):
            canvas[top][col] = canvas[bottom][col] = "-"
        for row in range(top, bottom + 1):
            canvas[row][left] = canvas[row][right] = "|"
        for row in (top, bottom):
            canvas[row][left] = canvas[row][right] = "+"

        if top + 1 < bottom:
            label = placement.piece.key + ("R" if placement.rotated else "")
            for offset, char in enumerate(label[: max(right - left - 1, 0)]):
                canvas[top + 1][left + 1 + offset] = char

    def render_all_ascii(self, result: PackingResult, width: int = 80) -> str:
        """Draw every sheet as text, followed by a one-line summary."""
        if not result.layouts:
            return "No sheets to display."

        blocks = [
            self.render_ascii(layout, width, result.total_sheets) + "\n"
            for layout in result.layouts
        ]
        blocks.append("=" * width)
        blocks.append(
            f"SUMMARY: {_plural(result.total_sheets, 'sheet')}, "
            f"waste {result.waste} ({result.waste_percentage:.1f}% of sheet area)"
        )
        return "\n".join(blocks)

    def render_waste_summary(self, result: PackingResult) -> str:
        """Plain-text report of sheet usage and waste."""
        lines = [
            "CUT OPTIMIZATION SUMMARY",
            "=" * 40,
            f"Total Sheets: {result.total_sheets}",
            f"Pieces Placed: {result.total_pieces_placed}",
            f"Sheet Area: {result.total_sheet_area}",
            f"Placed Area: {result.placed_area}",
            f"Waste: {result.waste}",
        ]
        if result.unplaced_count:
            lines.append(
                f"Unplaced: {_plural(result.unplaced_count, 'piece')} "
                f"(area {result.unplaced_area}, counted as waste)"
            )

        lines += ["", "Per-Sheet Details:"]
        lines.extend(
            f"  Sheet {layout.sheet_index + 1}: "
            f"{_plural(layout.piece_count, 'piece')}, "
            f"{layout.waste_percentage:.1f}% waste"
            for layout in result.layouts
        )
        return "\n".join(lines)
