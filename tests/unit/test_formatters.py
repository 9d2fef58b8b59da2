"""Unit tests for the JSON result exporter."""

from __future__ import annotations

import json

import pytest

from cutstock.domain.value_objects import PieceSpec, SheetSpec
from cutstock.infrastructure.bin_packing import (
    FirstFitGridPacker,
    PackingConfig,
    PackingResult,
)
from cutstock.infrastructure.formatters import JsonExporter


@pytest.fixture
def result() -> PackingResult:
    config = PackingConfig(sheet=SheetSpec(length=2, width=5))
    return FirstFitGridPacker(config).pack([PieceSpec(5, 2)])


class TestJsonExporter:
    """Tests for JsonExporter."""

    def test_export_is_valid_json(self, result: PackingResult) -> None:
        data = json.loads(JsonExporter().export(result))
        assert data["waste"] == 0
        assert data["sheet_count"] == 1

    def test_area_fields(self, result: PackingResult) -> None:
        data = JsonExporter().to_dict(result)
        assert data["placed_area"] == 10
        assert data["unplaced_area"] == 0
        assert data["unplaced_count"] == 0
        assert data["waste_percentage"] == 0.0

    def test_sheet_anchor_list(self, result: PackingResult) -> None:
        sheet = JsonExporter().to_dict(result)["sheets"][0]
        assert sheet["index"] == 0
        assert (sheet["length"], sheet["width"]) == (2, 5)
        assert sheet["pieces"] == [
            {"length": 5, "width": 2, "x": 0, "y": 0, "rotated": True}
        ]

    def test_placements_grid(self, result: PackingResult) -> None:
        data = JsonExporter().to_dict(result)
        color = data["colors"]["5x2"]
        assert data["placements"] == [[[color] * 5, [color] * 5]]

    def test_grids_can_be_omitted(self, result: PackingResult) -> None:
        data = JsonExporter(include_grids=False).to_dict(result)
        assert "placements" not in data

    def test_free_cells_serialize_as_false(self) -> None:
        packed = FirstFitGridPacker(PackingConfig(sheet=SheetSpec(1, 2))).pack(
            [PieceSpec(1, 1)]
        )
        data = json.loads(JsonExporter().export(packed))
        assert data["placements"][0][0][1] is False
