"""Unit tests for configuration merger and adapter.

These tests verify:
- CLI args override config values when provided
- CLI args are ignored when None
- CLI pieces replace the job file's pieces
- Adapter correctly converts config to domain objects
"""

import pytest

from cutstock.application.config import (
    ConfigError,
    OptimizationConfiguration,
    OptionsConfig,
    PieceConfig,
    SheetConfig,
    config_to_packing_config,
    config_to_pieces,
    merge_config_with_cli,
)
from cutstock.domain.value_objects import PieceSpec, SheetSpec


@pytest.fixture
def base_config() -> OptimizationConfiguration:
    """Create a base configuration for testing."""
    return OptimizationConfiguration(
        schema_version="1.0",
        sheet=SheetConfig(length=96, width=48, quantity=2),
        pieces=[
            PieceConfig(length=24, width=12, quantity=4),
            PieceConfig(length=30, width=20),
        ],
        options=OptionsConfig(allow_rotation=True),
    )


class TestMergeConfigWithCli:
    """Tests for merge_config_with_cli function."""

    def test_no_overrides_returns_equivalent_config(
        self, base_config: OptimizationConfiguration
    ) -> None:
        merged = merge_config_with_cli(base_config)
        assert merged == base_config
        assert merged is not base_config

    def test_sheet_overrides(self, base_config: OptimizationConfiguration) -> None:
        merged = merge_config_with_cli(base_config, sheet_length=120, sheet_quantity=5)

        assert merged.sheet.length == 120
        assert merged.sheet.width == 48
        assert merged.sheet.quantity == 5

    def test_original_not_mutated(self, base_config: OptimizationConfiguration) -> None:
        merge_config_with_cli(base_config, sheet_width=60, allow_rotation=False)
        assert base_config.sheet.width == 48
        assert base_config.options.allow_rotation is True

    def test_pieces_replace_file_pieces(
        self, base_config: OptimizationConfiguration
    ) -> None:
        merged = merge_config_with_cli(
            base_config, pieces=[{"length": 10, "width": 5, "quantity": 3}]
        )
        assert len(merged.pieces) == 1
        assert merged.pieces[0].length == 10

    def test_rotation_override(self, base_config: OptimizationConfiguration) -> None:
        merged = merge_config_with_cli(base_config, allow_rotation=False)
        assert merged.options.allow_rotation is False

    def test_invalid_override_revalidated(
        self, base_config: OptimizationConfiguration
    ) -> None:
        """Overrides go through the same schema checks as the file."""
        with pytest.raises(ConfigError) as exc_info:
            merge_config_with_cli(base_config, pieces=[{"length": 0, "width": 5}])

        assert exc_info.value.error_type == "validation"
        assert exc_info.value.details[0]["path"] == "pieces[0].length"


class TestConfigAdapter:
    """Tests for conversion to domain objects."""

    def test_packing_config(self, base_config: OptimizationConfiguration) -> None:
        packing = config_to_packing_config(base_config)
        assert packing.sheet == SheetSpec(96, 48)
        assert packing.sheet_quantity == 2
        assert packing.allow_rotation is True

    def test_unlimited_sheets_stay_none(self) -> None:
        config = OptimizationConfiguration(
            schema_version="1.0", sheet=SheetConfig(length=4, width=4)
        )
        assert config_to_packing_config(config).sheet_quantity is None

    def test_pieces_in_order(self, base_config: OptimizationConfiguration) -> None:
        assert config_to_pieces(base_config) == [
            PieceSpec(24, 12, quantity=4),
            PieceSpec(30, 20, quantity=1),
        ]
