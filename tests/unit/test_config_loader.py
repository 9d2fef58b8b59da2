"""Unit tests for job file schema and loader.

These tests verify:
- Schema constraints on sheets, pieces and options
- Schema version handling
- Loader error categories for missing, unreadable and malformed files
- Validation error paths in JSON path notation
"""

from __future__ import annotations

import json
from pathlib import Path

import pytest

from cutstock.application.config import (
    ConfigError,
    OptimizationConfiguration,
    load_config,
    load_config_from_dict,
)
from cutstock.application.config.loader import _json_path


def _job(**overrides) -> dict:
    data = {
        "schema_version": "1.0",
        "sheet": {"length": 4, "width": 4},
        "pieces": [{"length": 2, "width": 2, "quantity": 4}],
    }
    data.update(overrides)
    return data


# =============================================================================
# Schema Tests
# =============================================================================


class TestOptimizationConfiguration:
    """Tests for the root job model."""

    def test_minimal_job(self) -> None:
        config = load_config_from_dict(_job())
        assert config.sheet.length == 4
        assert config.sheet.quantity is None
        assert config.pieces[0].quantity == 4
        assert config.options.allow_rotation is True

    def test_piece_quantity_defaults_to_one(self) -> None:
        config = load_config_from_dict(_job(pieces=[{"length": 1, "width": 2}]))
        assert config.pieces[0].quantity == 1

    def test_pieces_default_to_empty(self) -> None:
        data = _job()
        del data["pieces"]
        assert load_config_from_dict(data).pieces == []

    def test_newer_minor_version_accepted(self) -> None:
        assert load_config_from_dict(_job(schema_version="1.3")).schema_version == "1.3"

    def test_unsupported_major_version_rejected(self) -> None:
        with pytest.raises(ConfigError) as exc_info:
            load_config_from_dict(_job(schema_version="2.0"))
        assert "Unsupported schema version" in str(exc_info.value)

    def test_unknown_field_rejected(self) -> None:
        with pytest.raises(ConfigError) as exc_info:
            load_config_from_dict(_job(colour="red"))
        assert exc_info.value.error_type == "validation"

    def test_zero_sheet_quantity_rejected(self) -> None:
        """Zero is not a way of saying 'unlimited'."""
        with pytest.raises(ConfigError) as exc_info:
            load_config_from_dict(_job(sheet={"length": 4, "width": 4, "quantity": 0}))
        assert exc_info.value.details[0]["path"] == "sheet.quantity"

    def test_non_positive_piece_dimension_path(self) -> None:
        with pytest.raises(ConfigError) as exc_info:
            load_config_from_dict(
                _job(pieces=[{"length": 1, "width": 1}, {"length": 2, "width": 0}])
            )
        assert exc_info.value.details[0]["path"] == "pieces[1].width"
        assert exc_info.value.details[0]["value"] == 0

    def test_model_is_constructible_directly(self) -> None:
        config = OptimizationConfiguration.model_validate(_job())
        assert config.schema_version == "1.0"


# =============================================================================
# Loader Tests
# =============================================================================


class TestLoadConfig:
    """Tests for load_config."""

    def test_load_valid_file(self, tmp_path: Path) -> None:
        path = tmp_path / "job.json"
        path.write_text(json.dumps(_job()))
        config = load_config(path)
        assert config.sheet.width == 4

    def test_file_not_found(self, tmp_path: Path) -> None:
        path = tmp_path / "missing.json"
        with pytest.raises(ConfigError) as exc_info:
            load_config(path)
        assert exc_info.value.error_type == "file_not_found"
        assert exc_info.value.path == path

    def test_invalid_json(self, tmp_path: Path) -> None:
        path = tmp_path / "broken.json"
        path.write_text('{"schema_version": "1.0",\n  "sheet": }')
        with pytest.raises(ConfigError) as exc_info:
            load_config(path)

        err = exc_info.value
        assert err.error_type == "json_parse"
        assert err.details[0]["line"] == 2
        assert "line 2" in err.message

    def test_validation_error_message(self, tmp_path: Path) -> None:
        path = tmp_path / "bad.json"
        path.write_text(json.dumps(_job(sheet={"length": -1, "width": 4})))
        with pytest.raises(ConfigError) as exc_info:
            load_config(path)

        err = exc_info.value
        assert err.error_type == "validation"
        assert err.message.startswith("Configuration validation failed:")
        assert "sheet.length" in err.message

    def test_directory_is_read_error(self, tmp_path: Path) -> None:
        with pytest.raises(ConfigError) as exc_info:
            load_config(tmp_path)
        assert exc_info.value.error_type in ("file_read_error", "permission_denied")


class TestJsonPath:
    """Tests for location formatting."""

    @pytest.mark.parametrize(
        ("loc", "expected"),
        [
            (("sheet", "length"), "sheet.length"),
            (("pieces", 0, "width"), "pieces[0].width"),
            ((0,), "[0]"),
        ],
    )
    def test_format(self, loc: tuple, expected: str) -> None:
        assert _json_path(loc) == expected
