"""Pydantic models for optimization job files.

A job file describes the stock sheet, an optional cap on the number of
sheets, the pieces to cut and packing options:

    {
      "schema_version": "1.0",
      "sheet": {"length": 96, "width": 48, "quantity": 3},
      "pieces": [{"length": 24, "width": 12, "quantity": 4}],
      "options": {"allow_rotation": true}
    }
"""

from pydantic import BaseModel, ConfigDict, Field, field_validator

# Version 1.0: Initial schema with sheet, pieces and options
SUPPORTED_VERSIONS: frozenset[str] = frozenset({"1.0"})


class SheetConfig(BaseModel):
    """Stock sheet dimensions and optional quantity cap.

    Attributes:
        length: Sheet length in grid units.
        width: Sheet width in grid units.
        quantity: Maximum number of sheets, or None for unlimited.
    """

    model_config = ConfigDict(extra="forbid")

    length: int = Field(..., gt=0, description="Sheet length")
    width: int = Field(..., gt=0, description="Sheet width")
    quantity: int | None = Field(
        default=None, gt=0, description="Sheet cap (omit for unlimited)"
    )


class PieceConfig(BaseModel):
    """A piece to cut."""

    model_config = ConfigDict(extra="forbid")

    length: int = Field(..., gt=0, description="Piece length")
    width: int = Field(..., gt=0, description="Piece width")
    quantity: int = Field(default=1, gt=0, description="Number of pieces")


class OptionsConfig(BaseModel):
    """Packing options."""

    model_config = ConfigDict(extra="forbid")

    allow_rotation: bool = Field(
        default=True, description="Allow pieces to be turned 90 degrees"
    )


class OptimizationConfiguration(BaseModel):
    """Root model for an optimization job file.

    Example:
        >>> config = OptimizationConfiguration(
        ...     schema_version="1.0",
        ...     sheet=SheetConfig(length=4, width=4),
        ...     pieces=[PieceConfig(length=2, width=2, quantity=4)],
        ... )
    """

    model_config = ConfigDict(extra="forbid")

    schema_version: str = Field(..., pattern=r"^\d+\.\d+$")
    sheet: SheetConfig
    pieces: list[PieceConfig] = Field(default_factory=list)
    options: OptionsConfig = Field(default_factory=OptionsConfig)

    @field_validator("schema_version")
    @classmethod
    def validate_supported_version(cls, v: str) -> str:
        """Accept supported versions and newer minors of a supported major."""
        if v in SUPPORTED_VERSIONS:
            return v

        major_version = int(v.split(".")[0])
        supported_majors = {int(sv.split(".")[0]) for sv in SUPPORTED_VERSIONS}
        if major_version in supported_majors:
            return v

        raise ValueError(
            f"Unsupported schema version '{v}'. "
            f"Supported versions: {sorted(SUPPORTED_VERSIONS)}"
        )
