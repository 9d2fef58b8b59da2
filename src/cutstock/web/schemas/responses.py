"""Pydantic response schemas for the REST API."""

from typing import Any

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel


class OptimizeResponse(BaseModel):
    """Response for an optimization run.

    ``placements`` holds one occupancy grid per sheet; each cell is
    ``false`` when free or the colour of the piece occupying it.
    """

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    waste: int = Field(..., description="Unused sheet area plus unplaced piece area")
    placements: list[list[list[str | bool]]] = Field(
        ..., description="Occupancy grid per sheet"
    )
    sheet_count: int = Field(..., description="Number of sheets in the result")
    placed_area: int = Field(..., description="Area of placed pieces")
    unplaced_area: int = Field(..., description="Area of pieces that did not fit")
    unplaced_count: int = Field(..., description="Number of pieces that did not fit")
    total_sheet_area: int = Field(..., description="Combined area of all sheets")
    waste_percentage: float = Field(
        ..., description="Unused sheet area as a percentage of sheet area"
    )
    colors: dict[str, str] = Field(
        default_factory=dict, description="Colour per piece dimension key"
    )


class DiagramResponse(BaseModel):
    """Response carrying one SVG cut diagram per sheet."""

    sheets: list[str] = Field(..., description="SVG document per sheet")
    summary: str = Field(..., description="Plain-text waste summary")


class ErrorResponseSchema(BaseModel):
    """Standard error response."""

    error: str = Field(..., description="Error message")
    error_type: str = Field(..., description="Error type identifier")
    details: list[dict[str, Any]] | dict[str, Any] | None = Field(
        default=None, description="Additional error details"
    )
