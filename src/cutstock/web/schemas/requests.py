"""Pydantic request schemas for the REST API."""

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel


class PieceSchema(BaseModel):
    """A piece to cut."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    length: int = Field(..., gt=0, description="Piece length")
    width: int = Field(..., gt=0, description="Piece width")
    quantity: int = Field(..., gt=0, description="Number of pieces")


class OptimizeRequest(BaseModel):
    """Request for placing pieces onto stock sheets.

    Field names are accepted in camelCase (``sheetLength``) or
    snake_case (``sheet_length``).
    """

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    sheet_length: int = Field(..., gt=0, description="Sheet length")
    sheet_width: int = Field(..., gt=0, description="Sheet width")
    sheet_quantity: int | None = Field(
        default=None, gt=0, description="Sheet cap; omit for unlimited sheets"
    )
    allow_rotation: bool = Field(
        default=True, description="Allow pieces to be turned 90 degrees"
    )
    pieces: list[PieceSchema] = Field(..., description="Pieces to cut")
