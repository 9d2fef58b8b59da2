"""Pydantic schemas for the REST API."""

from cutstock.web.schemas.requests import OptimizeRequest, PieceSchema
from cutstock.web.schemas.responses import (
    DiagramResponse,
    ErrorResponseSchema,
    OptimizeResponse,
)

__all__ = [
    # Requests
    "OptimizeRequest",
    "PieceSchema",
    # Responses
    "DiagramResponse",
    "ErrorResponseSchema",
    "OptimizeResponse",
]
