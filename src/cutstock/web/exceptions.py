"""Error handlers for the REST API."""

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse

from cutstock.domain.exceptions import InvalidPieceDimensions


def register_exception_handlers(app: FastAPI) -> None:
    """Register custom exception handlers with the FastAPI app."""

    @app.exception_handler(InvalidPieceDimensions)
    async def invalid_piece_dimensions_handler(
        request: Request, exc: InvalidPieceDimensions
    ) -> JSONResponse:
        return JSONResponse(
            status_code=400,
            content={
                "error": str(exc),
                "error_type": "invalid_piece_dimensions",
                "details": {
                    "piece": {"length": exc.piece_length, "width": exc.piece_width},
                    "sheet": {"length": exc.sheet_length, "width": exc.sheet_width},
                },
            },
        )
