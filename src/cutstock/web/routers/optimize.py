"""Cut optimization endpoints."""

import logging

from fastapi import APIRouter

from cutstock.application.commands import OptimizeCommand
from cutstock.application.dtos import OptimizationOutput
from cutstock.domain.value_objects import PieceSpec, SheetSpec
from cutstock.infrastructure.bin_packing import PackingConfig
from cutstock.web.dependencies import OptimizeCommandDep, RendererDep
from cutstock.web.schemas.requests import OptimizeRequest
from cutstock.web.schemas.responses import (
    DiagramResponse,
    ErrorResponseSchema,
    OptimizeResponse,
)

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/optimize", tags=["optimize"])

_ERROR_RESPONSES = {400: {"model": ErrorResponseSchema}}


def _run(request: OptimizeRequest, command: OptimizeCommand) -> OptimizationOutput:
    config = PackingConfig(
        sheet=SheetSpec(length=request.sheet_length, width=request.sheet_width),
        sheet_quantity=request.sheet_quantity,
        allow_rotation=request.allow_rotation,
    )
    pieces = [
        PieceSpec(length=p.length, width=p.width, quantity=p.quantity)
        for p in request.pieces
    ]
    return command.execute(pieces, config)


def _output_to_schema(output: OptimizationOutput) -> OptimizeResponse:
    result = output.result
    return OptimizeResponse(
        waste=result.waste,
        placements=result.placement_grids(),
        sheet_count=result.total_sheets,
        placed_area=result.placed_area,
        unplaced_area=result.unplaced_area,
        unplaced_count=result.unplaced_count,
        total_sheet_area=result.total_sheet_area,
        waste_percentage=result.waste_percentage,
        colors=result.colors,
    )


# Plain ``def`` handlers: FastAPI runs them in its threadpool, keeping the
# CPU-bound packing pass off the event loop.
@router.post("", response_model=OptimizeResponse, responses=_ERROR_RESPONSES)
def optimize(
    request: OptimizeRequest,
    command: OptimizeCommandDep,
) -> OptimizeResponse:
    """Place pieces onto stock sheets and report waste and occupancy grids.

    Raises:
        InvalidPieceDimensions: If a piece cannot fit on a sheet (mapped to
            HTTP 400 by the registered exception handler).
    """
    output = _run(request, command)
    if not output.is_complete:
        logger.info(
            "%d of %d pieces did not fit on %s capped sheets",
            output.result.unplaced_count,
            output.requested_count,
            request.sheet_quantity,
        )
    return _output_to_schema(output)


@router.post("/svg", response_model=DiagramResponse, responses=_ERROR_RESPONSES)
def optimize_svg(
    request: OptimizeRequest,
    command: OptimizeCommandDep,
    renderer: RendererDep,
) -> DiagramResponse:
    """Place pieces and return SVG cut diagrams instead of raw grids."""
    output = _run(request, command)
    return DiagramResponse(
        sheets=renderer.render_all_svg(output.result),
        summary=renderer.render_waste_summary(output.result),
    )
