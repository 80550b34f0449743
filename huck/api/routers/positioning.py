"""REST API router for AI positioning."""

from typing import Optional

from fastapi import APIRouter

from huck.api.routers.heatmap import resolve_grid_size
from huck.api.schemas import (
    PositionDefenderRequest,
    PositionOffenderRequest,
    PositionRequest,
    PositionResponse,
)
from huck.positioning import (
    position_defender_optimal,
    position_offender_optimal,
    position_offender_stack,
)

router = APIRouter(tags=["positioning"])


def _to_response(result: Optional[tuple[float, float]]) -> Optional[PositionResponse]:
    if result is None:
        return None
    x, y = result
    return PositionResponse(x=x, y=y)


@router.post("/position-defender", response_model=Optional[PositionResponse])
def position_defender(request: PositionDefenderRequest) -> Optional[PositionResponse]:
    """Best spot within 5 yards of the paired offender for the defense.

    Returns null when no matching defender or offender exists.
    """
    result = position_defender_optimal(
        request.game_state.to_domain(),
        resolve_grid_size(request.grid_size),
        request.defender_label,
    )
    return _to_response(result)


@router.post("/position-offender", response_model=Optional[PositionResponse])
def position_offender(request: PositionOffenderRequest) -> Optional[PositionResponse]:
    """Spot sampled from the combined heat map, weighted by cell value.

    Returns null when no offender or thrower is present, or no cell has weight.
    """
    result = position_offender_optimal(
        request.game_state.to_domain(),
        resolve_grid_size(request.grid_size),
        request.offender_label,
    )
    return _to_response(result)


@router.post("/position-stack", response_model=Optional[PositionResponse])
def position_stack(request: PositionRequest) -> Optional[PositionResponse]:
    """Stack spot: middle of the field, 20 yards downfield of the disc."""
    return _to_response(position_offender_stack(request.game_state.to_domain()))
