"""REST API router for heat maps."""

from typing import Optional

from fastapi import APIRouter

from huck.api.schemas import (
    HeatMapRequest,
    HeatMapResponse,
    HeatMapSumRequest,
    HeatMapSumResponse,
)
from huck.config import get_config
from huck.heatmap import calculate_heat_map, combined_heat_map_sum

router = APIRouter(tags=["heatmap"])


def resolve_grid_size(grid_size: Optional[float]) -> float:
    """Request grid size, or the configured default when omitted."""
    if grid_size is None:
        return get_config().default_grid_size
    return grid_size


@router.post("/heatmap", response_model=Optional[HeatMapResponse])
def heatmap(request: HeatMapRequest) -> Optional[HeatMapResponse]:
    """Compute the heat map for the enabled layers.

    Returns null when no layer is enabled, or when only the marking layer is
    enabled and nobody holds the disc.
    """
    data = calculate_heat_map(
        request.game_state.to_domain(),
        request.modes.to_domain(),
        request.normalize,
        resolve_grid_size(request.grid_size),
    )
    if data is None:
        return None
    return HeatMapResponse.from_domain(data)


@router.post("/heatmap-sum", response_model=HeatMapSumResponse)
def heatmap_sum(request: HeatMapSumRequest) -> HeatMapSumResponse:
    """Sum of the un-normalised combined heat map (all four layers)."""
    total = combined_heat_map_sum(
        request.game_state.to_domain(),
        resolve_grid_size(request.grid_size),
    )
    return HeatMapSumResponse(sum=total)
