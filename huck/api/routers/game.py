"""REST API router for the disc physics step."""

from fastapi import APIRouter

from huck.api.schemas import GameStateSchema, ThrowRequest, UpdateRequest
from huck.physics import throw_disc, update

router = APIRouter(tags=["game"])


@router.post("/update", response_model=GameStateSchema)
def update_state(request: UpdateRequest) -> GameStateSchema:
    """Advance disc physics by deltaTime seconds and return the new state.

    The browser runs physics locally for real-time play; this endpoint serves
    server-side simulations.
    """
    state = request.game_state.to_domain()
    update(state, request.delta_time)
    return GameStateSchema.from_domain(state)


@router.post("/throw", response_model=GameStateSchema)
def throw(request: ThrowRequest) -> GameStateSchema:
    """Throw the disc from its current position toward (targetX, targetY)."""
    state = request.game_state.to_domain()
    throw_disc(state, request.target_x, request.target_y, request.speed)
    return GameStateSchema.from_domain(state)
