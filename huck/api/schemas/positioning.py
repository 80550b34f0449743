"""Pydantic schemas for positioning and physics endpoints."""

from typing import Optional

from pydantic import Field

from huck.api.schemas.game import CamelModel, GameStateSchema
from huck.physics.disc_flight import DEFAULT_THROW_SPEED


class PositionRequest(CamelModel):
    """Request to position a player."""

    game_state: GameStateSchema
    grid_size: Optional[float] = Field(default=None, gt=0)


class PositionDefenderRequest(PositionRequest):
    """Position the defender paired with an offender by label."""

    defender_label: Optional[str] = None


class PositionOffenderRequest(PositionRequest):
    """Position an offender, optionally picked by label."""

    offender_label: Optional[str] = None


class PositionResponse(CamelModel):
    """New player position in yards."""

    x: float
    y: float


class UpdateRequest(CamelModel):
    """Advance physics by delta_time seconds."""

    game_state: GameStateSchema
    delta_time: float = Field(ge=0)


class ThrowRequest(CamelModel):
    """Throw the disc toward a target."""

    game_state: GameStateSchema
    target_x: float
    target_y: float
    speed: float = Field(default=DEFAULT_THROW_SPEED, gt=0)
