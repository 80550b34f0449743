"""API schemas for request/response validation."""

from huck.api.schemas.game import (
    DiscSchema,
    FieldDimensionsSchema,
    GameStateSchema,
    PlayerSchema,
)
from huck.api.schemas.heatmap import (
    HeatMapModesSchema,
    HeatMapRequest,
    HeatMapResponse,
    HeatMapSumRequest,
    HeatMapSumResponse,
)
from huck.api.schemas.positioning import (
    PositionDefenderRequest,
    PositionOffenderRequest,
    PositionRequest,
    PositionResponse,
    ThrowRequest,
    UpdateRequest,
)

__all__ = [
    # Game state
    "DiscSchema",
    "FieldDimensionsSchema",
    "GameStateSchema",
    "PlayerSchema",
    # Heat map
    "HeatMapModesSchema",
    "HeatMapRequest",
    "HeatMapResponse",
    "HeatMapSumRequest",
    "HeatMapSumResponse",
    # Positioning / physics
    "PositionDefenderRequest",
    "PositionOffenderRequest",
    "PositionRequest",
    "PositionResponse",
    "ThrowRequest",
    "UpdateRequest",
]
