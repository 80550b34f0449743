"""API routers for different resource types."""

from huck.api.routers.game import router as game_router
from huck.api.routers.heatmap import router as heatmap_router
from huck.api.routers.positioning import router as positioning_router

__all__ = [
    "game_router",
    "heatmap_router",
    "positioning_router",
]
