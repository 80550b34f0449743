"""Pydantic schemas for heat-map endpoints."""

from typing import Optional

from pydantic import Field

from huck.api.schemas.game import CamelModel, GameStateSchema
from huck.heatmap import HeatMapData, HeatMapModes


class HeatMapModesSchema(CamelModel):
    """Layer selection flags."""

    catch: bool = False
    difficulty: bool = False
    marking_difficulty: bool = False
    coverage: bool = False

    def to_domain(self) -> HeatMapModes:
        return HeatMapModes(**self.model_dump())


class HeatMapRequest(CamelModel):
    """Request for a (possibly combined) heat map."""

    game_state: GameStateSchema
    modes: HeatMapModesSchema
    normalize: bool = False
    grid_size: Optional[float] = Field(default=None, gt=0)


class HeatMapResponse(CamelModel):
    """Heat map values indexed [x][y]."""

    grid_size: float
    values: list[list[float]]
    thrower_x: float
    thrower_y: float
    mode: str

    @classmethod
    def from_domain(cls, data: HeatMapData) -> "HeatMapResponse":
        return cls(
            grid_size=data.grid_size,
            values=data.values,
            thrower_x=data.thrower_x,
            thrower_y=data.thrower_y,
            mode=data.mode,
        )


class HeatMapSumRequest(CamelModel):
    """Request for the scalar combined heat-map sum."""

    game_state: GameStateSchema
    grid_size: Optional[float] = Field(default=None, gt=0)


class HeatMapSumResponse(CamelModel):
    """Combined sum, null when nobody holds the disc."""

    sum: Optional[float] = None
