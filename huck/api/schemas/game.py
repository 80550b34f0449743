"""Pydantic schemas for game state.

Field names are camelCase on the wire so the browser frontend can post its
objects without any key transformation.
"""

from dataclasses import asdict
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field, model_validator
from pydantic.alias_generators import to_camel

from huck.core.models import Disc, FieldDimensions, GameState, Player


class CamelModel(BaseModel):
    """Base schema: camelCase aliases, snake_case attributes accepted too."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class FieldDimensionsSchema(CamelModel):
    """Field geometry in yards."""

    field_length: float = Field(gt=0)
    field_width: float = Field(gt=0)
    end_zone_depth: float = Field(ge=0)
    total_length: float = Field(gt=0)

    @model_validator(mode="after")
    def check_total_length(self) -> "FieldDimensionsSchema":
        if self.total_length < self.field_length:
            raise ValueError("totalLength must be at least fieldLength")
        return self


class PlayerSchema(CamelModel):
    """A player on the field."""

    id: str
    team: int
    x: float
    y: float
    color: str = ""
    has_disc: bool = False
    is_defender: bool = False
    is_mark: bool = False
    label: Optional[str] = None


class DiscSchema(CamelModel):
    """The disc, held or in flight."""

    x: float
    y: float
    holder_id: Optional[str] = None
    vx: float = 0.0
    vy: float = 0.0
    in_flight: bool = False


class GameStateSchema(CamelModel):
    """Complete game-state snapshot."""

    players: list[PlayerSchema]
    disc: DiscSchema
    field: FieldDimensionsSchema

    def to_domain(self) -> GameState:
        """Build a fresh, request-owned GameState."""
        return GameState(
            players=[Player(**p.model_dump()) for p in self.players],
            disc=Disc(**self.disc.model_dump()),
            field=FieldDimensions(**self.field.model_dump()),
        )

    @classmethod
    def from_domain(cls, state: GameState) -> "GameStateSchema":
        return cls(
            players=[PlayerSchema(**asdict(p)) for p in state.players],
            disc=DiscSchema(**asdict(state.disc)),
            field=FieldDimensionsSchema(**asdict(state.field)),
        )
