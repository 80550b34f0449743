"""Field, player and disc entities.

These are the plain data holders every heat-map, positioning and physics
operation works on. Each request owns its own GameState; operations mutate
that copy in place and never share it.
"""

from __future__ import annotations

import copy
from dataclasses import dataclass, field as dc_field
from typing import Optional

from .vec2 import Vec2


# =============================================================================
# Field Dimensions (yards)
# =============================================================================

FIELD_LENGTH = 70.0         # Goal line to goal line
FIELD_WIDTH = 40.0
END_ZONE_DEPTH = 20.0

# Coordinate system:
#   x in [0, total_length], x <= end_zone_depth is the scoring end zone
#   y in [0, field_width], y = field_width / 2 is the center line
#   The offense attacks toward x = 0.


@dataclass(frozen=True)
class FieldDimensions:
    """Playing field geometry for one request.

    Attributes:
        field_length: Goal line to goal line
        field_width: Sideline to sideline
        end_zone_depth: Depth of each end zone
        total_length: field_length plus both end zones
    """
    field_length: float = FIELD_LENGTH
    field_width: float = FIELD_WIDTH
    end_zone_depth: float = END_ZONE_DEPTH
    total_length: float = FIELD_LENGTH + 2 * END_ZONE_DEPTH

    def __post_init__(self) -> None:
        if self.total_length < self.field_length:
            raise ValueError(
                f"total_length ({self.total_length}) must be >= field_length ({self.field_length})"
            )

    @classmethod
    def standard(cls) -> FieldDimensions:
        """70 x 40 field with 20 yard end zones."""
        return cls()

    @property
    def center_y(self) -> float:
        return self.field_width / 2.0

    def contains(self, x: float, y: float) -> bool:
        """Check if position is within field boundaries."""
        return 0.0 <= x <= self.total_length and 0.0 <= y <= self.field_width


# =============================================================================
# Entities
# =============================================================================

@dataclass
class Player:
    """A player on the field.

    A defender flagged ``is_mark`` guards the thrower directly; it takes no
    part in coverage and is never moved by the positioning engine.
    ``label`` pairs an offender with the defender guarding them ("1", "2").
    """
    id: str
    team: int
    x: float
    y: float
    color: str = ""
    has_disc: bool = False
    is_defender: bool = False
    is_mark: bool = False
    label: Optional[str] = None

    @property
    def pos(self) -> Vec2:
        return Vec2(self.x, self.y)

    def move_to(self, pos: Vec2) -> None:
        self.x = pos.x
        self.y = pos.y

    @property
    def is_offender(self) -> bool:
        """Offensive player available to receive (not holding the disc)."""
        return not self.is_defender and not self.has_disc


@dataclass
class Disc:
    """The disc.

    Either held (``in_flight`` False, follows its holder) or in flight with a
    velocity in yards per second.
    """
    x: float
    y: float
    holder_id: Optional[str] = None
    vx: float = 0.0
    vy: float = 0.0
    in_flight: bool = False

    @property
    def pos(self) -> Vec2:
        return Vec2(self.x, self.y)

    @property
    def velocity(self) -> Vec2:
        return Vec2(self.vx, self.vy)

    def move_to(self, pos: Vec2) -> None:
        self.x = pos.x
        self.y = pos.y

    def set_velocity(self, velocity: Vec2) -> None:
        self.vx = velocity.x
        self.vy = velocity.y


@dataclass
class GameState:
    """Snapshot of everything on the field."""
    players: list[Player] = dc_field(default_factory=list)
    disc: Disc = dc_field(default_factory=lambda: Disc(0.0, 0.0))
    field: FieldDimensions = dc_field(default_factory=FieldDimensions.standard)

    def thrower(self) -> Optional[Player]:
        """The player currently holding the disc, if any."""
        return next((p for p in self.players if p.has_disc), None)

    def holder(self) -> Optional[Player]:
        """Player referenced by the disc's holder_id, falling back to the thrower."""
        if self.disc.holder_id is not None:
            for p in self.players:
                if p.id == self.disc.holder_id:
                    return p
        return self.thrower()

    def find_offender(self, label: Optional[str] = None) -> Optional[Player]:
        """First offender without the disc, matching label when one is given."""
        for p in self.players:
            if p.is_offender and (label is None or p.label == label):
                return p
        return None

    def find_defender(self, label: Optional[str] = None) -> Optional[Player]:
        """First non-mark defender, matching label when one is given."""
        for p in self.players:
            if p.is_defender and not p.is_mark and (label is None or p.label == label):
                return p
        return None

    def copy(self) -> GameState:
        return copy.deepcopy(self)
