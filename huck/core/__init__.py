"""Core entities and geometry."""

from huck.core.models import Disc, FieldDimensions, GameState, Player
from huck.core.vec2 import Vec2

__all__ = ["Disc", "FieldDimensions", "GameState", "Player", "Vec2"]
