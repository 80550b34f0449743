"""2D Vector implementation for field geometry.

Positions and velocities in the physics step and the marking layer use Vec2.
Units are yards unless otherwise specified.
"""

from __future__ import annotations

import math
from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class Vec2:
    """Immutable 2D vector.

    Coordinate system:
        Origin (0, 0) = Corner of the scoring end zone on the first sideline
        +X = Along the field, away from the scoring end zone
        +Y = Across the field, toward the far sideline

    All units in yards.
    """
    x: float = 0.0
    y: float = 0.0

    # =========================================================================
    # Arithmetic Operations
    # =========================================================================

    def __add__(self, other: Vec2) -> Vec2:
        return Vec2(self.x + other.x, self.y + other.y)

    def __sub__(self, other: Vec2) -> Vec2:
        return Vec2(self.x - other.x, self.y - other.y)

    def __mul__(self, scalar: float) -> Vec2:
        return Vec2(self.x * scalar, self.y * scalar)

    # =========================================================================
    # Vector Operations
    # =========================================================================

    def dot(self, other: Vec2) -> float:
        """Dot product."""
        return self.x * other.x + self.y * other.y

    def cross(self, other: Vec2) -> float:
        """2D cross product (returns scalar z-component)."""
        return self.x * other.y - self.y * other.x

    def length(self) -> float:
        """Magnitude of vector."""
        return math.sqrt(self.x * self.x + self.y * self.y)

    def normalized(self) -> Vec2:
        """Unit vector in same direction."""
        length = self.length()
        if length < 0.0001:
            return Vec2(0, 0)
        return Vec2(self.x / length, self.y / length)

    def distance_to(self, other: Vec2) -> float:
        """Euclidean distance to another point."""
        return (other - self).length()

    def signed_angle_to(self, other: Vec2) -> float:
        """Signed angle from this vector to another (-π to π).

        Uses atan2 of the cross and dot products, so neither vector needs to
        be unit length.
        """
        return math.atan2(self.cross(other), self.dot(other))

    # =========================================================================
    # Utility
    # =========================================================================

    def clamped_to_box(self, max_x: float, max_y: float) -> Vec2:
        """Return vector with each component clamped into [0, max]."""
        return Vec2(min(max(self.x, 0.0), max_x), min(max(self.y, 0.0), max_y))

    def __repr__(self) -> str:
        return f"Vec2({self.x:.2f}, {self.y:.2f})"

    def __str__(self) -> str:
        return f"({self.x:.2f}, {self.y:.2f})"

    # =========================================================================
    # Class Methods
    # =========================================================================

    @classmethod
    def zero(cls) -> Vec2:
        """Zero vector."""
        return cls(0, 0)
