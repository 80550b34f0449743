"""Grid geometry shared by every heat-map layer."""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Iterator

from huck.core.models import FieldDimensions

Grid = list[list[float]]
"""Cell values indexed ``[x][y]``: outer index along the field, inner across it."""


@dataclass(frozen=True)
class GridSpec:
    """Cell layout over the field for a given cell size (yards per cell)."""
    num_cells_x: int
    num_cells_y: int
    grid_size: float

    @classmethod
    def for_field(cls, field: FieldDimensions, grid_size: float) -> GridSpec:
        if grid_size <= 0:
            raise ValueError(f"grid_size must be positive, got {grid_size}")
        return cls(
            num_cells_x=math.ceil(field.total_length / grid_size),
            num_cells_y=math.ceil(field.field_width / grid_size),
            grid_size=grid_size,
        )

    def center(self, i: int, j: int) -> tuple[float, float]:
        """Center of cell (i, j) in field yards."""
        half = self.grid_size / 2.0
        return i * self.grid_size + half, j * self.grid_size + half

    def cells(self) -> Iterator[tuple[int, int, float, float]]:
        """Yield (i, j, cx, cy) in scan order: x outer, y inner."""
        for i in range(self.num_cells_x):
            for j in range(self.num_cells_y):
                cx, cy = self.center(i, j)
                yield i, j, cx, cy

    def zeros(self) -> Grid:
        return [[0.0] * self.num_cells_y for _ in range(self.num_cells_x)]
