"""Combine heat-map layers into one grid, or into one scalar.

Layers are multiplied cell by cell. Difficulty is inverted (1 - v) before
multiplying so a high combined value always means favourable for the offense.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Optional

from huck.core.models import GameState
from huck.heatmap.grid import Grid, GridSpec
from huck.heatmap.layers import (
    get_catch_layer,
    get_coverage_layer,
    get_difficulty_layer,
    get_marking_difficulty_layer,
)

logger = logging.getLogger(__name__)

LAYER_CATCH = "catch"
LAYER_DIFFICULTY = "difficulty"
LAYER_MARKING_DIFFICULTY = "markingDifficulty"
LAYER_COVERAGE = "coverage"
MODE_COMBINED = "combined"


@dataclass(frozen=True)
class HeatMapModes:
    """Which layers to include in a heat map."""
    catch: bool = False
    difficulty: bool = False
    marking_difficulty: bool = False
    coverage: bool = False

    @classmethod
    def all_enabled(cls) -> HeatMapModes:
        return cls(catch=True, difficulty=True, marking_difficulty=True, coverage=True)

    def any_enabled(self) -> bool:
        return self.catch or self.difficulty or self.marking_difficulty or self.coverage


@dataclass
class HeatMapData:
    """A computed heat map.

    Attributes:
        grid_size: Yards per cell
        values: Cell values indexed [x][y]
        thrower_x: Thrower x used by the marking layer (disc x otherwise)
        thrower_y: Thrower y used by the marking layer (disc y otherwise)
        mode: The single active layer's key, or "combined"
    """
    grid_size: float
    values: Grid
    thrower_x: float
    thrower_y: float
    mode: str


def _normalize_in_place(values: Grid) -> None:
    """Min-max scale to [0, 1]; flat grids are left unchanged."""
    lo = min((v for column in values for v in column), default=0.0)
    hi = max((v for column in values for v in column), default=0.0)
    span = hi - lo
    if span <= 0.0:
        return
    for column in values:
        for j, v in enumerate(column):
            column[j] = (v - lo) / span


def calculate_heat_map(
    game_state: GameState,
    modes: HeatMapModes,
    normalize: bool,
    grid_size: float,
) -> Optional[HeatMapData]:
    """Compute the product of whichever layers are enabled.

    The marking layer is dropped silently when nobody holds the disc.

    Args:
        game_state: Current state (not modified)
        modes: Layers to include
        normalize: Apply global min-max scaling to the result
        grid_size: Yards per cell

    Returns:
        HeatMapData, or None when no layer ends up selected
    """
    disc = game_state.disc
    players = game_state.players
    spec = GridSpec.for_field(game_state.field, grid_size)

    layers: list[tuple[str, Grid]] = []
    thrower_x, thrower_y = disc.x, disc.y

    if modes.catch:
        layers.append((LAYER_CATCH, get_catch_layer(spec, disc, game_state.field)))
    if modes.difficulty:
        layers.append((LAYER_DIFFICULTY, get_difficulty_layer(spec, disc)))
    if modes.marking_difficulty:
        marking = get_marking_difficulty_layer(spec, players, disc)
        if marking is not None:
            values, thrower_x, thrower_y = marking
            layers.append((LAYER_MARKING_DIFFICULTY, values))
        else:
            logger.debug("Marking layer requested without a disc holder; skipping it")
    if modes.coverage:
        layers.append((LAYER_COVERAGE, get_coverage_layer(spec, players, disc)))

    if not layers:
        return None

    values = spec.zeros()
    for i in range(spec.num_cells_x):
        for j in range(spec.num_cells_y):
            product = 1.0
            for key, layer in layers:
                v = layer[i][j]
                product *= 1.0 - v if key == LAYER_DIFFICULTY else v
            values[i][j] = product

    if normalize:
        _normalize_in_place(values)

    mode = layers[0][0] if len(layers) == 1 else MODE_COMBINED
    return HeatMapData(
        grid_size=grid_size,
        values=values,
        thrower_x=thrower_x,
        thrower_y=thrower_y,
        mode=mode,
    )


def combined_heat_map_sum(game_state: GameState, grid_size: float) -> Optional[float]:
    """Sum of catch * (1 - difficulty) * marking * coverage over every cell.

    All four layers, no normalisation. Lower means a better state for the
    defense, higher a better one for the offense.

    Returns:
        The sum, or None when nobody holds the disc
    """
    disc = game_state.disc
    players = game_state.players
    spec = GridSpec.for_field(game_state.field, grid_size)

    marking = get_marking_difficulty_layer(spec, players, disc)
    if marking is None:
        return None
    mark = marking[0]
    catch = get_catch_layer(spec, disc, game_state.field)
    diff = get_difficulty_layer(spec, disc)
    cov = get_coverage_layer(spec, players, disc)

    total = 0.0
    for i in range(spec.num_cells_x):
        for j in range(spec.num_cells_y):
            total += catch[i][j] * (1.0 - diff[i][j]) * mark[i][j] * cov[i][j]
    return total
