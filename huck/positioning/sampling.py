"""Offender placement by weighted random sampling of the combined heat map."""

from __future__ import annotations

import logging
import random
from typing import Optional, Protocol

from huck.core.models import GameState
from huck.core.vec2 import Vec2
from huck.heatmap.grid import Grid, GridSpec
from huck.heatmap.layers import (
    get_catch_layer,
    get_coverage_layer,
    get_difficulty_layer,
    get_marking_difficulty_layer,
)

logger = logging.getLogger(__name__)


class RandomSource(Protocol):
    """Anything that draws uniform floats in [0, 1); random.Random qualifies."""

    def random(self) -> float:
        ...


def sample_weighted_cell(weights: Grid, rng: RandomSource) -> Optional[tuple[int, int]]:
    """Roulette-wheel pick of one cell, probability proportional to its weight.

    One uniform draw in [0, total) is made; cells are walked in scan order
    (x outer, y inner) accumulating weight, and the first positive-weight
    cell whose running total reaches the draw is chosen.

    Returns:
        (i, j) of the chosen cell, or None when the total weight is not positive
    """
    total = 0.0
    for column in weights:
        for w in column:
            total += w
    if total <= 0.0:
        return None

    threshold = rng.random() * total
    cumulative = 0.0
    last_positive: Optional[tuple[int, int]] = None
    for i, column in enumerate(weights):
        for j, w in enumerate(column):
            if w <= 0.0:
                continue
            cumulative += w
            last_positive = (i, j)
            if cumulative >= threshold:
                return last_positive
    # rounding left the running total just short of the draw
    return last_positive


def offender_weights(game_state: GameState, spec: GridSpec) -> Optional[Grid]:
    """Per-cell catch * (1 - difficulty) * marking * coverage, or None without a thrower."""
    disc = game_state.disc
    players = game_state.players

    marking = get_marking_difficulty_layer(spec, players, disc)
    if marking is None:
        return None
    mark = marking[0]
    catch = get_catch_layer(spec, disc, game_state.field)
    diff = get_difficulty_layer(spec, disc)
    cov = get_coverage_layer(spec, players, disc)

    return [
        [catch[i][j] * (1.0 - diff[i][j]) * mark[i][j] * cov[i][j] for j in range(spec.num_cells_y)]
        for i in range(spec.num_cells_x)
    ]


def position_offender_optimal(
    game_state: GameState,
    grid_size: float,
    label: Optional[str] = None,
    rng: Optional[RandomSource] = None,
) -> Optional[tuple[float, float]]:
    """Move an offender to a cell sampled from the combined heat map.

    Sampling is weighted so the offender favours open, valuable space without
    always picking the same cell.

    Args:
        game_state: State to modify; the chosen offender is moved in place
        grid_size: Yards per cell
        label: Pair label the offender must carry, if given
        rng: Uniform random source; a fresh random.Random when omitted

    Returns:
        The offender's new (x, y), or None when no offender matches, nobody
        holds the disc, or every cell has zero weight
    """
    offender = game_state.find_offender(label)
    if offender is None:
        return None

    spec = GridSpec.for_field(game_state.field, grid_size)
    weights = offender_weights(game_state, spec)
    if weights is None:
        return None

    picked = sample_weighted_cell(weights, rng if rng is not None else random.Random())
    if picked is None:
        return None

    field = game_state.field
    target = Vec2(*spec.center(*picked)).clamped_to_box(field.total_length, field.field_width)
    offender.move_to(target)
    logger.debug("Offender %s sampled cell %s -> %s", offender.id, picked, target)
    return target.x, target.y
