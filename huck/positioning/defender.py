"""Optimal defender placement by exhaustive local search.

Every cell within DEFENDER_SEARCH_RADIUS_YARDS of the offender is tried as
the defender's spot; the one minimising the combined heat-map sum wins.
All other players stay where they are, so their coverage counts too.
"""

from __future__ import annotations

import logging
import math
from typing import Optional

from huck.core.models import GameState
from huck.core.vec2 import Vec2
from huck.heatmap.combiner import combined_heat_map_sum
from huck.heatmap.grid import Grid, GridSpec
from huck.heatmap.layers import (
    get_catch_layer,
    get_coverage_layer,
    get_difficulty_layer,
    get_marking_difficulty_layer,
)

logger = logging.getLogger(__name__)

# Candidate cells must lie within this distance of the offender (inclusive)
DEFENDER_SEARCH_RADIUS_YARDS = 5.0


class _StaticLayers:
    """Per-cell catch * (1 - difficulty) * marking for one search.

    None of the three depend on where a non-throwing defender stands, so they
    are computed once and only coverage is rebuilt per candidate. The product
    is formed in the same order as combined_heat_map_sum, keeping the sums
    bit-identical.
    """

    def __init__(self, spec: GridSpec, base: Grid) -> None:
        self.spec = spec
        self.base = base

    @classmethod
    def build(cls, game_state: GameState, spec: GridSpec) -> Optional[_StaticLayers]:
        disc = game_state.disc
        marking = get_marking_difficulty_layer(spec, game_state.players, disc)
        if marking is None:
            return None
        mark = marking[0]
        catch = get_catch_layer(spec, disc, game_state.field)
        diff = get_difficulty_layer(spec, disc)
        base = [
            [catch[i][j] * (1.0 - diff[i][j]) * mark[i][j] for j in range(spec.num_cells_y)]
            for i in range(spec.num_cells_x)
        ]
        return cls(spec, base)

    def total(self, game_state: GameState) -> float:
        cov = get_coverage_layer(self.spec, game_state.players, game_state.disc)
        total = 0.0
        for i in range(self.spec.num_cells_x):
            for j in range(self.spec.num_cells_y):
                total += self.base[i][j] * cov[i][j]
        return total


def position_defender_optimal(
    game_state: GameState,
    grid_size: float,
    label: Optional[str] = None,
) -> Optional[tuple[float, float]]:
    """Move a defender to the spot near its offender that is best for the defense.

    Cells are scanned x outer, y inner; a later cell replaces the best only
    on a strictly smaller sum, so ties go to the first cell scanned. If no
    candidate yields a sum (nobody holds the disc, or no cell in range) the
    defender stays put and its current position is still returned.

    Args:
        game_state: State to modify; the chosen defender is moved in place
        grid_size: Yards per cell
        label: Pair label; when given, both offender and defender must match

    Returns:
        The defender's new (x, y), or None when no offender or defender matches
    """
    offender = game_state.find_offender(label)
    if offender is None:
        return None
    defender = game_state.find_defender(label)
    if defender is None:
        return None

    field = game_state.field
    spec = GridSpec.for_field(field, grid_size)
    origin = offender.pos

    static = None if defender.has_disc else _StaticLayers.build(game_state, spec)

    best_sum = math.inf
    best = defender.pos
    for _, _, cx, cy in spec.cells():
        dx = cx - origin.x
        dy = cy - origin.y
        if dx * dx + dy * dy > DEFENDER_SEARCH_RADIUS_YARDS * DEFENDER_SEARCH_RADIUS_YARDS:
            continue

        candidate = Vec2(cx, cy).clamped_to_box(field.total_length, field.field_width)
        defender.move_to(candidate)

        if static is not None:
            total: Optional[float] = static.total(game_state)
        else:
            total = combined_heat_map_sum(game_state, grid_size)

        if total is not None and total < best_sum:
            best_sum = total
            best = candidate

    defender.move_to(best)
    logger.debug(
        "Defender %s placed at %s (sum=%s)", defender.id, best,
        best_sum if best_sum != math.inf else None,
    )
    return best.x, best.y
