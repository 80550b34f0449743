"""Heat-map layer calculations.

Four independent full-field layers, each scoring a cell from one tactical
signal:

- catch: how attractive the spot is as a catch target
- difficulty: how hard the throw is, by distance
- marking difficulty: how much the mark takes the throw away
- coverage: whether a defender can get there first

Each layer begins with a block of named constants. Tweak the values there to
reshape a layer without touching the formula code.
"""

from __future__ import annotations

import math
from typing import Optional, Sequence

from huck.core.models import Disc, FieldDimensions, Player
from huck.core.vec2 import Vec2
from huck.heatmap.grid import Grid, GridSpec


# =============================================================================
# Catch-Value Layer Constants
# =============================================================================

# Every cell inside the scoring end zone gets the highest possible value
CATCH_END_ZONE_VALUE = 1.0

# Positional value is shifted from [0, 1] to [SCALE, 1]
CATCH_POSITION_SCALE = 0.5

# Width of the band along each sideline where the penalty applies
CATCH_SIDE_BOUNDARY_YARDS = 10.0

# Taper 1 - LINEAR * t - STEEP * t^EXPONENT, t = 0 at the band edge, 1 at the limit
CATCH_SIDELINE_LINEAR_PENALTY = 0.5
CATCH_SIDELINE_STEEP_COEFF = 0.7
CATCH_SIDELINE_EXPONENT = 8.0

# Shorter passes ramp from 0 up to full value: (dist / MIN) ^ EXPONENT
CATCH_MIN_PASS_DISTANCE_YARDS = 5.0
CATCH_SHORT_PASS_EXPONENT = 3.0

# Catches this far behind the disc (increasing x) are worthless
CATCH_MAX_THROWBACK_YARDS = 10.0


# =============================================================================
# Difficulty Layer Constants
# =============================================================================

# Raw difficulty = throw distance / SCALE
DIFFICULTY_DISTANCE_SCALE = 80.0

# After normalising by the field maximum: floor, then divide
DIFFICULTY_POST_NORM_MIN = 0.2
DIFFICULTY_POST_NORM_DIVISOR = 2.0


# =============================================================================
# Marking-Difficulty Layer Constants
# =============================================================================

# Throws at least this far off the forced direction are uncontested (45°)
MARK_EASY_ANGLE_RADIANS = math.pi / 4

# The mark forces the thrower toward this field point
MARK_FORCE_X = 20.0
MARK_FORCE_Y = 40.0

# distance_factor = 1 - dist / (SCALE * STRENGTH)
MARK_DISTANCE_SCALE = 60.0
MARK_DISTANCE_STRENGTH = 3.0

# Below this length a direction is undefined
MARK_DEGENERATE_YARDS = 0.001


# =============================================================================
# Coverage Layer Constants
# =============================================================================

# Added to each defender's distance: the offense's first-step advantage
COVERAGE_DEFENDER_HANDICAP_YARDS = 2.0

COVERAGE_FULLY_COVERED_VALUE = 0.0
COVERAGE_SEMI_COVERED_VALUE = 0.5
COVERAGE_OPEN_VALUE = 1.0


# =============================================================================
# Per-Cell Helpers
# =============================================================================

def _taper(t: float) -> float:
    """Smooth penalty curve shared by the sideline and throwback factors."""
    return (
        1.0
        - t * CATCH_SIDELINE_LINEAR_PENALTY
        - CATCH_SIDELINE_STEEP_COEFF * t ** CATCH_SIDELINE_EXPONENT
    )


def calculate_catch_value(x: float, y: float, disc: Disc, field: FieldDimensions) -> float:
    """Positional attractiveness of catching at (x, y), in [0, 1].

    Four multipliers are combined:
        1. Position value: forward progress toward the scoring end zone,
           mapped into [CATCH_POSITION_SCALE, 1].
        2. Sideline penalty: cells near a sideline are worth less.
        3. Backward factor: the sideline taper applied along the throwback
           axis; catches CATCH_MAX_THROWBACK_YARDS or more behind the disc
           are worth nothing.
        4. Short-pass factor: passes shorter than
           CATCH_MIN_PASS_DISTANCE_YARDS ramp up from zero.

    Args:
        x: Cell x in yards
        y: Cell y in yards
        disc: Current disc
        field: Field dimensions

    Returns:
        Catch value in [0, 1]
    """
    if x <= field.end_zone_depth:
        return CATCH_END_ZONE_VALUE

    throwback = max(x - disc.x, 0.0)
    if throwback >= CATCH_MAX_THROWBACK_YARDS:
        return 0.0
    backward_factor = _taper(throwback / CATCH_MAX_THROWBACK_YARDS)

    pass_dist = math.sqrt((x - disc.x) ** 2 + (y - disc.y) ** 2)
    short_pass_factor = (
        min(pass_dist / CATCH_MIN_PASS_DISTANCE_YARDS, 1.0) ** CATCH_SHORT_PASS_EXPONENT
    )

    raw_progress = min(max((disc.x - x) / field.field_length, 0.0), 1.0)
    position_value = raw_progress * CATCH_POSITION_SCALE + CATCH_POSITION_SCALE

    center_y = field.center_y
    dist_from_center = abs(y - center_y)
    if dist_from_center > center_y - CATCH_SIDE_BOUNDARY_YARDS:
        dist_from_sideline = center_y - dist_from_center
        center_bonus = _taper(1.0 - dist_from_sideline / CATCH_SIDE_BOUNDARY_YARDS)
    else:
        center_bonus = 1.0

    value = position_value * center_bonus * backward_factor * short_pass_factor
    return min(max(value, 0.0), 1.0)


def calculate_difficulty_at(x: float, y: float, disc: Disc) -> float:
    """Raw throw difficulty at (x, y): distance from the disc over 80 yards."""
    dist = math.sqrt((x - disc.x) ** 2 + (y - disc.y) ** 2)
    if dist <= 0.0:
        return 0.0
    return dist / DIFFICULTY_DISTANCE_SCALE


def calculate_ease_at(
    thrower_x: float,
    thrower_y: float,
    target_x: float,
    target_y: float,
) -> float:
    """Ease of throwing past the mark, in [0, 1].

    0 when throwing straight down the forced direction, rising linearly to 1
    at MARK_EASY_ANGLE_RADIANS off it.
    """
    thrower = Vec2(thrower_x, thrower_y)

    force = Vec2(MARK_FORCE_X, MARK_FORCE_Y) - thrower
    if force.length() < MARK_DEGENERATE_YARDS:
        # mark has no direction
        return 1.0

    throw = Vec2(target_x, target_y) - thrower
    if throw.length() < MARK_DEGENERATE_YARDS:
        return 0.0

    abs_angle = abs(force.normalized().signed_angle_to(throw.normalized()))
    if abs_angle >= MARK_EASY_ANGLE_RADIANS:
        return 1.0
    return abs_angle / MARK_EASY_ANGLE_RADIANS


def calculate_marking_difficulty_at(
    thrower_x: float,
    thrower_y: float,
    target_x: float,
    target_y: float,
    disc: Disc,
) -> float:
    """Marking value at the target: angular ease discounted by throw distance.

    The mark only matters for throws within MARK_DISTANCE_SCALE *
    MARK_DISTANCE_STRENGTH yards of the disc.
    """
    ease = calculate_ease_at(thrower_x, thrower_y, target_x, target_y)
    dist = math.sqrt((target_x - disc.x) ** 2 + (target_y - disc.y) ** 2)
    distance_factor = max(1.0 - dist / (MARK_DISTANCE_SCALE * MARK_DISTANCE_STRENGTH), 0.0)
    return 1.0 - (1.0 - ease) * distance_factor


# =============================================================================
# Layer Builders
# =============================================================================

def get_catch_layer(spec: GridSpec, disc: Disc, field: FieldDimensions) -> Grid:
    """Catch-value layer, values in [0, 1]."""
    values = spec.zeros()
    for i, j, cx, cy in spec.cells():
        values[i][j] = calculate_catch_value(cx, cy, disc, field)
    return values


def get_difficulty_layer(spec: GridSpec, disc: Disc) -> Grid:
    """Difficulty layer, values in [0.1, 0.5].

    Raw distances are normalised so the hardest throw on the current field
    maps to 1.0, then floored and halved. A field whose every raw value is
    zero is returned untouched.
    """
    values = spec.zeros()
    max_difficulty = 0.0
    for i, j, cx, cy in spec.cells():
        d = calculate_difficulty_at(cx, cy, disc)
        values[i][j] = d
        if d > max_difficulty:
            max_difficulty = d

    if max_difficulty > 0.0:
        for column in values:
            for j, d in enumerate(column):
                column[j] = (
                    max(d / max_difficulty, DIFFICULTY_POST_NORM_MIN)
                    / DIFFICULTY_POST_NORM_DIVISOR
                )
    return values


def get_marking_difficulty_layer(
    spec: GridSpec,
    players: Sequence[Player],
    disc: Disc,
) -> Optional[tuple[Grid, float, float]]:
    """Marking-difficulty layer, values in [0, 1].

    Returns:
        (values, thrower_x, thrower_y), or None when nobody holds the disc
    """
    thrower = next((p for p in players if p.has_disc), None)
    if thrower is None:
        return None
    tx, ty = thrower.x, thrower.y

    values = spec.zeros()
    for i, j, cx, cy in spec.cells():
        values[i][j] = calculate_marking_difficulty_at(tx, ty, cx, cy, disc)
    return values, tx, ty


def get_coverage_layer(spec: GridSpec, players: Sequence[Player], disc: Disc) -> Grid:
    """Coverage layer, values in {0.0, 0.5, 1.0}.

    The thrower and the mark are left out of both sides so the layer shows
    downfield open and covered areas only.
    """
    offense = [(p.x, p.y) for p in players if not p.is_defender and not p.has_disc]
    defense = [(p.x, p.y) for p in players if p.is_defender and not p.is_mark]

    values = spec.zeros()
    for i, j, cx, cy in spec.cells():
        disc_to_cell = math.sqrt((cx - disc.x) ** 2 + (cy - disc.y) ** 2)

        min_off = min(
            (math.sqrt((cx - px) ** 2 + (cy - py) ** 2) for px, py in offense),
            default=math.inf,
        )
        min_def = min(
            (math.sqrt((cx - px) ** 2 + (cy - py) ** 2) for px, py in defense),
            default=math.inf,
        ) + COVERAGE_DEFENDER_HANDICAP_YARDS

        covered = COVERAGE_FULLY_COVERED_VALUE if min_off >= min_def else COVERAGE_OPEN_VALUE
        semi = COVERAGE_SEMI_COVERED_VALUE if min_def < disc_to_cell / 2.0 else COVERAGE_OPEN_VALUE
        values[i][j] = min(covered, semi)
    return values
