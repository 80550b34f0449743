"""Fixed "stack" formation placement."""

from __future__ import annotations

from typing import Optional

from huck.core.models import GameState

# Stack sits this far downfield (lower x) of the disc
STACK_DEPTH_YARDS = 20.0


def position_offender_stack(game_state: GameState) -> Optional[tuple[float, float]]:
    """Move the first eligible offender to the stack spot.

    The spot is STACK_DEPTH_YARDS toward the scoring end zone from the disc,
    in the middle of the field.

    Returns:
        The offender's new (x, y), or None when there is no offender without the disc
    """
    offender = game_state.find_offender()
    if offender is None:
        return None

    field = game_state.field
    offender.x = min(max(game_state.disc.x - STACK_DEPTH_YARDS, 0.0), field.total_length)
    offender.y = field.center_y
    return offender.x, offender.y
