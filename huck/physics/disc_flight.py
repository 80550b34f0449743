"""Disc flight physics.

A thrown disc travels in a straight line, slowing by a constant drag factor
each step until it is caught or drops below the landing speed. A held disc
simply follows its holder.
"""

from __future__ import annotations

import logging

from huck.core.models import GameState
from huck.core.vec2 import Vec2

logger = logging.getLogger(__name__)

# =============================================================================
# Constants
# =============================================================================

# Velocity multiplier applied once per step
DRAG_FACTOR = 0.98

# Disc lands once both velocity components are below this (yards/s)
STOP_SPEED = 0.1

# Players closer than this to an in-flight disc catch it (yards)
CATCH_RADIUS_YARDS = 2.0

# Default release speed (yards/s)
DEFAULT_THROW_SPEED = 30.0

# Targets closer than this to the disc give no throw direction
MIN_THROW_DISTANCE = 0.001


def update(game_state: GameState, delta_time: float) -> None:
    """Advance the disc by delta_time seconds.

    In flight: integrate position, apply drag, land when slow, then check
    for a catch (first player in list order within CATCH_RADIUS_YARDS).
    Held: snap to the holder's position.
    """
    disc = game_state.disc

    if disc.in_flight:
        disc.move_to(disc.pos + disc.velocity * delta_time)
        disc.set_velocity(disc.velocity * DRAG_FACTOR)

        if abs(disc.vx) < STOP_SPEED and abs(disc.vy) < STOP_SPEED:
            disc.in_flight = False
            disc.set_velocity(Vec2.zero())
            logger.debug("Disc landed at %s", disc.pos)

        _check_catch(game_state)
        return

    holder = game_state.holder()
    if holder is not None:
        disc.move_to(holder.pos)


def _check_catch(game_state: GameState) -> None:
    disc = game_state.disc
    if not disc.in_flight:
        return

    for player in game_state.players:
        if player.pos.distance_to(disc.pos) < CATCH_RADIUS_YARDS:
            disc.in_flight = False
            disc.set_velocity(Vec2.zero())
            disc.holder_id = player.id
            disc.move_to(player.pos)
            player.has_disc = True
            logger.debug("Player %s caught the disc at %s", player.id, player.pos)
            return


def throw_disc(
    game_state: GameState,
    target_x: float,
    target_y: float,
    speed: float = DEFAULT_THROW_SPEED,
) -> None:
    """Release the disc toward (target_x, target_y) at the given speed.

    Does nothing when nobody holds the disc or the target is on top of it.
    """
    holder = game_state.holder()
    if holder is None:
        return

    disc = game_state.disc
    offset = Vec2(target_x, target_y) - disc.pos
    if offset.length() < MIN_THROW_DISTANCE:
        return

    disc.set_velocity(offset.normalized() * speed)
    disc.in_flight = True
    disc.holder_id = None
    holder.has_disc = False
    logger.debug("Disc thrown toward (%.1f, %.1f) at %.1f yd/s", target_x, target_y, speed)
