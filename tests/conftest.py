"""Shared pytest fixtures for Huck tests."""

import pytest

from huck.core import Disc, FieldDimensions, GameState, Player


# =============================================================================
# Field Fixtures
# =============================================================================


@pytest.fixture
def standard_field() -> FieldDimensions:
    """70 x 40 field, 20 yard end zones (110 total)."""
    return FieldDimensions.standard()


# =============================================================================
# Game State Fixtures
# =============================================================================


@pytest.fixture
def thrower() -> Player:
    """Offense player holding the disc."""
    return Player(id="offense_1", team=1, x=80.0, y=15.0, has_disc=True)


@pytest.fixture
def demo_state(standard_field, thrower) -> GameState:
    """Thrower with a mark, plus one labelled offender/defender pair downfield."""
    return GameState(
        players=[
            thrower,
            Player(id="mark_1", team=2, x=79.0, y=16.0, is_defender=True, is_mark=True),
            Player(id="offense_2", team=1, x=55.0, y=15.0, label="1"),
            Player(id="defender_2", team=2, x=55.0, y=14.0, is_defender=True, label="1"),
        ],
        disc=Disc(x=80.0, y=15.0, holder_id="offense_1"),
        field=standard_field,
    )


@pytest.fixture
def no_thrower_state(demo_state) -> GameState:
    """Demo state with nobody holding the disc."""
    state = demo_state.copy()
    for player in state.players:
        player.has_disc = False
    state.disc.holder_id = None
    return state


@pytest.fixture
def game_state_payload() -> dict:
    """Demo state as the frontend posts it (camelCase JSON)."""
    return {
        "players": [
            {"id": "offense_1", "team": 1, "x": 80, "y": 15, "color": "#ef4444",
             "hasDisc": True, "isDefender": False, "isMark": False},
            {"id": "mark_1", "team": 2, "x": 79, "y": 16, "color": "#3b82f6",
             "hasDisc": False, "isDefender": True, "isMark": True},
            {"id": "offense_2", "team": 1, "x": 55, "y": 15, "color": "#ef4444",
             "hasDisc": False, "isDefender": False, "isMark": False, "label": "1"},
            {"id": "defender_2", "team": 2, "x": 55, "y": 14, "color": "#3b82f6",
             "hasDisc": False, "isDefender": True, "isMark": False, "label": "1"},
        ],
        "disc": {"x": 80, "y": 15, "holderId": "offense_1"},
        "field": {"fieldLength": 70, "fieldWidth": 40, "endZoneDepth": 20, "totalLength": 110},
    }
