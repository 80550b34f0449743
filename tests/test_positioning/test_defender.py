"""Tests for optimal defender placement."""

import math

import pytest

from huck.heatmap import combined_heat_map_sum
from huck.heatmap.grid import GridSpec
from huck.positioning import position_defender_optimal
from huck.positioning.defender import DEFENDER_SEARCH_RADIUS_YARDS


GRID = 2.0


def brute_force_best(state, grid_size, defender_index, offender_index):
    """Reference search: full combined sum for every candidate cell."""
    spec = GridSpec.for_field(state.field, grid_size)
    offender = state.players[offender_index]
    best_sum = math.inf
    best = None
    for _, _, cx, cy in spec.cells():
        if (cx - offender.x) ** 2 + (cy - offender.y) ** 2 > DEFENDER_SEARCH_RADIUS_YARDS ** 2:
            continue
        trial = state.copy()
        trial.players[defender_index].x = min(max(cx, 0.0), state.field.total_length)
        trial.players[defender_index].y = min(max(cy, 0.0), state.field.field_width)
        total = combined_heat_map_sum(trial, grid_size)
        if total is not None and total < best_sum:
            best_sum = total
            best = (trial.players[defender_index].x, trial.players[defender_index].y)
    return best, best_sum


class TestDefenderSearch:
    """Tests for the exhaustive local search."""

    def test_matches_brute_force(self, demo_state):
        expected, expected_sum = brute_force_best(demo_state, GRID, 3, 2)
        result = position_defender_optimal(demo_state, GRID, "1")
        assert result == expected
        assert combined_heat_map_sum(demo_state, GRID) == expected_sum

    def test_moves_defender_in_place(self, demo_state):
        result = position_defender_optimal(demo_state, GRID, "1")
        defender = demo_state.players[3]
        assert (defender.x, defender.y) == result

    def test_result_within_search_radius(self, demo_state):
        x, y = position_defender_optimal(demo_state, GRID, "1")
        assert math.hypot(x - 55.0, y - 15.0) <= DEFENDER_SEARCH_RADIUS_YARDS

    def test_does_not_raise_the_sum(self, demo_state):
        """The chosen cell is at least as good as any other candidate."""
        position_defender_optimal(demo_state, GRID, "1")
        best = combined_heat_map_sum(demo_state, GRID)
        demo_state.players[3].x = 57.0
        demo_state.players[3].y = 15.0
        assert best <= combined_heat_map_sum(demo_state, GRID)

    def test_without_label_uses_first_pair(self, demo_state):
        assert position_defender_optimal(demo_state.copy(), GRID) == \
            position_defender_optimal(demo_state, GRID, "1")

    def test_other_players_unchanged(self, demo_state):
        before = demo_state.copy()
        position_defender_optimal(demo_state, GRID, "1")
        for index in (0, 1, 2):
            assert demo_state.players[index] == before.players[index]
        assert demo_state.disc == before.disc

    def test_candidates_clamped_to_field(self, demo_state):
        demo_state.players[2].x = 1.0
        demo_state.players[2].y = 39.5
        x, y = position_defender_optimal(demo_state, GRID, "1")
        assert demo_state.field.contains(x, y)


class TestDefenderPreconditions:
    """Tests for absent results and the no-thrower fallback."""

    def test_unknown_label_is_absent(self, demo_state):
        assert position_defender_optimal(demo_state, GRID, "9") is None

    def test_no_offender_is_absent(self, demo_state):
        del demo_state.players[2]
        assert position_defender_optimal(demo_state, GRID) is None

    def test_mark_is_never_moved(self, demo_state):
        del demo_state.players[3]
        assert position_defender_optimal(demo_state, GRID) is None
        assert (demo_state.players[1].x, demo_state.players[1].y) == (79.0, 16.0)

    def test_no_thrower_keeps_position(self, no_thrower_state):
        """No candidate has a sum; the defender stays and its spot is returned."""
        assert position_defender_optimal(no_thrower_state, GRID, "1") == (55.0, 14.0)
        assert (no_thrower_state.players[3].x, no_thrower_state.players[3].y) == (55.0, 14.0)


@pytest.mark.parametrize("grid_size", [2.5, 4.0])
def test_matches_brute_force_across_grid_sizes(demo_state, grid_size):
    expected, _ = brute_force_best(demo_state, grid_size, 3, 2)
    assert position_defender_optimal(demo_state, grid_size, "1") == expected
