"""Tests for disc flight, catching and throwing."""

import pytest

from huck.core import Disc, FieldDimensions, GameState, Player
from huck.physics import throw_disc, update
from huck.physics.disc_flight import DEFAULT_THROW_SPEED, DRAG_FACTOR


def _flying_state(players=None, vx=10.0, vy=0.0) -> GameState:
    return GameState(
        players=players or [],
        disc=Disc(x=50.0, y=20.0, vx=vx, vy=vy, in_flight=True),
        field=FieldDimensions.standard(),
    )


class TestFlight:
    """Tests for an in-flight disc."""

    def test_single_step(self):
        state = _flying_state()
        update(state, 1.0)
        assert state.disc.x == pytest.approx(60.0)
        assert state.disc.y == pytest.approx(20.0)
        assert state.disc.vx == pytest.approx(10.0 * DRAG_FACTOR)
        assert state.disc.in_flight

    def test_lands_after_finite_steps(self):
        state = _flying_state()
        steps = 0
        while state.disc.in_flight:
            update(state, 1.0)
            steps += 1
            assert steps < 1000
        assert (state.disc.vx, state.disc.vy) == (0.0, 0.0)
        assert not state.disc.in_flight
        # 10 * 0.98^n < 0.1 first holds at n = 228
        assert steps == 228

    def test_zero_delta_only_applies_drag(self):
        state = _flying_state()
        update(state, 0.0)
        assert (state.disc.x, state.disc.y) == (50.0, 20.0)
        assert state.disc.vx == pytest.approx(9.8)


class TestCatch:
    """Tests for catch detection."""

    def test_player_in_range_catches(self):
        catcher = Player(id="r", team=1, x=55.0, y=20.5)
        state = _flying_state([catcher])
        update(state, 0.5)
        assert not state.disc.in_flight
        assert state.disc.holder_id == "r"
        assert catcher.has_disc
        assert (state.disc.vx, state.disc.vy) == (0.0, 0.0)
        assert (state.disc.x, state.disc.y) == (55.0, 20.5)

    def test_first_player_in_list_order_wins(self):
        first = Player(id="a", team=2, x=56.0, y=20.0, is_defender=True)
        second = Player(id="b", team=1, x=55.0, y=20.0)
        state = _flying_state([first, second])
        update(state, 0.5)
        assert state.disc.holder_id == "a"
        assert first.has_disc
        assert not second.has_disc

    def test_out_of_range_no_catch(self):
        bystander = Player(id="r", team=1, x=55.0, y=23.0)
        state = _flying_state([bystander])
        update(state, 0.5)
        assert state.disc.in_flight
        assert state.disc.holder_id is None
        assert not bystander.has_disc

    def test_landed_disc_is_not_caught(self):
        """A disc that stops this step is no longer in flight, so nobody catches it."""
        nearby = Player(id="r", team=1, x=50.0, y=20.0)
        state = _flying_state([nearby], vx=0.05)
        update(state, 1.0)
        assert not state.disc.in_flight
        assert state.disc.holder_id is None
        assert not nearby.has_disc


class TestHeldDisc:
    """Tests for a disc that is not in flight."""

    def test_follows_holder_by_id(self, demo_state):
        demo_state.players[0].x = 70.0
        demo_state.players[0].y = 12.0
        update(demo_state, 0.1)
        assert (demo_state.disc.x, demo_state.disc.y) == (70.0, 12.0)

    def test_follows_disc_flag_without_holder_id(self, demo_state):
        demo_state.disc.holder_id = None
        demo_state.players[0].x = 65.0
        update(demo_state, 0.1)
        assert demo_state.disc.x == 65.0

    def test_loose_disc_stays(self, no_thrower_state):
        before = no_thrower_state.copy()
        update(no_thrower_state, 1.0)
        assert no_thrower_state == before


class TestThrow:
    """Tests for throw_disc."""

    def test_no_holder_is_noop(self, no_thrower_state):
        before = no_thrower_state.copy()
        throw_disc(no_thrower_state, 20.0, 20.0, 30.0)
        assert no_thrower_state == before

    def test_target_on_disc_is_noop(self, demo_state):
        before = demo_state.copy()
        throw_disc(demo_state, 80.0, 15.0)
        assert demo_state == before

    def test_release(self, demo_state):
        throw_disc(demo_state, 80.0, 35.0, 25.0)
        disc = demo_state.disc
        assert disc.in_flight
        assert disc.holder_id is None
        assert (disc.vx, disc.vy) == pytest.approx((0.0, 25.0))
        assert not demo_state.players[0].has_disc

    def test_default_speed(self, demo_state):
        throw_disc(demo_state, 40.0, 15.0)
        assert demo_state.disc.vx == pytest.approx(-DEFAULT_THROW_SPEED)

    def test_throw_then_update_moves_along_direction(self, demo_state):
        throw_disc(demo_state, 80.0, 35.0, 10.0)
        update(demo_state, 0.5)
        assert demo_state.disc.x == pytest.approx(80.0)
        assert demo_state.disc.y == pytest.approx(20.0)
        assert demo_state.disc.in_flight
