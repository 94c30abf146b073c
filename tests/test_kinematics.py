"""Tests for constant-acceleration kinematics helpers."""

import math

import pytest

from trapezoid_planner.kinematics import (
    clamp,
    second_order,
    sign,
    stop_position,
    travel_direction,
)


class TestSecondOrder:
    """Tests for the second-order position equation."""

    def test_constant_velocity(self):
        """Zero acceleration gives linear motion."""
        assert second_order(2.0, 1.0, 3.0, 0.0) == pytest.approx(7.0)

    def test_from_rest(self):
        """From rest: x = 0.5 * a * t²."""
        assert second_order(0.4, 0.0, 0.0, 5.0) == pytest.approx(0.4)

    def test_deceleration(self):
        """Braking from 2 at -5 for 0.4s covers 0.4."""
        assert second_order(0.4, 0.0, 2.0, -5.0) == pytest.approx(0.4)

    def test_zero_time(self):
        """Zero elapsed time returns the initial position."""
        assert second_order(0.0, 4.2, 3.0, 5.0) == 4.2


class TestSign:
    """Tests for sign()."""

    def test_signs(self):
        """Test positive, negative and zero values."""
        assert sign(3.5) == 1
        assert sign(-0.1) == -1
        assert sign(0.0) == 0

    def test_nan_has_no_sign(self):
        """NaN compares false both ways and reports 0."""
        assert sign(math.nan) == 0


class TestClamp:
    """Tests for clamp()."""

    def test_inside_range(self):
        assert clamp(1.0, -2.0, 2.0) == 1.0

    def test_above_range(self):
        assert clamp(5.0, -2.0, 2.0) == 2.0

    def test_below_range(self):
        assert clamp(-5.0, -2.0, 2.0) == -2.0


class TestStopPosition:
    """Tests for the immediate-braking stop position."""

    def test_at_rest(self):
        """At rest the axis stops where it is."""
        assert stop_position(1.5, 0.0, 5.0) == 1.5

    def test_positive_velocity(self):
        """Braking from 3 at 5: v²/2a = 0.9."""
        assert stop_position(0.0, 3.0, 5.0) == pytest.approx(0.9)

    def test_negative_velocity(self):
        """Braking from -2 at 5 stops 0.4 behind the start."""
        assert stop_position(1.0, -2.0, 5.0) == pytest.approx(0.6)


class TestTravelDirection:
    """Tests for travel_direction()."""

    def test_forward_from_rest(self):
        assert travel_direction(0.0, 10.0, 0.0, 0.0) == 1

    def test_backward_from_rest(self):
        assert travel_direction(0.0, -10.0, 0.0, 0.0) == -1

    def test_momentum_overshoot_reverses(self):
        """Target behind the stop position: the move reverses."""
        stop = stop_position(0.0, 2.0, 5.0)
        assert travel_direction(0.0, 0.1, 2.0, stop) == -1

    def test_backward_momentum_toward_target_ahead(self):
        """Moving away from a target that lies beyond the stop position."""
        stop = stop_position(0.0, -2.0, 5.0)
        assert travel_direction(0.0, 10.0, -2.0, stop) == 1

    def test_stop_exactly_on_target_uses_start_to_end(self):
        """When braking lands exactly on the target, start -> end decides."""
        assert travel_direction(0.0, 0.5, 1.0, 0.5) == 1

    def test_zero_length_move_at_rest(self):
        """A zero-length move at rest defaults to the positive direction."""
        assert travel_direction(3.0, 3.0, 0.0, 3.0) == 1
