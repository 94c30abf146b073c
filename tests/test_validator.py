"""Tests for the solved-profile validator."""

import math

import pytest

from trapezoid_planner.errors import (
    DisplacementMismatchError,
    NegativeOrNonFiniteDurationError,
    TrajectoryError,
)
from trapezoid_planner.models import Deltas, Limits, MotionPhase
from trapezoid_planner.solver import solve_profile
from trapezoid_planner.validator import ULP_TOLERANCE, displacement_tolerance, validate_deltas


def make_deltas(**overrides):
    """Hand-written Deltas of the classic 0 -> 10 move with a=5, v=2."""
    values = dict(
        t1=0.4,
        t2=4.6,
        t3=0.4,
        x1=0.4,
        x2=9.2,
        x3=0.4,
        peak_velocity=2.0,
        start_velocity=0.0,
        end_velocity=0.0,
        accelerate_acceleration=5.0,
        decelerate_acceleration=-5.0,
    )
    values.update(overrides)
    return Deltas(**values)


class TestDurationChecks:
    """Phase durations must be finite and non-negative."""

    def test_valid_deltas_pass(self):
        validate_deltas(make_deltas(), 0.0, 10.0)

    def test_negative_accelerate_duration(self):
        with pytest.raises(NegativeOrNonFiniteDurationError) as excinfo:
            validate_deltas(make_deltas(t1=-0.1), 0.0, 10.0)
        assert excinfo.value.phase == MotionPhase.ACCELERATE
        assert excinfo.value.value == -0.1

    def test_nan_cruise_duration(self):
        with pytest.raises(NegativeOrNonFiniteDurationError, match="cruise") as excinfo:
            validate_deltas(make_deltas(t2=math.nan), 0.0, 10.0)
        assert excinfo.value.phase == MotionPhase.CRUISE

    def test_infinite_decelerate_duration(self):
        with pytest.raises(NegativeOrNonFiniteDurationError, match="decelerate") as excinfo:
            validate_deltas(make_deltas(t3=math.inf), 0.0, 10.0)
        assert excinfo.value.phase == MotionPhase.DECELERATE

    def test_zero_durations_are_valid(self):
        """A zero-length move has three zero-length phases."""
        deltas = make_deltas(t1=0.0, t2=0.0, t3=0.0, x1=0.0, x2=0.0, x3=0.0, peak_velocity=0.0)
        validate_deltas(deltas, 1.0, 1.0)

    def test_durations_checked_before_displacement(self):
        """The first failing check is reported."""
        deltas = make_deltas(t1=-1.0, x2=100.0)
        with pytest.raises(NegativeOrNonFiniteDurationError):
            validate_deltas(deltas, 0.0, 10.0)


class TestDisplacementCheck:
    """Phase displacements must add up to end - start."""

    def test_mismatch_detected(self):
        with pytest.raises(DisplacementMismatchError) as excinfo:
            validate_deltas(make_deltas(x3=0.41), 0.0, 10.0)
        assert excinfo.value.expected == 10.0
        assert excinfo.value.actual == pytest.approx(10.01)

    def test_tiny_mismatch_detected(self):
        """1e-9 is far beyond a few ULPs at this magnitude."""
        with pytest.raises(DisplacementMismatchError):
            validate_deltas(make_deltas(x2=9.2 + 1e-9), 0.0, 10.0)

    def test_mismatch_against_offset_start(self):
        """Only the distance matters, not the absolute positions."""
        validate_deltas(make_deltas(), 5.0, 15.0)
        with pytest.raises(DisplacementMismatchError):
            validate_deltas(make_deltas(), 5.0, 16.0)

    def test_nan_displacement_detected(self):
        with pytest.raises(DisplacementMismatchError):
            validate_deltas(make_deltas(x1=math.nan), 0.0, 10.0)

    def test_errors_share_base_class(self):
        with pytest.raises(TrajectoryError):
            validate_deltas(make_deltas(x3=1.0), 0.0, 10.0)


class TestDisplacementTolerance:
    """Tolerance is a few ULPs scaled to the magnitude of the move."""

    def test_tolerance_is_ulp_level(self):
        tolerance = displacement_tolerance(make_deltas(), 0.0, 10.0)
        assert tolerance == ULP_TOLERANCE * math.ulp(10.0)
        assert tolerance < 1e-12

    def test_tolerance_scales_with_magnitude(self):
        limits = Limits(acceleration_limit=5.0, velocity_limit=2.0)
        short = solve_profile(0.0, 1.0, 0.0, 0.0, limits)
        long = solve_profile(0.0, 1.0e6, 0.0, 0.0, limits)

        short_tolerance = displacement_tolerance(short, 0.0, 1.0)
        long_tolerance = displacement_tolerance(long, 0.0, 1.0e6)
        assert long_tolerance > short_tolerance * 1e5

    def test_tolerance_covers_braking_distance(self):
        """Short moves entered at speed scale with v²/a, not the distance."""
        limits = Limits(acceleration_limit=1.0, velocity_limit=2.0)
        deltas = solve_profile(0.0, 1e-6, 1.0, 1.0, limits)

        tolerance = displacement_tolerance(deltas, 0.0, 1e-6)
        assert tolerance >= ULP_TOLERANCE * math.ulp(1.0)
        validate_deltas(deltas, 0.0, 1e-6)
