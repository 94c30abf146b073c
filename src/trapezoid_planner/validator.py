"""Numerical self-consistency checks for solved profiles."""

import math

from trapezoid_planner.errors import DisplacementMismatchError, NegativeOrNonFiniteDurationError
from trapezoid_planner.models.deltas import Deltas, MotionPhase

# Allowed deviation of the displacement sum, in units in the last place of
# the largest kinematic quantity of the move
ULP_TOLERANCE = 32


def displacement_tolerance(deltas: Deltas, start: float, end: float) -> float:
    """Absolute tolerance for the displacement identity x1 + x2 + x3 == end - start.

    The tolerance is a fixed number of ULPs of the largest magnitude involved
    in the solve: the move distance, each phase displacement, the velocity
    terms of the second-order equations, and the braking distance v²/a of the
    fastest velocity in the move. The braking distance dominates short moves
    entered at speed, where rounding in the peak velocity is amplified by the
    velocity itself.

    Args:
        deltas: Solved profile
        start: Start position
        end: End position

    Returns:
        Absolute tolerance in position units
    """
    scale = max(
        abs(end - start),
        abs(deltas.x1),
        abs(deltas.x2),
        abs(deltas.x3),
        abs(deltas.start_velocity * deltas.t1),
        abs(deltas.peak_velocity * deltas.t3),
    )

    acceleration = max(
        abs(deltas.accelerate_acceleration), abs(deltas.decelerate_acceleration)
    )
    if acceleration > 0:
        speed = max(
            abs(deltas.start_velocity), abs(deltas.peak_velocity), abs(deltas.end_velocity)
        )
        scale = max(scale, speed * speed / acceleration)

    return ULP_TOLERANCE * math.ulp(scale)


def validate_deltas(deltas: Deltas, start: float, end: float) -> None:
    """Check that a solved profile is physically and numerically consistent.

    Checks run in order and the first failure is raised:
    1. Every phase duration is finite and non-negative
    2. The phase displacements sum to end - start within a ULP-scaled tolerance

    NaN and infinity are rejected explicitly since they compare false against
    any bound.

    Args:
        deltas: Solved profile
        start: Start position of the move
        end: End position of the move

    Raises:
        NegativeOrNonFiniteDurationError: If a phase duration is invalid
        DisplacementMismatchError: If the displacement identity does not hold
    """
    for phase in MotionPhase:
        duration = deltas.phase_duration(phase)
        if not math.isfinite(duration) or duration < 0:
            raise NegativeOrNonFiniteDurationError(phase, duration)

    expected = end - start
    actual = deltas.displacement
    tolerance = displacement_tolerance(deltas, start, end)

    if not (math.isfinite(actual) and math.isfinite(tolerance)):
        raise DisplacementMismatchError(expected, actual, tolerance)
    if abs(actual - expected) > tolerance:
        raise DisplacementMismatchError(expected, actual, tolerance)
