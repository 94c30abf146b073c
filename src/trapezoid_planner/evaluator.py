"""Time-domain evaluation of a solved profile.

All functions read only the solved Deltas (plus the start position for
`position`). Times outside [0, duration] are clamped to the nearest end of
the move, so the axis holds its boundary state instead of extrapolating the
last active phase.

Phase boundaries belong to the earlier phase: t == t1 evaluates in the
accelerate phase and t == t1 + t2 in the cruise phase.
"""

from trapezoid_planner.kinematics import clamp, second_order
from trapezoid_planner.models.deltas import Deltas, MotionPhase


def _clamp_time(deltas: Deltas, time: float) -> float:
    return clamp(time, 0.0, deltas.duration)


def phase_at(deltas: Deltas, time: float) -> MotionPhase:
    """Return the phase active at `time` (clamped into the move)."""
    time = _clamp_time(deltas, time)
    if time <= deltas.t1:
        return MotionPhase.ACCELERATE
    elif time <= deltas.t1 + deltas.t2:
        return MotionPhase.CRUISE
    else:
        return MotionPhase.DECELERATE


def position(deltas: Deltas, start: float, time: float) -> float:
    """Position at `time` seconds into the move.

    Args:
        deltas: Solved, validated profile
        start: Start position of the move
        time: Elapsed time in seconds

    Returns:
        Position in the same units as start
    """
    time = _clamp_time(deltas, time)
    phase = phase_at(deltas, time)

    if phase == MotionPhase.ACCELERATE:
        return second_order(
            time, start, deltas.start_velocity, deltas.accelerate_acceleration
        )
    elif phase == MotionPhase.CRUISE:
        return second_order(time - deltas.t1, start + deltas.x1, deltas.peak_velocity, 0.0)
    else:
        return second_order(
            time - deltas.t1 - deltas.t2,
            start + deltas.x1 + deltas.x2,
            deltas.peak_velocity,
            deltas.decelerate_acceleration,
        )


def velocity(deltas: Deltas, time: float) -> float:
    """Signed velocity at `time` seconds into the move."""
    time = _clamp_time(deltas, time)
    phase = phase_at(deltas, time)

    if phase == MotionPhase.ACCELERATE:
        return deltas.start_velocity + deltas.accelerate_acceleration * time
    elif phase == MotionPhase.CRUISE:
        return deltas.peak_velocity
    else:
        return deltas.peak_velocity + deltas.decelerate_acceleration * (
            time - deltas.t1 - deltas.t2
        )


def acceleration(deltas: Deltas, time: float) -> float:
    """Signed acceleration at `time`; piecewise constant over the three phases."""
    phase = phase_at(deltas, time)

    if phase == MotionPhase.ACCELERATE:
        return deltas.accelerate_acceleration
    elif phase == MotionPhase.CRUISE:
        return 0.0
    else:
        return deltas.decelerate_acceleration
