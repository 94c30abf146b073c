"""Trapezoidal profile solver.

Determines phase signs, durations and displacements for a single-axis move
between two positions with given boundary velocities and axis limits.

Algorithm:
    1. Find where the axis would stop if it braked immediately, and derive
       the net direction of travel from that stop position.
    2. Pick the accelerate-phase sign. It follows the direction of travel,
       except on an overspeed entry where the axis first has to slow down
       to the velocity limit.
    3. Clamp the end velocity to the velocity limit.
    4. Try a full trapezoid cruising at the velocity limit.
    5. If that leaves a negative cruise time, fall back to a wedge profile
       whose peak velocity is the highest speed reachable in the available
       distance.

Example:
    >>> from trapezoid_planner.models import Limits
    >>> deltas = solve_profile(0.0, 10.0, 0.0, 0.0, Limits(5.0, 2.0))
    >>> round(deltas.duration, 6)
    5.4
"""

import logging
import math

from trapezoid_planner.kinematics import clamp, second_order, stop_position, travel_direction
from trapezoid_planner.models.deltas import Deltas
from trapezoid_planner.models.limits import Limits, check_limits

logger = logging.getLogger(__name__)


def solve_profile(
    start: float,
    end: float,
    start_velocity: float,
    end_velocity: float,
    limits: Limits,
) -> Deltas:
    """Solve a trapezoidal (or wedge) velocity profile.

    The result is a pure function of the inputs; it is not validated here.
    Pass it through `validate_deltas` before evaluating it.

    Args:
        start: Start position
        end: End position
        start_velocity: Signed velocity at the start position
        end_velocity: Signed velocity requested at the end position. Values
            beyond the velocity limit are clamped to it.
        limits: Axis acceleration and velocity limits

    Returns:
        Deltas describing the three phases

    Raises:
        InvalidLimitsError: If a limit is not finite and positive
    """
    check_limits(limits.acceleration_limit, limits.velocity_limit)

    acceleration_limit = limits.acceleration_limit
    velocity_limit = limits.velocity_limit
    distance = end - start

    stop = stop_position(start, start_velocity, acceleration_limit)
    direction = travel_direction(start, end, start_velocity, stop)

    # Overspeed entry: slow down to the limit before cruising
    accelerate_sign = direction
    if start_velocity * direction > velocity_limit:
        accelerate_sign = -direction

    # The last phase always brakes against the direction of travel
    decelerate_sign = -direction

    final_velocity = clamp(end_velocity, -velocity_limit, velocity_limit)
    if final_velocity != end_velocity:
        logger.debug(f"End velocity {end_velocity} clamped to {final_velocity}")

    a1 = accelerate_sign * acceleration_limit
    a3 = decelerate_sign * acceleration_limit

    # Trial full trapezoid cruising at the velocity limit
    peak_velocity = direction * velocity_limit
    t1 = (peak_velocity - start_velocity) / a1
    t3 = (final_velocity - peak_velocity) / a3
    x1 = second_order(t1, 0.0, start_velocity, a1)
    x3 = second_order(t3, 0.0, peak_velocity, a3)
    t2 = (distance - x1 - x3) / peak_velocity

    wedge = t2 < 0
    if wedge:
        # Not enough room to reach the limit: accelerate straight into braking.
        # Peak speed satisfies (2 vp² - v0² - vf²) / (2 a) = |distance|.
        a1 = direction * acceleration_limit
        peak_squared = direction * acceleration_limit * distance + 0.5 * (
            start_velocity**2 + final_velocity**2
        )
        peak_velocity = direction * math.sqrt(max(peak_squared, 0.0))

        t1 = (peak_velocity - start_velocity) / a1
        t2 = 0.0
        t3 = (final_velocity - peak_velocity) / a3
        x1 = second_order(t1, 0.0, start_velocity, a1)
        x3 = second_order(t3, 0.0, peak_velocity, a3)

    x2 = peak_velocity * t2

    return Deltas(
        t1=t1,
        t2=t2,
        t3=t3,
        x1=x1,
        x2=x2,
        x3=x3,
        peak_velocity=peak_velocity,
        start_velocity=start_velocity,
        end_velocity=final_velocity,
        accelerate_acceleration=a1,
        decelerate_acceleration=a3,
        wedge=wedge,
    )
