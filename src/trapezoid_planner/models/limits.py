"""Axis limit model for trajectory planning."""

import math
from dataclasses import dataclass

from trapezoid_planner.errors import InvalidLimitsError


def check_limits(acceleration_limit: float, velocity_limit: float) -> None:
    """Reject limits that are not finite and strictly positive.

    Args:
        acceleration_limit: Maximum acceleration magnitude
        velocity_limit: Maximum velocity magnitude

    Raises:
        InvalidLimitsError: If either value is <= 0, NaN or infinite
    """
    if not (math.isfinite(acceleration_limit) and acceleration_limit > 0):
        raise InvalidLimitsError("acceleration_limit", acceleration_limit)
    if not (math.isfinite(velocity_limit) and velocity_limit > 0):
        raise InvalidLimitsError("velocity_limit", velocity_limit)


@dataclass(frozen=True)
class Limits:
    """Kinematic limits of a single axis.

    Both values are magnitudes: the same limit applies in either direction.

    Attributes:
        acceleration_limit: Maximum acceleration in units/s²
        velocity_limit: Maximum velocity in units/s
    """

    acceleration_limit: float
    velocity_limit: float

    def __post_init__(self) -> None:
        """Validate that both limits are finite and positive."""
        check_limits(self.acceleration_limit, self.velocity_limit)
