"""Single-axis trapezoidal velocity profile planning."""

from .errors import (
    DisplacementMismatchError,
    InvalidLimitsError,
    NegativeOrNonFiniteDurationError,
    TrajectoryError,
)
from .models import Deltas, Limits, MotionPhase
from .segment import TrajectorySegment
from .solver import solve_profile
from .validator import validate_deltas

__all__ = [
    "TrajectorySegment",
    "Limits",
    "Deltas",
    "MotionPhase",
    "solve_profile",
    "validate_deltas",
    "TrajectoryError",
    "InvalidLimitsError",
    "NegativeOrNonFiniteDurationError",
    "DisplacementMismatchError",
]
