"""Data models for trajectory planning.

This package contains the limit value object and the solve result types.
"""

from trapezoid_planner.models.deltas import Deltas, MotionPhase
from trapezoid_planner.models.limits import Limits, check_limits

__all__ = [
    "Limits",
    "Deltas",
    "MotionPhase",
    "check_limits",
]
