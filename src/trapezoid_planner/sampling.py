"""Regular-increment sampling of trajectory segments.

Front ends that draw or log a move sample it at evenly spaced times across
[0, duration]. This module collects those samples into numpy arrays.
"""

from dataclasses import dataclass

import numpy as np

from trapezoid_planner.segment import TrajectorySegment

DEFAULT_NUM_STEPS = 100


@dataclass(frozen=True)
class ProfileSamples:
    """Sampled kinematic state of a segment.

    Attributes:
        time: Sample times in seconds, from 0 to duration inclusive
        position: Position at each sample time
        velocity: Velocity at each sample time
        acceleration: Acceleration at each sample time
    """

    time: np.ndarray
    position: np.ndarray
    velocity: np.ndarray
    acceleration: np.ndarray

    def __len__(self) -> int:
        return len(self.time)


def sample_segment(
    segment: TrajectorySegment, num_steps: int = DEFAULT_NUM_STEPS
) -> ProfileSamples:
    """Sample position, velocity and acceleration at evenly spaced times.

    Args:
        segment: Solved trajectory segment
        num_steps: Number of intervals; num_steps + 1 samples are returned so
            that both ends of the move are included

    Returns:
        ProfileSamples with one entry per sample time

    Raises:
        ValueError: If num_steps is less than 1

    Example:
        >>> from trapezoid_planner import Limits, TrajectorySegment
        >>> segment = TrajectorySegment(0.0, 10.0, 0.0, 0.0, Limits(5.0, 2.0))
        >>> samples = sample_segment(segment, num_steps=10)
        >>> len(samples)
        11
    """
    if num_steps < 1:
        raise ValueError(f"num_steps must be >= 1, got {num_steps}")

    times = np.linspace(0.0, segment.duration(), num_steps + 1)

    return ProfileSamples(
        time=times,
        position=np.array([segment.position(t) for t in times]),
        velocity=np.array([segment.velocity(t) for t in times]),
        acceleration=np.array([segment.acceleration(t) for t in times]),
    )
