"""Solved phase durations and displacements of a trapezoidal profile."""

from dataclasses import dataclass
from enum import Enum


class MotionPhase(Enum):
    """The three phases of a trapezoidal velocity profile."""

    ACCELERATE = "accelerate"
    CRUISE = "cruise"
    DECELERATE = "decelerate"


@dataclass(frozen=True)
class Deltas:
    """Result of a profile solve.

    Durations are in seconds, displacements in position units and are signed
    in the direction of motion. Phase accelerations are signed: an overspeed
    entry has a negative accelerate-phase value on a positive move.

    Attributes:
        t1: Duration of the accelerate phase
        t2: Duration of the cruise phase (0 for a wedge profile)
        t3: Duration of the decelerate phase
        x1: Displacement during the accelerate phase
        x2: Displacement during the cruise phase
        x3: Displacement during the decelerate phase
        peak_velocity: Signed velocity reached at the end of the accelerate phase
        start_velocity: Signed velocity at t=0
        end_velocity: Signed velocity at the end of the move (after clamping)
        accelerate_acceleration: Signed acceleration applied in the first phase
        decelerate_acceleration: Signed acceleration applied in the last phase
        wedge: True if the velocity limit could not be reached and the cruise
            phase was dropped
    """

    t1: float
    t2: float
    t3: float
    x1: float
    x2: float
    x3: float
    peak_velocity: float
    start_velocity: float
    end_velocity: float
    accelerate_acceleration: float
    decelerate_acceleration: float
    wedge: bool = False

    @property
    def duration(self) -> float:
        """Total move time in seconds."""
        return self.t1 + self.t2 + self.t3

    @property
    def displacement(self) -> float:
        """Sum of the three phase displacements."""
        return self.x1 + self.x2 + self.x3

    def phase_duration(self, phase: MotionPhase) -> float:
        """Duration of a single phase in seconds."""
        if phase == MotionPhase.ACCELERATE:
            return self.t1
        elif phase == MotionPhase.CRUISE:
            return self.t2
        elif phase == MotionPhase.DECELERATE:
            return self.t3
        else:
            raise ValueError(f"Unknown motion phase: {phase}")
