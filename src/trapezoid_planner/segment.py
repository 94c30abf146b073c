"""Single-axis trajectory segment.

A TrajectorySegment is created fully solved and stays consistent for its
whole lifetime: every setter re-solves and re-validates the complete move,
and only replaces the cached state when both steps succeed.

Example:
    >>> from trapezoid_planner import Limits, TrajectorySegment
    >>> segment = TrajectorySegment(0.0, 10.0, 0.0, 0.0, Limits(5.0, 2.0))
    >>> round(segment.duration(), 6)
    5.4
    >>> segment.set_velocity_limit(4.0)
    >>> round(segment.duration(), 6)
    3.3
"""

import logging
from dataclasses import dataclass, replace
from typing import Any, Dict, Optional

from trapezoid_planner import evaluator
from trapezoid_planner.errors import TrajectoryError
from trapezoid_planner.models.deltas import Deltas, MotionPhase
from trapezoid_planner.models.limits import Limits
from trapezoid_planner.solver import solve_profile
from trapezoid_planner.validator import validate_deltas


@dataclass(frozen=True)
class _SegmentState:
    """Inputs of a solve together with its validated result."""

    start: float
    end: float
    start_velocity: float
    end_velocity: float
    limits: Limits
    deltas: Deltas


def _solve_state(
    start: float, end: float, start_velocity: float, end_velocity: float, limits: Limits
) -> _SegmentState:
    deltas = solve_profile(start, end, start_velocity, end_velocity, limits)
    validate_deltas(deltas, start, end)
    return _SegmentState(start, end, start_velocity, end_velocity, limits, deltas)


class TrajectorySegment:
    """Trapezoidal move of a single axis from `start` to `end`.

    The whole solved state lives in one immutable object that is swapped in
    a single assignment, so readers never see inputs and Deltas that belong
    to different solves.

    Args:
        start: Start position
        end: End position
        start_velocity: Signed velocity at the start position
        end_velocity: Signed velocity requested at the end position. The
            raw value is kept; the solve uses it clamped to the velocity limit
            (see `effective_end_velocity`).
        limits: Axis acceleration and velocity limits
        logger: Logger for solve diagnostics. Defaults to the module logger.

    Raises:
        TrajectoryError: If the move cannot be solved (see trapezoid_planner.errors)
    """

    def __init__(
        self,
        start: float,
        end: float,
        start_velocity: float,
        end_velocity: float,
        limits: Limits,
        logger: Optional[logging.Logger] = None,
    ) -> None:
        self.logger = logger or logging.getLogger(__name__)
        try:
            self._state = _solve_state(start, end, start_velocity, end_velocity, limits)
        except TrajectoryError as error:
            self.logger.warning(f"Cannot create segment {start} -> {end}: {error}")
            raise
        self._log_solve()

    # Inputs

    @property
    def start(self) -> float:
        return self._state.start

    @property
    def end(self) -> float:
        return self._state.end

    @property
    def start_velocity(self) -> float:
        return self._state.start_velocity

    @property
    def end_velocity(self) -> float:
        """End velocity as supplied by the caller (not clamped)."""
        return self._state.end_velocity

    @property
    def limits(self) -> Limits:
        return self._state.limits

    # Solve results

    @property
    def deltas(self) -> Deltas:
        """Cached phase durations and displacements of the current solve."""
        return self._state.deltas

    @property
    def effective_end_velocity(self) -> float:
        """End velocity actually used by the solve, clamped to the velocity limit."""
        return self._state.deltas.end_velocity

    @property
    def peak_velocity(self) -> float:
        """Signed peak velocity; below the velocity limit for a wedge profile."""
        return self._state.deltas.peak_velocity

    # Mutators

    def set_velocity_limit(self, limit: float) -> None:
        """Change the velocity limit and re-solve the segment.

        Raises:
            TrajectoryError: If the limit is invalid or the move cannot be
                solved with it. The segment keeps its previous state.
        """
        self._resolve(velocity_limit=limit)

    def set_acceleration_limit(self, limit: float) -> None:
        """Change the acceleration limit and re-solve the segment.

        Raises:
            TrajectoryError: If the limit is invalid or the move cannot be
                solved with it. The segment keeps its previous state.
        """
        self._resolve(acceleration_limit=limit)

    def set_start_velocity(self, velocity: float) -> None:
        """Change the start velocity and re-solve the segment."""
        self._resolve(start_velocity=velocity)

    def set_end_velocity(self, velocity: float) -> None:
        """Change the end velocity and re-solve the segment."""
        self._resolve(end_velocity=velocity)

    def _resolve(self, **changes: Any) -> None:
        current = self._state
        inputs = {
            "start": current.start,
            "end": current.end,
            "start_velocity": current.start_velocity,
            "end_velocity": current.end_velocity,
            "limits": current.limits,
        }
        limit_changes = {
            name: changes.pop(name)
            for name in ("acceleration_limit", "velocity_limit")
            if name in changes
        }
        inputs.update(changes)

        try:
            if limit_changes:
                inputs["limits"] = replace(current.limits, **limit_changes)
            state = _solve_state(**inputs)
        except TrajectoryError as error:
            self.logger.warning(f"Rejected update {changes or limit_changes}: {error}")
            raise

        self._state = state
        self._log_solve()

    def _log_solve(self) -> None:
        deltas = self._state.deltas
        self.logger.debug(
            f"Solved segment {self.start} -> {self.end}: duration={deltas.duration:.6g}s, "
            f"peak_velocity={deltas.peak_velocity:.6g}, wedge={deltas.wedge}"
        )

    # Evaluation

    def duration(self) -> float:
        """Total move time in seconds (t1 + t2 + t3)."""
        return self._state.deltas.duration

    def phase_at(self, time: float) -> MotionPhase:
        return evaluator.phase_at(self._state.deltas, time)

    def position(self, time: float) -> float:
        """Position at `time`; clamped to the start/end state outside [0, duration]."""
        state = self._state
        return evaluator.position(state.deltas, state.start, time)

    def velocity(self, time: float) -> float:
        """Velocity at `time`; clamped to the start/end state outside [0, duration]."""
        return evaluator.velocity(self._state.deltas, time)

    def acceleration(self, time: float) -> float:
        """Acceleration at `time`; clamped to the start/end phase outside [0, duration]."""
        return evaluator.acceleration(self._state.deltas, time)

    def as_dict(self) -> Dict[str, Any]:
        """Snapshot of the segment inputs and solve results for display."""
        state = self._state
        deltas = state.deltas
        return {
            "start": state.start,
            "end": state.end,
            "start_velocity": state.start_velocity,
            "end_velocity": state.end_velocity,
            "effective_end_velocity": deltas.end_velocity,
            "acceleration_limit": state.limits.acceleration_limit,
            "velocity_limit": state.limits.velocity_limit,
            "peak_velocity": deltas.peak_velocity,
            "t1": deltas.t1,
            "t2": deltas.t2,
            "t3": deltas.t3,
            "x1": deltas.x1,
            "x2": deltas.x2,
            "x3": deltas.x3,
            "duration": deltas.duration,
            "wedge": deltas.wedge,
        }

    def __repr__(self) -> str:
        """Return string representation of the segment."""
        return (
            f"TrajectorySegment(start={self.start}, end={self.end}, "
            f"start_velocity={self.start_velocity}, end_velocity={self.end_velocity}, "
            f"limits={self.limits}, duration={self.duration():.6g})"
        )
