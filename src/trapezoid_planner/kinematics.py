"""Constant-acceleration kinematics helpers shared by the solver and evaluator."""


def second_order(
    time: float, initial_position: float, initial_velocity: float, acceleration: float
) -> float:
    """Position after `time` seconds of constant acceleration.

    Args:
        time: Elapsed time in seconds
        initial_position: Position at time 0
        initial_velocity: Signed velocity at time 0
        acceleration: Signed constant acceleration

    Returns:
        initial_position + initial_velocity * t + 0.5 * acceleration * t²

    Examples:
        >>> second_order(2.0, 1.0, 0.0, 1.0)
        3.0
    """
    return initial_position + (initial_velocity * time) + ((0.5 * acceleration) * time**2)


def sign(value: float) -> int:
    """Return 1, -1 or 0 depending on the sign of value (0 for NaN)."""
    return (value > 0) - (value < 0)


def clamp(value: float, lower: float, upper: float) -> float:
    """Clamp value into [lower, upper]."""
    return max(lower, min(upper, value))


def stop_position(start: float, start_velocity: float, acceleration_limit: float) -> float:
    """Position reached when braking from start_velocity to rest at full deceleration.

    Args:
        start: Position where braking begins
        start_velocity: Signed velocity at the start position
        acceleration_limit: Deceleration magnitude

    Returns:
        The stop position. Equal to start when start_velocity is 0.
    """
    if start_velocity == 0:
        return start

    stop_time = abs(start_velocity) / acceleration_limit
    deceleration = -sign(start_velocity) * acceleration_limit
    return second_order(stop_time, start, start_velocity, deceleration)


def travel_direction(start: float, end: float, start_velocity: float, stop: float) -> int:
    """Net direction of travel, accounting for momentum carried into the move.

    The direction points from the stop position towards the end, so a move
    whose residual momentum would overshoot the target reverses. When the
    axis starts at rest, or the stop position lands exactly on the target,
    the direction from start to end is used; a zero-length move at rest
    travels in the positive direction.

    Returns:
        1 or -1
    """
    direction = 0
    if start_velocity != 0:
        direction = sign(end - stop)
    if direction == 0:
        direction = sign(end - start)
    if direction == 0:
        direction = 1
    return direction
