"""Domain errors raised while solving and validating trajectory segments."""


class TrajectoryError(ValueError):
    """Base class for all trajectory solve and validation failures."""


class InvalidLimitsError(TrajectoryError):
    """An acceleration or velocity limit is not a finite positive number.

    Attributes:
        name: Name of the offending limit field
        value: The rejected value
    """

    def __init__(self, name: str, value: float) -> None:
        self.name = name
        self.value = value
        super().__init__(f"{name} must be finite and positive, got {value}")


class NegativeOrNonFiniteDurationError(TrajectoryError):
    """The solver produced a phase duration that is negative, NaN or infinite.

    This happens when the requested velocities cannot be reached within the
    available displacement, e.g. an end velocity that is too high for a
    short move.

    Attributes:
        phase: The MotionPhase whose duration is invalid
        value: The offending duration in seconds
    """

    def __init__(self, phase, value: float) -> None:
        self.phase = phase
        self.value = value
        super().__init__(f"{phase.value} phase duration must be finite and >= 0, got {value}")


class DisplacementMismatchError(TrajectoryError):
    """Phase displacements do not add up to the requested move distance.

    Attributes:
        expected: Requested displacement (end - start)
        actual: Sum of the three phase displacements
        tolerance: Allowed absolute deviation
    """

    def __init__(self, expected: float, actual: float, tolerance: float) -> None:
        self.expected = expected
        self.actual = actual
        self.tolerance = tolerance
        super().__init__(
            f"phase displacements sum to {actual}, expected {expected} "
            f"(tolerance {tolerance})"
        )
