"""Axis limit presets for common machine configurations."""

from enum import Enum

from trapezoid_planner.models.limits import Limits


class AxisProfile(Enum):
    """Common axis types with typical acceleration and velocity limits."""

    DEMO = "demo"  # Unitless demo axis: a=5, v=2
    PRINTER_XY = "printer_xy"  # 3D printer gantry axis (mm, s)
    PRINTER_Z = "printer_z"  # 3D printer lead-screw Z axis (mm, s)
    CNC_ROUTER = "cnc_router"  # Hobby CNC router axis (mm, s)
    ROBOT_JOINT = "robot_joint"  # Revolute robot joint (rad, s)


def create_limits(profile: AxisProfile) -> Limits:
    """
    Create Limits from a predefined axis profile.

    Each profile represents typical limits for a class of axis:
    - DEMO: Small unitless values, handy for plotting and experiments
    - PRINTER_XY: Belt-driven gantry, high acceleration
    - PRINTER_Z: Lead-screw axis, slow and gentle
    - CNC_ROUTER: Ball-screw router axis carrying a spindle
    - ROBOT_JOINT: Revolute joint, limits in radians

    Args:
        profile: Axis profile to use

    Returns:
        Limits matching the selected profile

    Examples:
        >>> demo = create_limits(AxisProfile.DEMO)
        >>> print(f"{demo.acceleration_limit}, {demo.velocity_limit}")
        5.0, 2.0
    """
    if profile == AxisProfile.DEMO:
        return Limits(acceleration_limit=5.0, velocity_limit=2.0)
    elif profile == AxisProfile.PRINTER_XY:
        return Limits(
            acceleration_limit=3000.0,  # mm/s²
            velocity_limit=300.0,  # mm/s
        )
    elif profile == AxisProfile.PRINTER_Z:
        return Limits(
            acceleration_limit=100.0,  # mm/s²
            velocity_limit=10.0,  # mm/s
        )
    elif profile == AxisProfile.CNC_ROUTER:
        return Limits(
            acceleration_limit=500.0,  # mm/s²
            velocity_limit=100.0,  # mm/s
        )
    elif profile == AxisProfile.ROBOT_JOINT:
        return Limits(
            acceleration_limit=10.0,  # rad/s²
            velocity_limit=3.0,  # rad/s
        )
    else:
        raise ValueError(f"Unknown axis profile: {profile}")
