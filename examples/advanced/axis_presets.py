"""Axis presets and error handling example.

This example demonstrates:
- Using predefined axis profiles (printer, CNC router, robot joint)
- Entering a move above the velocity limit
- Handling rejected updates without losing the solved segment

Shows how a front end reacts to user input such as slider changes.
"""

from trapezoid_planner import TrajectoryError, TrajectorySegment
from trapezoid_planner.profiles import AxisProfile, create_limits


def compare_profiles(distance):
    """Print move times of the same distance on every preset axis."""
    print(f"\nMove of {distance} units from rest to rest:")
    print(f"  {'Profile':<14} {'Accel':<10} {'Vmax':<10} {'Duration':<10} {'Shape'}")
    print("  " + "-" * 56)

    for profile in AxisProfile:
        limits = create_limits(profile)
        segment = TrajectorySegment(0.0, distance, 0.0, 0.0, limits)
        shape = "wedge" if segment.deltas.wedge else "trapezoid"
        print(
            f"  {profile.value:<14} {limits.acceleration_limit:<10.1f} "
            f"{limits.velocity_limit:<10.1f} {segment.duration():<10.4f} {shape}"
        )


def overspeed_entry():
    """Enter a move faster than the axis may cruise."""
    limits = create_limits(AxisProfile.DEMO)
    segment = TrajectorySegment(0.0, 10.0, 3.0, 0.0, limits)

    print("\nOverspeed entry at 3.0 with a limit of 2.0:")
    print(f"  First phase acceleration: {segment.acceleration(0.0):+.1f}")
    print(f"  Velocity after first phase: {segment.velocity(segment.deltas.t1):.4f}")
    print(f"  Duration: {segment.duration():.4f}s")


def rejected_updates():
    """Apply slider values; invalid ones are reported and ignored."""
    limits = create_limits(AxisProfile.DEMO)
    segment = TrajectorySegment(0.0, 0.1, 0.0, 0.0, limits)

    print("\nSlider updates on a 0.1 unit move:")
    for setter, value in [
        (segment.set_velocity_limit, 1.0),
        (segment.set_velocity_limit, 0.0),
        (segment.set_end_velocity, 2.0),
        (segment.set_acceleration_limit, 20.0),
    ]:
        try:
            setter(value)
        except TrajectoryError as error:
            print(f"  {setter.__name__}({value}) rejected: {error}")
        else:
            print(f"  {setter.__name__}({value}) -> duration {segment.duration():.4f}s")


def main():
    """Run all preset examples."""
    print("=" * 60)
    print("AXIS PRESETS")
    print("=" * 60)

    compare_profiles(1.0)
    compare_profiles(100.0)
    overspeed_entry()
    rejected_updates()
    print()


if __name__ == "__main__":
    main()
