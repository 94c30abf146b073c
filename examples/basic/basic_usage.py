"""Basic usage example.

This example demonstrates:
- Creating a trajectory segment
- Reading the solved phases
- Sampling position, velocity and acceleration over the move
- Changing a limit and re-solving

This is the simplest way to use the trajectory planner.
"""

import logging

from trapezoid_planner import Limits, TrajectorySegment
from trapezoid_planner.log_utils import init_logger
from trapezoid_planner.sampling import sample_segment


def print_phases(segment):
    """Print the solved phase table of a segment."""
    deltas = segment.deltas
    print(f"  {'Phase':<12} {'Duration':<12} {'Displacement'}")
    print(f"  {'':12} {'(s)':<12} {'(units)'}")
    print("  " + "-" * 40)
    print(f"  {'accelerate':<12} {deltas.t1:<12.4f} {deltas.x1:.4f}")
    print(f"  {'cruise':<12} {deltas.t2:<12.4f} {deltas.x2:.4f}")
    print(f"  {'decelerate':<12} {deltas.t3:<12.4f} {deltas.x3:.4f}")
    print(f"\n  Duration: {segment.duration():.4f}s, peak velocity: {segment.peak_velocity:.4f}")
    if deltas.wedge:
        print("  Velocity limit not reached (wedge profile)")


def main():
    """Basic usage example with the demo axis."""
    init_logger("trapezoid_planner", level=logging.DEBUG)

    print("=" * 60)
    print("BASIC TRAJECTORY PLANNER USAGE")
    print("=" * 60)

    # Demo axis: accelerate at 5 units/s², cruise at up to 2 units/s
    limits = Limits(acceleration_limit=5.0, velocity_limit=2.0)
    segment = TrajectorySegment(0.0, 10.0, 0.0, 0.0, limits)

    print("\nMove 0 -> 10 from rest to rest:")
    print_phases(segment)

    print("\nSampled profile:")
    print(f"  {'t (s)':<10} {'position':<12} {'velocity':<12} {'acceleration'}")
    print("  " + "-" * 50)
    samples = sample_segment(segment, num_steps=10)
    for t, x, v, a in zip(samples.time, samples.position, samples.velocity, samples.acceleration):
        print(f"  {t:<10.3f} {x:<12.4f} {v:<12.4f} {a:.1f}")

    # A faster axis needs less time; a much faster one no longer reaches its limit
    for velocity_limit in (4.0, 100.0):
        segment.set_velocity_limit(velocity_limit)
        print(f"\nVelocity limit raised to {velocity_limit}:")
        print_phases(segment)

    print()


if __name__ == "__main__":
    main()
