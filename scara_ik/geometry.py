"""
Geometry Module

Value types and the trigonometric building blocks of the two-segment
inverse kinematics: squared distance, base angle, law of cosines and
radian/degree conversion.

All helpers work on numpy float64 scalars so that out-of-domain inputs
produce NaN instead of raising (a zero denominator or an arccosine argument
outside [-1, 1] is how an unreachable target shows up).
"""

from typing import NamedTuple
import numpy as np


class Point2D(NamedTuple):
    """Target end-effector position in the arm's base frame."""

    x: float
    y: float

    def distance(self) -> float:
        """Straight-line distance from the base (origin) to the point."""
        return float(np.sqrt(square_dist(self.x, self.y)))


class JointAngles(NamedTuple):
    """
    Joint angle pair in radians.

    a1 is the base joint angle measured from the positive x-axis.
    a2 is the elbow angle between the two segments (interior angle of the
    base/elbow/tip triangle), so a fully extended arm has a2 = pi.
    """

    a1: float
    a2: float

    def degrees(self) -> "JointAngles":
        return JointAngles(to_degrees(self.a1), to_degrees(self.a2))

    def is_finite(self) -> bool:
        return bool(np.isfinite(self.a1) and np.isfinite(self.a2))

    def __str__(self):
        deg = self.degrees()
        return (f"A1={self.a1:.6f} rad ({deg.a1:.4f}°), "
                f"A2={self.a2:.6f} rad ({deg.a2:.4f}°)")


def square_dist(x: float, y: float) -> np.float64:
    """Squared distance from (0, 0) to (x, y)."""
    x, y = np.float64(x), np.float64(y)
    with np.errstate(over="ignore"):
        return x * x + y * y


def base_angle(x: float, y: float) -> float:
    """
    Angle of the line from the origin to (x, y), relative to the x-axis.

    Uses the two-argument arctangent so all four quadrants and the
    axis-aligned cases (including x = 0) are resolved in (-pi, pi].
    """
    return float(np.arctan2(np.float64(y), np.float64(x)))


def law_of_cosines(a: float, b: float, c: float, clamp: bool = False) -> float:
    """
    Angle C opposite side c of a triangle with sides a, b, c.

    Computes acos((a² + b² - c²) / (2ab)). Sides that cannot form a triangle
    give an argument outside [-1, 1] and the result is NaN; a zero side in
    the denominator, or sides so large their squares overflow, give NaN as
    well. No warnings are emitted for any of these.

    Args:
        a: First side adjacent to angle C
        b: Second side adjacent to angle C
        c: Side opposite angle C
        clamp: Clip the arccosine argument to [-1, 1] before evaluating it.
            Not part of the plain formula: it absorbs rounding at the
            reach boundary, but also maps impossible triangles to 0 or pi.

    Returns:
        Angle C in radians, in [0, pi], or NaN
    """
    a, b, c = np.float64(a), np.float64(b), np.float64(c)
    with np.errstate(divide="ignore", invalid="ignore", over="ignore"):
        cos_c = (a * a + b * b - c * c) / (2 * a * b)
        if clamp:
            # NaN (0/0) passes through np.clip unchanged
            cos_c = np.clip(cos_c, -1.0, 1.0)
        return float(np.arccos(cos_c))


def to_degrees(radians: float) -> float:
    """Convert radians to degrees for display."""
    return float(radians * 180 / np.pi)
