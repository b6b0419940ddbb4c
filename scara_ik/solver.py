"""
Inverse Kinematics Solver Module

Closed-form (geometric) inverse kinematics for a two-segment planar arm
with rotary joints. The base, the elbow and the target form a triangle with
sides {dist, len1, len2}; both joint angles follow from the law of cosines.

Unreachable targets are not reported by exceptions: the arccosine leaves
its domain and the affected angle comes back as NaN. Callers that want to
branch up front use is_reachable().
"""

import numpy as np

from .geometry import JointAngles, base_angle, law_of_cosines, square_dist


def _joint_angles(x: float, y: float, len1: float, len2: float,
                  elbow_up: bool, clamp: bool) -> JointAngles:
    dist = np.sqrt(square_dist(x, y))

    # angle between the line to the target and the first segment
    d2 = law_of_cosines(dist, len1, len2, clamp=clamp)
    a1 = base_angle(x, y) + (d2 if elbow_up else -d2)

    # angle at the elbow, opposite side dist
    a2 = law_of_cosines(len1, len2, dist, clamp=clamp)

    return JointAngles(a1, a2)


def solve(x: float, y: float, len1: float, len2: float,
          clamp: bool = False) -> JointAngles:
    """
    Compute the joint angles that place the arm's tip at (x, y).

    Only the elbow-up branch is returned (A1 = D1 + D2). The origin is a
    degenerate input: the D2 denominator is zero, so A1 is NaN even when
    len1 == len2 and the folded arm would reach it.

    Args:
        x: Target x position
        y: Target y position
        len1: Length of the first segment
        len2: Length of the second segment
        clamp: Clip both arccosine arguments to [-1, 1]. Off by default;
            when enabled, unreachable targets are mapped to the nearest
            boundary pose instead of NaN.

    Returns:
        JointAngles (A1, A2) in radians, possibly containing NaN
    """
    return _joint_angles(x, y, len1, len2, elbow_up=True, clamp=clamp)


def solve_branch(x: float, y: float, len1: float, len2: float,
                 elbow_up: bool = True, clamp: bool = False) -> JointAngles:
    """
    Compute one of the two mirrored elbow solutions.

    elbow_up=True is identical to solve(). elbow_up=False reflects the first
    segment across the line to the target (A1 = D1 - D2); the elbow angle A2
    is the same for both branches.
    """
    return _joint_angles(x, y, len1, len2, elbow_up=elbow_up, clamp=clamp)


def is_reachable(x: float, y: float, len1: float, len2: float) -> bool:
    """Check |len1 - len2| <= dist <= len1 + len2 for the target (x, y)."""
    dist = np.sqrt(square_dist(x, y))
    return bool(abs(len1 - len2) <= dist <= len1 + len2)
