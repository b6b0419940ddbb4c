"""
Arm Configuration Module

An immutable two-segment arm configuration bound to the closed-form
inverse kinematics solver, so that several arms with different segment
lengths can be used side by side.
"""

from dataclasses import dataclass
from typing import List, Optional
import numpy as np

from . import robot_config
from .geometry import JointAngles, Point2D, square_dist
from .logging import get_logger
from .solver import is_reachable, solve, solve_branch

logger = get_logger("arm")


@dataclass(frozen=True)
class ArmConfiguration:
    """Two-segment planar arm with rotary joints at the base and the elbow."""

    len1: float
    len2: float
    name: str = "Arm"

    def __post_init__(self):
        for label, length in (("len1", self.len1), ("len2", self.len2)):
            if not np.isfinite(length) or length <= 0:
                raise ValueError(
                    f"{label} must be a positive finite length, got {length!r}"
                )

    @classmethod
    def from_defaults(cls, name: str = "Arm") -> "ArmConfiguration":
        """Build the arm from the segment lengths in robot_config."""
        return cls(robot_config.LINK1_LENGTH, robot_config.LINK2_LENGTH, name=name)

    @property
    def min_reach(self) -> float:
        return abs(self.len1 - self.len2)

    @property
    def max_reach(self) -> float:
        return self.len1 + self.len2

    def solve(self, x: float, y: float, clamp: bool = False) -> JointAngles:
        """Joint angles for (x, y); NaN components mean the target is unreachable."""
        return solve(x, y, self.len1, self.len2, clamp=clamp)

    def solve_point(self, point: Point2D) -> JointAngles:
        return self.solve(point.x, point.y)

    def is_reachable(self, x: float, y: float) -> bool:
        return is_reachable(x, y, self.len1, self.len2)

    def solve_checked(self, x: float, y: float) -> Optional[JointAngles]:
        """
        Solve inverse kinematics, reporting failure explicitly.

        Args:
            x: Target x position
            y: Target y position

        Returns:
            Elbow-up JointAngles, or None if the target is out of reach or
            at the origin (where the formula has no defined base angle)
        """
        if not self.is_reachable(x, y) or square_dist(x, y) == 0:
            logger.debug(f"{self.name}: target ({x}, {y}) is unreachable")
            return None
        # reachability is established, so clipping only absorbs rounding
        return self.solve(x, y, clamp=True)

    def ik_geometric(self, x: float, y: float) -> Optional[List[JointAngles]]:
        """
        Solve inverse kinematics for both elbow configurations of (x, y).

        Returns:
            [elbow_up, elbow_down] or None if unreachable
        """
        if self.solve_checked(x, y) is None:
            return None
        return [
            solve_branch(x, y, self.len1, self.len2, elbow_up=elbow_up, clamp=True)
            for elbow_up in (True, False)
        ]

    def __repr__(self):
        return f"{self.name}(len1={self.len1}, len2={self.len2})"
