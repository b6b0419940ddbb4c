"""
SCARA Inverse Kinematics

Closed-form inverse kinematics for two-segment planar arms with rotary
joints, with plotting helpers for the solved poses.
"""

from .geometry import (
    Point2D,
    JointAngles,
    square_dist,
    base_angle,
    law_of_cosines,
    to_degrees,
)
from .solver import solve, solve_branch, is_reachable
from .arm import ArmConfiguration
from .logging import setup_logging, get_logger
from .visualization import link_points, plot_arm, plot_solutions

__version__ = "0.1.0"

__all__ = [
    "Point2D",
    "JointAngles",
    "square_dist",
    "base_angle",
    "law_of_cosines",
    "to_degrees",
    "solve",
    "solve_branch",
    "is_reachable",
    "ArmConfiguration",
    "setup_logging",
    "get_logger",
    "link_points",
    "plot_arm",
    "plot_solutions",
]
