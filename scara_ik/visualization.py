"""
Visualization Module

Draws solved arm poses and the reachable annulus of a two-segment arm.
"""

from typing import Iterable, Optional, Tuple
import numpy as np
import matplotlib.pyplot as plt

from .arm import ArmConfiguration
from .geometry import JointAngles


def link_points(arm: ArmConfiguration, angles: JointAngles,
                elbow_up: bool = True) -> np.ndarray:
    """
    Base, elbow and tip positions for a solved pose.

    The second segment turns away from the first by (pi - A2): clockwise
    for the elbow-up branch, counterclockwise for elbow-down.

    Returns:
        3x2 array [[base], [elbow], [tip]]
    """
    a1, a2 = angles
    bend = a2 - np.pi if elbow_up else np.pi - a2
    elbow = np.array([arm.len1 * np.cos(a1), arm.len1 * np.sin(a1)])
    tip = elbow + arm.len2 * np.array([np.cos(a1 + bend), np.sin(a1 + bend)])
    return np.vstack([np.zeros(2), elbow, tip])


def plot_arm(arm: ArmConfiguration, angles: JointAngles, target=None,
             ax: Optional[plt.Axes] = None, color: str = "tab:blue",
             label: Optional[str] = None) -> plt.Axes:
    """
    Plot one arm pose.

    Args:
        arm: Arm the angles were solved for
        angles: Elbow-up joint angles
        target: Optional (x, y) target drawn as a cross
        ax: Axes to draw on (a new figure is created if None)
        color: Line color
        label: Legend label

    Returns:
        The axes drawn on
    """
    if ax is None:
        _, ax = plt.subplots(figsize=(6, 6))
        ax.set_aspect("equal")

    points = link_points(arm, angles)
    ax.plot(points[:, 0], points[:, 1], "-o", color=color, label=label)

    if target is not None:
        ax.plot(target[0], target[1], "x", color=color, markersize=10)

    return ax


def plot_solutions(arm: ArmConfiguration, targets: Iterable[Tuple[float, float]],
                   figsize: Tuple[int, int] = (8, 8)) -> plt.Figure:
    """
    Plot the solved pose for every reachable target, with the reach limits.

    Unreachable targets are marked but no pose is drawn for them.

    Returns:
        matplotlib Figure object
    """
    fig, ax = plt.subplots(figsize=figsize)
    ax.set_aspect("equal")
    ax.plot(0, 0, "ko", markersize=8, label="Base")

    colors = plt.cm.tab10.colors
    for i, (x, y) in enumerate(targets):
        color = colors[i % len(colors)]
        angles = arm.solve_checked(x, y)
        if angles is None:
            ax.plot(x, y, "x", color="gray", markersize=10,
                    label=f"({x:.2f}, {y:.2f}) unreachable")
            continue
        plot_arm(arm, angles, target=(x, y), ax=ax, color=color,
                 label=f"({x:.2f}, {y:.2f})")

    circle_inner = plt.Circle((0, 0), arm.min_reach, fill=False, linestyle="--",
                              color="red", alpha=0.7,
                              label=f"Inner Limit (r={arm.min_reach:.2f})")
    circle_outer = plt.Circle((0, 0), arm.max_reach, fill=False, linestyle="--",
                              color="red", alpha=0.7,
                              label=f"Outer Limit (r={arm.max_reach:.2f})")
    ax.add_patch(circle_inner)
    ax.add_patch(circle_outer)

    limit = arm.max_reach * 1.5
    ax.set_xlim(-limit, limit)
    ax.set_ylim(-limit, limit)
    ax.set_xlabel("X Position")
    ax.set_ylabel("Y Position")
    ax.set_title(f"{arm.name} Inverse Kinematics\n(len1={arm.len1}, len2={arm.len2})")
    ax.legend(fontsize="small")
    ax.grid(True, alpha=0.3)

    return fig
