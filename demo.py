#!/usr/bin/env python3
"""
Demo script for the SCARA inverse kinematics solver

Solves a fixed set of sample targets for the default arm, prints the joint
angles in radians and degrees, and saves a figure of the solved poses.
"""

from typing import List, Tuple

import matplotlib
matplotlib.use("Agg")

from scara_ik import ArmConfiguration, JointAngles, setup_logging, get_logger, plot_solutions
from scara_ik import robot_config

logger = get_logger("demo")


def solve_samples(arm: ArmConfiguration, targets=robot_config.SAMPLE_TARGETS
                  ) -> List[Tuple[float, float, JointAngles]]:
    """Solve every target with the plain formulas (NaN marks unreachable)."""
    return [(x, y, arm.solve(x, y)) for x, y in targets]


def main(save_path: str = robot_config.DEMO_FIGURE_PATH):
    setup_logging("INFO")

    arm = ArmConfiguration.from_defaults(name="DemoArm")
    logger.info(f"Created arm: {arm}")

    print("=== Inverse Kinematics Demo ===")
    for x, y, angles in solve_samples(arm):
        print(f"({x:.4f}, {y:.4f}) -> {angles}")

    fig = plot_solutions(arm, robot_config.SAMPLE_TARGETS)
    fig.savefig(save_path)
    logger.info(f"Saved figure to {save_path}")


if __name__ == "__main__":
    main()
