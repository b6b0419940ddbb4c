#!/usr/bin/env python3
"""
Tests for pose plotting and the demo driver.
"""

import matplotlib
matplotlib.use("Agg")

import matplotlib.pyplot as plt
import numpy as np
import pytest
from numpy.testing import assert_allclose

import demo
from scara_ik import ArmConfiguration, link_points, plot_arm, plot_solutions, robot_config


@pytest.fixture
def arm():
    return ArmConfiguration(10.0, 10.0, name="PlotArm")


def test_link_points_elbow_up(arm):
    points = link_points(arm, arm.solve(np.sqrt(200), 0))
    assert points.shape == (3, 2)
    assert_allclose(points[0], (0, 0))
    assert_allclose(points[1], (np.sqrt(50), np.sqrt(50)), atol=1e-9)
    assert_allclose(points[2], (np.sqrt(200), 0), atol=1e-9)


def test_link_points_elbow_down(arm):
    up, down = arm.ik_geometric(5, 5)
    assert_allclose(link_points(arm, down, elbow_up=False)[2], (5, 5), atol=1e-9)
    assert_allclose(link_points(arm, up)[2], (5, 5), atol=1e-9)


def test_plot_arm_draws_pose_and_target(arm):
    ax = plot_arm(arm, arm.solve(1, 19), target=(1, 19))
    assert len(ax.lines) == 2
    plt.close(ax.figure)


def test_plot_solutions(arm):
    fig = plot_solutions(arm, robot_config.SAMPLE_TARGETS)
    ax = fig.axes[0]
    # base marker + one line per target; reachable targets also get a cross
    reachable = sum(arm.solve_checked(x, y) is not None
                    for x, y in robot_config.SAMPLE_TARGETS)
    unreachable = len(robot_config.SAMPLE_TARGETS) - reachable
    assert len(ax.lines) == 1 + 2 * reachable + unreachable
    assert len(ax.patches) == 2
    plt.close(fig)


def test_solve_samples_marks_unreachable_with_nan(arm):
    rows = demo.solve_samples(arm)
    assert len(rows) == len(robot_config.SAMPLE_TARGETS)
    x, y, angles = rows[-1]
    assert (x, y) == (20.0, 20.0)
    assert not angles.is_finite()
    assert all(angles.is_finite() for _, _, angles in rows[:-1])


def test_demo_main(tmp_path, capsys, clean_logger):
    out_file = tmp_path / "demo.png"
    demo.main(save_path=str(out_file))
    output = capsys.readouterr().out
    assert "Inverse Kinematics Demo" in output
    assert "A1=nan rad" in output
    assert out_file.exists()
    plt.close("all")
