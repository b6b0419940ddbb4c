"""
Robot Configuration Module

Single source of truth for the arm parameters used by the demo.
Import this module instead of hardcoding values.
"""

import numpy as np

# Segment lengths. Equal lengths let the folded arm reach (0, 0).
LINK1_LENGTH = 10.0  # len1
LINK2_LENGTH = 10.0  # len2

# Sample targets (x, y) solved by demo.py
SAMPLE_TARGETS = (
    (5.0, 5.0),
    (float(np.sqrt(200)), 0.0),  # A1 = 45°, A2 = 90°
    (1.0, 19.0),
    (20.0, 0.0),  # maximum reach along x
    (0.0, 20.0),  # maximum reach along y
    (20.0, 20.0),  # out of reach
)

# Output file for the demo figure
DEMO_FIGURE_PATH = "scara_ik_demo.png"
