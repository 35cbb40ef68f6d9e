"""Small utilities for degree/radian conversion.

Keep these pure numpy so the projection helpers can import them
without pulling anything else in.
"""
import math
import numpy as np


def deg_to_rad(deg: float) -> float:
    """Convert degrees to radians.

    Accepts scalars or numpy arrays; returns same-shaped output.
    """
    return np.asarray(deg, dtype=float) / 180.0 * math.pi


def rad_to_deg(rad: float) -> float:
    """Convert radians to degrees.

    Accepts scalars or numpy arrays; returns same-shaped output.
    """
    return np.asarray(rad, dtype=float) / math.pi * 180.0

