"""Vector length and angle helpers. An angle of 0 degrees points along (0, -1)."""

import math

from alienbase.vectors import RealVector2D

PI = 3.14159265358979
DEG_TO_RAD = PI / 180.0
RAD_TO_DEG = 180.0 / PI


def length(v: RealVector2D) -> float:
    """Euclidean length of ``v``."""
    return math.sqrt(v.x * v.x + v.y * v.y)


def angle_of_vector(v: RealVector2D) -> float:
    """Angle of ``v`` in degrees, clockwise from (0, -1), in [0, 360).

    Raises ZeroDivisionError for the zero vector.
    """
    ratio = max(-1.0, min(1.0, -v.y / length(v)))
    angle_sin = math.asin(ratio) * RAD_TO_DEG
    if v.x >= 0.0:
        return 90.0 - angle_sin
    return angle_sin + 270.0