"""Basic rigid-body kinematics helpers."""

from alienbase.vecmath import DEG_TO_RAD
from alienbase.vectors import RealVector2D


def rotate_quarter_counter_clockwise(v: RealVector2D) -> RealVector2D:
    """Return ``v`` rotated by 90 degrees counterclockwise."""
    return RealVector2D(v.y, -v.x)


def tangential_velocity(
    position_from_center: RealVector2D, vel: RealVector2D, angular_vel: float
) -> RealVector2D:
    """Velocity of a point at ``position_from_center`` of a body moving with
    ``vel`` and rotating with ``angular_vel`` degrees per step."""
    return vel - rotate_quarter_counter_clockwise(position_from_center) * (angular_vel * DEG_TO_RAD)