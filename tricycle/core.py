"""Tricycle core data model (control-space records).

This module defines the small value types every other module trades in:
- Physical: the Ackermann-style command (fastest wheel speed, rear rudder)
- Wheels: the differential observation (drive wheel angular velocities)
- Twist: body-frame instantaneous motion, the pivot representation
- Pose2D: planar rigid-body transform

Key concepts:
- Units: SI throughout (metres, seconds, radians)
- Sign convention: positive rudder is a left turn, positive w is
  counterclockwise, positive wheel angular velocity is forward
- Every field is stored as a numpy binary32 scalar so results match the
  embedded controller bit-for-bit

What this module DOES NOT do:
- No conversions between representations (see tricycle.kinematics)
- No integration of motion over time (see tricycle.odometry)
"""
from dataclasses import dataclass

import numpy as np


def _f32(obj, **fields):
    # Frozen dataclasses need object.__setattr__ to normalize in place
    for name, value in fields.items():
        object.__setattr__(obj, name, np.float32(value))


@dataclass(frozen=True, eq=False)
class Physical:
    """Ackermann-style command.

    Attributes:
        speed (np.float32): Ground speed of whichever wheel is currently the
            fastest (m/s). Negative values drive in reverse.
        rudder (np.float32): Rear wheel steering angle (rad), in
            [-π/2, π/2]. NaN means the rear wheel is released.

    Equality compares fields with IEEE semantics, so a released command is
    never equal to another released command.
    """

    speed: float = 0.0
    rudder: float = 0.0

    def __post_init__(self):
        _f32(self, speed=self.speed, rudder=self.rudder)

    def __eq__(self, other):
        if not isinstance(other, Physical):
            return NotImplemented
        return self.speed == other.speed and self.rudder == other.rudder

    def is_static(self) -> bool:
        """Return True when no longitudinal motion is commanded."""
        return bool(self.speed == 0)

    def is_released(self) -> bool:
        """Return True when the rear wheel is left floating."""
        return bool(np.isnan(self.rudder))


Physical.RELEASED = Physical(0.0, np.nan)
Physical.ZERO = Physical(0.0, 0.0)


@dataclass(frozen=True)
class Wheels:
    """Angular velocities of the two drive wheels (rad/s).

    When integrated over a tick the same record holds wheel rotation
    angles (rad) instead.
    """

    left: float = 0.0
    right: float = 0.0

    def __post_init__(self):
        _f32(self, left=self.left, right=self.right)

    def __mul__(self, k):
        k = np.float32(k)
        return Wheels(self.left * k, self.right * k)

    __rmul__ = __mul__


Wheels.ZERO = Wheels(0.0, 0.0)


@dataclass(frozen=True)
class Twist:
    """Body-frame motion of the rotation center.

    Attributes:
        v (np.float32): Linear speed (m/s), or distance (m) once integrated.
        w (np.float32): Angular speed (rad/s), or angle (rad) once integrated.
    """

    v: float = 0.0
    w: float = 0.0

    def __post_init__(self):
        _f32(self, v=self.v, w=self.w)

    def __mul__(self, k):
        k = np.float32(k)
        return Twist(self.v * k, self.w * k)

    __rmul__ = __mul__


Twist.ZERO = Twist(0.0, 0.0)


@dataclass(frozen=True)
class Pose2D:
    """Planar rigid-body transform.

    Attributes:
        x (np.float32): Translation along the body x-axis (m).
        y (np.float32): Translation along the body y-axis (m).
        theta (np.float32): Rotation (rad), kept in (-π, π].
    """

    x: float = 0.0
    y: float = 0.0
    theta: float = 0.0

    def __post_init__(self):
        theta = np.float32(self.theta)
        # Normalize angle to (-π, π]
        theta = np.arctan2(np.sin(theta), np.cos(theta))
        _f32(self, x=self.x, y=self.y, theta=theta)

    def __mul__(self, other):
        """Compose two transforms (SE(2) group product).

        Args:
            other (Pose2D): Transform expressed in this pose's frame.

        Returns:
            Pose2D: ``self`` followed by ``other``.
        """
        if not isinstance(other, Pose2D):
            return NotImplemented
        c = np.cos(self.theta)
        s = np.sin(self.theta)
        return Pose2D(
            self.x + c * other.x - s * other.y,
            self.y + s * other.x + c * other.y,
            self.theta + other.theta,
        )


Pose2D.IDENTITY = Pose2D(0.0, 0.0, 0.0)
