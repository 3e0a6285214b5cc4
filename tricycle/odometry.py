"""Odometry integration for a constant twist held over one tick.

An Odometry record carries the travelled distance, the accumulated
absolute rotation and the planar pose reached. Increments compose with
``+``, so a running estimate is simply::

    estimate = sum(increments, Odometry.ZERO)

Integration uses the exact arc of a constant-curvature motion rather than
an Euler step, so any tick length gives the same pose for the same twist.
"""
from dataclasses import dataclass, field

import numpy as np

from tricycle.core import Pose2D, Twist

EPSILON = np.finfo(np.float32).eps


@dataclass(frozen=True)
class Odometry:
    """Accumulated motion of the chassis.

    Attributes:
        s (np.float32): Travelled distance (m), never negative.
        a (np.float32): Accumulated absolute rotation (rad), never negative.
        pose (Pose2D): Pose relative to the start of the accumulation.
    """

    s: float = 0.0
    a: float = 0.0
    pose: Pose2D = field(default_factory=Pose2D)

    def __post_init__(self):
        object.__setattr__(self, "s", np.float32(self.s))
        object.__setattr__(self, "a", np.float32(self.a))

    @classmethod
    def from_twist(cls, twist: Twist) -> "Odometry":
        """Build the increment of an already integrated twist.

        ``twist.v`` is the distance and ``twist.w`` the angle covered during
        the tick. The pose follows the arc of constant curvature joining
        them; below float32 epsilon the arc degenerates to a straight line.

        Args:
            twist (Twist): Distance (m) and rotation (rad) over one tick.

        Returns:
            Odometry: Increment starting from the identity pose.
        """
        s, theta = twist.v, twist.w
        a = abs(theta)
        if a < EPSILON:
            pose = Pose2D(s, 0.0, 0.0)
        else:
            radius = s / theta
            pose = Pose2D(radius * np.sin(theta),
                          radius * (np.float32(1.0) - np.cos(theta)),
                          theta)
        return cls(abs(s), a, pose)

    @classmethod
    def integrate(cls, twist: Twist, period: float) -> "Odometry":
        """Build the increment of a velocity twist held for ``period`` seconds."""
        return cls.from_twist(twist * period)

    def __add__(self, other):
        if not isinstance(other, Odometry):
            return NotImplemented
        return Odometry(self.s + other.s, self.a + other.a, self.pose * other.pose)

    def __str__(self):
        return ("Odometry: {{ s: {:.4f}, a: {:.4f}, x: {:.4f}, y: {:.4f}, theta: {:.4f} }}"
                .format(self.s, self.a, self.pose.x, self.pose.y, self.pose.theta))


Odometry.ZERO = Odometry()
