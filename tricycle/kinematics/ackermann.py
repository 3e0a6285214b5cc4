"""Ackermann steering kinematic model with a steered rear wheel.

The chassis has two driven front wheels and a single steered rear wheel.
All three roll without side-slip about a common instantaneous center of
rotation on the front axle line.

References:
    - Siegwart, R., & Nourbakhsh, I. R. (2004). Introduction to autonomous
      mobile robots. MIT press.
    - Lavalle, S. M. (2006). Planning algorithms. Cambridge university press.
"""
import logging

import numpy as np

from tricycle.core import Physical, Twist
from tricycle.kinematics.base import KinematicsModel

logger = logging.getLogger(__name__)


class AckermannKinematics(KinematicsModel):
    """Ackermann model between Physical commands and Twist.

    Control Record:
        Physical(speed, rudder)
        - speed: Ground speed of the fastest wheel (m/s)
        - rudder: Rear wheel steering angle (rad), NaN when released

    Turning Radii (signed, positive = center on the robot's left):
        R_c = -L / tan(rudder)      # axle center
        R_r = -L / sin(rudder)      # rear wheel

    Where L is the wheelbase and W the track width.

    Critical Rudder:
        critical = atan2(L² / W - W / 2, L)

    Above the critical angle the rear wheel is the fastest wheel and
    ``speed`` is its ground speed; below it ``speed`` is the ground speed
    of the outer front wheel (left when rudder > 0, right otherwise).

    Attributes:
        width (np.float32): Track width (m)
        length (np.float32): Wheelbase (m)
        critical_rudder (np.float32): Critical steering angle (rad), in (0, π/2)

    Example:
        >>> kinematics = AckermannKinematics(width=0.4, length=0.3)
        >>> twist = kinematics.to_twist(Physical(0.5, np.pi / 4))
        >>> physical = kinematics.from_twist(twist)  # speed 0.5, rudder π/4
    """

    def __init__(self, width: float, length: float):
        """Initialize Ackermann kinematics model.

        Args:
            width (float): Track width (m), must be positive
            length (float): Wheelbase (m), must be positive
        """
        assert width > 0, f"track width must be positive, got {width}"
        assert length > 0, f"wheelbase must be positive, got {length}"
        self.width = np.float32(width)
        self.length = np.float32(length)
        self.critical_rudder = np.arctan2(
            self.length * self.length / self.width - self.width / np.float32(2.0),
            self.length,
        )
        logger.debug("Ackermann model: width=%.3f length=%.3f critical_rudder=%.4f",
                     self.width, self.length, self.critical_rudder)

    def _radius(self, rudder, r_chassis):
        """Signed turning radius of the wheel whose speed is ``Physical.speed``."""
        if abs(rudder) > self.critical_rudder:
            return -self.length / np.sin(rudder)
        elif rudder > 0:
            return r_chassis - self.width / np.float32(2.0)
        else:
            return r_chassis + self.width / np.float32(2.0)

    def to_twist(self, physical: Physical) -> Twist:
        """Convert a Physical command to a body twist.

        A released command produces no motion.

        Args:
            physical (Physical): Fastest wheel speed and rear rudder

        Returns:
            Twist: Linear and angular velocity of the axle center
        """
        if physical.is_released():
            return Twist.ZERO
        if physical.rudder == 0:
            return Twist(physical.speed, 0.0)

        r_chassis = -self.length / np.tan(physical.rudder)
        w = physical.speed / self._radius(physical.rudder, r_chassis)
        return Twist(w * r_chassis, w)

    def from_twist(self, twist: Twist) -> Physical:
        """Convert a body twist to a Physical command.

        The zero twist maps to ``Physical.RELEASED``.

        Args:
            twist (Twist): Linear and angular velocity of the axle center

        Returns:
            Physical: Fastest wheel speed and rear rudder
        """
        if twist.w == 0:
            if twist.v == 0:
                return Physical.RELEASED
            return Physical(twist.v, 0.0)

        r_chassis = twist.v / twist.w
        # atan2 only lands in (-π/2, π/2) with a non-negative second argument,
        # so the sign of the radius is moved onto the first one
        rudder = np.arctan2(np.copysign(np.float32(1.0), r_chassis) * -self.length,
                            abs(r_chassis))
        return Physical(twist.w * self._radius(rudder, r_chassis), rudder)
