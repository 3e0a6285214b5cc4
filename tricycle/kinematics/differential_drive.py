"""Differential drive kinematic model.

The two front wheels of the chassis are independently driven on a common
transverse axle. Their angular velocities fully determine the body twist;
the steered rear wheel only follows.

References:
    - Siegwart, R., & Nourbakhsh, I. R. (2004). Introduction to autonomous
      mobile robots. MIT press.
"""
import numpy as np

from tricycle.core import Twist, Wheels
from tricycle.kinematics.base import KinematicsModel


class DifferentialDriveKinematics(KinematicsModel):
    """Differential drive model between Wheels and Twist.

    Control Record:
        Wheels(left, right)
        - left: Left wheel angular velocity (rad/s)
        - right: Right wheel angular velocity (rad/s)

    Forward Kinematics:
        v = (right + left) * r / 2
        ω = (right - left) * r / W

    Inverse Kinematics:
        left  = (v - (W/2) * ω) / r
        right = (v + (W/2) * ω) / r

    Where r is the wheel radius and W is the track width. Both directions
    are linear, so scaling the wheels scales the twist by the same factor.

    Attributes:
        width (np.float32): Distance between left and right wheels (m)
        wheel (np.float32): Drive wheel radius (m)

    Example:
        >>> kinematics = DifferentialDriveKinematics(width=0.4, wheel=0.1)
        >>> twist = kinematics.to_twist(Wheels(-1.0, 1.0))  # Spin in place
        >>> print(twist.v, twist.w)  # 0.0 0.5
    """

    def __init__(self, width: float, wheel: float):
        """Initialize differential drive kinematics model.

        Args:
            width (float): Track width (m), must be positive
            wheel (float): Drive wheel radius (m), must be positive
        """
        assert width > 0, f"track width must be positive, got {width}"
        assert wheel > 0, f"wheel radius must be positive, got {wheel}"
        self.width = np.float32(width)
        self.wheel = np.float32(wheel)

    def to_twist(self, wheels: Wheels) -> Twist:
        """Convert wheel angular velocities to a body twist.

        Args:
            wheels (Wheels): Drive wheel angular velocities

        Returns:
            Twist: Linear and angular velocity of the axle center
        """
        return Twist(
            (wheels.right + wheels.left) * self.wheel / np.float32(2.0),
            (wheels.right - wheels.left) * self.wheel / self.width,
        )

    def from_twist(self, twist: Twist) -> Wheels:
        """Convert a body twist to wheel angular velocities.

        Args:
            twist (Twist): Linear and angular velocity of the axle center

        Returns:
            Wheels: Drive wheel angular velocities
        """
        half_width = self.width / np.float32(2.0)
        return Wheels(
            (twist.v - half_width * twist.w) / self.wheel,
            (twist.v + half_width * twist.w) / self.wheel,
        )
