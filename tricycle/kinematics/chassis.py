"""Chassis model: conversions among the three control spaces.

Twist is the hub. Physical commands go through the Ackermann model,
wheel observations through the differential drive model, and any pair
is one hop away through Twist.

Typical flow:
1) The operator commands a Physical (speed, rudder)
2) physical_to_wheels gives the drive wheel set-points, rudder goes to
   the rear servo as is
3) Encoder deltas come back as Wheels rotations over the tick
4) wheels_to_odometry turns them into a pose increment
"""
import numpy as np

from tricycle import config
from tricycle.core import Physical, Twist, Wheels
from tricycle.kinematics.ackermann import AckermannKinematics
from tricycle.kinematics.differential_drive import DifferentialDriveKinematics
from tricycle.odometry import Odometry


class ChassisModel:
    """Geometry of the three-wheel chassis.

    Besides the three structural parameters the model caches the critical
    rudder (see AckermannKinematics). It decides which wheel bounds the
    top speed, so ``Physical.speed`` always denotes the speed of whichever
    wheel is currently fastest.

    Attributes:
        width (np.float32): Track, distance between the front wheels (m)
        length (np.float32): Wheelbase, front axle to rear wheel (m)
        wheel (np.float32): Drive wheel radius (m)
        ackermann (AckermannKinematics): Physical <-> Twist
        differential (DifferentialDriveKinematics): Wheels <-> Twist

    Example:
        >>> model = ChassisModel(width=0.4, length=0.3, wheel=0.1)
        >>> wheels = model.physical_to_wheels(Physical(0.5, 0.0))
        >>> print(wheels.left, wheels.right)  # 5.0 5.0
    """

    def __init__(self, width: float = config.WIDTH, length: float = config.LENGTH,
                 wheel: float = config.WHEEL_RADIUS):
        """Initialize chassis model.

        Args:
            width (float): Track width (default: 0.465 m)
            length (float): Wheelbase (default: 0.355 m)
            wheel (float): Drive wheel radius (default: 0.105 m)
        """
        self.ackermann = AckermannKinematics(width, length)
        self.differential = DifferentialDriveKinematics(width, wheel)

    @classmethod
    def default(cls) -> "ChassisModel":
        """Return the model of the reference platform."""
        return cls(config.WIDTH, config.LENGTH, config.WHEEL_RADIUS)

    @property
    def width(self) -> np.float32:
        """Track width (m), shared by both component models."""
        return self.differential.width

    @property
    def length(self) -> np.float32:
        """Wheelbase (m)."""
        return self.ackermann.length

    @property
    def wheel(self) -> np.float32:
        """Drive wheel radius (m)."""
        return self.differential.wheel

    @property
    def critical_rudder(self) -> np.float32:
        """Rear wheel angle beyond which the rear wheel is the fastest (rad)."""
        return self.ackermann.critical_rudder

    def __repr__(self):
        return (f"ChassisModel(width={self.width}, length={self.length}, "
                f"wheel={self.wheel})")

    def physical_to_twist(self, physical: Physical) -> Twist:
        """Physical command to body twist; released maps to zero."""
        return self.ackermann.to_twist(physical)

    def twist_to_physical(self, twist: Twist) -> Physical:
        """Body twist to Physical command; zero maps to released."""
        return self.ackermann.from_twist(twist)

    def wheels_to_twist(self, wheels: Wheels) -> Twist:
        """Drive wheel angular velocities to body twist."""
        return self.differential.to_twist(wheels)

    def twist_to_wheels(self, twist: Twist) -> Wheels:
        """Body twist to drive wheel angular velocities."""
        return self.differential.from_twist(twist)

    def physical_to_wheels(self, physical: Physical) -> Wheels:
        """Physical command to drive wheel set-points, through Twist."""
        return self.twist_to_wheels(self.physical_to_twist(physical))

    def wheels_to_physical(self, wheels: Wheels) -> Physical:
        """Drive wheel observation to Physical command, through Twist."""
        return self.twist_to_physical(self.wheels_to_twist(wheels))

    # The odometry conversions take records already integrated over a tick:
    # distance and angle, wheel rotation in radians.

    def twist_to_odometry(self, twist: Twist) -> Odometry:
        """Odometry increment of a distance/angle twist."""
        return Odometry.from_twist(twist)

    def wheels_to_odometry(self, wheels: Wheels) -> Odometry:
        """Odometry increment of the wheel rotations over one tick."""
        return Odometry.from_twist(self.wheels_to_twist(wheels))

    def physical_to_odometry(self, physical: Physical) -> Odometry:
        """Odometry increment of a distance-scaled Physical command."""
        return Odometry.from_twist(self.physical_to_twist(physical))
