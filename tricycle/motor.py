"""Encoder pulse scaling for the drive and steering motors.

A motor is described by a single constant, the axle angle covered by one
encoder pulse. Pulse counts are signed 32-bit integers; angles are
binary32 radians.
"""
from dataclasses import dataclass

import numpy as np

from tricycle import config
from tricycle.core import Wheels


@dataclass(frozen=True)
class Motor:
    """Conversion between encoder pulses and axle radians.

    Attributes:
        k (np.float32): Radians per pulse.

    Example:
        >>> Motor.WHEEL.rad_to_pulses(Motor.WHEEL.pulses_to_rad(12345))
        12345
    """

    k: float

    def __post_init__(self):
        object.__setattr__(self, "k", np.float32(self.k))

    def pulses_to_rad(self, pulses: int) -> np.float32:
        """Convert an encoder pulse count to axle radians."""
        return np.float32(pulses) * self.k

    def rad_to_pulses(self, rad: float) -> int:
        """Convert axle radians to the nearest encoder pulse count.

        Results outside the signed 32-bit range wrap around.
        """
        pulses = np.rint(np.float32(rad) / self.k)
        return int(np.int64(pulses).astype(np.int32))

    def wheels_from_pulses(self, left: int, right: int) -> Wheels:
        """Convert a pair of drive encoder deltas to wheel rotations (rad).

        Args:
            left (int): Left wheel pulse delta over one tick.
            right (int): Right wheel pulse delta over one tick.

        Returns:
            Wheels: Rotation of each wheel during the tick.
        """
        return Wheels(self.pulses_to_rad(left), self.pulses_to_rad(right))


Motor.WHEEL = Motor(config.WHEEL_RAD_PER_PULSE)
Motor.RUDDER = Motor(config.RUDDER_RAD_PER_PULSE)
