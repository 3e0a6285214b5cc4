"""Speed optimizer for Physical commands.

The optimizer attenuates a requested longitudinal speed so the chassis
respects its actuators on every tick:
- Performance limit: the rear wheel turns at a finite rate, so speed is
  withheld while the rudder is still far from its target
- Comfort limit: sharp turns are taken slower
- Acceleration limit: speed changes by at most one step per tick
"""
import logging

import numpy as np

from tricycle import config
from tricycle.core import Physical

logger = logging.getLogger(__name__)

_FRAC_PI_2 = np.float32(np.pi / 2)
_FRAC_PI_3 = np.float32(np.pi / 3)
_FRAC_PI_6 = np.float32(np.pi / 6)


def step_limited(current, step, target):
    """Move ``current`` toward ``target`` by at most ``step``.

    Args:
        current (float): Present value.
        step (float): Largest allowed change, non-negative. 0 holds.
        target (float): Desired value.

    Returns:
        np.float32: The next value. If either value is NaN the comparison
        is unordered and ``current`` is returned unchanged.
    """
    current = np.float32(current)
    step = np.float32(step)
    target = np.float32(target)
    if target > current:
        return min(current + step, target)
    elif target < current:
        return max(current - step, target)
    return current


class Optimizer:
    """Per-tick speed filter.

    Attributes:
        angular_attenuation (np.float32): Speed fraction kept at full lock,
            in [0, 1].
        speed_step (np.float32): Largest speed change per tick (m/s),
            acceleration times period.

    Example:
        >>> optimizer = Optimizer(0.5, 1.2, 0.04)
        >>> current = Physical(0.4, 0.0)
        >>> optimizer.optimize_speed(Physical.RELEASED, current)  # 0.352
    """

    def __init__(self, angular_attenuation: float = config.ANGULAR_ATTENUATION,
                 acceleration: float = config.ACCELERATION,
                 period: float = config.PERIOD):
        """Initialize optimizer.

        Args:
            angular_attenuation (float): Speed fraction kept when steering at
                the mechanical limit (default: 0.5)
            acceleration (float): Maximum acceleration (default: 1.2 m/s²)
            period (float): Control tick period (default: 0.04 s)
        """
        assert 0 <= angular_attenuation <= 1, \
            f"angular attenuation must be in [0, 1], got {angular_attenuation}"
        assert acceleration >= 0, f"acceleration must be non-negative, got {acceleration}"
        assert period >= 0, f"period must be non-negative, got {period}"
        self.angular_attenuation = np.float32(angular_attenuation)
        self.speed_step = np.float32(acceleration) * np.float32(period)
        logger.debug("Optimizer: angular_attenuation=%.3f speed_step=%.4f",
                     self.angular_attenuation, self.speed_step)

    def optimize_speed(self, target: Physical, current: Physical) -> np.float32:
        """Compute the speed to issue on the next tick.

        Args:
            target (Physical): Requested command.
            current (Physical): Command issued on the previous tick.

        Returns:
            np.float32: Next speed, within ``speed_step`` of ``current.speed``.

        The rudder tolerance grows with the magnitude of the current speed,
        so reversing is attenuated exactly like driving forward.
        """
        speed = target.speed
        if not target.is_released():
            # The faster the chassis, the more rudder mismatch is tolerated
            width = abs(current.speed) * _FRAC_PI_3 + _FRAC_PI_6
            diff = abs(target.rudder - current.rudder)
            speed = speed * max(np.float32(0.0), np.float32(1.0) - diff / width)
            # Slow down in sharp turns
            alpha = self.angular_attenuation
            speed = speed * ((np.float32(1.0) - abs(target.rudder) / _FRAC_PI_2)
                             * (np.float32(1.0) - alpha) + alpha)
        return step_limited(current.speed, self.speed_step, speed)
