"""Status and trajectory predictors.

Both predictors are finite lazy sequences. They advance one control tick
per item and stop once the target is released and the chassis is static.
A caller that only wants a bounded forecast simply stops iterating::

    for physical in itertools.islice(predictor, 25):
        ...
"""
import logging
from typing import Iterator, Optional, Tuple

import numpy as np

from tricycle import config
from tricycle.core import Physical
from tricycle.kinematics.chassis import ChassisModel
from tricycle.odometry import Odometry
from tricycle.optimizer import Optimizer, step_limited

logger = logging.getLogger(__name__)


class StatusPredictor:
    """Steps the issued command toward a target, one tick at a time.

    The ingress layer writes ``target`` whenever a new command arrives; the
    predictor reacts on the next step. ``current`` is only changed by
    ``step``. Two predictors with equal fields step identically.

    Attributes:
        optimizer (Optimizer): Speed filter applied on every tick.
        rudder_step (np.float32): Largest rudder change per tick (rad).
        current (Physical): Command issued on the last tick (starts ZERO).
        target (Physical): Requested command (starts RELEASED).

    Example:
        >>> predictor = StatusPredictor(Optimizer(0.5, 1.2, 0.04), 0.04)
        >>> predictor.current = Physical(0.4, 0.0)
        >>> speeds = [p.speed for p in predictor]  # 0.352, 0.304, ..., 0.0
    """

    def __init__(self, optimizer: Optimizer, period: float = config.PERIOD,
                 rudder_speed: float = config.RUDDER_SPEED):
        """Initialize status predictor.

        Args:
            optimizer (Optimizer): Speed filter used by the chassis.
            period (float): Control tick period (default: 0.04 s)
            rudder_speed (float): Maximum rear wheel steering rate
                (default: 1.0 rad/s)
        """
        assert period >= 0, f"period must be non-negative, got {period}"
        assert rudder_speed >= 0, f"rudder speed must be non-negative, got {rudder_speed}"
        self.optimizer = optimizer
        self.rudder_step = np.float32(rudder_speed) * np.float32(period)
        self.current = Physical.ZERO
        self.target = Physical.RELEASED

    def step(self) -> Optional[Physical]:
        """Predict the command issued on the next tick.

        Returns:
            Physical | None: The next command, or None once the target is
            released and the chassis has stopped.
        """
        if self.target.is_released() and self.current.is_static():
            logger.debug("Status predictor stopped at %s", self.current)
            return None
        if self.current != self.target:
            self.current = Physical(
                self.optimizer.optimize_speed(self.target, self.current),
                step_limited(self.current.rudder, self.rudder_step, self.target.rudder),
            )
        return self.current

    def __iter__(self) -> Iterator[Physical]:
        return self

    def __next__(self) -> Physical:
        physical = self.step()
        if physical is None:
            raise StopIteration
        return physical


class TrajectoryPredictor:
    """Forecasts the motion produced by following a status predictor.

    Each item is the tick duration and the odometry increment covered
    during that tick, starting from the identity pose.

    Attributes:
        period (float): Control tick period (s)
        model (ChassisModel): Geometry used to resolve each command
        predictor (StatusPredictor): Source of the per-tick commands

    Example:
        >>> model = ChassisModel()
        >>> optimizer = Optimizer(0.5, 1.2, 0.04)
        >>> trajectory = TrajectoryPredictor(0.04, model, StatusPredictor(optimizer, 0.04))
        >>> trajectory.predictor.target = Physical(0.5, 0.2)
        >>> for elapsed, odometry in itertools.islice(trajectory.forecast(), 50):
        ...     print(elapsed, odometry)
    """

    def __init__(self, period: float, model: ChassisModel, predictor: StatusPredictor):
        self.period = period
        self.model = model
        self.predictor = predictor

    def step(self) -> Optional[Tuple[float, Odometry]]:
        """Predict the duration and odometry increment of the next tick.

        Returns:
            tuple | None: ``(period, increment)``, or None once the status
            predictor has terminated.
        """
        physical = self.predictor.step()
        if physical is None:
            return None
        # Scaling the speed by the tick turns the twist into distance and angle
        distance = Physical(physical.speed * np.float32(self.period), physical.rudder)
        return self.period, self.model.physical_to_odometry(distance)

    def forecast(self) -> Iterator[Tuple[float, Odometry]]:
        """Yield the elapsed time and the cumulative odometry after each tick."""
        elapsed = 0.0
        total = Odometry.ZERO
        for period, increment in self:
            elapsed += period
            total += increment
            yield elapsed, total

    def __iter__(self) -> Iterator[Tuple[float, Odometry]]:
        return self

    def __next__(self) -> Tuple[float, Odometry]:
        item = self.step()
        if item is None:
            raise StopIteration
        return item
