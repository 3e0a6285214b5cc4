"""Tricycle: control-space kinematics for a three-wheel Ackermann chassis.

Two driven front wheels share a transverse axle; a single steered rear
wheel sets the heading. The package translates between the three
equivalent descriptions of the chassis motion, smooths commands under
actuator limits, integrates encoder readings into a planar pose and
predicts the trajectory that follows a command.

Modules:
    - core: Physical, Wheels, Twist and Pose2D records
    - kinematics: ChassisModel and the per-space models it composes
    - optimizer: Optimizer speed filter and the step_limited helper
    - predictor: StatusPredictor and TrajectoryPredictor
    - odometry: Odometry increments and their composition
    - motor: Motor encoder pulse scaling
    - config: Reference platform defaults

Example:
    >>> from tricycle import ChassisModel, Optimizer, StatusPredictor, TrajectoryPredictor
    >>> model = ChassisModel()
    >>> predictor = StatusPredictor(Optimizer(0.5, 1.2, 0.04), 0.04)
    >>> trajectory = TrajectoryPredictor(0.04, model, predictor)
"""

from tricycle.core import Physical, Pose2D, Twist, Wheels
from tricycle.kinematics import ChassisModel
from tricycle.motor import Motor
from tricycle.odometry import Odometry
from tricycle.optimizer import Optimizer, step_limited
from tricycle.predictor import StatusPredictor, TrajectoryPredictor

__version__ = "0.1.0"

__all__ = [
    "Physical",
    "Pose2D",
    "Twist",
    "Wheels",
    "ChassisModel",
    "Motor",
    "Odometry",
    "Optimizer",
    "step_limited",
    "StatusPredictor",
    "TrajectoryPredictor",
]
