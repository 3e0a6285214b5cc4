"""Kinematics models for the three-wheel Ackermann chassis.

This subpackage converts among the control spaces of the chassis. Every
space model inherits from the abstract KinematicsModel base class and
converts to and from Twist, the common hub.

Available models:
    - DifferentialDriveKinematics: Wheels <-> Twist
    - AckermannKinematics: Physical <-> Twist
    - ChassisModel: all conversions, including odometry increments
"""

from tricycle.kinematics.base import KinematicsModel
from tricycle.kinematics.differential_drive import DifferentialDriveKinematics
from tricycle.kinematics.ackermann import AckermannKinematics
from tricycle.kinematics.chassis import ChassisModel

__all__ = [
    "KinematicsModel",
    "DifferentialDriveKinematics",
    "AckermannKinematics",
    "ChassisModel",
]
