"""Abstract base class for chassis control-space models.

This module defines the interface every control space must implement to
be converted through the Twist hub.
"""
from abc import ABC, abstractmethod

from tricycle.core import Twist


class KinematicsModel(ABC):
    """Abstract base class for control-space kinematics models.

    A kinematics model defines:
    1. The control record it understands (Physical, Wheels, ...)
    2. How that record maps to a body-frame Twist
    3. How a Twist maps back to that record

    Using Twist as the single hub gives O(1) conversion between any two
    control spaces: ``b.from_twist(a.to_twist(control))``.

    Example:
        >>> class MyKinematics(KinematicsModel):
        ...     def to_twist(self, control):
        ...         return Twist(control.v, control.w)
        ...
        ...     def from_twist(self, twist):
        ...         return twist
    """

    @abstractmethod
    def to_twist(self, control) -> Twist:
        """Convert a control record to the equivalent body-frame twist.

        Args:
            control: Control record in this model's space.

        Returns:
            Twist: Motion of the rotation center.
        """
        pass

    @abstractmethod
    def from_twist(self, twist: Twist):
        """Convert a body-frame twist to this model's control record.

        Args:
            twist (Twist): Motion of the rotation center.

        Returns:
            Control record in this model's space.
        """
        pass
