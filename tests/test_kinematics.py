"""Tests for the chassis kinematic models."""
import numpy as np
import pytest

from tricycle.core import Physical, Twist, Wheels
from tricycle.kinematics import (
    AckermannKinematics,
    ChassisModel,
    DifferentialDriveKinematics,
    KinematicsModel,
)

TOL = 1e-5

SPEEDS = [-1.0, -0.5, 0.25, 0.5, 1.0]
RUDDERS = [-1.5, -np.pi / 4, -0.05, 0.0, 0.05, np.pi / 4, 1.5]


@pytest.fixture
def model():
    return ChassisModel(0.4, 0.3, 0.1)


def assert_physical_close(actual, expected):
    assert actual.speed == pytest.approx(expected.speed, abs=TOL)
    if expected.is_released():
        assert actual.is_released()
    else:
        assert actual.rudder == pytest.approx(expected.rudder, abs=TOL)


class TestChassisModel:
    """Test suite for the chassis model conversions."""

    def test_critical_rudder(self, model):
        """Critical rudder is derived from the geometry on construction."""
        assert model.critical_rudder == pytest.approx(np.arctan2(0.025, 0.3), abs=1e-6)
        assert model.critical_rudder == pytest.approx(0.0831, abs=1e-4)

    def test_default_parameters(self):
        """Default model describes the reference platform."""
        model = ChassisModel.default()
        assert model.width == np.float32(0.465)
        assert model.length == np.float32(0.355)
        assert model.wheel == np.float32(0.105)
        assert 0 < model.critical_rudder < np.pi / 2

        # Constructor defaults match the named defaults
        assert ChassisModel().critical_rudder == model.critical_rudder

    def test_geometry_is_read_only(self, model):
        """Geometry lives in the component models and cannot drift from them."""
        assert model.width == model.ackermann.width == model.differential.width
        assert model.length == model.ackermann.length
        assert model.wheel == model.differential.wheel

        for name in ("width", "length", "wheel", "critical_rudder"):
            with pytest.raises(AttributeError):
                setattr(model, name, 1.0)

        # Conversions still use the construction-time geometry
        assert model.wheels_to_twist(Wheels(-1.0, 1.0)).w == pytest.approx(0.5, abs=1e-7)

    def test_physical_to_twist_above_critical(self, model):
        """Steep rudder: speed is the rear wheel's speed."""
        twist = model.physical_to_twist(Physical(0.5, np.pi / 4))

        assert twist.w == pytest.approx(-1.1785113, abs=TOL)
        assert twist.v == pytest.approx(0.3535534, abs=TOL)

    def test_physical_to_twist_straight(self, model):
        """Zero rudder drives straight at the commanded speed."""
        twist = model.physical_to_twist(Physical(0.7, 0.0))
        assert twist == Twist(0.7, 0.0)

        # Negative zero is treated like zero
        twist = model.physical_to_twist(Physical(0.7, -0.0))
        assert twist.w == 0.0

    def test_released_maps_to_zero_twist(self, model):
        """Released commands no motion; the zero twist comes back released."""
        assert model.physical_to_twist(Physical.RELEASED) == Twist(0.0, 0.0)
        assert model.twist_to_physical(Twist(0.0, 0.0)).is_released()

        # Zero is many-to-one with released
        assert model.physical_to_twist(Physical.ZERO) == Twist(0.0, 0.0)
        assert model.wheels_to_physical(Wheels(0.0, 0.0)).is_released()

    def test_wheels_to_twist(self, model):
        """Equal wheels drive straight, opposite wheels spin in place."""
        twist = model.wheels_to_twist(Wheels(1.0, 1.0))
        assert twist.v == pytest.approx(0.1, abs=1e-7)
        assert twist.w == 0.0

        twist = model.wheels_to_twist(Wheels(-1.0, 1.0))
        assert twist.v == 0.0
        assert twist.w == pytest.approx(0.5, abs=1e-7)

    def test_twist_to_wheels(self, model):
        """Positive angular speed turns the right wheel faster."""
        wheels = model.twist_to_wheels(Twist(0.1, 0.5))
        assert wheels.left == pytest.approx(0.0, abs=1e-6)
        assert wheels.right == pytest.approx(2.0, abs=1e-6)

    @pytest.mark.parametrize("speed", SPEEDS)
    @pytest.mark.parametrize("rudder", RUDDERS)
    def test_physical_round_trip(self, model, speed, rudder):
        """Physical survives the trip through Twist and through Wheels."""
        physical = Physical(speed, rudder)

        assert_physical_close(model.twist_to_physical(model.physical_to_twist(physical)), physical)
        assert_physical_close(model.wheels_to_physical(model.physical_to_wheels(physical)), physical)

    def test_released_round_trip(self, model):
        """Released survives both round trips."""
        assert model.twist_to_physical(model.physical_to_twist(Physical.RELEASED)).is_released()
        assert model.wheels_to_physical(model.physical_to_wheels(Physical.RELEASED)).is_released()

    def test_wheel_round_trip(self, model):
        """Wheels <-> Twist is exact up to rounding, in both directions."""
        for wheels in [Wheels(1.0, 2.0), Wheels(-3.0, 0.5), Wheels(7.25, 7.25)]:
            restored = model.twist_to_wheels(model.wheels_to_twist(wheels))
            assert restored.left == pytest.approx(wheels.left, rel=1e-6, abs=1e-6)
            assert restored.right == pytest.approx(wheels.right, rel=1e-6, abs=1e-6)

        for twist in [Twist(0.3, -0.2), Twist(-1.0, 2.0), Twist(0.0, 0.5)]:
            restored = model.wheels_to_twist(model.twist_to_wheels(twist))
            assert restored.v == pytest.approx(twist.v, rel=1e-6, abs=1e-6)
            assert restored.w == pytest.approx(twist.w, rel=1e-6, abs=1e-6)

    @pytest.mark.parametrize("k", [-2.0, 0.0, 0.04, 3.5])
    def test_wheels_to_twist_is_linear(self, model, k):
        """Scaling the wheels scales the twist by the same factor."""
        wheels = Wheels(1.5, -0.25)
        scaled = model.wheels_to_twist(k * wheels)
        expected = k * model.wheels_to_twist(wheels)

        assert scaled.v == pytest.approx(expected.v, rel=1e-6, abs=1e-7)
        assert scaled.w == pytest.approx(expected.w, rel=1e-6, abs=1e-7)

    def test_branch_switches_at_critical_rudder(self, model):
        """Rear wheel radius above the critical angle, outer front wheel below."""
        c = float(model.critical_rudder)
        speed = 0.5

        above = c + 1e-3
        twist = model.physical_to_twist(Physical(speed, above))
        assert twist.w == pytest.approx(speed / (-0.3 / np.sin(above)), rel=1e-4)

        below = c - 1e-3
        twist = model.physical_to_twist(Physical(speed, below))
        assert twist.w == pytest.approx(speed / (-0.3 / np.tan(below) - 0.2), rel=1e-4)

        twist = model.physical_to_twist(Physical(speed, -below))
        assert twist.w == pytest.approx(speed / (-0.3 / np.tan(-below) + 0.2), rel=1e-4)

    @pytest.mark.parametrize("rudder", [0.05, -0.05])
    def test_speed_is_outer_front_wheel_below_critical(self, model, rudder):
        """Below the critical angle speed is the faster front wheel's."""
        wheels = model.physical_to_wheels(Physical(0.5, rudder))
        left = wheels.left * model.wheel
        right = wheels.right * model.wheel

        fastest, other = (left, right) if rudder > 0 else (right, left)
        assert fastest == pytest.approx(0.5, abs=TOL)
        assert abs(other) < abs(fastest)

    def test_pure_rotation(self, model):
        """Spinning in place puts the rear wheel across the chassis."""
        physical = model.twist_to_physical(Twist(0.0, 0.5))

        assert physical.rudder == pytest.approx(-np.pi / 2, abs=1e-6)
        assert physical.speed == pytest.approx(0.15, abs=TOL)

        twist = model.physical_to_twist(physical)
        assert twist.v == pytest.approx(0.0, abs=1e-6)
        assert twist.w == pytest.approx(0.5, abs=TOL)

    def test_values_are_single_precision(self, model):
        """All conversions produce binary32 fields."""
        twist = model.physical_to_twist(Physical(0.5, 0.3))
        wheels = model.twist_to_wheels(twist)
        physical = model.wheels_to_physical(wheels)

        for value in (twist.v, twist.w, wheels.left, wheels.right, physical.speed, physical.rudder):
            assert isinstance(value, np.float32)

    def test_odometry_conversions(self, model):
        """Integrated records convert to odometry increments."""
        odometry = model.wheels_to_odometry(Wheels(1.0, 1.0))
        assert odometry.s == pytest.approx(0.1, abs=1e-7)
        assert odometry.pose.x == pytest.approx(0.1, abs=1e-7)
        assert odometry.a == 0.0

        odometry = model.physical_to_odometry(Physical(0.02, np.pi / 4))
        twist = model.physical_to_twist(Physical(0.02, np.pi / 4))
        assert odometry == model.twist_to_odometry(twist)
        assert odometry.a == pytest.approx(abs(twist.w), abs=1e-7)

        assert model.physical_to_odometry(Physical.RELEASED).s == 0.0


class TestSpaceModels:
    """Test suite for the per-space models the chassis composes."""

    def test_models_share_interface(self):
        """Every space model converts through Twist."""
        models = [
            DifferentialDriveKinematics(width=0.4, wheel=0.1),
            AckermannKinematics(width=0.4, length=0.3),
        ]

        for model in models:
            assert isinstance(model, KinematicsModel)
            assert hasattr(model, "to_twist")
            assert hasattr(model, "from_twist")

    def test_chassis_conversions_documented(self):
        """Every public conversion of the chassis carries a docstring."""
        names = [name for name in dir(ChassisModel) if "_to_" in name and not name.startswith("_")]
        assert len(names) == 9
        for name in names:
            assert getattr(ChassisModel, name).__doc__, name

    def test_base_is_abstract(self):
        """The base class cannot be instantiated."""
        with pytest.raises(TypeError):
            KinematicsModel()

    def test_chassis_delegates(self):
        """ChassisModel agrees with its component models."""
        chassis = ChassisModel(0.4, 0.3, 0.1)
        ackermann = AckermannKinematics(0.4, 0.3)
        differential = DifferentialDriveKinematics(0.4, 0.1)
        physical = Physical(0.4, -0.6)

        assert chassis.physical_to_twist(physical) == ackermann.to_twist(physical)
        assert chassis.critical_rudder == ackermann.critical_rudder
        twist = ackermann.to_twist(physical)
        assert chassis.twist_to_wheels(twist) == differential.from_twist(twist)


if __name__ == "__main__":
    pytest.main([__file__, "-v"])
