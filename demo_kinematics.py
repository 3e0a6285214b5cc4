"""Demo: forecast the motion of the chassis toward a target command.

The forecast is compared with a dead-reckoning estimate built the way the
robot would build it: wheel set-points are turned into encoder pulses,
read back, and integrated into odometry.
"""
import argparse
import logging

import numpy as np

from tricycle import (
    ChassisModel,
    Motor,
    Odometry,
    Optimizer,
    Physical,
    StatusPredictor,
    TrajectoryPredictor,
)
from tricycle import config


def setup_logging(verbose: bool = False) -> None:
    """Configure logging based on verbosity level.

    Args:
        verbose: If True, show all levels with timestamps. If False, show
                 INFO and above as plain messages.
    """
    if verbose:
        logging.basicConfig(
            level=logging.DEBUG,
            format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
            datefmt="%Y-%m-%d %H:%M:%S",
        )
    else:
        handler = logging.StreamHandler()
        handler.setFormatter(logging.Formatter("%(message)s"))
        logger = logging.getLogger()
        logger.setLevel(logging.INFO)
        logger.addHandler(handler)


def dead_reckon(model, physical, period):
    """Odometry increment seen through the encoders for one tick."""
    wheels = model.physical_to_wheels(physical) * period
    left = Motor.WHEEL.rad_to_pulses(wheels.left)
    right = Motor.WHEEL.rad_to_pulses(wheels.right)
    return model.wheels_to_odometry(Motor.WHEEL.wheels_from_pulses(left, right))


def run_demo(target, ticks, period):
    """Drive toward ``target`` for ``ticks`` ticks, then release and stop."""
    model = ChassisModel.default()
    optimizer = Optimizer(config.ANGULAR_ATTENUATION, config.ACCELERATION, period)
    trajectory = TrajectoryPredictor(period, model, StatusPredictor(optimizer, period))
    trajectory.predictor.target = target

    logging.info("=" * 70)
    logging.info("Tricycle Trajectory Forecast")
    logging.info("=" * 70)
    logging.info(f"  - Chassis: {model}")
    logging.info(f"  - Critical rudder: {model.critical_rudder:.4f} rad")
    logging.info(f"  - Target: speed={target.speed:.3f} m/s, rudder={target.rudder:.3f} rad")
    logging.info(f"  - Speed step: {optimizer.speed_step:.4f} m/s per tick")

    predicted = Odometry.ZERO
    measured = Odometry.ZERO
    elapsed = 0.0
    tick = 0
    while True:
        if tick == ticks:
            logging.info("\nReleasing the chassis...")
            trajectory.predictor.target = Physical.RELEASED
        item = trajectory.step()
        if item is None:
            break
        dt, increment = item
        command = trajectory.predictor.current
        elapsed += dt
        predicted += increment
        measured += dead_reckon(model, command, dt)
        if tick % 10 == 0:
            rudder_pulses = (Motor.RUDDER.rad_to_pulses(command.rudder)
                             if not command.is_released() else None)
            logging.info(f"  t={elapsed:5.2f}s speed={command.speed:+.3f} "
                         f"rudder={command.rudder:+.3f} ({rudder_pulses} pulses)")
            logging.info(f"    forecast  {predicted}")
            logging.info(f"    encoders  {measured}")
        tick += 1

    error = np.hypot(predicted.pose.x - measured.pose.x, predicted.pose.y - measured.pose.y)
    logging.info(f"\nStopped after {tick} ticks ({elapsed:.2f}s)")
    logging.info(f"  forecast  {predicted}")
    logging.info(f"  encoders  {measured}")
    logging.info(f"  position disagreement: {error * 1000:.2f} mm")


def main():
    """Parse arguments and run the forecast demo."""
    parser = argparse.ArgumentParser(
        description="Forecast the trajectory of the three-wheel chassis"
    )
    parser.add_argument("--speed", type=float, default=0.5, help="Target speed (m/s)")
    parser.add_argument("--rudder", type=float, default=0.3, help="Target rudder (rad)")
    parser.add_argument("--ticks", type=int, default=100, help="Ticks before release")
    parser.add_argument("--period", type=float, default=config.PERIOD, help="Tick period (s)")
    parser.add_argument(
        "-v", "--verbose", action="store_true", help="Enable verbose logging with timestamps"
    )
    args = parser.parse_args()

    setup_logging(args.verbose)
    run_demo(Physical(args.speed, args.rudder), args.ticks, args.period)


if __name__ == "__main__":
    main()
