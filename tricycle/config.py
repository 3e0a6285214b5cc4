"""Configuration parameters for the tricycle chassis.

This module centralizes the default parameters of the reference platform:
- Physical chassis geometry
- Control loop timing
- Actuator rate limits
- Encoder resolutions

Every constructor in the package takes these as explicit arguments; the
values here are only defaults. There are no environment variables and no
configuration files.
"""

import numpy as np

# ============================================================================
# Physical Chassis Parameters
# ============================================================================

WIDTH = 0.465
"""Track: distance between the left and right drive wheels (meters)."""

LENGTH = 0.355
"""Wheelbase: distance from the front axle to the rear wheel (meters)."""

WHEEL_RADIUS = 0.105
"""Drive wheel radius (meters)."""


# ============================================================================
# Control Loop Parameters
# ============================================================================

PERIOD = 0.04
"""Control tick period (seconds). 40 ms, i.e. a 25 Hz loop."""

ACCELERATION = 1.2
"""Maximum longitudinal acceleration (m/s²).

Multiplied by PERIOD to give the per-tick speed step of the optimizer.
"""

ANGULAR_ATTENUATION = 0.5
"""Speed fraction kept when steering at the mechanical limit (range: [0, 1]).

0 stops the chassis at full lock, 1 disables the attenuation.
"""

RUDDER_SPEED = 1.0
"""Maximum rear wheel steering rate (rad/s).

Multiplied by PERIOD to give the per-tick rudder step of the predictor.
"""


# ============================================================================
# Encoder Parameters
# ============================================================================

WHEEL_ENCODER_LINES = 400
"""Drive motor encoder lines per revolution (quadrature, 4 edges per line)."""

WHEEL_REDUCTION = 20
"""Drive motor gear reduction ratio (20:1)."""

RUDDER_ENCODER_RESOLUTION = 16384
"""Rear wheel servo absolute encoder counts per revolution (14 bit)."""

WHEEL_RAD_PER_PULSE = 2.0 * np.pi / (4 * WHEEL_ENCODER_LINES * WHEEL_REDUCTION)
"""Drive wheel axle radians per encoder pulse."""

RUDDER_RAD_PER_PULSE = 2.0 * np.pi / RUDDER_ENCODER_RESOLUTION
"""Rear wheel radians per encoder pulse."""
