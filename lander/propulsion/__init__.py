"""Propulsion models for the lander.

Provides world-frame engine thrust and fuel consumption.
"""

from lander.propulsion.engine import (
    check_throttle,
    fuel_consumed,
    thrust_magnitude,
    thrust_wrt_world,
)

__all__ = [
    "check_throttle",
    "fuel_consumed",
    "thrust_magnitude",
    "thrust_wrt_world",
]
