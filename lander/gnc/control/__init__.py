"""Control algorithms for the lander.

Provides the throttle autopilots, the PID controller they build on, and
attitude stabilization.
"""

from lander.gnc.control.attitude import (
    attitude_stabilization,
    vertical_orientation,
)
from lander.gnc.control.autopilot import (
    ProportionalAutopilot,
    StagedAutopilot,
    ThrottleController,
    apply_autopilot,
    hover_throttle,
)
from lander.gnc.control.pid import (
    PIDController,
    PIDGains,
)

__all__ = [
    # Attitude
    "attitude_stabilization",
    "vertical_orientation",
    # Autopilot
    "ProportionalAutopilot",
    "StagedAutopilot",
    "ThrottleController",
    "apply_autopilot",
    "hover_throttle",
    # PID
    "PIDController",
    "PIDGains",
]
