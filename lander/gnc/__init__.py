"""GNC (Guidance, Navigation, Control) module for the lander.

Example:
    >>> from lander.gnc import StagedAutopilot, apply_autopilot
    >>>
    >>> autopilot = StagedAutopilot(near_surface_altitude=500.0)
    >>> throttle = apply_autopilot(autopilot, state, lander)
"""

from lander.gnc.control import (
    PIDController,
    ProportionalAutopilot,
    StagedAutopilot,
    ThrottleController,
    apply_autopilot,
    attitude_stabilization,
)

__all__ = [
    "PIDController",
    "ProportionalAutopilot",
    "StagedAutopilot",
    "ThrottleController",
    "apply_autopilot",
    "attitude_stabilization",
]
