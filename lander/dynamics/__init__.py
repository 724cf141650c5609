"""Dynamics module for the point-mass lander.

This module provides the state record and the force model that the
integrator evaluates every step.

Example:
    >>> from lander.dynamics import LanderState, acceleration
    >>> from lander.vehicle import LanderConfig
    >>> from lander.vector import Vector3D
    >>>
    >>> state = LanderState(
    ...     position=Vector3D(0.0, 0.0, 3.5e6),
    ...     velocity=Vector3D.zero(),
    ...     orientation=Vector3D.zero(),
    ...     delta_t=0.1,
    ... )
    >>> a = acceleration(state.position, state.velocity, state, LanderConfig())
"""

from lander.dynamics.state import (
    LanderState,
)
from lander.dynamics.forces import (
    ForceBreakdown,
    acceleration,
    compute_forces,
)

__all__ = [
    # State
    "LanderState",
    # Force model
    "ForceBreakdown",
    "acceleration",
    "compute_forces",
]
