"""Vehicle modeling for the lander simulation.

Provides the lander's engineering constants, mass model and drag model.

Example:
    >>> from lander.vehicle import LanderConfig
    >>>
    >>> lander = LanderConfig(unloaded_mass=120.0)
    >>> lander.mass(fuel=0.5)
    170.0
"""

from lander.vehicle.aerodynamics import (
    ParachuteStatus,
    drag_force,
    lander_drag,
    parachute_drag,
    safe_to_deploy_parachute,
)
from lander.vehicle.lander import (
    LanderConfig,
)

__all__ = [
    # Configuration
    "LanderConfig",
    # Aerodynamics
    "ParachuteStatus",
    "drag_force",
    "lander_drag",
    "parachute_drag",
    "safe_to_deploy_parachute",
]
