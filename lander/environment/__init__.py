"""Environment models for the Mars lander simulation.

Provides the point-mass gravity field and the exponential atmosphere.

Example:
    >>> from lander.environment import atmospheric_density, gravitational_acceleration
    >>> from lander.vector import Vector3D
    >>>
    >>> position = Vector3D(0.0, 0.0, 3.4e6)
    >>> g = gravitational_acceleration(position)  # m/s^2
    >>> rho = atmospheric_density(position)  # kg/m^3
"""

from lander.environment.atmosphere import (
    MarsAtmosphere,
    atmospheric_density,
    get_atmosphere,
)
from lander.environment.gravity import (
    EXOSPHERE,
    GRAVITY,
    MARS_DAY,
    MARS_MASS,
    MARS_RADIUS,
    MU_MARS,
    circular_velocity,
    escape_velocity,
    gravitational_acceleration,
    gravity_magnitude,
    surface_gravity,
)

__all__ = [
    # Constants
    "EXOSPHERE",
    "GRAVITY",
    "MARS_DAY",
    "MARS_MASS",
    "MARS_RADIUS",
    "MU_MARS",
    # Gravity
    "circular_velocity",
    "escape_velocity",
    "gravitational_acceleration",
    "gravity_magnitude",
    "surface_gravity",
    # Atmosphere
    "MarsAtmosphere",
    "atmospheric_density",
    "get_atmosphere",
]
