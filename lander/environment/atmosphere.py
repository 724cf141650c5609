"""Exponential model of the Martian atmosphere.

Density falls off exponentially with a constant scale height from a
surface value, and is zero outside the band between the surface and the
exosphere (the defined edge of the atmosphere):

    rho(h) = 0.017 * exp(-h / 11000)    for 0 <= h <= EXOSPHERE
    rho(h) = 0                          otherwise

Example:
    >>> from lander.environment import MarsAtmosphere, atmospheric_density
    >>>
    >>> atm = MarsAtmosphere()
    >>> atm.density(0.0)
    0.017
    >>> atm.density(250000.0)
    0.0
"""

import math
from dataclasses import dataclass

import numpy as np
from beartype import beartype
from numpy.typing import NDArray

from lander.environment.gravity import EXOSPHERE, MARS_RADIUS
from lander.vector import Vector3D

# =============================================================================
# Constants
# =============================================================================

RHO_SURFACE = 0.017  # Surface density [kg/m^3]
SCALE_HEIGHT = 11000.0  # Density scale height [m]


# =============================================================================
# Atmosphere Model
# =============================================================================


@beartype
@dataclass(frozen=True)
class MarsAtmosphere:
    """Exponential atmosphere with a hard upper edge.

    Attributes:
        surface_density: Density at zero altitude [kg/m^3]
        scale_height: Exponential scale height [m]
        edge_altitude: Altitude above which density is zero [m]
        planet_radius: Radius used to convert positions to altitude [m]
    """
    surface_density: float = RHO_SURFACE
    scale_height: float = SCALE_HEIGHT
    edge_altitude: float = EXOSPHERE
    planet_radius: float = MARS_RADIUS

    def __post_init__(self) -> None:
        if self.scale_height <= 0:
            raise ValueError(f"Scale height must be positive, got {self.scale_height}")
        if self.surface_density < 0:
            raise ValueError(f"Surface density must be non-negative, got {self.surface_density}")

    @beartype
    def density(self, altitude: float) -> float:
        """Get density at altitude.

        Args:
            altitude: Height above the mean radius [m]

        Returns:
            Density [kg/m^3]
        """
        if altitude > self.edge_altitude or altitude < 0.0:
            return 0.0
        return self.surface_density * math.exp(-altitude / self.scale_height)

    @beartype
    def density_at(self, position: Vector3D) -> float:
        """Get density at a planet-centred position [kg/m^3]."""
        return self.density(position.magnitude() - self.planet_radius)

    @beartype
    def profile(
        self,
        altitudes: NDArray[np.float64] | list[float],
    ) -> dict[str, NDArray[np.float64]]:
        """Get density over a range of altitudes.

        Args:
            altitudes: Array of altitudes [m]

        Returns:
            Dictionary with altitude and density arrays
        """
        altitudes = np.asarray(altitudes, dtype=np.float64)

        return {
            "altitude": altitudes,
            "density": np.array([self.density(float(h)) for h in altitudes]),
        }


# =============================================================================
# Convenience Functions
# =============================================================================


# Singleton instance
_default_atmosphere = MarsAtmosphere()


@beartype
def get_atmosphere() -> MarsAtmosphere:
    """Get the default atmosphere model instance."""
    return _default_atmosphere


@beartype
def atmospheric_density(position: Vector3D) -> float:
    """Density at a planet-centred position using the default model [kg/m^3]."""
    return _default_atmosphere.density_at(position)
