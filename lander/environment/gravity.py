"""Point-mass gravity model for Mars.

Gravity is the inverse-square attraction of a single spherical planet
centred at the origin of the planet-centred Cartesian frame:

    g = -G * M * r_hat / |r|^2

The core kernel is numba-compiled; the public wrappers convert to and from
Vector3D and reject the origin, where the direction is undefined.

Example:
    >>> from lander.environment import MARS_RADIUS, gravitational_acceleration
    >>> from lander.vector import Vector3D
    >>>
    >>> g = gravitational_acceleration(Vector3D(MARS_RADIUS, 0.0, 0.0))
    >>> print(f"{abs(g):.3f} m/s^2")
    3.737 m/s^2
"""

import math

from beartype import beartype
from numba import njit

from lander.errors import DomainError
from lander.vector import Vector3D

# =============================================================================
# Constants
# =============================================================================

GRAVITY: float = 6.673e-11  # Gravitational constant [m^3/(kg s^2)]
MARS_MASS: float = 6.42e23  # [kg]
MARS_RADIUS: float = 3386000.0  # Mean radius [m]
MARS_DAY: float = 88642.65  # Sidereal day [s]
EXOSPHERE: float = 200000.0  # Altitude of the atmosphere edge [m]

MU_MARS: float = GRAVITY * MARS_MASS  # Gravitational parameter [m^3/s^2]


# =============================================================================
# Numba-Optimized Core Functions
# =============================================================================


@njit(cache=True, fastmath=True)
def _inverse_square_gravity(
    x: float, y: float, z: float,
    mu: float = MU_MARS,
) -> tuple[float, float, float]:
    """Numba-optimized inverse-square gravity.

    Caller guarantees r > 0.
    """
    r_sq = x*x + y*y + z*z
    r = math.sqrt(r_sq)
    g_over_r = mu / (r_sq * r)

    return (-g_over_r * x, -g_over_r * y, -g_over_r * z)


# =============================================================================
# Public API
# =============================================================================


@beartype
def gravitational_acceleration(position: Vector3D, mu: float = MU_MARS) -> Vector3D:
    """Gravitational acceleration at a planet-centred position.

    Args:
        position: Position relative to the planet centre [m]
        mu: Gravitational parameter G*M [m^3/s^2]

    Returns:
        Acceleration vector [m/s^2], pointing at the origin

    Raises:
        DomainError: If position is the origin
    """
    if position.abs2() == 0.0:
        raise DomainError("Gravity is undefined at the planet centre")

    gx, gy, gz = _inverse_square_gravity(position.x, position.y, position.z, mu)
    return Vector3D(float(gx), float(gy), float(gz))


@beartype
def gravity_magnitude(position: Vector3D, mu: float = MU_MARS) -> float:
    """Magnitude of gravitational acceleration at position [m/s^2]."""
    r_sq = position.abs2()
    if r_sq == 0.0:
        raise DomainError("Gravity is undefined at the planet centre")
    return mu / r_sq


@beartype
def surface_gravity() -> float:
    """Gravity at the mean Mars radius [m/s^2]."""
    return MU_MARS / (MARS_RADIUS * MARS_RADIUS)


@beartype
def circular_velocity(radius: float) -> float:
    """Speed of a circular orbit at a given planet-centred radius [m/s]."""
    if radius <= 0:
        raise DomainError(f"Orbit radius must be positive, got {radius}")
    return math.sqrt(MU_MARS / radius)


@beartype
def escape_velocity(radius: float) -> float:
    """Escape speed at a given planet-centred radius [m/s]."""
    if radius <= 0:
        raise DomainError(f"Radius must be positive, got {radius}")
    return math.sqrt(2 * MU_MARS / radius)
