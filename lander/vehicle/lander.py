"""Engineering constants and mass model of the lander.

The lander is a point mass whose mass is the unloaded (dry) mass plus the
remaining fuel. Fuel is tracked as a fraction of the full tank.

Example:
    >>> from lander.vehicle import LanderConfig
    >>>
    >>> lander = LanderConfig()
    >>> lander.mass(fuel=1.0)
    200.0
    >>> lander.mass(fuel=0.0)
    100.0
    >>> print(f"Max thrust: {lander.max_thrust:.0f} N")
    Max thrust: 1121 N
"""

import math
from dataclasses import dataclass, field

from beartype import beartype

from lander.environment.gravity import MARS_RADIUS, MU_MARS
from lander.errors import DomainError

# =============================================================================
# Constants
# =============================================================================

LANDER_SIZE = 1.0  # Radius of the lander body [m]
UNLOADED_LANDER_MASS = 100.0  # [kg]
FUEL_CAPACITY = 100.0  # [l]
FUEL_RATE_AT_MAX_THRUST = 0.5  # [l/s]
FUEL_DENSITY = 1.0  # [kg/l]
DRAG_COEF_LANDER = 1.0
DRAG_COEF_CHUTE = 2.0
MAX_PARACHUTE_DRAG = 20000.0  # [N]
MAX_PARACHUTE_SPEED = 500.0  # [m/s]
CHUTE_AREA_MULTIPLIER = 5.0  # Empirical chute area factor
THRUST_TO_WEIGHT = 1.5  # Max thrust / fully-fuelled weight at the surface


def _default_max_thrust() -> float:
    weight = (FUEL_DENSITY * FUEL_CAPACITY + UNLOADED_LANDER_MASS) * MU_MARS / MARS_RADIUS**2
    return THRUST_TO_WEIGHT * weight


# =============================================================================
# Lander Configuration
# =============================================================================


@beartype
@dataclass(frozen=True)
class LanderConfig:
    """Fixed vehicle parameters.

    Attributes:
        size: Lander radius [m]; the chute is a square of side 2*size
        unloaded_mass: Dry mass [kg]
        fuel_capacity: Tank volume [l]
        fuel_density: Fuel density [kg/l]
        fuel_rate_at_max_thrust: Fuel flow at full throttle [l/s]
        drag_coef_lander: Drag coefficient of the body
        drag_coef_chute: Drag coefficient of the parachute
        max_parachute_drag: Drag above which the chute tears off [N]
        max_parachute_speed: Speed above which the chute tears off [m/s]
        chute_area_multiplier: Empirical multiplier on the chute area
        max_thrust: Engine thrust at full throttle [N]
        planet_radius: Radius used for altitude [m]
    """
    size: float = LANDER_SIZE
    unloaded_mass: float = UNLOADED_LANDER_MASS
    fuel_capacity: float = FUEL_CAPACITY
    fuel_density: float = FUEL_DENSITY
    fuel_rate_at_max_thrust: float = FUEL_RATE_AT_MAX_THRUST
    drag_coef_lander: float = DRAG_COEF_LANDER
    drag_coef_chute: float = DRAG_COEF_CHUTE
    max_parachute_drag: float = MAX_PARACHUTE_DRAG
    max_parachute_speed: float = MAX_PARACHUTE_SPEED
    chute_area_multiplier: float = CHUTE_AREA_MULTIPLIER
    max_thrust: float = field(default_factory=_default_max_thrust)
    planet_radius: float = MARS_RADIUS

    def __post_init__(self) -> None:
        """Validate parameters."""
        if self.size <= 0:
            raise ValueError(f"Lander size must be positive, got {self.size}")
        if self.max_thrust <= 0:
            raise DomainError(f"Max thrust must be positive, got {self.max_thrust}")
        for name in ("unloaded_mass", "fuel_capacity", "fuel_density",
                     "fuel_rate_at_max_thrust", "drag_coef_lander", "drag_coef_chute"):
            if getattr(self, name) < 0:
                raise ValueError(f"{name} must be non-negative, got {getattr(self, name)}")

    @property
    def lander_area(self) -> float:
        """Frontal area of the body [m^2]."""
        return math.pi * self.size**2

    @property
    def chute_area(self) -> float:
        """Nominal parachute area before the empirical multiplier [m^2]."""
        return (2.0 * self.size) ** 2

    @property
    def full_mass(self) -> float:
        """Mass with a full tank [kg]."""
        return self.mass(1.0)

    @beartype
    def mass(self, fuel: float) -> float:
        """Current mass for a fuel fraction.

        Args:
            fuel: Fraction of a full tank remaining, 0 to 1

        Returns:
            Mass [kg]

        Raises:
            DomainError: If the resulting mass is not positive
        """
        m = fuel * self.fuel_capacity * self.fuel_density + self.unloaded_mass
        if m <= 0:
            raise DomainError(f"Lander mass must be positive, got {m} kg")
        return m
