"""Force model: net acceleration of the lander.

Combines the three forces acting on the point-mass lander:

    a = g(r) + (F_thrust + F_drag) / m

where
- g(r) is inverse-square gravity toward the planet centre,
- F_thrust is the engine thrust rotated into the world frame,
- F_drag is quadratic body drag, plus parachute drag when deployed,
- m is the unloaded mass plus the remaining fuel.

The function is pure: it reads throttle, orientation, fuel and parachute
status from the state but evaluates at the position and velocity passed in.

Example:
    >>> from lander.dynamics import acceleration
    >>> from lander.scenarios import Scenario, initialize_simulation
    >>> from lander.vehicle import LanderConfig
    >>>
    >>> lander = LanderConfig()
    >>> state = initialize_simulation(Scenario.DESCENT_FROM_10KM, lander)
    >>> a = acceleration(state.position, state.velocity, state, lander)
"""

from typing import NamedTuple

from beartype import beartype

from lander.dynamics.state import LanderState
from lander.environment.atmosphere import MarsAtmosphere, get_atmosphere
from lander.environment.gravity import gravitational_acceleration
from lander.propulsion.engine import thrust_wrt_world
from lander.vector import Vector3D
from lander.vehicle.aerodynamics import drag_force
from lander.vehicle.lander import LanderConfig

# =============================================================================
# Force Breakdown
# =============================================================================


class ForceBreakdown(NamedTuple):
    """Individual contributions to the lander's acceleration."""
    gravity: Vector3D  # Gravitational acceleration [m/s^2]
    thrust: Vector3D  # Engine force [N]
    drag: Vector3D  # Total drag force [N]
    mass: float  # Current mass [kg]

    @property
    def acceleration(self) -> Vector3D:
        """Net acceleration [m/s^2]."""
        return self.gravity + (self.thrust + self.drag) / self.mass


# =============================================================================
# Force Model
# =============================================================================


@beartype
def compute_forces(
    position: Vector3D,
    velocity: Vector3D,
    state: LanderState,
    lander: LanderConfig,
    atmosphere: MarsAtmosphere | None = None,
) -> ForceBreakdown:
    """Evaluate gravity, thrust, drag and mass at a position and velocity.

    Args:
        position: Planet-centred position [m]
        velocity: Velocity [m/s]
        state: Source of throttle, orientation, fuel and parachute status
        lander: Vehicle parameters
        atmosphere: Atmosphere model (default Mars exponential model)

    Returns:
        ForceBreakdown of all contributions

    Raises:
        DomainError: If position is the origin or the mass is not positive
    """
    atmosphere = atmosphere or get_atmosphere()

    gravity = gravitational_acceleration(position)
    thrust = thrust_wrt_world(state.throttle, state.orientation, state.fuel, lander)
    drag = drag_force(velocity, atmosphere.density_at(position), state.parachute_status, lander)
    mass = lander.mass(state.fuel)

    return ForceBreakdown(gravity=gravity, thrust=thrust, drag=drag, mass=mass)


@beartype
def acceleration(
    position: Vector3D,
    velocity: Vector3D,
    state: LanderState,
    lander: LanderConfig,
    atmosphere: MarsAtmosphere | None = None,
) -> Vector3D:
    """Net acceleration of the lander [m/s^2].

    Args:
        position: Planet-centred position [m]
        velocity: Velocity [m/s]; only drag depends on it
        state: Source of throttle, orientation, fuel and parachute status
        lander: Vehicle parameters
        atmosphere: Atmosphere model (default Mars exponential model)

    Returns:
        a_gravity + (thrust + drag) / mass
    """
    return compute_forces(position, velocity, state, lander, atmosphere).acceleration
