"""Lander state record for the point-mass simulation.

The state contains:
- Position (3): planet-centred Cartesian coordinates [m]
- Velocity (3): [m/s]
- Previous position (3 or None): position one step earlier, needed by the
  Verlet integrator. None until the first step has run.
- Orientation (3): xyz Euler angles [degrees], owned by attitude control
- Fuel, throttle, parachute status
- Simulation time and the fixed time step
- Mode flags: autopilot enabled, attitude stabilized

A single LanderState is created by the scenario initializer and then
mutated in place by the integrator, the controllers and the step driver.

Integrator state machine:
- previous_position is None: bootstrap (single Euler step)
- previous_position is set: steady state (Verlet)
"""

from dataclasses import dataclass, replace

from beartype import beartype

from lander.environment.gravity import MARS_RADIUS
from lander.vector import Vector3D
from lander.vehicle.aerodynamics import ParachuteStatus

# =============================================================================
# State Class
# =============================================================================


@beartype
@dataclass
class LanderState:
    """Translational state and control settings of the lander.

    Attributes:
        position: Planet-centred position [m]
        velocity: Velocity [m/s]
        orientation: xyz Euler angles [degrees]
        delta_t: Fixed integration step [s]
        previous_position: Position one step earlier, None before the first step
        fuel: Fraction of a full tank remaining, 0 to 1
        throttle: Commanded fraction of max thrust, 0 to 1
        parachute_status: Parachute state
        simulation_time: Elapsed time [s]
        autopilot_enabled: Run the throttle autopilot after each step
        stabilized_attitude: Run attitude stabilization after each step
    """
    position: Vector3D
    velocity: Vector3D
    orientation: Vector3D
    delta_t: float
    previous_position: Vector3D | None = None
    fuel: float = 1.0
    throttle: float = 0.0
    parachute_status: ParachuteStatus = ParachuteStatus.NOT_DEPLOYED
    simulation_time: float = 0.0
    autopilot_enabled: bool = False
    stabilized_attitude: bool = False

    def __post_init__(self) -> None:
        """Validate scalar fields."""
        if self.delta_t <= 0:
            raise ValueError(f"Time step must be positive, got {self.delta_t}")
        if not 0.0 <= self.fuel <= 1.0:
            raise ValueError(f"Fuel fraction must be in [0, 1], got {self.fuel}")
        if not 0.0 <= self.throttle <= 1.0:
            raise ValueError(f"Throttle must be in [0, 1], got {self.throttle}")
        if self.simulation_time < 0:
            raise ValueError(f"Simulation time must be non-negative, got {self.simulation_time}")

    def copy(self) -> "LanderState":
        """Create a copy of this state.

        Vectors are immutable, so a shallow copy is independent.
        """
        return replace(self)

    @property
    def is_bootstrapped(self) -> bool:
        """True once the integrator has a previous position (steady state)."""
        return self.previous_position is not None

    def altitude(self, planet_radius: float = MARS_RADIUS) -> float:
        """Height above the mean planet radius [m]."""
        return self.position.magnitude() - planet_radius

    @property
    def radial_direction(self) -> Vector3D:
        """Local vertical (unit vector away from the planet centre)."""
        return self.position.norm()

    @property
    def climb_rate(self) -> float:
        """Vertical speed, positive when moving away from the planet [m/s]."""
        return self.velocity.dot(self.radial_direction)

    @property
    def descent_rate(self) -> float:
        """Vertical speed, positive when moving toward the planet [m/s]."""
        return -self.climb_rate

    @property
    def speed(self) -> float:
        """Speed magnitude [m/s]."""
        return self.velocity.magnitude()
