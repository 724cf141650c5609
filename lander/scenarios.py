"""Canned initial conditions for the lander simulation.

Each scenario fixes the initial position, velocity, orientation, time step
and mode flags. Every scenario starts with a full tank, the engine off, the
parachute stowed and the autopilot disabled.

| id | description                                                |
|----|------------------------------------------------------------|
| 0  | circular orbit                                             |
| 1  | descent from 10km                                          |
| 2  | elliptical orbit, thrust changes orbital plane             |
| 3  | polar launch at escape velocity (but drag prevents escape) |
| 4  | elliptical orbit that clips the atmosphere and decays      |
| 5  | descent from 200km                                         |

Example:
    >>> from lander.scenarios import Scenario, initialize_simulation
    >>>
    >>> state = initialize_simulation(Scenario.CIRCULAR_ORBIT)
    >>> state.delta_t
    0.1
"""

import logging
from dataclasses import dataclass
from enum import IntEnum

from beartype import beartype

from lander.dynamics.state import LanderState
from lander.environment.gravity import EXOSPHERE, MARS_RADIUS
from lander.errors import ScenarioError
from lander.vector import Vector3D
from lander.vehicle.aerodynamics import ParachuteStatus
from lander.vehicle.lander import LanderConfig

logger = logging.getLogger(__name__)

# Number of scenario slots in the selection menu; only some are populated.
SCENARIO_SLOTS = 10


class Scenario(IntEnum):
    """Populated scenario slots."""

    CIRCULAR_ORBIT = 0
    DESCENT_FROM_10KM = 1
    ELLIPTICAL_ORBIT_PLANE_CHANGE = 2
    POLAR_LAUNCH = 3
    ATMOSPHERE_CLIPPING_ORBIT = 4
    DESCENT_FROM_200KM = 5


@beartype
@dataclass(frozen=True)
class ScenarioSpec:
    """Literal initial conditions of one scenario.

    Attributes:
        description: Short human-readable description
        position: Planet-centred position [m]
        velocity: Velocity [m/s]
        orientation: xyz Euler angles [degrees]
        stabilized_attitude: Whether attitude stabilization starts enabled
        delta_t: Integration step [s]
    """
    description: str
    position: Vector3D
    velocity: Vector3D
    orientation: Vector3D
    stabilized_attitude: bool
    delta_t: float = 0.1


def _scenario_table(lander: LanderConfig) -> dict[Scenario, ScenarioSpec]:
    R = MARS_RADIUS
    return {
        Scenario.CIRCULAR_ORBIT: ScenarioSpec(
            description="circular orbit",
            position=Vector3D(1.2 * R, 0.0, 0.0),
            velocity=Vector3D(0.0, -3247.087385863725, 0.0),
            orientation=Vector3D(0.0, 90.0, 0.0),
            stabilized_attitude=False,
        ),
        Scenario.DESCENT_FROM_10KM: ScenarioSpec(
            description="descent from 10km",
            position=Vector3D(0.0, -(R + 10000.0), 0.0),
            velocity=Vector3D(0.0, 0.0, 0.0),
            orientation=Vector3D(0.0, 0.0, 90.0),
            stabilized_attitude=True,
        ),
        Scenario.ELLIPTICAL_ORBIT_PLANE_CHANGE: ScenarioSpec(
            description="elliptical orbit, thrust changes orbital plane",
            position=Vector3D(0.0, 0.0, 1.2 * R),
            velocity=Vector3D(3500.0, 0.0, 0.0),
            orientation=Vector3D(0.0, 0.0, 90.0),
            stabilized_attitude=False,
        ),
        Scenario.POLAR_LAUNCH: ScenarioSpec(
            description="polar launch at escape velocity (but drag prevents escape)",
            position=Vector3D(0.0, 0.0, R + lander.size / 2.0),
            velocity=Vector3D(0.0, 0.0, 5027.0),
            orientation=Vector3D(0.0, 0.0, 0.0),
            stabilized_attitude=False,
        ),
        Scenario.ATMOSPHERE_CLIPPING_ORBIT: ScenarioSpec(
            description="elliptical orbit that clips the atmosphere and decays",
            position=Vector3D(0.0, 0.0, R + 100000.0),
            velocity=Vector3D(4000.0, 0.0, 0.0),
            orientation=Vector3D(0.0, 90.0, 0.0),
            stabilized_attitude=False,
        ),
        Scenario.DESCENT_FROM_200KM: ScenarioSpec(
            description="descent from 200km",
            position=Vector3D(0.0, -(R + EXOSPHERE), 0.0),
            velocity=Vector3D(0.0, 0.0, 0.0),
            orientation=Vector3D(0.0, 0.0, 90.0),
            stabilized_attitude=True,
        ),
    }


@beartype
def resolve_scenario(scenario_id: Scenario | int) -> Scenario:
    """Map a slot number onto a populated scenario.

    Raises:
        ScenarioError: If the slot is empty or out of range
    """
    if isinstance(scenario_id, Scenario):
        return scenario_id
    try:
        return Scenario(scenario_id)
    except ValueError as err:
        if 0 <= scenario_id < SCENARIO_SLOTS:
            raise ScenarioError(f"Scenario slot {scenario_id} is not populated") from err
        raise ScenarioError(
            f"Scenario {scenario_id} out of range 0-{SCENARIO_SLOTS - 1}"
        ) from err


@beartype
def get_scenario(scenario_id: Scenario | int, lander: LanderConfig | None = None) -> ScenarioSpec:
    """Look up the initial conditions of a scenario."""
    return _scenario_table(lander or LanderConfig())[resolve_scenario(scenario_id)]


@beartype
def list_scenarios() -> list[tuple[int, str]]:
    """(id, description) of every slot; empty slots have an empty description."""
    table = _scenario_table(LanderConfig())
    descriptions = {int(s): spec.description for s, spec in table.items()}
    return [(i, descriptions.get(i, "")) for i in range(SCENARIO_SLOTS)]


@beartype
def initialize_simulation(
    scenario_id: Scenario | int,
    lander: LanderConfig | None = None,
) -> LanderState:
    """Create the initial lander state for a scenario.

    Args:
        scenario_id: Scenario or slot number 0-9
        lander: Vehicle parameters (lander size enters scenario 3)

    Returns:
        Fresh LanderState with no integration history

    Raises:
        ScenarioError: If the slot is empty or out of range
    """
    scenario = resolve_scenario(scenario_id)
    spec = get_scenario(scenario, lander)

    logger.info("Initializing scenario %d: %s", int(scenario), spec.description)

    return LanderState(
        position=spec.position,
        velocity=spec.velocity,
        orientation=spec.orientation,
        delta_t=spec.delta_t,
        previous_position=None,
        fuel=1.0,
        throttle=0.0,
        parachute_status=ParachuteStatus.NOT_DEPLOYED,
        simulation_time=0.0,
        autopilot_enabled=False,
        stabilized_attitude=spec.stabilized_attitude,
    )
