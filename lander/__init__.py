"""Lander - Point-mass Mars lander simulation.

Simulates a small lander near Mars under inverse-square gravity, engine
thrust and atmospheric drag, with a fixed-step Verlet integrator, throttle
autopilots, attitude stabilization and a set of canned scenarios.

Example:
    >>> from lander import Scenario, Simulator
    >>>
    >>> sim = Simulator.from_scenario(Scenario.DESCENT_FROM_10KM)
    >>> sim.enable_autopilot()
    >>> while sim.altitude > 0.0:
    ...     sim.step()
    >>> print(f"Touchdown speed: {sim.get_state().speed:.2f} m/s")
"""

__version__ = "0.1.0"

from lander.dynamics import ForceBreakdown, LanderState, acceleration, compute_forces
from lander.errors import DomainError, LanderError, ScenarioError, SequencingError
from lander.gnc import (
    ProportionalAutopilot,
    StagedAutopilot,
    ThrottleController,
    apply_autopilot,
    attitude_stabilization,
)
from lander.scenarios import Scenario, initialize_simulation, list_scenarios
from lander.simulation import (
    AutopilotMode,
    SimConfig,
    SimulationResult,
    Simulator,
    numerical_dynamics,
)
from lander.vector import Vector3D
from lander.vehicle import LanderConfig, ParachuteStatus

__all__ = [
    # Core types
    "LanderConfig",
    "LanderState",
    "ParachuteStatus",
    "Vector3D",
    # Physics
    "ForceBreakdown",
    "acceleration",
    "compute_forces",
    "numerical_dynamics",
    # Control
    "ProportionalAutopilot",
    "StagedAutopilot",
    "ThrottleController",
    "apply_autopilot",
    "attitude_stabilization",
    # Scenarios
    "Scenario",
    "initialize_simulation",
    "list_scenarios",
    # Simulation
    "AutopilotMode",
    "SimConfig",
    "SimulationResult",
    "Simulator",
    # Errors
    "DomainError",
    "LanderError",
    "ScenarioError",
    "SequencingError",
]
