"""Simulation module: integrator and step-driven simulator.

Example:
    >>> from lander.simulation import Simulator, SimulationResult
    >>> from lander.scenarios import Scenario
    >>>
    >>> sim = Simulator.from_scenario(Scenario.DESCENT_FROM_10KM)
    >>> sim.enable_autopilot()
    >>> sim.run_for(100.0)
    >>> df = SimulationResult.from_simulator(sim).to_dataframe()
"""

from lander.simulation.integrator import numerical_dynamics
from lander.simulation.simulator import (
    AutopilotMode,
    SimConfig,
    SimulationResult,
    Simulator,
)

__all__ = [
    "AutopilotMode",
    "SimConfig",
    "SimulationResult",
    "Simulator",
    "numerical_dynamics",
]
