"""Step-driven lander simulation.

The Simulator owns a single LanderState and advances it one fixed time step
per call to step(). Each step:

1. numerical_dynamics(): position/velocity update, then autopilot and
   attitude stabilization if enabled
2. fuel burn for the throttle setting over the step
3. parachute loss check (a deployed chute is torn off if unsafe)
4. simulation time advances by exactly delta_t

Architecture:
    Driver code owns the loop and calls:
    - sim.initialize(scenario) -> fresh state
    - sim.step() -> advance one delta_t
    - sim.get_state() -> copy of the current state
    - sim.deploy_parachute(), sim.set_throttle() -> pilot commands

Example:
    >>> from lander.simulation import Simulator, SimulationResult
    >>> from lander.scenarios import Scenario
    >>>
    >>> sim = Simulator.from_scenario(Scenario.DESCENT_FROM_10KM)
    >>> sim.enable_autopilot()
    >>> while sim.altitude > 0.0:
    ...     sim.step()
    >>> result = SimulationResult.from_simulator(sim)
"""

import logging
from dataclasses import dataclass, field
from enum import Enum, auto

import numpy as np
from beartype import beartype
from numpy.typing import NDArray

from lander.dynamics.state import LanderState
from lander.environment.atmosphere import MarsAtmosphere
from lander.environment.gravity import MARS_RADIUS
from lander.errors import SequencingError
from lander.gnc.control.autopilot import (
    ProportionalAutopilot,
    StagedAutopilot,
    ThrottleController,
)
from lander.propulsion.engine import fuel_consumed
from lander.scenarios import Scenario, initialize_simulation
from lander.simulation.integrator import numerical_dynamics
from lander.vehicle.aerodynamics import ParachuteStatus, safe_to_deploy_parachute
from lander.vehicle.lander import LanderConfig

logger = logging.getLogger(__name__)


# =============================================================================
# Configuration
# =============================================================================


class AutopilotMode(Enum):
    """Available throttle autopilots."""

    STAGED = auto()        # Altitude/descent-rate banded policy
    PROPORTIONAL = auto()  # Proportional descent-rate control


@beartype
@dataclass
class SimConfig:
    """Simulation configuration.

    Attributes:
        autopilot: Which throttle strategy runs when the autopilot is enabled
        record_history: Keep a copy of the state after every step
        atmosphere: Atmosphere model
    """
    autopilot: AutopilotMode = AutopilotMode.STAGED
    record_history: bool = True
    atmosphere: MarsAtmosphere = field(default_factory=MarsAtmosphere)

    def create_autopilot(self) -> ThrottleController:
        """Create the configured throttle strategy."""
        if self.autopilot == AutopilotMode.STAGED:
            return StagedAutopilot()
        if self.autopilot == AutopilotMode.PROPORTIONAL:
            return ProportionalAutopilot()
        raise ValueError(f"Unknown autopilot mode: {self.autopilot}")


# =============================================================================
# Simulator
# =============================================================================


@beartype
@dataclass
class Simulator:
    """Step-driven lander simulator.

    The state is None until a scenario is loaded (or a state is supplied);
    stepping before that raises SequencingError.

    Example:
        >>> sim = Simulator()
        >>> sim.initialize(Scenario.CIRCULAR_ORBIT)
        >>> for _ in range(1000):
        ...     sim.step()
    """
    lander: LanderConfig = field(default_factory=LanderConfig)
    config: SimConfig = field(default_factory=SimConfig)
    state: LanderState | None = None

    # Internal
    _autopilot: ThrottleController = field(init=False, repr=False)
    _history: list[LanderState] = field(default_factory=list, init=False, repr=False)

    def __post_init__(self) -> None:
        """Create the autopilot and seed the history."""
        self._autopilot = self.config.create_autopilot()
        if self.state is not None and self.config.record_history:
            self._history = [self.state.copy()]

    @classmethod
    def from_scenario(
        cls,
        scenario: Scenario | int,
        lander: LanderConfig | None = None,
        config: SimConfig | None = None,
    ) -> "Simulator":
        """Create a simulator with a scenario already loaded."""
        sim = cls(lander=lander or LanderConfig(), config=config or SimConfig())
        sim.initialize(scenario)
        return sim

    def initialize(self, scenario: Scenario | int) -> LanderState:
        """Load a scenario, discarding any previous state and history.

        Raises:
            ScenarioError: If the slot is empty or out of range
        """
        self.state = initialize_simulation(scenario, self.lander)
        self._autopilot = self.config.create_autopilot()
        self._history = [self.state.copy()] if self.config.record_history else []
        return self.state

    def _require_state(self) -> LanderState:
        if self.state is None:
            raise SequencingError("No scenario loaded; call initialize() before stepping")
        return self.state

    # -------------------------------------------------------------------------
    # Stepping
    # -------------------------------------------------------------------------

    def step(self) -> LanderState:
        """Advance the simulation by one time step.

        Returns:
            The current state after the step

        Raises:
            SequencingError: If no scenario has been loaded
            DomainError: If the dynamics cannot be evaluated; the state is
                left at the start of the step
        """
        state = self._require_state()

        numerical_dynamics(
            state,
            self.lander,
            autopilot=self._autopilot,
            atmosphere=self.config.atmosphere,
        )

        self._burn_fuel(state)
        self._check_parachute(state)
        state.simulation_time += state.delta_t

        if self.config.record_history:
            self._history.append(state.copy())

        return state

    def run(self, n_steps: int) -> LanderState:
        """Take n_steps steps."""
        if n_steps < 0:
            raise ValueError(f"Number of steps must be non-negative, got {n_steps}")
        state = self._require_state()
        for _ in range(n_steps):
            state = self.step()
        return state

    def run_for(self, duration: float) -> LanderState:
        """Step for (at least) a span of simulated time [s]."""
        state = self._require_state()
        return self.run(int(np.ceil(duration / state.delta_t - 1e-9)))

    def _burn_fuel(self, state: LanderState) -> None:
        if state.fuel == 0.0:
            return
        state.fuel -= fuel_consumed(state.throttle, state.delta_t, self.lander)
        if state.fuel <= 0.0:
            state.fuel = 0.0
            logger.warning("Fuel exhausted at t=%.1f s", state.simulation_time)

    def _check_parachute(self, state: LanderState) -> None:
        if state.parachute_status != ParachuteStatus.DEPLOYED:
            return
        if not self._parachute_safe(state):
            state.parachute_status = ParachuteStatus.LOST
            logger.warning(
                "Parachute lost at t=%.1f s, altitude %.0f m",
                state.simulation_time, state.altitude(self.lander.planet_radius),
            )

    def _parachute_safe(self, state: LanderState) -> bool:
        atm = self.config.atmosphere
        return safe_to_deploy_parachute(
            state.position,
            state.velocity,
            atm.density_at(state.position),
            self.lander,
            atm.edge_altitude,
        )

    # -------------------------------------------------------------------------
    # Pilot Commands
    # -------------------------------------------------------------------------

    def deploy_parachute(self) -> bool:
        """Deploy the parachute if it is stowed and safe to open.

        Returns:
            True if the parachute was deployed by this call
        """
        state = self._require_state()
        if state.parachute_status != ParachuteStatus.NOT_DEPLOYED:
            return False
        if not self._parachute_safe(state):
            logger.info("Parachute deployment refused: unsafe at current speed/drag")
            return False
        state.parachute_status = ParachuteStatus.DEPLOYED
        logger.info("Parachute deployed at t=%.1f s", state.simulation_time)
        return True

    def set_throttle(self, throttle: float) -> float:
        """Set the throttle manually, clamped to [0, 1]."""
        state = self._require_state()
        state.throttle = float(np.clip(throttle, 0.0, 1.0))
        return state.throttle

    def enable_autopilot(self, enabled: bool = True) -> None:
        """Switch the throttle autopilot on or off."""
        self._require_state().autopilot_enabled = enabled

    def enable_attitude_stabilization(self, enabled: bool = True) -> None:
        """Switch attitude stabilization on or off."""
        self._require_state().stabilized_attitude = enabled

    # -------------------------------------------------------------------------
    # Queries
    # -------------------------------------------------------------------------

    def get_state(self) -> LanderState:
        """Get a copy of the current state."""
        return self._require_state().copy()

    def get_history(self) -> list[LanderState]:
        """Get recorded state history."""
        return self._history.copy()

    def clear_history(self) -> None:
        """Clear recorded state history."""
        self._history = [self.state.copy()] if self.state is not None else []

    @property
    def time(self) -> float:
        """Current simulation time [s]."""
        return self._require_state().simulation_time

    @property
    def altitude(self) -> float:
        """Current altitude [m]."""
        return self._require_state().altitude(self.lander.planet_radius)


# =============================================================================
# Results and Analysis
# =============================================================================


@beartype
@dataclass
class SimulationResult:
    """Trajectory recorded by a simulator.

    Provides convenient access to trajectory data as arrays.
    """
    states: list[LanderState]
    planet_radius: float = MARS_RADIUS

    @classmethod
    def from_simulator(cls, sim: Simulator) -> "SimulationResult":
        """Create result from simulator history."""
        return cls(states=sim.get_history(), planet_radius=sim.lander.planet_radius)

    @property
    def time(self) -> NDArray[np.float64]:
        """Time array [s]."""
        return np.array([s.simulation_time for s in self.states], dtype=np.float64)

    @property
    def position(self) -> NDArray[np.float64]:
        """Position history [m], shape (N, 3)."""
        return np.array([s.position.to_array() for s in self.states], dtype=np.float64).reshape(-1, 3)

    @property
    def velocity(self) -> NDArray[np.float64]:
        """Velocity history [m/s], shape (N, 3)."""
        return np.array([s.velocity.to_array() for s in self.states], dtype=np.float64).reshape(-1, 3)

    @property
    def altitude(self) -> NDArray[np.float64]:
        """Altitude history [m]."""
        return np.array([s.altitude(self.planet_radius) for s in self.states], dtype=np.float64)

    @property
    def speed(self) -> NDArray[np.float64]:
        """Speed history [m/s]."""
        return np.array([s.speed for s in self.states], dtype=np.float64)

    @property
    def climb_rate(self) -> NDArray[np.float64]:
        """Radial velocity history, positive upward [m/s]."""
        return np.array([s.climb_rate for s in self.states], dtype=np.float64)

    @property
    def fuel(self) -> NDArray[np.float64]:
        """Fuel fraction history."""
        return np.array([s.fuel for s in self.states], dtype=np.float64)

    @property
    def throttle(self) -> NDArray[np.float64]:
        """Throttle history."""
        return np.array([s.throttle for s in self.states], dtype=np.float64)

    def to_dataframe(self):
        """Convert to Polars DataFrame."""
        import polars as pl

        position = self.position
        velocity = self.velocity

        return pl.DataFrame({
            "time": self.time,
            "altitude": self.altitude,
            "speed": self.speed,
            "climb_rate": self.climb_rate,
            "fuel": self.fuel,
            "throttle": self.throttle,
            "x": position[:, 0],
            "y": position[:, 1],
            "z": position[:, 2],
            "vx": velocity[:, 0],
            "vy": velocity[:, 1],
            "vz": velocity[:, 2],
            "parachute": [s.parachute_status.name for s in self.states],
        })
