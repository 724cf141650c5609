"""Unit tests for the step-driven Simulator.

Tests step sequencing, fuel burn, parachute handling and result export.
"""

import logging

import numpy as np
import pytest
from numpy.testing import assert_allclose

from lander.dynamics import LanderState
from lander.environment import MARS_RADIUS, MarsAtmosphere
from lander.errors import ScenarioError, SequencingError
from lander.gnc.control import vertical_orientation
from lander.scenarios import Scenario
from lander.simulation import (
    AutopilotMode,
    SimConfig,
    SimulationResult,
    Simulator,
)
from lander.vector import Vector3D
from lander.vehicle import LanderConfig, ParachuteStatus

# =============================================================================
# Sequencing Tests
# =============================================================================


class TestSequencing:
    """Test driver ordering rules."""

    def test_step_before_initialize(self):
        """Stepping without a scenario is a sequencing error."""
        sim = Simulator()

        with pytest.raises(SequencingError):
            sim.step()
        with pytest.raises(SequencingError):
            sim.get_state()

    def test_sequencing_error_is_runtime_error(self):
        """SequencingError can be caught as RuntimeError."""
        with pytest.raises(RuntimeError):
            Simulator().run(1)

    def test_initialize_unpopulated(self):
        """Loading an empty slot fails and leaves no state."""
        sim = Simulator()

        with pytest.raises(ScenarioError):
            sim.initialize(8)
        assert sim.state is None

    def test_time_advances_by_delta_t(self):
        """Each step advances time by exactly delta_t."""
        sim = Simulator.from_scenario(Scenario.CIRCULAR_ORBIT)

        sim.step()
        assert sim.time == 0.1

        sim.run(9)
        assert_allclose(sim.time, 1.0, rtol=1e-12)

    def test_run_for(self):
        """run_for covers the requested span."""
        sim = Simulator.from_scenario(Scenario.CIRCULAR_ORBIT)

        sim.run_for(2.0)

        assert len(sim.get_history()) == 21
        assert_allclose(sim.time, 2.0, rtol=1e-12)

    def test_negative_steps(self):
        """Negative step counts are rejected."""
        sim = Simulator.from_scenario(Scenario.CIRCULAR_ORBIT)

        with pytest.raises(ValueError):
            sim.run(-1)

    def test_reinitialize_resets(self):
        """Loading a scenario discards the previous run."""
        sim = Simulator.from_scenario(Scenario.CIRCULAR_ORBIT)
        sim.run(5)

        state = sim.initialize(Scenario.DESCENT_FROM_10KM)

        assert state.simulation_time == 0.0
        assert state.previous_position is None
        assert len(sim.get_history()) == 1

    def test_get_state_is_copy(self):
        """Mutating a returned state does not affect the simulator."""
        sim = Simulator.from_scenario(Scenario.CIRCULAR_ORBIT)
        snapshot = sim.get_state()
        snapshot.throttle = 1.0

        assert sim.get_state().throttle == 0.0


# =============================================================================
# Fuel Tests
# =============================================================================


class TestFuel:
    """Test fuel burn in the step driver."""

    def test_burn_at_full_throttle(self):
        """Full throttle for one step burns 0.05% of the tank."""
        sim = Simulator.from_scenario(Scenario.CIRCULAR_ORBIT)
        sim.set_throttle(1.0)

        sim.step()

        assert_allclose(sim.get_state().fuel, 1.0 - 5e-4, rtol=1e-12)

    def test_no_burn_engine_off(self):
        """Zero throttle burns nothing."""
        sim = Simulator.from_scenario(Scenario.CIRCULAR_ORBIT)
        sim.run(10)

        assert sim.get_state().fuel == 1.0

    def test_fuel_floored_at_zero(self, caplog):
        """Fuel never goes negative and exhaustion is logged."""
        position = Vector3D(0.0, 0.0, MARS_RADIUS + 1000.0)
        state = LanderState(
            position=position,
            velocity=Vector3D.zero(),
            orientation=vertical_orientation(position),
            delta_t=0.1,
            fuel=1e-4,
            throttle=1.0,
        )
        sim = Simulator(state=state)

        with caplog.at_level(logging.WARNING, logger="lander.simulation.simulator"):
            sim.step()

        assert sim.get_state().fuel == 0.0
        assert "Fuel exhausted" in caplog.text

        # Empty tank: thrust is gone, so the lander falls
        sim.run(10)
        assert sim.get_state().climb_rate < 0.0

    def test_set_throttle_clamps(self):
        """Manual throttle is clamped to [0, 1]."""
        sim = Simulator.from_scenario(Scenario.CIRCULAR_ORBIT)

        assert sim.set_throttle(1.5) == 1.0
        assert sim.set_throttle(-2.0) == 0.0
        assert sim.set_throttle(0.25) == 0.25


# =============================================================================
# Parachute Tests
# =============================================================================


class TestParachute:
    """Test parachute deployment and loss."""

    def test_deploy_when_safe(self):
        """At rest at 10 km the chute opens once."""
        sim = Simulator.from_scenario(Scenario.DESCENT_FROM_10KM)

        assert sim.deploy_parachute()
        assert sim.get_state().parachute_status == ParachuteStatus.DEPLOYED
        assert not sim.deploy_parachute()

    def test_refused_when_unsafe(self):
        """Deployment is refused when the chute would tear off."""
        position = Vector3D(0.0, 0.0, MARS_RADIUS + 20000.0)
        state = LanderState(
            position=position,
            velocity=Vector3D(0.0, 0.0, -600.0),
            orientation=vertical_orientation(position),
            delta_t=0.1,
        )
        sim = Simulator(state=state)

        assert not sim.deploy_parachute()
        assert sim.get_state().parachute_status == ParachuteStatus.NOT_DEPLOYED

    def test_lost_when_unsafe(self):
        """A deployed chute is lost once conditions exceed its limits."""
        position = Vector3D(0.0, 0.0, MARS_RADIUS + 20000.0)
        state = LanderState(
            position=position,
            velocity=Vector3D(0.0, 0.0, -600.0),
            orientation=vertical_orientation(position),
            delta_t=0.1,
            parachute_status=ParachuteStatus.DEPLOYED,
        )
        sim = Simulator(state=state)

        sim.step()

        assert sim.get_state().parachute_status == ParachuteStatus.LOST
        assert not sim.deploy_parachute()

    def test_parachute_slows_descent(self):
        """The chute lowers the descent speed."""
        plain = Simulator.from_scenario(Scenario.DESCENT_FROM_10KM)
        chute = Simulator.from_scenario(Scenario.DESCENT_FROM_10KM)
        chute.deploy_parachute()

        plain.run_for(60.0)
        chute.run_for(60.0)

        assert chute.get_state().descent_rate < plain.get_state().descent_rate


# =============================================================================
# Autopilot Tests
# =============================================================================


class TestAutopilotModes:
    """Test autopilot selection."""

    def test_staged_idle_high_up(self):
        """Staged autopilot keeps the engine off above 4 km."""
        sim = Simulator.from_scenario(Scenario.DESCENT_FROM_10KM)
        sim.enable_autopilot()

        sim.run_for(10.0)

        result = SimulationResult.from_simulator(sim)
        assert np.all(result.throttle == 0.0)

    def test_proportional_brakes_high_up(self):
        """Proportional autopilot reacts to descent rate at any altitude."""
        sim = Simulator.from_scenario(
            Scenario.DESCENT_FROM_10KM,
            config=SimConfig(autopilot=AutopilotMode.PROPORTIONAL),
        )
        sim.enable_autopilot()

        sim.run_for(10.0)

        result = SimulationResult.from_simulator(sim)
        assert np.max(result.throttle) > 0.0
        assert np.all((result.throttle >= 0.0) & (result.throttle <= 1.0))

    def test_autopilot_disabled_by_default(self):
        """Scenarios start with manual throttle."""
        sim = Simulator.from_scenario(Scenario.DESCENT_FROM_10KM)
        sim.run_for(5.0)

        assert not sim.get_state().autopilot_enabled
        assert sim.get_state().throttle == 0.0

    def test_staged_landing(self):
        """Parachute plus staged autopilot reaches the ground."""
        sim = Simulator.from_scenario(Scenario.DESCENT_FROM_10KM)
        sim.enable_autopilot()
        sim.deploy_parachute()

        for _ in range(20000):
            if sim.altitude <= 0.0:
                break
            sim.step()

        state = sim.get_state()
        assert sim.altitude <= 0.0
        assert state.fuel < 1.0
        assert state.parachute_status == ParachuteStatus.DEPLOYED


# =============================================================================
# Results Tests
# =============================================================================


class TestSimulationResult:
    """Test trajectory export."""

    def test_history_recorded(self):
        """History holds the initial state plus one entry per step."""
        sim = Simulator.from_scenario(Scenario.CIRCULAR_ORBIT)
        sim.run(5)

        result = SimulationResult.from_simulator(sim)

        assert result.position.shape == (6, 3)
        assert_allclose(result.time, np.arange(6) * 0.1, atol=1e-12)

    def test_history_disabled(self):
        """No history when recording is off."""
        sim = Simulator.from_scenario(
            Scenario.CIRCULAR_ORBIT,
            config=SimConfig(record_history=False),
        )
        sim.run(5)

        assert sim.get_history() == []

    def test_clear_history(self):
        """Clearing keeps only the current state."""
        sim = Simulator.from_scenario(Scenario.CIRCULAR_ORBIT)
        sim.run(5)
        sim.clear_history()

        history = sim.get_history()
        assert len(history) == 1
        assert history[0] == sim.get_state()

    def test_altitude_array(self):
        """Altitude is radius minus planet radius."""
        sim = Simulator.from_scenario(Scenario.DESCENT_FROM_10KM)
        sim.run(10)

        result = SimulationResult.from_simulator(sim)

        assert_allclose(result.altitude[0], 10000.0)
        assert np.all(np.diff(result.altitude) < 0)

    def test_to_dataframe(self):
        """Export to a Polars DataFrame."""
        sim = Simulator.from_scenario(Scenario.DESCENT_FROM_10KM)
        sim.run(10)

        df = SimulationResult.from_simulator(sim).to_dataframe()

        assert df.height == 11
        for column in ("time", "altitude", "speed", "fuel", "throttle", "x", "vz", "parachute"):
            assert column in df.columns
        assert df["parachute"][0] == "NOT_DEPLOYED"


# =============================================================================
# Configuration Tests
# =============================================================================


class TestSimConfig:
    """Test simulator configuration."""

    def test_attitude_toggle(self):
        """Without stabilization the orientation is left alone."""
        sim = Simulator.from_scenario(Scenario.DESCENT_FROM_10KM)
        sim.enable_attitude_stabilization(False)
        orientation = sim.get_state().orientation

        sim.run(5)

        assert sim.get_state().orientation == orientation

    def test_custom_atmosphere(self):
        """A vacuum atmosphere removes drag from the descent."""
        vacuum = SimConfig(atmosphere=MarsAtmosphere(surface_density=0.0))
        plain = Simulator.from_scenario(Scenario.DESCENT_FROM_10KM)
        airless = Simulator.from_scenario(Scenario.DESCENT_FROM_10KM, config=vacuum)

        plain.run_for(30.0)
        airless.run_for(30.0)

        assert airless.get_state().descent_rate > plain.get_state().descent_rate

    def test_custom_lander(self):
        """Vehicle parameters flow through to the state."""
        sim = Simulator.from_scenario(Scenario.POLAR_LAUNCH, lander=LanderConfig(size=4.0))

        assert_allclose(sim.altitude, 2.0)
