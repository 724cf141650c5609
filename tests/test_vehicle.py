"""Tests for the lander mass, drag and parachute models."""

import math

import pytest
from numpy.testing import assert_allclose

from lander.environment import EXOSPHERE, MARS_RADIUS, surface_gravity
from lander.errors import DomainError
from lander.vector import Vector3D
from lander.vehicle import (
    LanderConfig,
    ParachuteStatus,
    drag_force,
    lander_drag,
    parachute_drag,
    safe_to_deploy_parachute,
)

# =============================================================================
# Configuration Tests
# =============================================================================


class TestLanderConfig:
    """Test vehicle constants and mass model."""

    def test_mass_includes_unloaded_mass(self):
        """Mass is dry mass plus remaining fuel."""
        lander = LanderConfig()

        assert lander.mass(1.0) == 200.0
        assert lander.mass(0.5) == 150.0
        assert lander.mass(0.0) == 100.0
        assert lander.full_mass == 200.0

    def test_max_thrust(self):
        """Max thrust is 1.5x the fully-fuelled surface weight."""
        lander = LanderConfig()

        assert_allclose(lander.max_thrust, 1.5 * 200.0 * surface_gravity(), rtol=1e-12)
        assert_allclose(lander.max_thrust, 1121.0, atol=0.5)

    def test_areas(self):
        """Body area is a disc, chute a square of side 2*size."""
        lander = LanderConfig(size=2.0)

        assert_allclose(lander.lander_area, 4.0 * math.pi)
        assert lander.chute_area == 16.0

    def test_non_positive_mass_raises(self):
        """Massless lander is a domain error."""
        lander = LanderConfig(unloaded_mass=0.0)

        assert lander.mass(0.5) == 50.0
        with pytest.raises(DomainError):
            lander.mass(0.0)

    def test_zero_thrust_rejected(self):
        """An engine with no thrust is rejected."""
        with pytest.raises(DomainError):
            LanderConfig(max_thrust=0.0)

    def test_invalid_size(self):
        """Lander size must be positive."""
        with pytest.raises(ValueError):
            LanderConfig(size=0.0)


# =============================================================================
# Drag Tests
# =============================================================================


class TestDrag:
    """Test quadratic drag."""

    def test_body_drag_value(self):
        """0.5 * rho * Cd * A * v^2 against the velocity."""
        drag = lander_drag(Vector3D(0.0, -100.0, 0.0), 0.01, LanderConfig())

        expected = 0.5 * 0.01 * 1.0 * math.pi * 100.0**2
        assert_allclose(drag.to_array(), [0.0, expected, 0.0], atol=1e-9)

    def test_parachute_drag_value(self):
        """Chute drag carries the empirical area multiplier."""
        drag = parachute_drag(Vector3D(0.0, -100.0, 0.0), 0.01, LanderConfig())

        expected = 0.5 * 0.01 * 2.0 * 4.0 * 5.0 * 100.0**2
        assert_allclose(drag.to_array(), [0.0, expected, 0.0], atol=1e-9)

    def test_drag_opposes_velocity(self):
        """Drag is anti-parallel to velocity."""
        velocity = Vector3D(30.0, -40.0, 10.0)
        drag = drag_force(velocity, 0.005, ParachuteStatus.DEPLOYED, LanderConfig())

        assert_allclose(drag.norm().dot(velocity.norm()), -1.0, rtol=1e-12)

    def test_parachute_only_when_deployed(self):
        """Stowed and lost chutes add no drag."""
        lander = LanderConfig()
        velocity = Vector3D(0.0, -50.0, 0.0)
        body = lander_drag(velocity, 0.01, lander)

        assert drag_force(velocity, 0.01, ParachuteStatus.NOT_DEPLOYED, lander) == body
        assert drag_force(velocity, 0.01, ParachuteStatus.LOST, lander) == body
        deployed = drag_force(velocity, 0.01, ParachuteStatus.DEPLOYED, lander)
        assert abs(deployed) > abs(body)

    def test_no_drag_at_rest(self):
        """Zero velocity gives zero drag, not a domain error."""
        drag = drag_force(Vector3D.zero(), 0.017, ParachuteStatus.DEPLOYED, LanderConfig())

        assert drag == Vector3D.zero()

    def test_no_drag_in_vacuum(self):
        """Zero density gives zero drag."""
        drag = drag_force(Vector3D(100.0, 0.0, 0.0), 0.0, ParachuteStatus.DEPLOYED, LanderConfig())

        assert drag == Vector3D.zero()


# =============================================================================
# Parachute Safety Tests
# =============================================================================


class TestParachuteSafety:
    """Test parachute deployment limits."""

    @pytest.fixture
    def lander(self):
        return LanderConfig()

    def test_safe_slow_descent(self, lander):
        """Slow descent in thin air is safe."""
        position = Vector3D(0.0, 0.0, MARS_RADIUS + 10000.0)
        velocity = Vector3D(0.0, 0.0, -100.0)

        assert safe_to_deploy_parachute(position, velocity, 0.01, lander, EXOSPHERE)

    def test_unsafe_drag(self, lander):
        """Too much drag tears the chute off."""
        position = Vector3D(0.0, 0.0, MARS_RADIUS + 1000.0)
        velocity = Vector3D(0.0, 0.0, -400.0)

        assert not safe_to_deploy_parachute(position, velocity, 0.017, lander, EXOSPHERE)

    def test_unsafe_speed_in_atmosphere(self, lander):
        """Fast inside the atmosphere is unsafe even with little drag."""
        position = Vector3D(0.0, 0.0, MARS_RADIUS + 150000.0)
        velocity = Vector3D(600.0, 0.0, 0.0)

        assert not safe_to_deploy_parachute(position, velocity, 1e-8, lander, EXOSPHERE)

    def test_fast_above_atmosphere_is_safe(self, lander):
        """Speed alone does not matter outside the atmosphere."""
        position = Vector3D(0.0, 0.0, MARS_RADIUS + 300000.0)
        velocity = Vector3D(3000.0, 0.0, 0.0)

        assert safe_to_deploy_parachute(position, velocity, 0.0, lander, EXOSPHERE)
