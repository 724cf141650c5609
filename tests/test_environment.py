"""Tests for the Mars gravity and atmosphere models."""

import math

import numpy as np
import pytest
from numpy.testing import assert_allclose

from lander.environment import (
    EXOSPHERE,
    MARS_RADIUS,
    MU_MARS,
    MarsAtmosphere,
    atmospheric_density,
    circular_velocity,
    escape_velocity,
    gravitational_acceleration,
    gravity_magnitude,
    surface_gravity,
)
from lander.errors import DomainError
from lander.vector import Vector3D

# =============================================================================
# Gravity Tests
# =============================================================================


class TestGravity:
    """Test the inverse-square gravity field."""

    def test_surface_gravity(self):
        """Mars surface gravity is about 3.74 m/s^2."""
        g = gravitational_acceleration(Vector3D(MARS_RADIUS, 0.0, 0.0))

        assert_allclose(abs(g), 3.7366, rtol=1e-4)
        assert_allclose(abs(g), surface_gravity(), rtol=1e-12)

    def test_points_at_centre(self):
        """Gravity points toward the planet centre from any direction."""
        position = Vector3D(1.0e6, -2.0e6, 3.0e6)
        g = gravitational_acceleration(position)

        assert_allclose(g.norm().to_array(), (-position).norm().to_array(), atol=1e-12)

    def test_inverse_square(self):
        """Doubling the radius quarters the acceleration."""
        near = gravity_magnitude(Vector3D(0.0, 0.0, MARS_RADIUS))
        far = gravity_magnitude(Vector3D(0.0, 0.0, 2.0 * MARS_RADIUS))

        assert_allclose(near / far, 4.0, rtol=1e-12)

    def test_magnitude_matches_vector(self):
        """gravity_magnitude agrees with the vector form."""
        position = Vector3D(2.0e6, 2.5e6, -1.0e6)

        assert_allclose(
            gravity_magnitude(position),
            abs(gravitational_acceleration(position)),
            rtol=1e-10,
        )

    def test_origin_raises(self):
        """Gravity is undefined at the centre."""
        with pytest.raises(DomainError):
            gravitational_acceleration(Vector3D.zero())
        with pytest.raises(DomainError):
            gravity_magnitude(Vector3D.zero())

    def test_orbital_speeds(self):
        """Escape velocity is sqrt(2) times circular velocity."""
        r = 1.2 * MARS_RADIUS

        assert_allclose(circular_velocity(r), math.sqrt(MU_MARS / r))
        assert_allclose(escape_velocity(r) / circular_velocity(r), math.sqrt(2.0))
        # The circular orbit scenario starts at this speed
        assert_allclose(circular_velocity(r), 3247.087385863725, rtol=1e-6)

    def test_orbital_speed_invalid_radius(self):
        """Non-positive radius is rejected."""
        with pytest.raises(DomainError):
            circular_velocity(0.0)
        with pytest.raises(DomainError):
            escape_velocity(-1.0)


# =============================================================================
# Atmosphere Tests
# =============================================================================


class TestAtmosphere:
    """Test the exponential atmosphere."""

    def test_surface_density(self):
        """Density at zero altitude is the surface value."""
        assert MarsAtmosphere().density(0.0) == 0.017

    def test_scale_height(self):
        """Density falls by a factor e every scale height."""
        atm = MarsAtmosphere()

        assert_allclose(atm.density(11000.0), 0.017 / math.e, rtol=1e-12)

    def test_zero_above_exosphere(self):
        """No atmosphere above the exosphere."""
        atm = MarsAtmosphere()

        assert atm.density(EXOSPHERE) > 0.0
        assert atm.density(EXOSPHERE + 1.0) == 0.0

    def test_zero_below_surface(self):
        """Negative altitude gives zero density."""
        assert MarsAtmosphere().density(-10.0) == 0.0

    def test_density_at_position(self):
        """Position form uses the distance from the centre."""
        position = Vector3D(0.0, -(MARS_RADIUS + 10000.0), 0.0)

        assert_allclose(
            atmospheric_density(position),
            0.017 * math.exp(-10000.0 / 11000.0),
            rtol=1e-12,
        )

    def test_profile(self):
        """Profile returns matching altitude and density arrays."""
        altitudes = np.array([0.0, 11000.0, 250000.0])
        profile = MarsAtmosphere().profile(altitudes)

        assert_allclose(profile["altitude"], altitudes)
        assert_allclose(profile["density"], [0.017, 0.017 / math.e, 0.0], rtol=1e-12)

    def test_monotonic(self):
        """Density decreases with altitude inside the atmosphere."""
        profile = MarsAtmosphere().profile(np.linspace(0.0, EXOSPHERE, 50))

        assert np.all(np.diff(profile["density"]) < 0)

    def test_invalid_scale_height(self):
        """Scale height must be positive."""
        with pytest.raises(ValueError):
            MarsAtmosphere(scale_height=0.0)
