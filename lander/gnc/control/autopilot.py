"""Throttle autopilots for powered descent.

Two interchangeable strategies implement the ThrottleController protocol:

- StagedAutopilot (default): altitude- and descent-rate-gated policy. Above
  the scaling altitude the engine is off; below it the throttle ramps
  linearly toward hover thrust; close to the surface the throttle is set
  from the descent rate in three bands.
- ProportionalAutopilot: proportional control of the descent rate toward a
  target that shrinks linearly with altitude.

Controllers only compute a raw setting. apply_autopilot() clamps it to
[0, 1] before writing it to the state, so everything downstream (engine,
fuel burn) sees a valid throttle.

Vertical speeds are measured along the local radial direction.

Example:
    >>> from lander.gnc.control import StagedAutopilot, apply_autopilot
    >>>
    >>> apply_autopilot(StagedAutopilot(), state, lander)
    >>> state.throttle
"""

import logging
from dataclasses import dataclass, field
from typing import Protocol, runtime_checkable

import numpy as np
from beartype import beartype

from lander.dynamics.state import LanderState
from lander.environment.gravity import gravity_magnitude
from lander.gnc.control.pid import PIDController, PIDGains
from lander.vehicle.lander import LanderConfig

logger = logging.getLogger(__name__)


# =============================================================================
# Controller Protocol
# =============================================================================


@runtime_checkable
class ThrottleController(Protocol):
    """Protocol for throttle autopilots."""

    def compute_throttle(self, state: LanderState, lander: LanderConfig) -> float:
        """Compute the raw (unclamped) throttle setting."""
        ...


@beartype
def hover_throttle(state: LanderState, lander: LanderConfig) -> float:
    """Throttle whose thrust cancels local gravity at the current mass."""
    force = gravity_magnitude(state.position) * lander.mass(state.fuel)
    return force / lander.max_thrust


@beartype
def apply_autopilot(
    controller: ThrottleController,
    state: LanderState,
    lander: LanderConfig,
) -> float:
    """Run a controller and store its clamped output as the new throttle.

    Args:
        controller: Throttle strategy
        state: Lander state; throttle is overwritten
        lander: Vehicle parameters

    Returns:
        The throttle written to the state, in [0, 1]
    """
    raw = controller.compute_throttle(state, lander)
    state.throttle = float(np.clip(raw, 0.0, 1.0))
    return state.throttle


# =============================================================================
# Staged Autopilot
# =============================================================================


@beartype
@dataclass(frozen=True)
class StagedAutopilot:
    """Altitude- and descent-rate-gated throttle policy.

    Steps, in order:
    1. Baseline: hover throttle * max(0, (scaling_altitude - h) / scaling_altitude).
       The scale factor is not capped at 1, so it exceeds 1 below h = 0.
    2. Climbing (positive climb rate): engine off.
    3. Below near_surface_altitude, by descent rate v:
       - v > full_descent_rate: hover throttle
       - min_descent_rate <= v <= full_descent_rate: half hover throttle
       - v < min_descent_rate: engine off

    Attributes:
        scaling_altitude: Altitude where the throttle ramp starts [m]
        near_surface_altitude: Altitude below which descent-rate bands apply [m]
        full_descent_rate: Descent rate above which hover thrust is used [m/s]
        min_descent_rate: Descent rate below which the engine is cut [m/s]
    """
    scaling_altitude: float = 4000.0
    near_surface_altitude: float = 300.0
    full_descent_rate: float = 3.0
    min_descent_rate: float = 0.6

    def __post_init__(self) -> None:
        if self.scaling_altitude <= 0:
            raise ValueError(f"Scaling altitude must be positive, got {self.scaling_altitude}")
        if self.min_descent_rate > self.full_descent_rate:
            raise ValueError("min_descent_rate must not exceed full_descent_rate")

    @beartype
    def compute_throttle(self, state: LanderState, lander: LanderConfig) -> float:
        hover = hover_throttle(state, lander)
        altitude = state.altitude(lander.planet_radius)

        scaling = max(0.0, (self.scaling_altitude - altitude) / self.scaling_altitude)
        throttle = hover * scaling

        if state.climb_rate > 0:
            throttle = 0.0

        if altitude < self.near_surface_altitude:
            v = state.descent_rate
            if v > self.full_descent_rate:
                throttle = hover
            elif v >= self.min_descent_rate:
                throttle = 0.5 * hover
            else:
                throttle = 0.0

        logger.debug("Staged autopilot: h=%.1f m, throttle=%.3f", altitude, throttle)
        return throttle


# =============================================================================
# Proportional Autopilot
# =============================================================================


@beartype
@dataclass
class ProportionalAutopilot:
    """Proportional descent-rate controller.

    Tracks a target descent rate of (target_rate + kh * h), so the lander
    slows as it gets lower and touches down at target_rate:

        error = -(target_rate + kh * h + climb_rate)
        P = kp * error

    The output is mapped onto the throttle with an offset delta:
    P >= 1 - delta gives full throttle, P <= -delta gives zero, and
    anything between gives delta + P.

    Attributes:
        kh: Altitude gain [1/s]
        kp: Proportional gain
        delta: Throttle offset, roughly the hover fraction
        target_rate: Descent rate at touchdown [m/s]
    """
    kh: float = 0.001
    kp: float = 1.0
    delta: float = 0.1
    target_rate: float = 0.5

    _pid: PIDController = field(init=False, repr=False)

    def __post_init__(self) -> None:
        self._pid = PIDController.from_gains(PIDGains(kp=self.kp))

    @beartype
    def compute_throttle(self, state: LanderState, lander: LanderConfig) -> float:
        altitude = state.altitude(lander.planet_radius)
        error = -(self.target_rate + self.kh * altitude + state.climb_rate)
        p_out = self._pid.update(error, state.delta_t)

        if p_out >= 1.0 - self.delta:
            throttle = 1.0
        elif p_out <= -self.delta:
            throttle = 0.0
        else:
            throttle = self.delta + p_out

        logger.debug("Proportional autopilot: error=%.3f, throttle=%.3f", error, throttle)
        return throttle
