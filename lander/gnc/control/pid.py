"""Scalar PID loop for the descent-rate autopilot.

The proportional autopilot runs this loop on the descent-rate error with
only kp set; the integral and derivative paths stay available for tuning.

    u = kp*e + ki*sum(e*dt) + kd*filtered(de/dt)

The running integral can be bounded (anti-windup) and the derivative is
smoothed by an exponential filter, since the Verlet velocity estimate is
noisy from step to step.

Example:
    >>> from lander.gnc.control import PIDController, PIDGains
    >>>
    >>> loop = PIDController.from_gains(PIDGains(kp=1.0))
    >>> loop.update(error=-0.3, dt=0.1)
    -0.3
"""

from dataclasses import dataclass, field

import numpy as np
from beartype import beartype

# =============================================================================
# Gains
# =============================================================================


@beartype
@dataclass(frozen=True)
class PIDGains:
    """Loop gains; the defaults give a pure proportional loop."""
    kp: float = 1.0
    ki: float = 0.0
    kd: float = 0.0


# =============================================================================
# Controller
# =============================================================================


@beartype
@dataclass
class PIDController:
    """Stateful PID loop over a scalar error.

    Attributes:
        kp, ki, kd: Loop gains
        output_limits: Optional (low, high) saturation of the output
        integral_limits: Optional (low, high) bound on the running integral
        derivative_filter: Weight of the newest derivative sample; 1 disables smoothing
    """
    kp: float = 1.0
    ki: float = 0.0
    kd: float = 0.0
    output_limits: tuple[float, float] | None = None
    integral_limits: tuple[float, float] | None = None
    derivative_filter: float = 1.0

    _error_sum: float = field(default=0.0, init=False, repr=False)
    _last_error: float | None = field(default=None, init=False, repr=False)
    _error_rate: float = field(default=0.0, init=False, repr=False)

    def __post_init__(self) -> None:
        if not 0.0 < self.derivative_filter <= 1.0:
            raise ValueError(f"Derivative filter must be in (0, 1], got {self.derivative_filter}")

    @classmethod
    def from_gains(
        cls,
        gains: PIDGains,
        output_limits: tuple[float, float] | None = None,
    ) -> "PIDController":
        """Build a loop from a gain set."""
        return cls(kp=gains.kp, ki=gains.ki, kd=gains.kd, output_limits=output_limits)

    def reset(self) -> None:
        """Forget the accumulated integral and the last error."""
        self._error_sum = 0.0
        self._last_error = None
        self._error_rate = 0.0

    @beartype
    def update(self, error: float, dt: float) -> float:
        """Advance the loop by one step and return its output.

        Args:
            error: Target minus measured value
            dt: Step length [s]

        Raises:
            ValueError: If dt is not positive
        """
        if dt <= 0:
            raise ValueError(f"Controller time step must be positive, got {dt}")

        self._error_sum += error * dt
        if self.integral_limits is not None:
            low, high = self.integral_limits
            self._error_sum = min(max(self._error_sum, low), high)

        if self._last_error is not None:
            sample = (error - self._last_error) / dt
            w = self.derivative_filter
            self._error_rate = w * sample + (1.0 - w) * self._error_rate
        self._last_error = error

        u = self.kp * error + self.ki * self._error_sum + self.kd * self._error_rate
        if self.output_limits is not None:
            u = np.clip(u, *self.output_limits)
        return float(u)
