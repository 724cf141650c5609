"""Fixed-step integrator for the lander's translational motion.

Position Verlet needs two past positions, so the first step is a single
explicit Euler step:

Bootstrap (no previous position):
    a = acceleration(x, v)
    x_prev = x
    x = x + v*dt + 0.5*a*dt^2
    v = v + a*dt

Steady state:
    a = acceleration(x, v)
    x_next = 2*x - x_prev + a*dt^2
    v = (x_next - x_prev) / (2*dt)
    x_prev = x
    x = x_next

The velocity passed to the force model in steady state lags half a step;
it only affects drag. All new values are computed before the state is
touched, so a step that raises leaves the state unchanged.

After the update the autopilot and attitude stabilization run, in that
order, if their mode flags are set. Simulation time is advanced by the
caller (see Simulator.step).
"""

from collections.abc import Callable

from beartype import beartype

from lander.dynamics.forces import acceleration
from lander.dynamics.state import LanderState
from lander.environment.atmosphere import MarsAtmosphere
from lander.gnc.control.attitude import attitude_stabilization
from lander.gnc.control.autopilot import StagedAutopilot, ThrottleController, apply_autopilot
from lander.vehicle.lander import LanderConfig

_DEFAULT_AUTOPILOT = StagedAutopilot()


@beartype
def numerical_dynamics(
    state: LanderState,
    lander: LanderConfig,
    autopilot: ThrottleController | None = None,
    stabilizer: Callable[[LanderState], None] = attitude_stabilization,
    atmosphere: MarsAtmosphere | None = None,
) -> LanderState:
    """Advance position and velocity by one time step, in place.

    Args:
        state: Lander state to advance
        lander: Vehicle parameters
        autopilot: Throttle strategy used when state.autopilot_enabled
            (default StagedAutopilot)
        stabilizer: Attitude routine used when state.stabilized_attitude
        atmosphere: Atmosphere model (default Mars exponential model)

    Returns:
        The same state object, advanced

    Raises:
        DomainError: If the force model cannot be evaluated
    """
    dt = state.delta_t
    position = state.position
    velocity = state.velocity

    acc = acceleration(position, velocity, state, lander, atmosphere)

    if state.previous_position is None:
        new_position = position + velocity * dt + 0.5 * dt * dt * acc
        new_velocity = velocity + dt * acc
    else:
        previous = state.previous_position
        new_position = 2.0 * position - previous + acc * (dt * dt)
        new_velocity = (new_position - previous) / (2.0 * dt)

    state.previous_position = position
    state.position = new_position
    state.velocity = new_velocity

    if state.autopilot_enabled:
        apply_autopilot(autopilot or _DEFAULT_AUTOPILOT, state, lander)

    if state.stabilized_attitude:
        stabilizer(state)

    return state
