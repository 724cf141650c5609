"""Main engine model: thrust in the world frame and fuel consumption.

The engine fires along the lander's body +z axis with magnitude
throttle * max_thrust, and produces nothing once the tank is empty.
Fuel flow is proportional to throttle.

The throttle passed here must already lie in [0, 1]. Clamping controller
output is the controller's job (see lander.gnc.control.autopilot); an
out-of-range value reaching the engine is rejected.

Example:
    >>> from lander.propulsion import thrust_wrt_world
    >>> from lander.vehicle import LanderConfig
    >>> from lander.vector import Vector3D
    >>>
    >>> lander = LanderConfig()
    >>> thrust = thrust_wrt_world(
    ...     throttle=0.5, orientation=Vector3D(0.0, 90.0, 0.0), fuel=1.0, lander=lander,
    ... )
    >>> # Body +z is rotated onto world +x
"""

from beartype import beartype

from lander.rotation import body_to_world
from lander.vector import Vector3D
from lander.vehicle.lander import LanderConfig

# =============================================================================
# Thrust
# =============================================================================


@beartype
def check_throttle(throttle: float) -> float:
    """Validate a throttle setting.

    Raises:
        ValueError: If throttle is outside [0, 1]
    """
    if not 0.0 <= throttle <= 1.0:
        raise ValueError(f"Throttle must be in [0, 1], got {throttle}")
    return throttle


@beartype
def thrust_magnitude(throttle: float, fuel: float, lander: LanderConfig) -> float:
    """Engine thrust [N] for a throttle setting; zero with an empty tank."""
    check_throttle(throttle)
    if fuel <= 0.0:
        return 0.0
    return throttle * lander.max_thrust


@beartype
def thrust_wrt_world(
    throttle: float,
    orientation: Vector3D,
    fuel: float,
    lander: LanderConfig,
) -> Vector3D:
    """Thrust force in the planet-centred world frame.

    Args:
        throttle: Commanded fraction of max thrust, 0 to 1
        orientation: Lander xyz Euler angles [degrees]
        fuel: Fraction of a full tank remaining
        lander: Vehicle parameters

    Returns:
        Thrust force [N]
    """
    magnitude = thrust_magnitude(throttle, fuel, lander)
    if magnitude == 0.0:
        return Vector3D.zero()
    return body_to_world(Vector3D(0.0, 0.0, magnitude), orientation)


# =============================================================================
# Fuel Consumption
# =============================================================================


@beartype
def fuel_consumed(throttle: float, dt: float, lander: LanderConfig) -> float:
    """Fraction of a full tank burnt in one time step.

    Args:
        throttle: Throttle setting over the step, 0 to 1
        dt: Time step [s]
        lander: Vehicle parameters

    Returns:
        Fuel fraction consumed
    """
    check_throttle(throttle)
    if lander.fuel_capacity == 0.0:
        return 0.0
    return dt * lander.fuel_rate_at_max_thrust * throttle / lander.fuel_capacity
