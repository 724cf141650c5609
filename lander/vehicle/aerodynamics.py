"""Quadratic drag on the lander body and parachute.

Both drag forces oppose the velocity with magnitude 0.5*rho*Cd*A*v^2:

    self_drag = -0.5 * rho * Cd_lander * pi*size^2 * |v|^2 * v_hat
    para_drag = -0.5 * rho * Cd_chute * (2*size)^2 * |v|^2 * v_hat * 5

The parachute term carries an empirical area multiplier of 5
(LanderConfig.chute_area_multiplier).

Example:
    >>> from lander.vehicle import LanderConfig, ParachuteStatus, drag_force
    >>> from lander.vector import Vector3D
    >>>
    >>> drag = drag_force(
    ...     Vector3D(0.0, -100.0, 0.0),
    ...     density=0.01,
    ...     parachute_status=ParachuteStatus.DEPLOYED,
    ...     lander=LanderConfig(),
    ... )
"""

import logging
from enum import Enum, auto

from beartype import beartype

from lander.vector import Vector3D
from lander.vehicle.lander import LanderConfig

logger = logging.getLogger(__name__)


class ParachuteStatus(Enum):
    """State of the parachute."""

    NOT_DEPLOYED = auto()
    DEPLOYED = auto()
    LOST = auto()  # Torn off by excessive drag or speed


# =============================================================================
# Drag Forces
# =============================================================================


def _quadratic_drag(velocity: Vector3D, density: float, cd_area: float) -> Vector3D:
    speed_sq = velocity.abs2()
    if speed_sq == 0.0 or density == 0.0:
        return Vector3D.zero()
    return -0.5 * density * cd_area * speed_sq * velocity.norm()


@beartype
def lander_drag(velocity: Vector3D, density: float, lander: LanderConfig) -> Vector3D:
    """Drag on the lander body [N]."""
    return _quadratic_drag(velocity, density, lander.drag_coef_lander * lander.lander_area)


@beartype
def parachute_drag(velocity: Vector3D, density: float, lander: LanderConfig) -> Vector3D:
    """Drag on a deployed parachute [N]."""
    cd_area = lander.drag_coef_chute * lander.chute_area * lander.chute_area_multiplier
    return _quadratic_drag(velocity, density, cd_area)


@beartype
def drag_force(
    velocity: Vector3D,
    density: float,
    parachute_status: ParachuteStatus,
    lander: LanderConfig,
) -> Vector3D:
    """Total drag for the current parachute status.

    Only a deployed parachute contributes; a lost or stowed chute leaves the
    body drag alone.

    Args:
        velocity: Velocity relative to the atmosphere [m/s]
        density: Local air density [kg/m^3]
        parachute_status: Current parachute state
        lander: Vehicle parameters

    Returns:
        Drag force [N], anti-parallel to velocity (zero at rest)
    """
    drag = lander_drag(velocity, density, lander)
    if parachute_status == ParachuteStatus.DEPLOYED:
        drag = drag + parachute_drag(velocity, density, lander)
    return drag


# =============================================================================
# Parachute Safety
# =============================================================================


@beartype
def safe_to_deploy_parachute(
    position: Vector3D,
    velocity: Vector3D,
    density: float,
    lander: LanderConfig,
    edge_altitude: float,
) -> bool:
    """Check whether a parachute would survive at the current state.

    The chute is torn off if the combined body and chute drag exceeds
    lander.max_parachute_drag, or if the lander is inside the atmosphere
    faster than lander.max_parachute_speed.

    Args:
        position: Planet-centred position [m]
        velocity: Velocity [m/s]
        density: Local air density [kg/m^3]
        lander: Vehicle parameters
        edge_altitude: Altitude of the atmosphere edge [m]

    Returns:
        True if the parachute can be (or stay) deployed
    """
    speed_sq = velocity.abs2()
    cd_area = (
        lander.drag_coef_chute * lander.chute_area * lander.chute_area_multiplier
        + lander.drag_coef_lander * lander.lander_area
    )
    drag = 0.5 * density * cd_area * speed_sq
    altitude = position.magnitude() - lander.planet_radius

    if drag > lander.max_parachute_drag:
        logger.debug("Parachute unsafe: drag %.0f N exceeds %.0f N", drag, lander.max_parachute_drag)
        return False
    if speed_sq > lander.max_parachute_speed**2 and altitude < edge_altitude:
        logger.debug("Parachute unsafe: speed %.0f m/s inside the atmosphere", speed_sq**0.5)
        return False
    return True
