"""Attitude stabilization: keep the lander's base pointing at the planet.

The lander's body +z axis (the thrust axis) is aligned with the local
vertical, so that full thrust acts straight up. The remaining two body axes
are chosen as any perpendicular pair; roll about the vertical is
irrelevant for a point-mass model.
"""

import numpy as np
from beartype import beartype

from lander.dynamics.state import LanderState
from lander.rotation import matrix_to_xyz_euler
from lander.vector import Vector3D

_SMALL_NUM = 1e-7


@beartype
def vertical_orientation(position: Vector3D) -> Vector3D:
    """xyz Euler angles [degrees] that point body +z along the local vertical.

    Raises:
        DomainError: If position is the origin
    """
    up = position.norm()

    left = Vector3D(-up.y, up.x, 0.0)
    if left.magnitude() < _SMALL_NUM:
        left = Vector3D(-up.z, 0.0, up.x)
    left = left.norm()
    out = left.cross(up)

    matrix = np.column_stack([out.to_array(), left.to_array(), up.to_array()])
    return matrix_to_xyz_euler(matrix)


@beartype
def attitude_stabilization(state: LanderState) -> None:
    """Point the lander's base at the planet centre, in place."""
    state.orientation = vertical_orientation(state.position)
