"""Attitude utilities for xyz Euler angles.

Orientation is stored as xyz Euler angles in degrees. The rotation matrix
R = Rx(x) @ Ry(y) @ Rz(z) maps lander body coordinates to the
planet-centred world frame; its third column is the body +z axis, along
which the engine pushes.
"""

import numpy as np
from beartype import beartype
from numpy.typing import NDArray

from lander.vector import Vector3D

_GIMBAL_LOCK_TOL = 1e-9


@beartype
def xyz_euler_to_matrix(angles_deg: Vector3D) -> NDArray[np.float64]:
    """Convert xyz Euler angles to a body-to-world rotation matrix.

    Args:
        angles_deg: Rotations about x, y, z [degrees]

    Returns:
        3x3 rotation matrix R = Rx @ Ry @ Rz
    """
    a, b, c = np.radians(angles_deg.to_array())
    ca, sa = np.cos(a), np.sin(a)
    cb, sb = np.cos(b), np.sin(b)
    cc, sc = np.cos(c), np.sin(c)

    rx = np.array([[1.0, 0.0, 0.0], [0.0, ca, -sa], [0.0, sa, ca]])
    ry = np.array([[cb, 0.0, sb], [0.0, 1.0, 0.0], [-sb, 0.0, cb]])
    rz = np.array([[cc, -sc, 0.0], [sc, cc, 0.0], [0.0, 0.0, 1.0]])

    return rx @ ry @ rz


@beartype
def matrix_to_xyz_euler(matrix: NDArray[np.float64]) -> Vector3D:
    """Decompose a rotation matrix into xyz Euler angles.

    Inverse of xyz_euler_to_matrix. At gimbal lock (y = +/-90 deg) the z
    rotation is set to zero.

    Args:
        matrix: 3x3 rotation matrix

    Returns:
        Euler angles [degrees]
    """
    if matrix.shape != (3, 3):
        raise ValueError(f"Rotation matrix must be shape (3, 3), got {matrix.shape}")

    sin_b = float(np.clip(matrix[0, 2], -1.0, 1.0))
    b = np.arcsin(sin_b)

    if abs(abs(sin_b) - 1.0) < _GIMBAL_LOCK_TOL:
        a = np.arctan2(matrix[2, 1], matrix[1, 1])
        c = 0.0
    else:
        a = np.arctan2(-matrix[1, 2], matrix[2, 2])
        c = np.arctan2(-matrix[0, 1], matrix[0, 0])

    return Vector3D(
        float(np.degrees(a)),
        float(np.degrees(b)),
        float(np.degrees(c)),
    )


@beartype
def body_to_world(vector_body: Vector3D, angles_deg: Vector3D) -> Vector3D:
    """Rotate a body-frame vector into the world frame."""
    rotated = xyz_euler_to_matrix(angles_deg) @ vector_body.to_array()
    return Vector3D.from_array(rotated)
