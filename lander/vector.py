"""Immutable 3D vector used as the geometric currency of the simulator.

Positions, velocities, forces and Euler angle triples are all carried as
Vector3D values. Arithmetic returns new vectors; nothing is mutated.

Example:
    >>> from lander.vector import Vector3D
    >>>
    >>> r = Vector3D(3.0, 4.0, 0.0)
    >>> abs(r)
    5.0
    >>> r.norm()
    Vector3D(0.6, 0.8, 0)
    >>> (2.0 * r - r / 2.0).abs2()
    56.25
"""

import math
from collections.abc import Iterator
from dataclasses import dataclass

import numpy as np
from beartype import beartype
from numpy.typing import NDArray

from lander.errors import DomainError


@beartype
@dataclass(frozen=True, slots=True)
class Vector3D:
    """A Cartesian 3-vector of real components.

    Attributes:
        x: First component
        y: Second component
        z: Third component
    """

    x: float = 0.0
    y: float = 0.0
    z: float = 0.0

    @classmethod
    def zero(cls) -> "Vector3D":
        """The zero vector."""
        return cls(0.0, 0.0, 0.0)

    @classmethod
    def from_array(cls, arr: NDArray[np.float64]) -> "Vector3D":
        """Create from a numpy array of shape (3,)."""
        if arr.shape != (3,):
            raise ValueError(f"Vector3D needs shape (3,), got {arr.shape}")
        return cls(float(arr[0]), float(arr[1]), float(arr[2]))

    def to_array(self) -> NDArray[np.float64]:
        """Convert to a numpy array of shape (3,)."""
        return np.array([self.x, self.y, self.z], dtype=np.float64)

    def __repr__(self) -> str:
        return f"Vector3D({self.x:.6g}, {self.y:.6g}, {self.z:.6g})"

    def __iter__(self) -> Iterator[float]:
        yield self.x
        yield self.y
        yield self.z

    # -------------------------------------------------------------------------
    # Arithmetic Operations
    # -------------------------------------------------------------------------

    def __add__(self, other: "Vector3D") -> "Vector3D":
        return Vector3D(self.x + other.x, self.y + other.y, self.z + other.z)

    def __sub__(self, other: "Vector3D") -> "Vector3D":
        return Vector3D(self.x - other.x, self.y - other.y, self.z - other.z)

    def __neg__(self) -> "Vector3D":
        return Vector3D(-self.x, -self.y, -self.z)

    def __mul__(self, factor: float | int) -> "Vector3D":
        """Scale by a scalar."""
        return Vector3D(self.x * factor, self.y * factor, self.z * factor)

    def __rmul__(self, factor: float | int) -> "Vector3D":
        return self.__mul__(factor)

    def __truediv__(self, divisor: float | int) -> "Vector3D":
        """Divide by a scalar.

        Raises:
            DomainError: If divisor is zero
        """
        if divisor == 0:
            raise DomainError("Cannot divide a vector by zero")
        return Vector3D(self.x / divisor, self.y / divisor, self.z / divisor)

    def __abs__(self) -> float:
        return self.magnitude()

    # -------------------------------------------------------------------------
    # Products and Norms
    # -------------------------------------------------------------------------

    def dot(self, other: "Vector3D") -> float:
        """Scalar product."""
        return self.x * other.x + self.y * other.y + self.z * other.z

    def cross(self, other: "Vector3D") -> "Vector3D":
        """Vector product self x other."""
        return Vector3D(
            self.y * other.z - self.z * other.y,
            self.z * other.x - self.x * other.z,
            self.x * other.y - self.y * other.x,
        )

    def abs2(self) -> float:
        """Squared magnitude."""
        return self.dot(self)

    def magnitude(self) -> float:
        """Euclidean length."""
        return math.sqrt(self.abs2())

    def norm(self) -> "Vector3D":
        """Unit vector in the same direction.

        Raises:
            DomainError: If the vector has zero length (direction undefined)
        """
        mag = self.magnitude()
        if mag == 0.0:
            raise DomainError("Direction of the zero vector is undefined")
        return Vector3D(self.x / mag, self.y / mag, self.z / mag)

    def is_close(
        self,
        other: "Vector3D",
        rel_tol: float = 1e-9,
        abs_tol: float = 0.0,
    ) -> bool:
        """Component-wise math.isclose."""
        return all(
            math.isclose(a, b, rel_tol=rel_tol, abs_tol=abs_tol)
            for a, b in zip(self, other)
        )
