from __future__ import annotations

import math
from dataclasses import dataclass
from enum import Enum, auto
from typing import Any, Dict, Iterable, Mapping, Optional, Tuple

import numpy as np

from lumen.config import Tolerance, resolve_tolerance
from lumen.utils.linalg import arccos, as_components, quotient
from lumen.vector.vector2 import Vector2


class Vector3Pos(Enum):
    """
    Component of a Vector3, used to select the axis removed by `Vector3.downgrade`.
    """
    X = auto()
    Y = auto()
    Z = auto()


@dataclass(frozen=True, slots=True)
class Vector3:
    """
    Immutable 3D vector.

    Parameters
    ----------
    x, y, z : float
        Components, stored as Python floats.

    Notes
    -----
    Rotations follow the right-hand rule: a positive angle turns
    counter-clockwise when looking down the rotation axis towards the origin.
    """
    x: float
    y: float
    z: float

    def __post_init__(self) -> None:
        object.__setattr__(self, "x", float(self.x))
        object.__setattr__(self, "y", float(self.y))
        object.__setattr__(self, "z", float(self.z))

    @classmethod
    def zero(cls) -> "Vector3":
        """The origin (0, 0, 0)."""
        return cls(0.0, 0.0, 0.0)

    @classmethod
    def from_iterable(cls, values: Iterable[float]) -> "Vector3":
        vx, vy, vz = as_components(list(values), 3, "Vector3 source")
        return cls(vx, vy, vz)

    # --- algebra -------------------------------------------------------------

    def add(self, other: "Vector3") -> "Vector3":
        return Vector3(self.x + other.x, self.y + other.y, self.z + other.z)

    def scale(self, scalar: float) -> "Vector3":
        return Vector3(self.x * scalar, self.y * scalar, self.z * scalar)

    def mag(self) -> float:
        """Euclidean length."""
        return math.hypot(self.x, self.y, self.z)

    def norm(self) -> "Vector3":
        """Unit vector with the direction of `self`; the zero vector is returned unchanged."""
        m = self.mag()
        if m == 0.0:
            return self
        return self.scale(1.0 / m)

    def dot(self, other: "Vector3") -> float:
        return self.x * other.x + self.y * other.y + self.z * other.z

    def cross(self, other: "Vector3") -> "Vector3":
        return Vector3(
            self.y * other.z - self.z * other.y,
            self.z * other.x - self.x * other.z,
            self.x * other.y - self.y * other.x,
        )

    def angle(self, other: "Vector3") -> float:
        """
        Angle in radians between `self` and `other`.

        acos(self . other / (|self| * |other|)). A zero-length operand makes
        the quotient NaN (0/0) and so the result; nothing is raised.
        """
        return arccos(quotient(self.dot(other), self.mag() * other.mag()))

    # --- swizzle / dimension -------------------------------------------------

    def swap_left(self) -> "Vector3":
        """Cycle components left: (x, y, z) -> (y, z, x)."""
        return Vector3(self.y, self.z, self.x)

    def swap_right(self) -> "Vector3":
        """Cycle components right: (x, y, z) -> (z, x, y)."""
        return Vector3(self.z, self.x, self.y)

    def downgrade(self, axis: Vector3Pos) -> Vector2:
        """
        Drop one component and return the remaining two as a Vector2.

        Parameters
        ----------
        axis : Vector3Pos
            Component to remove. X gives (y, z), Y gives (x, z); Z, and any
            value that is not a Vector3Pos member, gives (x, y).
        """
        if axis is Vector3Pos.X:
            return Vector2(self.y, self.z)
        if axis is Vector3Pos.Y:
            return Vector2(self.x, self.z)
        return Vector2(self.x, self.y)

    # --- rotation ------------------------------------------------------------

    def rotate_x(self, angle: float) -> "Vector3":
        from lumen.matrix.matrix3 import Matrix3x3
        return Matrix3x3.rotation_x(angle).mult(self)

    def rotate_y(self, angle: float) -> "Vector3":
        from lumen.matrix.matrix3 import Matrix3x3
        return Matrix3x3.rotation_y(angle).mult(self)

    def rotate_z(self, angle: float) -> "Vector3":
        from lumen.matrix.matrix3 import Matrix3x3
        return Matrix3x3.rotation_z(angle).mult(self)

    # --- comparison / conversion ---------------------------------------------

    def isclose(self, other: "Vector3", tol: Optional[Tolerance] = None) -> bool:
        return resolve_tolerance(tol).allclose(self.as_tuple(), other.as_tuple())

    def as_tuple(self) -> Tuple[float, float, float]:
        return (self.x, self.y, self.z)

    def to_numpy(self) -> np.ndarray:
        return np.array([self.x, self.y, self.z], dtype=float)

    def to_dict(self) -> Dict[str, Any]:
        return {"x": float(self.x), "y": float(self.y), "z": float(self.z)}

    @classmethod
    def from_dict(cls, d: Mapping[str, Any]) -> "Vector3":
        return cls(x=float(d["x"]), y=float(d["y"]), z=float(d["z"]))

    # --- operators -----------------------------------------------------------

    def __add__(self, other: "Vector3") -> "Vector3":
        return self.add(other)

    def __sub__(self, other: "Vector3") -> "Vector3":
        return Vector3(self.x - other.x, self.y - other.y, self.z - other.z)

    def __mul__(self, scalar: float) -> "Vector3":
        return self.scale(scalar)

    def __rmul__(self, scalar: float) -> "Vector3":
        return self.scale(scalar)

    def __neg__(self) -> "Vector3":
        return self.scale(-1.0)

    def __iter__(self):
        yield self.x
        yield self.y
        yield self.z

    def __len__(self) -> int:
        return 3

    def __getitem__(self, idx: int) -> float:
        return self.as_tuple()[idx]
