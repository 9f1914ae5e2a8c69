from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Any, Dict, Iterable, Mapping, Optional, Tuple, TYPE_CHECKING

import numpy as np

from lumen.config import Tolerance, resolve_tolerance
from lumen.utils.linalg import arccos, as_components

if TYPE_CHECKING:
    from lumen.vector.vector3 import Vector3


@dataclass(frozen=True, slots=True)
class Vector2:
    """
    Immutable 2D vector.

    Parameters
    ----------
    x, y : float
        Components. Anything convertible with `float()` is accepted and stored
        as a Python float.

    Notes
    -----
    Every operation returns a new Vector2 (or a scalar); instances are never
    mutated. Equality and hashing are component-wise.
    """
    x: float
    y: float

    def __post_init__(self) -> None:
        object.__setattr__(self, "x", float(self.x))
        object.__setattr__(self, "y", float(self.y))

    @classmethod
    def zero(cls) -> "Vector2":
        """The origin (0, 0)."""
        return cls(0.0, 0.0)

    @classmethod
    def from_iterable(cls, values: Iterable[float]) -> "Vector2":
        vx, vy = as_components(list(values), 2, "Vector2 source")
        return cls(vx, vy)

    # --- algebra -------------------------------------------------------------

    def add(self, other: "Vector2") -> "Vector2":
        return Vector2(self.x + other.x, self.y + other.y)

    def scale(self, scalar: float) -> "Vector2":
        return Vector2(self.x * scalar, self.y * scalar)

    def mag(self) -> float:
        """Euclidean length."""
        return math.hypot(self.x, self.y)

    def norm(self) -> "Vector2":
        """
        Unit vector with the direction of `self`.

        The zero vector has no direction and is returned unchanged.
        """
        m = self.mag()
        if m == 0.0:
            return self
        return self.scale(1.0 / m)

    def dot(self, other: "Vector2") -> float:
        return self.x * other.x + self.y * other.y

    def cross(self, other: "Vector2") -> float:
        """
        2D cross product: the z component of the 3D cross product, i.e. the
        signed area of the parallelogram spanned by `self` and `other`.
        """
        return self.x * other.y - other.x * self.y

    def angle(self, other: "Vector2") -> float:
        """
        Angle in radians between `self` and `other`.

        Computed as acos(norm(self) . norm(other)). When rounding pushes the
        dot product of the unit vectors slightly outside [-1, 1] the result
        is NaN.
        """
        return arccos(self.norm().dot(other.norm()))

    # --- swizzle / dimension -------------------------------------------------

    def swap(self) -> "Vector2":
        """Exchange x and y."""
        return Vector2(self.y, self.x)

    def upgrade(self) -> "Vector3":
        """Lift to 3D with z = 0."""
        from lumen.vector.vector3 import Vector3
        return Vector3(self.x, self.y, 0.0)

    # --- rotation ------------------------------------------------------------

    def rotate_clockwise(self, angle: float) -> "Vector2":
        """Rotate clockwise by `angle` radians."""
        from lumen.matrix.matrix2 import Matrix2x2
        return Matrix2x2.rotation(-angle).mult(self)

    def rotate_counter_clockwise(self, angle: float) -> "Vector2":
        """Rotate counter-clockwise by `angle` radians."""
        from lumen.matrix.matrix2 import Matrix2x2
        return Matrix2x2.rotation(angle).mult(self)

    # --- comparison / conversion ---------------------------------------------

    def isclose(self, other: "Vector2", tol: Optional[Tolerance] = None) -> bool:
        return resolve_tolerance(tol).allclose(self.as_tuple(), other.as_tuple())

    def as_tuple(self) -> Tuple[float, float]:
        return (self.x, self.y)

    def to_numpy(self) -> np.ndarray:
        return np.array([self.x, self.y], dtype=float)

    def to_dict(self) -> Dict[str, Any]:
        return {"x": float(self.x), "y": float(self.y)}

    @classmethod
    def from_dict(cls, d: Mapping[str, Any]) -> "Vector2":
        return cls(x=float(d["x"]), y=float(d["y"]))

    # --- operators -----------------------------------------------------------

    def __add__(self, other: "Vector2") -> "Vector2":
        return self.add(other)

    def __sub__(self, other: "Vector2") -> "Vector2":
        return Vector2(self.x - other.x, self.y - other.y)

    def __mul__(self, scalar: float) -> "Vector2":
        return self.scale(scalar)

    def __rmul__(self, scalar: float) -> "Vector2":
        return self.scale(scalar)

    def __neg__(self) -> "Vector2":
        return self.scale(-1.0)

    def __iter__(self):
        yield self.x
        yield self.y

    def __len__(self) -> int:
        return 2

    def __getitem__(self, idx: int) -> float:
        return self.as_tuple()[idx]
