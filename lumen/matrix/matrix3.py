from __future__ import annotations

import math
from dataclasses import dataclass, fields
from typing import Any, Dict, Iterable, Mapping, Optional, Tuple, Union

import numpy as np

from lumen.config import Tolerance, resolve_tolerance
from lumen.utils.linalg import as_grid
from lumen.vector.vector3 import Vector3


@dataclass(frozen=True, slots=True)
class Matrix3x3:
    """
    Immutable 3x3 matrix, entries in row-major order:

        a b c
        d e f
        g h i

    Rotation constructors
    ---------------------
    `rotation_x`, `rotation_y` and `rotation_z` build the right-handed
    rotations about the coordinate axes, e.g.

        rotation_z(t) = [[cos t, -sin t, 0],
                         [sin t,  cos t, 0],
                         [0,      0,     1]]

    so that rotation_z(pi/2) maps +x onto +y.
    """
    a: float
    b: float
    c: float
    d: float
    e: float
    f: float
    g: float
    h: float
    i: float

    def __post_init__(self) -> None:
        for fld in fields(self):
            object.__setattr__(self, fld.name, float(getattr(self, fld.name)))

    @classmethod
    def identity(cls) -> "Matrix3x3":
        return cls(1.0, 0.0, 0.0,
                   0.0, 1.0, 0.0,
                   0.0, 0.0, 1.0)

    @classmethod
    def rotation_x(cls, angle: float) -> "Matrix3x3":
        cos_a, sin_a = math.cos(angle), math.sin(angle)
        return cls(1.0, 0.0, 0.0,
                   0.0, cos_a, -sin_a,
                   0.0, sin_a, cos_a)

    @classmethod
    def rotation_y(cls, angle: float) -> "Matrix3x3":
        cos_a, sin_a = math.cos(angle), math.sin(angle)
        return cls(cos_a, 0.0, sin_a,
                   0.0, 1.0, 0.0,
                   -sin_a, 0.0, cos_a)

    @classmethod
    def rotation_z(cls, angle: float) -> "Matrix3x3":
        cos_a, sin_a = math.cos(angle), math.sin(angle)
        return cls(cos_a, -sin_a, 0.0,
                   sin_a, cos_a, 0.0,
                   0.0, 0.0, 1.0)

    @classmethod
    def from_rows(cls, rows: Iterable[Iterable[float]]) -> "Matrix3x3":
        g = as_grid([list(r) for r in rows], 3, 3, "Matrix3x3 source")
        return cls(*g.ravel())

    def row_vectors(self) -> Tuple[Vector3, Vector3, Vector3]:
        """Rows (a, b, c), (d, e, f), (g, h, i)."""
        return (Vector3(self.a, self.b, self.c),
                Vector3(self.d, self.e, self.f),
                Vector3(self.g, self.h, self.i))

    def col_vectors(self) -> Tuple[Vector3, Vector3, Vector3]:
        """Columns (a, d, g), (b, e, h), (c, f, i)."""
        return (Vector3(self.a, self.d, self.g),
                Vector3(self.b, self.e, self.h),
                Vector3(self.c, self.f, self.i))

    def scale(self, scalar: float) -> "Matrix3x3":
        return Matrix3x3(*(v * scalar for v in self.as_tuple()))

    def mult(self, other: Union["Matrix3x3", Vector3]) -> Union["Matrix3x3", Vector3]:
        """
        Matrix product `self @ other` with a Matrix3x3 or a Vector3.

        Entry (r, c) of a matrix product is row r of `self` dotted with
        column c of `other`.
        """
        if isinstance(other, Matrix3x3):
            rows = self.row_vectors()
            cols = other.col_vectors()
            return Matrix3x3(*(r.dot(c) for r in rows for c in cols))
        if isinstance(other, Vector3):
            return Vector3(*(r.dot(other) for r in self.row_vectors()))
        raise TypeError(f"Matrix3x3.mult expects a Matrix3x3 or Vector3, got {type(other).__name__}.")

    def isclose(self, other: "Matrix3x3", tol: Optional[Tolerance] = None) -> bool:
        return resolve_tolerance(tol).allclose(self.as_tuple(), other.as_tuple())

    def as_tuple(self) -> Tuple[float, ...]:
        return (self.a, self.b, self.c,
                self.d, self.e, self.f,
                self.g, self.h, self.i)

    def to_numpy(self) -> np.ndarray:
        """(3,3) array."""
        return np.array(self.as_tuple(), dtype=float).reshape(3, 3)

    def to_dict(self) -> Dict[str, Any]:
        return {"rows": [[r.x, r.y, r.z] for r in self.row_vectors()]}

    @classmethod
    def from_dict(cls, d: Mapping[str, Any]) -> "Matrix3x3":
        return cls.from_rows(d["rows"])

    def __matmul__(self, other):
        if not isinstance(other, (Matrix3x3, Vector3)):
            return NotImplemented
        return self.mult(other)

    def __mul__(self, scalar: float) -> "Matrix3x3":
        return self.scale(scalar)

    def __rmul__(self, scalar: float) -> "Matrix3x3":
        return self.scale(scalar)
