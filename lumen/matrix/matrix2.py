from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Any, Dict, Iterable, Mapping, Optional, Tuple, Union

import numpy as np

from lumen.config import Tolerance, resolve_tolerance
from lumen.utils.linalg import as_grid
from lumen.vector.vector2 import Vector2


@dataclass(frozen=True, slots=True)
class Matrix2x2:
    """
    Immutable 2x2 matrix, entries in row-major order:

        a b
        c d
    """
    a: float
    b: float
    c: float
    d: float

    def __post_init__(self) -> None:
        for name in ("a", "b", "c", "d"):
            object.__setattr__(self, name, float(getattr(self, name)))

    @classmethod
    def identity(cls) -> "Matrix2x2":
        return cls(1.0, 0.0,
                   0.0, 1.0)

    @classmethod
    def rotation(cls, angle: float) -> "Matrix2x2":
        """
        Counter-clockwise rotation by `angle` radians:

            [ cos a   sin a]
            [-sin a   cos a]

        With screen coordinates (y pointing down) this turns +x away from +y,
        so rotation(pi/2) maps (1, 0) to (0, -1). A clockwise rotation is
        `rotation(-angle)`.
        """
        cos_a = math.cos(angle)
        sin_a = math.sin(angle)
        return cls(cos_a, sin_a,
                   -sin_a, cos_a)

    @classmethod
    def from_rows(cls, rows: Iterable[Iterable[float]]) -> "Matrix2x2":
        """Build from a 2x2 nested sequence (or array), row by row."""
        g = as_grid([list(r) for r in rows], 2, 2, "Matrix2x2 source")
        return cls(*g.ravel())

    def row_vectors(self) -> Tuple[Vector2, Vector2]:
        """Rows read left to right: (a, b), (c, d)."""
        return (Vector2(self.a, self.b), Vector2(self.c, self.d))

    def col_vectors(self) -> Tuple[Vector2, Vector2]:
        """Columns read top to bottom: (a, c), (b, d)."""
        return (Vector2(self.a, self.c), Vector2(self.b, self.d))

    def scale(self, scalar: float) -> "Matrix2x2":
        return Matrix2x2(self.a * scalar, self.b * scalar,
                         self.c * scalar, self.d * scalar)

    def mult(self, other: Union["Matrix2x2", Vector2]) -> Union["Matrix2x2", Vector2]:
        """
        Matrix product `self @ other`.

        Parameters
        ----------
        other : Matrix2x2 or Vector2
            Right-hand side. The product is not commutative.

        Returns
        -------
        Matrix2x2 or Vector2
            Same kind as `other`.

        Raises
        ------
        TypeError
            If `other` is neither a Matrix2x2 nor a Vector2.
        """
        if isinstance(other, Matrix2x2):
            return Matrix2x2(
                self.a * other.a + self.b * other.c,
                self.a * other.b + self.b * other.d,
                self.c * other.a + self.d * other.c,
                self.c * other.b + self.d * other.d,
            )
        if isinstance(other, Vector2):
            return Vector2(self.a * other.x + self.b * other.y,
                           self.c * other.x + self.d * other.y)
        raise TypeError(f"Matrix2x2.mult expects a Matrix2x2 or Vector2, got {type(other).__name__}.")

    def isclose(self, other: "Matrix2x2", tol: Optional[Tolerance] = None) -> bool:
        return resolve_tolerance(tol).allclose(self.as_tuple(), other.as_tuple())

    def as_tuple(self) -> Tuple[float, float, float, float]:
        return (self.a, self.b, self.c, self.d)

    def to_numpy(self) -> np.ndarray:
        """(2,2) array."""
        return np.array(self.as_tuple(), dtype=float).reshape(2, 2)

    def to_dict(self) -> Dict[str, Any]:
        return {"rows": [[self.a, self.b], [self.c, self.d]]}

    @classmethod
    def from_dict(cls, d: Mapping[str, Any]) -> "Matrix2x2":
        return cls.from_rows(d["rows"])

    def __matmul__(self, other):
        if not isinstance(other, (Matrix2x2, Vector2)):
            return NotImplemented
        return self.mult(other)

    def __mul__(self, scalar: float) -> "Matrix2x2":
        return self.scale(scalar)

    def __rmul__(self, scalar: float) -> "Matrix2x2":
        return self.scale(scalar)
