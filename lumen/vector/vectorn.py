from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Any, Dict, Mapping, Optional, Tuple

import numpy as np

from lumen.config import Tolerance, resolve_tolerance
from lumen.utils.linalg import (
    arccos,
    as_components,
    check_dimension,
    quotient,
    require_same,
)
from lumen.utils.types import ArrayLike, Components


@dataclass(frozen=True, slots=True, eq=False)
class VectorN:
    """
    Immutable vector of a fixed dimension D.

    Meant for D >= 4; Vector2 and Vector3 are the specialized types for the
    smaller cases, though nothing here enforces a minimum.

    Parameters
    ----------
    dimension : int
        Declared number of components D (>= 0).
    components : array_like, shape (D,)
        Initial values, copied into a read-only float64 array.

    Raises
    ------
    DimensionMismatchError
        If `components` does not hold exactly `dimension` values. The source
        is never truncated or zero-padded.
    ValueError
        If `dimension` is not a non-negative integer.

    Notes
    -----
    Binary operations (add, dot, angle, ...) require both operands to have
    the same dimension and raise DimensionMismatchError otherwise.
    Equality is exact and component-wise; use `isclose` for tolerances.
    """
    dimension: int
    components: Components

    def __post_init__(self) -> None:
        dim = check_dimension(self.dimension)
        object.__setattr__(self, "dimension", dim)
        object.__setattr__(self, "components", as_components(self.components, dim, f"VectorN({dim}) source"))

    @classmethod
    def zero(cls, dimension: int) -> "VectorN":
        """Vector of `dimension` zeros."""
        dim = check_dimension(dimension)
        return cls(dim, np.zeros(dim))

    @classmethod
    def of(cls, components: ArrayLike) -> "VectorN":
        """Vector whose dimension is taken from the length of a 1D `components`."""
        c = np.asarray(components, dtype=float)
        if c.ndim != 1:
            raise ValueError(f"VectorN.of expects a 1D sequence, got shape {c.shape}.")
        return cls(c.shape[0], c)

    # --- access --------------------------------------------------------------

    def component_at(self, i: int) -> float:
        """
        Component at position `i`, 0 <= i < dimension.

        Raises IndexError outside that range (negative indices included).
        """
        if not 0 <= i < self.dimension:
            raise IndexError(f"component index {i} out of range for dimension {self.dimension}.")
        return float(self.components[i])

    def __getitem__(self, i: int) -> float:
        return self.component_at(i)

    def __len__(self) -> int:
        return self.dimension

    def __iter__(self):
        for c in self.components:
            yield float(c)

    # --- algebra -------------------------------------------------------------

    def _check_same(self, other: "VectorN", op: str) -> None:
        require_same(self.dimension, other.dimension, f"right operand of VectorN.{op}")

    def add(self, other: "VectorN") -> "VectorN":
        self._check_same(other, "add")
        return VectorN(self.dimension, self.components + other.components)

    def scale(self, scalar: float) -> "VectorN":
        return VectorN(self.dimension, self.components * float(scalar))

    def mag(self) -> float:
        """Euclidean length sqrt(sum c_i^2), without overflow or underflow in the squares."""
        return math.hypot(*self.components)

    def norm(self) -> "VectorN":
        """Unit vector along `self`; the zero vector is returned unchanged."""
        m = self.mag()
        if m == 0.0:
            return self
        return self.scale(1.0 / m)

    def dot(self, other: "VectorN") -> float:
        self._check_same(other, "dot")
        return float(np.dot(self.components, other.components))

    def angle(self, other: "VectorN") -> float:
        """
        Angle in radians: acos(self . other / (|self| * |other|)).

        Zero-length operands give NaN; nothing is raised.
        """
        d = self.dot(other)
        return arccos(quotient(d, self.mag() * other.mag()))

    def upgrade(self) -> "VectorN":
        """Append a 0.0 component, giving a vector of dimension D + 1."""
        return VectorN(self.dimension + 1, np.append(self.components, 0.0))

    # --- comparison / conversion ---------------------------------------------

    def isclose(self, other: "VectorN", tol: Optional[Tolerance] = None) -> bool:
        if self.dimension != other.dimension:
            return False
        return resolve_tolerance(tol).allclose(self.components, other.components)

    def as_tuple(self) -> Tuple[float, ...]:
        return tuple(float(c) for c in self.components)

    def to_numpy(self) -> np.ndarray:
        """Writable copy of the components."""
        return self.components.copy()

    def to_dict(self) -> Dict[str, Any]:
        return {"dimension": int(self.dimension), "components": self.components.tolist()}

    @classmethod
    def from_dict(cls, d: Mapping[str, Any]) -> "VectorN":
        return cls(int(d["dimension"]), np.asarray(d["components"], dtype=float))

    # --- value semantics -----------------------------------------------------

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, VectorN):
            return NotImplemented
        return self.dimension == other.dimension and bool(np.array_equal(self.components, other.components))

    def __hash__(self) -> int:
        return hash((self.dimension, self.as_tuple()))

    def __repr__(self) -> str:
        return f"VectorN({self.dimension}, {self.components.tolist()})"

    # --- operators -----------------------------------------------------------

    def __add__(self, other: "VectorN") -> "VectorN":
        return self.add(other)

    def __sub__(self, other: "VectorN") -> "VectorN":
        self._check_same(other, "sub")
        return VectorN(self.dimension, self.components - other.components)

    def __mul__(self, scalar: float) -> "VectorN":
        return self.scale(scalar)

    def __rmul__(self, scalar: float) -> "VectorN":
        return self.scale(scalar)

    def __neg__(self) -> "VectorN":
        return self.scale(-1.0)
