from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Any, Dict, Mapping, Optional, Tuple, Union

import numpy as np

from lumen.config import Tolerance, resolve_tolerance
from lumen.errors import DimensionMismatchError
from lumen.utils.linalg import as_grid, check_dimension
from lumen.utils.types import Grid
from lumen.vector.vectorn import VectorN

logger = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True, eq=False)
class MatrixMN:
    """
    Immutable matrix with a fixed number of rows (M) and columns (N).

    Parameters
    ----------
    rows : int
        M, the number of rows.
    cols : int
        N, the number of columns.
    components : array_like, shape (M, N)
        Row-major grid, copied element-wise into a read-only float64 array.

    Raises
    ------
    DimensionMismatchError
        If the grid shape is not (rows, cols), including jagged grids whose
        rows differ in length.

    Examples
    --------
    >>> a = MatrixMN(1, 2, [[1, 2]])
    >>> b = MatrixMN(2, 3, [[1, 2, 3], [4, 5, 6]])
    >>> a.mult(b).components.tolist()
    [[9.0, 12.0, 15.0]]
    """
    rows: int
    cols: int
    components: Grid

    def __post_init__(self) -> None:
        m = check_dimension(self.rows, "rows")
        n = check_dimension(self.cols, "cols")
        object.__setattr__(self, "rows", m)
        object.__setattr__(self, "cols", n)
        object.__setattr__(self, "components", as_grid(self.components, m, n, f"MatrixMN({m}, {n}) source"))

    @classmethod
    def zero(cls, rows: int, cols: int) -> "MatrixMN":
        m = check_dimension(rows, "rows")
        n = check_dimension(cols, "cols")
        return cls(m, n, np.zeros((m, n)))

    @classmethod
    def identity(cls, n: int) -> "MatrixMN":
        n = check_dimension(n, "n")
        return cls(n, n, np.eye(n))

    @property
    def shape(self) -> Tuple[int, int]:
        """(rows, cols)"""
        return (self.rows, self.cols)

    # --- access --------------------------------------------------------------

    def at(self, row: int, col: int) -> float:
        """Entry at (row, col), both zero-based and non-negative."""
        if not (0 <= row < self.rows and 0 <= col < self.cols):
            raise IndexError(f"index ({row}, {col}) out of range for shape {self.shape}.")
        return float(self.components[row, col])

    def __getitem__(self, idx: Tuple[int, int]) -> float:
        row, col = idx
        return self.at(row, col)

    def row_vectors(self) -> Tuple[VectorN, ...]:
        return tuple(VectorN(self.cols, r) for r in self.components)

    def col_vectors(self) -> Tuple[VectorN, ...]:
        return tuple(VectorN(self.rows, c) for c in self.components.T)

    # --- algebra -------------------------------------------------------------

    def scale(self, scalar: float) -> "MatrixMN":
        return MatrixMN(self.rows, self.cols, self.components * float(scalar))

    def mult(self, rhs: "MatrixMN") -> "MatrixMN":
        """
        Matrix product of an MxN matrix with an NxP matrix, giving MxP.

            result[i][j] = sum_k self[i][k] * rhs[k][j]

        Raises
        ------
        DimensionMismatchError
            If `rhs.rows` differs from `self.cols`.
        """
        if rhs.rows != self.cols:
            logger.debug("rejecting mult: (%d, %d) x (%d, %d)", self.rows, self.cols, rhs.rows, rhs.cols)
            raise DimensionMismatchError((self.cols, rhs.cols), rhs.shape, "right operand of MatrixMN.mult")
        return MatrixMN(self.rows, rhs.cols, self.components @ rhs.components)

    def mult_v(self, rhs: VectorN) -> VectorN:
        """
        Matrix-vector product of an MxN matrix with an N-vector, giving an M-vector.

            result[i] = sum_j self[i][j] * rhs[j]
        """
        if rhs.dimension != self.cols:
            logger.debug("rejecting mult_v: (%d, %d) x (%d,)", self.rows, self.cols, rhs.dimension)
            raise DimensionMismatchError((self.cols,), (rhs.dimension,), "right operand of MatrixMN.mult_v")
        return VectorN(self.rows, self.components @ rhs.components)

    # --- comparison / conversion ---------------------------------------------

    def isclose(self, other: "MatrixMN", tol: Optional[Tolerance] = None) -> bool:
        if self.shape != other.shape:
            return False
        return resolve_tolerance(tol).allclose(self.components, other.components)

    def to_numpy(self) -> np.ndarray:
        """Writable (rows, cols) copy."""
        return self.components.copy()

    def to_dict(self) -> Dict[str, Any]:
        return {
            "rows": int(self.rows),
            "cols": int(self.cols),
            "components": self.components.tolist(),
        }

    @classmethod
    def from_dict(cls, d: Mapping[str, Any]) -> "MatrixMN":
        return cls(int(d["rows"]), int(d["cols"]), d["components"])

    # --- value semantics -----------------------------------------------------

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, MatrixMN):
            return NotImplemented
        return self.shape == other.shape and bool(np.array_equal(self.components, other.components))

    def __hash__(self) -> int:
        return hash((self.shape, tuple(self.components.ravel().tolist())))

    def __repr__(self) -> str:
        return f"MatrixMN({self.rows}, {self.cols}, {self.components.tolist()})"

    # --- operators -----------------------------------------------------------

    def __matmul__(self, other: Union["MatrixMN", VectorN]):
        if isinstance(other, MatrixMN):
            return self.mult(other)
        if isinstance(other, VectorN):
            return self.mult_v(other)
        return NotImplemented

    def __mul__(self, scalar: float) -> "MatrixMN":
        return self.scale(scalar)

    def __rmul__(self, scalar: float) -> "MatrixMN":
        return self.scale(scalar)
