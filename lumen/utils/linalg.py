import logging

import numpy as np

from lumen.errors import DimensionMismatchError
from lumen.utils.types import Components, Grid

logger = logging.getLogger(__name__)

############################
# SHAPE-CHECKED COERCION
############################

def check_dimension(dimension, name="dimension") -> int:
    """Return `dimension` as an int, rejecting bools, non-integers and negatives."""
    if isinstance(dimension, bool) or not isinstance(dimension, (int, np.integer)):
        raise ValueError(f"{name} must be an integer, got {dimension!r}.")
    if dimension < 0:
        raise ValueError(f"{name} must be >= 0, got {dimension}.")
    return int(dimension)

def as_components(values, dimension: int, name="vector") -> Components:
    """
    Copy `values` into a read-only float array of shape (dimension,).

    Raises DimensionMismatchError if the source does not hold exactly
    `dimension` scalars. Nothing is truncated or zero-padded.
    """
    try:
        v = np.array(values, dtype=float)
    except ValueError as e:
        logger.debug("rejecting %s: irregular source, expected (%d,)", name, dimension)
        raise DimensionMismatchError((dimension,), None, name) from e
    if v.shape != (dimension,):
        logger.debug("rejecting %s: shape %s, expected (%d,)", name, v.shape, dimension)
        raise DimensionMismatchError((dimension,), v.shape, name)
    v.setflags(write=False)
    return v

def as_grid(values, rows: int, cols: int, name="matrix") -> Grid:
    """
    Copy `values` element-wise into a read-only float array of shape (rows, cols).

    Jagged sources (rows of unequal length) are rejected like any other
    mis-shaped grid.
    """
    try:
        m = np.array(values, dtype=float)
    except ValueError as e:
        logger.debug("rejecting %s: jagged source, expected (%d, %d)", name, rows, cols)
        raise DimensionMismatchError((rows, cols), None, name) from e
    # [] carries no column count
    if rows == 0 and m.shape == (0,):
        m = m.reshape(0, cols)
    if m.shape != (rows, cols):
        logger.debug("rejecting %s: shape %s, expected (%d, %d)", name, m.shape, rows, cols)
        raise DimensionMismatchError((rows, cols), m.shape, name)
    m.setflags(write=False)
    return m

def require_same(expected: int, got: int, name: str) -> None:
    """Raise DimensionMismatchError unless the two operand dimensions agree."""
    if expected != got:
        logger.debug("rejecting %s: dimension %d, expected %d", name, got, expected)
        raise DimensionMismatchError((expected,), (got,), name)

############################
# UNGUARDED NUMERICS
############################

def quotient(num: float, den: float) -> float:
    """
    IEEE division: x/0 gives +-inf and 0/0 gives NaN instead of raising.
    """
    with np.errstate(divide="ignore", invalid="ignore"):
        return float(np.float64(num) / np.float64(den))

def arccos(x: float) -> float:
    """
    Inverse cosine in radians. Arguments outside [-1, 1] (e.g. 1 + 2**-52 from
    rounding) and NaN give NaN instead of raising.
    """
    with np.errstate(invalid="ignore"):
        return float(np.arccos(np.float64(x)))
