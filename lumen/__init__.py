import logging as _logging

from .errors import DimensionMismatchError
from .config import Tolerance, DEFAULT_TOLERANCE
from .utils.units import deg2rad, rad2deg
from .vector import (
    Vector2,
    Vector3,
    Vector3Pos,
    VectorN,
)
from .matrix import (
    Matrix2x2,
    Matrix3x3,
    MatrixMN,
)

__version__ = "0.1.0"

# library logging: silent unless the application configures handlers
_logging.getLogger(__name__).addHandler(_logging.NullHandler())

__all__ = [
    "DimensionMismatchError",
    "Tolerance", "DEFAULT_TOLERANCE",
    "deg2rad", "rad2deg",
    "Vector2", "Vector3", "Vector3Pos", "VectorN",
    "Matrix2x2", "Matrix3x3", "MatrixMN",
]
