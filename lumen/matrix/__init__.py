from .matrix2 import Matrix2x2
from .matrix3 import Matrix3x3
from .matrixmn import MatrixMN
