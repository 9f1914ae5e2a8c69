from __future__ import annotations

import numpy as np
from numpy.typing import NDArray, ArrayLike

Components = NDArray[np.floating]  # intended shape (D,)
Grid = NDArray[np.floating]        # intended shape (M, N)

__all__ = [
    "ArrayLike",
    "Components", "Grid",
]
