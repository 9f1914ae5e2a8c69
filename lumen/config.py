from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Mapping

import numpy as np


@dataclass(frozen=True, slots=True)
class Tolerance:
    """
    Tolerances used by the approximate comparisons (`isclose`) of every lumen type.

    Two components a, b are considered close when

        |a - b| <= atol + rtol * |b|

    which is the numpy `isclose` rule.

    Parameters
    ----------
    rtol
        Relative tolerance, >= 0.
    atol
        Absolute tolerance, >= 0. Needed when comparing against exact zeros,
        e.g. the result of rotating a unit axis by pi/2.
    """
    rtol: float = 1e-9
    atol: float = 1e-12

    def __post_init__(self) -> None:
        object.__setattr__(self, "rtol", float(self.rtol))
        object.__setattr__(self, "atol", float(self.atol))
        self.validate()

    def validate(self) -> None:
        for name, value in (("rtol", self.rtol), ("atol", self.atol)):
            if not np.isfinite(value):
                raise ValueError(f"tolerance.{name} must be finite, got {value}.")
            if value < 0.0:
                raise ValueError(f"tolerance.{name} must be >= 0, got {value}.")

    def allclose(self, a, b) -> bool:
        """Return True when all components of `a` and `b` are close (NaN never matches)."""
        a = np.asarray(a, dtype=float)
        b = np.asarray(b, dtype=float)
        if a.shape != b.shape:
            return False
        return bool(np.allclose(a, b, rtol=self.rtol, atol=self.atol))

    def to_dict(self) -> dict[str, Any]:
        return {"rtol": float(self.rtol), "atol": float(self.atol)}

    @classmethod
    def from_dict(cls, d: Mapping[str, Any]) -> "Tolerance":
        return cls(
            rtol=float(d.get("rtol", 1e-9)),
            atol=float(d.get("atol", 1e-12)),
        )


DEFAULT_TOLERANCE: Tolerance = Tolerance()


def resolve_tolerance(tol: Tolerance | None) -> Tolerance:
    """Return `tol`, or the library default when it is None."""
    return DEFAULT_TOLERANCE if tol is None else tol
