import numpy as np


def deg2rad(angle: float) -> float:
    """Degrees to radians, for the `rotation*` / `rotate_*` angle arguments."""
    return float(np.deg2rad(angle))


def rad2deg(angle: float) -> float:
    """Radians to degrees, e.g. for reporting `Vector*.angle` results."""
    return float(np.rad2deg(angle))
