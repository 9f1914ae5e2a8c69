from __future__ import annotations

from typing import Optional, Tuple


class DimensionMismatchError(ValueError):
    """
    Raised when a value does not have the dimension its container declares.

    Covers generic vector/matrix construction from a source of the wrong
    length or shape, and binary operations between operands whose dimensions
    are incompatible (e.g. adding a 4-vector to a 5-vector, multiplying a
    2x3 matrix by a 2x2 one).

    Parameters
    ----------
    expected : tuple of int
        Shape required by the receiving value or operation.
    got : tuple of int or None
        Shape actually supplied. None when the source has no regular shape
        (a jagged grid).
    what : str
        Short description of the offending operand, used in the message.
    """

    def __init__(
        self,
        expected: Tuple[int, ...],
        got: Optional[Tuple[int, ...]],
        what: str = "value",
    ) -> None:
        self.expected = tuple(expected)
        self.got = None if got is None else tuple(got)
        if self.got is None:
            msg = f"{what} is not a regular grid, expected shape {self.expected}."
        else:
            msg = f"{what} has shape {self.got}, expected {self.expected}."
        super().__init__(msg)
