"""Exceptions raised by the grid core."""

from __future__ import annotations


class GridError(Exception):
    """Base class for all grid errors."""


class InvalidDimension(GridError, ValueError):
    """A size dimension is negative."""


class DimensionTooLarge(InvalidDimension):
    """A size dimension does not fit the signed 32-bit coordinate space."""

    def __init__(self, axis: str, value: int, limit: int) -> None:
        self.axis = axis
        self.value = value
        self.limit = limit
        super().__init__(f"{axis} {value} exceeds the maximum dimension {limit}")


class OutOfBounds(GridError, IndexError):
    """Unchecked access outside the grid. Always a caller bug."""

    def __init__(self, point, size) -> None:
        self.point = point
        self.size = size
        super().__init__(f"point {tuple(point)} out of bounds for size {tuple(size)}")


class ShapeMismatch(GridError, ValueError):
    """Backing storage shape disagrees with the declared grid size."""


__all__ = [
    "GridError",
    "InvalidDimension",
    "DimensionTooLarge",
    "OutOfBounds",
    "ShapeMismatch",
]
