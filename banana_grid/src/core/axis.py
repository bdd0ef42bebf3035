"""Axis selector used to build coordinates and sizes along one dimension."""

from __future__ import annotations

from enum import Enum
from typing import Any

from .grid_point import IVec2
from .size_2d import Size, to_size


class Axis(Enum):
    X = "X"
    Y = "Y"

    def __str__(self) -> str:  # pragma: no cover - trivial
        return self.value

    def other(self) -> "Axis":
        return Axis.Y if self is Axis.X else Axis.X

    def new_coord(self, this_axis: int, other_axis: int) -> IVec2:
        """Return a point with ``this_axis`` on this axis and ``other_axis`` on the other."""
        if self is Axis.X:
            return IVec2(this_axis, other_axis)
        return IVec2(other_axis, this_axis)

    def try_new_size(self, this_axis: int, other_axis: int) -> Size:
        """Fallible size constructor; raises :class:`DimensionTooLarge`."""
        if self is Axis.X:
            return Size.try_new(this_axis, other_axis)
        return Size.try_new(other_axis, this_axis)

    def new_size(self, this_axis: int, other_axis: int) -> Size:
        if self is Axis.X:
            return Size.new(this_axis, other_axis)
        return Size.new(other_axis, this_axis)

    def size(self, size: Any) -> int:
        """Return the extent of ``size`` along this axis."""
        s = to_size(size)
        return s.width if self is Axis.X else s.height


__all__ = ["Axis"]
