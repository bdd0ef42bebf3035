"""Row-major enumeration of every point in a size."""

from __future__ import annotations

from typing import Any, Iterator

from .grid_point import IVec2
from .size_2d import Size, to_size


class PointIterRowMajor:
    """Single-pass iterator over ``[0, width) x [0, height)``.

    Row ``y = 0`` is emitted in full before ``y = 1``; ``x`` ascends within a
    row. Build a new iterator to start over.
    """

    def __init__(self, size: Any) -> None:
        self.size: Size = to_size(size)
        self._x = 0
        self._y = 0 if self.size.width > 0 else self.size.height

    def __iter__(self) -> Iterator[IVec2]:
        return self

    def __next__(self) -> IVec2:
        if self._y >= self.size.height:
            raise StopIteration
        point = IVec2(self._x, self._y)
        self._x += 1
        if self._x >= self.size.width:
            self._x = 0
            self._y += 1
        return point

    def __len__(self) -> int:
        remaining_rows = self.size.height - self._y
        if remaining_rows <= 0:
            return 0
        return remaining_rows * self.size.width - self._x

    def __repr__(self) -> str:
        return f"PointIterRowMajor(size={tuple(self.size)}, next={(self._x, self._y)})"


__all__ = ["PointIterRowMajor"]
