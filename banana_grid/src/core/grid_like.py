"""Storage-independent contract shared by every grid backend.

A grid owns a :class:`~banana_grid.src.core.size_2d.Size` and exactly
``width * height`` cells. The shape never changes after construction; only
cell values do.

Access comes in two flavours that share the same addressing:

``get`` / ``set``
    Bounds-checked. A point outside the grid is a routine outcome and is
    reported as ``None`` / ``False``, never as an exception.

``get_unchecked`` / ``set_unchecked`` / ``grid[point]``
    For hot loops where the caller already validated the point. Passing an
    out-of-bounds point is a programming error: with ``debug_checks`` enabled
    it raises :class:`OutOfBounds`, otherwise the result is undefined.
"""

from __future__ import annotations

import copy
from abc import ABC, abstractmethod
from typing import (
    Any,
    Callable,
    Dict,
    Generic,
    Iterator,
    List,
    Optional,
    Tuple,
    TypeVar,
    Union,
)

import numpy as np

from banana_grid.src.utils import config_loader

from .axis import Axis
from .errors import OutOfBounds
from .grid_point import IVec2, as_index, to_point
from .point_iter import PointIterRowMajor
from .size_2d import Size, point_in_bounds, to_size

T = TypeVar("T")
U = TypeVar("U")

# Moore neighbourhood, row-major, centre excluded.
MOORE_OFFSETS: Tuple[Tuple[int, int], ...] = tuple(
    (dx, dy) for dy in (-1, 0, 1) for dx in (-1, 0, 1) if (dx, dy) != (0, 0)
)

RowRange = Union[range, slice, None]


class GridLike(ABC, Generic[T]):
    """Capability set every grid backend implements.

    Subclasses store their extent in ``self.size`` and provide the
    constructors, :meth:`fill`, :meth:`iter` and the raw ``_read`` /
    ``_write`` accessors. Everything else is derived here.
    """

    BACKEND: str = ""
    size: Size

    # ------------------------------------------------------------------
    # Construction
    # ------------------------------------------------------------------

    @classmethod
    @abstractmethod
    def new(cls, size: Any, value: T) -> "GridLike[T]":
        """Every cell set to ``value``."""

    @classmethod
    @abstractmethod
    def new_default(cls, size: Any, default_factory: Optional[Callable[[], T]] = None) -> "GridLike[T]":
        """Every cell set to ``default_factory()`` or the backend default."""

    @classmethod
    @abstractmethod
    def new_fn(cls, size: Any, fn: Callable[[IVec2], T]) -> "GridLike[T]":
        """Every cell set to ``fn(point)``, called once per point in row-major order."""

    @classmethod
    @abstractmethod
    def new_grid_map(cls, source: "GridLike[U]", fn: Callable[[U], T]) -> "GridLike[T]":
        """Same shape as ``source`` with each cell replaced by ``fn(cell)``."""

    @classmethod
    @abstractmethod
    def new_from_vec(cls, size: Any, values: List[T]) -> "GridLike[T]":
        """Wrap row-major ``values``; raises :class:`ShapeMismatch` on a length mismatch."""

    @classmethod
    def new_copy(cls, size: Any, value: T) -> "GridLike[T]":
        """Every cell references the same ``value`` object."""
        return cls.new(size, value)

    @classmethod
    def new_clone(cls, size: Any, value: T) -> "GridLike[T]":
        """Every cell holds its own deep copy of ``value``."""
        return cls.new_fn(size, lambda _point: copy.deepcopy(value))

    # ------------------------------------------------------------------
    # Backend hooks
    # ------------------------------------------------------------------

    @abstractmethod
    def _read(self, point: IVec2) -> T:
        ...

    @abstractmethod
    def _write(self, point: IVec2, value: T) -> None:
        ...

    @abstractmethod
    def fill(self, value: T) -> None:
        """Overwrite every cell with ``value``."""

    @abstractmethod
    def iter(self) -> Iterator[T]:
        """Cell values in row-major order."""

    # ------------------------------------------------------------------
    # Shape
    # ------------------------------------------------------------------

    @property
    def width(self) -> int:
        return self.size.width

    @property
    def height(self) -> int:
        return self.size.height

    def __len__(self) -> int:
        return self.size.count

    def is_empty(self) -> bool:
        return len(self) == 0

    # ------------------------------------------------------------------
    # Addressing
    # ------------------------------------------------------------------

    def in_bounds(self, point: Any) -> bool:
        """Tests whether a point is in bounds."""
        return point_in_bounds(self.size, point)

    def get_idx(self, point: Any) -> int:
        """Row-major linear index of ``point``, unchecked."""
        return as_index(point, self.width)

    def try_idx(self, point: Any) -> Optional[int]:
        """Linear index of ``point`` or ``None`` when out of bounds."""
        if self.in_bounds(point):
            return self.get_idx(point)
        return None

    def index_to_pt(self, idx: int) -> IVec2:
        y, x = divmod(idx, self.width)
        return IVec2(x, y)

    def try_index_to_pt(self, idx: int) -> Optional[IVec2]:
        if self.width == 0 or not 0 <= idx < len(self):
            return None
        return self.index_to_pt(idx)

    def range_to_start_end(self, span: RowRange, axis: Axis) -> Tuple[int, int]:
        """Convert ``span`` into a half-open ``(start, end)`` clamped to ``axis``.

        ``span`` may be ``None`` (the whole axis), a ``range`` or a ``slice``;
        only unit steps are accepted. A ``range`` reads like the matching
        ``slice``, so negative bounds count back from the far edge as they
        do for list slicing.
        """
        extent = axis.size(self.size)
        if span is None:
            return 0, extent
        if isinstance(span, range):
            if span.step != 1:
                raise ValueError("only unit-step ranges are supported")
            start, end, _ = slice(span.start, span.stop).indices(extent)
        elif isinstance(span, slice):
            start, end, step = span.indices(extent)
            if step != 1:
                raise ValueError("only unit-step slices are supported")
        else:
            raise TypeError(f"expected range, slice or None, got {type(span).__name__}")
        start = max(0, min(start, extent))
        end = max(start, min(end, extent))
        return start, end

    # ------------------------------------------------------------------
    # Access
    # ------------------------------------------------------------------

    def get(self, point: Any, default: Optional[T] = None) -> Optional[T]:
        """Return the cell at ``point`` or ``default`` if out of bounds."""
        p = to_point(point)
        if not self.in_bounds(p):
            return default
        return self._read(p)

    def set(self, point: Any, value: T) -> bool:
        """Store ``value`` at ``point``; returns ``False`` if out of bounds."""
        p = to_point(point)
        if not self.in_bounds(p):
            return False
        self._write(p, value)
        return True

    def _assert_in_bounds(self, point: IVec2) -> None:
        # Negative components and x past the row end would alias another
        # cell, so they are rejected even with debug checks off.
        if point.x < 0 or point.y < 0 or point.x >= self.width:
            raise OutOfBounds(point, self.size)
        if config_loader.DEBUG_CHECKS and not self.in_bounds(point):
            raise OutOfBounds(point, self.size)

    def get_unchecked(self, point: Any) -> T:
        p = to_point(point)
        self._assert_in_bounds(p)
        return self._read(p)

    def set_unchecked(self, point: Any, value: T) -> None:
        p = to_point(point)
        self._assert_in_bounds(p)
        self._write(p, value)

    def index(self, idx: int) -> T:
        """Cell at row-major position ``idx``."""
        if not 0 <= idx < len(self):
            raise IndexError(f"linear index {idx} out of range for {len(self)} cells")
        return self._read(self.index_to_pt(idx))

    def set_index(self, idx: int, value: T) -> None:
        if not 0 <= idx < len(self):
            raise IndexError(f"linear index {idx} out of range for {len(self)} cells")
        self._write(self.index_to_pt(idx), value)

    def __getitem__(self, key: Any) -> T:
        if isinstance(key, (int, np.integer)):
            return self.index(int(key))
        return self.get_unchecked(key)

    def __setitem__(self, key: Any, value: T) -> None:
        if isinstance(key, (int, np.integer)):
            self.set_index(int(key), value)
        else:
            self.set_unchecked(key, value)

    # ------------------------------------------------------------------
    # Iteration
    # ------------------------------------------------------------------

    def __iter__(self) -> Iterator[T]:
        return self.iter()

    def point_iter(self) -> PointIterRowMajor:
        return PointIterRowMajor(self.size)

    def items(self) -> Iterator[Tuple[IVec2, T]]:
        """``(point, value)`` pairs in row-major order."""
        return zip(self.point_iter(), self.iter())

    def count_neighbors(self, point: Any, value: T) -> int:
        """Count Moore neighbours of ``point`` equal to ``value``.

        Neighbours outside the grid are skipped, so a corner never counts
        more than 3.
        """
        p = to_point(point)
        neighbors = 0
        for dx, dy in MOORE_OFFSETS:
            q = IVec2(p.x + dx, p.y + dy)
            if self.in_bounds(q) and self._read(q) == value:
                neighbors += 1
        return neighbors

    def map(self, fn: Callable[[T], U]) -> "GridLike[U]":
        """Layout-preserving map into a new grid of the same backend."""
        return type(self).new_grid_map(self, fn)

    # ------------------------------------------------------------------
    # Structural encoding
    # ------------------------------------------------------------------

    def to_dict(self) -> Dict[str, Any]:
        return {
            "backend": self.BACKEND,
            "size": [self.width, self.height],
            "cells": list(self.iter()),
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "GridLike[Any]":
        return cls.new_from_vec(to_size(data["size"]), list(data["cells"]))

    def __repr__(self) -> str:
        return f"{type(self).__name__}(size=({self.width}, {self.height}))"


__all__ = ["GridLike", "MOORE_OFFSETS", "RowRange"]
