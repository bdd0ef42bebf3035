"""Flat row-major grid backend."""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass, field
from typing import Any, Callable, Iterator, List, Optional

from banana_grid.src.utils.logger import get_logger

from .axis import Axis
from .errors import ShapeMismatch
from .grid_like import GridLike, RowRange, T, U
from .grid_point import IVec2
from .point_iter import PointIterRowMajor
from .size_2d import Size, to_size

logger = get_logger(__name__)


class CellView(Sequence):
    """Fixed-length, writable window over a slice of a grid's backing list.

    Rows are contiguous (``step == 1``); columns stride by the grid width.
    Writes go straight to the grid.
    """

    __slots__ = ("_cells", "_start", "_step", "_len")

    def __init__(self, cells: List[Any], start: int, step: int, length: int) -> None:
        self._cells = cells
        self._start = start
        self._step = step
        self._len = length

    def __len__(self) -> int:
        return self._len

    def _offset(self, i: int) -> int:
        if i < 0:
            i += self._len
        if not 0 <= i < self._len:
            raise IndexError("cell view index out of range")
        return self._start + i * self._step

    def __getitem__(self, i):
        if isinstance(i, slice):
            return [self[j] for j in range(*i.indices(self._len))]
        return self._cells[self._offset(i)]

    def __setitem__(self, i: int, value: Any) -> None:
        self._cells[self._offset(i)] = value

    def __iter__(self) -> Iterator[Any]:
        cells = self._cells
        for k in range(self._len):
            yield cells[self._start + k * self._step]

    def fill(self, value: Any) -> None:
        for k in range(self._len):
            self._cells[self._start + k * self._step] = value

    def __eq__(self, other: object) -> bool:
        if isinstance(other, Sequence) and not isinstance(other, str):
            return list(self) == list(other)
        return NotImplemented

    def __repr__(self) -> str:
        return f"CellView({list(self)!r})"


@dataclass
class Grid(GridLike[T]):
    """Grid stored as one row-major list addressed by ``y * width + x``.

    Row access is a contiguous window; column access strides by ``width``.
    Prefer this backend for whole-grid iteration and row-wise work.
    """

    BACKEND = "flat"

    size: Size
    cells: List[T] = field(repr=False)

    def __post_init__(self) -> None:
        self.size = to_size(self.size)
        if len(self.cells) != self.size.count:
            logger.error(
                "flat grid of size %s given %d cells", tuple(self.size), len(self.cells)
            )
            raise ShapeMismatch(
                f"expected {self.size.count} cells for size {tuple(self.size)}, got {len(self.cells)}"
            )

    # Construction -------------------------------------------------------

    @classmethod
    def new(cls, size: Any, value: T) -> "Grid[T]":
        s = to_size(size)
        return cls(s, [value] * s.count)

    @classmethod
    def new_default(cls, size: Any, default_factory: Optional[Callable[[], T]] = None) -> "Grid[T]":
        s = to_size(size)
        if default_factory is None:
            return cls(s, [None] * s.count)
        return cls(s, [default_factory() for _ in range(s.count)])

    @classmethod
    def new_fn(cls, size: Any, fn: Callable[[IVec2], T]) -> "Grid[T]":
        s = to_size(size)
        return cls(s, [fn(p) for p in PointIterRowMajor(s)])

    @classmethod
    def new_grid_map(cls, source: GridLike[U], fn: Callable[[U], T]) -> "Grid[T]":
        return cls(source.size, [fn(v) for v in source.iter()])

    @classmethod
    def new_from_vec(cls, size: Any, values: List[T]) -> "Grid[T]":
        return cls(to_size(size), list(values))

    # Backend hooks ------------------------------------------------------

    def _read(self, point: IVec2) -> T:
        return self.cells[point.y * self.size.width + point.x]

    def _write(self, point: IVec2, value: T) -> None:
        self.cells[point.y * self.size.width + point.x] = value

    def fill(self, value: T) -> None:
        self.cells[:] = [value] * len(self.cells)

    def iter(self) -> Iterator[T]:
        return iter(self.cells)

    def index(self, idx: int) -> T:
        if not 0 <= idx < len(self.cells):
            raise IndexError(f"linear index {idx} out of range for {len(self.cells)} cells")
        return self.cells[idx]

    # Rows and columns ---------------------------------------------------

    def _row(self, y: int) -> CellView:
        w = self.size.width
        return CellView(self.cells, y * w, 1, w)

    def _col(self, x: int) -> CellView:
        return CellView(self.cells, x, self.size.width, self.size.height)

    def rows(self) -> Iterator[CellView]:
        """Every row, top to bottom."""
        return self.iter_rows(None)

    def cols(self) -> Iterator[CellView]:
        """Every column, left to right."""
        return self.iter_cols(None)

    def iter_rows(self, rows: RowRange = None) -> Iterator[CellView]:
        """Iterate over a range of rows.

        ``rows`` is a ``range`` or ``slice`` of row indices (``None`` for all).
        The range is clamped to the grid, so a span ending on the last row
        never reaches past the backing list.
        """
        start, end = self.range_to_start_end(rows, Axis.Y)
        return (self._row(y) for y in range(start, end))

    def iter_cols(self, cols: RowRange = None) -> Iterator[CellView]:
        start, end = self.range_to_start_end(cols, Axis.X)
        return (self._col(x) for x in range(start, end))

    def row(self, y: int) -> CellView:
        if not 0 <= y < self.size.height:
            raise IndexError(f"row {y} out of range for height {self.size.height}")
        return self._row(y)

    def iter_column(self, x: int) -> CellView:
        """A single column, top to bottom."""
        if not 0 <= x < self.size.width:
            raise IndexError(f"column {x} out of range for width {self.size.width}")
        return self._col(x)


__all__ = ["Grid", "CellView"]
