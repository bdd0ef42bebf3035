"""Dense 2-D grid backend on top of ``numpy``.

:class:`Grid2D` keeps its cells in an array of shape ``(height, width)``
addressed as ``data[y, x]``. Rows and columns are native array views with
the same cost in both directions, and :meth:`Grid2D.slice` returns a true
2-D window over a sub-rectangle. Numeric and boolean cells get a native
dtype when every value reads back unchanged from it; anything else is
stored in an ``object`` array. A later write the current dtype cannot hold
exactly converts the storage to ``object`` first, so views taken before
that point keep looking at the old array.
"""

from __future__ import annotations

from typing import Any, Callable, Iterator, List, Optional, Sequence, Tuple

import numpy as np

from banana_grid.src.utils.logger import get_logger

from .errors import ShapeMismatch
from .grid_like import GridLike, T, U
from .grid_point import IVec2, to_point
from .point_iter import PointIterRowMajor
from .size_2d import Size, to_size

logger = get_logger(__name__)

_NATIVE_SCALARS = (bool, int, float, complex, np.bool_, np.number)


def _same_cells(stored: Sequence[Any], values: Sequence[Any]) -> bool:
    """True when ``stored`` reads back exactly as ``values`` (NaN matches NaN)."""
    for a, b in zip(stored, values):
        b = _unwrap(b)
        if type(a) is not type(b):
            return False
        if a != b and not (a != a and b != b):
            return False
    return True


def _native_dtype(values: Sequence[Any]) -> np.dtype:
    """Return a numpy dtype that holds ``values`` without loss, or ``object``."""
    if values and all(isinstance(v, _NATIVE_SCALARS) for v in values):
        try:
            arr = np.asarray(values)
        except (OverflowError, ValueError):
            return np.dtype(object)
        if arr.dtype != object and _same_cells(arr.tolist(), values):
            return arr.dtype
    return np.dtype(object)


def _fits(dtype: np.dtype, value: Any) -> bool:
    """Whether ``value`` survives a round trip through ``dtype``."""
    if dtype == object:
        return True
    if not isinstance(value, _NATIVE_SCALARS):
        return False
    try:
        stored = np.array(value, dtype=dtype).item()
    except (OverflowError, ValueError, TypeError):
        return False
    return _same_cells([stored], [value])


def _array_shape(size: Size) -> Tuple[int, int]:
    return (size.height, size.width)


def _build_array(values: List[Any], size: Size, dtype: Any = None) -> np.ndarray:
    """Pack row-major ``values`` into a ``(height, width)`` array."""
    if dtype is None:
        dtype = _native_dtype(values)
    dtype = np.dtype(dtype)
    if dtype == object:
        flat = np.empty(len(values), dtype=object)
        for i, v in enumerate(values):
            flat[i] = v
    else:
        flat = np.asarray(values, dtype=dtype)
    shape = _array_shape(size)
    if flat.ndim != 1 or flat.size != size.count:
        logger.error("computed storage %s does not match grid shape %s", flat.shape, shape)
        raise ShapeMismatch(f"cannot store {flat.shape} values in a grid of shape {shape}")
    return flat.reshape(shape)


def _unwrap(value: Any) -> Any:
    return value.item() if isinstance(value, np.generic) else value


class Grid2D(GridLike[T]):
    """Grid backed by a 2-D ``numpy`` array."""

    BACKEND = "dense"

    def __init__(self, size: Any, data: np.ndarray) -> None:
        self.size: Size = to_size(size)
        expected = _array_shape(self.size)
        if data.shape != expected:
            logger.error("dense grid of size %s given array of shape %s", tuple(self.size), data.shape)
            raise ShapeMismatch(f"array shape {data.shape} does not match grid shape {expected}")
        self.data = data

    # ------------------------------------------------------------------
    # Construction
    # ------------------------------------------------------------------

    @classmethod
    def new(cls, size: Any, value: T, dtype: Any = None) -> "Grid2D[T]":
        s = to_size(size)
        if dtype is None:
            dtype = _native_dtype([value])
        data = np.empty(_array_shape(s), dtype=dtype)
        data.fill(value)
        return cls(s, data)

    @classmethod
    def new_default(
        cls,
        size: Any,
        default_factory: Optional[Callable[[], T]] = None,
        dtype: Any = None,
    ) -> "Grid2D[T]":
        """Zero-filled grid, or one cell per ``default_factory()`` call."""
        s = to_size(size)
        if default_factory is None:
            return cls(s, np.zeros(_array_shape(s), dtype=np.int64 if dtype is None else dtype))
        return cls(s, _build_array([default_factory() for _ in range(s.count)], s, dtype))

    @classmethod
    def new_fn(cls, size: Any, fn: Callable[[IVec2], T], dtype: Any = None) -> "Grid2D[T]":
        s = to_size(size)
        return cls(s, _build_array([fn(p) for p in PointIterRowMajor(s)], s, dtype))

    @classmethod
    def new_grid_map(cls, source: GridLike[U], fn: Callable[[U], T], dtype: Any = None) -> "Grid2D[T]":
        return cls(source.size, _build_array([fn(v) for v in source.iter()], source.size, dtype))

    @classmethod
    def new_grid_map_ref(cls, source: "Grid2D[U]", fn: Callable[[U], T]) -> "Grid2D[T]":
        """Map ``source`` element-wise over its native 2-D array.

        The result keeps the exact ``(x, y)`` addressing of ``source``.
        """
        mapped = np.frompyfunc(fn, 1, 1)(source.data)
        if not isinstance(mapped, np.ndarray) or mapped.shape != source.data.shape:
            logger.error("map over %s produced %s", source.data.shape, np.shape(mapped))
            raise ShapeMismatch(
                f"mapped storage {np.shape(mapped)} does not match source {source.data.shape}"
            )
        dtype = _native_dtype(mapped.ravel().tolist())
        return cls(source.size, mapped if dtype == object else mapped.astype(dtype))

    @classmethod
    def new_from_vec(cls, size: Any, values: List[T], dtype: Any = None) -> "Grid2D[T]":
        s = to_size(size)
        return cls(s, _build_array(list(values), s, dtype))

    # ------------------------------------------------------------------
    # Backend hooks
    # ------------------------------------------------------------------

    def _read(self, point: IVec2) -> T:
        return _unwrap(self.data[point.y, point.x])

    def _widen(self, value: Any) -> None:
        if not _fits(self.data.dtype, value):
            logger.debug("widening %s grid to object for %r", self.data.dtype, value)
            self.data = self.data.astype(object)

    def _write(self, point: IVec2, value: T) -> None:
        self._widen(value)
        self.data[point.y, point.x] = value

    def fill(self, value: T) -> None:
        self._widen(value)
        self.data.fill(value)

    def iter(self) -> Iterator[T]:
        return iter(self.data.ravel().tolist())

    def count_neighbors(self, point: Any, value: T) -> int:
        if self.data.dtype == object or not isinstance(value, _NATIVE_SCALARS):
            return super().count_neighbors(point, value)
        p = to_point(point)
        x0, x1 = max(p.x - 1, 0), min(p.x + 2, self.width)
        y0, y1 = max(p.y - 1, 0), min(p.y + 2, self.height)
        if x0 >= x1 or y0 >= y1:
            return 0
        hits = int(np.count_nonzero(self.data[y0:y1, x0:x1] == value))
        if self.in_bounds(p) and self.data[p.y, p.x] == value:
            hits -= 1
        return hits

    # ------------------------------------------------------------------
    # Rows, columns and views
    # ------------------------------------------------------------------

    def raw(self) -> np.ndarray:
        return self.data

    def rows(self) -> Iterator[np.ndarray]:
        return iter(self.data)

    def cols(self) -> Iterator[np.ndarray]:
        return iter(self.data.T)

    def row(self, y: int) -> np.ndarray:
        if not 0 <= y < self.height:
            raise IndexError(f"row {y} out of range for height {self.height}")
        return self.data[y]

    def column(self, x: int) -> np.ndarray:
        if not 0 <= x < self.width:
            raise IndexError(f"column {x} out of range for width {self.width}")
        return self.data[:, x]

    def slice(self, start: Any, end: Any) -> np.ndarray:
        """Read-only view over ``[start.x, end.x) x [start.y, end.y)``.

        Negative coordinates count back from the right/bottom edge, so
        ``slice((1, 1), (-1, -1))`` drops a one-cell border.
        """
        s = to_point(start)
        e = to_point(end)
        view = self.data[s.y:e.y, s.x:e.x]
        view.flags.writeable = False
        return view

    # ------------------------------------------------------------------
    # Mapping
    # ------------------------------------------------------------------

    def map(self, fn: Callable[[T], U]) -> "Grid2D[U]":
        return Grid2D.new_grid_map_ref(self, fn)

    def map_inplace(self, fn: Callable[[T], T]) -> None:
        """Replace every cell with ``fn(cell)``; the dtype follows the results."""
        mapped = np.frompyfunc(fn, 1, 1)(self.data)
        dtype = _native_dtype(mapped.ravel().tolist())
        self.data = mapped if dtype == object else mapped.astype(dtype)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Grid2D):
            return NotImplemented
        return self.size == other.size and bool(np.array_equal(self.data, other.data))


__all__ = ["Grid2D"]
