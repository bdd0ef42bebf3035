"""Grid extents and the adapters that turn size-like values into them."""

from __future__ import annotations

from dataclasses import dataclass
from functools import singledispatch
from typing import TYPE_CHECKING, Any, Iterator, Protocol, Tuple, runtime_checkable

import numpy as np

from .errors import DimensionTooLarge, InvalidDimension
from .grid_point import IVec2, UVec2, Vec2, to_point

if TYPE_CHECKING:
    from .point_iter import PointIterRowMajor

# Every coordinate inside a size must fit a signed 32-bit integer.
MAX_DIMENSION = 2**31 - 1


@runtime_checkable
class Size2d(Protocol):
    """Anything with integer ``width`` and ``height``."""

    width: int
    height: int


def _check_dimension(axis: str, value: Any) -> int:
    if isinstance(value, (bool, np.bool_)) or not isinstance(value, (int, np.integer)):
        raise InvalidDimension(f"{axis} must be an integer, got {value!r}")
    value = int(value)
    if value < 0:
        raise InvalidDimension(f"{axis} must be non-negative, got {value}")
    if value > MAX_DIMENSION:
        raise DimensionTooLarge(axis, value, MAX_DIMENSION)
    return value


@dataclass(frozen=True)
class Size:
    """Extent of a rectangle anchored at the origin.

    Constructing a ``Size`` directly validates both dimensions and raises
    :class:`DimensionTooLarge` for values that would produce unaddressable
    cells. :meth:`try_new` is the same fallible path under an explicit name;
    :meth:`new` is for callers that validated upstream and treats a bad size
    as a fatal error.
    """

    width: int
    height: int

    def __post_init__(self) -> None:
        object.__setattr__(self, "width", _check_dimension("width", self.width))
        object.__setattr__(self, "height", _check_dimension("height", self.height))

    @classmethod
    def try_new(cls, width: int, height: int) -> "Size":
        return cls(width, height)

    @classmethod
    def new(cls, width: int, height: int) -> "Size":
        try:
            return cls.try_new(width, height)
        except InvalidDimension as exc:
            raise RuntimeError(f"invalid grid size ({width}, {height})") from exc

    def __iter__(self) -> Iterator[int]:
        yield self.width
        yield self.height

    @property
    def count(self) -> int:
        return self.width * self.height

    def point_in_bounds(self, point: Any) -> bool:
        return point_in_bounds(self, point)

    def iter(self) -> "PointIterRowMajor":
        return coord_iter_row_major(self)


# ---------------------------------------------------------------------------
# Adapters
# ---------------------------------------------------------------------------

@singledispatch
def to_size(obj: Any) -> Size:
    """Return ``obj`` as a validated :class:`Size`."""
    if isinstance(obj, Size2d):
        return Size(obj.width, obj.height)
    raise TypeError(f"{type(obj).__name__} is not a grid size")


@to_size.register
def _(obj: Size) -> Size:
    return obj


@to_size.register
def _(obj: IVec2) -> Size:
    return Size(obj.x, obj.y)


@to_size.register
def _(obj: UVec2) -> Size:
    return Size(obj.x, obj.y)


@to_size.register
def _(obj: Vec2) -> Size:
    return Size(int(obj.x), int(obj.y))


@to_size.register(tuple)
@to_size.register(list)
def _(obj) -> Size:
    if len(obj) != 2:
        raise TypeError(f"grid size needs 2 components, got {len(obj)}")
    return Size(obj[0], obj[1])


@to_size.register
def _(obj: np.ndarray) -> Size:
    if obj.shape != (2,):
        raise TypeError(f"grid size array must have shape (2,), got {obj.shape}")
    return Size(obj[0], obj[1])


# ---------------------------------------------------------------------------
# Size helpers
# ---------------------------------------------------------------------------

def count(size: Any) -> int:
    """Number of cells, ``width * height``."""
    return to_size(size).count


def point_in_bounds(size: Any, point: Any) -> bool:
    """Return ``True`` if ``0 <= x < width`` and ``0 <= y < height``."""
    s = to_size(size)
    p = to_point(point)
    return 0 <= p.x < s.width and 0 <= p.y < s.height


def intersects(size: Any, other: Any) -> bool:
    """Two origin-anchored extents overlap iff neither is degenerate."""
    a = to_size(size)
    b = to_size(other)
    return a.width > 0 and a.height > 0 and b.width > 0 and b.height > 0


def as_ivec2(size: Any) -> IVec2:
    s = to_size(size)
    return IVec2(s.width, s.height)


def as_uvec2(size: Any) -> UVec2:
    s = to_size(size)
    return UVec2(s.width, s.height)


def as_vec2(size: Any) -> Vec2:
    s = to_size(size)
    return Vec2(float(s.width), float(s.height))


def as_array(size: Any) -> np.ndarray:
    s = to_size(size)
    return np.array([s.width, s.height], dtype=np.int32)


def as_tuple(size: Any) -> Tuple[int, int]:
    s = to_size(size)
    return (s.width, s.height)


def as_uarray(size: Any) -> np.ndarray:
    s = to_size(size)
    return np.array([s.width, s.height], dtype=np.intp)


def coord_iter_row_major(size: Any) -> "PointIterRowMajor":
    """Return a fresh row-major iterator over every point of ``size``."""
    from .point_iter import PointIterRowMajor

    return PointIterRowMajor(size)


__all__ = [
    "MAX_DIMENSION",
    "Size2d",
    "Size",
    "to_size",
    "count",
    "point_in_bounds",
    "intersects",
    "as_ivec2",
    "as_uvec2",
    "as_vec2",
    "as_array",
    "as_tuple",
    "as_uarray",
    "coord_iter_row_major",
]
