"""Point types and the adapters that turn point-like values into them.

Any value exposing integer ``x``/``y`` can address a grid: the dedicated
:class:`IVec2`, :class:`UVec2` and :class:`Vec2` tuples, plain 2-tuples and
2-lists, length-2 ``numpy`` arrays, or any object with ``x`` and ``y``
attributes. :func:`to_point` normalises all of them to :class:`IVec2`; every
other helper in this module is derived from that single conversion.
"""

from __future__ import annotations

from functools import singledispatch
from typing import Any, NamedTuple, Protocol, Tuple, runtime_checkable

import numpy as np


@runtime_checkable
class GridPoint(Protocol):
    """Anything with integer ``x`` and ``y`` coordinates."""

    x: int
    y: int


class IVec2(NamedTuple):
    """Signed integer grid coordinate ``(x, y)``."""

    x: int
    y: int

    def __add__(self, other: Any) -> "IVec2":  # type: ignore[override]
        o = to_point(other)
        return IVec2(self.x + o.x, self.y + o.y)

    def __sub__(self, other: Any) -> "IVec2":
        o = to_point(other)
        return IVec2(self.x - o.x, self.y - o.y)

    def __neg__(self) -> "IVec2":
        return IVec2(-self.x, -self.y)

    def as_index(self, grid_width: int) -> int:
        return as_index(self, grid_width)

    def is_valid(self, size: Any) -> bool:
        return is_valid(self, size)

    def normalize(self, size: Any) -> "IVec2":
        return normalize(self, size)

    def as_uvec2(self) -> "UVec2":
        return as_uvec2(self)

    def as_vec2(self) -> "Vec2":
        return as_vec2(self)


class UVec2(NamedTuple):
    """Unsigned integer pair, used for sizes and non-negative offsets."""

    x: int
    y: int


class Vec2(NamedTuple):
    """Float pair, e.g. for rendering positions."""

    x: float
    y: float


# ---------------------------------------------------------------------------
# Adapters
# ---------------------------------------------------------------------------

@singledispatch
def to_point(obj: Any) -> IVec2:
    """Return ``obj`` as an :class:`IVec2`.

    Raises ``TypeError`` for values that are not point-like.
    """
    if isinstance(obj, GridPoint):
        return IVec2(int(obj.x), int(obj.y))
    raise TypeError(f"{type(obj).__name__} is not a grid point")


@to_point.register
def _(obj: IVec2) -> IVec2:
    return obj


@to_point.register
def _(obj: UVec2) -> IVec2:
    return IVec2(int(obj.x), int(obj.y))


@to_point.register
def _(obj: Vec2) -> IVec2:
    return IVec2(int(obj.x), int(obj.y))


@to_point.register(tuple)
@to_point.register(list)
def _(obj) -> IVec2:
    if len(obj) != 2:
        raise TypeError(f"grid point needs 2 components, got {len(obj)}")
    return IVec2(int(obj[0]), int(obj[1]))


@to_point.register
def _(obj: np.ndarray) -> IVec2:
    if obj.shape != (2,):
        raise TypeError(f"grid point array must have shape (2,), got {obj.shape}")
    return IVec2(int(obj[0]), int(obj[1]))


# ---------------------------------------------------------------------------
# Conversions
# ---------------------------------------------------------------------------

def as_ivec2(point: Any) -> IVec2:
    return to_point(point)


def as_uvec2(point: Any) -> UVec2:
    """Convert to :class:`UVec2`; negative components raise ``ValueError``."""
    p = to_point(point)
    if p.x < 0 or p.y < 0:
        raise ValueError(f"cannot convert {tuple(p)} to an unsigned vector")
    return UVec2(p.x, p.y)


def as_vec2(point: Any) -> Vec2:
    p = to_point(point)
    return Vec2(float(p.x), float(p.y))


def as_array(point: Any) -> np.ndarray:
    """Return ``[x, y]`` as an ``int32`` array."""
    p = to_point(point)
    return np.array([p.x, p.y], dtype=np.int32)


def as_tuple(point: Any) -> Tuple[int, int]:
    p = to_point(point)
    return (p.x, p.y)


def as_uarray(point: Any) -> np.ndarray:
    """Return ``[x, y]`` as an index array; negative components raise ``ValueError``."""
    u = as_uvec2(point)
    return np.array([u.x, u.y], dtype=np.intp)


def as_index(point: Any, grid_width: int) -> int:
    """Row-major linear index ``y * grid_width + x``.

    No bounds check is made; callers validate with :func:`is_valid` first
    when it matters.
    """
    p = to_point(point)
    return p.y * grid_width + p.x


def is_valid(point: Any, size: Any) -> bool:
    """Return ``True`` if ``point`` lies inside ``size``."""
    from .size_2d import point_in_bounds

    return point_in_bounds(size, point)


def _normalize_part(value: int, size: int) -> int:
    return value % size


def normalize(point: Any, size: Any) -> IVec2:
    """Wrap ``point`` into ``size`` on both axes (toroidal addressing)."""
    from .size_2d import to_size

    p = to_point(point)
    s = to_size(size)
    return IVec2(_normalize_part(p.x, s.width), _normalize_part(p.y, s.height))


__all__ = [
    "GridPoint",
    "IVec2",
    "UVec2",
    "Vec2",
    "to_point",
    "as_ivec2",
    "as_uvec2",
    "as_vec2",
    "as_array",
    "as_tuple",
    "as_uarray",
    "as_index",
    "is_valid",
    "normalize",
]
