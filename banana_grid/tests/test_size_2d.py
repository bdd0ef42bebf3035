from types import SimpleNamespace

import numpy as np
import pytest

from banana_grid.src.core import (
    MAX_DIMENSION,
    DimensionTooLarge,
    InvalidDimension,
    IVec2,
    Size,
    Size2d,
    UVec2,
    to_size,
)
from banana_grid.src.core import size_2d
from banana_grid.src.core.grid_point import is_valid


def test_count():
    assert Size(3, 4).count == 12
    assert size_2d.count((0, 9)) == 0
    assert size_2d.count([MAX_DIMENSION, MAX_DIMENSION]) == MAX_DIMENSION * MAX_DIMENSION


def test_fallible_constructor():
    with pytest.raises(DimensionTooLarge) as exc:
        Size.try_new(2**31, 1)
    assert exc.value.axis == "width"
    assert isinstance(exc.value, ValueError)
    with pytest.raises(DimensionTooLarge):
        Size(1, 2**31)
    assert Size.try_new(MAX_DIMENSION, 1).width == 2**31 - 1


def test_negative_dimension():
    with pytest.raises(InvalidDimension):
        Size(-1, 2)


def test_dimensions_must_be_integers():
    with pytest.raises(InvalidDimension):
        Size(2.5, 3)
    with pytest.raises(InvalidDimension):
        Size.try_new(3, 1.5)
    with pytest.raises(InvalidDimension):
        Size(True, 2)
    with pytest.raises(InvalidDimension):
        to_size((2.5, 3))
    with pytest.raises(RuntimeError):
        Size.new(2.5, 3)
    size = Size(np.int64(3), 2)
    assert type(size.width) is int
    assert size.count == 6


def test_panicking_constructor():
    assert Size.new(2, 3) == Size(2, 3)
    with pytest.raises(RuntimeError) as exc:
        Size.new(2**31, 1)
    assert isinstance(exc.value.__cause__, DimensionTooLarge)


@pytest.mark.parametrize(
    "raw",
    [(3, 4), [3, 4], np.array([3, 4]), UVec2(3, 4), IVec2(3, 4), Size(3, 4), SimpleNamespace(width=3, height=4)],
)
def test_to_size_adapters(raw):
    assert to_size(raw) == Size(3, 4)


def test_to_size_rejects_non_sizes():
    with pytest.raises(TypeError):
        to_size((1, 2, 3))
    with pytest.raises(TypeError):
        to_size(42)
    with pytest.raises(DimensionTooLarge):
        to_size((2**32, 1))


def test_protocol_membership():
    assert isinstance(Size(1, 1), Size2d)
    assert isinstance(SimpleNamespace(width=1, height=1), Size2d)


def test_point_in_bounds_agrees_with_is_valid():
    size = Size(3, 2)
    for y in range(-2, 4):
        for x in range(-2, 5):
            assert size.point_in_bounds((x, y)) == is_valid((x, y), size)
            assert size_2d.point_in_bounds((3, 2), (x, y)) == is_valid((x, y), (3, 2))


def test_intersects():
    assert size_2d.intersects((2, 2), (1, 5))
    assert not size_2d.intersects((0, 3), (2, 2))


def test_conversions():
    assert size_2d.as_tuple(Size(5, 6)) == (5, 6)
    assert size_2d.as_ivec2((5, 6)) == IVec2(5, 6)
    assert size_2d.as_uvec2((5, 6)) == UVec2(5, 6)
    assert size_2d.as_vec2((5, 6)) == (5.0, 6.0)
    assert size_2d.as_array((5, 6)).tolist() == [5, 6]
    assert size_2d.as_uarray((5, 6)).tolist() == [5, 6]
    assert tuple(Size(5, 6)) == (5, 6)
    assert to_size(size_2d.as_tuple(Size(5, 6))) == Size(5, 6)


def test_coord_iter_is_restartable():
    size = Size(2, 2)
    first = list(size.iter())
    second = list(size_2d.coord_iter_row_major(size))
    assert first == second == [(0, 0), (1, 0), (0, 1), (1, 1)]
