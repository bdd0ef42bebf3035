from banana_grid.src.core import IVec2, PointIterRowMajor, Size


def test_row_major_order():
    points = list(PointIterRowMajor((3, 2)))
    assert points == [(0, 0), (1, 0), (2, 0), (0, 1), (1, 1), (2, 1)]
    assert all(isinstance(p, IVec2) for p in points)


def test_single_pass():
    it = PointIterRowMajor(Size(2, 1))
    assert iter(it) is it
    assert list(it) == [(0, 0), (1, 0)]
    assert list(it) == []


def test_remaining_length():
    it = PointIterRowMajor((3, 2))
    assert len(it) == 6
    next(it)
    next(it)
    next(it)
    assert len(it) == 3
    list(it)
    assert len(it) == 0


def test_degenerate_sizes_yield_nothing():
    assert list(PointIterRowMajor((0, 5))) == []
    assert list(PointIterRowMajor((5, 0))) == []
    assert len(PointIterRowMajor((0, 5))) == 0
