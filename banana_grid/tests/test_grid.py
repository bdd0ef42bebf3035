import pytest

from banana_grid.src.core import CellView, Grid, ShapeMismatch, Size


def _numbered(width=4, height=3):
    return Grid.new_fn((width, height), lambda p: p.y * width + p.x)


def test_iter_rows_single_row():
    grid = _numbered()
    rows = list(grid.iter_rows(range(1, 2)))
    assert len(rows) == 1
    assert len(rows[0]) == 4
    assert list(rows[0]) == [4, 5, 6, 7]


def test_iter_rows_touching_last_row():
    grid = _numbered()
    rows = list(grid.iter_rows(range(2, 3)))
    assert rows == [[8, 9, 10, 11]]
    assert len(list(grid.iter_rows(range(1, 10)))) == 2
    assert len(list(grid.iter_rows(slice(1, None)))) == 2
    assert list(grid.iter_rows(range(3, 5))) == []


def test_iter_rows_rejects_steps():
    grid = _numbered()
    with pytest.raises(ValueError):
        grid.iter_rows(range(0, 3, 2))
    with pytest.raises(TypeError):
        grid.iter_rows([0, 1])


def test_rows_and_cols():
    grid = _numbered()
    assert [list(r) for r in grid.rows()] == [[0, 1, 2, 3], [4, 5, 6, 7], [8, 9, 10, 11]]
    cols = list(grid.cols())
    assert len(cols) == 4
    assert cols[1] == [1, 5, 9]
    assert list(grid.iter_cols(range(2, 4))) == [[2, 6, 10], [3, 7, 11]]


def test_iter_column_is_strided_and_writable():
    grid = _numbered()
    column = grid.iter_column(1)
    assert list(column) == [1, 5, 9]
    column[2] = -1
    assert grid.get((1, 2)) == -1
    with pytest.raises(IndexError):
        grid.iter_column(4)


def test_row_views_write_through():
    grid = _numbered()
    first = next(grid.iter_rows(range(0, 1)))
    first.fill(0)
    assert grid.cells[:4] == [0, 0, 0, 0]
    row = grid.row(2)
    row[-1] = 42
    assert grid.get((3, 2)) == 42
    with pytest.raises(IndexError):
        grid.row(3)


def test_cell_view_indexing():
    view = CellView([0, 1, 2, 3, 4, 5], 1, 2, 3)
    assert list(view) == [1, 3, 5]
    assert view[-1] == 5
    assert view[0:2] == [1, 3]
    assert 3 in view
    with pytest.raises(IndexError):
        view[3]


def test_cells_must_match_size():
    with pytest.raises(ShapeMismatch):
        Grid((2, 2), [1, 2, 3])
    with pytest.raises(ShapeMismatch):
        Grid.new_from_vec((1, 1), [])


def test_new_copy_shares_value():
    marker = object()
    grid = Grid.new_copy((2, 1), marker)
    assert grid.get((0, 0)) is grid.get((1, 0)) is marker


def test_new_default_is_none():
    grid = Grid.new_default((2, 2))
    assert grid.cells == [None] * 4


def test_equality_and_size_normalisation():
    a = Grid.new((2, 2), 1)
    b = Grid.new(Size(2, 2), 1)
    assert a == b
    assert a.size == Size(2, 2)
    b.set((0, 0), 2)
    assert a != b


def test_fill_keeps_backing_list():
    grid = _numbered()
    cells = grid.cells
    grid.fill(3)
    assert grid.cells is cells
    assert set(cells) == {3}
