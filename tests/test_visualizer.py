import matplotlib.pyplot as plt
import pytest

from banana_grid.src.core import Grid, Grid2D
from banana_grid.src.debug import grid_diff_heatmap, plot_grid, visual_diff_report


def test_report_for_identical_grids():
    g = Grid.new((2, 2), 1)
    report = visual_diff_report(g, Grid2D.new((2, 2), 1))
    assert "Total errors: 0" in report
    assert "Match ratio: 1.00" in report


def test_report_lists_mismatches():
    pred = Grid.new_fn((2, 2), lambda p: p.x)
    target = Grid.new((2, 2), 0)
    report = visual_diff_report(pred, target).splitlines()
    assert report[0] == "Mismatch at (1,0): predicted 1, expected 0"
    assert report[-2] == "Total errors: 2"
    assert report[-1] == "Match ratio: 0.50"


def test_report_shape_mismatch():
    report = visual_diff_report(Grid.new((1, 1), 0), Grid.new((2, 1), 0))
    lines = report.splitlines()
    assert lines[0] == "Shape mismatch: predicted (1, 1), expected (2, 1)"
    assert "Mismatch at (1,0): predicted empty, expected 0" in lines


def test_heatmap_mask():
    pred = Grid2D.new_fn((3, 1), lambda p: p.x)
    target = Grid2D.new((3, 1), 1)
    fig, heat = grid_diff_heatmap(pred, target)
    assert heat == [[1, 0, 1]]
    plt.close(fig)


def test_plot_grid_returns_axes():
    grid = Grid2D.new_fn((3, 2), lambda p: p.x * p.y)
    ax = plot_grid(grid)
    assert len(ax.get_images()) == 1
    plt.close(ax.figure)


def test_heatmap_needs_equal_sizes():
    with pytest.raises(ValueError):
        grid_diff_heatmap(Grid.new((2, 2), 0), Grid.new((3, 2), 0))


def test_module_is_documented():
    from banana_grid.src.debug import visualizer

    assert visualizer.__doc__.startswith("Grid comparison")
