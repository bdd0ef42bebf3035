"""Grid comparison and plotting utilities for debugging purposes."""

from __future__ import annotations

from typing import Any, List, Optional, Tuple

import matplotlib
matplotlib.use("Agg")  # ensure headless operation for tests
import matplotlib.pyplot as plt
import numpy as np

from banana_grid.src.core.grid_like import GridLike


def visual_diff_report(pred: GridLike[Any], target: GridLike[Any]) -> str:
    """Return a human-readable report of mismatches between ``pred`` and ``target``.

    The report lists each cell that differs, giving ``(x,y)`` coordinates and
    both values. Cells that exist in only one grid are reported as empty. A
    summary of total errors and the match ratio is appended.
    """

    report_lines: List[str] = []

    if pred.size != target.size:
        report_lines.append(
            f"Shape mismatch: predicted {tuple(pred.size)}, expected {tuple(target.size)}"
        )

    w = max(pred.width, target.width)
    h = max(pred.height, target.height)

    errors = 0
    for y in range(h):
        for x in range(w):
            in_pred = pred.in_bounds((x, y))
            in_target = target.in_bounds((x, y))
            a = pred.get((x, y))
            b = target.get((x, y))
            if in_pred == in_target and a == b:
                continue

            pred_desc = f"{a!r}" if in_pred else "empty"
            tgt_desc = f"{b!r}" if in_target else "empty"
            report_lines.append(
                f"Mismatch at ({x},{y}): predicted {pred_desc}, expected {tgt_desc}"
            )
            errors += 1

    total_cells = h * w
    match_ratio = (total_cells - errors) / total_cells if total_cells else 1.0
    report_lines.append(f"Total errors: {errors}")
    report_lines.append(f"Match ratio: {match_ratio:.2f}")

    return "\n".join(report_lines)


def grid_diff_heatmap(
    predicted: GridLike[Any], target: GridLike[Any]
) -> Tuple[plt.Figure, List[List[int]]]:
    """Return a heatmap figure of mismatched cells and the underlying mask."""

    if predicted.size != target.size:
        raise ValueError("grid shapes must match")

    heat = [
        [1 if predicted.get((x, y)) != target.get((x, y)) else 0 for x in range(predicted.width)]
        for y in range(predicted.height)
    ]

    fig = plt.figure()
    plt.imshow(heat, cmap="Reds", interpolation="nearest")
    plt.axis("off")
    plt.tight_layout()
    return fig, heat


def plot_grid(grid: GridLike[Any], ax: Optional[plt.Axes] = None, cmap: str = "viridis") -> plt.Axes:
    """Draw a numeric grid with ``imshow`` and return the axes."""
    data = np.array(list(grid.iter()), dtype=float).reshape(grid.height, grid.width)
    if ax is None:
        _, ax = plt.subplots()
    ax.imshow(data, cmap=cmap, interpolation="nearest")
    ax.set_xticks(range(grid.width))
    ax.set_yticks(range(grid.height))
    return ax


__all__ = ["visual_diff_report", "grid_diff_heatmap", "plot_grid"]
