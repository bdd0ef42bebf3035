from .visualizer import grid_diff_heatmap, plot_grid, visual_diff_report

__all__ = ["grid_diff_heatmap", "plot_grid", "visual_diff_report"]
