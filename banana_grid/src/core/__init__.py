"""Core grid utilities and data structures."""

from .axis import Axis
from .backends import GRID_BACKENDS, grid_backend, grid_from_dict, new_grid
from .errors import (
    DimensionTooLarge,
    GridError,
    InvalidDimension,
    OutOfBounds,
    ShapeMismatch,
)
from .grid import CellView, Grid
from .grid_2d import Grid2D
from .grid_like import MOORE_OFFSETS, GridLike
from .grid_point import GridPoint, IVec2, UVec2, Vec2, to_point
from .point_iter import PointIterRowMajor
from .size_2d import MAX_DIMENSION, Size, Size2d, to_size

__all__ = [
    "Axis",
    "GRID_BACKENDS",
    "grid_backend",
    "grid_from_dict",
    "new_grid",
    "DimensionTooLarge",
    "GridError",
    "InvalidDimension",
    "OutOfBounds",
    "ShapeMismatch",
    "CellView",
    "Grid",
    "Grid2D",
    "MOORE_OFFSETS",
    "GridLike",
    "GridPoint",
    "IVec2",
    "UVec2",
    "Vec2",
    "to_point",
    "PointIterRowMajor",
    "MAX_DIMENSION",
    "Size",
    "Size2d",
    "to_size",
]
