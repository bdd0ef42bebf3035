"""Backend registry and selection."""

from __future__ import annotations

from typing import Any, Dict, Optional, Type

from banana_grid.src.utils import config_loader
from banana_grid.src.utils.logger import get_logger

from .grid import Grid
from .grid_2d import Grid2D
from .grid_like import GridLike

logger = get_logger(__name__)

GRID_BACKENDS: Dict[str, Type[GridLike[Any]]] = {
    Grid.BACKEND: Grid,
    Grid2D.BACKEND: Grid2D,
}


def grid_backend(name: Optional[str] = None) -> Type[GridLike[Any]]:
    """Return the grid class registered as ``name`` or the configured default."""
    key = name or config_loader.DEFAULT_BACKEND
    try:
        backend = GRID_BACKENDS[key]
    except KeyError:
        raise ValueError(
            f"Unknown grid backend {key!r}; expected one of {sorted(GRID_BACKENDS)}"
        ) from None
    logger.debug("Using %s grid backend", key)
    return backend


def new_grid(size: Any, value: Any, backend: Optional[str] = None) -> GridLike[Any]:
    """Build a grid filled with ``value`` on the selected backend."""
    return grid_backend(backend).new(size, value)


def grid_from_dict(data: Dict[str, Any]) -> GridLike[Any]:
    """Rebuild a grid from :meth:`GridLike.to_dict` output on its recorded backend."""
    return grid_backend(data.get("backend") or None).from_dict(data)


__all__ = ["GRID_BACKENDS", "grid_backend", "new_grid", "grid_from_dict"]
