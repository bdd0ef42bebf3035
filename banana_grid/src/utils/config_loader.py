"""Loads YAML/JSON configuration files and the global grid settings."""

from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Any, Dict, Optional

import yaml

_DEFAULTS: Dict[str, Any] = {
    "default_backend": "flat",
    "debug_checks": True,
    "log_level": "INFO",
}


def load_config(path: str) -> Dict[str, Any]:
    """Load a YAML or JSON configuration file."""
    path_p = Path(path)
    with open(path_p, "r", encoding="utf-8") as f:
        if path_p.suffix in {".yaml", ".yml"}:
            return yaml.safe_load(f) or {}
        if path_p.suffix == ".json":
            return json.load(f)
        raise ValueError("Unsupported config format")


def load_grid_config(path: Optional[Path] = None) -> Dict[str, Any]:
    """Return the grid configuration merged over the built-in defaults."""
    if path is None:
        path = Path(__file__).resolve().parents[2] / "configs" / "grid_config.yaml"
    config = dict(_DEFAULTS)
    if path.exists():
        config.update(load_config(str(path)))
    return config


GRID_CONFIG: Dict[str, Any] = load_grid_config()
DEFAULT_BACKEND: str = str(GRID_CONFIG.get("default_backend", "flat"))
DEBUG_CHECKS: bool = bool(GRID_CONFIG.get("debug_checks", True))
LOG_LEVEL: str = str(GRID_CONFIG.get("log_level", "INFO")).upper()


def set_default_backend(value: str) -> None:
    """Override the backend used when none is requested explicitly."""
    global DEFAULT_BACKEND
    DEFAULT_BACKEND = value
    GRID_CONFIG["default_backend"] = value


def set_debug_checks(value: bool) -> None:
    """Enable or disable bounds assertions on unchecked access."""
    global DEBUG_CHECKS
    DEBUG_CHECKS = value
    GRID_CONFIG["debug_checks"] = value


def set_log_level(value: str) -> None:
    """Override the level of every ``banana_grid`` logger."""
    global LOG_LEVEL
    LOG_LEVEL = value.upper()
    GRID_CONFIG["log_level"] = LOG_LEVEL
    for name, logger in logging.root.manager.loggerDict.items():
        if name.startswith("banana_grid") and isinstance(logger, logging.Logger):
            logger.setLevel(LOG_LEVEL)


def print_runtime_config() -> None:
    """Print a summary of the current runtime configuration."""
    info = {
        "default_backend": DEFAULT_BACKEND,
        "debug_checks": DEBUG_CHECKS,
        "log_level": LOG_LEVEL,
    }
    print("Runtime configuration:")
    for k, v in info.items():
        print(f"  {k}: {v}")
