"""Simple configuration loader for quadspace."""

from __future__ import annotations

import math
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Dict

import yaml


CONFIG_PATH = Path(__file__).resolve().parents[1] / "config.yaml"


class ConfigError(ValueError):
    """Raised when index or viewer configuration is invalid."""


@dataclass
class IndexConfig:
    """Configuration values for the spatial index section."""

    center: tuple[float, float] = (0.0, 0.0)
    width: float = 800.0
    height: float = 800.0
    capacity: int = 4
    search_step: float = 10.0
    max_depth: int = 20


@dataclass
class ViewerConfig:
    """Configuration for the pygame viewer."""

    window_size: tuple[int, int] = (800, 800)
    caption: str = "quadspace"
    fps: int = 60
    initial_points: int = 200
    seed: int = 1
    nearest_count: int = 5
    query_size: float = 120.0


@dataclass
class LoggingConfig:
    """Root log level plus optional per-logger overrides."""

    global_level: str = "INFO"
    module_levels: Dict[str, str] = field(default_factory=dict)


@dataclass
class Config:
    """Top level configuration dataclass."""

    index: IndexConfig
    viewer: ViewerConfig
    logging: LoggingConfig


def validate_region(
    x: float,
    y: float,
    width: float,
    height: float,
    capacity: int,
    search_step: float = 10.0,
    max_depth: int = 20,
) -> None:
    """Raise :class:`ConfigError` unless the index parameters are usable."""

    if isinstance(capacity, bool) or not isinstance(capacity, int):
        raise ConfigError(f"capacity must be an integer, got {capacity!r}")
    if capacity <= 0:
        raise ConfigError("capacity must be positive")
    for name, value in (("x", x), ("y", y)):
        if not math.isfinite(value):
            raise ConfigError(f"center {name} must be finite, got {value!r}")
    for name, value in (("width", width), ("height", height)):
        if not math.isfinite(value) or value <= 0:
            raise ConfigError(f"{name} must be positive and finite, got {value!r}")
    if not math.isfinite(search_step) or search_step <= 0:
        raise ConfigError("search_step must be positive")
    if isinstance(max_depth, bool) or not isinstance(max_depth, int) or max_depth < 0:
        raise ConfigError("max_depth must be a non-negative integer")


def _parse_config(data: dict[str, Any]) -> Config:
    """Convert raw ``data`` into :class:`Config`."""

    index_data = data.get("index", {})
    try:
        center = tuple(float(v) for v in index_data.get("center", [0.0, 0.0]))
        index = IndexConfig(
            center=(center[0], center[1]),
            width=float(index_data.get("width", 800.0)),
            height=float(index_data.get("height", 800.0)),
            capacity=int(index_data.get("capacity", 4)),
            search_step=float(index_data.get("search_step", 10.0)),
            max_depth=int(index_data.get("max_depth", 20)),
        )
    except (TypeError, ValueError, IndexError) as exc:
        raise ConfigError(f"malformed index section: {exc}") from exc
    validate_region(
        index.center[0],
        index.center[1],
        index.width,
        index.height,
        index.capacity,
        index.search_step,
        index.max_depth,
    )

    viewer_data = data.get("viewer", {})
    try:
        size = viewer_data.get("window_size", [800, 800])
        viewer = ViewerConfig(
            window_size=(int(size[0]), int(size[1])),
            caption=str(viewer_data.get("caption", "quadspace")),
            fps=int(viewer_data.get("fps", 60)),
            initial_points=int(viewer_data.get("initial_points", 200)),
            seed=int(viewer_data.get("seed", 1)),
            nearest_count=int(viewer_data.get("nearest_count", 5)),
            query_size=float(viewer_data.get("query_size", 120.0)),
        )
    except (TypeError, ValueError, IndexError) as exc:
        raise ConfigError(f"malformed viewer section: {exc}") from exc

    logging_data = data.get("logging", {})
    log_cfg = LoggingConfig(
        global_level=str(logging_data.get("global_level", "INFO")).upper(),
        module_levels=dict(logging_data.get("module_levels") or {}),
    )

    return Config(index=index, viewer=viewer, logging=log_cfg)


def load_config(path: Path = CONFIG_PATH) -> Config:
    """Load configuration from ``path`` and return a :class:`Config`."""

    path = Path(path)
    if path.is_file():
        raw = yaml.safe_load(path.read_text()) or {}
    else:
        raw = {}
    return _parse_config(raw)


# Load configuration at module import time.
CONFIG = load_config()


__all__ = [
    "CONFIG",
    "Config",
    "ConfigError",
    "IndexConfig",
    "ViewerConfig",
    "LoggingConfig",
    "load_config",
    "validate_region",
]
