# quadspace/main.py
"""Viewer bootstrap and frame loop."""

from __future__ import annotations

import logging
import random
import sys
from pathlib import Path
from typing import Any, Dict

import pygame

from .config import CONFIG, CONFIG_PATH, Config, LoggingConfig, load_config
from .core.spatial.geometry import Point
from .core.spatial.spatial_index import SpatialIndex
from .gui import input as gui_input
from .gui.renderer import Renderer
from .gui.window import Window


logger = logging.getLogger(__name__)


def configure_logging(log_cfg: LoggingConfig) -> None:
    """Apply the root level and per-module levels from ``log_cfg``."""
    numeric_level = getattr(logging, log_cfg.global_level, logging.INFO)
    logging.basicConfig(
        level=numeric_level,
        format='%(asctime)s - %(name)s - %(levelname)s - %(message)s',
        force=True
    )

    # Apply per-module levels if defined
    for module_name, level_str in log_cfg.module_levels.items():
        module_numeric_level = getattr(logging, str(level_str).upper(), None)
        if module_numeric_level is not None:
            logging.getLogger(module_name).setLevel(module_numeric_level)
        else:
            logger.warning("Invalid log level '%s' for module '%s' in config.", level_str, module_name)


configure_logging(CONFIG.logging)


def seed_points(index: SpatialIndex, count: int, seed: int) -> None:
    """Insert ``count`` uniformly random points covering the index region."""
    rng = random.Random(seed)
    bounds = index.boundary
    index.build(
        Point(rng.uniform(bounds.left, bounds.right), rng.uniform(bounds.top, bounds.bottom))
        for _ in range(count)
    )


def bootstrap(config_path: str | Path = CONFIG_PATH) -> tuple[Config, SpatialIndex]:
    cfg = load_config(Path(config_path))
    configure_logging(cfg.logging)
    index = SpatialIndex.from_config(cfg.index)
    seed_points(index, cfg.viewer.initial_points, cfg.viewer.seed)
    logger.info(
        "[Bootstrap] Index %sx%s capacity %d seeded with %d points (depth %d)",
        cfg.index.width, cfg.index.height, cfg.index.capacity, len(index), index.depth(),
    )
    return cfg, index


def initial_state(cfg: Config) -> Dict[str, Any]:
    return {
        "running": True,
        "drawing": False,
        "mouse_world": None,
        "query_mode": "circle",
        "query_size": cfg.viewer.query_size,
        "show_outlines": True,
        "show_nearest": False,
        "nearest_count": cfg.viewer.nearest_count,
    }


def run(config_path: str | Path = CONFIG_PATH) -> None:
    cfg, index = bootstrap(config_path)
    window = Window(cfg.viewer.window_size, caption=cfg.viewer.caption)
    renderer = Renderer(window, index)
    state = initial_state(cfg)
    clock = pygame.time.Clock()

    logger.info("Viewer started. Click to add points; r/v/n/c toggle mode/outlines/nearest/clear.")
    try:
        while state["running"]:
            gui_input.handle_events(index, renderer, state)
            if not state["running"]:
                break
            window.clear((10, 10, 10))
            renderer.update(index, state)
            window.refresh()
            clock.tick(cfg.viewer.fps)
    except KeyboardInterrupt:
        logger.info("KeyboardInterrupt caught. Shutting down...")
    finally:
        logger.info("Viewer shutting down...")
        if pygame.get_init():
            pygame.quit()


if __name__ == "__main__":
    run(sys.argv[1] if len(sys.argv) > 1 else CONFIG_PATH)
