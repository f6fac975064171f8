"""cProfile helpers for measuring query performance."""

from __future__ import annotations

import cProfile
import pstats
import time
from pathlib import Path
from typing import Iterable, List, Sequence

from ..core.spatial.geometry import Circle, Point, Rect
from ..core.spatial.spatial_index import SpatialIndex


def _query(index: SpatialIndex, shape: Circle | Rect) -> List[Point]:
    if isinstance(shape, Rect):
        return index.points_within_rect(shape)
    return index.points_within_circle(shape)


def linear_scan(points: Iterable[Point], shape: Circle | Rect) -> List[Point]:
    """Reference query: test every point against ``shape``."""
    return [p for p in points if shape.contains(p)]


def profile_queries(
    index: SpatialIndex,
    shapes: Sequence[Circle | Rect],
    out_path: str | Path = "profile.prof",
) -> pstats.Stats:
    """Run every query in ``shapes`` under cProfile and dump stats to ``out_path``.

    Parameters
    ----------
    index:
        Index to query.
    shapes:
        Circles and rectangles, queried in order.
    out_path:
        File to write cProfile data to.

    Returns
    -------
    pstats.Stats
        Profiling statistics for the execution.
    """

    path = Path(out_path)
    profiler = cProfile.Profile()
    profiler.enable()
    for shape in shapes:
        _query(index, shape)
    profiler.disable()
    profiler.dump_stats(str(path))
    return pstats.Stats(profiler)


def compare_with_linear_scan(
    index: SpatialIndex, shapes: Sequence[Circle | Rect], repeats: int = 1
) -> tuple[float, float]:
    """Return ``(indexed_seconds, linear_seconds)`` for running ``shapes``."""

    points = index.to_array()

    start = time.perf_counter()
    for _ in range(repeats):
        for shape in shapes:
            _query(index, shape)
    indexed = time.perf_counter() - start

    start = time.perf_counter()
    for _ in range(repeats):
        for shape in shapes:
            linear_scan(points, shape)
    linear = time.perf_counter() - start

    return indexed, linear


__all__ = ["linear_scan", "profile_queries", "compare_with_linear_scan"]
