# tests/conftest.py
import os
import random

import pytest

os.environ.setdefault("SDL_VIDEODRIVER", "dummy")
os.environ.setdefault("SDL_AUDIODRIVER", "dummy")

from quadspace.core.spatial.geometry import Point
from quadspace.core.spatial.spatial_index import SpatialIndex


DIAGONAL = [Point(0, 0), Point(1, 1), Point(2, 2), Point(3, 3), Point(4, 4)]


@pytest.fixture
def diagonal_points():
    return list(DIAGONAL)


@pytest.fixture
def scenario_index():
    """100x100 index centred on the origin holding five diagonal points."""
    index = SpatialIndex(0, 0, 100, 100, 4)
    index.build(DIAGONAL)
    return index


@pytest.fixture
def random_points():
    rng = random.Random(1234)
    return [Point(rng.uniform(-60, 60), rng.uniform(-60, 60)) for _ in range(500)]
