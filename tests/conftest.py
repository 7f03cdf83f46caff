"""Shared fixtures for the idwmap test suite."""

import sys
from pathlib import Path

import numpy as np
import pytest

# Add src to path
sys.path.insert(0, str(Path(__file__).parent.parent / "src"))

from idwmap.types import make_data_items  # noqa: E402


@pytest.fixture
def rng():
    return np.random.default_rng(42)


@pytest.fixture
def two_point_data():
    return make_data_items([[0, 0], [10, 0]], [10, 20])


@pytest.fixture
def random_data(rng):
    points = rng.uniform(0, 50, size=(80, 2))
    values = rng.integers(0, 101, size=80)
    return make_data_items(points, values)


@pytest.fixture
def square_with_hole():
    outer = [(0, 0), (10, 0), (10, 10), (0, 10), (0, 0)]
    hole = [(4, 4), (6, 4), (6, 6), (4, 6), (4, 4)]
    return [[outer, hole]]
