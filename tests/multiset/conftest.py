"""Shared fixtures for CountMap tests."""
from __future__ import annotations

import math

import pytest

from countmap.multiset import CountMap


TEST_ITEMS = [1, 1, 1, 2, 3, 4, 4, 4, 3, 3, 8, 1000, 2, 18]

STANDARD_ENTRIES = [(1, 3), (2, 2), (3, 3), (4, 3), (8, 1), (1000, 1), (18, 1)]
# Under hash_half: {1, 2} -> "1", {3, 4} -> "2", 8 -> "4", 1000 -> "500", 18 -> "9"
HALF_ENTRIES = [(1, 5), (3, 6), (8, 1), (1000, 1), (18, 1)]


def hash_half(value: float) -> str:
    """Halve and round half up, so 1 and 2 collide, as do 3 and 4."""
    return str(math.floor(value / 2 + 0.5))


@pytest.fixture()
def map_standard() -> CountMap:
    return CountMap(TEST_ITEMS)


@pytest.fixture()
def map_half() -> CountMap:
    return CountMap(TEST_ITEMS, hash_strategy=hash_half)


@pytest.fixture()
def map_negative() -> CountMap:
    return CountMap(TEST_ITEMS, allow_negative_counts=True)
