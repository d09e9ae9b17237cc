import random

import pytest

from hitori.grid import Grid

LATIN_3 = [
    [1, 2, 3],
    [2, 3, 1],
    [3, 1, 2],
]


@pytest.fixture
def rng():
    return random.Random(1234)


@pytest.fixture
def latin_grid():
    return Grid(LATIN_3)
