import numpy as np
import pytest

from graham_hull import constants, data


@pytest.fixture
def sample_points():
    return data.as_points(constants.SAMPLE_POINTS)


@pytest.fixture
def rng():
    return np.random.default_rng(20131)


@pytest.fixture
def make_points(rng):
    # a small coordinate range forces duplicates and collinear runs
    def make(n, low=-20, high=20):
        return data.as_points(rng.integers(low, high, size=(n, 2)).tolist())

    return make


@pytest.fixture
def random_point_sets(make_points):
    return [make_points(n) for n in (1, 2, 3, 4, 10, 50, 200, 1000)]
