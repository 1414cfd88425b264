import numpy as np
import pytest

from closest_approach.models.route import Route
from closest_approach.models.waypoint import WayPoint

SEED = 20240617


@pytest.fixture
def rng():
    return np.random.default_rng(SEED)


@pytest.fixture
def random_route(rng):
    """
    Factory for random 2-D routes: every step advances time by [100, 10000)
    and each coordinate by [100, 10000).
    """
    def make(start_time=None, start_x=None, start_y=None, n_way_points=None):
        time = int(rng.integers(0, 1000)) if start_time is None else int(start_time)
        x = float(rng.uniform(-1000, 1000)) if start_x is None else float(start_x)
        y = float(rng.uniform(-1000, 1000)) if start_y is None else float(start_y)
        n = int(rng.integers(2, 10)) if n_way_points is None else int(n_way_points)

        way_points = []
        for _ in range(n):
            time += int(rng.integers(100, 10_000))
            x += float(rng.uniform(100, 10_000))
            y += float(rng.uniform(100, 10_000))
            way_points.append(WayPoint(time, [x, y]))
        return Route(way_points)

    return make
