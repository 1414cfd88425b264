import numpy as np
import pytest

from closest_approach.config import settings
from closest_approach.physics import vector

N_RANDOM_TESTS = 500


def test_add_and_subtract():
    assert np.array_equal(vector.add([1, 2], [3, 5]), [4, 7])
    # displacement from the first vector to the second
    assert np.array_equal(vector.subtract([1, 2], [3, 5]), [2, 3])


def test_inner_product_and_lengths():
    assert vector.inner_product([1, 2, 3], [4, 5, 6]) == 32.0
    assert vector.length2([3, 4]) == 25.0
    assert vector.length([3, 4]) == 5.0


def test_scale_and_unit_vector():
    assert np.array_equal(vector.scale(2, [1, -3]), [2, -6])
    assert np.allclose(vector.unit_vector([0, 5]), [0, 1])
    assert vector.length(vector.unit_vector([1, 1, 1])) == pytest.approx(1.0)


def test_unit_vector_of_zero_vector_fails():
    with pytest.raises(ValueError):
        vector.unit_vector([0.0, 0.0])


def test_dimension_mismatch_fails():
    with pytest.raises(ValueError):
        vector.add([1, 2], [1, 2, 3])
    with pytest.raises(ValueError):
        vector.distance([1], [1, 2])


def test_dimension_check_can_be_disabled(monkeypatch):
    monkeypatch.setattr(settings, "CHECK_CONTRACTS", False)
    vector.check_same_dimension([1.0], [1.0, 2.0])


def test_as_vector_rejects_scalars_and_matrices():
    with pytest.raises(ValueError):
        vector.as_vector(3.0)
    with pytest.raises(ValueError):
        vector.as_vector([[1.0, 2.0]])


def test_distance_offsets(rng):
    for _ in range(N_RANDOM_TESTS):
        x, y, d = rng.uniform(-10, 10, size=3)
        assert vector.distance([x, y], [x + d, y]) == pytest.approx(abs(d), abs=1e-5)
        assert vector.distance([x, y], [x, y + d]) == pytest.approx(abs(d), abs=1e-5)
        assert vector.distance([x, y], [x + d, y + d]) == pytest.approx(np.sqrt(2) * abs(d), abs=1e-5)


def test_distance_symmetric_and_zero_on_self(rng):
    for _ in range(N_RANDOM_TESTS):
        u, v = rng.uniform(-100, 100, size=(2, 3))
        assert vector.distance(u, v) == vector.distance(v, u)
        assert vector.distance(u, u) == 0.0


def test_interpolate_known_values():
    start, end = [1, 1], [5, 9]
    assert np.allclose(vector.interpolate(start, end, 0), [1, 1])
    assert np.allclose(vector.interpolate(start, end, 0.5), [3, 5])
    assert np.allclose(vector.interpolate(start, end, 1), [5, 9])
    # extrapolation
    assert np.allclose(vector.interpolate(start, end, 2), [9, 17])
    assert np.allclose(vector.interpolate(start, end, -1), [-3, -7])


def test_interpolate_end_points_exact(rng):
    for _ in range(N_RANDOM_TESTS):
        start, end = rng.uniform(-1e4, 1e4, size=(2, 3))
        assert np.array_equal(vector.interpolate(start, end, 0), start)
        assert np.array_equal(vector.interpolate(start, end, 1), end)


def test_interpolate_random_fractions(rng):
    start, end = np.array([1.0, 1.0]), np.array([5.0, 9.0])
    for k in rng.random(N_RANDOM_TESTS):
        p = vector.interpolate(start, end, k)
        assert p[0] - start[0] == pytest.approx(k * (end[0] - start[0]), abs=1e-5)
        assert p[1] - start[1] == pytest.approx(k * (end[1] - start[1]), abs=1e-5)


def test_length_of_huge_vector_is_finite():
    assert vector.length([1e155, 1e155]) == pytest.approx(1e155 * 2 ** 0.5)
    assert vector.length([3e200, 4e200]) == pytest.approx(5e200)
    assert vector.distance([1e155], [-1e155]) == pytest.approx(2e155)
