# closest_approach/physics/vector.py
"""
Vector helpers for fixed-length real vectors (free or positional).
Every function expecting two vectors requires them to have the same length.
"""
import math

import numpy as np

from closest_approach.config import settings


def as_vector(v) -> np.ndarray:
    """Coerce v to a 1-D float64 array (scalars are rejected)."""
    arr = np.asarray(v, dtype=float)
    if arr.ndim != 1:
        raise ValueError(f"Cannot coerce {v!r} to a 1-D vector")
    return arr


def check_same_dimension(*vectors) -> None:
    if not settings.CHECK_CONTRACTS:
        return
    dims = {len(v) for v in vectors}
    if len(dims) > 1:
        raise ValueError(f"Vectors must share one dimension, got {sorted(dims)}")


def add(u, v) -> np.ndarray:
    u, v = as_vector(u), as_vector(v)
    check_same_dimension(u, v)
    return u + v


def subtract(from_vec, to_vec) -> np.ndarray:
    """The displacement from from_vec to to_vec, i.e. to_vec - from_vec."""
    from_vec, to_vec = as_vector(from_vec), as_vector(to_vec)
    check_same_dimension(from_vec, to_vec)
    return to_vec - from_vec


def inner_product(u, v) -> float:
    u, v = as_vector(u), as_vector(v)
    check_same_dimension(u, v)
    return float(np.dot(u, v))


def length2(v) -> float:
    return inner_product(v, v)


def length(v) -> float:
    # hypot does not overflow on the squares
    return math.hypot(*as_vector(v).tolist())


def distance(u, v) -> float:
    """Euclidean distance between two positional vectors."""
    return length(subtract(u, v))


def scale(s: float, v) -> np.ndarray:
    return float(s) * as_vector(v)


def unit_vector(v) -> np.ndarray:
    n = length(v)
    if not n > 0:
        raise ValueError("Unit vector of a zero-length vector is undefined")
    return scale(1.0 / n, v)


def interpolate(start, end, k: float) -> np.ndarray:
    """
    Linear interpolation from start (k=0) to end (k=1).
    k outside [0, 1] extrapolates along the same line.
    Both end points are reproduced exactly.
    """
    start, end = as_vector(start), as_vector(end)
    check_same_dimension(start, end)
    if k == 1:
        return end.copy()
    return start + k * (end - start)
