"""
Brute-force sampling of separations.

Used to check the analytic closest approach and by collaborators that need to
sample a segment or a route pair (plots, diagnostics) without building way points.
"""
from typing import Optional, Tuple

import numpy as np

from closest_approach.config import settings
from closest_approach.engine.alignment import overlap_window
from closest_approach.engine.segment import SegmentClosestApproach
from closest_approach.models.approach import LocatedApproach
from closest_approach.models.route import as_route
from closest_approach.models.waypoint import WayPoint


def sample_segment(segment: SegmentClosestApproach, n_samples: Optional[int] = None) -> Tuple[np.ndarray, np.ndarray]:
    """
    Separation at n_samples evenly spaced k in [0, 1].
    Returns (ks, distances).
    """
    n = int(settings.DEFAULT_SAMPLES if n_samples is None else n_samples)
    if n < 2:
        raise ValueError("n_samples must be >= 2")
    ks = np.linspace(0.0, 1.0, n)

    s1, e1 = segment.start1.coordinates, segment.end1.coordinates
    s2, e2 = segment.start2.coordinates, segment.end2.coordinates
    p1 = s1 + ks[:, None] * (e1 - s1)
    p2 = s2 + ks[:, None] * (e2 - s2)
    return ks, np.linalg.norm(p1 - p2, axis=1)


def sampled_closest_k(segment: SegmentClosestApproach, n_samples: Optional[int] = None) -> float:
    """Sampled k with the smallest separation (the earliest on ties)."""
    ks, dists = sample_segment(segment, n_samples)
    return float(ks[int(np.argmin(dists))])


def positions_at(route, times) -> np.ndarray:
    """
    (len(times), dimension) positions along the route; rows are NaN for times
    outside the route's period.
    """
    route = as_route(route)
    times = np.asarray(times)
    start_time = route.start_time

    # interpolate on offsets from the route start: int64 times lose precision as floats
    if times.dtype.kind in "iu":
        times = times.astype(np.int64)
        outside = (times < start_time) | (times > route.end_time)
        with np.errstate(over="ignore"):
            offsets = (times - np.int64(start_time)).astype(float)
    else:
        times = times.astype(float)
        outside = (times < start_time) | (times > route.end_time)
        offsets = times - float(start_time)
    route_offsets = np.array([float(t - start_time) for t in route.times])
    coords = route.coordinates

    out = np.empty((len(times), route.dimension), dtype=float)
    for d in range(route.dimension):
        out[:, d] = np.interp(offsets, route_offsets, coords[:, d])
    out[outside, :] = np.nan
    return out


def sample_closest_approach(route1, route2, step: Optional[int] = None) -> Optional[LocatedApproach]:
    """
    Earliest closest approach found by checking every `step`-th integer time of
    the routes' common period. None if the routes do not overlap in time.
    """
    route1, route2 = as_route(route1), as_route(route2)
    step = int(settings.SAMPLE_TIME_STEP if step is None else step)
    if step <= 0:
        raise ValueError("step must be > 0")

    start_time, end_time = overlap_window(route1, route2)
    if start_time > end_time:
        return None

    times = np.int64(start_time) + np.arange(0, end_time - start_time + 1, step, dtype=np.int64)
    p1 = positions_at(route1, times)
    p2 = positions_at(route2, times)
    dists = np.linalg.norm(p1 - p2, axis=1)

    idx = int(np.argmin(dists))
    time = int(times[idx])
    return LocatedApproach.between(WayPoint(time, p1[idx]), WayPoint(time, p2[idx]))
