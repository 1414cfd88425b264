"""
Closest approach of two objects over one shared linear segment of time.

Object 1 moves uniformly from way point start1 to end1, object 2 from start2 to
end2. Both start at the same time and end at the same time, so their positions
share one interpolation parameter k: k=0 at the start way points, k=1 at the end
way points.

The squared separation is a quadratic in k. Its unconstrained minimizer is

    k* = (dS . (dS - dE)) / |dS - dE|^2,   dS = start1 - start2, dE = end1 - end2

and is clamped to [0, 1]. A zero denominator (parallel, anti-parallel or both
stationary motion) makes the ratio NaN/Inf; the result is then degenerate and
only the (constant) separation is reported.

The optimum time is fractional, but reported times are integers: the floor and
the following integer time are compared and the one with the smaller separation
wins (earlier on ties). Reported coordinates stay at the continuous k, so they
can differ slightly from the coordinates at the reported integer time.
"""
import logging
import math

import numpy as np

from closest_approach.config import settings
from closest_approach.models.approach import ClosestApproach, DegenerateApproach, LocatedApproach
from closest_approach.models.waypoint import WayPoint
from closest_approach.physics import vector

logger = logging.getLogger(__name__)


def compute_closest_k(start1, end1, start2, end2) -> float:
    """
    Interpolation parameter of the closest approach of two uniform motions,
    clamped to [0, 1]. NaN if the motions are (effectively) parallel.

    Inputs are coordinate vectors: object 1 at start1 when object 2 is at start2,
    and at end1 when object 2 is at end2.
    """
    start1, end1 = vector.as_vector(start1), vector.as_vector(end1)
    start2, end2 = vector.as_vector(start2), vector.as_vector(end2)
    vector.check_same_dimension(start1, end1, start2, end2)

    d_s = start1 - start2
    d_e = end1 - end2
    d_sd_e = d_s - d_e

    # power-of-two rescale: k is unchanged, the dot products cannot overflow
    magnitude = float(max(np.max(np.abs(d_s)), np.max(np.abs(d_sd_e)))) if len(d_s) else 0.0
    if 0.0 < magnitude < math.inf:
        exponent = math.frexp(magnitude)[1]
        d_s = np.ldexp(d_s, -exponent)
        d_sd_e = np.ldexp(d_sd_e, -exponent)
    numerator = np.float64(np.dot(d_s, d_sd_e))
    denominator = np.float64(np.dot(d_sd_e, d_sd_e))
    with np.errstate(divide="ignore", invalid="ignore"):
        k = numerator / denominator
    if not np.isfinite(k):
        return math.nan

    # the unconstrained optimum may lie before the start or after the end
    return float(max(0.0, min(1.0, float(k))))


class SegmentClosestApproach:
    """
    Closest approach between object 1 moving start1 -> end1 and object 2 moving
    start2 -> end2 (start1.time == start2.time < end1.time == end2.time).
    """

    def __init__(self, start1: WayPoint, end1: WayPoint, start2: WayPoint, end2: WayPoint):
        if settings.CHECK_CONTRACTS:
            _check_segment(start1, end1, start2, end2)

        self.start1 = start1
        self.end1 = end1
        self.start2 = start2
        self.end2 = end2

        self.closest_k = compute_closest_k(
            start1.coordinates, end1.coordinates, start2.coordinates, end2.coordinates
        )
        self.closest_approach = self._locate()

    @property
    def start_time(self) -> int:
        return self.start1.time

    @property
    def end_time(self) -> int:
        return self.end1.time

    @property
    def closest_time(self) -> float:
        """Continuous (fractional) time of the closest approach; NaN if degenerate."""
        if math.isnan(self.closest_k):
            return math.nan
        return self.start_time + self.closest_k * (self.end_time - self.start_time)

    @property
    def is_degenerate(self) -> bool:
        return math.isnan(self.closest_k)

    def distance_at(self, k: float) -> float:
        """
        Separation of the two objects at interpolation parameter k.
        NaN k means parallel motion: the separation of the start way points.
        """
        if math.isnan(k):
            return self.start1.distance(self.start2)
        c1 = vector.interpolate(self.start1.coordinates, self.end1.coordinates, k)
        c2 = vector.interpolate(self.start2.coordinates, self.end2.coordinates, k)
        return vector.distance(c1, c2)

    def _locate(self) -> ClosestApproach:
        k = self.closest_k
        if math.isnan(k):
            logger.debug(
                "Degenerate segment [%d, %d]: constant separation", self.start_time, self.end_time
            )
            return DegenerateApproach(distance=self.distance_at(k))

        start_time, end_time = self.start_time, self.end_time
        delta_time = end_time - start_time

        # discrete time: floor or the next integer, whichever gives the closer approach.
        # Rounded as an offset so the int64 start time is never converted to float.
        offset = min(delta_time, max(0, int(math.floor(k * delta_time))))
        time1 = start_time + offset
        time2 = min(end_time, time1 + 1)
        if time1 == time2:
            time = time1
        else:
            d1 = self.distance_at((time1 - start_time) / delta_time)
            d2 = self.distance_at((time2 - start_time) / delta_time)
            time = time1 if d1 <= d2 else time2

        coords1 = vector.interpolate(self.start1.coordinates, self.end1.coordinates, k)
        coords2 = vector.interpolate(self.start2.coordinates, self.end2.coordinates, k)
        return LocatedApproach.between(WayPoint(time, coords1), WayPoint(time, coords2))

    def __repr__(self):
        return (
            f"SegmentClosestApproach(t=[{self.start_time}, {self.end_time}], "
            f"k={self.closest_k}, approach={self.closest_approach!r})"
        )


def _check_segment(start1: WayPoint, end1: WayPoint, start2: WayPoint, end2: WayPoint) -> None:
    vector.check_same_dimension(
        start1.coordinates, end1.coordinates, start2.coordinates, end2.coordinates
    )
    if start1.time != start2.time:
        raise ValueError(f"Segments must share a start time, got {start1.time} and {start2.time}")
    if end1.time != end2.time:
        raise ValueError(f"Segments must share an end time, got {end1.time} and {end2.time}")
    if not start1.time < end1.time:
        raise ValueError(f"Segment start time {start1.time} must precede end time {end1.time}")
