"""
Closest approaches between two objects following routes.

Each route is a sequence of space-time way points with increasing times; the
object moves uniformly between consecutive way points. Over the routes' common
period the separation varies (unless the motions are parallel); this module finds
when and where the objects are closest. Several closest approaches, at different
times but with exactly the same separation, are possible. Routes with no common
period have no closest approach.
"""
import logging
from typing import Any, Dict, List, Tuple

from closest_approach.config import settings
from closest_approach.engine.alignment import align, align_times, overlap_window
from closest_approach.engine.segment import SegmentClosestApproach
from closest_approach.models.approach import ClosestApproach, LocatedApproach
from closest_approach.models.route import as_route
from closest_approach.models.waypoint import WayPoint

logger = logging.getLogger(__name__)


def _segment_approaches(
    aligned1: List[WayPoint], aligned2: List[WayPoint]
) -> List[SegmentClosestApproach]:
    return [
        SegmentClosestApproach(aligned1[i], aligned1[i + 1], aligned2[i], aligned2[i + 1])
        for i in range(len(aligned1) - 1)
    ]


def _recorded(segments: List[SegmentClosestApproach]) -> List[ClosestApproach]:
    """
    Per-segment closest approaches, without double counting.
    An approach exactly at a segment's end (k == 1) is also the start (k == 0)
    of the next segment, so it is only kept for the final segment.
    """
    last = len(segments) - 1
    recorded = []
    for i, seg in enumerate(segments):
        if seg.closest_k == 1 and i < last:
            logger.debug("Segment [%d, %d]: approach at end, left to next segment",
                         seg.start_time, seg.end_time)
            continue
        recorded.append(seg.closest_approach)
    return recorded


def _closest(recorded: List[ClosestApproach]) -> Tuple[ClosestApproach, ...]:
    # exact equality: ties only come from identical arithmetic on identical geometry
    min_distance = min(ca.distance for ca in recorded)
    return tuple(ca for ca in recorded if ca.distance == min_distance)


class RouteClosestApproach:
    """
    Closest approaches between object 1 on route1 and object 2 on route2.

    Routes need two or more way points with strictly increasing times.
    `closest_approaches` is sorted by time, all entries share the minimal
    separation, and it is empty (never None) when the routes share no time.
    """

    def __init__(self, route1, route2):
        self.route1 = as_route(route1)
        self.route2 = as_route(route2)

        # align the routes in time
        self.aligned_times = align_times(self.route1, self.route2)
        self.aligned1 = align(self.route1, self.aligned_times)
        self.aligned2 = align(self.route2, self.aligned_times)
        if settings.CHECK_CONTRACTS and not (
            len(self.aligned1) == len(self.aligned2) == len(self.aligned_times)
        ):
            raise ValueError(
                f"Aligned routes disagree: {len(self.aligned1)} and {len(self.aligned2)} way points "
                f"for {len(self.aligned_times)} times"
            )

        self.segments: List[SegmentClosestApproach] = []
        self.closest_approaches = self._compute()

    def _compute(self) -> Tuple[ClosestApproach, ...]:
        if not self.aligned_times:
            return ()
        if len(self.aligned_times) == 1:
            # one route ends exactly when the other starts
            return (LocatedApproach.between(self.aligned1[0], self.aligned2[0]),)

        self.segments = _segment_approaches(self.aligned1, self.aligned2)
        closest = _closest(_recorded(self.segments))
        logger.debug("%d closest approach(es) at distance %g over %d segments",
                     len(closest), closest[0].distance, len(self.segments))
        return closest

    @property
    def min_distance(self) -> float:
        """Separation at closest approach; inf when the routes share no time."""
        if not self.closest_approaches:
            return float("inf")
        return self.closest_approaches[0].distance

    def summary(self) -> Dict[str, Any]:
        start_time, end_time = overlap_window(self.route1, self.route2)
        return {
            "overlap_start": int(start_time),
            "overlap_end": int(end_time),
            "overlaps": bool(self.aligned_times),
            "aligned_times": len(self.aligned_times),
            "segments": len(self.segments),
            "min_distance": float(self.min_distance),
            "closest_approaches": len(self.closest_approaches),
            "degenerate": any(ca.is_degenerate for ca in self.closest_approaches),
        }


def compute_closest_approaches(route1, route2) -> Tuple[ClosestApproach, ...]:
    """The (possibly empty) closest approaches between two routes, in time order."""
    return RouteClosestApproach(route1, route2).closest_approaches
