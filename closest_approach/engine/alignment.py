"""
Time alignment of two routes.

The routes' way points generally have different times. Both routes are
resampled onto one common, ascending set of times so that consecutive aligned
way points of the two routes bound the same time interval.
"""
import logging
from typing import List, Sequence, Tuple

from closest_approach.models.route import Route, as_route
from closest_approach.models.waypoint import WayPoint

logger = logging.getLogger(__name__)


def overlap_window(route1: Route, route2: Route) -> Tuple[int, int]:
    """
    (start, end) of the period common to both routes.
    start > end when the routes do not overlap in time.
    """
    return (
        max(route1.start_time, route2.start_time),
        min(route1.end_time, route2.end_time),
    )


def align_times(route1, route2) -> Tuple[int, ...]:
    """
    Ascending, de-duplicated way point times of both routes that fall inside
    the routes' common period (inclusive). Empty if the periods do not overlap.
    """
    route1, route2 = as_route(route1), as_route(route2)
    start_time, end_time = overlap_window(route1, route2)
    if start_time > end_time:
        logger.debug("Routes do not overlap in time ([%d, %d])", start_time, end_time)
        return ()

    merged = {
        t for t in route1.times + route2.times
        if start_time <= t <= end_time
    }
    times = tuple(sorted(merged))
    logger.debug("Aligned %d times in [%d, %d]", len(times), start_time, end_time)
    return times


def align(route, times: Sequence[int]) -> List[WayPoint]:
    """
    One way point per time in `times` (ascending), interpolated along the route.

    The route is walked forward once, segment by segment, in step with the times.
    Times before the route's start or after its end are skipped. When `times`
    is a superset of the route's own times (within its period) the original way
    points are reproduced exactly.
    """
    route = as_route(route)
    wps = route.way_points
    last_segment = len(wps) - 2

    aligned: List[WayPoint] = []
    segment = 0
    for time in times:
        if time < route.start_time:
            continue
        if time > route.end_time:
            break
        while segment < last_segment and wps[segment + 1].time < time:
            segment += 1
        aligned.append(WayPoint.interpolate(wps[segment], wps[segment + 1], time))
    return aligned
