# closest_approach/models/route.py
from typing import Iterable, Optional, Sequence, Tuple

import numpy as np

from closest_approach.config import settings
from closest_approach.models.waypoint import WayPoint


class Route:
    """
    Ordered way points with strictly increasing times.
    Between consecutive way points the object moves uniformly.
    """
    __slots__ = ("_way_points",)

    def __init__(self, way_points: Iterable[WayPoint]):
        wps = tuple(way_points)
        if settings.CHECK_CONTRACTS:
            _check_route(wps)
        self._way_points = wps

    @classmethod
    def from_points(cls, points: Iterable[Tuple[int, Sequence[float]]]) -> "Route":
        """Build a route from (time, coordinates) pairs."""
        return cls(WayPoint(t, coords) for t, coords in points)

    @property
    def way_points(self) -> Tuple[WayPoint, ...]:
        return self._way_points

    @property
    def start(self) -> WayPoint:
        return self._way_points[0]

    @property
    def end(self) -> WayPoint:
        return self._way_points[-1]

    @property
    def start_time(self) -> int:
        return self._way_points[0].time

    @property
    def end_time(self) -> int:
        return self._way_points[-1].time

    @property
    def dimension(self) -> int:
        return self._way_points[0].dimension

    @property
    def times(self) -> Tuple[int, ...]:
        return tuple(wp.time for wp in self._way_points)

    @property
    def coordinates(self) -> np.ndarray:
        """(n_way_points, dimension) array of the way point coordinates."""
        return np.vstack([wp.coordinates for wp in self._way_points])

    def position_at(self, time: int) -> Optional[WayPoint]:
        """
        The object's way point at `time`, or None outside [start_time, end_time].
        A time equal to a way point's time returns that way point.
        """
        if time < self.start_time or time > self.end_time:
            return None
        wps = self._way_points
        for i in range(len(wps) - 1):
            if wps[i].time <= time < wps[i + 1].time:
                if time == wps[i].time:
                    return wps[i]
                return WayPoint.interpolate(wps[i], wps[i + 1], time)
        return wps[-1]

    def __len__(self):
        return len(self._way_points)

    def __iter__(self):
        return iter(self._way_points)

    def __getitem__(self, i):
        return self._way_points[i]

    def __eq__(self, other):
        if not isinstance(other, Route):
            return NotImplemented
        return self._way_points == other._way_points

    def __hash__(self):
        return hash(self._way_points)

    def __repr__(self):
        return f"Route({len(self._way_points)} way points, t=[{self.start_time}, {self.end_time}])"


def _check_route(wps: Tuple[WayPoint, ...]) -> None:
    if len(wps) < settings.MIN_ROUTE_WAY_POINTS:
        raise ValueError(
            f"A route needs at least {settings.MIN_ROUTE_WAY_POINTS} way points, got {len(wps)}"
        )
    for wp in wps:
        if not isinstance(wp, WayPoint):
            raise ValueError(f"Route entries must be WayPoint, got {type(wp).__name__}")
    dims = {wp.dimension for wp in wps}
    if len(dims) > 1:
        raise ValueError(f"Route way points must share one dimension, got {sorted(dims)}")
    for prev, nxt in zip(wps, wps[1:]):
        if prev.time >= nxt.time:
            raise ValueError(
                f"Route times must be strictly increasing ({prev.time} then {nxt.time})"
            )


def as_route(obj) -> Route:
    if isinstance(obj, Route):
        return obj
    return Route(obj)
