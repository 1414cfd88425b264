# closest_approach/models/waypoint.py
import math
import numbers

import numpy as np

from closest_approach.config import settings
from closest_approach.physics import vector


def _as_time(time) -> int:
    if isinstance(time, (bool, np.bool_)):
        raise ValueError(f"Way point time must be an integer, got {time!r}")
    if isinstance(time, (float, np.floating)):
        if not math.isfinite(time) or time != int(time):
            raise ValueError(f"Way point time must be an integer, got {time!r}")
    elif not isinstance(time, numbers.Integral):
        raise ValueError(f"Way point time must be an integer, got {time!r}")
    t = int(time)
    if not settings.TIME_MIN <= t <= settings.TIME_MAX:
        raise ValueError(f"Way point time {t} is outside the 64-bit range")
    return t


class WayPoint:
    """
    A time and a set of spatial coordinates: some object is to be at the given
    coordinates at the given time.

    The dimensionality of the coordinates is not fixed (1-D, 2-D, 3-D, ...).
    Time and coordinates are agnostic about origin and units; distance between
    coordinates is Euclidean.
    """
    __slots__ = ("_time", "_coordinates")

    def __init__(self, time, coordinates):
        coords = vector.as_vector(coordinates).copy()
        coords.flags.writeable = False
        self._time = _as_time(time)
        self._coordinates = coords

    @property
    def time(self) -> int:
        return self._time

    @property
    def coordinates(self) -> np.ndarray:
        """Read-only coordinate vector."""
        return self._coordinates

    @property
    def dimension(self) -> int:
        return len(self._coordinates)

    def distance(self, other: "WayPoint") -> float:
        """Spatial distance to another way point (symmetric, ignores time)."""
        return vector.distance(self._coordinates, other._coordinates)

    @staticmethod
    def interpolate(start: "WayPoint", end: "WayPoint", time) -> "WayPoint":
        """
        Way point at `time` of an object moving uniformly from start to end.

        Times outside [start.time, end.time] extrapolate the same uniform motion.
        The end time must be later than the start time.
        """
        time = _as_time(time)
        if settings.CHECK_CONTRACTS:
            if not start.time < end.time:
                raise ValueError(
                    f"Interpolation needs start.time < end.time, got {start.time} and {end.time}"
                )
            vector.check_same_dimension(start.coordinates, end.coordinates)

        # fraction of [start.time, end.time]; exact int arithmetic before the division
        k = (time - start.time) / (end.time - start.time)
        return WayPoint(time, vector.interpolate(start.coordinates, end.coordinates, k))

    def __eq__(self, other):
        if self is other:
            return True
        if not isinstance(other, WayPoint):
            return NotImplemented
        return self._time == other._time and np.array_equal(self._coordinates, other._coordinates)

    def __hash__(self):
        return hash((self._time, tuple(self._coordinates.tolist())))

    def __repr__(self):
        return f"WayPoint(time={self._time}, coordinates={self._coordinates.tolist()})"


def interpolate_time(start_time: int, end_time: int, k: float) -> int:
    """
    Integer time at fraction k of [start_time, end_time] (k=0 -> start, k=1 -> end).
    Halves round up.
    """
    return int(start_time) + int(math.floor(k * (end_time - start_time) + 0.5))
