# closest_approach/models/approach.py
"""
Closest approach of two objects' motions.

Two variants:
  - LocatedApproach: a time and the two objects' way points at that time.
  - DegenerateApproach: parallel (or anti-parallel, or both stationary) motion.
    Only the constant separation is defined; there is no time and no way points.
"""
from __future__ import annotations

import math
from dataclasses import dataclass, field

from closest_approach.config import settings
from closest_approach.models.waypoint import WayPoint


@dataclass(frozen=True)
class ClosestApproach:
    distance: float

    is_degenerate = False

    def __post_init__(self):
        d = float(self.distance)
        if not (math.isfinite(d) and d >= 0.0):
            raise ValueError(f"Closest approach distance must be finite and >= 0, got {self.distance!r}")
        object.__setattr__(self, "distance", d)


@dataclass(frozen=True)
class DegenerateApproach(ClosestApproach):
    """Constant separation over the whole interval; no unique closest instant."""

    is_degenerate = True


@dataclass(frozen=True)
class LocatedApproach(ClosestApproach):
    time: int
    way_point1: WayPoint = field(repr=False)
    way_point2: WayPoint = field(repr=False)

    def __post_init__(self):
        if settings.CHECK_CONTRACTS:
            if self.way_point1 is None or self.way_point2 is None:
                raise ValueError("A located closest approach needs both way points")
            if not self.way_point1.time == self.way_point2.time == self.time:
                raise ValueError(
                    "Way points of a closest approach must share its time "
                    f"({self.way_point1.time}, {self.way_point2.time}, {self.time})"
                )
        super().__post_init__()

    @classmethod
    def between(cls, way_point1: WayPoint, way_point2: WayPoint) -> "LocatedApproach":
        """Closest approach at the two objects' way points; time and distance follow from them."""
        return cls(
            distance=way_point1.distance(way_point2),
            time=way_point1.time,
            way_point1=way_point1,
            way_point2=way_point2,
        )
