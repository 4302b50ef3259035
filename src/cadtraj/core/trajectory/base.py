"""Core trajectory data structures."""

from __future__ import annotations

from dataclasses import dataclass, field

import numpy as np
from shapely.geometry import LineString

from ...config.defaults import DEFAULT_NOZZLE_NUMBER
from ..entities import Point2D


@dataclass
class TrajectorySegment:
    """The points contributed by one entity."""
    entity_kind: str
    points: list[Point2D] = field(default_factory=list)

    def is_empty(self) -> bool:
        return len(self.points) == 0


@dataclass
class Trajectory:
    """Ordered waypoints for one nozzle pass, built from selected entities."""
    segments: list[TrajectorySegment] = field(default_factory=list)
    nozzle_number: int = DEFAULT_NOZZLE_NUMBER
    is_water: bool = True
    entity_type: str = ""

    def add_segment(self, seg: TrajectorySegment) -> None:
        self.segments.append(seg)

    @property
    def points(self) -> list[Point2D]:
        """All waypoints, concatenated in selection order."""
        return [pt for seg in self.segments for pt in seg.points]

    @property
    def total_points(self) -> int:
        return sum(len(s.points) for s in self.segments)

    @property
    def is_empty(self) -> bool:
        return all(s.is_empty() for s in self.segments)

    def as_array(self) -> np.ndarray:
        """Waypoints as an (N, 2) float64 array."""
        if self.is_empty:
            return np.empty((0, 2), dtype=np.float64)
        return np.array([pt.as_tuple() for pt in self.points], dtype=np.float64)

    def as_linestring(self) -> LineString:
        """Waypoints as a shapely LineString (empty if fewer than two points)."""
        pts = self.points
        if len(pts) < 2:
            return LineString()
        return LineString([pt.as_tuple() for pt in pts])
