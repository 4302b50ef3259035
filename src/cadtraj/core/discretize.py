"""Entity → point sequence conversion.

Segments are passed through as their two end points.  Arcs and circles are
sampled at a fixed angular step; arcs always finish exactly on their end
point, circles are left open (the first point is not repeated).
"""

from __future__ import annotations

import math

from ..config.defaults import ENDPOINT_TOLERANCE_DEG
from .angles import FULL_TURN, normalize_end_angle, point_on_circle
from .entities import Arc, Circle, Entity, Point2D, Segment, dispatch_entity


def segment_to_points(segment: Segment) -> list[Point2D]:
    return [segment.start, segment.end]


def arc_to_points(
    arc: Arc,
    resolution_deg: float,
    endpoint_tolerance_deg: float = ENDPOINT_TOLERANCE_DEG,
) -> list[Point2D]:
    """Sample *arc* every *resolution_deg* from its start angle to its end angle.

    Parameters
    ----------
    resolution_deg:
        Angular step in degrees.  Non-positive values yield ``[]``.
    endpoint_tolerance_deg:
        If the last sampled angle misses the end angle by more than this,
        the exact end point is appended.

    Returns
    -------
    Points in order of increasing angle.
    """
    if resolution_deg <= 0:
        return []

    start = arc.start_angle
    end = normalize_end_angle(start, arc.end_angle)
    cx, cy = arc.center.x, arc.center.y

    points: list[Point2D] = []
    last_angle = start
    steps = int(math.ceil((end - start) / resolution_deg)) + 1
    for i in range(steps):
        angle = start + i * resolution_deg
        if angle > end:
            break
        points.append(Point2D(*point_on_circle(cx, cy, arc.radius, angle)))
        last_angle = angle

    # Land exactly on the end point
    if abs(last_angle - end) > endpoint_tolerance_deg:
        points.append(Point2D(*point_on_circle(cx, cy, arc.radius, end)))

    return points


def circle_to_points(circle: Circle, resolution_deg: float) -> list[Point2D]:
    """Sample *circle* every *resolution_deg* over [0, 360), starting at 0°."""
    if resolution_deg <= 0:
        return []

    cx, cy = circle.center.x, circle.center.y
    points: list[Point2D] = []
    i = 0
    angle = 0.0
    while angle < FULL_TURN:
        points.append(Point2D(*point_on_circle(cx, cy, circle.radius, angle)))
        i += 1
        angle = i * resolution_deg
    return points


def convert_entity(
    entity: Entity,
    resolution_deg: float,
    endpoint_tolerance_deg: float = ENDPOINT_TOLERANCE_DEG,
) -> list[Point2D]:
    """Convert one entity to its ordered trajectory points.

    *resolution_deg* is ignored for segments, which always give their two
    end points.  Arcs and circles give an empty list for a non-positive
    resolution.  Objects that are not a Segment, Arc or Circle give an
    empty list.
    """
    return dispatch_entity(
        entity,
        segment_to_points,
        lambda arc: arc_to_points(arc, resolution_deg, endpoint_tolerance_deg),
        lambda circle: circle_to_points(circle, resolution_deg),
        default=[],
    )
