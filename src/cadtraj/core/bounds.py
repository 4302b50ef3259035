"""Axis-aligned bounding boxes for entities and whole drawings.

Arcs are bounded by their full circle unless ``tight_arcs`` is requested.
The full-circle box always contains the arc whatever the sweep, which is
all view-fitting needs.
"""

from __future__ import annotations

import math
import warnings
from dataclasses import dataclass
from typing import Iterable, Optional

from shapely.geometry import Polygon, box

from .angles import QUADRANT_ANGLES, angle_in_sweep, point_on_circle
from .entities import Arc, Entity, Point2D, Segment, dispatch_entity


@dataclass(frozen=True)
class BoundingBox:
    """Axis-aligned box.  Use :meth:`empty` for "no geometry"."""

    min_x: float
    min_y: float
    max_x: float
    max_y: float

    @classmethod
    def empty(cls) -> BoundingBox:
        return cls(math.inf, math.inf, -math.inf, -math.inf)

    @property
    def is_empty(self) -> bool:
        return self.min_x > self.max_x or self.min_y > self.max_y

    @property
    def width(self) -> float:
        return 0.0 if self.is_empty else self.max_x - self.min_x

    @property
    def height(self) -> float:
        return 0.0 if self.is_empty else self.max_y - self.min_y

    @property
    def center(self) -> Optional[Point2D]:
        if self.is_empty:
            return None
        return Point2D((self.min_x + self.max_x) / 2, (self.min_y + self.max_y) / 2)

    def contains(self, point: Point2D) -> bool:
        return (
            not self.is_empty
            and self.min_x <= point.x <= self.max_x
            and self.min_y <= point.y <= self.max_y
        )

    def union(self, other: BoundingBox) -> BoundingBox:
        """Smallest box covering both.  An empty side contributes nothing."""
        if self.is_empty:
            return other
        if other.is_empty:
            return self
        return BoundingBox(
            min(self.min_x, other.min_x),
            min(self.min_y, other.min_y),
            max(self.max_x, other.max_x),
            max(self.max_y, other.max_y),
        )

    def to_polygon(self) -> Polygon:
        """Shapely rectangle for spatial queries (empty Polygon if empty)."""
        if self.is_empty:
            return Polygon()
        return box(self.min_x, self.min_y, self.max_x, self.max_y)


def _circle_box(center: Point2D, radius: float) -> BoundingBox:
    return BoundingBox(
        center.x - radius, center.y - radius,
        center.x + radius, center.y + radius,
    )


def _tight_arc_box(arc: Arc) -> BoundingBox:
    """Box of the swept range: both end points plus any crossed quadrant point."""
    cx, cy = arc.center.x, arc.center.y
    angles = [arc.start_angle, arc.end_angle]
    angles.extend(
        q for q in QUADRANT_ANGLES
        if angle_in_sweep(q, arc.start_angle, arc.end_angle)
    )
    pts = [point_on_circle(cx, cy, arc.radius, a) for a in angles]
    xs = [p[0] for p in pts]
    ys = [p[1] for p in pts]
    return BoundingBox(min(xs), min(ys), max(xs), max(ys))


def _segment_box(segment: Segment) -> BoundingBox:
    s, e = segment.start, segment.end
    return BoundingBox(
        min(s.x, e.x), min(s.y, e.y),
        max(s.x, e.x), max(s.y, e.y),
    )


def _bounds(entity, tight_arcs: bool) -> Optional[BoundingBox]:
    return dispatch_entity(
        entity,
        _segment_box,
        lambda arc: _tight_arc_box(arc) if tight_arcs else _circle_box(arc.center, arc.radius),
        lambda circle: _circle_box(circle.center, circle.radius),
    )


def entity_bounds(entity, tight_arcs: bool = False) -> Optional[BoundingBox]:
    """Bounding box of one entity, or None if it contributes no bounds.

    Unsupported objects and entities whose box cannot be computed (for
    example non-finite coordinates) give None rather than raising.
    """
    try:
        bounds = _bounds(entity, tight_arcs)
    except (ArithmeticError, ValueError, TypeError, AttributeError) as exc:
        warnings.warn(f"Entity bounds failed: {exc}", RuntimeWarning, stacklevel=2)
        return None
    if bounds is None:
        return None
    if not all(math.isfinite(v) for v in (bounds.min_x, bounds.min_y, bounds.max_x, bounds.max_y)):
        warnings.warn(
            f"Entity bounds are not finite: {entity}", RuntimeWarning, stacklevel=2,
        )
        return None
    return bounds


def aggregate_bounds(entities: Iterable[Entity], tight_arcs: bool = False) -> BoundingBox:
    """Union of the bounds of *entities*.

    Entities without bounds are skipped.  Returns :meth:`BoundingBox.empty`
    when nothing contributed.
    """
    total = BoundingBox.empty()
    for entity in entities:
        bounds = entity_bounds(entity, tight_arcs)
        if bounds is not None:
            total = total.union(bounds)
    return total
