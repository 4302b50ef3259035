"""Renderer-agnostic arc descriptors.

A display layer that draws curves natively (SVG ``A`` commands, Qt
``arcTo``, WPF ``ArcSegment``) needs the two end points, the radius and the
large-arc / sweep flags rather than sampled points.
"""

from __future__ import annotations

import math
import warnings
from dataclasses import dataclass
from typing import Iterable, Optional

from .angles import point_on_circle, sweep_degrees
from .entities import Arc, Point2D


@dataclass(frozen=True)
class ArcPathDescriptor:
    start_point: Point2D
    end_point: Point2D
    radius: float
    is_large_arc: bool
    sweep_clockwise: bool = False
    sweep_angle: float = 0.0  # degrees, [0, 360)


def _describe(arc: Arc) -> ArcPathDescriptor:
    cx, cy = arc.center.x, arc.center.y
    start = point_on_circle(cx, cy, arc.radius, arc.start_angle)
    end = point_on_circle(cx, cy, arc.radius, arc.end_angle)
    sweep = sweep_degrees(arc.start_angle, arc.end_angle)

    values = (*start, *end, arc.radius, sweep)
    if not all(math.isfinite(v) for v in values):
        raise ValueError(f"non-finite arc geometry: {arc}")

    # Arcs are always authored counter-clockwise
    return ArcPathDescriptor(
        start_point=Point2D(*start),
        end_point=Point2D(*end),
        radius=arc.radius,
        is_large_arc=sweep > 180.0,
        sweep_clockwise=False,
        sweep_angle=sweep,
    )


def build_arc_path(arc: Arc) -> Optional[ArcPathDescriptor]:
    """Describe *arc* for native curve rendering.

    Returns None when the descriptor cannot be computed so the caller can
    skip this one entity and carry on with the rest of the drawing.
    """
    if not isinstance(arc, Arc):
        return None
    try:
        return _describe(arc)
    except (ArithmeticError, ValueError, TypeError) as exc:
        warnings.warn(f"Arc path construction failed: {exc}", RuntimeWarning, stacklevel=2)
        return None


def build_arc_paths(entities: Iterable[object]) -> list[ArcPathDescriptor]:
    """Descriptors for every arc in *entities* that could be described."""
    paths: list[ArcPathDescriptor] = []
    for entity in entities:
        if not isinstance(entity, Arc):
            continue
        path = build_arc_path(entity)
        if path is not None:
            paths.append(path)
    return paths
