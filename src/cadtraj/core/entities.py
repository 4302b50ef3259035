"""CAD entity value types.

Entities arrive from the drawing loader already in drawing coordinates.
They are immutable; converters never keep a reference to them.
"""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Any, Callable, Optional, TypeVar, Union


@dataclass(frozen=True)
class Point2D:
    """A point in drawing space."""
    x: float
    y: float

    def as_tuple(self) -> tuple[float, float]:
        return (self.x, self.y)

    def distance_to(self, other: Point2D) -> float:
        return math.hypot(other.x - self.x, other.y - self.y)


@dataclass(frozen=True)
class Segment:
    """Straight line from *start* to *end*."""
    start: Point2D
    end: Point2D

    kind = "line"


@dataclass(frozen=True)
class Arc:
    """Circular arc swept counter-clockwise from *start_angle* to *end_angle*.

    Angles are in degrees measured from the positive X axis and may wrap
    past 360.
    """
    center: Point2D
    radius: float
    start_angle: float
    end_angle: float

    kind = "arc"

    def __post_init__(self) -> None:
        if self.radius <= 0:
            raise ValueError(f"Arc radius must be positive, got {self.radius}")


@dataclass(frozen=True)
class Circle:
    """Full circle."""
    center: Point2D
    radius: float

    kind = "circle"

    def __post_init__(self) -> None:
        if self.radius <= 0:
            raise ValueError(f"Circle radius must be positive, got {self.radius}")


Entity = Union[Segment, Arc, Circle]

T = TypeVar("T")


def dispatch_entity(
    entity: Any,
    on_segment: Callable[[Segment], T],
    on_arc: Callable[[Arc], T],
    on_circle: Callable[[Circle], T],
    default: Optional[T] = None,
) -> Optional[T]:
    """Call the handler for *entity*'s variant, or return *default*.

    Every variant needs a handler, so adding one to :data:`Entity` breaks
    each caller until it handles the new case.
    """
    if isinstance(entity, Segment):
        return on_segment(entity)
    if isinstance(entity, Arc):
        return on_arc(entity)
    if isinstance(entity, Circle):
        return on_circle(entity)
    return default


def entity_kind(entity: Any) -> Optional[str]:
    """``"line"``, ``"arc"`` or ``"circle"``; None for anything else."""
    return dispatch_entity(
        entity,
        lambda s: s.kind,
        lambda a: a.kind,
        lambda c: c.kind,
    )
