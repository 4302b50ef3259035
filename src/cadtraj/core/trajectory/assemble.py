"""Build robot trajectories and preview polylines from selected entities.

Every arc and circle in a batch is sampled with the same angular
resolution; there is no per-entity override.
"""

from __future__ import annotations

from typing import Optional, Sequence

from shapely.geometry import LineString

from ...config.defaults import DEFAULT_NOZZLE_NUMBER
from ...config.settings import TrajectorySettings
from ..discretize import convert_entity
from ..entities import Entity, entity_kind
from .base import Trajectory, TrajectorySegment

MIXED = "Mixed"


def assemble_trajectory(
    entities: Sequence[Entity],
    settings: Optional[TrajectorySettings] = None,
    nozzle_number: int = DEFAULT_NOZZLE_NUMBER,
    is_water: bool = True,
) -> Trajectory:
    """Concatenate the point sequences of *entities* in selection order.

    Parameters
    ----------
    entities:
        Selected entities, in the order the robot should visit them.
    settings:
        Sampling options; defaults to :class:`TrajectorySettings()`.

    Returns
    -------
    A Trajectory with one segment per entity.  ``entity_type`` is the kind
    shared by all entities, or ``"Mixed"``.
    """
    if settings is None:
        settings = TrajectorySettings()

    kinds = {entity_kind(e) for e in entities} - {None}
    if len(kinds) == 1:
        entity_type = kinds.pop()
    elif kinds:
        entity_type = MIXED
    else:
        entity_type = ""

    trajectory = Trajectory(
        nozzle_number=nozzle_number,
        is_water=is_water,
        entity_type=entity_type,
    )
    for entity in entities:
        points = convert_entity(
            entity,
            settings.angular_resolution_deg,
            settings.endpoint_tolerance_deg,
        )
        trajectory.add_segment(TrajectorySegment(entity_kind(entity) or "", points))

    return trajectory


def preview_polylines(
    entities: Sequence[Entity],
    resolution_deg: float,
) -> list[LineString]:
    """One polyline per entity for on-screen trajectory preview.

    Entities that yield fewer than two points are left out.
    """
    lines: list[LineString] = []
    for entity in entities:
        points = convert_entity(entity, resolution_deg)
        if len(points) > 1:
            lines.append(LineString([pt.as_tuple() for pt in points]))
    return lines
