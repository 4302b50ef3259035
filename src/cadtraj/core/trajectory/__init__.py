"""Trajectory assembly package."""

from .base import Trajectory, TrajectorySegment
from .assemble import assemble_trajectory, preview_polylines

__all__ = ["Trajectory", "TrajectorySegment", "assemble_trajectory", "preview_polylines"]
