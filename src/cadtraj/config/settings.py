"""Trajectory generation preferences."""

from __future__ import annotations

from dataclasses import dataclass, asdict
from typing import Any, Mapping

from .defaults import DEFAULT_RESOLUTION_DEG, ENDPOINT_TOLERANCE_DEG


@dataclass
class TrajectorySettings:
    """Batch-wide sampling options shared by every arc and circle.

    A non-positive ``angular_resolution_deg`` is accepted: arcs and circles
    then contribute no points, so callers check for empty trajectories.
    Saving and loading is left to the host application; ``to_dict`` /
    ``from_dict`` give it a JSON-friendly form.
    """

    angular_resolution_deg: float = DEFAULT_RESOLUTION_DEG
    endpoint_tolerance_deg: float = ENDPOINT_TOLERANCE_DEG

    def __post_init__(self) -> None:
        if self.endpoint_tolerance_deg < 0:
            raise ValueError("endpoint_tolerance_deg must not be negative")

    def to_dict(self) -> dict[str, Any]:
        return asdict(self)

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "TrajectorySettings":
        return cls(**{k: v for k, v in data.items() if k in cls.__dataclass_fields__})
