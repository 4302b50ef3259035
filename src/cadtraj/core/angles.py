"""Angle helpers: degrees are the external unit, radians are internal."""

from __future__ import annotations

import math

FULL_TURN = 360.0
QUADRANT_ANGLES = (0.0, 90.0, 180.0, 270.0)


def to_radians(angle_deg: float) -> float:
    return angle_deg * math.pi / 180.0


def normalize_end_angle(start_deg: float, end_deg: float) -> float:
    """Return *end_deg* unwrapped to lie in [start_deg, start_deg + 360].

    An end angle behind the start is moved forward by whole turns; one more
    than a turn ahead is pulled back.  ``start + 360`` stays a full turn.
    """
    span = end_deg - start_deg
    if span < 0:
        return end_deg + FULL_TURN * math.ceil(-span / FULL_TURN)
    if span > FULL_TURN:
        return start_deg + (span % FULL_TURN or FULL_TURN)
    return end_deg


def sweep_degrees(start_deg: float, end_deg: float) -> float:
    """Counter-clockwise sweep from *start_deg* to *end_deg*, in [0, 360)."""
    sweep = (end_deg - start_deg) % FULL_TURN
    # -1e-17 % 360 rounds up to 360.0
    if sweep >= FULL_TURN:
        sweep = 0.0
    return sweep


def point_on_circle(
    cx: float,
    cy: float,
    radius: float,
    angle_deg: float,
) -> tuple[float, float]:
    """Point at *angle_deg* (CCW from +X) on a circle of *radius* around (cx, cy)."""
    rad = to_radians(angle_deg)
    return (cx + radius * math.cos(rad), cy + radius * math.sin(rad))


def angle_in_sweep(angle_deg: float, start_deg: float, end_deg: float) -> bool:
    """True if *angle_deg* lies on the CCW sweep from *start_deg* to *end_deg*."""
    span = normalize_end_angle(start_deg, end_deg) - start_deg
    return (angle_deg - start_deg) % FULL_TURN <= span
