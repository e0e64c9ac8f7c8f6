"""
bezier.py
---------

Cubic Bezier approximations of circular arcs and axis-aligned ellipses.

Circular arcs are split into segments spanning at most 90deg; each segment uses
the standard handle length ``t = 4/3 * tan(theta / 4)``, which keeps the radial
error below 0.00027 R per quarter turn and gives tangent continuity between
consecutive segments.

Angles are in degrees and measured from +X toward +Y. With the screen
convention used throughout the package (y grows downward) increasing angles
therefore run clockwise on screen.
"""

from __future__ import annotations

__all__ = [
    "MAX_SEGMENT_DEG",
    "arc_sweep", "unit_circular_arc_segment", "circular_arc_points", "ellipse_points",
    "arc_end_point",
]

import math
import numpy as np
from numpy.typing import NDArray

from .geometry import Point, Rect, numeric

MAX_SEGMENT_DEG = 90.0


# ---------------------------------------------------------------------------
# Sweep resolution
# ---------------------------------------------------------------------------
def arc_sweep(start_deg: numeric, end_deg: numeric, clockwise: bool) -> float:
    """Signed angular sweep travelled from ``start_deg`` to ``end_deg``.

    ``clockwise=False`` travels with increasing angle, ``clockwise=True`` with
    decreasing angle. A zero span stays zero, any span of 360deg or more is
    a single full turn, and a negative span is wrapped into (0, 360).

    Returns:
        float: Sweep in degrees; positive for increasing angles.
    """
    delta = float(end_deg) - float(start_deg)
    if clockwise:
        delta = -delta
    if delta < 0:
        delta %= 360.0
    elif delta > 360.0:
        delta = 360.0
    return -delta if clockwise else delta


# ---------------------------------------------------------------------------
# Single segment Bezier approximation for an acute unit circular arc
# ---------------------------------------------------------------------------
def unit_circular_arc_segment(
        start_deg : float = 0.0,
        end_deg   : float = 90.0,
    ) -> NDArray[np.float64]:
    """Control points of a cubic Bezier approximating a unit circular arc.

    Args:
        start_deg: Start angle in degrees (0deg = +X axis).
        end_deg:   End angle in degrees. May be smaller than ``start_deg``.

    Returns:
        NDArray: (4, 2) array ``[P0, P1, P2, P3]``.

    Raises:
        ValueError: If the absolute angular span exceeds 90deg.
    """
    span = abs(end_deg - start_deg)
    if span > MAX_SEGMENT_DEG + 1e-9:
        raise ValueError(
            f"Span too large ({span:.2f}deg) for single cubic Bezier; "
            "split into <= 90deg segments."
        )

    start = np.radians(start_deg)
    end = np.radians(end_deg)
    t = 4.0 / 3.0 * np.tan((end - start) / 4.0)

    cos_s, sin_s = np.cos(start), np.sin(start)
    cos_e, sin_e = np.cos(end), np.sin(end)

    return np.array([
        (cos_s, sin_s),
        (cos_s - t * sin_s, sin_s + t * cos_s),
        (cos_e + t * sin_e, sin_e - t * cos_e),
        (cos_e, sin_e),
    ], dtype=float)


# ---------------------------------------------------------------------------
# Multi-segment circular arc
# ---------------------------------------------------------------------------
def circular_arc_points(
        center    : tuple[numeric, numeric],
        radius    : numeric,
        start_deg : numeric,
        sweep_deg : numeric,
    ) -> NDArray[np.float64]:
    """Bezier chain for a circular arc.

    Returns:
        NDArray: (1 + 3n, 2) array. Row 0 is the arc start; each following
            triple is ``(control1, control2, end)`` of one cubic segment.
            A zero sweep returns the start point only.
    """
    cx, cy = center
    sweep = float(sweep_deg)
    n_segments = math.ceil(abs(sweep) / MAX_SEGMENT_DEG - 1e-9) if sweep else 0

    start = math.radians(start_deg)
    points = [(math.cos(start), math.sin(start))]
    for i in range(n_segments):
        a0 = start_deg + sweep * i / n_segments
        a1 = start_deg + sweep * (i + 1) / n_segments
        points.extend(unit_circular_arc_segment(a0, a1)[1:])

    verts = np.asarray(points, dtype=float) * float(radius)
    verts[:, 0] += cx
    verts[:, 1] += cy
    return verts


# ---------------------------------------------------------------------------
# Ellipse inscribed into a rect
# ---------------------------------------------------------------------------
def ellipse_points(rect: Rect) -> NDArray[np.float64]:
    """Four-segment Bezier ellipse inscribed into ``rect``.

    The curve starts at ``(max_x, mid_y)`` and runs through increasing angles.

    Returns:
        NDArray: (13, 2) array laid out as in :func:`circular_arc_points`.
    """
    rect = rect.standardized()
    verts = circular_arc_points((0.0, 0.0), 1.0, 0.0, 360.0)
    verts[:, 0] = verts[:, 0] * rect.width / 2 + rect.mid_x
    verts[:, 1] = verts[:, 1] * rect.height / 2 + rect.mid_y
    return verts


def arc_end_point(center: tuple[numeric, numeric], radius: numeric,
                  angle_deg: numeric) -> Point:
    """Point on a circle at ``angle_deg``."""
    angle = math.radians(angle_deg)
    return Point(center[0] + radius * math.cos(angle), center[1] + radius * math.sin(angle))
