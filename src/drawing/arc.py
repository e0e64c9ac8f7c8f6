"""
arc.py
------

Implements the insettable round shapes:

  - Arc:    a single circular arc centered in the rect.
  - Circle: the largest circle fitting the rect, used for concentric rings.

Arc orientation convention
    Caller angles put 0deg at "up" and count toward the caller's notion of
    clockwise. The underlying arc command puts 0deg at +X. Before the command
    is built, both angles are therefore rotated back by 90deg and the
    clockwise flag is inverted. Rendered output depends on this exact
    convention.
"""

from __future__ import annotations

__all__ = ["Arc", "Circle", "arc_path", "ROTATION_ADJUSTMENT_DEG"]

import logging
from dataclasses import dataclass

from .base import InsettableShape, finite_or_none
from .geometry import Rect, numeric
from .path import ShapePath

logger = logging.getLogger(__name__)

ROTATION_ADJUSTMENT_DEG = 90.0


@dataclass(frozen=True)
class Arc(InsettableShape):
    """
    Circular arc of radius ``rect.width / 2 - inset_amount`` around the rect center.

    Attributes:
        start_angle: Start angle in degrees (0deg = up).
        end_angle: End angle in degrees.
        clockwise: Caller-facing direction flag (inverted for the arc command).
        inset_amount: Radial shrink; grows via :meth:`inset`.
    """

    start_angle  : float
    end_angle    : float
    clockwise    : bool
    inset_amount : float = 0.0

    def path(self, rect: Rect) -> ShapePath:
        path = ShapePath()
        rect = self._usable_rect(rect)
        if rect is None:
            return path

        start = finite_or_none("start_angle", self.start_angle)
        end = finite_or_none("end_angle", self.end_angle)
        inset = finite_or_none("inset_amount", self.inset_amount)
        if start is None or end is None or inset is None:
            logger.debug(f"{self!r}: non-finite parameter, returning empty path")
            return path

        radius = rect.width / 2 - inset
        if radius <= 0:
            logger.debug(f"{self!r}: radius {radius} <= 0, returning empty path")
            return path

        return path.add_arc(
            center=rect.center,
            radius=radius,
            start_angle=start - ROTATION_ADJUSTMENT_DEG,
            end_angle=end - ROTATION_ADJUSTMENT_DEG,
            clockwise=not self.clockwise,
        )


def arc_path(
        rect         : Rect,
        start_angle  : numeric,
        end_angle    : numeric,
        clockwise    : bool,
        inset_amount : numeric = 0.0,
    ) -> ShapePath:
    """Arc path for ``rect``; see :class:`Arc` for the angle convention."""
    return Arc(start_angle, end_angle, clockwise, inset_amount).path(rect)


@dataclass(frozen=True)
class Circle(InsettableShape):
    """Circle of diameter ``min(width, height) - 2 * inset_amount`` centered in the rect."""

    inset_amount: float = 0.0

    @staticmethod
    def radius_in(rect: Rect, inset_amount: numeric = 0.0) -> float:
        rect = rect.standardized()
        return min(rect.width, rect.height) / 2 - inset_amount

    def path(self, rect: Rect) -> ShapePath:
        path = ShapePath()
        rect = self._usable_rect(rect)
        if rect is None:
            return path

        inset = finite_or_none("inset_amount", self.inset_amount)
        if inset is None:
            return path

        radius = self.radius_in(rect, inset)
        if radius <= 0:
            logger.debug(f"{self!r}: radius {radius} <= 0, returning empty path")
            return path

        cx, cy = rect.center
        return path.add_ellipse(Rect(cx - radius, cy - radius, 2 * radius, 2 * radius))
