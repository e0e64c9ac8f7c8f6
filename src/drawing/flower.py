"""
flower.py
---------

Implements the Flower shape: sixteen elliptical petals fanned around the rect
center, one every pi/8 radians.

Each petal starts as the ellipse inscribed in
``Rect(petal_offset, 0, petal_width, rect.width / 2)`` in the flower's local
frame. It is then rotated by its loop angle and translated to the rect center
(Affine2D: rotate -> translate). Every petal is kept as its own closed
subpath; whether overlaps render even-odd or non-zero is up to the caller.
"""

from __future__ import annotations

__all__ = ["Flower", "flower_path", "PETAL_COUNT"]

import math
import logging
from dataclasses import dataclass

from matplotlib.transforms import Affine2D

from .base import Shape, finite_or_none
from .geometry import Rect, numeric
from .path import ShapePath

logger = logging.getLogger(__name__)

PETAL_COUNT = 16
PETAL_STEP_RAD = math.pi / 8


@dataclass(frozen=True)
class Flower(Shape):
    """
    Attributes:
        petal_offset: How far each petal is moved away from the center.
        petal_width: How wide each petal is.
    """

    petal_offset : float = -20.0
    petal_width  : float = 100.0

    def path(self, rect: Rect) -> ShapePath:
        path = ShapePath()
        rect = self._usable_rect(rect)
        if rect is None:
            return path

        offset = finite_or_none("petal_offset", self.petal_offset)
        width = finite_or_none("petal_width", self.petal_width)
        if offset is None or width is None:
            logger.debug(f"{self!r}: non-finite parameter, returning empty path")
            return path

        petal = ShapePath().add_ellipse(Rect(offset, 0.0, width, rect.width / 2))
        cx, cy = rect.center

        # angles k * pi/8, k = 0..15
        for k in range(PETAL_COUNT):
            position = Affine2D().rotate(k * PETAL_STEP_RAD).translate(cx, cy)
            path.add_path(petal.transformed(position))
        return path


def flower_path(rect: Rect, petal_offset: numeric = -20.0,
                petal_width: numeric = 100.0) -> ShapePath:
    return Flower(petal_offset, petal_width).path(rect)
