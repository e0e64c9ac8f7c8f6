"""
triangle.py
-----------

Implements the Triangle shape: apex at the top middle of the rect, base along
its bottom edge.
"""

from __future__ import annotations

__all__ = ["Triangle", "triangle_path"]

from dataclasses import dataclass

from .base import Shape
from .geometry import Rect
from .path import ShapePath


@dataclass(frozen=True)
class Triangle(Shape):
    """Closed triangle through (mid_x, min_y), (min_x, max_y) and (max_x, max_y)."""

    def path(self, rect: Rect) -> ShapePath:
        path = ShapePath()
        rect = self._usable_rect(rect)
        if rect is None:
            return path

        apex = (rect.mid_x, rect.min_y)
        return (path.move_to(apex)
                    .line_to((rect.min_x, rect.max_y))
                    .line_to((rect.max_x, rect.max_y))
                    .line_to(apex)
                    .close())


def triangle_path(rect: Rect) -> ShapePath:
    return Triangle().path(rect)
