"""
geometry.py
-----------

Value types shared by all shape generators.

Coordinates follow the screen convention used by the callers of this package:
x grows to the right and y grows downward, so ``min_y`` is the top edge of a
rectangle and ``max_y`` its bottom edge.
"""

from __future__ import annotations

__all__ = ["numeric", "Point", "Rect"]

import math
from dataclasses import dataclass
from typing import NamedTuple, TypeAlias, Union

numeric: TypeAlias = Union[int, float]


class Point(NamedTuple):
    """Real-valued (x, y) coordinate pair."""
    x: float
    y: float


@dataclass(frozen=True)
class Rect:
    """Immutable bounding rectangle supplied by the caller at render time.

    Attributes:
        x: Left edge (for a standardized rect).
        y: Top edge (for a standardized rect).
        width: Horizontal extent. May be negative before standardization.
        height: Vertical extent. May be negative before standardization.
    """

    x      : float = 0.0
    y      : float = 0.0
    width  : float = 0.0
    height : float = 0.0

    @classmethod
    def from_size(cls, width: numeric, height: numeric) -> Rect:
        """Rect of the given size anchored at the origin."""
        return cls(0.0, 0.0, float(width), float(height))

    # -------------------------------------------------------------------------
    # Edges and centers
    # -------------------------------------------------------------------------
    @property
    def min_x(self) -> float: return min(self.x, self.x + self.width)

    @property
    def max_x(self) -> float: return max(self.x, self.x + self.width)

    @property
    def mid_x(self) -> float: return self.x + self.width / 2

    @property
    def min_y(self) -> float: return min(self.y, self.y + self.height)

    @property
    def max_y(self) -> float: return max(self.y, self.y + self.height)

    @property
    def mid_y(self) -> float: return self.y + self.height / 2

    @property
    def center(self) -> Point:
        return Point(self.mid_x, self.mid_y)

    @property
    def size(self) -> tuple[float, float]:
        return (self.width, self.height)

    # -------------------------------------------------------------------------
    # Normalization
    # -------------------------------------------------------------------------
    @property
    def is_finite(self) -> bool:
        return all(math.isfinite(v) for v in (self.x, self.y, self.width, self.height))

    @property
    def is_empty(self) -> bool:
        """True for a zero-area or non-finite rect."""
        if not self.is_finite:
            return True
        return self.width == 0 or self.height == 0

    def standardized(self) -> Rect:
        """Return the same area with non-negative width and height."""
        return Rect(self.min_x, self.min_y, abs(self.width), abs(self.height))

    def inset(self, dx: numeric, dy: numeric = None) -> Rect:
        """Shrink the rect by ``dx`` on the left/right and ``dy`` on the top/bottom.

        Args:
            dx: Horizontal inset applied to each side.
            dy: Vertical inset applied to each side; defaults to ``dx``.

        Returns:
            Rect: Standardized inset rect. An inset larger than half the size
                collapses that dimension to zero around the center.
        """
        if dy is None:
            dy = dx
        std = self.standardized()
        width = max(0.0, std.width - 2 * dx)
        height = max(0.0, std.height - 2 * dy)
        return Rect(std.mid_x - width / 2, std.mid_y - height / 2, width, height)

    def contains(self, point: tuple[numeric, numeric], tol: float = 1e-9) -> bool:
        """Inclusive point-in-rect test with a small tolerance."""
        px, py = point
        return (self.min_x - tol <= px <= self.max_x + tol
                and self.min_y - tol <= py <= self.max_y + tol)
