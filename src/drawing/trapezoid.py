"""
trapezoid.py
------------

Implements the Trapezoid shape: the bounding rect's bottom edge joined to a top
edge pulled in by ``inset_amount`` on each side.

Callers animate the shape by calling the generator repeatedly with
interpolated inset values; the generator itself has no notion of time.
"""

from __future__ import annotations

__all__ = ["Trapezoid", "trapezoid_path", "random_trapezoid"]

import logging
from dataclasses import dataclass
from typing import Optional

from .base import Shape, finite_or_none
from .geometry import Rect, numeric
from .path import ShapePath
from .utils.rng import RNG, get_rng

logger = logging.getLogger(__name__)

DEFAULT_INSET_RANGE = (10.0, 90.0)


@dataclass(frozen=True)
class Trapezoid(Shape):
    """
    Four-point closed polygon: bottom-left, top-left + inset, top-right - inset,
    bottom-right, back to bottom-left.

    The inset is not clamped. An inset above half the width makes the top
    edge cross over, and a negative one widens it past the rect.
    """

    inset_amount: float = 50.0

    def path(self, rect: Rect) -> ShapePath:
        path = ShapePath()
        rect = self._usable_rect(rect)
        if rect is None:
            return path

        inset = finite_or_none("inset_amount", self.inset_amount)
        if inset is None:
            logger.debug(f"Trapezoid inset_amount={self.inset_amount}: empty path")
            return path

        return (path.move_to((rect.min_x, rect.max_y))
                    .line_to((rect.min_x + inset, rect.min_y))
                    .line_to((rect.max_x - inset, rect.min_y))
                    .line_to((rect.max_x, rect.max_y))
                    .line_to((rect.min_x, rect.max_y))
                    .close())


def trapezoid_path(rect: Rect, inset_amount: numeric) -> ShapePath:
    """Trapezoid path for ``rect`` with the top edge inset by ``inset_amount``."""
    return Trapezoid(inset_amount).path(rect)


def random_trapezoid(
        low  : float         = DEFAULT_INSET_RANGE[0],
        high : float         = DEFAULT_INSET_RANGE[1],
        rng  : Optional[RNG] = None,
    ) -> Trapezoid:
    """Trapezoid with a uniformly random inset in ``[low, high]``.

    Args:
        low: Smallest inset.
        high: Largest inset.
        rng: Caller's RNG. If None, uses get_rng().

    Raises:
        ValueError: If ``low > high``.
    """
    if low > high:
        raise ValueError(f"Invalid inset range: low={low} > high={high}")
    if rng is None:
        rng = get_rng()
    return Trapezoid(rng.uniform(low, high))
