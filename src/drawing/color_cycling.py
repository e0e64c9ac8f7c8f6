"""
color_cycling.py
----------------

Hue tables for the colour-cycling concentric circle.

Ring ``step`` (0-based, out of ``steps``) is inset by ``step`` units from the
outermost circle and drawn with a vertical gradient from a bright to a
half-bright colour of hue

    hue = (step / steps + amount) mod 1

Moving ``amount`` through [0, 1] rotates the rainbow around the rings.
"""

from __future__ import annotations

__all__ = ["RGB", "ColorStop", "ColorRing", "color_cycling_stops", "color_cycling_rings"]

import logging
from typing import NamedTuple, TypeAlias

from matplotlib import colors

from .arc import Circle
from .base import finite_or_none, non_negative_count
from .geometry import Rect, numeric
from .path import ShapePath

logger = logging.getLogger(__name__)

RGB: TypeAlias = tuple[float, float, float]

BRIGHT = 1.0
DIM = 0.5
SATURATION = 1.0


class ColorStop(NamedTuple):
    """One ring's colour pair.

    Attributes:
        inset: Radial inset of the ring from the outermost circle (= step).
        hue: Hue in [0, 1).
        bright: RGB at full brightness.
        dim: RGB at half brightness.
    """
    inset  : float
    hue    : float
    bright : RGB
    dim    : RGB


class ColorRing(NamedTuple):
    path : ShapePath
    stop : ColorStop


def _hsb(hue: float, brightness: float) -> RGB:
    r, g, b = colors.hsv_to_rgb((hue, SATURATION, brightness))
    return (float(r), float(g), float(b))


def color_cycling_stops(amount: numeric, steps: int) -> list[ColorStop]:
    """Hue table for ``steps`` concentric rings shifted by ``amount``.

    Args:
        amount: Hue shift, usually in [0, 1].
        steps: Number of rings. Zero or negative yields an empty list.

    Returns:
        list[ColorStop]: One entry per step, outermost ring first.
    """
    shift = finite_or_none("amount", amount)
    n_steps = non_negative_count("steps", steps)
    if shift is None or n_steps == 0:
        logger.debug(f"color_cycling_stops(amount={amount}, steps={steps}): empty table")
        return []

    stops = []
    for step in range(n_steps):
        hue = (step / n_steps + shift) % 1.0
        stops.append(ColorStop(float(step), hue, _hsb(hue, BRIGHT), _hsb(hue, DIM)))
    return stops


def color_cycling_rings(rect: Rect, amount: numeric = 0.0, steps: int = 100) -> list[ColorRing]:
    """Concentric ring paths paired with their colour stops.

    Ring ``i`` is ``Circle().inset(i)`` inside ``rect``. Rings whose radius
    has shrunk to zero or below carry an empty path.
    """
    if not isinstance(rect, Rect):
        raise TypeError(f"Unsupported rect type: {type(rect).__name__}")
    base = Circle()
    return [ColorRing(base.inset(stop.inset).path(rect), stop)
            for stop in color_cycling_stops(amount, steps)]
