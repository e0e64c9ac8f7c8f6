"""
-------
conftest.py
-------
Shared pytest fixtures for shape generator tests.
"""

import logging

import pytest
import matplotlib
matplotlib.use("Agg")  # ensure headless backend for CI

from drawing.geometry import Rect
from drawing.path import ShapePath, MoveTo, LineTo, CurveTo, AddArc
from drawing.utils.rng import RNG


# -----------------------------------------------------------------------------
# Rect fixtures
# -----------------------------------------------------------------------------
@pytest.fixture
def square_rect() -> Rect:
    """The 300x300 frame used throughout the tutorial scenes."""
    return Rect.from_size(300, 300)


@pytest.fixture
def offset_rect() -> Rect:
    """A rect away from the origin, to catch generators that assume (0, 0)."""
    return Rect(10.0, 20.0, 200.0, 100.0)


# -----------------------------------------------------------------------------
# RNG fixtures
# -----------------------------------------------------------------------------
@pytest.fixture
def fixed_rng() -> RNG:
    """Deterministic RNG instance."""
    return RNG(seed=123)


# -----------------------------------------------------------------------------
# Logging isolation
# -----------------------------------------------------------------------------
@pytest.fixture
def reset_drawing_logger():
    """Drop handlers installed on the "drawing" logger by configure_logging()."""
    yield
    logger = logging.getLogger("drawing")
    for h in list(logger.handlers):
        logger.removeHandler(h)
        h.close()
    logger.setLevel(logging.NOTSET)


# -----------------------------------------------------------------------------
# Helpers
# -----------------------------------------------------------------------------
def explicit_points(path: ShapePath) -> list:
    """All points named by move/line/curve commands (control points included)."""
    points = []
    for command in path:
        if isinstance(command, (MoveTo, LineTo)):
            points.append(command.point)
        elif isinstance(command, CurveTo):
            points.extend((command.control1, command.control2, command.end))
        elif isinstance(command, AddArc):
            points.extend((command.start_point, command.end_point))
    return points
