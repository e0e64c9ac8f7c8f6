"""
checkerboard.py
---------------

Implements the Checkerboard shape: alternating filled cells of a rows x columns
grid laid over the bounding rect.
"""

from __future__ import annotations

__all__ = ["Checkerboard", "checkerboard_path"]

import logging
from dataclasses import dataclass

from .base import Shape, non_negative_count
from .geometry import Rect
from .path import ShapePath

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Checkerboard(Shape):
    """
    Checkerboard with ``rows`` x ``columns`` equal cells.

    A cell is filled when ``row + column`` is even, so the top-left cell is
    always filled. Each filled cell is emitted as its own closed rectangle
    subpath; the number of subpaths is ``ceil(rows * columns / 2)``.
    """

    rows    : int = 4
    columns : int = 4

    def path(self, rect: Rect) -> ShapePath:
        path = ShapePath()
        rect = self._usable_rect(rect)
        if rect is None:
            return path

        rows = non_negative_count("rows", self.rows)
        columns = non_negative_count("columns", self.columns)
        if rows == 0 or columns == 0:
            logger.debug(f"Checkerboard rows={self.rows} columns={self.columns}: empty path")
            return path

        row_size = rect.height / rows
        column_size = rect.width / columns

        for row in range(rows):
            for column in range(columns):
                if (row + column) % 2 == 0:
                    path.add_rect(Rect(
                        rect.min_x + column_size * column,
                        rect.min_y + row_size * row,
                        column_size,
                        row_size,
                    ))
        return path


def checkerboard_path(rect: Rect, rows: int, columns: int) -> ShapePath:
    """Checkerboard path for ``rect``; zero or negative counts give an empty path."""
    return Checkerboard(rows, columns).path(rect)
