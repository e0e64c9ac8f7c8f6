"""
path.py
-------

Vector path model produced by every shape generator.

A :class:`ShapePath` is an ordered sequence of drawing commands:

    MoveTo(point)
    LineTo(point)
    CurveTo(control1, control2, end)                         cubic Bezier
    AddArc(center, radius, start_angle, end_angle, clockwise)  degrees
    ClosePath()

Subpath rules:
  - ``MoveTo`` starts a new subpath.
  - ``AddArc`` with no current point starts a new subpath at the arc start;
    otherwise the arc is joined to the current point by a straight line.
  - ``ClosePath`` ends the subpath and clears the current point, so the next
    command must be ``MoveTo`` or ``AddArc``.

Core API:

    ShapePath.to_mpl_path() -> matplotlib.path.Path

        Flattens the command list into Matplotlib MOVETO / LINETO / CURVE4 /
        CLOSEPOLY codes. Arcs become chains of <= 90deg cubic Bezier segments.

    ShapePath.transformed(transform: Affine2D) -> ShapePath

        Maps every point through an affine transform. Arcs survive only
        similarity transforms (rotation, reflection, uniform scale, translation).
"""

from __future__ import annotations

__all__ = [
    "MoveTo", "LineTo", "CurveTo", "AddArc", "ClosePath", "PathCommand",
    "ShapePath",
]

import json
import math
from dataclasses import dataclass
from typing import Any, ClassVar, Dict, Iterable, Iterator, Optional, Union

import numpy as np
from matplotlib.path import Path as mplPath
from matplotlib.transforms import Affine2D

from .bezier import arc_end_point, arc_sweep, circular_arc_points, ellipse_points
from .geometry import Point, Rect, numeric

PointLike = Union[Point, tuple[numeric, numeric]]


def _point(value: PointLike) -> Point:
    x, y = value
    return Point(float(x), float(y))


# =============================================================================
# Drawing commands
# =============================================================================
@dataclass(frozen=True)
class MoveTo:
    point: Point
    op: ClassVar[str] = "move"

    def to_dict(self) -> Dict[str, Any]:
        return {"op": self.op, "point": list(self.point)}


@dataclass(frozen=True)
class LineTo:
    point: Point
    op: ClassVar[str] = "line"

    def to_dict(self) -> Dict[str, Any]:
        return {"op": self.op, "point": list(self.point)}


@dataclass(frozen=True)
class CurveTo:
    control1 : Point
    control2 : Point
    end      : Point
    op: ClassVar[str] = "curve"

    def to_dict(self) -> Dict[str, Any]:
        return {
            "op"       : self.op,
            "control1" : list(self.control1),
            "control2" : list(self.control2),
            "end"      : list(self.end),
        }


@dataclass(frozen=True)
class AddArc:
    """Circular arc; angles in degrees measured from +X toward +Y.

    ``clockwise=False`` sweeps through increasing angles.
    """
    center      : Point
    radius      : float
    start_angle : float
    end_angle   : float
    clockwise   : bool
    op: ClassVar[str] = "arc"

    @property
    def sweep(self) -> float:
        return arc_sweep(self.start_angle, self.end_angle, self.clockwise)

    @property
    def start_point(self) -> Point:
        return arc_end_point(self.center, self.radius, self.start_angle)

    @property
    def end_point(self) -> Point:
        return arc_end_point(self.center, self.radius, self.start_angle + self.sweep)

    def to_dict(self) -> Dict[str, Any]:
        return {
            "op"          : self.op,
            "center"      : list(self.center),
            "radius"      : self.radius,
            "start_angle" : self.start_angle,
            "end_angle"   : self.end_angle,
            "clockwise"   : self.clockwise,
        }


@dataclass(frozen=True)
class ClosePath:
    op: ClassVar[str] = "close"

    def to_dict(self) -> Dict[str, Any]:
        return {"op": self.op}


PathCommand = Union[MoveTo, LineTo, CurveTo, AddArc, ClosePath]


# =============================================================================
# Path container
# =============================================================================
class ShapePath:
    """Ordered sequence of drawing commands.

    Builder methods return ``self`` for chaining. Generators hand a fresh
    instance to the caller on every call; nothing is cached or shared.

    Example:
        >>> p = ShapePath().move_to((0, 0)).line_to((10, 0)).line_to((0, 10)).close()
        >>> len(p.subpaths())
        1
    """

    __slots__ = ("_commands", "_current")

    def __init__(self, commands: Iterable[PathCommand] = ()) -> None:
        self._commands: list[PathCommand] = []
        self._current: Optional[Point] = None
        for command in commands:
            self._append(command)

    # -------------------------------------------------------------------------
    # Command bookkeeping
    # -------------------------------------------------------------------------
    def _append(self, command: PathCommand) -> None:
        if isinstance(command, MoveTo):
            self._current = command.point
        elif isinstance(command, (LineTo, CurveTo)):
            if self._current is None:
                raise ValueError(
                    f"{type(command).__name__} requires a current point; "
                    "start the subpath with move_to() or add_arc()."
                )
            self._current = command.point if isinstance(command, LineTo) else command.end
        elif isinstance(command, AddArc):
            self._current = command.end_point
        elif isinstance(command, ClosePath):
            if self._current is None:
                return
            self._current = None
        else:
            raise TypeError(f"Unsupported path command: {type(command).__name__}")
        self._commands.append(command)

    # -------------------------------------------------------------------------
    # Builders
    # -------------------------------------------------------------------------
    def move_to(self, point: PointLike) -> ShapePath:
        self._append(MoveTo(_point(point)))
        return self

    def line_to(self, point: PointLike) -> ShapePath:
        self._append(LineTo(_point(point)))
        return self

    def curve_to(self, control1: PointLike, control2: PointLike, end: PointLike) -> ShapePath:
        self._append(CurveTo(_point(control1), _point(control2), _point(end)))
        return self

    def add_arc(
            self,
            center      : PointLike,
            radius      : numeric,
            start_angle : numeric,
            end_angle   : numeric,
            clockwise   : bool,
        ) -> ShapePath:
        self._append(AddArc(_point(center), float(radius), float(start_angle),
                            float(end_angle), bool(clockwise)))
        return self

    def close(self) -> ShapePath:
        """Close the current subpath. A no-op when no subpath is open."""
        self._append(ClosePath())
        return self

    def add_rect(self, rect: Rect) -> ShapePath:
        """Append ``rect`` as a closed subpath, clockwise on screen from its top-left corner."""
        rect = rect.standardized()
        return (self.move_to((rect.min_x, rect.min_y))
                    .line_to((rect.max_x, rect.min_y))
                    .line_to((rect.max_x, rect.max_y))
                    .line_to((rect.min_x, rect.max_y))
                    .close())

    def add_ellipse(self, rect: Rect) -> ShapePath:
        """Append the ellipse inscribed into ``rect`` as a closed 4-curve subpath."""
        verts = ellipse_points(rect)
        self.move_to(verts[0])
        for i in range(1, len(verts), 3):
            self.curve_to(verts[i], verts[i + 1], verts[i + 2])
        return self.close()

    def add_path(self, other: ShapePath) -> ShapePath:
        for command in other:
            self._append(command)
        return self

    # -------------------------------------------------------------------------
    # Queries
    # -------------------------------------------------------------------------
    @property
    def commands(self) -> tuple[PathCommand, ...]:
        return tuple(self._commands)

    @property
    def current_point(self) -> Optional[Point]:
        return self._current

    @property
    def is_empty(self) -> bool:
        return not self._commands

    def count(self, kind: type) -> int:
        """Number of commands of the given class, e.g. ``path.count(LineTo)``."""
        return sum(1 for command in self._commands if isinstance(command, kind))

    def subpaths(self) -> list[ShapePath]:
        """Split into independent subpaths, preserving order."""
        result: list[ShapePath] = []
        open_subpath = False
        for command in self._commands:
            if isinstance(command, MoveTo) or (isinstance(command, AddArc) and not open_subpath):
                result.append(ShapePath())
            result[-1]._append(command)
            open_subpath = not isinstance(command, ClosePath)
        return result

    def __len__(self) -> int:
        return len(self._commands)

    def __iter__(self) -> Iterator[PathCommand]:
        return iter(tuple(self._commands))

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, ShapePath):
            return NotImplemented
        return self._commands == other._commands

    __hash__ = None

    # -------------------------------------------------------------------------
    # Transforms
    # -------------------------------------------------------------------------
    def transformed(self, transform: Affine2D) -> ShapePath:
        """Return a new path with every point mapped through ``transform``.

        Raises:
            TypeError: If ``transform`` is not an ``Affine2D``.
            ValueError: If the path holds arcs and ``transform`` is not a
                similarity transform.
        """
        if not isinstance(transform, Affine2D):
            raise TypeError(f"Expected a Matplotlib Affine2D, got {type(transform).__name__}.")

        def tp(point: Point) -> Point:
            return _point(transform.transform_point(point))

        arc_params = None
        result = ShapePath()
        for command in self._commands:
            if isinstance(command, MoveTo):
                result._append(MoveTo(tp(command.point)))
            elif isinstance(command, LineTo):
                result._append(LineTo(tp(command.point)))
            elif isinstance(command, CurveTo):
                result._append(CurveTo(tp(command.control1), tp(command.control2), tp(command.end)))
            elif isinstance(command, AddArc):
                if arc_params is None:
                    arc_params = _similarity_params(transform)
                scale, rotation_deg, mirrored = arc_params
                if mirrored:
                    start, end = rotation_deg - command.start_angle, rotation_deg - command.end_angle
                else:
                    start, end = rotation_deg + command.start_angle, rotation_deg + command.end_angle
                result._append(AddArc(tp(command.center), command.radius * scale,
                                      start, end, command.clockwise != mirrored))
            else:
                result._append(command)
        return result

    # -------------------------------------------------------------------------
    # Conversion
    # -------------------------------------------------------------------------
    def to_mpl_path(self) -> mplPath:
        """Convert to a Matplotlib ``Path`` (MOVETO, LINETO, CURVE4, CLOSEPOLY)."""
        verts: list[tuple[float, float]] = []
        codes: list[int] = []
        current: Optional[Point] = None
        start: Optional[Point] = None

        for command in self._commands:
            if isinstance(command, MoveTo):
                verts.append(command.point)
                codes.append(mplPath.MOVETO)
                current = start = command.point
            elif isinstance(command, LineTo):
                verts.append(command.point)
                codes.append(mplPath.LINETO)
                current = command.point
            elif isinstance(command, CurveTo):
                verts.extend((command.control1, command.control2, command.end))
                codes.extend([mplPath.CURVE4] * 3)
                current = command.end
            elif isinstance(command, AddArc):
                arc = circular_arc_points(command.center, command.radius,
                                          command.start_angle, command.sweep)
                first = _point(arc[0])
                if current is None:
                    codes.append(mplPath.MOVETO)
                    start = first
                else:
                    codes.append(mplPath.LINETO)
                verts.append(first)
                verts.extend(_point(v) for v in arc[1:])
                codes.extend([mplPath.CURVE4] * (len(arc) - 1))
                current = _point(arc[-1])
            else:
                verts.append(start)
                codes.append(mplPath.CLOSEPOLY)
                current = None

        if not verts:
            return mplPath(np.empty((0, 2)), np.empty(0, dtype=mplPath.code_type))
        return mplPath(np.asarray(verts, dtype=float), np.asarray(codes, dtype=mplPath.code_type))

    def to_dict(self) -> Dict[str, Any]:
        return {"commands": [command.to_dict() for command in self._commands]}

    @property
    def json(self) -> str:
        """JSON-encoded command list (compact)."""
        return json.dumps(self.to_dict(), separators=(",", ":"))

    @property
    def jsonpp(self) -> str:
        """Pretty-printed JSON (good for debugging / logs)."""
        return json.dumps(self.to_dict(), indent=4)

    # ---------------------------------------------------------------------------
    # Representation
    # ---------------------------------------------------------------------------
    def __repr__(self) -> str:
        return f"<{self.__class__.__name__} n={len(self._commands)} subpaths={len(self.subpaths())}>"


def _similarity_params(transform: Affine2D) -> tuple[float, float, bool]:
    """Decompose a similarity transform into (scale, rotation_deg, mirrored)."""
    m = transform.get_matrix()
    a, b, c, d = m[0, 0], m[0, 1], m[1, 0], m[1, 1]
    col_x, col_y = a * a + c * c, b * b + d * d
    if not (math.isclose(col_x, col_y, rel_tol=1e-9, abs_tol=1e-12)
            and math.isclose(a * b + c * d, 0.0, abs_tol=1e-9 * max(col_x, 1.0))):
        raise ValueError("Arc commands only support similarity transforms "
                         "(rotation, reflection, uniform scale, translation).")
    det = a * d - b * c
    return math.sqrt(abs(det)), math.degrees(math.atan2(c, a)), det < 0
