"""
drawing
-------

Parametric shape-path generators: pure functions mapping a bounding rect and a
few numbers to a vector path of move / line / curve / arc / close commands.
"""

from .geometry import Point, Rect
from .path import MoveTo, LineTo, CurveTo, AddArc, ClosePath, PathCommand, ShapePath
from .base import Shape, InsettableShape
from .checkerboard import Checkerboard, checkerboard_path
from .trapezoid import Trapezoid, trapezoid_path, random_trapezoid
from .triangle import Triangle, triangle_path
from .arc import Arc, Circle, arc_path
from .flower import Flower, flower_path
from .color_cycling import ColorStop, ColorRing, color_cycling_stops, color_cycling_rings

__version__ = "0.1.0"

__all__ = [
    "Point", "Rect",
    "MoveTo", "LineTo", "CurveTo", "AddArc", "ClosePath", "PathCommand", "ShapePath",
    "Shape", "InsettableShape",
    "Checkerboard", "checkerboard_path",
    "Trapezoid", "trapezoid_path", "random_trapezoid",
    "Triangle", "triangle_path",
    "Arc", "Circle", "arc_path",
    "Flower", "flower_path",
    "ColorStop", "ColorRing", "color_cycling_stops", "color_cycling_rings",
]
