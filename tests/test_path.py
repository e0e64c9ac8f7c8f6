"""
-------
test_path.py
-------
Tests for the ShapePath command model: builders, subpath splitting,
affine transforms and Matplotlib conversion.
"""

import json

import numpy as np
import pytest
from matplotlib.path import Path as mplPath
from matplotlib.transforms import Affine2D

from drawing.geometry import Point, Rect
from drawing.path import AddArc, ClosePath, CurveTo, LineTo, MoveTo, ShapePath


@pytest.fixture
def triangle():
    return ShapePath().move_to((0, 0)).line_to((10, 0)).line_to((0, 10)).line_to((0, 0)).close()


@pytest.fixture
def quarter_arc():
    return ShapePath().add_arc((0, 0), 1.0, 0.0, 90.0, clockwise=False)


# -----------------------------------------------------------------------------
# Builders
# -----------------------------------------------------------------------------
def test_builders_chain_and_record_commands(triangle):
    assert len(triangle) == 5
    assert triangle.commands[0] == MoveTo(Point(0.0, 0.0))
    assert triangle.count(LineTo) == 3
    assert isinstance(triangle.commands[-1], ClosePath)
    assert triangle.current_point is None


def test_line_without_current_point_raises():
    with pytest.raises(ValueError):
        ShapePath().line_to((1, 1))
    with pytest.raises(ValueError):
        ShapePath().move_to((0, 0)).close().curve_to((1, 1), (2, 2), (3, 3))


def test_close_without_open_subpath_is_noop():
    p = ShapePath().close()
    assert p.is_empty
    p.move_to((0, 0)).close().close()
    assert len(p) == 2


def test_unsupported_command_type():
    with pytest.raises(TypeError):
        ShapePath(["move"])


def test_add_rect_is_clockwise_from_top_left():
    p = ShapePath().add_rect(Rect(10.0, 20.0, -10.0, -20.0))
    points = [c.point for c in p.commands[:4]]
    assert points == [(0.0, 0.0), (10.0, 0.0), (10.0, 20.0), (0.0, 20.0)]
    assert isinstance(p.commands[4], ClosePath)


def test_add_ellipse_is_one_closed_subpath():
    p = ShapePath().add_ellipse(Rect.from_size(20, 10))
    assert p.count(MoveTo) == 1
    assert p.count(CurveTo) == 4
    assert p.count(ClosePath) == 1
    assert p.commands[0].point == pytest.approx((20.0, 5.0))


def test_arc_tracks_current_point(quarter_arc):
    assert quarter_arc.current_point == pytest.approx((0.0, 1.0), abs=1e-12)
    quarter_arc.line_to((5, 5))
    assert quarter_arc.current_point == (5.0, 5.0)


# -----------------------------------------------------------------------------
# Subpaths / equality
# -----------------------------------------------------------------------------
def test_subpaths_split_on_move_and_free_arc(triangle):
    p = ShapePath().add_path(triangle).add_rect(Rect.from_size(5, 5))
    p.add_arc((0, 0), 2.0, 0.0, 180.0, False).line_to((0, 0))
    subs = p.subpaths()
    assert len(subs) == 3
    assert subs[0] == triangle
    assert isinstance(subs[2].commands[0], AddArc)


def test_arc_after_move_joins_subpath():
    p = ShapePath().move_to((0, 0)).add_arc((5, 5), 1.0, 0.0, 90.0, False)
    assert len(p.subpaths()) == 1


def test_equality_and_unhashable(triangle):
    other = ShapePath(triangle.commands)
    assert other == triangle
    assert other is not triangle
    with pytest.raises(TypeError):
        hash(triangle)


def test_iteration_is_a_snapshot(triangle):
    seen = []
    for command in triangle:
        seen.append(command)
        if len(seen) == 1:
            triangle.move_to((1, 1))
    assert len(seen) == 5


# -----------------------------------------------------------------------------
# Transforms
# -----------------------------------------------------------------------------
def test_translation_moves_points_and_keeps_radius(quarter_arc):
    moved = quarter_arc.transformed(Affine2D().translate(10, 20))
    arc = moved.commands[0]
    assert arc.center == pytest.approx((10.0, 20.0))
    assert arc.radius == pytest.approx(1.0)
    assert arc.start_angle == pytest.approx(0.0)
    assert arc.end_angle == pytest.approx(90.0)


def test_rotation_shifts_arc_angles(quarter_arc):
    rotated = quarter_arc.transformed(Affine2D().rotate_deg(90))
    arc = rotated.commands[0]
    assert arc.start_angle == pytest.approx(90.0)
    assert arc.end_angle == pytest.approx(180.0)
    assert arc.clockwise is False
    assert arc.end_point == pytest.approx((-1.0, 0.0), abs=1e-12)


def test_uniform_scale_scales_radius(quarter_arc):
    scaled = quarter_arc.transformed(Affine2D().scale(3.0))
    assert scaled.commands[0].radius == pytest.approx(3.0)


def test_reflection_flips_direction(quarter_arc):
    mirrored = quarter_arc.transformed(Affine2D().scale(1.0, -1.0))
    arc = mirrored.commands[0]
    assert arc.clockwise is True
    assert arc.start_point == pytest.approx((1.0, 0.0), abs=1e-12)
    assert arc.end_point == pytest.approx((0.0, -1.0), abs=1e-12)


def test_non_similarity_transform_rejects_arcs(quarter_arc, triangle):
    stretch = Affine2D().scale(2.0, 1.0)
    with pytest.raises(ValueError):
        quarter_arc.transformed(stretch)
    stretched = triangle.transformed(stretch)
    assert stretched.commands[1].point == (20.0, 0.0)


def test_transform_type_is_checked(triangle):
    with pytest.raises(TypeError):
        triangle.transformed(np.eye(3))


def test_transformed_returns_new_path(triangle):
    before = ShapePath(triangle.commands)
    triangle.transformed(Affine2D().rotate_deg(45))
    assert triangle == before


# -----------------------------------------------------------------------------
# Matplotlib conversion
# -----------------------------------------------------------------------------
def test_mpl_codes_for_polygon(triangle):
    mpl = triangle.to_mpl_path()
    assert isinstance(mpl, mplPath)
    assert list(mpl.codes) == [
        mplPath.MOVETO, mplPath.LINETO, mplPath.LINETO, mplPath.LINETO, mplPath.CLOSEPOLY,
    ]
    assert mpl.vertices[-1] == pytest.approx([0.0, 0.0])


def test_mpl_codes_for_free_arc():
    p = ShapePath().add_arc((150, 150), 150.0, -90.0, 20.0, clockwise=False)
    mpl = p.to_mpl_path()
    assert mpl.codes[0] == mplPath.MOVETO
    assert set(mpl.codes[1:]) == {mplPath.CURVE4}
    assert len(mpl.vertices) == 7
    assert mpl.vertices[-1] == pytest.approx(list(p.commands[0].end_point))


def test_mpl_arc_after_move_is_joined_by_line():
    p = ShapePath().move_to((0, 0)).add_arc((5, 0), 1.0, 0.0, 90.0, False)
    codes = list(p.to_mpl_path().codes)
    assert codes[:2] == [mplPath.MOVETO, mplPath.LINETO]
    assert codes[2:] == [mplPath.CURVE4] * 3


def test_mpl_empty_path():
    mpl = ShapePath().to_mpl_path()
    assert mpl.vertices.shape == (0, 2)


# -----------------------------------------------------------------------------
# Serialization
# -----------------------------------------------------------------------------
def test_json_lists_commands(triangle, quarter_arc):
    data = json.loads(triangle.json)
    assert [c["op"] for c in data["commands"]] == ["move", "line", "line", "line", "close"]
    arc = json.loads(quarter_arc.jsonpp)["commands"][0]
    assert arc["radius"] == 1.0
    assert arc["clockwise"] is False


def test_repr(triangle):
    assert repr(triangle) == "<ShapePath n=5 subpaths=1>"
