"""
-------
test_geometry.py
-------
Tests for Rect / Point helpers.
"""

import math

import pytest
from dataclasses import FrozenInstanceError

from drawing.geometry import Point, Rect


# -----------------------------------------------------------------------------
# Edges and centers
# -----------------------------------------------------------------------------
def test_from_size_anchors_at_origin():
    r = Rect.from_size(300, 200)
    assert (r.x, r.y, r.width, r.height) == (0.0, 0.0, 300.0, 200.0)
    assert r.center == Point(150.0, 100.0)
    assert r.size == (300.0, 200.0)


def test_edges_of_offset_rect(offset_rect):
    assert offset_rect.min_x == 10.0
    assert offset_rect.max_x == 210.0
    assert offset_rect.min_y == 20.0
    assert offset_rect.max_y == 120.0
    assert offset_rect.center == Point(110.0, 70.0)


def test_negative_size_is_standardized():
    r = Rect(100.0, 50.0, -100.0, -50.0)
    std = r.standardized()
    assert (std.x, std.y, std.width, std.height) == (0.0, 0.0, 100.0, 50.0)
    assert r.center == std.center


def test_rect_is_frozen():
    r = Rect.from_size(10, 10)
    with pytest.raises(FrozenInstanceError):
        r.width = 20.0


# -----------------------------------------------------------------------------
# Emptiness
# -----------------------------------------------------------------------------
@pytest.mark.parametrize("rect", [
    Rect(),
    Rect.from_size(0, 100),
    Rect.from_size(100, 0),
    Rect(0.0, 0.0, math.nan, 10.0),
    Rect(math.inf, 0.0, 10.0, 10.0),
])
def test_degenerate_rects_are_empty(rect):
    assert rect.is_empty


def test_regular_rect_is_not_empty(square_rect):
    assert not square_rect.is_empty
    assert square_rect.is_finite


# -----------------------------------------------------------------------------
# Inset / contains
# -----------------------------------------------------------------------------
def test_inset_shrinks_around_center(square_rect):
    r = square_rect.inset(10)
    assert (r.x, r.y, r.width, r.height) == (10.0, 10.0, 280.0, 280.0)
    assert r.center == square_rect.center


def test_inset_collapses_to_center():
    r = Rect.from_size(100, 40).inset(10, 30)
    assert r.height == 0.0
    assert r.width == 80.0
    assert r.center == Point(50.0, 20.0)


def test_contains_is_inclusive(offset_rect):
    assert offset_rect.contains((10.0, 20.0))
    assert offset_rect.contains((210.0, 120.0))
    assert not offset_rect.contains((9.0, 20.0))
    assert not offset_rect.contains((110.0, 121.0))
