"""Tests for shape normalization."""

import pytest

from vectormorph.engine.commands import (
    ArcTo,
    Bounds,
    LineTo,
    MoveTo,
    Point,
    RelativeArcTo,
    RelativeLineTo,
    RelativeMoveTo,
)
from vectormorph.engine.normalizer import normalize, scale_factors, target_size


def test_bounds_map_onto_target_box():
    bounds = Bounds(left=10, top=20, width=100, height=50)
    sx, sy = scale_factors(bounds, 200, 200)
    assert (sx, sy) == (2.0, 4.0)

    out = normalize([MoveTo(10, 20), LineTo(110, 70)], bounds.offset, sx, sy)
    # out[0] is the injected anchor move
    assert out[1] == MoveTo(0.0, 0.0)
    assert out[2] == LineTo(200.0, 200.0)


def test_anchor_move_is_prepended():
    out = normalize([RelativeMoveTo(5, 5)], Point(0, 0), 1.0, 1.0)
    assert out[0] == MoveTo(0.0, 0.0)
    assert len(out) == 2


def test_relative_fields_are_scaled_not_offset():
    out = normalize([RelativeLineTo(5, 5)], Point(100, 100), 2.0, 3.0)
    assert out[1] == RelativeLineTo(10.0, 15.0)


def test_arc_radii_scale_per_axis():
    out = normalize([ArcTo(5, 10, 45, True, False, 20, 30)], Point(10, 10), 2.0, 0.5)
    arc = out[1]
    assert arc == ArcTo(10.0, 5.0, 45, True, False, 20.0, 10.0)

    rel = normalize([RelativeArcTo(5, 10, 0, False, True, 4, 4)], Point(10, 10), 2.0, 0.5)[1]
    assert rel == RelativeArcTo(10.0, 5.0, 0, False, True, 8.0, 2.0)


def test_target_size_falls_back_to_larger_shape():
    a = Bounds(0, 0, 10, 40)
    b = Bounds(0, 0, 30, 20)
    assert target_size(a, b) == (30, 40)
    assert target_size(a, b, width=100) == (100, 40)
    assert target_size(a, b, width=-1, height=5) == (30, 5)


def test_zero_extent_axis_clamps_scale():
    sx, sy = scale_factors(Bounds(0, 0, 10, 0), 20, 20)
    assert sx == pytest.approx(2.0)
    assert sy == 1.0
