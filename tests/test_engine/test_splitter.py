"""Tests for subpath splitting."""

from vectormorph.engine.commands import (
    Close,
    CurveTo,
    LineTo,
    MoveTo,
    Point,
    RelativeLineTo,
    RelativeMoveTo,
)
from vectormorph.engine.normalizer import normalize
from vectormorph.engine.splitter import split_subpaths
from tests.conftest import SQUARE_WITH_DOT, TRIANGLE


def test_one_subpath_per_move():
    commands = [
        MoveTo(0, 0), LineTo(1, 1),
        MoveTo(5, 5), LineTo(6, 6), LineTo(7, 5),
        MoveTo(9, 9), CurveTo(9, 10, 10, 10, 10, 9),
    ]
    subpaths = split_subpaths(commands)
    assert len(subpaths) == 3
    for sp in subpaths:
        assert isinstance(sp[0], MoveTo)
    assert [sp[0] for sp in subpaths] == [MoveTo(0, 0), MoveTo(5, 5), MoveTo(9, 9)]


def test_consecutive_moves_collapse():
    subpaths = split_subpaths([MoveTo(0, 0), MoveTo(5, 5), LineTo(6, 6)])
    assert subpaths == [[MoveTo(5, 5), LineTo(6, 6)]]


def test_drawing_without_move_gets_synthetic_move():
    subpaths = split_subpaths([LineTo(3, 4)])
    assert subpaths == [[MoveTo(0, 0), LineTo(3, 4)]]


def test_relative_move_resolves_to_absolute():
    subpaths = split_subpaths([MoveTo(1, 1), LineTo(2, 2), RelativeMoveTo(3, 3), RelativeLineTo(1, 0)])
    assert len(subpaths) == 2
    assert subpaths[1][0] == MoveTo(5, 5)


def test_anchor_move_collapses_into_leading_relative_move():
    normalized = normalize([RelativeMoveTo(5, 5), RelativeLineTo(1, 0)], Point(0, 0), 1.0, 1.0)
    assert split_subpaths(normalized) == [[MoveTo(5, 5), RelativeLineTo(1, 0)]]


def test_close_draws_edge_back_to_start():
    (sp,) = split_subpaths(TRIANGLE)
    assert sp == [MoveTo(5, 0), LineTo(10, 10), LineTo(0, 10), LineTo(5.0, 0.0), Close()]


def test_close_at_start_adds_no_edge():
    (sp,) = split_subpaths([MoveTo(0, 0), LineTo(10, 0), LineTo(0, 0), Close()])
    assert sp == [MoveTo(0, 0), LineTo(10, 0), LineTo(0, 0), Close()]


def test_returning_to_start_marks_closed():
    (sp,) = split_subpaths([MoveTo(0, 0), LineTo(10, 0), LineTo(0, 0)])
    assert isinstance(sp[-1], Close)


def test_open_subpath_stays_open():
    (sp,) = split_subpaths([MoveTo(0, 0), LineTo(10, 0)])
    assert not isinstance(sp[-1], Close)


def test_empty_subpaths_dropped():
    assert split_subpaths([MoveTo(0, 0), Close(), MoveTo(5, 5), LineTo(6, 6)]) == [[MoveTo(5, 5), LineTo(6, 6)]]
    assert split_subpaths([MoveTo(0, 0)]) == []
    assert split_subpaths([]) == []


def test_compound_shape_keeps_input_order():
    subpaths = split_subpaths(SQUARE_WITH_DOT)
    assert len(subpaths) == 2
    assert subpaths[0][0] == MoveTo(0.0, 0.0)
    # Close of the outer square returns the cursor to (0, 0) before the relative move
    assert subpaths[1][0] == MoveTo(4.0, 4.0)


def test_drawing_after_close_opens_new_subpath():
    subpaths = split_subpaths([MoveTo(0, 0), LineTo(10, 0), LineTo(10, 10), Close(), LineTo(0, 10)])
    assert len(subpaths) == 2
    assert subpaths[1] == [MoveTo(0, 0), LineTo(0, 10)]
