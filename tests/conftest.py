"""Shared test fixtures."""

from __future__ import annotations

import pytest

from vectormorph.engine.commands import (
    ArcTo,
    Bounds,
    Close,
    HorizontalTo,
    LineTo,
    MoveTo,
    QuadTo,
    RelativeLineTo,
    RelativeMoveTo,
    VectorSource,
    VerticalTo,
)


# Sample shapes, all inside a 10×10 box at the origin

SQUARE = (
    MoveTo(0.0, 0.0),
    HorizontalTo(10.0),
    VerticalTo(10.0),
    HorizontalTo(0.0),
    Close(),
)

# Two half-turn arcs; a single arc cannot draw a full circle
CIRCLE = (
    MoveTo(0.0, 5.0),
    ArcTo(5.0, 5.0, 0.0, True, True, 10.0, 5.0),
    ArcTo(5.0, 5.0, 0.0, True, True, 0.0, 5.0),
    Close(),
)

TRIANGLE = (
    MoveTo(5.0, 0.0),
    LineTo(10.0, 10.0),
    LineTo(0.0, 10.0),
    Close(),
)

# Big square outline plus a small square dot in the middle
SQUARE_WITH_DOT = SQUARE + (
    RelativeMoveTo(4.0, 4.0),
    RelativeLineTo(2.0, 0.0),
    RelativeLineTo(0.0, 2.0),
    RelativeLineTo(-2.0, 0.0),
    Close(),
)

WAVE = (
    MoveTo(0.0, 5.0),
    QuadTo(2.5, 0.0, 5.0, 5.0),
    QuadTo(7.5, 10.0, 10.0, 5.0),
)

UNIT_BOUNDS = Bounds(left=0.0, top=0.0, width=10.0, height=10.0)


def source(commands, bounds: Bounds = UNIT_BOUNDS) -> VectorSource:
    return VectorSource(bounds=bounds, commands=tuple(commands))


@pytest.fixture
def square_source() -> VectorSource:
    return source(SQUARE)


@pytest.fixture
def circle_source() -> VectorSource:
    return source(CIRCLE)


@pytest.fixture
def triangle_source() -> VectorSource:
    return source(TRIANGLE)


@pytest.fixture
def square_with_dot_source() -> VectorSource:
    return source(SQUARE_WITH_DOT)
