"""Curve canonicalizer — rewrite any subpath as a MoveTo followed by cubics.

Lines are degree-elevated with control points at fixed fractions of the
segment, quadratics are elevated exactly, smooth (reflected) curves resolve
their implied control point from the previous canonical segment, and
elliptical arcs are flattened into one cubic per quarter-turn or less.
"""

from __future__ import annotations

import logging
import math

from svgpathtools import Arc

from vectormorph.engine.commands import (
    ALL_COMMAND_TYPES,
    ArcTo,
    Close,
    CurveTo,
    HorizontalTo,
    LineTo,
    MoveTo,
    PathCommand,
    PathSegment,
    Point,
    QuadTo,
    ReflectiveCurveTo,
    ReflectiveQuadTo,
    RelativeArcTo,
    RelativeCurveTo,
    RelativeHorizontalTo,
    RelativeLineTo,
    RelativeMoveTo,
    RelativeQuadTo,
    RelativeReflectiveCurveTo,
    RelativeReflectiveQuadTo,
    RelativeVerticalTo,
    VerticalTo,
    ORIGIN,
    advance,
)
from vectormorph.engine.registry import converter, get_registry
from vectormorph.utils.geometry import lerp, reflect

logger = logging.getLogger(__name__)

# Control points of an elevated line sit at these parameters along it
LINE_CONTROL_T1 = 0.33
LINE_CONTROL_T2 = 0.66

# Largest sweep covered by a single cubic when flattening arcs
ARC_MAX_SWEEP_DEGREES = 90.0

_TWO_THIRDS = 2.0 / 3.0


def curve_segment(
    start: Point,
    c1: tuple[float, float],
    c2: tuple[float, float],
    end: tuple[float, float],
) -> PathSegment:
    return PathSegment(
        start=start,
        end=Point(end[0], end[1]),
        command=CurveTo(c1[0], c1[1], c2[0], c2[1], end[0], end[1]),
    )


def line_segment(start: Point, end: Point) -> PathSegment:
    cp1 = lerp(start, end, LINE_CONTROL_T1)
    cp2 = lerp(start, end, LINE_CONTROL_T2)
    return curve_segment(start, cp1, cp2, end)


def quad_segment(start: Point, control: tuple[float, float], end: Point) -> PathSegment:
    cp1 = (start.x + _TWO_THIRDS * (control[0] - start.x), start.y + _TWO_THIRDS * (control[1] - start.y))
    cp2 = (end.x + _TWO_THIRDS * (control[0] - end.x), end.y + _TWO_THIRDS * (control[1] - end.y))
    return curve_segment(start, cp1, cp2, end)


def _previous_cubic(previous: PathSegment | None) -> CurveTo | None:
    if previous is not None and isinstance(previous.command, CurveTo):
        return previous.command
    return None


# --- Moves ---


@converter(MoveTo, RelativeMoveTo, description="Resolve a move to absolute form")
def convert_move(command: PathCommand, cursor: Point, previous: PathSegment | None) -> list[PathSegment]:
    target = advance(command, cursor)
    return [PathSegment(start=cursor, end=target, command=MoveTo(target.x, target.y))]


# --- Lines ---


@converter(
    LineTo,
    RelativeLineTo,
    HorizontalTo,
    RelativeHorizontalTo,
    VerticalTo,
    RelativeVerticalTo,
    description="Degree-elevate a straight line",
)
def convert_line(command: PathCommand, cursor: Point, previous: PathSegment | None) -> list[PathSegment]:
    return [line_segment(cursor, advance(command, cursor))]


# --- Cubics ---


@converter(CurveTo, description="Cubic passes through")
def convert_curve(command: CurveTo, cursor: Point, previous: PathSegment | None) -> list[PathSegment]:
    return [PathSegment(start=cursor, end=Point(command.x3, command.y3), command=command)]


@converter(RelativeCurveTo, description="Resolve a relative cubic")
def convert_relative_curve(
    command: RelativeCurveTo, cursor: Point, previous: PathSegment | None
) -> list[PathSegment]:
    return [
        curve_segment(
            cursor,
            cursor.translated(command.dx1, command.dy1),
            cursor.translated(command.dx2, command.dy2),
            cursor.translated(command.dx3, command.dy3),
        )
    ]


@converter(ReflectiveCurveTo, RelativeReflectiveCurveTo, description="Resolve a smooth cubic")
def convert_reflective_curve(
    command: ReflectiveCurveTo | RelativeReflectiveCurveTo, cursor: Point, previous: PathSegment | None
) -> list[PathSegment]:
    # Keyed off the previous canonical segment, not the previous source command
    prev = _previous_cubic(previous)
    c1 = reflect((prev.x2, prev.y2), cursor) if prev is not None else cursor
    if isinstance(command, ReflectiveCurveTo):
        c2 = (command.x1, command.y1)
    else:
        c2 = cursor.translated(command.dx1, command.dy1)
    return [curve_segment(cursor, c1, c2, advance(command, cursor))]


# --- Quadratics ---


@converter(QuadTo, RelativeQuadTo, description="Degree-elevate a quadratic")
def convert_quad(command: QuadTo | RelativeQuadTo, cursor: Point, previous: PathSegment | None) -> list[PathSegment]:
    if isinstance(command, QuadTo):
        control = (command.x1, command.y1)
    else:
        control = cursor.translated(command.dx1, command.dy1)
    return [quad_segment(cursor, control, advance(command, cursor))]


@converter(ReflectiveQuadTo, RelativeReflectiveQuadTo, description="Resolve and elevate a smooth quadratic")
def convert_reflective_quad(
    command: ReflectiveQuadTo | RelativeReflectiveQuadTo, cursor: Point, previous: PathSegment | None
) -> list[PathSegment]:
    prev = _previous_cubic(previous)
    if prev is not None:
        # Midpoint of the cubic's controls stands in for the quad control it came from
        control = reflect(((prev.x1 + prev.x2) / 2, (prev.y1 + prev.y2) / 2), cursor)
    else:
        control = cursor
    return [quad_segment(cursor, control, advance(command, cursor))]


# --- Arcs ---


def arc_segments(
    start: Point,
    end: Point,
    rx: float,
    ry: float,
    rotation: float,
    large_arc: bool,
    sweep: bool,
) -> list[PathSegment]:
    """Approximate an SVG elliptical arc with cubics threaded from ``start`` to ``end``."""
    if start == end:
        return []
    rx, ry = abs(rx), abs(ry)
    if rx == 0 or ry == 0:
        return [line_segment(start, end)]

    try:
        arc = Arc(
            start=start.to_complex(),
            radius=complex(rx, ry),
            rotation=rotation,
            large_arc=bool(large_arc),
            sweep=bool(sweep),
            end=end.to_complex(),
        )
        pieces = max(1, math.ceil(abs(arc.delta) / (ARC_MAX_SWEEP_DEGREES + 1e-3)))
        cubics = list(arc.as_cubic_curves(pieces))
    except (ValueError, ArithmeticError) as e:
        logger.warning("Degenerate arc %s -> %s (%s); drawing a line", start, end, e)
        return [line_segment(start, end)]

    segments: list[PathSegment] = []
    cursor = start
    for i, cubic in enumerate(cubics):
        stop = end if i == len(cubics) - 1 else Point.from_complex(cubic.end)
        c1 = (cubic.control1.real, cubic.control1.imag)
        c2 = (cubic.control2.real, cubic.control2.imag)
        segments.append(curve_segment(cursor, c1, c2, stop))
        cursor = stop
    return segments


@converter(ArcTo, RelativeArcTo, description="Flatten an elliptical arc into cubics")
def convert_arc(command: ArcTo | RelativeArcTo, cursor: Point, previous: PathSegment | None) -> list[PathSegment]:
    return arc_segments(
        cursor,
        advance(command, cursor),
        command.rx,
        command.ry,
        command.rotation,
        command.large_arc,
        command.sweep,
    )


@converter(Close, description="Structural marker only")
def convert_close(command: Close, cursor: Point, previous: PathSegment | None) -> list[PathSegment]:
    return []


get_registry().ensure_complete(ALL_COMMAND_TYPES)


def to_path_segments(commands: list[PathCommand] | tuple[PathCommand, ...]) -> list[PathSegment]:
    """Canonicalize a command sequence into MoveTo/CurveTo segments."""
    registry = get_registry()
    segments: list[PathSegment] = []
    cursor = ORIGIN
    for command in commands:
        previous = segments[-1] if segments else None
        produced = registry.get(type(command)).fn(command, cursor, previous)
        if produced:
            segments.extend(produced)
            cursor = produced[-1].end
    return segments


def reversed_winding(segments: list[PathSegment]) -> list[PathSegment]:
    """Traverse the same contour backwards, starting from its former end."""
    curves = [s for s in segments if not s.is_move]
    if not curves:
        return list(segments)
    head = segments[-1].end
    result = [PathSegment(start=head, end=head, command=MoveTo(head.x, head.y))]
    for seg in reversed(curves):
        c = seg.command
        result.append(curve_segment(seg.end, (c.x2, c.y2), (c.x1, c.y1), seg.start))
    return result
