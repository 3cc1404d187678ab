"""Length, closure, winding and bounds of canonical segment lists."""

from __future__ import annotations

import numpy as np
from numpy.typing import NDArray
from svgpathtools import CubicBezier, Path

from vectormorph.engine.commands import Bounds, PathCommand, PathSegment, Point
from vectormorph.engine.segmenter import curve_segment, to_path_segments
from vectormorph.engine.splitter import split_subpaths
from vectormorph.utils.geometry import cubic_points, winding_direction


def to_bezier(segment: PathSegment) -> CubicBezier:
    c = segment.command
    return CubicBezier(
        segment.start.to_complex(),
        complex(c.x1, c.y1),
        complex(c.x2, c.y2),
        segment.end.to_complex(),
    )


def from_bezier(bezier: CubicBezier) -> PathSegment:
    return curve_segment(
        Point.from_complex(bezier.start),
        (bezier.control1.real, bezier.control1.imag),
        (bezier.control2.real, bezier.control2.imag),
        (bezier.end.real, bezier.end.imag),
    )


def to_svg_path(segments: list[PathSegment]) -> Path:
    return Path(*(to_bezier(s) for s in segments if not s.is_move))


def segment_length(segment: PathSegment) -> float:
    if segment.is_move:
        return 0.0
    return float(to_bezier(segment).length())


def segments_length(segments: list[PathSegment]) -> float:
    """Total arc length of the drawn (non-move) segments."""
    return sum(segment_length(s) for s in segments)


def is_closed(segments: list[PathSegment], tolerance: float = 1e-3) -> bool:
    curves = [s for s in segments if not s.is_move]
    if not curves:
        return False
    gap = curves[0].start.to_complex() - curves[-1].end.to_complex()
    return abs(gap) <= tolerance


def sample_points(segments: list[PathSegment], samples_per_segment: int = 8) -> NDArray[np.float64]:
    """Polyline through the drawn segments, ``samples_per_segment`` points each plus the final end."""
    curves = [s for s in segments if not s.is_move]
    if not curves:
        return np.empty((0, 2))
    ts = np.linspace(0.0, 1.0, samples_per_segment, endpoint=False)
    chunks = [cubic_points(s.start, *_control_points(s), s.end, ts) for s in curves]
    chunks.append(np.array([curves[-1].end], dtype=np.float64))
    return np.vstack(chunks)


def winding(segments: list[PathSegment], samples_per_segment: int = 8) -> int:
    """1 for CCW, -1 for CW, 0 if degenerate (shoelace over sampled points)."""
    return winding_direction(sample_points(segments, samples_per_segment))


def measure_bounds(commands: list[PathCommand] | tuple[PathCommand, ...]) -> Bounds:
    """Exact bounding box of a command sequence as drawn."""
    segments = [s for sp in split_subpaths(commands) for s in to_path_segments(sp)]
    path = to_svg_path(segments)
    if len(path) == 0:
        return Bounds(0.0, 0.0, 0.0, 0.0)
    xmin, xmax, ymin, ymax = path.bbox()
    return Bounds(left=xmin, top=ymin, width=xmax - xmin, height=ymax - ymin)


def _control_points(segment: PathSegment) -> tuple[Point, Point]:
    c = segment.command
    return Point(c.x1, c.y1), Point(c.x2, c.y2)
