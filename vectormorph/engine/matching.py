"""Subpath pairing and per-pair matching.

Both shapes are normalized into the same target box, split into subpaths and
ranked by arc length (longest first). Subpaths are then paired by rank; the
surplus on the side with more subpaths is left unpaired and fades instead of
morphing.
"""

from __future__ import annotations

import logging
import time
from dataclasses import dataclass

import numpy as np
from numpy.typing import NDArray

from vectormorph.engine.commands import (
    ORIGIN,
    Close,
    CurveTo,
    MoveTo,
    PathCommand,
    PathSegment,
    VectorSource,
)
from vectormorph.engine.config import MorphConfig
from vectormorph.engine.measure import (
    from_bezier,
    is_closed,
    segment_length,
    segments_length,
    to_bezier,
    winding,
)
from vectormorph.engine.normalizer import normalize, scale_factors, target_size
from vectormorph.engine.segmenter import curve_segment, reversed_winding, to_path_segments
from vectormorph.engine.splitter import split_subpaths
from vectormorph.utils.geometry import clamp01, mix

logger = logging.getLogger(__name__)


def clamp_fraction(fraction: float) -> float:
    return clamp01(fraction)


def _split_moves(segments: list[PathSegment]) -> tuple[list[PathSegment], list[PathSegment]]:
    head = [s for s in segments[:1] if s.is_move]
    return head, [s for s in segments if not s.is_move]


def subdivide_to(segments: list[PathSegment], count: int) -> list[PathSegment]:
    """Grow a segment list to ``count`` cubics without changing its geometry.

    The longest cubic is split in half (de Casteljau) until the count is
    reached. A list with no cubics at all is padded with zero-length cubics
    at its last point.
    """
    head, curves = _split_moves(segments)
    if len(curves) >= count:
        return head + curves
    if not curves:
        anchor = segments[-1].end if segments else ORIGIN
        return head + [curve_segment(anchor, anchor, anchor, anchor) for _ in range(count)]

    lengths = [segment_length(c) for c in curves]
    while len(curves) < count:
        i = int(np.argmax(lengths))
        left, right = to_bezier(curves[i]).split(0.5)
        curves[i : i + 1] = [from_bezier(left), from_bezier(right)]
        lengths[i : i + 1] = [lengths[i] / 2, lengths[i] / 2]
    return head + curves


def align_segments(
    start: list[PathSegment], end: list[PathSegment]
) -> tuple[list[PathSegment], list[PathSegment]]:
    """Make both sides carry the same number of cubics."""
    n_start = sum(1 for s in start if not s.is_move)
    n_end = sum(1 for s in end if not s.is_move)
    if n_start < n_end:
        start = subdivide_to(start, n_end)
    elif n_end < n_start:
        end = subdivide_to(end, n_start)
    return start, end


def _origin(segments: tuple[PathSegment, ...]) -> NDArray[np.float64]:
    if not segments:
        return np.zeros(2)
    first = segments[0]
    point = first.end if first.is_move else first.start
    return np.array(point, dtype=np.float64)


def _coordinates(segments: tuple[PathSegment, ...]) -> NDArray[np.float64]:
    rows = [s.command.args() for s in segments if not s.is_move]
    return np.array(rows, dtype=np.float64).reshape(-1, 6)


class PairedSubpath:
    """A start/end subpath pair, aligned segment-for-segment."""

    def __init__(
        self,
        start_segments: list[PathSegment],
        end_segments: list[PathSegment],
        closed_tolerance: float = 1e-3,
    ) -> None:
        start_segments, end_segments = align_segments(list(start_segments), list(end_segments))
        self.start_segments: tuple[PathSegment, ...] = tuple(start_segments)
        self.end_segments: tuple[PathSegment, ...] = tuple(end_segments)
        self.start_closed = is_closed(start_segments, closed_tolerance)
        self.end_closed = is_closed(end_segments, closed_tolerance)
        self._start_origin = _origin(self.start_segments)
        self._end_origin = _origin(self.end_segments)
        self._start_coords = _coordinates(self.start_segments)
        self._end_coords = _coordinates(self.end_segments)

    @classmethod
    def from_segments(
        cls,
        start: list[PathSegment],
        end: list[PathSegment],
        config: MorphConfig | None = None,
    ) -> PairedSubpath:
        config = config or MorphConfig()
        tol = config.closed_tolerance
        if config.align_winding and is_closed(start, tol) and is_closed(end, tol):
            w_start = winding(start, config.winding_samples)
            w_end = winding(end, config.winding_samples)
            if w_start and w_end and w_start != w_end:
                logger.debug("Reversing end subpath winding to match start")
                end = reversed_winding(end)
        return cls(start, end, tol)

    @classmethod
    def from_subpaths(
        cls,
        start: list[PathCommand],
        end: list[PathCommand],
        config: MorphConfig | None = None,
    ) -> PairedSubpath:
        return cls.from_segments(to_path_segments(start), to_path_segments(end), config)

    @property
    def closed(self) -> bool:
        return self.start_closed and self.end_closed

    def closed_at(self, fraction: float) -> bool:
        """Whether the blend at ``fraction`` ends with Close.

        Each endpoint keeps its own side's closure; in between the nearer
        side decides, switching over at 0.5.
        """
        return self.start_closed if clamp_fraction(fraction) < 0.5 else self.end_closed

    @property
    def segment_count(self) -> int:
        return len(self._start_coords)

    def interpolated_commands(self, fraction: float) -> list[PathCommand]:
        f = clamp_fraction(fraction)
        origin = mix(self._start_origin, self._end_origin, f)
        coords = mix(self._start_coords, self._end_coords, f)
        commands: list[PathCommand] = [MoveTo(float(origin[0]), float(origin[1]))]
        commands.extend(CurveTo(*(float(v) for v in row)) for row in coords)
        if self.closed_at(f):
            commands.append(Close())
        return commands


class UnpairedSubpath:
    """A subpath with no counterpart; its geometry never changes."""

    def __init__(self, segments: list[PathSegment], closed_tolerance: float = 1e-3) -> None:
        self.segments: tuple[PathSegment, ...] = tuple(segments)
        self.closed = is_closed(segments, closed_tolerance)

    @classmethod
    def from_subpath(cls, commands: list[PathCommand]) -> UnpairedSubpath:
        return cls(to_path_segments(commands))

    def interpolated_commands(self, progress: float) -> list[PathCommand]:
        commands: list[PathCommand] = [s.command for s in self.segments]
        if self.closed:
            commands.append(Close())
        return commands


@dataclass(frozen=True)
class PathData:
    """Result of matching two shapes. Never mutated after construction."""

    paired_subpaths: tuple[PairedSubpath, ...] = ()
    unpaired_start_subpaths: tuple[UnpairedSubpath, ...] = ()
    unpaired_end_subpaths: tuple[UnpairedSubpath, ...] = ()
    width: float = 0.0
    height: float = 0.0


def prepare_subpaths(source: VectorSource, target_w: float, target_h: float) -> list[list[PathSegment]]:
    """Normalize, split and canonicalize one shape; longest subpath first."""
    scale_x, scale_y = scale_factors(source.bounds, target_w, target_h)
    normalized = normalize(source.commands, source.bounds.offset, scale_x, scale_y)
    subpaths = [to_path_segments(sp) for sp in split_subpaths(normalized)]
    return sorted(subpaths, key=segments_length, reverse=True)


def generate_path_data(
    start: VectorSource,
    end: VectorSource,
    config: MorphConfig | None = None,
) -> PathData:
    """Match ``start`` against ``end``. Pure; safe to run on any thread."""
    config = config or MorphConfig()
    t0 = time.perf_counter()

    target_w, target_h = target_size(start.bounds, end.bounds, config.width, config.height)
    start_subpaths = prepare_subpaths(start, target_w, target_h)
    end_subpaths = prepare_subpaths(end, target_w, target_h)
    logger.debug(
        "  prepared %d start / %d end subpaths in %.1fms",
        len(start_subpaths),
        len(end_subpaths),
        (time.perf_counter() - t0) * 1000,
    )

    n = min(len(start_subpaths), len(end_subpaths))
    paired = tuple(
        PairedSubpath.from_segments(s, e, config) for s, e in zip(start_subpaths[:n], end_subpaths[:n])
    )
    unpaired_start = tuple(UnpairedSubpath(sp, config.closed_tolerance) for sp in start_subpaths[n:])
    unpaired_end = tuple(UnpairedSubpath(sp, config.closed_tolerance) for sp in end_subpaths[n:])

    if not start_subpaths or not end_subpaths:
        logger.warning(
            "Nothing to pair: %d start / %d end subpaths",
            len(start_subpaths),
            len(end_subpaths),
        )
    logger.info(
        "Matched %d paired, %d unpaired start, %d unpaired end subpaths in %.0fms",
        len(paired),
        len(unpaired_start),
        len(unpaired_end),
        (time.perf_counter() - t0) * 1000,
    )
    return PathData(
        paired_subpaths=paired,
        unpaired_start_subpaths=unpaired_start,
        unpaired_end_subpaths=unpaired_end,
        width=target_w,
        height=target_h,
    )
