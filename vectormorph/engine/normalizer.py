"""Normalizer — map a shape's bounding box onto a common target size.

Absolute coordinates are translated so the box's top-left lands on the
origin, then scaled per axis. Deltas and arc radii are only scaled.
"""

from __future__ import annotations

import logging
from dataclasses import fields, replace

from vectormorph.engine.commands import Bounds, MoveTo, PathCommand, Point

logger = logging.getLogger(__name__)

_X_FIELDS = {"x", "x1", "x2", "x3"}
_Y_FIELDS = {"y", "y1", "y2", "y3"}
_DX_FIELDS = {"dx", "dx1", "dx2", "dx3", "rx"}
_DY_FIELDS = {"dy", "dy1", "dy2", "dy3", "ry"}


def target_size(start: Bounds, end: Bounds, width: float = 0.0, height: float = 0.0) -> tuple[float, float]:
    """Resolve the output size; a non-positive axis falls back to the larger shape."""
    target_w = width if width > 0 else max(start.width, end.width)
    target_h = height if height > 0 else max(start.height, end.height)
    return target_w, target_h


def scale_factors(bounds: Bounds, target_w: float, target_h: float) -> tuple[float, float]:
    """Per-axis scale mapping ``bounds`` onto the target size.

    A zero-extent axis (e.g. a horizontal line) cannot be stretched; its
    factor is clamped to 1.
    """
    if bounds.width > 0:
        scale_x = target_w / bounds.width
    else:
        logger.warning("Zero-width bounds %s; x scale clamped to 1", bounds)
        scale_x = 1.0
    if bounds.height > 0:
        scale_y = target_h / bounds.height
    else:
        logger.warning("Zero-height bounds %s; y scale clamped to 1", bounds)
        scale_y = 1.0
    return scale_x, scale_y


def normalize_command(command: PathCommand, offset: Point, scale_x: float, scale_y: float) -> PathCommand:
    changes: dict[str, float] = {}
    for f in fields(command):
        value = getattr(command, f.name)
        if f.name in _X_FIELDS:
            changes[f.name] = (value - offset.x) * scale_x
        elif f.name in _Y_FIELDS:
            changes[f.name] = (value - offset.y) * scale_y
        elif f.name in _DX_FIELDS:
            changes[f.name] = value * scale_x
        elif f.name in _DY_FIELDS:
            changes[f.name] = value * scale_y
    return replace(command, **changes) if changes else command


def normalize(
    commands: list[PathCommand] | tuple[PathCommand, ...],
    offset: Point,
    scale_x: float,
    scale_y: float,
) -> list[PathCommand]:
    """Translate by ``-offset`` then scale every command.

    A synthetic MoveTo(0, 0) is prepended before the transform so that a
    sequence opening with a relative move still resolves against the same
    origin as the rest of the shape. The splitter collapses it away.
    """
    anchored = [MoveTo(0.0, 0.0), *commands]
    return [normalize_command(c, offset, scale_x, scale_y) for c in anchored]
