"""Subpath splitter — break a flat command list into independent contours.

Every returned subpath:
- starts with exactly one absolute MoveTo (relative moves are resolved,
  runs of consecutive moves collapse into the last one)
- contains at least one command with visible extent
- ends with Close when its last point coincides with its first
- never continues past a Close; drawing after one opens a new subpath

An explicit Close that does not land on the subpath start is replaced by a
LineTo back to the start followed by the Close marker, so the closing edge
survives canonicalization as an ordinary segment.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field

from vectormorph.engine.commands import (
    MOVE_TYPES,
    Close,
    LineTo,
    MoveTo,
    PathCommand,
    Point,
    RelativeMoveTo,
    advance,
    ORIGIN,
)

logger = logging.getLogger(__name__)


@dataclass
class _SplitState:
    """Accumulator threaded through a single pass over the commands."""

    cursor: Point = ORIGIN
    current: list[PathCommand] = field(default_factory=list)
    done: list[list[PathCommand]] = field(default_factory=list)

    @property
    def subpath_start(self) -> Point:
        first = self.current[0]
        return Point(first.x, first.y)

    def flush(self) -> None:
        if not self.current:
            return
        if self.cursor == self.subpath_start and not isinstance(self.current[-1], Close):
            self.current.append(Close())
        self.done.append(self.current)
        self.current = []


def _has_extent(subpath: list[PathCommand]) -> bool:
    return any(not isinstance(c, (*MOVE_TYPES, Close)) for c in subpath)


def _move(state: _SplitState, command: MoveTo | RelativeMoveTo) -> None:
    target = advance(command, state.cursor)
    if state.current and isinstance(state.current[-1], MoveTo):
        state.current.pop()
    state.flush()
    state.cursor = target
    state.current.append(MoveTo(target.x, target.y))


def _close(state: _SplitState) -> None:
    start = state.subpath_start
    if state.cursor != start:
        state.current.append(LineTo(start.x, start.y))
        state.cursor = start
    if not isinstance(state.current[-1], Close):
        state.current.append(Close())


def split_subpaths(commands: list[PathCommand] | tuple[PathCommand, ...]) -> list[list[PathCommand]]:
    """Partition ``commands`` into subpaths, preserving input order."""
    state = _SplitState()
    for command in commands:
        if isinstance(command, MOVE_TYPES):
            _move(state, command)
            continue
        if state.current and isinstance(state.current[-1], Close):
            # Drawing after a close starts a new contour at the closed start point
            state.flush()
        if not state.current:
            state.current.append(MoveTo(state.cursor.x, state.cursor.y))
        if isinstance(command, Close):
            _close(state)
            continue
        state.current.append(command)
        state.cursor = advance(command, state.cursor)
    state.flush()

    subpaths = [sp for sp in state.done if _has_extent(sp)]
    dropped = len(state.done) - len(subpaths)
    if dropped:
        logger.debug("Dropped %d empty subpath(s)", dropped)
    return subpaths
