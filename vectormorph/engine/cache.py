"""Interpolation cache — fixed-resolution slots over the progress axis.

``smoothness`` gives ``smoothness + 1`` slots spanning fraction 0..1
inclusive. A fraction maps to slot ``round(fraction * smoothness)`` with
halves rounded up, after clamping to [0, 1] (NaN counts as 0). Each slot
stores one immutable command tuple per shape kind or None until it is first
computed.

A miss is computed at the slot's own fraction ``index / smoothness``, not at
the exact fraction requested, so any fraction inside a slot returns the same
shape regardless of which one filled it first.

Writes are last-write-wins: two threads missing the same slot both compute
it and store identical results, so no lock is taken.
"""

from __future__ import annotations

import enum
import logging
import math
from typing import Callable

from vectormorph.engine.commands import PathCommand
from vectormorph.utils.geometry import clamp01

logger = logging.getLogger(__name__)

Shape = tuple[PathCommand, ...]


class ShapeKind(enum.Enum):
    PAIRED = "paired"
    UNPAIRED_START = "unpaired_start"
    UNPAIRED_END = "unpaired_end"


def slot_index(fraction: float, smoothness: int) -> int:
    return int(math.floor(clamp01(fraction) * smoothness + 0.5))


def slot_fraction(index: int, smoothness: int) -> float:
    return index / smoothness


class AnimationData:
    """Per-kind arrays of optional precomputed shapes."""

    def __init__(self, smoothness: int) -> None:
        if smoothness < 1:
            raise ValueError(f"smoothness must be a positive integer, got {smoothness}")
        self.smoothness = smoothness
        self._slots: dict[ShapeKind, list[Shape | None]] = {
            kind: [None] * (smoothness + 1) for kind in ShapeKind
        }

    def slot(self, fraction: float) -> int:
        return slot_index(fraction, self.smoothness)

    def get(self, kind: ShapeKind, fraction: float) -> Shape | None:
        return self._slots[kind][self.slot(fraction)]

    def put(self, kind: ShapeKind, fraction: float, shape: Shape) -> None:
        self._slots[kind][self.slot(fraction)] = shape

    def get_or_compute(self, kind: ShapeKind, fraction: float, compute: Callable[[float], Shape]) -> Shape:
        """Return the cached shape for ``fraction``'s slot, computing it on a miss.

        ``compute`` is evaluated at the slot's own fraction so the stored shape
        does not depend on which fraction inside the slot was asked first.
        """
        index = self.slot(fraction)
        cached = self._slots[kind][index]
        if cached is not None:
            return cached
        logger.debug("Cache miss: %s slot %d/%d", kind.value, index, self.smoothness)
        shape = compute(slot_fraction(index, self.smoothness))
        self._slots[kind][index] = shape
        return shape

    def fill(self, kind: ShapeKind, compute: Callable[[float], Shape], indices: range | None = None) -> None:
        """Eagerly compute ``indices`` (default: every slot)."""
        if indices is None:
            indices = range(self.smoothness + 1)
        slots = self._slots[kind]
        for index in indices:
            slots[index] = compute(slot_fraction(index, self.smoothness))

    def filled(self, kind: ShapeKind) -> int:
        return sum(1 for s in self._slots[kind] if s is not None)
