"""MorphAnimator — ties matching and the interpolation cache together.

One animator serves one (start, end) shape pair. Matching runs once at
construction; shapes for a given progress are computed on first request and
memoized for the animator's lifetime. Replace the animator when either shape
changes.
"""

from __future__ import annotations

import asyncio
import logging
import time
from dataclasses import dataclass

from vectormorph.engine.cache import AnimationData, Shape, ShapeKind
from vectormorph.engine.commands import VectorSource
from vectormorph.engine.config import MorphConfig
from vectormorph.engine.fade import fade_progress
from vectormorph.engine.matching import PathData, UnpairedSubpath, clamp_fraction, generate_path_data

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class MorphFrame:
    """Everything a renderer needs for one frame."""

    fraction: float
    paired: Shape
    unpaired_start: Shape
    unpaired_end: Shape
    start_alpha: float
    end_alpha: float


def _unpaired_shape(subpaths: tuple[UnpairedSubpath, ...], progress: float) -> Shape:
    # Fully faded out: nothing left to draw
    if progress >= 1.0:
        return ()
    return tuple(c for sp in subpaths for c in sp.interpolated_commands(progress))


class MorphAnimator:
    def __init__(
        self,
        path_data: PathData,
        animation_data: AnimationData,
        config: MorphConfig | None = None,
    ) -> None:
        self.path_data = path_data
        self.animation_data = animation_data
        self.config = config or MorphConfig()

    @classmethod
    def create(cls, start: VectorSource, end: VectorSource, config: MorphConfig | None = None) -> MorphAnimator:
        config = config or MorphConfig()
        t0 = time.perf_counter()
        path_data = generate_path_data(start, end, config)
        animator = cls(path_data, AnimationData(config.smoothness), config)
        animator.warm(dense=config.precompute)
        logger.info(
            "Animator ready: smoothness=%d precompute=%s in %.0fms",
            config.smoothness,
            config.precompute,
            (time.perf_counter() - t0) * 1000,
        )
        return animator

    # --- Computation ---

    def compute_paired(self, fraction: float) -> Shape:
        return tuple(c for sp in self.path_data.paired_subpaths for c in sp.interpolated_commands(fraction))

    def compute_unpaired_start(self, progress: float) -> Shape:
        return _unpaired_shape(self.path_data.unpaired_start_subpaths, progress)

    def compute_unpaired_end(self, progress: float) -> Shape:
        return _unpaired_shape(self.path_data.unpaired_end_subpaths, progress)

    def _computers(self):
        return {
            ShapeKind.PAIRED: self.compute_paired,
            ShapeKind.UNPAIRED_START: self.compute_unpaired_start,
            ShapeKind.UNPAIRED_END: self.compute_unpaired_end,
        }

    def warm(self, dense: bool = False) -> None:
        """Fill the endpoint slots, or every slot when ``dense``."""
        last = self.animation_data.smoothness
        indices = None if dense else range(0, last + 1, last)
        for kind, compute in self._computers().items():
            self.animation_data.fill(kind, compute, indices)

    # --- Queries ---

    def get_paired_shape(self, fraction: float) -> Shape:
        return self.animation_data.get_or_compute(ShapeKind.PAIRED, fraction, self.compute_paired)

    def get_unpaired_start_shape(self, progress: float) -> Shape:
        return self.animation_data.get_or_compute(ShapeKind.UNPAIRED_START, progress, self.compute_unpaired_start)

    def get_unpaired_end_shape(self, progress: float) -> Shape:
        return self.animation_data.get_or_compute(ShapeKind.UNPAIRED_END, progress, self.compute_unpaired_end)

    def frame(self, fraction: float, breakpoint: float | None = None) -> MorphFrame:
        """Paired shape plus both unpaired shapes and their alphas at ``fraction``."""
        f = clamp_fraction(fraction)
        fade = fade_progress(f, self.config.fade_breakpoint if breakpoint is None else breakpoint)
        return MorphFrame(
            fraction=f,
            paired=self.get_paired_shape(f),
            unpaired_start=self.get_unpaired_start_shape(fade.start_progress),
            unpaired_end=self.get_unpaired_end_shape(fade.end_progress),
            start_alpha=fade.start_alpha,
            end_alpha=fade.end_alpha,
        )


def precompute_data(
    start: VectorSource,
    end: VectorSource,
    width: float = 0.0,
    height: float = 0.0,
    smoothness: int = 200,
) -> tuple[PathData, AnimationData]:
    """Match both shapes and fill every cache slot up front."""
    config = MorphConfig(width=width, height=height, smoothness=smoothness, precompute=True)
    animator = MorphAnimator.create(start, end, config)
    return animator.path_data, animator.animation_data


async def create_animator(
    start: VectorSource,
    end: VectorSource,
    config: MorphConfig | None = None,
) -> MorphAnimator:
    """Build an animator on the default executor, off the event loop thread.

    The returned animator is complete; hand it to the rendering side as a
    whole rather than sharing it while it is being built.
    """
    loop = asyncio.get_running_loop()
    return await loop.run_in_executor(None, MorphAnimator.create, start, end, config)
