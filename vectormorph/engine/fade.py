"""Fade schedule for unpaired subpaths.

Unpaired start subpaths fade out over ``[0, breakpoint]``; unpaired end
subpaths fade in over ``[1 - breakpoint, 1]``. Both are queried with an
opacity progress where 0 means fully shown and 1 means gone, so the end side
is handed ``1 - its fade-in progress``.
"""

from __future__ import annotations

from dataclasses import dataclass

from vectormorph.utils.geometry import clamp01


@dataclass(frozen=True)
class FadeState:
    start_progress: float
    start_alpha: float
    end_progress: float
    end_alpha: float


def fade_progress(fraction: float, breakpoint: float = 0.2) -> FadeState:
    if not 0.0 < breakpoint <= 1.0:
        raise ValueError(f"breakpoint must be in (0, 1], got {breakpoint}")
    f = clamp01(fraction)

    start = f / breakpoint if f <= breakpoint else 1.0
    end_breakpoint = 1.0 - breakpoint
    fade_in = 0.0 if f < end_breakpoint else (f - end_breakpoint) / breakpoint

    return FadeState(
        start_progress=clamp01(start),
        start_alpha=clamp01(1.0 - start),
        end_progress=clamp01(1.0 - fade_in),
        end_alpha=clamp01(fade_in),
    )
