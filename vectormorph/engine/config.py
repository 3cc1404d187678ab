"""Morph configuration — tunables for matching and caching."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass
class MorphConfig:
    """Controls normalization, matching and the interpolation cache."""

    # Target size of the normalized coordinate space (<= 0: max of both shapes)
    width: float = 0.0
    height: float = 0.0

    # Cache resolution: smoothness + 1 slots spanning fraction 0..1
    smoothness: int = 100
    # Fill every slot at construction instead of only the endpoints
    precompute: bool = False

    # Reverse the end side of a closed pair whose winding disagrees
    align_winding: bool = True
    # Max distance between first and last point for a subpath to count as closed
    closed_tolerance: float = 1e-3
    # Points sampled per cubic when estimating winding
    winding_samples: int = 8

    # Share of the progress axis over which unpaired subpaths fade
    fade_breakpoint: float = 0.2
