"""VectorMorph shape-morphing engine."""

from vectormorph.engine.animator import MorphAnimator, MorphFrame, create_animator, precompute_data
from vectormorph.engine.commands import Bounds, PathSegment, Point, VectorSource
from vectormorph.engine.config import MorphConfig
from vectormorph.engine.matching import PairedSubpath, PathData, UnpairedSubpath, generate_path_data

__all__ = [
    "MorphAnimator",
    "MorphFrame",
    "create_animator",
    "precompute_data",
    "Bounds",
    "PathSegment",
    "Point",
    "VectorSource",
    "MorphConfig",
    "PairedSubpath",
    "PathData",
    "UnpairedSubpath",
    "generate_path_data",
]
