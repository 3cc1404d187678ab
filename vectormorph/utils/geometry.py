"""Leaf-node geometry helpers. No engine imports."""

from __future__ import annotations

import math

import numpy as np
from numpy.typing import NDArray


def clamp01(value: float) -> float:
    """Clamp into [0, 1]; NaN maps to 0."""
    if math.isnan(value):
        return 0.0
    return min(max(float(value), 0.0), 1.0)


def lerp(p0: tuple[float, float], p1: tuple[float, float], t: float) -> tuple[float, float]:
    """Point at parameter t on the straight segment p0 → p1."""
    return (p0[0] + (p1[0] - p0[0]) * t, p0[1] + (p1[1] - p0[1]) * t)


def reflect(point: tuple[float, float], about: tuple[float, float]) -> tuple[float, float]:
    """Point reflection of ``point`` through ``about``."""
    return (2 * about[0] - point[0], 2 * about[1] - point[1])


def mix(start: NDArray[np.float64], end: NDArray[np.float64], t: float) -> NDArray[np.float64]:
    """Blend two coordinate arrays. Exact at t=0 and t=1."""
    return (1.0 - t) * start + t * end


def cubic_points(
    p0: tuple[float, float],
    p1: tuple[float, float],
    p2: tuple[float, float],
    p3: tuple[float, float],
    ts: NDArray[np.float64],
) -> NDArray[np.float64]:
    """Evaluate a cubic Bézier at each t in ``ts``. Returns Nx2."""
    ctrl = np.array([p0, p1, p2, p3], dtype=np.float64)
    t = ts[:, None]
    mt = 1.0 - t
    return mt**3 * ctrl[0] + 3 * mt**2 * t * ctrl[1] + 3 * mt * t**2 * ctrl[2] + t**3 * ctrl[3]


def signed_area(points: NDArray[np.float64]) -> float:
    """Shoelace formula for signed area. Positive = CCW, Negative = CW."""
    if len(points) < 3:
        return 0.0
    x = points[:, 0]
    y = points[:, 1]
    return float(0.5 * np.sum(x[:-1] * y[1:] - x[1:] * y[:-1]))


def winding_direction(points: NDArray[np.float64]) -> int:
    """Return 1 for CCW, -1 for CW, 0 if degenerate."""
    sa = signed_area(points)
    if sa > 0:
        return 1
    elif sa < 0:
        return -1
    return 0

