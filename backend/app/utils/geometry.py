"""Leaf-node geometry helpers. No converter imports."""

from __future__ import annotations

import re

import numpy as np
from numpy.typing import NDArray

_NUMBER_RE = re.compile(r"[-+]?(?:\d+\.?\d*|\.\d+)(?:[eE][-+]?\d+)?")


def bbox(points: NDArray[np.float64]) -> tuple[float, float, float, float]:
    """Compute (xmin, ymin, xmax, ymax) bounding box."""
    if len(points) == 0:
        return (0.0, 0.0, 0.0, 0.0)
    return (
        float(np.min(points[:, 0])),
        float(np.min(points[:, 1])),
        float(np.max(points[:, 0])),
        float(np.max(points[:, 1])),
    )


def segment_bounds(x1: float, y1: float, x2: float, y2: float) -> tuple[float, float, float, float]:
    """(x, y, width, height) box spanned by a line segment."""
    xmin, ymin, xmax, ymax = bbox(np.array([[x1, y1], [x2, y2]], dtype=np.float64))
    return (xmin, ymin, xmax - xmin, ymax - ymin)


def circle_bounds(cx: float, cy: float, r: float) -> tuple[float, float, float, float]:
    """(x, y, width, height) box enclosing a circle."""
    return (cx - r, cy - r, 2 * r, 2 * r)


def path_numbers(d: str) -> NDArray[np.float64]:
    """All numeric tokens of a path `d` string, command letters dropped."""
    tokens = _NUMBER_RE.findall(d or "")
    if not tokens:
        return np.empty(0, dtype=np.float64)
    return np.array([float(t) for t in tokens], dtype=np.float64)


def path_extent(d: str, cap: float) -> tuple[float, float]:
    """Heuristic (width, height) of a path.

    Max of the even-indexed tokens for width, max of the odd-indexed tokens for
    height, each clamped to [0, cap]. Not a true bounding box: relative
    commands and arc flags skew it.
    """
    nums = path_numbers(d)
    if len(nums) == 0:
        return (0.0, 0.0)
    xs = nums[0::2]
    ys = nums[1::2]
    width = float(np.max(xs)) if len(xs) else 0.0
    height = float(np.max(ys)) if len(ys) else 0.0
    return (min(max(width, 0.0), cap), min(max(height, 0.0), cap))


def percent(value: float, extent: float) -> float:
    """Share of `extent` as a percentage. Zero extent maps to 0."""
    if extent == 0:
        return 0.0
    return value / extent * 100
