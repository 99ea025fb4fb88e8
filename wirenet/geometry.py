"""Point and segment primitives used by the wire graph stages.

Points are plain tuples; computations go through numpy and results are
converted back to tuples of floats so they can live inside frozen values.
"""

from __future__ import annotations

import math
from typing import Optional, Sequence, Tuple

import numpy as np

from .config import get_config
from .model import Point, Segment

EPSILON = 0.001
EPSILON_SQ = EPSILON * EPSILON

PositionKey = Tuple[float, float]


def _as_array(value: Sequence[float]) -> np.ndarray:
    arr = np.asarray(value, dtype=float)
    if arr.ndim != 1 or arr.shape[0] not in (2, 3):
        raise ValueError("point must have two or three coordinates")
    return arr


def _as_point(arr: np.ndarray) -> Point:
    return tuple(float(v) for v in arr)


def distance_sq(a: Sequence[float], b: Sequence[float]) -> float:
    diff = _as_array(a)[:2] - _as_array(b)[:2]
    return float(np.dot(diff, diff))


def points_equal(a: Sequence[float], b: Sequence[float]) -> bool:
    return distance_sq(a, b) < EPSILON_SQ


def parametric_position(p0: Sequence[float], p1: Sequence[float], pt: Sequence[float]) -> float:
    """Return ``t`` such that ``p0 + t * (p1 - p0)`` is the projection of ``pt``.

    The value is not clamped. A degenerate segment yields ``0.0``.
    """

    start = _as_array(p0)[:2]
    direction = _as_array(p1)[:2] - start
    denom = float(np.dot(direction, direction))
    if denom <= 1e-12:
        return 0.0
    rel = _as_array(pt)[:2] - start
    return float(np.dot(rel, direction) / denom)


def nearest_point_on_segment(p0: Sequence[float], p1: Sequence[float], pt: Sequence[float]) -> Point:
    """Project ``pt`` onto the closed segment ``p0``-``p1`` in the xy plane."""

    t = min(max(parametric_position(p0, p1, pt), 0.0), 1.0)
    start = _as_array(p0)[:2]
    return _as_point(start + (_as_array(p1)[:2] - start) * t)


def is_attached(seg: Segment, pt: Sequence[float]) -> bool:
    nearest = nearest_point_on_segment(seg.p0, seg.p1, pt)
    return distance_sq(nearest, pt) < EPSILON_SQ


def is_interior_attached(seg: Segment, pt: Sequence[float]) -> bool:
    """Attached to ``seg`` away from both of its endpoints."""

    if not is_attached(seg, pt):
        return False
    t = parametric_position(seg.p0, seg.p1, pt)
    return EPSILON < t < 1.0 - EPSILON


def segments_touch(a: Segment, b: Segment) -> bool:
    return (
        is_attached(a, b.p0)
        or is_attached(a, b.p1)
        or is_attached(b, a.p0)
        or is_attached(b, a.p1)
    )


def segment_length_sq(seg: Segment) -> float:
    return distance_sq(seg.p0, seg.p1)


def segment_direction(p0: Sequence[float], p1: Sequence[float]) -> Optional[np.ndarray]:
    vec = _as_array(p1)[:2] - _as_array(p0)[:2]
    norm = float(np.linalg.norm(vec))
    if norm <= 1e-12:
        return None
    return vec / norm


def translate(pt: Sequence[float], delta: Sequence[float]) -> Point:
    arr = _as_array(pt)
    offset = np.zeros_like(arr)
    shift = np.asarray(delta, dtype=float)[: arr.shape[0]]
    offset[: shift.shape[0]] = shift
    return _as_point(arr + offset)


def snap_to_grid(pt: Sequence[float], grid_size: Optional[float] = None) -> Point:
    """Round every coordinate to the nearest multiple of ``grid_size``."""

    size = get_config().grid_size if grid_size is None else grid_size
    arr = _as_array(pt)
    return _as_point(np.floor(arr / size + 0.5) * size)


def position_key(pt: Sequence[float], decimals: Optional[int] = None) -> PositionKey:
    """Quantize ``pt`` into a hashable key; ``-0.0`` and ``0.0`` share a key."""

    places = get_config().key_decimals if decimals is None else decimals
    x = round(float(pt[0]), places) + 0.0
    y = round(float(pt[1]), places) + 0.0
    if not (math.isfinite(x) and math.isfinite(y)):
        raise ValueError(f"cannot key non-finite position {pt!r}")
    return (x, y)
