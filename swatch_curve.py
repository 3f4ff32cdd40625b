# -*- coding: utf-8 -*-
"""
Swatch: Weaving accessible color palettes from contrast targets
Copyright (c) 2026 opticsWolf

SPDX-License-Identifier: LGPL-3.0-or-later

Module: swatch_curve.py — Catmull-Rom splines as cubic Bézier segments with
O(1) integer-indexed lookup tables.

The smooth scale evaluates one spline per color channel thousands of times
per palette. Each Bézier segment is therefore sampled once, proportionally
to its arc length, into a dense table indexed by ``round(x)``; evaluation
is a single array read afterwards.

Pipeline:
    1. ``catmull_to_bezier``    control points -> n-1 Bézier segments
    2. ``approximate_bezier_len`` cheap polyline length estimate
    3. ``prepare_curve``         segment -> ``CurveLookup`` table

Conventions:
    - Control points are sorted by x (scale domains are sorted).
    - Rounding is half-up: ``round(2.5) == 3``.
    - Unset table entries are NaN internally and ``None`` at the API.
"""

import numpy as np
from numba import njit
from dataclasses import dataclass
from typing import Final, List, Optional, Sequence, Tuple, TypeAlias

from swatch_colorengine import ArrayFloat

__all__ = [
    "Point",
    "CubicBezier",
    "CurveLookup",
    "ARC_SAMPLING_DENSITY",
    "catmull_to_bezier",
    "approximate_bezier_len",
    "point_at",
    "prepare_curve",
]

Point: TypeAlias = Tuple[float, float]

# Table entries per unit of approximate arc length.
ARC_SAMPLING_DENSITY: Final[float] = 0.75


@dataclass(slots=True, frozen=True)
class CubicBezier:
    """One spline segment, defined by its four control points."""

    p0: Point
    p1: Point
    p2: Point
    p3: Point

    def as_array(self) -> ArrayFloat:
        """Control points as a (4, 2) float64 array."""
        return np.array([self.p0, self.p1, self.p2, self.p3], dtype=np.float64)


# =============================================================================
# 1. SPLINE CONSTRUCTION
# =============================================================================

def catmull_to_bezier(points: Sequence[Point]) -> List[CubicBezier]:
    """
    Converts a uniform Catmull-Rom spline into cubic Bézier segments.

    Tangents use the 1/6 coefficients, i.e. for the segment (v2, v3) with
    neighbours v1 and v4:

        p1 = (-v1 + 6 v2 + v3) / 6
        p2 = (-v4 + 6 v3 + v2) / 6

    Missing neighbours at the ends are extrapolated linearly
    (``v4 = 2 v3 - v2``); the first segment reuses v2 as its own v1.

    Args:
        points: n control points ``(x, y)``.

    Returns:
        n - 1 segments (empty for fewer than two points).
    """
    cps = np.asarray(points, dtype=np.float64).reshape(-1, 2)
    n = cps.shape[0]
    segments = []
    for i in range(n - 1):
        v1 = cps[max(i - 1, 0)]
        v2 = cps[i]
        v3 = cps[i + 1]
        v4 = cps[i + 2] if i < n - 2 else 2.0 * v3 - v2

        p1 = (-v1 + 6.0 * v2 + v3) / 6.0
        p2 = (-v4 + 6.0 * v3 + v2) / 6.0
        segments.append(CubicBezier(
            (float(v2[0]), float(v2[1])),
            (float(p1[0]), float(p1[1])),
            (float(p2[0]), float(p2[1])),
            (float(v3[0]), float(v3[1])),
        ))
    return segments


def point_at(curve: CubicBezier, t: float) -> Point:
    """Evaluates the Bernstein form of ``curve`` at parameter ``t``."""
    xy = _bezier_points(curve.as_array(), np.array([t], dtype=np.float64))[0]
    return float(xy[0]), float(xy[1])


def approximate_bezier_len(curve: CubicBezier, steps: int = 10) -> float:
    """
    Estimates the arc length of a segment by a ``steps``-edge polyline.

    Args:
        curve: Bézier segment.
        steps: Number of polyline edges.

    Returns:
        Sum of the Euclidean edge lengths (never above the true length).
    """
    t = np.arange(steps + 1, dtype=np.float64) / steps
    pts = _bezier_points(curve.as_array(), t)
    pts[-1] = curve.p3
    return float(np.sum(np.hypot(*np.diff(pts, axis=0).T)))


def _bezier_points(ctrl: ArrayFloat, t: ArrayFloat) -> ArrayFloat:
    """Vectorized Bernstein evaluation. ctrl (4, 2), t (M,) -> (M, 2)."""
    t = t[:, None]
    t1 = 1.0 - t
    return (t1 ** 3 * ctrl[0]
            + 3.0 * t1 * t1 * t * ctrl[1]
            + 3.0 * t1 * t * t * ctrl[2]
            + t ** 3 * ctrl[3])


# =============================================================================
# 2. LOOKUP TABLES
# =============================================================================

@njit(cache=True, fastmath=False)
def _fill_lookup_kernel(xs: ArrayFloat, ys: ArrayFloat) -> ArrayFloat:
    """
    Rasterizes sampled curve points into a table indexed by round(x).

    Later samples overwrite earlier ones at the same index. Skipped indices
    between consecutive samples are filled linearly, then unreached leading
    indices copy the nearest following value. Negative indices are dropped.
    """
    n = xs.size
    size = 0
    for i in range(n):
        ind = int(np.floor(xs[i] + 0.5))
        if ind + 1 > size:
            size = ind + 1

    table = np.full(size, np.nan)
    prev = -1
    for i in range(n):
        ind = int(np.floor(xs[i] + 0.5))
        if ind < 0:
            continue
        table[ind] = ys[i]
        if prev >= 0 and ind - prev > 1:
            s = table[prev]
            f = table[ind]
            step = (f - s) / (ind - prev)
            for j in range(prev + 1, ind):
                table[j] = s + step * (j - prev)
        prev = ind

    for i in range(size - 1, 0, -1):
        if np.isnan(table[i - 1]) and not np.isnan(table[i]):
            table[i - 1] = table[i]
    return table


class CurveLookup:
    """
    Read-only ``x -> y`` table of one Bézier segment.

    Calling the lookup with a scalar returns ``None`` for positions outside
    the table or never reached by the segment; ``sample`` is the vectorized
    form and marks such positions with NaN.
    """

    __slots__ = ("_table",)

    def __init__(self, table: ArrayFloat):
        self._table = np.asarray(table, dtype=np.float64)
        self._table.setflags(write=False)

    def __len__(self) -> int:
        return self._table.size

    def __repr__(self) -> str:
        return f"CurveLookup(size={self._table.size})"

    @property
    def table(self) -> ArrayFloat:
        return self._table

    def __call__(self, x: float) -> Optional[float]:
        ind = int(np.floor(x + 0.5))
        if ind < 0 or ind >= self._table.size:
            return None
        y = self._table[ind]
        return None if np.isnan(y) else float(y)

    def sample(self, xs: ArrayFloat) -> ArrayFloat:
        """
        Args:
            xs: Query positions, any shape.

        Returns:
            float64 array of the same shape; NaN where the table has no value.
        """
        xs = np.asarray(xs, dtype=np.float64)
        ind = np.floor(xs + 0.5)
        valid = (ind >= 0) & (ind < self._table.size)
        out = np.full(xs.shape, np.nan)
        out[valid] = self._table[ind[valid].astype(np.int64)]
        return out


def prepare_curve(curve: CubicBezier) -> CurveLookup:
    """
    Builds the lookup table of a Bézier segment.

    The segment is sampled at ``floor(ARC_SAMPLING_DENSITY * length) + 1``
    equally spaced parameter values (at least both endpoints).

    Args:
        curve: Segment whose x coordinates are increasing.

    Returns:
        The ``CurveLookup`` covering the integer indices ``0 .. round(max x)``.
    """
    n_steps = max(int(np.floor(approximate_bezier_len(curve) * ARC_SAMPLING_DENSITY)), 1)
    t = np.arange(n_steps + 1, dtype=np.float64) / n_steps
    pts = _bezier_points(curve.as_array(), t)
    table = _fill_lookup_kernel(np.ascontiguousarray(pts[:, 0]), np.ascontiguousarray(pts[:, 1]))
    return CurveLookup(table)
