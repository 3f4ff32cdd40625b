# -*- coding: utf-8 -*-
"""
Swatch: Weaving accessible color palettes from contrast targets
Copyright (c) 2026 opticsWolf

SPDX-License-Identifier: LGPL-3.0-or-later

Module: swatch_generate.py — contrast-targeted color generation.

For every requested ratio a bisection over the continuous color scale finds
the position whose color has that contrast against the background:

    1. Build the scale function over [0, granularity].
    2. Measure contrast at both ends to learn which way contrast grows.
    3. Bisect from the midpoint, halving the step each probe, until the
       measured contrast is within ``SEARCH_TOLERANCE`` of the target (plus
       ``RATIO_NUDGE``) or ``MAX_SEARCH_ITERATIONS`` probes were made.

A ratio outside the reachable range is not an error: the bisection simply
runs into the boundary it is pushed towards.
"""

import numpy as np
from typing import Dict, Final, List, Protocol, Sequence

from swatch_colorengine import ArrayFloat
from swatch_contrast import contrast
from swatch_math import round_half_up
from swatch_scale import ColorScale, color_scale

__all__ = [
    "DEFAULT_GRANULARITY",
    "SEARCH_TOLERANCE",
    "RATIO_NUDGE",
    "MAX_SEARCH_ITERATIONS",
    "ContrastProbe",
    "generate_colors",
]

DEFAULT_GRANULARITY: Final[int] = 3000
SEARCH_TOLERANCE: Final[float] = 0.01
# Bias towards the target's sign; offsets the rounding of found positions.
RATIO_NUDGE: Final[float] = 0.005
MAX_SEARCH_ITERATIONS: Final[int] = 100


class ScaleSource(Protocol):
    """What the search needs from a color definition."""

    resolved_key_colors: Sequence[str]
    color_space: str
    smooth: bool


class ContrastProbe:
    """
    Memoized contrast of scale positions against one background.

    Lives for a single ``generate_colors`` call.
    """

    def __init__(self, scale: ColorScale, background: ArrayFloat, background_v: float, algorithm: str):
        self.scale = scale
        self.background = np.asarray(background, dtype=np.float64)
        self.background_v = background_v
        self.algorithm = algorithm
        self._cache: Dict[float, float] = {}

    def __len__(self) -> int:
        return len(self._cache)

    def __call__(self, position: float) -> float:
        cached = self._cache.get(position)
        if cached is not None:
            return cached
        c = contrast(self.scale(position), self.background, self.background_v, self.algorithm)
        self._cache[position] = c
        return c

    def search(self, ratio: float, granularity: int, direction: int) -> float:
        """
        Bisects for the position whose contrast matches ``ratio``.

        Args:
            ratio: Target signed contrast.
            granularity: Upper end of the scale domain.
            direction: +1 if contrast grows with position, else -1.

        Returns:
            The position, rounded to 3 decimals.
        """
        target = ratio + RATIO_NUDGE * np.sign(ratio)

        step = granularity / 2.0
        dot = step
        c = self(dot)
        for _ in range(MAX_SEARCH_ITERATIONS):
            if abs(c - target) <= SEARCH_TOLERANCE:
                break
            step /= 2.0
            dot += (1.0 if c < target else -1.0) * step * direction
            c = self(dot)
        return round_half_up(dot, 3)


def generate_colors(
    color: ScaleSource,
    background: ArrayFloat,
    background_v: float,
    ratios: Sequence[float],
    algorithm: str,
    granularity: int = DEFAULT_GRANULARITY,
) -> List[ArrayFloat]:
    """
    Finds one color per target ratio on the color's scale.

    Args:
        color: Source of key colors, interpolation space and smoothing.
        background: Background sRGB triple in [0, 255].
        background_v: Normalized background lightness (dark mode below 0.5).
        ratios: Target signed contrast ratios.
        algorithm: ``'wcag2'`` or ``'wcag3'``.
        granularity: Resolution of the scale domain.

    Returns:
        sRGB triples (float64, [0, 255]) in the order of ``ratios``.
    """
    scale = color_scale(
        granularity,
        color.resolved_key_colors,
        color.color_space,
        shift=1.0,
        smooth=color.smooth,
        as_fn=True,
    )
    probe = ContrastProbe(scale, background, background_v, algorithm)

    first = probe(0.0)
    last = probe(float(granularity))
    direction = 1 if first < last else -1

    return [scale(probe.search(float(r), granularity, direction)) for r in ratios]
