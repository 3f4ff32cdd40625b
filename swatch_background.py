# -*- coding: utf-8 -*-
"""
Swatch: Weaving accessible color palettes from contrast targets
Copyright (c) 2026 opticsWolf

SPDX-License-Identifier: LGPL-3.0-or-later

Module: swatch_background.py — lightness-indexed background candidates.

A theme's background color is picked from a scale of its background
``Color`` by the theme's lightness (0 = darkest, 100 = white): the full
scale is sampled finely, reduced to one entry per rounded HSLuv lightness
and ordered dark to light.
"""

import numpy as np
from typing import Final, List, Sequence

from color_spaces import COLOR_SPACES, parse_color
from swatch_format import fmt_color
from swatch_math import round_half_up
from swatch_scale import color_scale

__all__ = [
    "BACKGROUND_GRANULARITY",
    "BACKGROUND_STEPS",
    "create_background_color_scale",
]

BACKGROUND_GRANULARITY: Final[int] = 1000
BACKGROUND_STEPS: Final[int] = 100


def _rounded_lightness(colors: Sequence[str]) -> List[float]:
    rgb = np.array([parse_color(c) for c in colors], dtype=np.float64)
    return [round_half_up(float(v)) for v in COLOR_SPACES["hsluv"].to_space(rgb)[:, 2]]


def create_background_color_scale(color, output_format: str) -> List[str]:
    """
    Candidate background colors of ``color``, dark to light.

    The key colors themselves are added to the sampled scale so they are
    always reachable. Of colors sharing a rounded lightness the last one
    is kept. The list is capped at ``BACKGROUND_STEPS`` entries and ends
    with white.

    Args:
        color: A ``Color`` (key colors, space, smoothing).
        output_format: Format of the returned CSS strings.

    Returns:
        At most ``BACKGROUND_STEPS + 1`` formatted colors.
    """
    candidates = color_scale(
        BACKGROUND_GRANULARITY,
        color.key_colors,
        color.color_space,
        shift=1.0,
        smooth=color.smooth,
    )
    candidates = list(candidates) + list(color.key_colors)

    by_lightness = {}
    for value, candidate in zip(_rounded_lightness(candidates), candidates):
        by_lightness[value] = candidate

    ordered = [by_lightness[v] for v in sorted(by_lightness)]
    ordered = ordered[:BACKGROUND_STEPS] + ["#ffffff"]
    return [fmt_color(c, output_format) for c in ordered]
