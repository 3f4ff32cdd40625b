# -*- coding: utf-8 -*-
"""
Swatch: Weaving accessible color palettes from contrast targets
Copyright (c) 2026 opticsWolf

SPDX-License-Identifier: LGPL-3.0-or-later

Module: swatch_contrast.py — signed contrast of a swatch against a background.

Two algorithms, selected by name:
    wcag2  WCAG 2.x luminance ratio (L_light + 0.05) / (L_dark + 0.05),
           in [1, 21].
    wcag3  APCA-W3 lightness contrast Lc, roughly in [-108, 106].

The sign encodes polarity relative to the theme's mode. A background whose
normalized lightness is below ``DARK_MODE_THRESHOLD`` puts the theme in dark
mode. In either mode a positive value means the swatch moves away from the
background in the mode's "forward" direction (lighter in dark mode, darker
in light mode); a negative value means the swatch is on the other side.
"""

import numpy as np
from typing import Callable, Dict, Final, List, Optional, Sequence

from color_spaces import COLOR_SPACES
from swatch_colorengine import ArrayFloat, LuminanceEngine
from swatch_math import round_half_up, number_to_str

__all__ = [
    "CONTRAST_ALGORITHMS",
    "DARK_MODE_THRESHOLD",
    "MIN_RATIO",
    "is_darkmode",
    "background_lightness",
    "contrast",
    "wcag2_contrast",
    "wcag3_contrast",
    "multiply_contrast_ratio",
    "is_positive_ratio",
    "min_positive_ratio",
    "ratio_names",
    "validate_algorithm",
]

DARK_MODE_THRESHOLD: Final[float] = 0.5

# Smallest ratio that still counts as "positive" for naming.
MIN_RATIO: Final[Dict[str, float]] = {
    "wcag2": 0.0,
    "wcag3": 1.0,
}

CONTRAST_ALGORITHMS: Final[frozenset] = frozenset(MIN_RATIO)


def validate_algorithm(algorithm: str) -> str:
    """Returns ``algorithm`` or raises ValueError if it is not supported."""
    if algorithm not in CONTRAST_ALGORITHMS:
        raise ValueError(
            f"Unrecognized contrast algorithm {algorithm!r}. "
            f"Supported algorithms: {', '.join(sorted(CONTRAST_ALGORITHMS))}"
        )
    return algorithm


def is_darkmode(background_v: float) -> bool:
    return background_v < DARK_MODE_THRESHOLD


def background_lightness(background: ArrayFloat) -> float:
    """HSLuv lightness of an sRGB background in [0, 1], rounded to 2 decimals."""
    hsluv = COLOR_SPACES["hsluv"].to_space(np.asarray(background, dtype=np.float64))
    return round_half_up(float(hsluv[2]) / 100.0, 2)


def wcag2_contrast(color: ArrayFloat, background: ArrayFloat, dark_mode: bool) -> float:
    """
    Signed WCAG 2.x contrast ratio.

    Args:
        color: Swatch sRGB triple in [0, 255].
        background: Background sRGB triple in [0, 255].
        dark_mode: Whether the background counts as dark.

    Returns:
        ``+ratio`` / ``-ratio`` by polarity; exactly 1.0 for equal luminance.
    """
    yc = LuminanceEngine.wcag2_luminance(color)
    yb = LuminanceEngine.wcag2_luminance(background)

    if yc == yb:
        return 1.0

    if yc >= yb:
        ratio = (yc + 0.05) / (yb + 0.05)
        return ratio if dark_mode else -ratio
    ratio = (yb + 0.05) / (yc + 0.05)
    return -ratio if dark_mode else ratio


def wcag3_contrast(color: ArrayFloat, background: ArrayFloat, dark_mode: bool) -> float:
    """APCA lightness contrast of ``color`` as text on ``background``, negated in dark mode."""
    lc = LuminanceEngine.apca_contrast(
        LuminanceEngine.apca_luminance(color),
        LuminanceEngine.apca_luminance(background),
    )
    return -lc if dark_mode else lc


_ALGORITHMS: Final[Dict[str, Callable[[ArrayFloat, ArrayFloat, bool], float]]] = {
    "wcag2": wcag2_contrast,
    "wcag3": wcag3_contrast,
}


def contrast(
    color: ArrayFloat,
    background: ArrayFloat,
    background_v: Optional[float] = None,
    algorithm: str = "wcag3",
) -> float:
    """
    Signed contrast of a swatch against a background.

    Args:
        color: Swatch sRGB triple, channels in [0, 255].
        background: Background sRGB triple, channels in [0, 255].
        background_v: Normalized background lightness deciding dark mode.
            Defaults to the background's rounded HSLuv lightness / 100.
        algorithm: ``'wcag2'`` or ``'wcag3'``.

    Returns:
        The signed contrast value.

    Raises:
        ValueError: For an unknown algorithm.
    """
    fn = _ALGORITHMS[validate_algorithm(algorithm)]
    if background_v is None:
        background_v = background_lightness(background)
    return fn(np.asarray(color, dtype=np.float64),
              np.asarray(background, dtype=np.float64),
              is_darkmode(background_v))


def multiply_contrast_ratio(ratio: float, multiplier: float) -> float:
    """
    Scales a ratio away from its neutral value.

    Ratios above 1 scale around 1, ratios below -1 around -1. Anything in
    between has no defined direction and collapses to 1.

    Returns:
        The scaled ratio rounded to 2 decimals.
    """
    if ratio > 1:
        r = (ratio - 1) * multiplier + 1
    elif ratio < -1:
        r = (ratio + 1) * multiplier - 1
    else:
        r = 1.0
    return round_half_up(r, 2)


def is_positive_ratio(ratio: float, algorithm: str) -> bool:
    return ratio >= MIN_RATIO[validate_algorithm(algorithm)]


def min_positive_ratio(ratios: Sequence[float], algorithm: str) -> Optional[float]:
    """Smallest positive ratio, or None if there is none."""
    positive = [r for r in ratios if is_positive_ratio(r, algorithm)]
    return min(positive) if positive else None


def ratio_names(ratios: Sequence[float], algorithm: str) -> List[str]:
    """
    Names a set of ratios by rank, independent of their values.

    Sorted ascending, negative ratios are spread evenly over (0, 100) and
    positive ratios count up in steps of 100 starting at 100::

        [-1.5, -1, -0.25, 0, 1.5, 4], 'wcag2' -> ['25', '50', '75', '100', '200', '300']
        [-1.5, -1, -0.25, 0, 1.5, 4], 'wcag3' -> ['20', '40', '60', '80', '100', '200']

    The names are meant to be paired with ``sorted(ratios)``.
    """
    ordered = sorted(ratios)
    smallest = min_positive_ratio(ordered, algorithm)
    n_neg = len(ordered) if smallest is None else ordered.index(smallest)
    n_pos = len(ordered) - n_neg

    step = 100.0 / (n_neg + 1)
    names = [round_half_up(step * (i + 1)) for i in range(n_neg)]
    names += [float((i + 1) * 100) for i in range(n_pos)]
    return [number_to_str(n) for n in sorted(names)]
