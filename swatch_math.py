# -*- coding: utf-8 -*-
"""
Swatch: Weaving accessible color palettes from contrast targets
Copyright (c) 2026 opticsWolf

SPDX-License-Identifier: LGPL-3.0-or-later

Module: swatch_math.py — scalar rounding and number rendering helpers.

Palette values are compared and printed after rounding, so every module
rounds the same way: half-up towards +inf (``round_half_up(-2.5) == -2``),
not Python's banker's rounding.
"""

import math
from typing import Final

__all__ = ["round_half_up", "number_to_str"]

# Absorbs binary representation error, e.g. 1.005 * 100 = 100.49999999999999.
_ROUNDING_GUARD: Final[float] = 1e-9


def round_half_up(value: float, digits: int = 0) -> float:
    """
    Rounds to ``digits`` decimals with ties going towards +inf.

    Args:
        value: Number to round. NaN and inf are returned unchanged.
        digits: Number of decimals to keep.

    Returns:
        The rounded value as a float.
    """
    if not math.isfinite(value):
        return value
    scale = 10.0 ** digits
    scaled = value * scale
    return math.floor(scaled + 0.5 + _ROUNDING_GUARD * max(1.0, abs(scaled))) / scale


def number_to_str(value: float) -> str:
    """Renders a number the short way: integral values without a fraction, -0 as 0."""
    if value == 0:
        return "0"
    if float(value).is_integer():
        return str(int(value))
    return repr(float(value))
