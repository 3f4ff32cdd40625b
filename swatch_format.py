# -*- coding: utf-8 -*-
"""
Swatch: Weaving accessible color palettes from contrast targets
Copyright (c) 2026 opticsWolf

SPDX-License-Identifier: LGPL-3.0-or-later

Module: swatch_format.py — CSS serialization of palette colors.

    hex    #rrggbb
    rgb    rgb(r, g, b)              integer channels
    hsl    hsl(Hdeg, S%, L%)
    lab    lab(L%, a, b)
    lch    lch(L%, C, Hdeg)
    oklab  oklab(L%, a, b)           a, b to 2 decimals
    oklch  oklch(L%, C, Hdeg)        C to 2 decimals

Values are rounded half-up; undefined hues print as 0.
"""

import numpy as np
from typing import Callable, Dict, Final, Sequence, Tuple, Union

from color_spaces import COLOR_SPACES, OUTPUT_FORMATS, parse_color, to_hex
from swatch_colorengine import ArrayFloat
from swatch_math import round_half_up, number_to_str

__all__ = ["fmt_color", "validate_output_format"]

ColorLike = Union[str, Sequence[float], ArrayFloat]
_Formatter = Callable[[float], str]


def _value(digits: int) -> _Formatter:
    return lambda v: number_to_str(round_half_up(v, digits))

def _percent(scale: float) -> _Formatter:
    return lambda v: f"{number_to_str(round_half_up(v * scale))}%"

def _degrees(v: float) -> str:
    return f"{number_to_str(round_half_up(v))}deg"


_CHANNEL_FORMATTERS: Final[Dict[str, Tuple[_Formatter, _Formatter, _Formatter]]] = {
    "rgb":   (_value(0), _value(0), _value(0)),
    "hsl":   (_degrees, _percent(100.0), _percent(100.0)),
    "lab":   (_percent(1.0), _value(0), _value(0)),
    "lch":   (_percent(1.0), _value(0), _degrees),
    "oklab": (_percent(100.0), _value(2), _value(2)),
    "oklch": (_percent(100.0), _value(2), _degrees),
}


def validate_output_format(output_format: str) -> str:
    """Returns ``output_format`` or raises ValueError if it is not supported."""
    if output_format not in OUTPUT_FORMATS:
        raise ValueError(
            f"Output format {output_format!r} not supported. "
            f"Supported: {', '.join(sorted(OUTPUT_FORMATS))}"
        )
    return output_format


def fmt_color(color: ColorLike, output_format: str) -> str:
    """
    Serializes a color as a CSS string.

    Args:
        color: A color string or an sRGB triple in [0, 255].
        output_format: One of ``OUTPUT_FORMATS``.

    Returns:
        The CSS string.

    Raises:
        ValueError: 'unrecognized format' for any other output format.
    """
    rgb = parse_color(color) if isinstance(color, str) else np.asarray(color, dtype=np.float64)
    rgb = np.clip(np.nan_to_num(rgb), 0.0, 255.0)

    if output_format == "hex":
        return to_hex(rgb)

    formatters = _CHANNEL_FORMATTERS.get(output_format)
    if formatters is None:
        raise ValueError(f"unrecognized format {output_format!r}")

    coords = np.nan_to_num(COLOR_SPACES[output_format].to_space(rgb))
    parts = ", ".join(f(float(c)) for f, c in zip(formatters, coords))
    return f"{output_format}({parts})"
