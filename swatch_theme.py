# -*- coding: utf-8 -*-
"""
Swatch: Weaving accessible color palettes from contrast targets
Copyright (c) 2026 opticsWolf

SPDX-License-Identifier: LGPL-3.0-or-later

Module: swatch_theme.py — themes: colors + background -> contrast palette.

Architecture:
  Primary state:  colors, background color, lightness, contrast,
                  saturation, algorithm, output format.
  Derived state:  background scale  <- background color
                  background value  <- background scale, lightness
                  palettes          <- background value, colors, contrast,
                                       saturation, algorithm, output format

  Derived state is computed on first read and dropped by every setter that
  touches one of its inputs (invalidation cascades downwards). Palettes are
  memoised per output format.
"""

from __future__ import annotations

import numbers
import re
import warnings
from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional, Sequence, Tuple, Union

from color_spaces import COLOR_SPACES, parse_color
from swatch_background import create_background_color_scale
from swatch_color import Color
from swatch_contrast import multiply_contrast_ratio, validate_algorithm
from swatch_format import fmt_color, validate_output_format
from swatch_generate import generate_colors
from swatch_math import round_half_up

__all__ = ["Theme", "Palette", "PaletteColor", "Swatch"]

_WHITESPACE_RE = re.compile(r"\s+")


# =============================================================================
# 1. PALETTE RECORDS
# =============================================================================

@dataclass(slots=True, frozen=True)
class Swatch:
    """One generated color: its name, target contrast and formatted value."""

    name: str
    contrast: float
    value: str


@dataclass(slots=True, frozen=True)
class PaletteColor:
    name: str
    values: Tuple[Swatch, ...]


@dataclass(slots=True, frozen=True)
class Palette:
    """
    Output of ``Theme.palette``.

    Attributes:
        background: Formatted background color.
        colors: Generated swatches per theme color.
        color_pairs: Swatch name -> value, starting with ``'background'``.
        color_values: All swatch values, flattened in order.
    """

    background: str
    colors: Tuple[PaletteColor, ...]
    color_pairs: Dict[str, str] = field(default_factory=dict)
    color_values: Tuple[str, ...] = ()

    def to_dict(self) -> Dict[str, Any]:
        """Plain representation; ``colors`` starts with the background entry."""
        colors: List[Dict[str, Any]] = [{"background": self.background}]
        for color in self.colors:
            colors.append({
                "name": color.name,
                "values": [
                    {"name": s.name, "contrast": s.contrast, "value": s.value}
                    for s in color.values
                ],
            })
        return {
            "colors": colors,
            "color_pairs": dict(self.color_pairs),
            "color_values": list(self.color_values),
        }


# =============================================================================
# 2. THEME
# =============================================================================

class Theme:
    """
    A set of colors generated against one background.

    Args:
        colors: The theme's ``Color`` definitions (copied).
        background_color: A ``Color`` (copied) or a CSS color string. A
            string also sets ``lightness`` to its rounded HSLuv lightness.
        lightness: Index into the background scale, 0 (dark) .. 100 (white).
        contrast: Multiplier applied to every target ratio.
        saturation: Optional saturation override for all colors.
        algorithm: ``'wcag2'`` or ``'wcag3'``.
        output_format: Default format of palette values.

    Raises:
        TypeError: If ``colors`` is not a sequence of ``Color`` or the
            background is neither a ``Color`` nor a string.
        ValueError: For an unknown algorithm or output format.
    """

    def __init__(
        self,
        colors: Sequence[Color],
        background_color: Union[Color, str],
        lightness: float = 100,
        contrast: float = 1,
        saturation: Optional[float] = None,
        algorithm: str = "wcag3",
        output_format: str = "rgb",
    ):
        # Derived state
        self._background_scale: Optional[List[str]] = None
        self._background_value: Optional[str] = None
        self._palettes: Dict[str, Palette] = {}

        self._saturation: Optional[float] = None
        self._set_colors(colors)
        self.with_lightness(lightness)
        self.with_contrast(contrast)
        if saturation is not None:
            self.with_saturation(saturation)
        self.with_algorithm(algorithm)
        self.with_output_format(output_format)
        self.with_background_color(background_color)

    def __repr__(self) -> str:
        return (f"Theme(colors={[c.name for c in self._colors]!r}, "
                f"background={self._background_color.key_colors[0]!r}, "
                f"lightness={self._lightness}, contrast={self._contrast}, "
                f"algorithm={self._algorithm!r}, output_format={self._output_format!r})")

    # --- Accessors ---

    @property
    def colors(self) -> Tuple[Color, ...]:
        return tuple(self._colors)

    @property
    def background_color(self) -> Color:
        return self._background_color

    @property
    def lightness(self) -> float:
        return self._lightness

    @property
    def contrast(self) -> float:
        return self._contrast

    @property
    def saturation(self) -> Optional[float]:
        return self._saturation

    @property
    def algorithm(self) -> str:
        return self._algorithm

    @property
    def output_format(self) -> str:
        return self._output_format

    @property
    def background_color_value(self) -> str:
        """The background picked from the background scale, as ``rgb(...)``."""
        if self._background_value is None:
            self._background_value = self._pick_background(self._get_background_scale())
        return self._background_value

    # --- Fluent setters ---

    def with_colors(self, colors: Sequence[Color]) -> Theme:
        self._set_colors(colors)
        if self._saturation is not None:
            for color in self._colors:
                color.with_saturation(self._saturation)
        return self

    def with_background_color(self, background_color: Union[Color, str]) -> Theme:
        if isinstance(background_color, str):
            self._background_color = Color(
                name="background",
                key_colors=[background_color],
                color_space="rgb",
                ratios=[],
            )
            hsluv = COLOR_SPACES["hsluv"].to_space(parse_color(background_color))
            self.with_lightness(round_half_up(float(hsluv[2])))
        elif isinstance(background_color, Color):
            self._background_color = background_color.clone()
        else:
            raise TypeError(
                f"Background color must be a Color or a color string, got {type(background_color).__name__}"
            )
        self._invalidate_background_scale()
        return self

    def with_lightness(self, lightness: float) -> Theme:
        self._lightness = self._check_number("lightness", lightness)
        self._invalidate_background_value()
        return self

    def with_contrast(self, contrast: float) -> Theme:
        self._contrast = self._check_number("contrast", contrast)
        self._invalidate_palettes()
        return self

    def with_saturation(self, saturation: float) -> Theme:
        if saturation != self._saturation:
            self._saturation = self._check_number("saturation", saturation)
            for color in self._colors:
                color.with_saturation(self._saturation)
            self._invalidate_palettes()
        return self

    def with_algorithm(self, algorithm: str) -> Theme:
        self._algorithm = validate_algorithm(algorithm)
        self._invalidate_palettes()
        return self

    def with_output_format(self, output_format: str) -> Theme:
        self._output_format = validate_output_format(output_format)
        self._invalidate_palettes()
        return self

    # --- Output ---

    def palette(self, output_format: Optional[str] = None) -> Palette:
        """
        Generates (or returns the memoised) palette.

        Args:
            output_format: Format of the values; defaults to the theme's.

        Returns:
            The ``Palette``.
        """
        fmt = validate_output_format(output_format or self._output_format)
        cached = self._palettes.get(fmt)
        if cached is not None:
            return cached

        background_value = self.background_color_value
        background_rgb = parse_color(background_value)
        background_v = self._lightness / 100.0

        colors = []
        for color in self._colors:
            prefix = _WHITESPACE_RE.sub("", color.name)
            pairs = color.ratios.resolve(self._algorithm, prefix)
            targets = [multiply_contrast_ratio(ratio, self._contrast) for _, ratio in pairs]

            generated = generate_colors(color, background_rgb, background_v, targets, self._algorithm)
            swatches = tuple(
                Swatch(name=name, contrast=target, value=fmt_color(rgb, fmt))
                for (name, _), target, rgb in zip(pairs, targets, generated)
            )
            colors.append(PaletteColor(name=color.name, values=swatches))

        background = fmt_color(background_value, fmt)
        color_pairs = {"background": background}
        color_pairs.update((s.name, s.value) for c in colors for s in c.values)

        palette = Palette(
            background=background,
            colors=tuple(colors),
            color_pairs=color_pairs,
            color_values=tuple(s.value for c in colors for s in c.values),
        )
        self._palettes[fmt] = palette
        return palette

    def to_dict(self) -> Dict[str, Any]:
        return {
            "colors": [c.to_dict() for c in self._colors],
            "background_color": self._background_color.to_dict(),
            "lightness": self._lightness,
            "contrast": self._contrast,
            "saturation": self._saturation,
            "algorithm": self._algorithm,
            "output_format": self._output_format,
            "background_color_value": self.background_color_value,
        }

    # --- Internals ---

    @staticmethod
    def _check_number(label: str, value: Any) -> float:
        if isinstance(value, bool) or not isinstance(value, numbers.Real):
            raise TypeError(f"{label} must be a number, got {value!r}")
        return value

    def _set_colors(self, colors: Sequence[Color]) -> None:
        if isinstance(colors, (str, bytes)) or not isinstance(colors, Sequence):
            raise TypeError("colors should be a sequence of Color instances")
        for color in colors:
            if not isinstance(color, Color):
                raise TypeError(f"colors contains a non-Color element: {color!r}")
        self._colors = [c.clone() for c in colors]
        self._invalidate_palettes()

    def _get_background_scale(self) -> List[str]:
        if self._background_scale is None:
            self._background_scale = create_background_color_scale(self._background_color, "rgb")
        return self._background_scale

    def _pick_background(self, scale: List[str]) -> str:
        index = int(round_half_up(self._lightness))
        clamped = min(max(index, 0), len(scale) - 1)
        if clamped != index:
            warnings.warn(
                f"Lightness {self._lightness} outside the background scale "
                f"(0..{len(scale) - 1}); using {clamped}",
                UserWarning,
                stacklevel=3,
            )
        return scale[clamped]

    def _invalidate_background_scale(self) -> None:
        self._background_scale = None
        self._invalidate_background_value()

    def _invalidate_background_value(self) -> None:
        self._background_value = None
        self._invalidate_palettes()

    def _invalidate_palettes(self) -> None:
        self._palettes.clear()
