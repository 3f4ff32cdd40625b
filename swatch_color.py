# -*- coding: utf-8 -*-
"""
Swatch: Weaving accessible color palettes from contrast targets
Copyright (c) 2026 opticsWolf

SPDX-License-Identifier: LGPL-3.0-or-later

Module: swatch_color.py — validated color definitions and their target ratios.

A ``Color`` names one semantic role of a theme ("blue", "grey", ...): its
key colors, the space its scale interpolates in, and the contrast ratios
its swatches should reach. Ratios come in two shapes:

    PositionalRatios  [1.5, 3, 4.5]          names derived by rank
    NamedRatios       {"link": 4.5, ...}     names given, order kept

Both resolve to an ordered list of ``(swatch name, ratio)`` pairs.
"""

from __future__ import annotations

import numbers
import numpy as np
from dataclasses import dataclass
from typing import Any, Dict, List, Mapping, Sequence, Tuple, Union

from color_spaces import COLOR_SPACES, INTERPOLATION_SPACES, is_valid_color, parse_color, to_hex
from swatch_contrast import ratio_names

__all__ = [
    "Color",
    "PositionalRatios",
    "NamedRatios",
    "Ratios",
    "make_ratios",
    "saturate",
]


def _check_ratio(value: Any) -> float:
    if isinstance(value, bool) or not isinstance(value, numbers.Real):
        raise TypeError(f"Ratios must be real numbers, got {value!r}")
    if not np.isfinite(value):
        raise ValueError(f"Ratios must be finite, got {value!r}")
    return float(value)


@dataclass(slots=True, frozen=True)
class PositionalRatios:
    """Unnamed target ratios; swatch names follow from ``ratio_names``."""

    values: Tuple[float, ...]

    def __post_init__(self) -> None:
        object.__setattr__(self, "values", tuple(_check_ratio(v) for v in self.values))

    def __len__(self) -> int:
        return len(self.values)

    def resolve(self, algorithm: str, color_name: str = "") -> List[Tuple[str, float]]:
        """Pairs ``color_name + rank name`` with the ratios sorted ascending."""
        ordered = sorted(self.values)
        names = ratio_names(ordered, algorithm)
        return [(f"{color_name}{n}", r) for n, r in zip(names, ordered)]

    def to_json(self) -> List[float]:
        return list(self.values)


@dataclass(slots=True, frozen=True)
class NamedRatios:
    """Target ratios keyed by swatch name, in insertion order."""

    entries: Tuple[Tuple[str, float], ...]

    def __post_init__(self) -> None:
        checked = []
        for name, value in self.entries:
            if not isinstance(name, str) or not name:
                raise ValueError(f"Ratio names must be non-empty strings, got {name!r}")
            checked.append((name, _check_ratio(value)))
        object.__setattr__(self, "entries", tuple(checked))

    def __len__(self) -> int:
        return len(self.entries)

    def resolve(self, algorithm: str, color_name: str = "") -> List[Tuple[str, float]]:
        """The entries as given; named swatches keep their own names."""
        return list(self.entries)

    def to_json(self) -> Dict[str, float]:
        return dict(self.entries)


Ratios = Union[PositionalRatios, NamedRatios]


def make_ratios(ratios: Union[Ratios, Sequence[float], Mapping[str, float]]) -> Ratios:
    """
    Normalizes user input into a ratio variant.

    Raises:
        TypeError: If ``ratios`` is neither a sequence nor a mapping of numbers.
    """
    if isinstance(ratios, (PositionalRatios, NamedRatios)):
        return ratios
    if isinstance(ratios, Mapping):
        return NamedRatios(tuple(ratios.items()))
    if isinstance(ratios, (str, bytes)) or not isinstance(ratios, Sequence):
        raise TypeError(f"Ratios must be a sequence or a mapping of numbers, got {type(ratios).__name__}")
    return PositionalRatios(tuple(ratios))


def saturate(key_colors: Sequence[str], saturation: float) -> List[str]:
    """Scales the HSLuv saturation of each key color by ``saturation / 100``."""
    hsluv = COLOR_SPACES["hsluv"]
    resolved = []
    for key in key_colors:
        coords = hsluv.to_space(parse_color(key))
        coords[1] *= saturation / 100.0
        resolved.append(to_hex(hsluv.from_space(coords)))
    return resolved


class Color:
    """
    One semantic color of a theme.

    Args:
        name: Display name, also the prefix of positional swatch names.
        key_colors: At least one CSS color string.
        color_space: Interpolation space of the color's scale.
        ratios: Target ratios, a sequence or a mapping of numbers.
        smooth: Interpolate with a spline instead of piecewise-linear.
        saturation: HSLuv saturation multiplier in percent.

    Raises:
        ValueError: For an empty name, invalid key colors or an unknown space.
        TypeError: For wrongly typed ratios or saturation.
    """

    def __init__(
        self,
        name: str,
        key_colors: Sequence[str],
        color_space: str,
        ratios: Union[Ratios, Sequence[float], Mapping[str, float]],
        smooth: bool = False,
        saturation: float = 100,
    ):
        self._saturation: float = 100.0
        self._key_colors: Tuple[str, ...] = ()
        self._resolved_key_colors: Tuple[str, ...] = ()

        self.with_name(name)
        self.with_key_colors(key_colors)
        self.with_color_space(color_space)
        self.with_ratios(ratios)
        self.with_smooth(smooth)
        self.with_saturation(saturation)

    def __repr__(self) -> str:
        return (f"Color(name={self._name!r}, key_colors={list(self._key_colors)!r}, "
                f"color_space={self._color_space!r}, ratios={self._ratios.to_json()!r}, "
                f"smooth={self._smooth}, saturation={self._saturation})")

    # --- Accessors ---

    @property
    def name(self) -> str:
        return self._name

    @property
    def key_colors(self) -> Tuple[str, ...]:
        return self._key_colors

    @property
    def resolved_key_colors(self) -> Tuple[str, ...]:
        """Key colors after the saturation multiplier, as hex."""
        return self._resolved_key_colors

    @property
    def color_space(self) -> str:
        return self._color_space

    @property
    def ratios(self) -> Ratios:
        return self._ratios

    @property
    def smooth(self) -> bool:
        return self._smooth

    @property
    def saturation(self) -> float:
        return self._saturation

    # --- Fluent setters ---

    def with_name(self, name: str) -> Color:
        if not isinstance(name, str) or not name.strip():
            raise ValueError("Color not provided a name")
        self._name = name
        return self

    def with_key_colors(self, key_colors: Sequence[str]) -> Color:
        if isinstance(key_colors, str) or not key_colors:
            raise ValueError("Key colors not defined")
        for key in key_colors:
            if not is_valid_color(key):
                raise ValueError(f"Invalid color key {key!r}")
        self._key_colors = tuple(key_colors)
        self._resolved_key_colors = tuple(saturate(self._key_colors, self._saturation))
        return self

    def with_color_space(self, color_space: str) -> Color:
        if color_space not in INTERPOLATION_SPACES:
            raise ValueError(f"Color space {color_space!r} not supported")
        self._color_space = color_space
        return self

    def with_ratios(self, ratios: Union[Ratios, Sequence[float], Mapping[str, float]]) -> Color:
        self._ratios = make_ratios(ratios)
        return self

    def with_smooth(self, smooth: bool) -> Color:
        self._smooth = bool(smooth)
        return self

    def with_saturation(self, saturation: float = 100) -> Color:
        if isinstance(saturation, bool) or not isinstance(saturation, numbers.Real):
            raise TypeError(f"Saturation must be a number, got {saturation!r}")
        if saturation < 0:
            raise ValueError(f"Saturation must be non-negative, got {saturation}")
        self._saturation = float(saturation)
        self._resolved_key_colors = tuple(saturate(self._key_colors, self._saturation))
        return self

    # --- Copies ---

    def clone(self) -> Color:
        return Color(
            name=self._name,
            key_colors=list(self._key_colors),
            color_space=self._color_space,
            ratios=self._ratios,
            smooth=self._smooth,
            saturation=self._saturation,
        )

    def to_dict(self) -> Dict[str, Any]:
        return {
            "name": self._name,
            "key_colors": list(self._key_colors),
            "color_space": self._color_space,
            "ratios": self._ratios.to_json(),
            "smooth": self._smooth,
            "saturation": self._saturation,
        }
