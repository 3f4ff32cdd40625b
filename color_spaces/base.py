# -*- coding: utf-8 -*-
"""
Swatch: Weaving accessible color palettes from contrast targets
Copyright (c) 2026 opticsWolf

SPDX-License-Identifier: LGPL-3.0-or-later

Module: base.py — common contract of the perceptual-space adapters and the
thin facade over the coloraide base library.

Every adapter converts sRGB triples with channels in [0, 255] to a 3-channel
coordinate tuple of its space and back. Both directions accept ``(3,)`` or
``(N, 3)`` arrays.

Hue policy:
    - ``to_space`` reports the hue channel of an achromatic color as NaN.
    - ``from_space`` reads a NaN hue as 0 and wraps hues into [0, 360).
"""

import numpy as np
from typing import Final, Optional, Sequence

from coloraide import Color
from coloraide.spaces.hct import HCT
from coloraide.spaces.hsluv import HSLuv
from coloraide.spaces.lchuv import LChuv
from coloraide.spaces.luv import Luv

from swatch_colorengine import ArrayFloat, handle_shapes

__all__ = [
    "SwatchColor",
    "SpaceAdapter",
    "ACHROMATIC_TOLERANCE",
    "parse_color",
    "is_valid_color",
    "to_hex",
]

# Channel spread (in 0..255 units) below which a color counts as grey.
ACHROMATIC_TOLERANCE: Final[float] = 1e-3


class SwatchColor(Color):
    """Private coloraide class with the HSLuv and HCT spaces registered.

    HSLuv converts through LChuv and Luv, which the default class lacks.
    """


SwatchColor.register([Luv(), LChuv(), HSLuv(), HCT()], overwrite=True)


def parse_color(value: str) -> ArrayFloat:
    """
    Parses any CSS color string into sRGB.

    Args:
        value: A CSS color string (``'#ccc'``, ``'rebeccapurple'``,
            ``'rgb(10 20 30)'``, ``'oklch(0.5 0.1 200)'``, ...).

    Returns:
        float64 array (3,) with channels in [0, 255], gamut clipped.

    Raises:
        ValueError: If the string is not a recognizable color.
    """
    try:
        color = SwatchColor(value)
    except (ValueError, TypeError) as exc:
        raise ValueError(f"Invalid color {value!r}") from exc
    srgb = color.convert("srgb").clip()
    return np.nan_to_num(np.asarray(srgb.coords(), dtype=np.float64)) * 255.0


def is_valid_color(value: object) -> bool:
    """Checks whether ``value`` is a color string the base library understands."""
    if not isinstance(value, str):
        return False
    return SwatchColor.match(value, fullmatch=True) is not None


def to_hex(rgb: Sequence[float]) -> str:
    """
    Renders an sRGB triple in [0, 255] as ``#rrggbb``.

    Channels are clamped to [0, 255] and rounded half-up; NaN reads as 0.
    """
    arr = np.clip(np.nan_to_num(np.asarray(rgb, dtype=np.float64)), 0.0, 255.0)
    r, g, b = (int(v) for v in np.floor(arr + 0.5))
    return f"#{r:02x}{g:02x}{b:02x}"


class SpaceAdapter:
    """
    Base class of a bidirectional ``rgb <-> space`` mapping.

    Subclasses implement ``_to_space_raw`` / ``_from_space_raw`` on validated
    ``(N, 3)`` float64 arrays; the public methods add shape handling and the
    hue policy.

    Attributes:
        name: Registry name of the space.
        hue_index: Channel holding a hue angle in degrees, or None.
        chroma_index: Channel holding chroma / saturation / colorfulness.
    """

    name: str = ""
    hue_index: Optional[int] = None
    chroma_index: Optional[int] = None

    def __repr__(self) -> str:
        return f"{type(self).__name__}(name={self.name!r})"

    def to_space(self, rgb: ArrayFloat) -> ArrayFloat:
        """
        Converts sRGB (channels in [0, 255]) to coordinates of this space.

        Args:
            rgb: Shape (3,) or (N, 3).

        Returns:
            Coordinates with the same leading shape; achromatic hues are NaN.
        """
        return handle_shapes(self._to_space_checked)(rgb)

    def from_space(self, coords: ArrayFloat) -> ArrayFloat:
        """
        Converts coordinates of this space to sRGB clamped to [0, 255].

        Args:
            coords: Shape (3,) or (N, 3). A NaN hue is read as 0.

        Returns:
            sRGB with the same leading shape.
        """
        return handle_shapes(self._from_space_checked)(coords)

    def _to_space_checked(self, rgb: ArrayFloat) -> ArrayFloat:
        coords = np.array(self._to_space_raw(rgb), dtype=np.float64)
        if self.hue_index is not None:
            spread = rgb.max(axis=1) - rgb.min(axis=1)
            coords[spread < ACHROMATIC_TOLERANCE, self.hue_index] = np.nan
        return coords

    def _from_space_checked(self, coords: ArrayFloat) -> ArrayFloat:
        if self.hue_index is not None:
            coords = coords.copy()
            hue = np.nan_to_num(coords[:, self.hue_index], nan=0.0)
            coords[:, self.hue_index] = np.mod(hue, 360.0)
        rgb = np.asarray(self._from_space_raw(coords), dtype=np.float64)
        return np.clip(np.nan_to_num(rgb), 0.0, 255.0)

    def _to_space_raw(self, rgb: ArrayFloat) -> ArrayFloat:
        raise NotImplementedError

    def _from_space_raw(self, coords: ArrayFloat) -> ArrayFloat:
        raise NotImplementedError
