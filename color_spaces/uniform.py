# -*- coding: utf-8 -*-
"""
Swatch: Weaving accessible color palettes from contrast targets
Copyright (c) 2026 opticsWolf

SPDX-License-Identifier: LGPL-3.0-or-later

Module: uniform.py — HSLuv and HCT spaces, delegated to coloraide.

    hsluv  h deg, s in [0, 100], l in [0, 100]
    hct    h deg, c (CAM16 chroma), t (L* tone) in [0, 100]

Both conversions run per color through the private ``SwatchColor`` class.
"""

import numpy as np

from swatch_colorengine import ArrayFloat
from .base import SpaceAdapter, SwatchColor

__all__ = ["HSLuvSpace", "HCTSpace"]


class _ColorAideSpace(SpaceAdapter):
    """Adapter for a space registered on ``SwatchColor``."""

    def _to_space_raw(self, rgb: ArrayFloat) -> ArrayFloat:
        out = np.empty_like(rgb)
        for i, (r, g, b) in enumerate(rgb / 255.0):
            color = SwatchColor("srgb", [r, g, b]).convert(self.name)
            out[i] = color.coords()
        return out

    def _from_space_raw(self, coords: ArrayFloat) -> ArrayFloat:
        out = np.empty_like(coords)
        for i, row in enumerate(coords):
            color = SwatchColor(self.name, list(row)).convert("srgb")
            out[i] = color.coords()
        return out * 255.0


class HSLuvSpace(_ColorAideSpace):
    name = "hsluv"
    hue_index = 0
    chroma_index = 1


class HCTSpace(_ColorAideSpace):
    name = "hct"
    hue_index = 0
    chroma_index = 1

    def _from_space_raw(self, coords: ArrayFloat) -> ArrayFloat:
        coords = coords.copy()
        coords[:, 1] = np.maximum(coords[:, 1], 0.0)
        return super()._from_space_raw(coords)
