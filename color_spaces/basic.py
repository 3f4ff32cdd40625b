# -*- coding: utf-8 -*-
"""
Swatch: Weaving accessible color palettes from contrast targets
Copyright (c) 2026 opticsWolf

SPDX-License-Identifier: LGPL-3.0-or-later

Module: basic.py — display and CIE spaces backed by the numeric engine.

Coordinate ranges follow the CSS conventions:
    rgb    r, g, b in [0, 255]
    hsl    h deg, s and l in [0, 1]
    hsv    h deg, s and v in [0, 1]
    lab    L in [0, 100], a, b unbounded (D65)
    lch    L, C, h deg
    oklab  L in [0, 1], a, b
    oklch  L, C, h deg
"""

import numpy as np

from swatch_colorengine import ArrayFloat, ColorSpaceEngine as CSE
from .base import SpaceAdapter

__all__ = [
    "RGBSpace",
    "HSLSpace",
    "HSVSpace",
    "LabSpace",
    "LChSpace",
    "OklabSpace",
    "OkLChSpace",
]


class RGBSpace(SpaceAdapter):
    name = "rgb"

    def _to_space_raw(self, rgb: ArrayFloat) -> ArrayFloat:
        return rgb.copy()

    def _from_space_raw(self, coords: ArrayFloat) -> ArrayFloat:
        return coords.copy()


class HSLSpace(SpaceAdapter):
    name = "hsl"
    hue_index = 0
    chroma_index = 1

    def _to_space_raw(self, rgb: ArrayFloat) -> ArrayFloat:
        return CSE.srgb_to_hsl(rgb / 255.0)

    def _from_space_raw(self, coords: ArrayFloat) -> ArrayFloat:
        return CSE.hsl_to_srgb(coords) * 255.0


class HSVSpace(SpaceAdapter):
    name = "hsv"
    hue_index = 0
    chroma_index = 1

    def _to_space_raw(self, rgb: ArrayFloat) -> ArrayFloat:
        return CSE.srgb_to_hsv(rgb / 255.0)

    def _from_space_raw(self, coords: ArrayFloat) -> ArrayFloat:
        return CSE.hsv_to_srgb(coords) * 255.0


class LabSpace(SpaceAdapter):
    name = "lab"

    def _to_space_raw(self, rgb: ArrayFloat) -> ArrayFloat:
        return CSE.srgb_to_lab(rgb / 255.0)

    def _from_space_raw(self, coords: ArrayFloat) -> ArrayFloat:
        return CSE.lab_to_srgb(coords) * 255.0


class LChSpace(SpaceAdapter):
    name = "lch"
    hue_index = 2
    chroma_index = 1

    def _to_space_raw(self, rgb: ArrayFloat) -> ArrayFloat:
        return CSE.srgb_to_lch(rgb / 255.0)

    def _from_space_raw(self, coords: ArrayFloat) -> ArrayFloat:
        # Negative chroma would flip the hue by 180 degrees.
        coords = coords.copy()
        coords[:, 1] = np.maximum(coords[:, 1], 0.0)
        return CSE.lch_to_srgb(coords) * 255.0


class OklabSpace(SpaceAdapter):
    name = "oklab"

    def _to_space_raw(self, rgb: ArrayFloat) -> ArrayFloat:
        return CSE.srgb_to_oklab(rgb / 255.0)

    def _from_space_raw(self, coords: ArrayFloat) -> ArrayFloat:
        return CSE.oklab_to_srgb(coords) * 255.0


class OkLChSpace(SpaceAdapter):
    name = "oklch"
    hue_index = 2
    chroma_index = 1

    def _to_space_raw(self, rgb: ArrayFloat) -> ArrayFloat:
        return CSE.srgb_to_oklch(rgb / 255.0)

    def _from_space_raw(self, coords: ArrayFloat) -> ArrayFloat:
        coords = coords.copy()
        coords[:, 1] = np.maximum(coords[:, 1], 0.0)
        return CSE.oklch_to_srgb(coords) * 255.0
