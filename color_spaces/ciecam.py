# -*- coding: utf-8 -*-
"""
Swatch: Weaving accessible color palettes from contrast targets
Copyright (c) 2026 opticsWolf

SPDX-License-Identifier: LGPL-3.0-or-later

Module: ciecam.py — CIECAM02 and CAM16 appearance-model spaces.

The forward and inverse appearance models come from colour-science; this
module only fixes the viewing conditions and derives the uniform
(J', a', b') coordinates from the (J, C, h) correlates.

Viewing conditions:
    CIECAM02  D65 white, L_A = 40 cd/m2, Y_b = 20, average surround,
              no discounting of the illuminant.
    CAM16     The HCT defaults: D65 white, L_A = 200/pi * Y(L*=50) / 100,
              Y_b = Y(L*=50), average surround, no discounting.

Uniform coordinates (Luo, Cui & Li 2006):
    J' = (1 + 100 c1) J / (1 + c1 J)
    M' = ln(1 + c2 M) / c2,     M = C * F_L^0.25
    a' = M' cos h,  b' = M' sin h
"""

import warnings

import colour
import numpy as np
from typing import Final

from swatch_colorengine import (
    ArrayFloat,
    ColorSpaceEngine as CSE,
    REF_WHITE_D65,
    DEG2RAD,
    RAD2DEG,
)
from .base import SpaceAdapter

__all__ = [
    "luminance_adaptation_factor",
    "CIECAM02JChSpace",
    "CIECAM02JabSpace",
    "CAM16JChSpace",
    "CAM16JabSpace",
]

# Uniform-space coefficients (k_L, c1, c2) shared by CAM02-UCS and CAM16-UCS.
_UCS_K_L: Final[float] = 1.0
_UCS_C1: Final[float] = 0.007
_UCS_C2: Final[float] = 0.0228

_XYZ_W: Final[ArrayFloat] = REF_WHITE_D65 * 100.0

_CAM02_L_A: Final[float] = 40.0
_CAM02_Y_B: Final[float] = 20.0
# The Jab derivative converts C <-> M at its own adaptation level.
_CAM02_JAB_L_A: Final[float] = 64.0 / np.pi / 5.0

# Y of mid-grey (L* = 50), the HCT background.
_HCT_Y_B: Final[float] = 100.0 * ((50.0 + 16.0) / 116.0) ** 3
_CAM16_L_A: Final[float] = 200.0 / np.pi * _HCT_Y_B / 100.0


def luminance_adaptation_factor(L_A: float) -> float:
    """
    Luminance level adaptation factor F_L of CIECAM02 / CAM16.

    Args:
        L_A: Adapting field luminance in cd/m2.

    Returns:
        F_L (dimensionless).
    """
    k = 1.0 / (5.0 * L_A + 1.0)
    k4 = k ** 4
    return 0.2 * k4 * (5.0 * L_A) + 0.1 * (1.0 - k4) ** 2 * (5.0 * L_A) ** (1.0 / 3.0)


def _jch_to_jab(jch: ArrayFloat, F_L: float) -> ArrayFloat:
    J, C, h = jch[:, 0], jch[:, 1], jch[:, 2]
    M = C * F_L ** 0.25
    J_p = (1.0 + 100.0 * _UCS_C1) * J / (1.0 + _UCS_C1 * J) / _UCS_K_L
    M_p = np.log1p(_UCS_C2 * M) / _UCS_C2
    h_rad = h * DEG2RAD
    return np.stack([J_p, M_p * np.cos(h_rad), M_p * np.sin(h_rad)], axis=-1)


def _jab_to_jch(jab: ArrayFloat, F_L: float) -> ArrayFloat:
    J_p, a, b = jab[:, 0], jab[:, 1], jab[:, 2]
    M = np.expm1(np.hypot(a, b) * _UCS_C2) / _UCS_C2
    h = np.mod(np.arctan2(b, a) * RAD2DEG, 360.0)
    J = J_p / (1.0 - _UCS_C1 * (J_p - 100.0))
    return np.stack([J, M / F_L ** 0.25, h], axis=-1)


def _xyz_from_rgb(rgb: ArrayFloat) -> ArrayFloat:
    return CSE.srgb_to_xyz(rgb / 255.0) * 100.0


def _rgb_from_xyz(xyz: ArrayFloat) -> ArrayFloat:
    xyz = np.nan_to_num(np.asarray(xyz, dtype=np.float64))
    return CSE.xyz_to_srgb(xyz / 100.0) * 255.0


class CIECAM02JChSpace(SpaceAdapter):
    """CIECAM02 lightness J, chroma C and hue angle h."""

    name = "cam02p"
    hue_index = 2
    chroma_index = 1

    surround = colour.VIEWING_CONDITIONS_CIECAM02["Average"]

    def _to_space_raw(self, rgb: ArrayFloat) -> ArrayFloat:
        with np.errstate(all="ignore"), warnings.catch_warnings():
            warnings.simplefilter("ignore")
            spec = colour.XYZ_to_CIECAM02(
                _xyz_from_rgb(rgb), _XYZ_W, _CAM02_L_A, _CAM02_Y_B,
                surround=self.surround, discount_illuminant=False,
            )
        jch = np.stack([np.ravel(spec.J), np.ravel(spec.C), np.ravel(spec.h)], axis=-1)
        return np.nan_to_num(jch)

    def _from_space_raw(self, coords: ArrayFloat) -> ArrayFloat:
        J = np.maximum(coords[:, 0], 0.0)
        C = np.maximum(coords[:, 1], 0.0)
        with np.errstate(all="ignore"), warnings.catch_warnings():
            warnings.simplefilter("ignore")
            spec = colour.CAM_Specification_CIECAM02(J=J, C=C, h=coords[:, 2])
            xyz = colour.CIECAM02_to_XYZ(
                spec, _XYZ_W, _CAM02_L_A, _CAM02_Y_B,
                surround=self.surround, discount_illuminant=False,
            )
        return _rgb_from_xyz(np.reshape(xyz, (-1, 3)))


class CIECAM02JabSpace(CIECAM02JChSpace):
    """CAM02 uniform space (J', a', b')."""

    name = "cam02"
    hue_index = None
    chroma_index = None

    F_L: Final[float] = luminance_adaptation_factor(_CAM02_JAB_L_A)

    def _to_space_raw(self, rgb: ArrayFloat) -> ArrayFloat:
        return _jch_to_jab(super()._to_space_raw(rgb), self.F_L)

    def _from_space_raw(self, coords: ArrayFloat) -> ArrayFloat:
        return super()._from_space_raw(_jab_to_jch(coords, self.F_L))


class CAM16JChSpace(SpaceAdapter):
    """CAM16 lightness J, chroma C and hue angle h under the HCT viewing conditions."""

    name = "cam16p"
    hue_index = 2
    chroma_index = 1

    surround = colour.VIEWING_CONDITIONS_CAM16["Average"]

    def _to_space_raw(self, rgb: ArrayFloat) -> ArrayFloat:
        with np.errstate(all="ignore"), warnings.catch_warnings():
            warnings.simplefilter("ignore")
            spec = colour.XYZ_to_CAM16(
                _xyz_from_rgb(rgb), _XYZ_W, _CAM16_L_A, _HCT_Y_B,
                surround=self.surround, discount_illuminant=False,
            )
        jch = np.stack([np.ravel(spec.J), np.ravel(spec.C), np.ravel(spec.h)], axis=-1)
        return np.nan_to_num(jch)

    def _from_space_raw(self, coords: ArrayFloat) -> ArrayFloat:
        J = np.maximum(coords[:, 0], 0.0)
        C = np.maximum(coords[:, 1], 0.0)
        with np.errstate(all="ignore"), warnings.catch_warnings():
            warnings.simplefilter("ignore")
            spec = colour.CAM_Specification_CAM16(J=J, C=C, h=coords[:, 2])
            xyz = colour.CAM16_to_XYZ(
                spec, _XYZ_W, _CAM16_L_A, _HCT_Y_B,
                surround=self.surround, discount_illuminant=False,
            )
        return _rgb_from_xyz(np.reshape(xyz, (-1, 3)))


class CAM16JabSpace(CAM16JChSpace):
    """CAM16-UCS (J*, a*, b*)."""

    name = "cam16"
    hue_index = None
    chroma_index = None

    F_L: Final[float] = luminance_adaptation_factor(_CAM16_L_A)

    def _to_space_raw(self, rgb: ArrayFloat) -> ArrayFloat:
        return _jch_to_jab(super()._to_space_raw(rgb), self.F_L)

    def _from_space_raw(self, coords: ArrayFloat) -> ArrayFloat:
        return super()._from_space_raw(_jab_to_jch(coords, self.F_L))
