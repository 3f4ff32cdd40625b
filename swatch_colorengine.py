# -*- coding: utf-8 -*-
"""
Swatch: Weaving accessible color palettes from contrast targets
Copyright (c) 2026 opticsWolf

SPDX-License-Identifier: LGPL-3.0-or-later

Module: swatch_colorengine.py — JIT-compiled color math behind the space
adapters and the contrast algorithms.

Contents:
  1. Constants, the strict-IEEE switch and shape handling.
  2. Element-wise transfer kernels (sRGB companding, CIELAB f), each
     compiled twice: with fastmath and with strict IEEE 754 semantics.
  3. Per-row kernels: rectangular <-> polar, RGB <-> HSL / HSV.
  4. ``ColorSpaceEngine``: sRGB <-> XYZ / Lab / LCh / Oklab / OkLCh / HSL / HSV.
  5. ``LuminanceEngine``: WCAG 2 relative luminance and APCA-W3 contrast.

Conventions:
    - sRGB is gamma encoded with channels in [0, 1]; the luminance models
      take the 0..255 triples that the palette code passes around.
    - XYZ is D65 relative, Y(white) = 1.
    - Hues are degrees; HSL / HSV saturation, lightness and value are in [0, 1].

The palette search evaluates the luminance models thousands of times per
theme, so those kernels carry explicit scalar signatures and compile eagerly
at import.

References:
    - IEC 61966-2-1:1999, sRGB.
    - CIE 15:2004, Colorimetry.
    - B. Ottosson (2020), "A perceptual color space for image processing".
    - W3C WCAG 2.x, relative luminance.
    - A. Somers, APCA-W3 0.0.98G-4g.
"""

import functools
import numpy as np
from numba import njit, float64
from typing import Any, Callable, Final, TypeAlias

__all__ = [
    "ArrayFloat",
    "REF_WHITE_D65",
    "LAB_EPSILON",
    "LAB_KAPPA",
    "DEG2RAD",
    "RAD2DEG",
    "M_SRGB_TO_XYZ_T",
    "M_XYZ_TO_SRGB_T",
    "M1_OKLAB_SRGB_T",
    "M2_OKLAB_SRGB_T",
    "M1_OKLAB_SRGB_INV_T",
    "M2_OKLAB_SRGB_INV_T",
    "set_strict_ieee",
    "handle_shapes",
    "ColorSpaceEngine",
    "LuminanceEngine",
]

ArrayFloat: TypeAlias = np.typing.NDArray[np.floating]

# =============================================================================
# 1. CONSTANTS, SWITCHES, SHAPES
# =============================================================================

REF_WHITE_D65: Final[ArrayFloat] = np.array([0.95047, 1.0, 1.08883], dtype=np.float64)

# Row-vector convention: ``rgb @ M_T``.
_SRGB_TO_XYZ = np.array([
    [0.4124564, 0.3575761, 0.1804375],
    [0.2126729, 0.7151522, 0.0721750],
    [0.0193339, 0.1191920, 0.9503041],
], dtype=np.float64)
M_SRGB_TO_XYZ_T: Final[ArrayFloat] = np.ascontiguousarray(_SRGB_TO_XYZ.T)
# Exact inverse of the forward matrix, so sRGB -> XYZ -> sRGB is lossless.
M_XYZ_TO_SRGB_T: Final[ArrayFloat] = np.ascontiguousarray(np.linalg.inv(_SRGB_TO_XYZ).T)

# Oklab: linear sRGB -> LMS, then cube-rooted LMS -> Lab.
_OKLAB_M1 = np.array([
    [0.4122214708, 0.5363325363, 0.0514459929],
    [0.2119034982, 0.6806995451, 0.1073969566],
    [0.0883024619, 0.2817188376, 0.6299787005],
], dtype=np.float64)
_OKLAB_M2 = np.array([
    [0.2104542553, 0.7936177850, -0.0040720468],
    [1.9779984951, -2.4285922050, 0.4505937099],
    [0.0259040371, 0.7827717662, -0.8086757660],
], dtype=np.float64)
M1_OKLAB_SRGB_T: Final[ArrayFloat] = np.ascontiguousarray(_OKLAB_M1.T)
M2_OKLAB_SRGB_T: Final[ArrayFloat] = np.ascontiguousarray(_OKLAB_M2.T)
M1_OKLAB_SRGB_INV_T: Final[ArrayFloat] = np.ascontiguousarray(np.linalg.inv(_OKLAB_M1).T)
M2_OKLAB_SRGB_INV_T: Final[ArrayFloat] = np.ascontiguousarray(np.linalg.inv(_OKLAB_M2).T)

# CIELAB knee at t = (6/29)^3, written with the exact rationals.
_LAB_DELTA: Final[float] = 6.0 / 29.0
LAB_EPSILON: Final[float] = 216.0 / 24389.0
LAB_KAPPA: Final[float] = 24389.0 / 27.0

DEG2RAD: Final[float] = np.pi / 180.0
RAD2DEG: Final[float] = 180.0 / np.pi

# WCAG 2 linearizes below the 0.03928 knee of the sRGB working draft.
_WCAG2_KNEE: Final[float] = 0.03928

# APCA-W3 0.0.98G-4g
_APCA_TRC: Final[float] = 2.4
_APCA_COEF_R: Final[float] = 0.2126478133913640
_APCA_COEF_G: Final[float] = 0.7151791475336110
_APCA_COEF_B: Final[float] = 0.0721730390750263
_APCA_NORM_BG: Final[float] = 0.56
_APCA_NORM_TXT: Final[float] = 0.57
_APCA_REV_TXT: Final[float] = 0.62
_APCA_REV_BG: Final[float] = 0.65
_APCA_BLACK_THRESHOLD: Final[float] = 0.022
_APCA_BLACK_CLAMP: Final[float] = 1.414
_APCA_SCALE: Final[float] = 1.14
_APCA_LO_OFFSET: Final[float] = 0.027
_APCA_DELTA_Y_MIN: Final[float] = 0.0005
_APCA_LO_CLIP: Final[float] = 0.1

_STRICT_IEEE: bool = False


def set_strict_ieee(enabled: bool = True) -> None:
    """
    Routes the transfer kernels to their strict IEEE 754 builds.

    The default fastmath builds may reassociate floating point operations
    and assume finite inputs; strict builds keep NaN / inf propagation.

    Args:
        enabled: True for strict kernels, False for the fastmath default.
    """
    global _STRICT_IEEE
    _STRICT_IEEE = bool(enabled)


def handle_shapes(func: Callable[..., ArrayFloat]) -> Callable[..., ArrayFloat]:
    """
    Lets ``func`` (written for contiguous (N, 3) float64) accept one color.

    A (3,) input is promoted to (1, 3) and the result is unwrapped again;
    (N, 3) passes through.

    Raises:
        ValueError: If the last axis does not hold three channels.
    """
    @functools.wraps(func)
    def wrapper(arr: ArrayFloat, *args: Any, **kwargs: Any) -> ArrayFloat:
        arr = np.asarray(arr, dtype=np.float64)
        batch = np.ascontiguousarray(np.atleast_2d(arr))
        if batch.shape[-1] != 3:
            raise ValueError(f"Expected last dimension size 3, got {batch.shape[-1]}")
        out = func(batch, *args, **kwargs)
        return out[0] if arr.ndim == 1 else out
    return wrapper


# =============================================================================
# 2. TRANSFER KERNELS
# =============================================================================

class _KernelPair:
    """
    One element-wise kernel compiled in a fastmath and a strict build.

    Calls go to the build selected by ``set_strict_ieee`` at call time.
    """

    __slots__ = ("fast", "strict")

    def __init__(self, py_func: Callable[[ArrayFloat], ArrayFloat]):
        self.fast = njit(cache=True, fastmath=True)(py_func)
        # Not disk-cached: the cache index would collide with the fast build.
        self.strict = njit(fastmath=False)(py_func)

    def __call__(self, arr: ArrayFloat) -> ArrayFloat:
        return (self.strict if _STRICT_IEEE else self.fast)(arr)


def _srgb_oetf(linear: ArrayFloat) -> ArrayFloat:
    """Linear light -> gamma encoded sRGB (IEC 61966-2-1)."""
    out = np.empty_like(linear)
    src = linear.ravel()
    dst = out.ravel()
    for i in range(src.size):
        v = src[i]
        if v <= 0.0031308:
            dst[i] = 12.92 * v
        else:
            dst[i] = 1.055 * v ** (1.0 / 2.4) - 0.055
    return out


def _srgb_eotf(encoded: ArrayFloat) -> ArrayFloat:
    """Gamma encoded sRGB -> linear light (IEC 61966-2-1)."""
    out = np.empty_like(encoded)
    src = encoded.ravel()
    dst = out.ravel()
    for i in range(src.size):
        v = src[i]
        if v <= 0.04045:
            dst[i] = v / 12.92
        else:
            dst[i] = ((v + 0.055) / 1.055) ** 2.4
    return out


def _lab_forward(t: ArrayFloat) -> ArrayFloat:
    """CIELAB f(t): cube root above the knee, linear segment below."""
    out = np.empty_like(t)
    src = t.ravel()
    dst = out.ravel()
    for i in range(src.size):
        v = src[i]
        if v > LAB_EPSILON:
            dst[i] = v ** (1.0 / 3.0)
        else:
            dst[i] = (LAB_KAPPA * v + 16.0) / 116.0
    return out


def _lab_inverse(f: ArrayFloat) -> ArrayFloat:
    """Inverse of ``_lab_forward``."""
    out = np.empty_like(f)
    src = f.ravel()
    dst = out.ravel()
    for i in range(src.size):
        v = src[i]
        if v > _LAB_DELTA:
            dst[i] = v * v * v
        else:
            dst[i] = (116.0 * v - 16.0) / LAB_KAPPA
    return out


_gamma_srgb = _KernelPair(_srgb_oetf)
_inverse_gamma_srgb = _KernelPair(_srgb_eotf)
_lab_f = _KernelPair(_lab_forward)
_lab_f_inv = _KernelPair(_lab_inverse)


# =============================================================================
# 3. ROW KERNELS
# =============================================================================

@njit(cache=True, fastmath=True)
def _to_polar_kernel(rect: ArrayFloat) -> ArrayFloat:
    """(L, a, b) -> (L, C, h) with h in [0, 360). Used for CIELAB and Oklab."""
    out = np.empty_like(rect)
    for i in range(rect.shape[0]):
        a = rect[i, 1]
        b = rect[i, 2]
        h = np.arctan2(b, a) * RAD2DEG
        out[i, 0] = rect[i, 0]
        out[i, 1] = np.sqrt(a * a + b * b)
        out[i, 2] = h + 360.0 if h < 0.0 else h
    return out


@njit(cache=True, fastmath=True)
def _to_rect_kernel(polar: ArrayFloat) -> ArrayFloat:
    """(L, C, h) -> (L, a, b)."""
    out = np.empty_like(polar)
    for i in range(polar.shape[0]):
        c = polar[i, 1]
        h = polar[i, 2] * DEG2RAD
        out[i, 0] = polar[i, 0]
        out[i, 1] = c * np.cos(h)
        out[i, 2] = c * np.sin(h)
    return out


@njit(cache=True, fastmath=True)
def _rgb_hue(r: float, g: float, b: float, mx: float, d: float) -> float:
    """Hexcone hue (degrees) shared by HSL and HSV. Requires d > 0."""
    if mx == r:
        h = 60.0 * ((g - b) / d)
    elif mx == g:
        h = 60.0 * ((b - r) / d + 2.0)
    else:
        h = 60.0 * ((r - g) / d + 4.0)
    if h < 0.0:
        h += 360.0
    return h


@njit(cache=True, fastmath=True)
def _hue_sector_to_rgb(h: float, c: float, m: float) -> tuple:
    """Rebuild (r, g, b) from hue, chroma and the lightness offset m."""
    hp = (h % 360.0) / 60.0
    x = c * (1.0 - abs((hp % 2.0) - 1.0))
    if hp < 1.0:
        r, g, b = c, x, 0.0
    elif hp < 2.0:
        r, g, b = x, c, 0.0
    elif hp < 3.0:
        r, g, b = 0.0, c, x
    elif hp < 4.0:
        r, g, b = 0.0, x, c
    elif hp < 5.0:
        r, g, b = x, 0.0, c
    else:
        r, g, b = c, 0.0, x
    return r + m, g + m, b + m


@njit(cache=True, fastmath=True)
def _rgb_to_hsl_kernel(rgb: ArrayFloat) -> ArrayFloat:
    """sRGB (N, 3) -> HSL (N, 3). Greys get h = 0, s = 0."""
    n = rgb.shape[0]
    out = np.empty_like(rgb)
    for i in range(n):
        r, g, b = rgb[i, 0], rgb[i, 1], rgb[i, 2]
        mx = max(r, g, b)
        mn = min(r, g, b)
        d = mx - mn
        light = 0.5 * (mx + mn)
        if d <= 0.0:
            out[i, 0], out[i, 1], out[i, 2] = 0.0, 0.0, light
            continue
        sat = d / (1.0 - abs(2.0 * light - 1.0))
        out[i, 0], out[i, 1], out[i, 2] = _rgb_hue(r, g, b, mx, d), sat, light
    return out


@njit(cache=True, fastmath=True)
def _hsl_to_rgb_kernel(hsl: ArrayFloat) -> ArrayFloat:
    """HSL (N, 3) -> sRGB (N, 3)."""
    n = hsl.shape[0]
    out = np.empty_like(hsl)
    for i in range(n):
        h, s, light = hsl[i, 0], hsl[i, 1], hsl[i, 2]
        c = (1.0 - abs(2.0 * light - 1.0)) * s
        out[i, 0], out[i, 1], out[i, 2] = _hue_sector_to_rgb(h, c, light - 0.5 * c)
    return out


@njit(cache=True, fastmath=True)
def _rgb_to_hsv_kernel(rgb: ArrayFloat) -> ArrayFloat:
    """sRGB (N, 3) -> HSV (N, 3). Greys get h = 0, s = 0."""
    n = rgb.shape[0]
    out = np.empty_like(rgb)
    for i in range(n):
        r, g, b = rgb[i, 0], rgb[i, 1], rgb[i, 2]
        mx = max(r, g, b)
        mn = min(r, g, b)
        d = mx - mn
        if d <= 0.0 or mx <= 0.0:
            out[i, 0], out[i, 1], out[i, 2] = 0.0, 0.0, mx
            continue
        out[i, 0], out[i, 1], out[i, 2] = _rgb_hue(r, g, b, mx, d), d / mx, mx
    return out


@njit(cache=True, fastmath=True)
def _hsv_to_rgb_kernel(hsv: ArrayFloat) -> ArrayFloat:
    """HSV (N, 3) -> sRGB (N, 3)."""
    n = hsv.shape[0]
    out = np.empty_like(hsv)
    for i in range(n):
        h, s, v = hsv[i, 0], hsv[i, 1], hsv[i, 2]
        c = v * s
        out[i, 0], out[i, 1], out[i, 2] = _hue_sector_to_rgb(h, c, v - c)
    return out


# =============================================================================
# 4. COLOR SPACE ENGINE
# =============================================================================

class ColorSpaceEngine:
    """
    sRGB-anchored transforms used by the space adapters.

    Public methods are wrapped by ``handle_shapes``. Multi-stage conversions
    chain the private stages, which expect contiguous (N, 3) float64, so the
    input shape is checked once per call. Conversions back to sRGB clip
    linear light to [0, 1] before encoding.
    """

    # --- stages ---

    @staticmethod
    def _decode(rgb: ArrayFloat, clip: bool = True) -> ArrayFloat:
        if clip:
            rgb = np.clip(rgb, 0.0, 1.0)
        return _inverse_gamma_srgb(np.ascontiguousarray(rgb))

    @staticmethod
    def _encode(linear: ArrayFloat, clip: bool = True) -> ArrayFloat:
        if clip:
            linear = np.clip(linear, 0.0, 1.0)
        return _gamma_srgb(np.ascontiguousarray(linear))

    @staticmethod
    def _xyz_to_lab(xyz: ArrayFloat) -> ArrayFloat:
        f = _lab_f(np.ascontiguousarray(xyz / REF_WHITE_D65))
        fx, fy, fz = f[:, 0], f[:, 1], f[:, 2]
        return np.stack([116.0 * fy - 16.0, 500.0 * (fx - fy), 200.0 * (fy - fz)], axis=-1)

    @staticmethod
    def _lab_to_xyz(lab: ArrayFloat) -> ArrayFloat:
        fy = (lab[:, 0] + 16.0) / 116.0
        f = np.stack([fy + lab[:, 1] / 500.0, fy, fy - lab[:, 2] / 200.0], axis=-1)
        return _lab_f_inv(f) * REF_WHITE_D65

    @staticmethod
    def _linear_to_oklab(linear: ArrayFloat) -> ArrayFloat:
        return np.cbrt(linear @ M1_OKLAB_SRGB_T) @ M2_OKLAB_SRGB_T

    @staticmethod
    def _oklab_to_linear(lab: ArrayFloat) -> ArrayFloat:
        return ((lab @ M2_OKLAB_SRGB_INV_T) ** 3) @ M1_OKLAB_SRGB_INV_T

    # --- XYZ / CIELAB / CIELCh ---

    @staticmethod
    @handle_shapes
    def srgb_to_xyz(rgb: ArrayFloat, clip: bool = True) -> ArrayFloat:
        """
        sRGB -> CIE XYZ (D65, Y(white) = 1).

        Args:
            rgb: Gamma encoded sRGB, shape (3,) or (N, 3).
            clip: Clamp the input to [0, 1] before decoding.
        """
        cse = ColorSpaceEngine
        return cse._decode(rgb, clip) @ M_SRGB_TO_XYZ_T

    @staticmethod
    @handle_shapes
    def xyz_to_srgb(xyz: ArrayFloat, clip: bool = True) -> ArrayFloat:
        """
        CIE XYZ (D65) -> sRGB.

        Args:
            xyz: Shape (3,) or (N, 3).
            clip: Clamp linear light to [0, 1] before encoding.
        """
        cse = ColorSpaceEngine
        return cse._encode(xyz @ M_XYZ_TO_SRGB_T, clip)

    @staticmethod
    @handle_shapes
    def srgb_to_lab(rgb: ArrayFloat) -> ArrayFloat:
        cse = ColorSpaceEngine
        return cse._xyz_to_lab(cse._decode(rgb) @ M_SRGB_TO_XYZ_T)

    @staticmethod
    @handle_shapes
    def lab_to_srgb(lab: ArrayFloat) -> ArrayFloat:
        cse = ColorSpaceEngine
        return cse._encode(cse._lab_to_xyz(lab) @ M_XYZ_TO_SRGB_T)

    @staticmethod
    @handle_shapes
    def srgb_to_lch(rgb: ArrayFloat) -> ArrayFloat:
        cse = ColorSpaceEngine
        return _to_polar_kernel(cse._xyz_to_lab(cse._decode(rgb) @ M_SRGB_TO_XYZ_T))

    @staticmethod
    @handle_shapes
    def lch_to_srgb(lch: ArrayFloat) -> ArrayFloat:
        cse = ColorSpaceEngine
        return cse._encode(cse._lab_to_xyz(_to_rect_kernel(lch)) @ M_XYZ_TO_SRGB_T)

    # --- Oklab / OkLCh ---

    @staticmethod
    @handle_shapes
    def srgb_to_oklab(rgb: ArrayFloat) -> ArrayFloat:
        """sRGB -> Oklab, L in [0, 1]."""
        cse = ColorSpaceEngine
        return cse._linear_to_oklab(cse._decode(rgb))

    @staticmethod
    @handle_shapes
    def oklab_to_srgb(lab: ArrayFloat) -> ArrayFloat:
        """Oklab -> sRGB; out-of-gamut colors are clipped in linear light."""
        cse = ColorSpaceEngine
        return cse._encode(cse._oklab_to_linear(lab))

    @staticmethod
    @handle_shapes
    def srgb_to_oklch(rgb: ArrayFloat) -> ArrayFloat:
        cse = ColorSpaceEngine
        return _to_polar_kernel(cse._linear_to_oklab(cse._decode(rgb)))

    @staticmethod
    @handle_shapes
    def oklch_to_srgb(lch: ArrayFloat) -> ArrayFloat:
        cse = ColorSpaceEngine
        return cse._encode(cse._oklab_to_linear(_to_rect_kernel(lch)))

    # --- HSL / HSV ---

    @staticmethod
    @handle_shapes
    def srgb_to_hsl(rgb: ArrayFloat) -> ArrayFloat:
        """sRGB -> HSL (hue in degrees, saturation and lightness in [0, 1])."""
        return _rgb_to_hsl_kernel(rgb)

    @staticmethod
    @handle_shapes
    def hsl_to_srgb(hsl: ArrayFloat) -> ArrayFloat:
        return _hsl_to_rgb_kernel(hsl)

    @staticmethod
    @handle_shapes
    def srgb_to_hsv(rgb: ArrayFloat) -> ArrayFloat:
        """sRGB -> HSV (hue in degrees, saturation and value in [0, 1])."""
        return _rgb_to_hsv_kernel(rgb)

    @staticmethod
    @handle_shapes
    def hsv_to_srgb(hsv: ArrayFloat) -> ArrayFloat:
        return _hsv_to_rgb_kernel(hsv)


# =============================================================================
# 5. LUMINANCE MODELS
# =============================================================================

@njit(float64(float64), cache=True, fastmath=True)
def _wcag2_linearize(v: float) -> float:
    if v <= _WCAG2_KNEE:
        return v / 12.92
    return ((v + 0.055) / 1.055) ** 2.4


@njit(float64(float64, float64, float64), cache=True, fastmath=True)
def _wcag2_relative_luminance(r: float, g: float, b: float) -> float:
    """WCAG 2.x relative luminance of a gamma encoded sRGB triple in [0, 1]."""
    return (0.2126 * _wcag2_linearize(r)
            + 0.7152 * _wcag2_linearize(g)
            + 0.0722 * _wcag2_linearize(b))


@njit(float64(float64, float64, float64), cache=True, fastmath=True)
def _apca_screen_luminance(r: float, g: float, b: float) -> float:
    """
    APCA estimated screen luminance Y of an sRGB triple in [0, 255].

    APCA uses a plain 2.4 power instead of the piecewise sRGB EOTF.
    """
    return (_APCA_COEF_R * (r / 255.0) ** _APCA_TRC
            + _APCA_COEF_G * (g / 255.0) ** _APCA_TRC
            + _APCA_COEF_B * (b / 255.0) ** _APCA_TRC)


@njit(float64(float64, float64), cache=True, fastmath=False)
def _apca_lightness_contrast(txt_y: float, bg_y: float) -> float:
    """
    APCA lightness contrast Lc (x100) of text luminance over background.

    Dark text on a light background yields a positive Lc, light text on a
    dark background a negative one. Luminances outside [0, 1.1] give 0.
    """
    if not (0.0 <= txt_y <= 1.1) or not (0.0 <= bg_y <= 1.1):
        return 0.0

    # soft clamp near black
    if txt_y <= _APCA_BLACK_THRESHOLD:
        txt_y += (_APCA_BLACK_THRESHOLD - txt_y) ** _APCA_BLACK_CLAMP
    if bg_y <= _APCA_BLACK_THRESHOLD:
        bg_y += (_APCA_BLACK_THRESHOLD - bg_y) ** _APCA_BLACK_CLAMP

    if abs(bg_y - txt_y) < _APCA_DELTA_Y_MIN:
        return 0.0

    if bg_y > txt_y:
        sapc = (bg_y ** _APCA_NORM_BG - txt_y ** _APCA_NORM_TXT) * _APCA_SCALE
        if sapc < _APCA_LO_CLIP:
            return 0.0
        return (sapc - _APCA_LO_OFFSET) * 100.0

    sapc = (bg_y ** _APCA_REV_BG - txt_y ** _APCA_REV_TXT) * _APCA_SCALE
    if sapc > -_APCA_LO_CLIP:
        return 0.0
    return (sapc + _APCA_LO_OFFSET) * 100.0


class LuminanceEngine:
    """Scalar luminance and contrast models on sRGB triples in [0, 255]."""

    @staticmethod
    def wcag2_luminance(rgb: ArrayFloat) -> float:
        """
        WCAG 2.x relative luminance.

        Args:
            rgb: sRGB triple, channels in [0, 255].

        Returns:
            Relative luminance in [0, 1].
        """
        r, g, b = rgb
        return _wcag2_relative_luminance(r / 255.0, g / 255.0, b / 255.0)

    @staticmethod
    def apca_luminance(rgb: ArrayFloat) -> float:
        """APCA estimated screen luminance Y of an sRGB triple in [0, 255]."""
        r, g, b = rgb
        return _apca_screen_luminance(float(r), float(g), float(b))

    @staticmethod
    def apca_contrast(txt_y: float, bg_y: float) -> float:
        """
        APCA-W3 lightness contrast (Lc) between two screen luminances.

        Args:
            txt_y: Foreground (text) luminance, see ``apca_luminance``.
            bg_y: Background luminance.

        Returns:
            Signed Lc value, roughly in [-108, 106].
        """
        return _apca_lightness_contrast(float(txt_y), float(bg_y))


# =============================================================================
# Validation Block
# =============================================================================
if __name__ == "__main__":
    cse = ColorSpaceEngine
    samples = np.random.default_rng(0).random((1000, 3))

    def report(label: str, err: float, limit: float = 1e-9) -> None:
        print(f"   {label:<24} max error {err:.2e} {'[PASS]' if err < limit else '[FAIL]'}")

    print("--- Swatch color engine self-check ---")
    print("1. Round trips through sRGB")
    for label, fwd, inv in (
        ("Lab", cse.srgb_to_lab, cse.lab_to_srgb),
        ("LCh", cse.srgb_to_lch, cse.lch_to_srgb),
        ("Oklab", cse.srgb_to_oklab, cse.oklab_to_srgb),
        ("OkLCh", cse.srgb_to_oklch, cse.oklch_to_srgb),
        ("HSL", cse.srgb_to_hsl, cse.hsl_to_srgb),
        ("HSV", cse.srgb_to_hsv, cse.hsv_to_srgb),
    ):
        report(label, float(np.max(np.abs(inv(fwd(samples)) - samples))))

    print("2. Shape check")
    try:
        cse.srgb_to_lab(np.zeros((4, 2)))
    except ValueError as exc:
        print(f"   rejected (4, 2): {exc}")

    print("3. Strict IEEE builds")
    fast = cse.srgb_to_lab(samples)
    set_strict_ieee(True)
    strict = cse.srgb_to_lab(samples)
    set_strict_ieee(False)
    report("fast vs strict Lab", float(np.max(np.abs(fast - strict))), 1e-6)

    print("4. Contrast models")
    white = np.array([255.0, 255.0, 255.0])
    black = np.zeros(3)
    lw = LuminanceEngine.wcag2_luminance(white)
    lb = LuminanceEngine.wcag2_luminance(black)
    print(f"   WCAG 2 black/white ratio {(lw + 0.05) / (lb + 0.05):.4f} (21.0000)")
    y_white = LuminanceEngine.apca_luminance(white)
    y_black = LuminanceEngine.apca_luminance(black)
    print(f"   APCA black on white Lc   {LuminanceEngine.apca_contrast(y_black, y_white):.2f} (106.04)")
    print(f"   APCA white on black Lc   {LuminanceEngine.apca_contrast(y_white, y_black):.2f} (-107.88)")
