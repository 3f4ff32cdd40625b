# -*- coding: utf-8 -*-
"""
Swatch: Weaving accessible color palettes from contrast targets
Copyright (c) 2026 opticsWolf

SPDX-License-Identifier: LGPL-3.0-or-later

Module: swatch_scale.py — color scales over key colors in any supported
interpolation space.

A scale maps a position in ``[0, granularity]`` to a color. Key colors are
placed by their CIECAM02 lightness J (lighter -> smaller position); with
``full_scale`` white is pinned at 0 and black at ``granularity``.

Interpolation is chosen from the ``INTERPOLATORS`` strategy table and runs
per channel on the space's coordinates:
    - "linear": piecewise-linear between key colors, clamped at the ends.
    - "smooth": Catmull-Rom spline through the key colors (swatch_curve).

Both strategies share one channel preparation:
    1. Undefined hues (greys) take the nearest defined hue at the ends of
       the sequence and are dropped in the interior; a channel without any
       defined value takes the hue of the neutral grey ``#cccccc``.
    2. Hue sequences are unwrapped so consecutive keys are at most 180
       degrees apart, keeping interpolation on the short arc.
"""

import dataclasses
import functools
import numpy as np
from dataclasses import dataclass
from typing import Callable, Dict, Final, List, Optional, Sequence, Tuple, Union

from color_spaces import (
    LIGHTNESS_SPACE,
    SpaceAdapter,
    get_space,
    parse_color,
    to_hex,
)
from swatch_colorengine import ArrayFloat
from swatch_curve import CurveLookup, catmull_to_bezier, prepare_curve

__all__ = [
    "ScaleOptions",
    "ColorScale",
    "LIGHTNESS_DISTRIBUTIONS",
    "INTERPOLATORS",
    "APPEARANCE_HUE_SPACES",
    "color_scale",
    "get_domains",
    "make_pow_scale",
    "sort_colors_by_lightness",
    "key_lightness",
    "unwrap_hue",
]

KeyColor = Union[str, Sequence[float]]

LIGHTNESS_DISTRIBUTIONS: Final[Dict[str, Callable[[ArrayFloat], ArrayFloat]]] = {
    "linear": lambda x: x,
    "parabola": np.sqrt,
    "polynomial": lambda x: np.sqrt(np.sqrt((x ** 2.25 + x ** 4) / 2.0)),
}

# Hue spaces whose chroma channel is a colorfulness correlate; the spline
# may overshoot below zero there.
APPEARANCE_HUE_SPACES: Final[frozenset] = frozenset({"cam02p", "cam16p", "hct"})

_NEUTRAL_GREY: Final[str] = "#cccccc"
_WHITE: Final[ArrayFloat] = np.array([255.0, 255.0, 255.0])
_BLACK: Final[ArrayFloat] = np.array([0.0, 0.0, 0.0])


@dataclass(slots=True, frozen=True)
class ScaleOptions:
    """
    Build options of a color scale.

    Attributes:
        shift: Exponent of the power remap of domain positions (1 = identity).
        full_scale: Pin white at position 0 and black at ``granularity``.
        smooth: Spline instead of piecewise-linear interpolation.
        distribute_lightness: Remap of normalized positions, one of
            ``LIGHTNESS_DISTRIBUTIONS``.
        sort_color: Order key colors by descending lightness.
    """

    shift: float = 1.0
    full_scale: bool = True
    smooth: bool = False
    distribute_lightness: str = "linear"
    sort_color: bool = True

    def __post_init__(self) -> None:
        if self.distribute_lightness not in LIGHTNESS_DISTRIBUTIONS:
            raise ValueError(
                f"Unknown lightness distribution {self.distribute_lightness!r}. "
                f"Supported: {', '.join(LIGHTNESS_DISTRIBUTIONS)}"
            )
        if not self.shift > 0:
            raise ValueError(f"shift must be positive, got {self.shift}")


# =============================================================================
# 1. DOMAINS
# =============================================================================

def _key_rgb(key: KeyColor) -> ArrayFloat:
    if isinstance(key, str):
        return parse_color(key)
    return np.asarray(key, dtype=np.float64)


def key_lightness(key_colors: Sequence[KeyColor]) -> ArrayFloat:
    """CIECAM02 lightness J / 100 of each key color."""
    rgb = np.array([_key_rgb(k) for k in key_colors], dtype=np.float64).reshape(-1, 3)
    return LIGHTNESS_SPACE.to_space(rgb)[:, 0] / 100.0


def sort_colors_by_lightness(key_colors: Sequence[KeyColor]) -> List[KeyColor]:
    """Orders key colors from lightest to darkest; ties keep their input order."""
    lightness = key_lightness(key_colors)
    order = sorted(range(len(key_colors)), key=lambda i: -lightness[i])
    return [key_colors[i] for i in order]


def make_pow_scale(
    k: float = 1.0,
    domain: Tuple[float, float] = (0.0, 1.0),
    range_: Tuple[float, float] = (0.0, 1.0),
) -> Callable[[ArrayFloat], ArrayFloat]:
    """
    Power scale ``x -> m * x**k + c`` mapping ``domain`` onto ``range_``.

    Returns the identity when the domain collapses under the power.
    """
    d0, d1 = domain[0] ** k, domain[1] ** k
    if d1 == d0:
        return lambda x: x
    m = (range_[1] - range_[0]) / (d1 - d0)
    c = range_[0] - m * d0
    return lambda x: m * np.power(x, k) + c


def get_domains(granularity: int, key_colors: Sequence[KeyColor], full_scale: bool) -> ArrayFloat:
    """
    Raw positions of the key colors, sorted ascending.

    Full scale: ``[0, g * (1 - J_i) ..., g]`` with J in [0, 1].
    Otherwise the lightnesses are min-max normalized to ``g - t * g``; a key
    set of uniform lightness collapses to position 0.
    """
    lum = key_lightness(key_colors)
    g = float(granularity)
    if full_scale:
        inner = np.sort(g * (1.0 - lum))
        return np.concatenate(([0.0], inner, [g]))

    spread = lum.max() - lum.min()
    if spread > 0:
        positions = g - (lum - lum.min()) / spread * g
    else:
        positions = np.zeros_like(lum)
    return np.sort(positions)


def _remap_domains(domains: ArrayFloat, granularity: int, options: ScaleOptions) -> ArrayFloat:
    power_scale = make_pow_scale(options.shift, (1.0, granularity), (1.0, granularity))
    shifted = np.maximum(0.0, power_scale(domains))
    distribute = LIGHTNESS_DISTRIBUTIONS[options.distribute_lightness]
    return distribute(shifted / granularity) * granularity


# =============================================================================
# 2. CHANNEL PREPARATION
# =============================================================================

@functools.lru_cache(maxsize=1)
def _neutral_hue() -> float:
    """CIECAM02 hue angle of the neutral grey, before achromatic masking."""
    grey = parse_color(_NEUTRAL_GREY)[None, :]
    return float(LIGHTNESS_SPACE._to_space_raw(grey)[0, 2])


def unwrap_hue(hues: ArrayFloat) -> ArrayFloat:
    """Adds multiples of 360 so that consecutive hues differ by at most 180 degrees."""
    return np.unwrap(np.asarray(hues, dtype=np.float64), period=360.0)


def _prepare_channel(domains: ArrayFloat, values: ArrayFloat, is_hue: bool) -> Tuple[ArrayFloat, ArrayFloat]:
    values = np.asarray(values, dtype=np.float64).copy()
    defined = np.flatnonzero(~np.isnan(values))
    if defined.size == 0:
        values[:] = _neutral_hue()
    else:
        values[:defined[0]] = values[defined[0]]
        values[defined[-1] + 1:] = values[defined[-1]]

    keep = ~np.isnan(values)
    xs, ys = domains[keep], values[keep]
    if is_hue:
        ys = unwrap_hue(ys)
    return xs, ys


# =============================================================================
# 3. INTERPOLATION STRATEGIES
# =============================================================================

class LinearChannel:
    """Piecewise-linear channel interpolant, constant beyond the end points."""

    def __init__(self, xs: ArrayFloat, ys: ArrayFloat):
        self.xs = xs
        self.ys = ys

    def __call__(self, positions: ArrayFloat) -> ArrayFloat:
        return np.interp(positions, self.xs, self.ys)


class SplineChannel:
    """
    Catmull-Rom channel interpolant built from per-segment lookup tables.

    Segments are queried in order and the first defined value wins; beyond
    the last control point the channel holds its end value.
    """

    def __init__(self, xs: ArrayFloat, ys: ArrayFloat):
        self.xs = xs
        self.ys = ys
        points = np.stack([xs, ys], axis=-1)
        self.lookups: List[CurveLookup] = [prepare_curve(seg) for seg in catmull_to_bezier(points)]

    def __call__(self, positions: ArrayFloat) -> ArrayFloat:
        positions = np.asarray(positions, dtype=np.float64)
        out = np.full(positions.shape, np.nan)
        for lookup in self.lookups:
            missing = np.isnan(out)
            if not missing.any():
                break
            out[missing] = lookup.sample(positions[missing])

        missing = np.isnan(out)
        if missing.any():
            out[missing] = np.where(positions[missing] < self.xs[0], self.ys[0], self.ys[-1])
        return out


INTERPOLATORS: Final[Dict[str, type]] = {
    "linear": LinearChannel,
    "smooth": SplineChannel,
}


# =============================================================================
# 4. COLOR SCALE
# =============================================================================

class ColorScale:
    """
    Continuous ``position -> sRGB`` scale.

    Calling the scale with one position returns a float64 (3,) sRGB triple
    with channels in [0, 255]; ``sample`` evaluates many positions at once.

    Attributes:
        space: Interpolation space adapter.
        key_colors: Resolved key colors (after sorting and white/black
            extension) as sRGB rows.
        domains: Position of each key color.
        smooth: Whether the spline strategy is used.
    """

    def __init__(self, space: SpaceAdapter, key_rgb: ArrayFloat, domains: ArrayFloat, smooth: bool):
        self.space = space
        self.key_colors = np.asarray(key_rgb, dtype=np.float64).reshape(-1, 3)
        self.domains = np.asarray(domains, dtype=np.float64)
        self.smooth = smooth

        coords = space.to_space(self.key_colors)
        interpolator = INTERPOLATORS["smooth" if smooth else "linear"]
        self._channels = []
        for c in range(3):
            xs, ys = _prepare_channel(self.domains, coords[:, c], c == space.hue_index)
            self._channels.append(interpolator(xs, ys))

        self._clamp_chroma = smooth and space.name in APPEARANCE_HUE_SPACES

    def __repr__(self) -> str:
        return (f"ColorScale(space={self.space.name!r}, keys={len(self.key_colors)}, "
                f"smooth={self.smooth})")

    def sample(self, positions: Union[float, Sequence[float], ArrayFloat]) -> ArrayFloat:
        """
        Args:
            positions: Scalar or 1-D positions.

        Returns:
            sRGB rows, shape (N, 3).
        """
        pos = np.atleast_1d(np.asarray(positions, dtype=np.float64))
        coords = np.stack([channel(pos) for channel in self._channels], axis=-1)
        if self._clamp_chroma:
            coords[:, self.space.chroma_index] = np.maximum(coords[:, self.space.chroma_index], 0.0)
        return self.space.from_space(coords)

    def __call__(self, position: float) -> ArrayFloat:
        return self.sample(position)[0]

    def colors(self, granularity: int) -> List[str]:
        """
        Materializes ``granularity`` hex colors.

        Linear scales are sampled evenly between their first and last domain
        position; smooth scales at the integer positions ``0 .. granularity-1``.
        """
        if self.smooth:
            positions = np.arange(granularity, dtype=np.float64)
        else:
            positions = np.linspace(self.domains[0], self.domains[-1], granularity)
        return [to_hex(rgb) for rgb in self.sample(positions)]


def color_scale(
    granularity: int,
    key_colors: Sequence[KeyColor],
    color_space: str,
    options: Optional[ScaleOptions] = None,
    as_fn: bool = False,
    **option_overrides,
) -> Union[List[str], ColorScale]:
    """
    Builds a color scale over ``key_colors``.

    Args:
        granularity: Resolution of the domain ``[0, granularity]``.
        key_colors: At least one color string (or sRGB triple in [0, 255]).
        color_space: Interpolation space name.
        options: Build options; keyword overrides (``smooth=True``, ...)
            are applied on top.
        as_fn: Return the continuous ``ColorScale`` instead of hex colors.

    Returns:
        ``granularity`` hex strings, or the ``ColorScale`` when ``as_fn``.

    Raises:
        ValueError: For an unknown space, a non-positive granularity or an
            empty key color list.
    """
    if granularity < 1:
        raise ValueError(f"granularity must be at least 1, got {granularity}")
    if len(key_colors) == 0:
        raise ValueError("At least one key color is required")
    space = get_space(color_space)
    options = dataclasses.replace(options or ScaleOptions(), **option_overrides)

    domains = _remap_domains(get_domains(granularity, key_colors, options.full_scale),
                             granularity, options)

    # Full-scale domains are sorted, so the keys always follow lightness order there.
    keys = list(key_colors)
    if options.sort_color or options.full_scale:
        keys = sort_colors_by_lightness(keys)
    key_rgb = [_key_rgb(k) for k in keys]
    if options.full_scale:
        key_rgb = [_WHITE, *key_rgb, _BLACK]

    scale = ColorScale(space, np.array(key_rgb), domains, options.smooth)
    if as_fn:
        return scale
    return scale.colors(granularity)
