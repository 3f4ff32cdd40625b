# -*- coding: utf-8 -*-
"""
Swatch: Weaving accessible color palettes from contrast targets
Copyright (c) 2026 opticsWolf

SPDX-License-Identifier: LGPL-3.0-or-later

Module: color_spaces — registry of the perceptual-space adapters.

``COLOR_SPACES`` maps every user-facing space name to its adapter;
``INTERPOLATION_SPACES`` and ``OUTPUT_FORMATS`` are the names valid as a
scale's interpolation space and as a palette's output format.
"""

from typing import Dict, Final, FrozenSet

from .base import (
    SpaceAdapter,
    SwatchColor,
    ACHROMATIC_TOLERANCE,
    parse_color,
    is_valid_color,
    to_hex,
)
from .basic import (
    RGBSpace,
    HSLSpace,
    HSVSpace,
    LabSpace,
    LChSpace,
    OklabSpace,
    OkLChSpace,
)
from .ciecam import (
    CIECAM02JChSpace,
    CIECAM02JabSpace,
    CAM16JChSpace,
    CAM16JabSpace,
)
from .uniform import HSLuvSpace, HCTSpace

__all__ = [
    "SpaceAdapter",
    "SwatchColor",
    "ACHROMATIC_TOLERANCE",
    "parse_color",
    "is_valid_color",
    "to_hex",
    "COLOR_SPACES",
    "INTERPOLATION_SPACES",
    "OUTPUT_FORMATS",
    "LIGHTNESS_SPACE",
    "get_space",
]

COLOR_SPACES: Final[Dict[str, SpaceAdapter]] = {
    space.name: space
    for space in (
        RGBSpace(),
        HSLSpace(),
        HSVSpace(),
        HSLuvSpace(),
        LabSpace(),
        LChSpace(),
        OklabSpace(),
        OkLChSpace(),
        CIECAM02JabSpace(),
        CIECAM02JChSpace(),
        CAM16JabSpace(),
        CAM16JChSpace(),
        HCTSpace(),
    )
}

INTERPOLATION_SPACES: Final[FrozenSet[str]] = frozenset(COLOR_SPACES)

# 'hex' is a rendering of rgb, not a space of its own.
OUTPUT_FORMATS: Final[FrozenSet[str]] = frozenset(
    {"hex", "rgb", "hsl", "lab", "lch", "oklab", "oklch"}
)

# Key colors are always ordered by CIECAM02 lightness J.
LIGHTNESS_SPACE: Final[SpaceAdapter] = COLOR_SPACES["cam02p"]


def get_space(name: str) -> SpaceAdapter:
    """
    Looks up the adapter of an interpolation space.

    Raises:
        ValueError: If ``name`` is not a supported space.
    """
    try:
        return COLOR_SPACES[name]
    except KeyError:
        supported = ", ".join(sorted(COLOR_SPACES))
        raise ValueError(f"Color space {name!r} not supported. Supported: {supported}") from None
