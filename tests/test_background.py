# -*- coding: utf-8 -*-
"""
Swatch: Weaving accessible color palettes from contrast targets
Copyright (c) 2026 opticsWolf

SPDX-License-Identifier: LGPL-3.0-or-later

Tests for the background lightness scale.
"""

import numpy as np

from color_spaces import COLOR_SPACES, parse_color
from swatch_background import BACKGROUND_STEPS, create_background_color_scale
from swatch_color import Color


def _hsluv_lightness(values):
    rgb = np.array([parse_color(v) for v in values])
    return COLOR_SPACES["hsluv"].to_space(rgb)[:, 2]


def test_white_background_scale():
    bg = Color(name="background", key_colors=["#ffffff"], color_space="rgb", ratios=[])
    scale = create_background_color_scale(bg, "rgb")
    assert scale[0] == "rgb(0, 0, 0)"
    assert scale[-1] == "rgb(255, 255, 255)"
    assert len(scale) <= BACKGROUND_STEPS + 1


def test_lightness_is_ordered_and_unique():
    bg = Color(name="slate", key_colors=["#3a4f6b", "#c9d4e3"], color_space="lab", ratios=[])
    scale = create_background_color_scale(bg, "hex")
    lightness = np.round(_hsluv_lightness(scale[:-1]))
    assert np.all(np.diff(lightness) > 0)
    assert scale[-1] == "#ffffff"


def test_key_colors_are_candidates():
    bg = Color(name="sand", key_colors=["#d8c9a7"], color_space="rgb", ratios=[])
    scale = create_background_color_scale(bg, "hex")
    assert "#d8c9a7" in scale
    assert scale[0] == "#000000"


def test_output_format_is_applied():
    bg = Color(name="background", key_colors=["#808080"], color_space="rgb", ratios=[])
    assert all(v.startswith("hsl(") for v in create_background_color_scale(bg, "hsl"))


def test_later_candidates_win_a_shared_lightness():
    bg = Color(name="slate", key_colors=["#3a4f6b", "#c9d4e3"], color_space="lab", ratios=[])
    scale = create_background_color_scale(bg, "hex")
    assert "#3a4f6b" in scale
    assert "#c9d4e3" in scale
