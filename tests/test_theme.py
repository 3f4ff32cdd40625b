# -*- coding: utf-8 -*-
"""
Swatch: Weaving accessible color palettes from contrast targets
Copyright (c) 2026 opticsWolf

SPDX-License-Identifier: LGPL-3.0-or-later

Tests for themes and generated palettes.
"""

import numpy as np
import pytest

from color_spaces import COLOR_SPACES, parse_color
from swatch_color import Color
from swatch_contrast import contrast
from swatch_theme import Palette, Theme


@pytest.fixture
def cool_grey() -> Color:
    return Color(name="cool grey", key_colors=["#6b7280"], color_space="rgb", ratios=[3, 4.5])


@pytest.fixture
def white_theme(cool_grey) -> Theme:
    return Theme(colors=[cool_grey], background_color="#ffffff", algorithm="wcag2")


def test_palette_names_and_pairs(white_theme):
    palette = white_theme.palette()
    assert isinstance(palette, Palette)
    assert palette.background == "rgb(255, 255, 255)"
    assert list(palette.color_pairs) == ["background", "coolgrey100", "coolgrey200"]
    assert palette.colors[0].name == "cool grey"
    assert [s.contrast for s in palette.colors[0].values] == [3.0, 4.5]
    assert palette.color_values == tuple(s.value for s in palette.colors[0].values)


def test_palette_values_meet_targets(white_theme):
    white = parse_color("#ffffff")
    for swatch in white_theme.palette().colors[0].values:
        measured = contrast(parse_color(swatch.value), white, 1.0, "wcag2")
        assert measured == pytest.approx(swatch.contrast, abs=0.15)


def test_palette_to_dict(white_theme):
    data = white_theme.palette().to_dict()
    assert data["colors"][0] == {"background": "rgb(255, 255, 255)"}
    assert data["colors"][1]["name"] == "cool grey"
    assert [v["name"] for v in data["colors"][1]["values"]] == ["coolgrey100", "coolgrey200"]
    assert len(data["color_values"]) == 2


def test_string_background_sets_lightness(cool_grey):
    theme = Theme(colors=[cool_grey], background_color="#ffffff", lightness=40)
    assert theme.lightness == 100
    assert theme.background_color.name == "background"
    assert theme.background_color.color_space == "rgb"


def test_palette_is_memoised_per_format(white_theme):
    rgb = white_theme.palette()
    assert white_theme.palette() is rgb
    hex_palette = white_theme.palette("hex")
    assert hex_palette is not rgb
    assert hex_palette.background == "#ffffff"
    assert white_theme.palette() is rgb


def test_setters_invalidate_palette(white_theme):
    first = white_theme.palette()
    white_theme.with_contrast(2)
    second = white_theme.palette()
    assert second is not first
    assert [s.contrast for s in second.colors[0].values] == [5.0, 8.0]
    white_theme.with_algorithm("wcag2")
    assert white_theme.palette() is not second


def test_output_format_setter(white_theme):
    white_theme.with_output_format("hex")
    assert all(v.startswith("#") for v in white_theme.palette().color_values)


def test_named_ratios_keep_their_keys():
    link = Color(name="brand blue", key_colors=["#0b61c4"], color_space="lab", ratios={"link": 4.5, "text": 7})
    palette = Theme(colors=[link], background_color="#ffffff", algorithm="wcag2").palette()
    assert list(palette.color_pairs) == ["background", "link", "text"]


def test_lightness_picks_from_background_scale():
    bg = Color(name="background", key_colors=["#808080"], color_space="rgb", ratios=[])
    theme = Theme(colors=[], background_color=bg, lightness=50)
    value = theme.background_color_value
    lightness = COLOR_SPACES["hsluv"].to_space(parse_color(value))[2]
    assert lightness == pytest.approx(50.0, abs=2.0)
    theme.with_lightness(0)
    assert theme.background_color_value == "rgb(0, 0, 0)"


def test_lightness_outside_scale_is_clamped(cool_grey):
    bg = Color(name="background", key_colors=["#808080"], color_space="rgb", ratios=[])
    theme = Theme(colors=[cool_grey], background_color=bg, lightness=150)
    with pytest.warns(UserWarning, match="outside the background scale"):
        value = theme.background_color_value
    assert value == "rgb(255, 255, 255)"


def test_dark_background_palette():
    grey = Color(name="grey", key_colors=["#9ca3af"], color_space="rgb", ratios=[45, 60])
    theme = Theme(colors=[grey], background_color="#000000")
    palette = theme.palette()
    assert theme.lightness == 0
    assert palette.background == "rgb(0, 0, 0)"
    brightness = [np.sum(parse_color(v)) for v in palette.color_values]
    assert brightness[0] < brightness[1]


def test_colors_are_copied(cool_grey):
    theme = Theme(colors=[cool_grey], background_color="#ffffff")
    cool_grey.with_name("changed")
    assert theme.colors[0].name == "cool grey"


def test_saturation_override(cool_grey):
    blue = Color(name="blue", key_colors=["#0b61c4"], color_space="lab", ratios=[3])
    theme = Theme(colors=[cool_grey, blue], background_color="#ffffff", saturation=0)
    assert theme.saturation == 0
    for color in theme.colors:
        assert np.ptp(parse_color(color.resolved_key_colors[0])) <= 1.0


def test_validation(cool_grey):
    with pytest.raises(TypeError):
        Theme(colors=["#ffffff"], background_color="#ffffff")
    with pytest.raises(TypeError):
        Theme(colors=cool_grey, background_color="#ffffff")
    with pytest.raises(TypeError):
        Theme(colors=[cool_grey], background_color=42)
    with pytest.raises(TypeError):
        Theme(colors=[cool_grey], background_color="#ffffff", contrast="2")
    with pytest.raises(ValueError):
        Theme(colors=[cool_grey], background_color="#ffffff", algorithm="wcag4")
    with pytest.raises(ValueError):
        Theme(colors=[cool_grey], background_color="#ffffff", output_format="cmyk")


def test_to_dict(white_theme):
    data = white_theme.to_dict()
    assert data["algorithm"] == "wcag2"
    assert data["background_color_value"] == "rgb(255, 255, 255)"
    assert data["colors"][0]["name"] == "cool grey"
