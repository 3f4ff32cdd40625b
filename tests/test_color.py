# -*- coding: utf-8 -*-
"""
Swatch: Weaving accessible color palettes from contrast targets
Copyright (c) 2026 opticsWolf

SPDX-License-Identifier: LGPL-3.0-or-later

Tests for color definitions and ratio variants.
"""

import numpy as np
import pytest

from color_spaces import parse_color
from swatch_color import Color, NamedRatios, PositionalRatios, make_ratios, saturate


# --- Validation ---

@pytest.mark.parametrize("kwargs, message", [
    ({"name": ""}, "name"),
    ({"key_colors": []}, "Key colors"),
    ({"key_colors": ["#zzzzzz"]}, "Invalid color key"),
    ({"color_space": "xyz"}, "not supported"),
])
def test_invalid_definitions(kwargs, message):
    params = dict(name="blue", key_colors=["#0000ff"], color_space="lab", ratios=[3])
    params.update(kwargs)
    with pytest.raises(ValueError, match=message):
        Color(**params)


def test_ratio_types():
    with pytest.raises(TypeError):
        make_ratios("4.5")
    with pytest.raises(TypeError):
        make_ratios(4.5)
    with pytest.raises(TypeError):
        make_ratios([3, "4.5"])
    with pytest.raises(ValueError):
        make_ratios([3, float("inf")])
    with pytest.raises(TypeError):
        Color("blue", ["#0000ff"], "lab", [3], saturation="50")


def test_make_ratios_variants():
    assert isinstance(make_ratios([3, 4.5]), PositionalRatios)
    assert isinstance(make_ratios({"link": 4.5}), NamedRatios)
    positional = make_ratios((3, 4.5))
    assert make_ratios(positional) is positional


# --- Ratio resolution ---

def test_positional_resolve_sorts_and_prefixes():
    ratios = PositionalRatios((4.5, -1.5, 3))
    assert ratios.resolve("wcag2", "blue") == [("blue50", -1.5), ("blue100", 3.0), ("blue200", 4.5)]
    assert ratios.to_json() == [4.5, -1.5, 3.0]


def test_named_resolve_keeps_keys_and_order():
    ratios = make_ratios({"text": 7, "link": 4.5, "muted": 3})
    assert ratios.resolve("wcag3", "blue") == [("text", 7.0), ("link", 4.5), ("muted", 3.0)]
    assert ratios.to_json() == {"text": 7.0, "link": 4.5, "muted": 3.0}


def test_named_ratios_need_names():
    with pytest.raises(ValueError):
        NamedRatios((("", 3.0),))


# --- Saturation ---

def test_full_saturation_round_trips():
    assert saturate(["#5b8def", "#0b3a8c"], 100) == ["#5b8def", "#0b3a8c"]


def test_zero_saturation_gives_greys():
    for hex_color in saturate(["#5b8def", "#ff0000"], 0):
        rgb = parse_color(hex_color)
        assert np.ptp(rgb) <= 1.0


def test_saturation_setter_updates_resolved_keys(blue_color):
    assert blue_color.resolved_key_colors == ("#5b8def", "#0b3a8c")
    blue_color.with_saturation(0)
    assert blue_color.key_colors == ("#5b8def", "#0b3a8c")
    assert blue_color.resolved_key_colors != blue_color.key_colors
    with pytest.raises(ValueError):
        blue_color.with_saturation(-1)


# --- Copies ---

def test_clone_is_independent(blue_color):
    copy = blue_color.clone()
    copy.with_name("navy").with_key_colors(["#000080"]).with_smooth(True)
    assert blue_color.name == "blue"
    assert blue_color.key_colors == ("#5b8def", "#0b3a8c")
    assert not blue_color.smooth


def test_to_dict(grey_color):
    assert grey_color.to_dict() == {
        "name": "grey",
        "key_colors": ["#cacaca"],
        "color_space": "rgb",
        "ratios": [3.0, 4.5],
        "smooth": False,
        "saturation": 100.0,
    }


def test_fluent_setters_return_self(grey_color):
    assert grey_color.with_color_space("oklch") is grey_color
    assert grey_color.with_ratios({"body": 4.5}) is grey_color
    assert isinstance(grey_color.ratios, NamedRatios)


def test_definition_goes_through_hsluv():
    grey = Color(name="grey", key_colors=["#cacaca"], color_space="rgb", ratios=[2, 3, 4.5, 8])
    assert grey.resolved_key_colors == ("#cacaca",)
