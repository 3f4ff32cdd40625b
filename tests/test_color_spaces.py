# -*- coding: utf-8 -*-
"""
Swatch: Weaving accessible color palettes from contrast targets
Copyright (c) 2026 opticsWolf

SPDX-License-Identifier: LGPL-3.0-or-later

Tests for the perceptual-space adapters and the base library facade.
"""

import numpy as np
import pytest

from color_spaces import (
    COLOR_SPACES,
    INTERPOLATION_SPACES,
    OUTPUT_FORMATS,
    get_space,
    is_valid_color,
    parse_color,
    to_hex,
)
from color_spaces.base import SwatchColor

CHROMATIC = np.array([
    [200.0, 100.0, 50.0],
    [30.0, 144.0, 255.0],
    [12.0, 80.0, 40.0],
    [250.0, 240.0, 10.0],
])


def test_registry_covers_all_spaces():
    expected = {"rgb", "hsl", "hsv", "hsluv", "lab", "lch", "oklab", "oklch",
                "cam02", "cam02p", "cam16", "cam16p", "hct"}
    assert set(COLOR_SPACES) == expected
    assert INTERPOLATION_SPACES == expected
    assert OUTPUT_FORMATS == {"hex", "rgb", "hsl", "lab", "lch", "oklab", "oklch"}


def test_unknown_space():
    with pytest.raises(ValueError, match="not supported"):
        get_space("cmyk")


@pytest.mark.parametrize("name", sorted(COLOR_SPACES))
def test_round_trip(name):
    space = COLOR_SPACES[name]
    back = space.from_space(space.to_space(CHROMATIC))
    np.testing.assert_allclose(back, CHROMATIC, atol=0.5)


@pytest.mark.parametrize("name", sorted(COLOR_SPACES))
def test_single_color_shape(name):
    space = COLOR_SPACES[name]
    assert space.to_space(CHROMATIC[0]).shape == (3,)
    assert space.from_space(space.to_space(CHROMATIC[0])).shape == (3,)


@pytest.mark.parametrize("name", ["hsl", "hsv", "hsluv", "lch", "oklch", "cam02p", "cam16p", "hct"])
def test_grey_hue_is_nan(name):
    space = COLOR_SPACES[name]
    coords = space.to_space(np.array([128.0, 128.0, 128.0]))
    assert space.hue_index is not None
    assert np.isnan(coords[space.hue_index])
    assert not np.isnan(np.delete(coords, space.hue_index)).any()


@pytest.mark.parametrize("name", ["hsl", "lch", "oklch", "hsluv"])
def test_nan_hue_reads_as_zero(name):
    space = COLOR_SPACES[name]
    coords = space.to_space(np.array([128.0, 128.0, 128.0]))
    np.testing.assert_allclose(space.from_space(coords), [128.0, 128.0, 128.0], atol=0.5)


def test_hue_wraps():
    hsl = COLOR_SPACES["hsl"]
    np.testing.assert_allclose(hsl.from_space([360.0 + 120.0, 1.0, 0.5]),
                               hsl.from_space([120.0, 1.0, 0.5]))


def test_from_space_clamps_to_gamut():
    rgb = COLOR_SPACES["lab"].from_space([50.0, 200.0, -200.0])
    assert np.all(rgb >= 0.0) and np.all(rgb <= 255.0)


def test_white_and_black_lightness():
    cam = COLOR_SPACES["cam02p"]
    assert cam.to_space(np.array([255.0, 255.0, 255.0]))[0] == pytest.approx(100.0, abs=0.5)
    assert cam.to_space(np.zeros(3))[0] == pytest.approx(0.0, abs=1e-6)


def test_parse_color():
    np.testing.assert_allclose(parse_color("#ccc"), [204.0, 204.0, 204.0])
    np.testing.assert_allclose(parse_color("red"), [255.0, 0.0, 0.0])
    np.testing.assert_allclose(parse_color("rgb(10, 20, 30)"), [10.0, 20.0, 30.0])
    with pytest.raises(ValueError):
        parse_color("not-a-color")


def test_is_valid_color():
    assert is_valid_color("#123456")
    assert is_valid_color("rebeccapurple")
    assert not is_valid_color("#12345g")
    assert not is_valid_color(42)


def test_to_hex_rounds_and_clamps():
    assert to_hex([127.5, 0.4, 300.0]) == "#8000ff"
    assert to_hex([-5.0, float("nan"), 255.0]) == "#0000ff"


def test_hsluv_conversion_chain_is_registered():
    hsluv = SwatchColor("#cacaca").convert("hsluv")
    assert hsluv.coords()[2] == pytest.approx(81.3, abs=0.5)
    coords = COLOR_SPACES["hsluv"].to_space(np.array([255.0, 255.0, 255.0]))
    assert coords[2] == pytest.approx(100.0, abs=1e-3)
    np.testing.assert_allclose(COLOR_SPACES["hsluv"].from_space(COLOR_SPACES["hsluv"].to_space(CHROMATIC)),
                               CHROMATIC, atol=0.5)
