# -*- coding: utf-8 -*-
"""
Swatch: Weaving accessible color palettes from contrast targets
Copyright (c) 2026 opticsWolf

SPDX-License-Identifier: LGPL-3.0-or-later

Tests for the numeric color engine and the luminance models.
"""

import numpy as np
import pytest

from swatch_colorengine import ColorSpaceEngine as CSE, LuminanceEngine


@pytest.mark.parametrize("forward, inverse", [
    (CSE.srgb_to_lab, CSE.lab_to_srgb),
    (CSE.srgb_to_lch, CSE.lch_to_srgb),
    (CSE.srgb_to_oklab, CSE.oklab_to_srgb),
    (CSE.srgb_to_oklch, CSE.oklch_to_srgb),
    (CSE.srgb_to_hsl, CSE.hsl_to_srgb),
    (CSE.srgb_to_hsv, CSE.hsv_to_srgb),
])
def test_round_trip(forward, inverse, rgb_samples):
    rgb = rgb_samples / 255.0
    np.testing.assert_allclose(inverse(forward(rgb)), rgb, atol=1e-6)


def test_shape_is_preserved():
    assert CSE.srgb_to_lab(np.array([0.2, 0.4, 0.6])).shape == (3,)
    assert CSE.srgb_to_lab(np.zeros((5, 3))).shape == (5, 3)


def test_bad_shape_raises():
    with pytest.raises(ValueError, match="last dimension"):
        CSE.srgb_to_lab(np.zeros((4, 2)))


def test_white_lab():
    lab = CSE.srgb_to_lab(np.ones(3))
    np.testing.assert_allclose(lab, [100.0, 0.0, 0.0], atol=1e-2)


def test_hsl_reference_values():
    np.testing.assert_allclose(CSE.srgb_to_hsl(np.array([1.0, 0.0, 0.0])), [0.0, 1.0, 0.5])
    np.testing.assert_allclose(CSE.srgb_to_hsl(np.array([0.0, 0.0, 1.0])), [240.0, 1.0, 0.5])
    np.testing.assert_allclose(CSE.srgb_to_hsv(np.array([0.5, 0.5, 0.5])), [0.0, 0.0, 0.5])


def test_strict_mode_matches_fast(strict_ieee, rgb_samples):
    rgb = rgb_samples / 255.0
    lab_strict = CSE.srgb_to_lab(rgb)
    assert np.all(np.isfinite(lab_strict))
    np.testing.assert_allclose(CSE.lab_to_srgb(lab_strict), rgb, atol=1e-6)


def test_wcag2_black_white_ratio(white, black):
    lw = LuminanceEngine.wcag2_luminance(white)
    lb = LuminanceEngine.wcag2_luminance(black)
    assert lw == pytest.approx(1.0)
    assert lb == 0.0
    assert (lw + 0.05) / (lb + 0.05) == pytest.approx(21.0)


def test_apca_reference_values(white, black):
    y_white = LuminanceEngine.apca_luminance(white)
    y_black = LuminanceEngine.apca_luminance(black)
    assert LuminanceEngine.apca_contrast(y_black, y_white) == pytest.approx(106.04, abs=0.05)
    assert LuminanceEngine.apca_contrast(y_white, y_black) == pytest.approx(-107.88, abs=0.05)


def test_apca_low_contrast_clips_to_zero():
    y = LuminanceEngine.apca_luminance(np.array([200.0, 200.0, 200.0]))
    assert LuminanceEngine.apca_contrast(y, y) == 0.0
    assert LuminanceEngine.apca_contrast(y * 0.99, y) == 0.0


def test_apca_out_of_range_luminance():
    assert LuminanceEngine.apca_contrast(1.5, 0.5) == 0.0
    assert LuminanceEngine.apca_contrast(float("nan"), 0.5) == 0.0
