# -*- coding: utf-8 -*-
"""
Swatch: Weaving accessible color palettes from contrast targets
Copyright (c) 2026 opticsWolf

SPDX-License-Identifier: LGPL-3.0-or-later

Shared fixtures for the Swatch test-suite.
"""

import numpy as np
import pytest

import swatch_colorengine
from swatch_color import Color


@pytest.fixture
def white() -> np.ndarray:
    return np.array([255.0, 255.0, 255.0])


@pytest.fixture
def black() -> np.ndarray:
    return np.array([0.0, 0.0, 0.0])


@pytest.fixture
def grey_color() -> Color:
    """Single grey key color, linear rgb scale."""
    return Color(name="grey", key_colors=["#cacaca"], color_space="rgb", ratios=[3, 4.5])


@pytest.fixture
def blue_color() -> Color:
    return Color(name="blue", key_colors=["#5b8def", "#0b3a8c"], color_space="oklch", ratios=[-1.5, 3, 4.5, 7])


@pytest.fixture
def rgb_samples() -> np.ndarray:
    rng = np.random.default_rng(7)
    return rng.uniform(0.0, 255.0, size=(64, 3))


@pytest.fixture
def strict_ieee():
    swatch_colorengine.set_strict_ieee(True)
    yield
    swatch_colorengine.set_strict_ieee(False)
