# -*- coding: utf-8 -*-
"""
Swatch: Weaving accessible color palettes from contrast targets
Copyright (c) 2026 opticsWolf

SPDX-License-Identifier: LGPL-3.0-or-later

Tests for the project metadata.
"""

import __about__


def test_metadata_summary():
    summary = __about__.metadata_summary()
    assert summary["title"] == "Swatch"
    assert summary["version"] == __about__.__version__
    assert summary["license"] == "LGPL-3.0-or-later"
    assert set(summary) == {"title", "version", "license", "description", "copyright"}
