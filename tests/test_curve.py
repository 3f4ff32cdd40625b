# -*- coding: utf-8 -*-
"""
Swatch: Weaving accessible color palettes from contrast targets
Copyright (c) 2026 opticsWolf

SPDX-License-Identifier: LGPL-3.0-or-later

Tests for the curve engine.
"""

import numpy as np
import pytest

from swatch_curve import (
    ARC_SAMPLING_DENSITY,
    CubicBezier,
    approximate_bezier_len,
    catmull_to_bezier,
    point_at,
    prepare_curve,
)

POINTS = [(0.0, 20.0), (800.0, 60.0), (1700.0, 35.0), (3000.0, 90.0)]


def test_segment_count_and_endpoints():
    segments = catmull_to_bezier(POINTS)
    assert len(segments) == len(POINTS) - 1
    for seg, start, end in zip(segments, POINTS, POINTS[1:]):
        assert seg.p0 == start
        assert seg.p3 == end


def test_fewer_than_two_points():
    assert catmull_to_bezier([(5.0, 5.0)]) == []
    assert catmull_to_bezier([]) == []


def test_catmull_tangents():
    seg = catmull_to_bezier([(0.0, 0.0), (6.0, 6.0), (12.0, 0.0)])[0]
    # First segment: v1 == v2 == (0, 0), v3 = (6, 6), v4 = (12, 0).
    assert seg.p1 == pytest.approx((1.0, 1.0))
    assert seg.p2 == pytest.approx((4.0, 6.0))


def test_extrapolated_phantom_point():
    # Last segment uses v4 = 2 * v3 - v2.
    seg = catmull_to_bezier([(0.0, 0.0), (6.0, 6.0), (12.0, 0.0)])[1]
    v2, v3 = np.array([6.0, 6.0]), np.array([12.0, 0.0])
    v4 = 2.0 * v3 - v2
    expected = (-v4 + 6.0 * v3 + v2) / 6.0
    assert seg.p2 == pytest.approx(tuple(expected))


def test_point_at_endpoints():
    seg = catmull_to_bezier(POINTS)[1]
    assert point_at(seg, 0.0) == pytest.approx(seg.p0)
    assert point_at(seg, 1.0) == pytest.approx(seg.p3)


def test_length_of_straight_segment():
    seg = CubicBezier((0.0, 0.0), (10.0, 0.0), (20.0, 0.0), (30.0, 0.0))
    assert approximate_bezier_len(seg) == pytest.approx(30.0)
    assert approximate_bezier_len(seg, steps=3) == pytest.approx(30.0)


def test_lookup_size_follows_arc_length():
    seg = CubicBezier((0.0, 0.0), (100.0, 0.0), (200.0, 0.0), (300.0, 0.0))
    lookup = prepare_curve(seg)
    assert int(np.floor(300.0 * ARC_SAMPLING_DENSITY)) < len(lookup)
    assert len(lookup) == 301


def test_round_trip_through_control_points():
    segments = catmull_to_bezier(POINTS)
    lookups = [prepare_curve(seg) for seg in segments]
    for i, (x, y) in enumerate(POINTS):
        lookup = lookups[max(i - 1, 0)]
        assert lookup(x) == pytest.approx(y, abs=0.5)


def test_lookup_is_total():
    for seg in catmull_to_bezier(POINTS):
        lookup = prepare_curve(seg)
        values = [lookup(x) for x in range(len(lookup))]
        assert all(v is not None for v in values)
        assert not np.isnan(lookup.table).any()


def test_leading_indices_take_first_value():
    seg = catmull_to_bezier(POINTS)[2]
    lookup = prepare_curve(seg)
    assert lookup(0) == lookup(POINTS[2][0])


def test_out_of_range_is_none():
    lookup = prepare_curve(catmull_to_bezier(POINTS)[0])
    assert lookup(-1) is None
    assert lookup(len(lookup)) is None
    assert np.isnan(lookup.sample(np.array([-3.0, 1e6]))).all()


def test_sample_matches_scalar_lookup():
    lookup = prepare_curve(catmull_to_bezier(POINTS)[1])
    xs = np.array([0.0, 799.6, 1000.2, 1699.5])
    np.testing.assert_allclose(lookup.sample(xs), [lookup(x) for x in xs])


def test_degenerate_segment_samples_endpoints():
    seg = CubicBezier((5.0, 2.0), (5.0, 2.0), (5.0, 2.0), (5.0, 2.0))
    lookup = prepare_curve(seg)
    assert lookup(5) == 2.0
    assert lookup(0) == 2.0
    assert lookup(6) is None


def test_table_is_read_only():
    lookup = prepare_curve(catmull_to_bezier(POINTS)[0])
    with pytest.raises(ValueError):
        lookup.table[0] = 1.0
