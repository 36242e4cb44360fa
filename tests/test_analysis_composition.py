"""Tests for composition buckets and dimension stats."""

from __future__ import annotations

import pytest

from image_insight.analysis.composition import classify_composition, image_stats
from image_insight.analysis.result import Composition
from image_insight.utils.numbers import format_fixed, round_half_up


@pytest.mark.parametrize(
    ("width", "height", "expected"),
    [
        (150, 100, Composition.STANDARD),
        (151, 100, Composition.LANDSCAPE),
        (69, 100, Composition.PORTRAIT),
        (70, 100, Composition.STANDARD),
        (80, 100, Composition.STANDARD),
        (90, 100, Composition.SQUARE),
        (95, 100, Composition.SQUARE),
        (110, 100, Composition.SQUARE),
        (120, 100, Composition.STANDARD),
        (1920, 1080, Composition.LANDSCAPE),
    ],
)
def test_composition_boundaries(width, height, expected):
    assert classify_composition(width, height) is expected


@pytest.mark.parametrize(
    ("width", "height", "ratio"),
    [
        (1920, 1080, "1.78"),
        (400, 400, "1.00"),
        (800, 400, "2.00"),
        (9, 8, "1.13"),
        (1, 3, "0.33"),
    ],
)
def test_image_stats_aspect_ratio(width, height, ratio):
    stats = image_stats(width, height)

    assert stats.width == width
    assert stats.height == height
    assert stats.aspect_ratio == ratio


def test_round_half_up_rounds_ties_upwards():
    assert round_half_up(12.5) == 13
    assert round_half_up(2.5) == 3
    assert round_half_up(2.49) == 2
    assert round_half_up(0.4) == 0


def test_format_fixed_uses_exact_binary_value():
    assert format_fixed(1.125) == "1.13"
    assert format_fixed(1.005) == "1.00"
    assert format_fixed(3.0, 1) == "3.0"
