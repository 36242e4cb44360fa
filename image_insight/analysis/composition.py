"""Shape classification from the original image dimensions."""

from __future__ import annotations

from ..utils.numbers import format_fixed
from .result import Composition, ImageStats


def classify_composition(width: int, height: int) -> Composition:
    """Map the width/height ratio onto a composition bucket.

    Ratios between 0.7 and 0.9 or between 1.1 and 1.5 (inclusive of 1.5)
    are ``standard``.
    """
    ratio = width / height
    if ratio > 1.5:
        return Composition.LANDSCAPE
    if ratio < 0.7:
        return Composition.PORTRAIT
    if 0.9 <= ratio <= 1.1:
        return Composition.SQUARE
    return Composition.STANDARD


def image_stats(width: int, height: int) -> ImageStats:
    return ImageStats(width=width, height=height, aspect_ratio=format_fixed(width / height, 2))
