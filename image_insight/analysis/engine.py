"""Assemble an analysis result from a rendered pixel buffer."""

from __future__ import annotations

from ..imaging.base import PixelBuffer
from .composition import classify_composition, image_stats
from .palette import analyze_colors
from .result import AnalysisResult
from .tones import analyze_brightness, analyze_contrast, analyze_saturation


def analyze_pixels(buffer: PixelBuffer, *, timestamp: int) -> AnalysisResult:
    """Run every statistical pass over ``buffer``.

    Tonal passes read the working-size pixels; composition and stats use the
    original dimensions recorded on the buffer.
    """
    return AnalysisResult(
        colors=analyze_colors(buffer.data, buffer.pixel_count),
        brightness=analyze_brightness(buffer.data),
        saturation=analyze_saturation(buffer.data),
        contrast=analyze_contrast(buffer.data),
        composition=classify_composition(buffer.original_width, buffer.original_height),
        stats=image_stats(buffer.original_width, buffer.original_height),
        timestamp=timestamp,
    )
