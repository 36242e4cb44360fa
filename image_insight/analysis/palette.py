"""Dominant color extraction by grouping pixels on a coarse RGB grid."""

from __future__ import annotations

from collections import Counter
from collections.abc import Sequence

from .result import ColorAnalysis, PaletteType

PALETTE_SAMPLE_LIMIT = 10_000
PALETTE_SIZE = 5
GRID_STEP = 32


def rgb_to_hex(r: int, g: int, b: int) -> str:
    return f"#{r:02X}{g:02X}{b:02X}"


def hex_to_rgb(value: str) -> tuple[int, int, int]:
    return int(value[1:3], 16), int(value[3:5], 16), int(value[5:7], 16)


def quantize_channel(value: int) -> int:
    """Snap a channel value down to the nearest multiple of the grid step."""
    return (value // GRID_STEP) * GRID_STEP


def channel_saturation(r: int, g: int, b: int) -> float:
    """HSV-style saturation ``(max - min) / max``; zero for black."""
    high = max(r, g, b)
    if high == 0:
        return 0.0
    return (high - min(r, g, b)) / high


def palette_stride(pixel_count: int) -> int:
    return max(1, pixel_count // PALETTE_SAMPLE_LIMIT)


def count_color_buckets(data: bytes, pixel_count: int) -> Counter[str]:
    """Tally quantized colors over every stride-th RGBA pixel.

    Keys are ``#RRGGBB`` strings in first-seen order, which is what breaks
    ties when buckets are later ranked by frequency.
    """
    buckets: Counter[str] = Counter()
    step = 4 * palette_stride(pixel_count)
    for offset in range(0, len(data), step):
        key = rgb_to_hex(
            quantize_channel(data[offset]),
            quantize_channel(data[offset + 1]),
            quantize_channel(data[offset + 2]),
        )
        buckets[key] += 1
    return buckets


def dominant_colors(buckets: Counter[str], limit: int = PALETTE_SIZE) -> list[str]:
    # most_common keeps insertion order among equal counts.
    return [color for color, _ in buckets.most_common(limit)]


def classify_palette(colors: Sequence[str]) -> PaletteType:
    """Label a ranked palette as warm, cool, vibrant, dark or balanced.

    Thresholds are absolute counts over at most five colors, so palettes
    with fewer than three entries can never be warm, cool or vibrant.
    """
    warm_count = 0
    cool_count = 0
    saturated_count = 0
    for color in colors:
        r, g, b = hex_to_rgb(color)
        if r > g and r > b:
            warm_count += 1
        if b > r and b > g:
            cool_count += 1
        if channel_saturation(r, g, b) > 0.5:
            saturated_count += 1

    if warm_count > cool_count and warm_count > 2:
        return PaletteType.WARM
    if cool_count > warm_count and cool_count > 2:
        return PaletteType.COOL
    if saturated_count > 2:
        return PaletteType.VIBRANT
    # Only a red high nibble of zero qualifies; kept as-is pending product review.
    if colors and colors[0].startswith("#0"):
        return PaletteType.DARK
    return PaletteType.BALANCED


def analyze_colors(data: bytes, pixel_count: int) -> ColorAnalysis:
    colors = dominant_colors(count_color_buckets(data, pixel_count))
    return ColorAnalysis(dominant_colors=tuple(colors), palette_type=classify_palette(colors))
