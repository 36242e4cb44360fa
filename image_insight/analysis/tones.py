"""Brightness, saturation and contrast buckets from sampled RGBA pixels."""

from __future__ import annotations

from collections.abc import Iterator

from .palette import channel_saturation
from .result import Level

TONE_SAMPLE_LIMIT = 40_000


def luminance(r: int, g: int, b: int) -> float:
    """Rec. 601 weighted luminance in ``[0, 255]``."""
    return 0.299 * r + 0.587 * g + 0.114 * b


def tone_stride(byte_length: int) -> int:
    # Bounded by buffer bytes rather than pixels, so roughly 10k pixels are visited.
    return max(1, byte_length // TONE_SAMPLE_LIMIT)


def _sampled_pixels(data: bytes) -> Iterator[tuple[int, int, int]]:
    step = 4 * tone_stride(len(data))
    for offset in range(0, len(data), step):
        yield data[offset], data[offset + 1], data[offset + 2]


def _bucket(value: float, high: float, medium: float) -> Level:
    if value > high:
        return Level.HIGH
    if value > medium:
        return Level.MEDIUM
    return Level.LOW


def analyze_brightness(data: bytes) -> Level:
    total = 0.0
    samples = 0
    for r, g, b in _sampled_pixels(data):
        total += luminance(r, g, b)
        samples += 1
    average = total / samples if samples else 0.0
    return _bucket(average / 255, high=0.7, medium=0.4)


def analyze_saturation(data: bytes) -> Level:
    total = 0.0
    samples = 0
    for r, g, b in _sampled_pixels(data):
        total += channel_saturation(r, g, b)
        samples += 1
    average = total / samples if samples else 0.0
    return _bucket(average, high=0.6, medium=0.3)


def analyze_contrast(data: bytes) -> Level:
    """Bucket the luminance range between the darkest and brightest samples."""
    darkest = 255.0
    brightest = 0.0
    for r, g, b in _sampled_pixels(data):
        value = luminance(r, g, b)
        darkest = min(darkest, value)
        brightest = max(brightest, value)
    return _bucket((brightest - darkest) / 255, high=0.7, medium=0.4)
