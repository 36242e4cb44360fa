"""Interfaces for turning encoded image bytes into RGBA pixel buffers."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Protocol

from ..utils.numbers import round_half_up

DEFAULT_MAX_DIMENSION = 400


class AnalysisError(RuntimeError):
    """Base class for failures that prevent an image from being analyzed."""


class DecodeError(AnalysisError):
    """Raised when input bytes cannot be parsed as a raster image."""


class RenderError(AnalysisError):
    """Raised when a decoded image cannot be rasterized into RGBA pixels."""


@dataclass(frozen=True, slots=True)
class PixelBuffer:
    """Row-major RGBA pixels at the working size plus the original size."""

    width: int
    height: int
    original_width: int
    original_height: int
    data: bytes

    def __post_init__(self) -> None:
        expected = 4 * self.width * self.height
        if len(self.data) != expected:
            raise ValueError(
                f"RGBA buffer for {self.width}x{self.height} must hold {expected} bytes, "
                f"got {len(self.data)}."
            )

    @property
    def pixel_count(self) -> int:
        return self.width * self.height


class PixelSource(Protocol):
    """Capability that decodes bytes into a bounded RGBA buffer."""

    def load(self, data: bytes, *, max_dimension: int = DEFAULT_MAX_DIMENSION) -> PixelBuffer:
        """Decode ``data`` and render it at a size bounded by ``max_dimension``."""


def working_size(
    width: int, height: int, max_dimension: int = DEFAULT_MAX_DIMENSION
) -> tuple[int, int]:
    """Return the analysis size for an image of ``width`` x ``height``.

    The longer side is capped at ``max_dimension`` and the shorter side is
    scaled to match, rounded half-up. Images already within bounds keep
    their size.
    """
    if width > height and width > max_dimension:
        return max_dimension, round_half_up(height * max_dimension / width)
    if height > max_dimension:
        return round_half_up(width * max_dimension / height), max_dimension
    return width, height
