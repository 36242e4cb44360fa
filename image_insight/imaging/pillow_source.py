"""Pillow-backed pixel source."""

from __future__ import annotations

import io
import logging
from enum import Enum

from PIL import Image, UnidentifiedImageError

from .base import DEFAULT_MAX_DIMENSION, DecodeError, PixelBuffer, RenderError, working_size

logger = logging.getLogger(__name__)


class ResampleFilter(str, Enum):
    """Resampling filters available when shrinking to the working size."""

    NEAREST = "nearest"
    BOX = "box"
    BILINEAR = "bilinear"
    HAMMING = "hamming"
    BICUBIC = "bicubic"
    LANCZOS = "lanczos"

    def to_pillow(self) -> Image.Resampling:
        return Image.Resampling[self.name]


class PillowPixelSource:
    """Decode common raster formats and render them onto an RGBA surface."""

    def __init__(self, resample: ResampleFilter = ResampleFilter.BILINEAR) -> None:
        self.resample = ResampleFilter(resample)

    def load(self, data: bytes, *, max_dimension: int = DEFAULT_MAX_DIMENSION) -> PixelBuffer:
        try:
            with Image.open(io.BytesIO(data)) as image:
                # Force the full decode here so truncated files fail as decode errors.
                image.load()
                return self._render(image, max_dimension)
        except UnidentifiedImageError as exc:
            raise DecodeError("Input is not a recognised raster image.") from exc
        except Image.DecompressionBombError as exc:
            raise DecodeError(f"Refusing to decode oversized image: {exc}") from exc
        except (OSError, SyntaxError) as exc:
            raise DecodeError(f"Failed to decode image: {exc}") from exc

    def _render(self, image: Image.Image, max_dimension: int) -> PixelBuffer:
        original_width, original_height = image.size
        width, height = working_size(original_width, original_height, max_dimension)
        if width < 1 or height < 1:
            raise RenderError(
                f"Image of {original_width}x{original_height} collapses to "
                f"{width}x{height} at a {max_dimension}px bound."
            )

        logger.debug(
            "Rendering %sx%s %s image at %sx%s",
            original_width,
            original_height,
            image.mode,
            width,
            height,
        )
        try:
            rgba = image.convert("RGBA")
            if (width, height) != rgba.size:
                rgba = rgba.resize((width, height), resample=self.resample.to_pillow())
            # Composite onto a cleared surface: fully transparent pixels read back as zeros.
            surface = Image.new("RGBA", (width, height), (0, 0, 0, 0))
            surface.alpha_composite(rgba)
            pixels = surface.tobytes()
        except (ValueError, OSError, MemoryError) as exc:
            message = f"Could not extract pixel data from {image.mode} image: {exc}"
            raise RenderError(message) from exc

        return PixelBuffer(
            width=width,
            height=height,
            original_width=original_width,
            original_height=original_height,
            data=pixels,
        )
