"""Decoding and rasterization of input images."""

from .base import (
    DEFAULT_MAX_DIMENSION,
    AnalysisError,
    DecodeError,
    PixelBuffer,
    PixelSource,
    RenderError,
    working_size,
)
from .pillow_source import PillowPixelSource, ResampleFilter

__all__ = [
    "DEFAULT_MAX_DIMENSION",
    "AnalysisError",
    "DecodeError",
    "PillowPixelSource",
    "PixelBuffer",
    "PixelSource",
    "RenderError",
    "ResampleFilter",
    "working_size",
]
