"""Utility helpers for the Image Insight library."""

from .numbers import format_fixed, round_half_up
from .paths import resolve_image_paths

__all__ = ["format_fixed", "resolve_image_paths", "round_half_up"]
