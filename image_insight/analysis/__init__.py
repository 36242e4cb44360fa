"""Statistical passes over RGBA pixel buffers."""

from .composition import classify_composition, image_stats
from .engine import analyze_pixels
from .palette import analyze_colors, classify_palette
from .result import AnalysisResult, ColorAnalysis, Composition, ImageStats, Level, PaletteType
from .tones import analyze_brightness, analyze_contrast, analyze_saturation

__all__ = [
    "AnalysisResult",
    "ColorAnalysis",
    "Composition",
    "ImageStats",
    "Level",
    "PaletteType",
    "analyze_brightness",
    "analyze_colors",
    "analyze_contrast",
    "analyze_pixels",
    "analyze_saturation",
    "classify_composition",
    "classify_palette",
    "image_stats",
]
