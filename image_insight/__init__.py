"""Top-level package for the Image Insight library."""

from .analysis.result import (
    AnalysisResult,
    ColorAnalysis,
    Composition,
    ImageStats,
    Level,
    PaletteType,
)
from .config import AppConfig
from .imaging.base import AnalysisError, DecodeError, RenderError
from .services.analyzer import AnalyzerResult, ImageAnalyzer, analyze_image
from .settings_store import SettingsStore

__all__ = [
    "AnalysisError",
    "AnalysisResult",
    "AnalyzerResult",
    "AppConfig",
    "ColorAnalysis",
    "Composition",
    "DecodeError",
    "ImageAnalyzer",
    "ImageStats",
    "Level",
    "PaletteType",
    "RenderError",
    "SettingsStore",
    "analyze_image",
]
