"""Service layer for running analyses over bytes, files and folders."""

from .analyzer import AnalyzerResult, ImageAnalyzer, analyze_image

__all__ = ["AnalyzerResult", "ImageAnalyzer", "analyze_image"]
