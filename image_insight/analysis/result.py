"""Immutable records describing the outcome of an image analysis."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Any


class Level(str, Enum):
    """Three-step bucket used for brightness, saturation and contrast."""

    HIGH = "high"
    MEDIUM = "medium"
    LOW = "low"


class PaletteType(str, Enum):
    """Overall temperature or character of the dominant palette."""

    WARM = "warm"
    COOL = "cool"
    VIBRANT = "vibrant"
    DARK = "dark"
    BALANCED = "balanced"


class Composition(str, Enum):
    """Shape category derived from the original image dimensions."""

    LANDSCAPE = "landscape"
    PORTRAIT = "portrait"
    SQUARE = "square"
    STANDARD = "standard"


@dataclass(frozen=True, slots=True)
class ColorAnalysis:
    """Dominant colors (most frequent first) and their palette type."""

    dominant_colors: tuple[str, ...]
    palette_type: PaletteType

    def as_dict(self) -> dict[str, Any]:
        return {
            "dominantColors": list(self.dominant_colors),
            "paletteType": self.palette_type.value,
        }


@dataclass(frozen=True, slots=True)
class ImageStats:
    """Original pixel dimensions of the analyzed image."""

    width: int
    height: int
    aspect_ratio: str

    def as_dict(self) -> dict[str, Any]:
        return {"width": self.width, "height": self.height, "aspectRatio": self.aspect_ratio}


@dataclass(frozen=True, slots=True)
class AnalysisResult:
    """Summary of color, tonal and shape characteristics of one image."""

    colors: ColorAnalysis
    brightness: Level
    saturation: Level
    contrast: Level
    composition: Composition
    stats: ImageStats
    timestamp: int

    def as_dict(self) -> dict[str, Any]:
        """Render the payload consumed by display and prompt surfaces.

        Keys follow the camelCase naming those surfaces expect; enum members
        are flattened to their string values.
        """
        return {
            "colors": self.colors.as_dict(),
            "brightness": self.brightness.value,
            "saturation": self.saturation.value,
            "contrast": self.contrast.value,
            "composition": self.composition.value,
            "stats": self.stats.as_dict(),
            "timestamp": self.timestamp,
        }
