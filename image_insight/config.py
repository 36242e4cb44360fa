"""Application-wide configuration models and persistence helpers."""

from __future__ import annotations

import json
from pathlib import Path
from typing import Any

import yaml
from pydantic import BaseModel, Field, ValidationError, model_validator

from .imaging.base import DEFAULT_MAX_DIMENSION
from .imaging.pillow_source import ResampleFilter

REPORT_EXTENSIONS = {"yaml", "yml", "json"}


class AppConfig(BaseModel):
    """Validates and stores runtime settings for the analyzer."""

    max_dimension: int = Field(
        default=DEFAULT_MAX_DIMENSION,
        ge=1,
        le=4096,
        description="Longest side, in pixels, of the buffer used for tonal statistics.",
    )
    resample: ResampleFilter = Field(
        default=ResampleFilter.BILINEAR,
        description="Filter used when shrinking images to the working size.",
    )
    recursive: bool = Field(
        default=True,
        description="If true, traverse sub-directories when processing folders.",
    )
    include_hidden: bool = Field(
        default=False,
        description="If true, include files and directories that start with a dot.",
    )
    max_concurrency: int = Field(
        default=4,
        ge=1,
        le=32,
        description="Number of worker threads used during batch processing.",
    )
    write_reports: bool = Field(
        default=False,
        description="Write an analysis report next to each processed image.",
    )
    report_extension: str = Field(
        default="yaml",
        description="File extension (and format) of analysis reports: yaml, yml or json.",
    )
    output_directory: Path | None = Field(
        default=None,
        description="Optional override directory for generated reports.",
    )

    @model_validator(mode="after")
    def _validate_report_extension(self) -> AppConfig:
        extension = self.report_extension.strip().lstrip(".").lower()
        if extension not in REPORT_EXTENSIONS:
            allowed = ", ".join(sorted(REPORT_EXTENSIONS))
            raise ValueError(f"Report extension must be one of: {allowed}.")
        self.report_extension = extension
        return self

    def as_dict(self) -> dict[str, Any]:
        """Serialize the configuration to primitive Python types."""
        payload = self.model_dump(mode="json")
        if self.output_directory is not None:
            payload["output_directory"] = str(self.output_directory)
        return payload

    @classmethod
    def load(cls, path: Path) -> AppConfig:
        """Load configuration from a YAML or JSON file."""
        data = _read_config_file(path)
        try:
            return cls.model_validate(data)
        except ValidationError as exc:
            raise ValueError(f"Invalid configuration file at {path}: {exc}") from exc

    def save(self, path: Path) -> None:
        """Persist configuration to a YAML or JSON file, chosen by suffix."""
        _write_config_file(path, self.as_dict())


def _read_config_file(path: Path) -> dict[str, Any]:
    if not path.exists():
        raise FileNotFoundError(path)

    text = path.read_text(encoding="utf-8")
    if path.suffix.lower() in {".yaml", ".yml"}:
        return yaml.safe_load(text) or {}
    return json.loads(text)


def _write_config_file(path: Path, data: dict[str, Any]) -> None:
    path.parent.mkdir(parents=True, exist_ok=True)
    if path.suffix.lower() in {".yaml", ".yml"}:
        text = yaml.safe_dump(data, allow_unicode=False, sort_keys=False)
    else:
        text = json.dumps(data, indent=2) + "\n"
    path.write_text(text, encoding="utf-8")
