"""Tests for AppConfig validation and persistence."""

from __future__ import annotations

import json

import pytest
from image_insight.config import AppConfig
from image_insight.imaging.pillow_source import ResampleFilter


def test_defaults_match_analysis_bounds():
    config = AppConfig()
    assert config.max_dimension == 400
    assert config.resample is ResampleFilter.BILINEAR
    assert config.report_extension == "yaml"


def test_report_extension_is_normalised():
    config = AppConfig(report_extension=".JSON")
    assert config.report_extension == "json"


def test_report_extension_rejects_unknown_formats():
    with pytest.raises(ValueError):
        AppConfig(report_extension="txt")


def test_max_dimension_must_be_positive():
    with pytest.raises(ValueError):
        AppConfig(max_dimension=0)


def test_resample_accepts_plain_strings():
    config = AppConfig(resample="lanczos")
    assert config.resample is ResampleFilter.LANCZOS


def test_load_and_save_round_trip(tmp_path):
    path = tmp_path / "config.yaml"
    original = AppConfig(
        max_dimension=256,
        resample=ResampleFilter.NEAREST,
        report_extension="json",
        output_directory=tmp_path / "out",
    )
    original.save(path)

    loaded = AppConfig.load(path)
    assert loaded.max_dimension == 256
    assert loaded.resample is ResampleFilter.NEAREST
    assert loaded.report_extension == "json"
    assert loaded.output_directory == tmp_path / "out"


def test_json_round_trip(tmp_path):
    path = tmp_path / "config.json"
    AppConfig(write_reports=True).save(path)

    assert json.loads(path.read_text(encoding="utf-8"))["write_reports"] is True
    assert AppConfig.load(path).write_reports is True


def test_load_rejects_invalid_file(tmp_path):
    path = tmp_path / "config.json"
    path.write_text(json.dumps({"max_concurrency": -1}), encoding="utf-8")

    with pytest.raises(ValueError):
        AppConfig.load(path)


def test_load_missing_file(tmp_path):
    with pytest.raises(FileNotFoundError):
        AppConfig.load(tmp_path / "missing.yaml")
