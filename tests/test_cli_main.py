"""Tests for the CLI entry point."""

from __future__ import annotations

import json
from pathlib import Path
from types import SimpleNamespace

import pytest
from PIL import Image

from image_insight.__main__ import main as cli_main
from image_insight.config import AppConfig
from image_insight.settings_store import SettingsStore


def test_cli_requires_input():
    with pytest.raises(SystemExit):
        cli_main([])


def test_cli_reports_missing_input(monkeypatch, tmp_path):
    monkeypatch.setattr(
        "image_insight.__main__.SettingsStore",
        lambda: SettingsStore(path=tmp_path / "settings.yaml"),
    )

    with pytest.raises(SystemExit):
        cli_main(["--input", str(tmp_path / "nope")])


def test_cli_rejects_invalid_override(monkeypatch, tmp_path):
    monkeypatch.setattr(
        "image_insight.__main__.SettingsStore",
        lambda: SettingsStore(path=tmp_path / "settings.yaml"),
    )

    with pytest.raises(SystemExit):
        cli_main(["--input", str(tmp_path), "--max-dimension", "0"])


def test_cli_applies_overrides(monkeypatch, tmp_path, capsys):
    captured = {}

    class DummyStore:
        def load(self) -> AppConfig:
            return AppConfig()

    class DummyAnalyzer:
        def __init__(self, config: AppConfig) -> None:
            captured["config"] = config

        def analyze_target(self, path: Path):
            return [
                SimpleNamespace(
                    image_path=path,
                    analysis=None,
                    report_path=None,
                    error_message="Input is not a recognised raster image.",
                )
            ]

    monkeypatch.setattr("image_insight.__main__.SettingsStore", DummyStore)
    monkeypatch.setattr("image_insight.__main__.ImageAnalyzer", DummyAnalyzer)

    cli_main(
        [
            "--input",
            str(tmp_path / "image.jpg"),
            "--max-dimension",
            "128",
            "--resample",
            "nearest",
            "--write-reports",
            "--report-format",
            "json",
        ]
    )

    config = captured["config"]
    assert config.max_dimension == 128
    assert config.resample.value == "nearest"
    assert config.write_reports is True
    assert config.report_extension == "json"
    payload = json.loads(capsys.readouterr().out)
    assert payload == [
        {
            "path": str(tmp_path / "image.jpg"),
            "analysis": None,
            "report_path": None,
            "error": "Input is not a recognised raster image.",
        }
    ]


def test_cli_analyzes_directory(monkeypatch, tmp_path, capsys):
    images = tmp_path / "images"
    images.mkdir()
    Image.new("RGB", (800, 400), color=(255, 0, 0)).save(images / "red.png")
    monkeypatch.setattr(
        "image_insight.__main__.SettingsStore",
        lambda: SettingsStore(path=tmp_path / "settings.yaml"),
    )

    cli_main(["--input", str(images), "--write-reports"])

    payload = json.loads(capsys.readouterr().out)
    assert len(payload) == 1
    entry = payload[0]
    assert entry["error"] is None
    assert entry["report_path"] == str(images / "red.yaml")
    assert entry["analysis"]["composition"] == "landscape"
    assert entry["analysis"]["colors"]["dominantColors"] == ["#E00000"]
    assert entry["analysis"]["stats"] == {"width": 800, "height": 400, "aspectRatio": "2.00"}


def test_cli_reports_colliding_report_names(monkeypatch, tmp_path, capsys):
    class CollidingAnalyzer:
        def __init__(self, config: AppConfig) -> None:
            pass

        def analyze_target(self, path: Path):
            raise ValueError("Reports would overwrite each other: out/img.yaml")

    monkeypatch.setattr(
        "image_insight.__main__.SettingsStore",
        lambda: SettingsStore(path=tmp_path / "settings.yaml"),
    )
    monkeypatch.setattr("image_insight.__main__.ImageAnalyzer", CollidingAnalyzer)

    with pytest.raises(SystemExit):
        cli_main(["--input", str(tmp_path)])

    assert "Reports would overwrite each other" in capsys.readouterr().err
