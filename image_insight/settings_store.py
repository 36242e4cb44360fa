"""Where the analyzer keeps its per-user defaults, and how they are read back."""

from __future__ import annotations

import logging
import os
from pathlib import Path

import yaml

from .config import AppConfig

logger = logging.getLogger(__name__)

APP_DIRECTORY = "image_insight"
SETTINGS_ENV_VAR = "IMAGE_INSIGHT_SETTINGS"


class SettingsStore:
    """Analyzer defaults (bound, resample filter, report options) kept between runs.

    A missing or damaged settings file never stops an analysis run: ``load``
    falls back to :class:`AppConfig` defaults and says why in the log.
    """

    def __init__(self, path: Path | None = None) -> None:
        self._path = path or default_settings_path()

    @property
    def path(self) -> Path:
        return self._path

    def load(self) -> AppConfig:
        if not self._path.exists():
            logger.debug("No settings at %s; using defaults.", self._path)
            return AppConfig()
        try:
            return AppConfig.load(self._path)
        except (OSError, ValueError, yaml.YAMLError) as exc:
            logger.warning("Ignoring unreadable settings at %s: %s", self._path, exc)
            return AppConfig()

    def save(self, config: AppConfig) -> None:
        config.save(self._path)
        logger.info("Saved analyzer settings to %s", self._path)


def default_settings_path() -> Path:
    """``$IMAGE_INSIGHT_SETTINGS`` if set, else ``settings.yaml`` in the user config folder."""
    override = os.getenv(SETTINGS_ENV_VAR)
    if override:
        return Path(override).expanduser()
    if os.name == "nt":
        base = Path(os.getenv("APPDATA", Path.home() / "AppData" / "Roaming"))
    else:
        base = Path(os.getenv("XDG_CONFIG_HOME", Path.home() / ".config"))
    return base.expanduser() / APP_DIRECTORY / "settings.yaml"
