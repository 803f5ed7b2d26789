from __future__ import annotations

import json
import logging
import os
from pathlib import Path
from typing import Any, Dict

from vegam.core.state import DEFAULT_DURATION, DURATIONS

logger = logging.getLogger(__name__)


def _settings_dir() -> Path:
    override = os.environ.get("VEGAM_HOME")
    if override:
        return Path(override)
    return Path.home() / ".vegam"


def _default_settings() -> Dict[str, Any]:
    return {"duration": DEFAULT_DURATION}


class SettingsStore:
    """Remembers the preferred test duration between launches.
    File: ~/.vegam/settings.json (or $VEGAM_HOME/settings.json)."""

    def __init__(self) -> None:
        self._file_path = _settings_dir() / "settings.json"
        self._file_path.parent.mkdir(parents=True, exist_ok=True)
        self._settings = self._load()

    @property
    def duration(self) -> int:
        return int(self._settings["duration"])

    def set_duration(self, duration: int) -> None:
        if duration not in DURATIONS:
            logger.warning("Not saving unsupported duration %r", duration)
            return
        if self._settings["duration"] == duration:
            return
        self._settings["duration"] = duration
        self._save()

    def reset(self) -> None:
        self._settings = _default_settings()
        self._save()

    def save(self) -> None:
        """Persist current settings to disk (e.g. on app exit)."""
        self._save()

    def _load(self) -> Dict[str, Any]:
        settings = _default_settings()
        if not self._file_path.exists():
            return settings
        try:
            payload = json.loads(self._file_path.read_text(encoding="utf-8"))
        except (json.JSONDecodeError, OSError) as e:
            logger.warning("Could not load settings from %s: %s", self._file_path, e)
            return settings

        if not isinstance(payload, dict):
            return settings
        duration = payload.get("duration")
        if duration in DURATIONS:
            settings["duration"] = int(duration)
        elif duration is not None:
            logger.warning("Ignoring stored duration %r", duration)
        return settings

    def _save(self) -> None:
        self._file_path.parent.mkdir(parents=True, exist_ok=True)
        try:
            self._file_path.write_text(json.dumps(self._settings, indent=2), encoding="utf-8")
        except OSError as e:
            logger.warning("Could not save settings to %s: %s", self._file_path, e)
