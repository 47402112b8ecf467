from __future__ import annotations

import logging
import os
from pathlib import Path
from typing import Any

import yaml

from kanahangul.domain.enums import Language

logger = logging.getLogger(__name__)

DEFAULT_LANGUAGE = Language.KO
DEFAULT_LOG_LEVEL = "WARNING"
_LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


class SettingsStore:
    """YAML-backed settings store.

    Responsibilities:
      - Load/save settings.yaml atomically
      - Provide typed helpers for the target language and log level

    settings.yaml structure:
      language: ko
      log_level: WARNING
    """

    def __init__(self, settings_path: str | Path | None = None) -> None:
        if settings_path is None:
            # <project_root>/settings.yaml, next to main.py
            project_root = Path(__file__).resolve().parents[2]
            self._path = project_root / "settings.yaml"
        else:
            self._path = Path(settings_path)

    @property
    def path(self) -> Path:
        return self._path

    def load(self) -> dict[str, Any]:
        p = self._path
        if not p.exists():
            return {}
        try:
            with p.open("r", encoding="utf-8") as f:
                data = yaml.safe_load(f) or {}
        except (OSError, UnicodeError, yaml.YAMLError) as e:
            logger.warning("Failed to read settings %s: %s", p, e)
            return {}
        return data if isinstance(data, dict) else {}

    def save(self, data: dict[str, Any]) -> None:
        p = self._path
        p.parent.mkdir(parents=True, exist_ok=True)
        tmp = p.with_suffix(p.suffix + ".tmp")
        with tmp.open("w", encoding="utf-8") as f:
            yaml.safe_dump(data or {}, f, allow_unicode=True, sort_keys=True)
        os.replace(str(tmp), str(p))

    def get_language(self) -> Language:
        value = self.load().get("language", DEFAULT_LANGUAGE.value)
        try:
            return Language.parse(value)
        except ValueError:
            logger.warning("Invalid language %r in %s; using %s", value, self._path, DEFAULT_LANGUAGE.value)
            return DEFAULT_LANGUAGE

    def set_language(self, lang: Language | str) -> None:
        s = self.load()
        s["language"] = Language.parse(lang).value
        self.save(s)

    def get_log_level(self) -> str:
        value = self.load().get("log_level", DEFAULT_LOG_LEVEL)
        if isinstance(value, str) and value.strip().upper() in _LOG_LEVELS:
            return value.strip().upper()
        return DEFAULT_LOG_LEVEL
