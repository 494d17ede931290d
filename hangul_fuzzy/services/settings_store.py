from __future__ import annotations

import logging
import os
from dataclasses import dataclass
from enum import Enum
from pathlib import Path
from typing import Any, Optional

import yaml

logger = logging.getLogger(__name__)

SETTINGS_ENV_VAR = "HANGUL_FUZZY_SETTINGS"

_LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


class SettingKey(Enum):
    CASE_SENSITIVE = "case_sensitive"
    MIN_SCORE = "min_score"
    LIMIT = "limit"
    LOG_LEVEL = "log_level"


@dataclass(frozen=True)
class MatchSettings:
    case_sensitive: bool = False
    min_score: float = 0.0
    limit: Optional[int] = None
    log_level: str = "WARNING"


class SettingsStore:
    """YAML-backed settings store.

    Responsibilities:
      - Load/save settings.yaml atomically
      - Provide typed MatchSettings for the CLI and search helpers

    Notes:
      - Malformed values never raise; they fall back to MatchSettings defaults.
    """

    def __init__(self, settings_path: str | None = None) -> None:
        if settings_path is None:
            env_path = (os.environ.get(SETTINGS_ENV_VAR) or "").strip()
            if env_path:
                self._path = Path(env_path)
            else:
                # <project_root>/settings.yaml
                project_root = Path(__file__).resolve().parents[2]
                self._path = project_root / "settings.yaml"
        else:
            self._path = Path(settings_path)

    @property
    def path(self) -> Path:
        return self._path

    def load(self) -> dict[str, Any]:
        try:
            p = self._path
            if not p.exists():
                return {}
            with p.open("r", encoding="utf-8") as f:
                data = yaml.safe_load(f) or {}
                return data if isinstance(data, dict) else {}
        except (OSError, yaml.YAMLError) as e:
            logger.warning("Failed to read settings %s: %s", self._path, e)
            return {}

    def save(self, data: dict[str, Any]) -> None:
        p = self._path
        p.parent.mkdir(parents=True, exist_ok=True)
        tmp = p.with_suffix(p.suffix + ".tmp")
        with tmp.open("w", encoding="utf-8") as f:
            yaml.safe_dump(data or {}, f, allow_unicode=True, sort_keys=True)
        os.replace(str(tmp), str(p))

    def get_match_settings(self) -> MatchSettings:
        s = self.load()
        defaults = MatchSettings()

        case_sensitive = s.get(SettingKey.CASE_SENSITIVE.value, defaults.case_sensitive)
        if not isinstance(case_sensitive, bool):
            logger.warning("Invalid case_sensitive %r; using default", case_sensitive)
            case_sensitive = defaults.case_sensitive

        min_score = s.get(SettingKey.MIN_SCORE.value, defaults.min_score)
        if isinstance(min_score, bool) or not isinstance(min_score, (int, float)) or not 0.0 <= min_score <= 1.0:
            logger.warning("Invalid min_score %r; using default", min_score)
            min_score = defaults.min_score

        limit = s.get(SettingKey.LIMIT.value, defaults.limit)
        if limit is not None and (isinstance(limit, bool) or not isinstance(limit, int) or limit < 0):
            logger.warning("Invalid limit %r; using default", limit)
            limit = defaults.limit

        log_level = str(s.get(SettingKey.LOG_LEVEL.value, defaults.log_level)).strip().upper()
        if log_level not in _LOG_LEVELS:
            logger.warning("Invalid log_level %r; using default", log_level)
            log_level = defaults.log_level

        return MatchSettings(
            case_sensitive=case_sensitive,
            min_score=float(min_score),
            limit=limit,
            log_level=log_level,
        )

    def set_value(self, key: SettingKey, value: Any) -> None:
        """Load, update a single key, and save (other keys are preserved)."""
        s = self.load()
        s[key.value] = value
        self.save(s)
