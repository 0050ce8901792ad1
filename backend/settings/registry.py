from __future__ import annotations

import logging
import os
from functools import lru_cache
from pathlib import Path

import yaml

from settings.types import AppSettings

logger = logging.getLogger(__name__)


def _repo_root() -> Path:
    # .../quadkey-picker/backend/settings/registry.py -> repo root is 2 levels up
    return Path(__file__).resolve().parents[2]


def settings_path() -> Path:
    return Path(
        os.getenv("QUADKEY_SETTINGS_PATH")
        or (_repo_root() / "config" / "settings.yaml")
    )


def _load_yaml(path: Path) -> dict:
    raw = path.read_text(encoding="utf-8")
    data = yaml.safe_load(raw) or {}
    if not isinstance(data, dict):
        raise ValueError(f"Invalid settings yaml root: {path}")
    return data


@lru_cache(maxsize=1)
def get_settings() -> AppSettings:
    path = settings_path()
    if path.exists():
        data = _load_yaml(path)
        logger.info("loaded settings from %s", path)
    else:
        data = {}
        logger.info("no settings file at %s, using defaults", path)

    level = (os.getenv("QUADKEY_LOG_LEVEL") or "").strip()
    if level:
        data["logLevel"] = level
    return AppSettings.model_validate(data)


def clear_settings_cache() -> None:
    """
    Drop the cached settings so the next get_settings() re-reads the file and env.
    """
    get_settings.cache_clear()
