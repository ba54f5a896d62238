"""Load listing endpoint settings from .env and config/listing.yaml."""
from __future__ import annotations

import os
from pathlib import Path
from typing import Any

import yaml
from dotenv import load_dotenv

from joblist.log import get_logger

log = get_logger(__name__)

load_dotenv()

CONFIG_DIR: Path = Path(__file__).resolve().parent.parent / "config"
SETTINGS_PATH: Path = CONFIG_DIR / "listing.yaml"

DEFAULT_TIMEOUT = 15.0

# settings key -> environment variable that overrides it
_ENV_KEYS: dict[str, str] = {
    "api_url": "JOBLIST_API_URL",
    "api_key": "JOBLIST_API_KEY",
    "timeout": "JOBLIST_TIMEOUT",
}


def get_env(key: str, default: str = "") -> str:
    return os.environ.get(key, default).strip()


def _load_yaml(path: Path) -> dict[str, Any]:
    if not path.exists():
        return {}
    with open(path, "r", encoding="utf-8") as f:
        data = yaml.safe_load(f) or {}
    if not isinstance(data, dict):
        log.warning("Ignoring %s: expected a mapping, got %s", path, type(data).__name__)
        return {}
    return data


def load_settings(path: Path | None = None) -> dict[str, Any]:
    """Merge YAML defaults with environment overrides (env wins)."""
    data = _load_yaml(path or SETTINGS_PATH)
    settings: dict[str, Any] = {
        "api_url": str(data.get("api_url") or ""),
        "api_key": str(data.get("api_key") or ""),
        "timeout": data.get("timeout", DEFAULT_TIMEOUT),
    }
    for key, env_name in _ENV_KEYS.items():
        value = get_env(env_name)
        if value:
            settings[key] = value

    try:
        settings["timeout"] = float(settings["timeout"])
    except (TypeError, ValueError):
        log.warning("Invalid timeout %r, using %.0fs", settings["timeout"], DEFAULT_TIMEOUT)
        settings["timeout"] = DEFAULT_TIMEOUT

    settings["api_url"] = settings["api_url"].rstrip("/")
    return settings
