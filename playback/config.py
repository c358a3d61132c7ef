"""Configuration loading from settings.yaml and .env."""

from __future__ import annotations

import os
from pathlib import Path

import yaml
from dotenv import load_dotenv

_DEFAULTS = {
    "playback": {"tick_interval_ms": 50, "default_duration_ms": 5000},
    "roster": {"file": ""},
    "storage": {"preferences_file": "data/preferences.json", "log_file": ""},
}


def default_config_dir() -> Path:
    return Path(__file__).resolve().parent.parent / "config"


def load_config(
    config_dir: str | Path | None = None,
) -> dict:
    """Load settings.yaml and .env, return merged config dict."""
    if config_dir is None:
        config_dir = default_config_dir()
    config_dir = Path(config_dir)

    # Load .env (silently skip if missing)
    load_dotenv(config_dir / ".env")

    settings_path = config_dir / "settings.yaml"
    if not settings_path.exists():
        raise FileNotFoundError(f"Config not found: {settings_path}")

    with open(settings_path, encoding="utf-8") as f:
        loaded = yaml.safe_load(f) or {}

    cfg: dict = {}
    for section, defaults in _DEFAULTS.items():
        cfg[section] = {**defaults, **(loaded.get(section) or {})}
    for key, value in loaded.items():
        cfg.setdefault(key, value)

    cfg["_env"] = {
        "roster_file": os.getenv("STORY_VIEWER_ROSTER", ""),
        "theme": os.getenv("STORY_VIEWER_THEME", ""),
    }
    cfg["_config_dir"] = str(config_dir)

    return cfg


def roster_file(cfg: dict) -> str:
    """Roster path with the environment override applied."""
    return cfg.get("_env", {}).get("roster_file") or cfg.get("roster", {}).get("file", "")
