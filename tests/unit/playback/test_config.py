"""Tests for configuration loading."""

import os
from pathlib import Path

import pytest

from playback.config import default_config_dir, load_config, roster_file


def test_bundled_settings_load():
    cfg = load_config(default_config_dir())
    assert cfg["playback"]["tick_interval_ms"] == 50
    assert cfg["playback"]["default_duration_ms"] == 5000


def test_defaults_fill_missing_sections(tmp_path: Path, monkeypatch):
    monkeypatch.delenv("STORY_VIEWER_ROSTER", raising=False)
    (tmp_path / "settings.yaml").write_text("playback:\n  tick_interval_ms: 20\n", encoding="utf-8")
    cfg = load_config(tmp_path)
    assert cfg["playback"] == {"tick_interval_ms": 20, "default_duration_ms": 5000}
    assert cfg["storage"]["preferences_file"] == "data/preferences.json"
    assert roster_file(cfg) == ""


def test_env_file_overrides_roster(tmp_path: Path, monkeypatch):
    monkeypatch.delenv("STORY_VIEWER_ROSTER", raising=False)
    monkeypatch.delenv("STORY_VIEWER_THEME", raising=False)
    (tmp_path / "settings.yaml").write_text("roster:\n  file: from_settings.yaml\n", encoding="utf-8")
    (tmp_path / ".env").write_text("STORY_VIEWER_ROSTER=from_env.yaml\nSTORY_VIEWER_THEME=dark\n", encoding="utf-8")
    try:
        cfg = load_config(tmp_path)
    finally:
        os.environ.pop("STORY_VIEWER_ROSTER", None)
        os.environ.pop("STORY_VIEWER_THEME", None)
    assert roster_file(cfg) == "from_env.yaml"
    assert cfg["_env"]["theme"] == "dark"


def test_missing_settings(tmp_path: Path):
    with pytest.raises(FileNotFoundError):
        load_config(tmp_path)
