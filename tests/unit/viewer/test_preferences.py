"""Tests for the persisted theme preference."""

from pathlib import Path

import pytest

from viewer.preferences import Preferences, PreferencesStore
from viewer.theme import palette


def test_defaults_to_light_when_missing(tmp_path: Path):
    store = PreferencesStore(tmp_path / "prefs.json")
    assert store.load().theme_mode == "light"


def test_set_theme_persists(tmp_path: Path):
    store = PreferencesStore(tmp_path / "nested" / "prefs.json")
    store.set_theme("solarized")
    assert PreferencesStore(store.path).load().theme_mode == "solarized"


def test_unknown_saved_mode_is_ignored(tmp_path: Path):
    path = tmp_path / "prefs.json"
    path.write_text('{"theme_mode": "neon"}', encoding="utf-8")
    assert PreferencesStore(path).load().theme_mode == "light"


def test_corrupt_file_falls_back_to_default(tmp_path: Path):
    path = tmp_path / "prefs.json"
    path.write_text("{not json", encoding="utf-8")
    assert PreferencesStore(path).load() == Preferences()


def test_save_rejects_unknown_mode(tmp_path: Path):
    with pytest.raises(ValueError):
        PreferencesStore(tmp_path / "prefs.json").save(Preferences(theme_mode="neon"))


def test_palette_falls_back_to_light():
    assert palette("neon") == palette("light")
    assert palette("dark") != palette("light")
