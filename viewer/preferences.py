"""Theme preference - the only state the viewer keeps between runs."""

from __future__ import annotations

import json
import logging
from dataclasses import asdict, dataclass
from pathlib import Path

from .theme import DEFAULT_THEME, THEME_MODES

logger = logging.getLogger(__name__)


@dataclass
class Preferences:
    theme_mode: str = DEFAULT_THEME


class PreferencesStore:
    """Load / save Preferences to a JSON file."""

    def __init__(self, path: str | Path):
        self._path = Path(path)

    @property
    def path(self) -> Path:
        return self._path

    def load(self) -> Preferences:
        if not self._path.exists():
            return Preferences()
        try:
            raw = json.loads(self._path.read_text(encoding="utf-8"))
        except (OSError, json.JSONDecodeError) as exc:
            logger.warning("Failed to load preferences from %s: %s", self._path, exc)
            return Preferences()

        mode = raw.get("theme_mode", DEFAULT_THEME) if isinstance(raw, dict) else DEFAULT_THEME
        if mode not in THEME_MODES:
            logger.warning("Ignoring unknown theme mode %r", mode)
            mode = DEFAULT_THEME
        return Preferences(theme_mode=mode)

    def save(self, prefs: Preferences) -> None:
        if prefs.theme_mode not in THEME_MODES:
            raise ValueError(f"Unknown theme mode: {prefs.theme_mode!r}")
        self._path.parent.mkdir(parents=True, exist_ok=True)
        self._path.write_text(json.dumps(asdict(prefs), indent=2), encoding="utf-8")
        logger.debug("Saved preferences to %s", self._path)

    def set_theme(self, mode: str) -> Preferences:
        prefs = self.load()
        prefs.theme_mode = mode
        self.save(prefs)
        return prefs
