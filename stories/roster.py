"""Roster provider - reads story collections from a YAML file."""

from __future__ import annotations

import logging
from pathlib import Path

import yaml

from playback.errors import RosterFormatError

from .models import Roster

logger = logging.getLogger(__name__)


def sample_roster_path() -> Path:
    """Path of the bundled sample roster."""
    return Path(__file__).resolve().parent.parent / "config" / "roster.yaml"


def load_roster(path: str | Path | None = None) -> Roster:
    """Load a roster snapshot; defaults to the bundled sample."""
    roster_path = Path(path) if path else sample_roster_path()
    if not roster_path.exists():
        raise FileNotFoundError(f"Roster not found: {roster_path}")

    with open(roster_path, encoding="utf-8") as f:
        try:
            raw = yaml.safe_load(f)
        except yaml.YAMLError as exc:
            raise RosterFormatError(f"Could not parse {roster_path}: {exc}") from exc

    # Accept both a bare list and {"collections": [...]}
    if isinstance(raw, dict):
        raw = raw.get("collections", raw.get("stories"))
    if not isinstance(raw, list):
        raise RosterFormatError(f"{roster_path} does not contain a list of story collections")

    roster = Roster.from_list(raw)
    logger.debug("Loaded %d story collections from %s", len(roster), roster_path)
    return roster
