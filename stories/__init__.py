"""Story data: items, per-user collections, and the roster snapshot."""

from .models import Roster, StoryCollection, StoryItem
from .roster import load_roster, sample_roster_path

__all__ = [
    "Roster",
    "StoryCollection",
    "StoryItem",
    "load_roster",
    "sample_roster_path",
]
