"""Error types raised by the playback engine and the roster loader."""

from __future__ import annotations


class StoryViewerError(Exception):
    """Base class for story viewer errors."""


class InvalidIndexError(StoryViewerError, IndexError):
    """Raised when a session would enter an out-of-bounds position."""

    def __init__(self, roster_index: int, item_index: int, message: str = ""):
        self.roster_index = roster_index
        self.item_index = item_index
        super().__init__(message or f"Invalid story position ({roster_index}, {item_index})")


class EmptyCollectionError(StoryViewerError, ValueError):
    """Raised when a story collection has no items to play."""


class SessionStateError(StoryViewerError):
    """Raised when an operation does not apply to the current session state."""


class RosterFormatError(StoryViewerError, ValueError):
    """Raised when roster data cannot be turned into story models."""
