"""Navigation resolver - maps an intent and a position to the next position.

Pure functions only. The session controller applies the outcome; nothing
here touches timers or session state.

Forward and backward traversal are deliberately not symmetric: advancing
past the last item of the last user closes the session, while retreating
from the first item of the first user does nothing.
"""

from __future__ import annotations

from dataclasses import dataclass

# Outcome kinds
NEXT_ITEM = "next_item"
PREV_ITEM = "prev_item"
ADVANCE_USER = "advance_user"
RETREAT_USER = "retreat_user"
NEXT_USER = "next_user"
PREV_USER = "prev_user"
CLOSE = "close"
NOOP = "noop"

ADVANCE = "advance"
RETREAT = "retreat"


@dataclass(frozen=True)
class Outcome:
    """Result of resolving one navigation step."""

    kind: str
    index: int | None = None  # item index for *_ITEM, roster index for *_USER


def resolve_advance(item_index: int, item_count: int) -> Outcome:
    if item_index + 1 < item_count:
        return Outcome(NEXT_ITEM, item_index + 1)
    return Outcome(ADVANCE_USER)


def resolve_retreat(item_index: int) -> Outcome:
    if item_index - 1 >= 0:
        return Outcome(PREV_ITEM, item_index - 1)
    return Outcome(RETREAT_USER)


def resolve_user_advance(roster_index: int, roster_length: int) -> Outcome:
    if roster_index + 1 < roster_length:
        return Outcome(NEXT_USER, roster_index + 1)
    return Outcome(CLOSE)


def resolve_user_retreat(roster_index: int) -> Outcome:
    if roster_index - 1 >= 0:
        return Outcome(PREV_USER, roster_index - 1)
    return Outcome(NOOP)


def resolve_intent(
    roster_index: int,
    item_index: int,
    item_count: int,
    roster_length: int,
    intent: str,
) -> Outcome:
    """Resolve an ``advance`` or ``retreat`` intent down to its final outcome.

    Item-level outcomes are returned as-is. When the item step falls off the
    current collection, the user-level resolver decides; a new user always
    starts at item 0.
    """
    if intent == ADVANCE:
        step = resolve_advance(item_index, item_count)
        if step.kind == ADVANCE_USER:
            return resolve_user_advance(roster_index, roster_length)
        return step

    if intent == RETREAT:
        step = resolve_retreat(item_index)
        if step.kind == RETREAT_USER:
            return resolve_user_retreat(roster_index)
        return step

    raise ValueError(f"Not a navigation intent: {intent!r}")
