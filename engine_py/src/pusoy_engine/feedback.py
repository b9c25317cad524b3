"""
Feedback collaborator for sound and haptics.

Owned by the presentation layer and injected wherever events are
dispatched; the engine never holds one.
"""

import logging
from typing import Iterable

from .diff import EventType, GameEvent

logger = logging.getLogger(__name__)


class FeedbackListener:
    """One hook per discrete game event. Override what you need."""

    def on_card_played(self, event: GameEvent):
        pass

    def on_pass(self, event: GameEvent):
        pass

    def on_trick_cleared(self, event: GameEvent):
        pass

    def on_turn_changed(self, event: GameEvent):
        pass

    def on_game_won(self, event: GameEvent):
        pass

    def on_game_lost(self, event: GameEvent):
        pass


_HOOKS = {
    EventType.CARD_PLAYED: "on_card_played",
    EventType.PASS: "on_pass",
    EventType.TRICK_CLEARED: "on_trick_cleared",
    EventType.TURN_CHANGED: "on_turn_changed",
    EventType.GAME_WON: "on_game_won",
    EventType.GAME_LOST: "on_game_lost",
}


def dispatch_events(events: Iterable[GameEvent], listener: FeedbackListener) -> int:
    """Route each event to its hook; returns how many were dispatched."""
    count = 0
    for event in events:
        getattr(listener, _HOOKS[event.type])(event)
        count += 1
    logger.debug("Dispatched %d events to %s", count, type(listener).__name__)
    return count
