"""
Event derivation by diffing two game states.

The engine only produces new state; callers snapshot the state before a
transition (copy.deepcopy) and diff it against the result to drive
sound, haptics or animation. Every play, pass and trick clear is read
back from the state's transition log, so events keep their real order
however many transitions fall between the snapshots.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Any, Dict, List, Optional

from .models import GamePhase, GameState, Transition, TransitionKind


class EventType(str, Enum):
    CARD_PLAYED = "card_played"
    PASS = "pass"
    TRICK_CLEARED = "trick_cleared"
    TURN_CHANGED = "turn_changed"
    GAME_WON = "game_won"
    GAME_LOST = "game_lost"


@dataclass(frozen=True)
class GameEvent:
    type: EventType
    data: Dict[str, Any]


def _transition_event(transition: Transition) -> GameEvent:
    if transition.kind == TransitionKind.PLAY:
        play = transition.play
        return GameEvent(EventType.CARD_PLAYED, {
            "player_id": play.player_id,
            "hand_type": play.hand_type.value,
            "cards": [card.code for card in play.cards],
        })
    if transition.kind == TransitionKind.PASS:
        return GameEvent(EventType.PASS, {"player_id": transition.player_id})
    return GameEvent(EventType.TRICK_CLEARED, {})


def compute_events(
    old_state: Optional[GameState],
    new_state: GameState,
    viewer_id: Optional[str] = None
) -> List[GameEvent]:
    """
    Compute the discrete events between two states.

    Args:
        old_state: State before the transition (None for the first state)
        new_state: State after the transition
        viewer_id: Player the win/loss event is relative to

    Returns:
        Events in the order they happened, followed by either the win or
        loss event or a turn change for the final turn holder
    """
    if old_state is None:
        return []

    events = [
        _transition_event(transition)
        for transition in new_state.transitions[len(old_state.transitions):]
    ]

    if new_state.winner and new_state.winner != old_state.winner:
        won = viewer_id is None or viewer_id == new_state.winner
        events.append(GameEvent(
            EventType.GAME_WON if won else EventType.GAME_LOST,
            {"winner": new_state.winner},
        ))
    elif (
        new_state.phase == GamePhase.ACTIVE
        and new_state.turn_player != old_state.turn_player
    ):
        events.append(GameEvent(EventType.TURN_CHANGED, {"seat": new_state.turn_player}))

    return events
