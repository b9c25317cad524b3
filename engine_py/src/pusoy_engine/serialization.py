"""
State serialization and sanitization utilities.
"""

from typing import Any, Dict, List, Mapping, Optional, Sequence

import orjson

from .models import Card, GameState, Play, Player
from .rules import RuleConfig


def serialize_cards(cards: Sequence[Card]) -> List[str]:
    return [card.code for card in cards]


def serialize_play(play: Optional[Play]) -> Optional[Dict[str, Any]]:
    if play is None:
        return None
    return {
        "cards": serialize_cards(play.cards),
        "hand_type": play.hand_type.value,
        "player_id": play.player_id,
        "timestamp": play.timestamp,
    }


def serialize_player(player: Player) -> Dict[str, Any]:
    """Public player fields. The hand is only ever a count here."""
    return {
        "id": player.id,
        "name": player.name,
        "seat": player.seat,
        "is_ready": player.is_ready,
        "is_connected": player.is_connected,
        "is_bot": player.is_bot,
        "cards_remaining": player.cards_remaining,
        "is_current_turn": player.is_current_turn,
    }


def sanitize_state(
    state: GameState,
    hands: Optional[Mapping[int, Sequence[Card]]] = None,
    viewer_id: Optional[str] = None,
    rules: Optional[RuleConfig] = None
) -> Dict[str, Any]:
    """
    Sanitize game state for one seat.

    Args:
        state: Game state to sanitize
        hands: Per-seat hands owned by the match controller
        viewer_id: ID of the player viewing the state (to show their cards)
        rules: Rule configuration to include

    Returns:
        Dictionary safe for JSON encoding, holding only the viewer's hand
    """
    sanitized = {
        "id": state.id,
        "room_code": state.room_code,
        "phase": state.phase.value,
        "variant": state.variant.value,
        "turn_player": state.turn_player,
        "direction": state.direction,
        "pass_count": state.pass_count,
        "tricks_cleared": state.tricks_cleared,
        "current_trick": serialize_cards(state.current_trick),
        "last_play": serialize_play(state.last_play),
        "history_length": len(state.play_history),
        "winner": state.winner,
        "players": [serialize_player(player) for player in state.players],
        "rules": _serialize_rule_config(rules) if rules else None,
    }

    viewer = state.get_player(viewer_id) if viewer_id else None
    if viewer and hands is not None:
        sanitized["hand"] = serialize_cards(hands.get(viewer.seat, []))

    return sanitized


def _serialize_rule_config(rule_config: RuleConfig) -> Dict[str, Any]:
    """Serialize rule configuration."""
    data = rule_config.model_dump(mode="json")
    data["effective_turn_timeout"] = rule_config.effective_turn_timeout
    return data


def dumps_state(sanitized: Dict[str, Any]) -> bytes:
    """Encode a sanitized state as JSON bytes."""
    return orjson.dumps(sanitized)
