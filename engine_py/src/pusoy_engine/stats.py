"""
End-of-match statistics.
"""

import time
from dataclasses import dataclass, field
from typing import Dict

from . import errors
from .models import GamePhase, GameState


@dataclass(frozen=True)
class GameStats:
    game_id: str
    duration: float
    total_plays: int
    total_passes: int
    tricks_cleared: int
    winner: str
    final_scores: Dict[str, int]  # player id -> cards left
    created_at: float = field(default_factory=time.time)


def compute_game_stats(state: GameState) -> GameStats:
    """
    Summarize a completed match.

    Raises:
        GameError: ACTION_NOT_ALLOWED if the match has not completed
    """
    if state.phase != GamePhase.COMPLETED or state.winner is None:
        errors.raise_error(errors.ACTION_NOT_ALLOWED, "Stats are only available for completed games")

    started = state.started_at or state.created_at
    return GameStats(
        game_id=state.id,
        duration=max(0.0, (state.completed_at or started) - started),
        total_plays=len(state.play_history),
        total_passes=state.total_passes,
        tricks_cleared=state.tricks_cleared,
        winner=state.winner,
        final_scores={p.id: p.cards_remaining for p in state.players},
    )
