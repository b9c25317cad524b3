"""Rules engine, turn state machine and bots for Pusoy Dos."""

from .engine import PusoyEngine
from .errors import GameError
from .models import Card, Difficulty, GamePhase, GameState, GameVariant, HandType, Play, Player, Rank, Suit
from .rules import RuleConfig, create_rules, default_rules

__all__ = [
    "Card", "Difficulty", "GameError", "GamePhase", "GameState", "GameVariant",
    "HandType", "Play", "Player", "PusoyEngine", "Rank", "RuleConfig", "Suit",
    "create_rules", "default_rules",
]
