"""
Base bot interface and utilities.
"""

from abc import ABC, abstractmethod
from typing import List, Optional, Sequence

from ..models import Card, GameState, Play
from ..rules import RuleConfig, default_rules
from ..validate import find_valid_plays


class BotAction:
    """Represents a bot action."""

    def __init__(self, action_type: str, cards: Optional[List[Card]] = None):
        self.type = action_type
        self.cards = cards or []

    @classmethod
    def play(cls, cards: Sequence[Card]) -> 'BotAction':
        """Create a play action."""
        return cls('play', cards=list(cards))

    @classmethod
    def pass_turn(cls) -> 'BotAction':
        """Create a pass action."""
        return cls('pass')

    @property
    def is_pass(self) -> bool:
        return self.type == 'pass'

    def __eq__(self, other) -> bool:
        if not isinstance(other, BotAction):
            return NotImplemented
        return self.type == other.type and self.cards == other.cards

    def __repr__(self) -> str:
        if self.is_pass:
            return "BotAction(pass)"
        return f"BotAction(play {[card.code for card in self.cards]})"


class BaseBot(ABC):
    """Abstract base class for bot players."""

    def __init__(self, player_id: str):
        self.player_id = player_id

    @abstractmethod
    def choose_action(
        self,
        hand: Sequence[Card],
        last_play: Optional[Play],
        rules: RuleConfig = default_rules
    ) -> BotAction:
        """
        Choose an action for the bot's own hand.

        Args:
            hand: This bot's cards (never another seat's)
            last_play: Play to beat, or None when leading
            rules: Active rule configuration

        Returns:
            BotAction to take
        """
        pass

    def is_my_turn(self, state: GameState) -> bool:
        """Check if it's this bot's turn."""
        current = state.current_player
        return current is not None and current.id == self.player_id

    def get_valid_plays(
        self,
        hand: Sequence[Card],
        last_play: Play,
        rules: RuleConfig = default_rules
    ) -> List[List[Card]]:
        """All combinations from hand that beat last_play."""
        return find_valid_plays(hand, last_play, rules)
