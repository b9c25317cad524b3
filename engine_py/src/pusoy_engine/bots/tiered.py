"""
Difficulty-tiered heuristic bot.
"""

import logging
import random
from collections import Counter
from typing import List, Optional, Sequence

from .base import BaseBot, BotAction
from ..comparator import highest_rank_value, lowest_card
from ..models import Card, Difficulty, Play
from ..rules import RuleConfig, default_rules
from ..validate import find_valid_plays

logger = logging.getLogger(__name__)

# Share of medium decisions that skip the lowest play
MEDIUM_MISPLAY_RATE = 0.2


def decide(
    hand: Sequence[Card],
    last_play: Optional[Play],
    rules: RuleConfig = default_rules,
    difficulty: Difficulty = Difficulty.MEDIUM,
    rng: Optional[random.Random] = None
) -> BotAction:
    """
    Pick a play or a pass for a hand.

    Args:
        hand: Cards the deciding seat holds
        last_play: Play to beat, or None when leading
        rules: Active rule configuration
        difficulty: Heuristic tier
        rng: Random source for the medium tier

    Returns:
        A BotAction whose cards always validate against last_play
    """
    # Leading: open with the lowest single whatever the tier
    if last_play is None:
        card = lowest_card(hand)
        return BotAction.play([card]) if card else BotAction.pass_turn()

    valid_plays = find_valid_plays(hand, last_play, rules)
    if not valid_plays:
        return BotAction.pass_turn()

    if difficulty == Difficulty.EASY:
        return BotAction.play(choose_easy(valid_plays))
    if difficulty == Difficulty.MEDIUM:
        return BotAction.play(choose_medium(valid_plays, rng or random.Random()))
    return BotAction.play(choose_hard(valid_plays, hand))


def choose_easy(valid_plays: List[List[Card]]) -> List[Card]:
    """First valid combination in enumeration order."""
    return valid_plays[0]


def choose_medium(valid_plays: List[List[Card]], rng: random.Random) -> List[Card]:
    """Usually the lowest play; sometimes a random other one."""
    ordered = sorted(valid_plays, key=highest_rank_value)
    if len(ordered) > 1 and rng.random() < MEDIUM_MISPLAY_RATE:
        return rng.choice(ordered[1:])
    return ordered[0]


def splits_group(play: Sequence[Card], counts: Counter) -> bool:
    """True if the play takes from a same-rank group bigger than itself."""
    return any(counts[card.rank] > len(play) for card in play)


def choose_hard(valid_plays: List[List[Card]], hand: Sequence[Card]) -> List[Card]:
    """
    Keep pairs, triples and quads intact when possible, then play low.
    """
    counts = Counter(card.rank for card in hand)
    preserving = [play for play in valid_plays if not splits_group(play, counts)]
    return min(preserving or valid_plays, key=highest_rank_value)


class TieredBot(BaseBot):
    """
    Heuristic bot with easy, medium and hard tiers.

    Strategy:
    - Lead with the lowest single
    - Easy: first legal response found
    - Medium: lowest response, with occasional deliberate misplays
    - Hard: lowest response that does not break up a same-rank group
    """

    def __init__(
        self,
        player_id: str,
        difficulty: Difficulty = Difficulty.MEDIUM,
        rng: Optional[random.Random] = None
    ):
        super().__init__(player_id)
        self.difficulty = difficulty
        self.rng = rng or random.Random()

    def choose_action(
        self,
        hand: Sequence[Card],
        last_play: Optional[Play],
        rules: RuleConfig = default_rules
    ) -> BotAction:
        action = decide(hand, last_play, rules, self.difficulty, self.rng)
        logger.debug("Bot %s (%s) chose %r", self.player_id, self.difficulty.value, action)
        return action
