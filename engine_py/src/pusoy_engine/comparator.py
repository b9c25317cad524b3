"""
Outranking logic for cards and plays.
"""

from typing import Optional, Sequence

from .models import Card, HandType, Play
from .rules import RuleConfig, default_rules


def highest_rank_value(cards: Sequence[Card]) -> int:
    return max(card.rank.numeric_value for card in cards)


def highest_suit_weight(cards: Sequence[Card]) -> int:
    return max(card.suit.weight for card in cards)


def lowest_card(cards: Sequence[Card]) -> Optional[Card]:
    """Lowest card by rank value, suit weight breaking ties."""
    if not cards:
        return None
    return min(cards, key=Card.sort_key)


def compare_pairs(pair: Sequence[Card], other: Sequence[Card], rank_first: bool = False) -> bool:
    """
    Check if pair beats other.

    The baseline compares only the highest suit in each pair. With
    rank_first the pair rank is compared before falling back to suits.
    """
    if rank_first and pair[0].rank != other[0].rank:
        return pair[0].rank.beats(other[0].rank)
    return highest_suit_weight(pair) > highest_suit_weight(other)


def compare_five_card_hands(
    cards: Sequence[Card],
    hand_type: HandType,
    other_cards: Sequence[Card],
    other_type: HandType,
) -> bool:
    """Type ordinal first, then highest rank value. Suits are ignored."""
    if hand_type != other_type:
        return hand_type.strength > other_type.strength
    return highest_rank_value(cards) > highest_rank_value(other_cards)


def beats_play(
    cards: Sequence[Card],
    hand_type: HandType,
    last_play: Play,
    rules: RuleConfig = default_rules,
) -> bool:
    """
    Check if a classified set of cards outranks the last play.

    Args:
        cards: Cards being played
        hand_type: Their classified hand type
        last_play: The play to beat
        rules: Active rule configuration

    Returns:
        True if the cards beat last_play under the given rules
    """
    if hand_type != last_play.hand_type:
        cross_type = (
            rules.allow_cross_type_five_card
            and hand_type.card_count == 5
            and last_play.hand_type.card_count == 5
        )
        if not cross_type:
            return False

    if hand_type == HandType.SINGLE:
        return cards[0].beats(last_play.cards[0])
    if hand_type == HandType.PAIR:
        return compare_pairs(cards, last_play.cards, rules.pair_rank_first)
    return compare_five_card_hands(cards, hand_type, last_play.cards, last_play.hand_type)
