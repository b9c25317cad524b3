"""
Hand classification.
"""

from collections import Counter
from typing import List, Optional, Sequence

from .models import Card, HandType


def rank_counts(cards: Sequence[Card]) -> List[int]:
    """Sorted multiset of how often each rank appears."""
    return sorted(Counter(card.rank for card in cards).values())


def is_pair(cards: Sequence[Card]) -> bool:
    return len(cards) == 2 and cards[0].rank == cards[1].rank


def is_straight(cards: Sequence[Card]) -> bool:
    """
    Five consecutive rank values, no wraparound.

    Two is worth 15, so it can only end a run that starts at jack.
    """
    if len(cards) != 5:
        return False
    values = sorted(card.rank.numeric_value for card in cards)
    return all(b == a + 1 for a, b in zip(values, values[1:]))


def is_flush(cards: Sequence[Card]) -> bool:
    return len(cards) == 5 and len({card.suit for card in cards}) == 1


def is_full_house(cards: Sequence[Card]) -> bool:
    return len(cards) == 5 and rank_counts(cards) == [2, 3]


def is_four_of_a_kind(cards: Sequence[Card]) -> bool:
    return len(cards) == 5 and 4 in rank_counts(cards)


def is_straight_flush(cards: Sequence[Card]) -> bool:
    return is_straight(cards) and is_flush(cards)


_FIVE_CARD_CHECKS = [
    (HandType.STRAIGHT_FLUSH, is_straight_flush),
    (HandType.FOUR_OF_A_KIND, is_four_of_a_kind),
    (HandType.FULL_HOUSE, is_full_house),
    (HandType.FLUSH, is_flush),
    (HandType.STRAIGHT, is_straight),
]


def classify(cards: Sequence[Card]) -> Optional[HandType]:
    """
    Determine the hand type of a set of cards.

    Args:
        cards: Cards to classify (duplicates are rejected before this is called)

    Returns:
        The HandType, or None if the cards do not form a valid hand
    """
    count = len(cards)
    if count == 1:
        return HandType.SINGLE
    if count == 2:
        return HandType.PAIR if is_pair(cards) else None
    if count == 5:
        for hand_type, check in _FIVE_CARD_CHECKS:
            if check(cards):
                return hand_type
    return None
