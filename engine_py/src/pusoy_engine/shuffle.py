"""
Card shuffling and dealing utilities.
"""

import logging
import random
from typing import Dict, List, Optional, Sequence

from . import errors
from .constants import DECK_SIZE, HAND_SIZE, NUM_PLAYERS, OPENING_CARD, create_deck
from .models import Card

logger = logging.getLogger(__name__)


def shuffle_deck(deck: Sequence[Card], rng: Optional[random.Random] = None) -> List[Card]:
    """
    Shuffle a deck with an injectable random source.

    Args:
        deck: Cards to shuffle
        rng: Random source; pass a seeded random.Random for determinism

    Returns:
        Shuffled copy of the deck
    """
    deck_copy = list(deck)
    (rng or random).shuffle(deck_copy)
    return deck_copy


def deal_cards(deck: Sequence[Card]) -> List[List[Card]]:
    """
    Deal round-robin, one card per seat in seat order, 13 rounds.

    Args:
        deck: Shuffled 52-card deck

    Returns:
        Four hands of 13 cards, indexed by seat
    """
    if len(deck) != DECK_SIZE:
        errors.raise_error(
            errors.INTERNAL_ERROR,
            f"Cannot deal {len(deck)} cards, expected {DECK_SIZE}"
        )

    hands: List[List[Card]] = [[] for _ in range(NUM_PLAYERS)]
    for i, card in enumerate(deck):
        hands[i % NUM_PLAYERS].append(card)
    return hands


def find_opening_seat(hands: Sequence[Sequence[Card]], opening_card: Card = OPENING_CARD) -> int:
    """
    Find the seat holding the opening card (three of clubs).

    Falls back to seat 0 when no hand has it.
    """
    for seat, hand in enumerate(hands):
        if opening_card in hand:
            return seat

    logger.warning("No hand holds %s, seat 0 opens", opening_card.display_name)
    return 0


def validate_deck_integrity(hands: Sequence[Sequence[Card]]) -> bool:
    """
    Validate that all 52 cards are dealt once each into 13-card hands.
    """
    all_cards = [card for hand in hands for card in hand]
    return (
        len(hands) == NUM_PLAYERS
        and all(len(hand) == HAND_SIZE for hand in hands)
        and len(all_cards) == len(set(all_cards))
        and set(all_cards) == set(create_deck())
    )


def setup_hands(rng: Optional[random.Random] = None) -> Dict[int, List[Card]]:
    """
    Shuffle a fresh deck and deal it, keyed by seat with each hand sorted.

    Raises:
        GameError: INTERNAL_ERROR if the deal loses or duplicates a card
    """
    hands = deal_cards(shuffle_deck(create_deck(), rng))
    if not validate_deck_integrity(hands):
        errors.raise_error(errors.INTERNAL_ERROR, "Dealt hands do not form a complete deck")
    return {seat: sort_hand(hand) for seat, hand in enumerate(hands)}


def sort_hand(hand: Sequence[Card]) -> List[Card]:
    """Sort by rank value, then suit weight."""
    return sorted(hand, key=Card.sort_key)
