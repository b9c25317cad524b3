"""Game constants and utilities"""

from typing import List

from .models import Card, Rank, Suit

NUM_PLAYERS = 4
HAND_SIZE = 13
DECK_SIZE = NUM_PLAYERS * HAND_SIZE
PASSES_TO_CLEAR = NUM_PLAYERS - 1

# Holder of this card leads the first trick
OPENING_CARD = Card(Suit.CLUBS, Rank.THREE)

ROOM_CODE_LENGTH = 6
ROOM_CODE_ALPHABET = "ABCDEFGHIJKLMNOPQRSTUVWXYZ0123456789"

SPEED_MODE_TIMEOUT = 10

_SUITS_BY_LETTER = {suit.letter: suit for suit in Suit}
_RANKS_BY_VALUE = {rank.value: rank for rank in Rank}


def create_deck() -> List[Card]:
    """All 52 cards, suit by suit."""
    return [Card(suit, rank) for suit in Suit for rank in Rank]


def parse_card(card_id: str) -> Card:
    """Parse a card code such as "3C", "10D" or "AS"."""
    code = card_id.strip().upper()
    rank = _RANKS_BY_VALUE.get(code[:-1])
    suit = _SUITS_BY_LETTER.get(code[-1:])
    if rank is None or suit is None:
        raise ValueError(f"Invalid card ID format: {card_id}")
    return Card(suit, rank)


def parse_cards(card_ids: List[str]) -> List[Card]:
    return [parse_card(card_id) for card_id in card_ids]


def format_cards(cards) -> str:
    return ", ".join(card.display_name for card in cards)
