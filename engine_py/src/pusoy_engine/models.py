"""Game models and data structures"""

import time
import uuid
from dataclasses import dataclass, field
from enum import Enum
from typing import List, Optional, Tuple


class Suit(str, Enum):
    CLUBS = "clubs"
    SPADES = "spades"
    HEARTS = "hearts"
    DIAMONDS = "diamonds"

    @property
    def weight(self) -> int:
        """Tiebreak weight: clubs < spades < hearts < diamonds."""
        return _SUIT_WEIGHTS[self]

    @property
    def symbol(self) -> str:
        return _SUIT_SYMBOLS[self]

    @property
    def letter(self) -> str:
        return self.value[0].upper()


_SUIT_WEIGHTS = {Suit.CLUBS: 1, Suit.SPADES: 2, Suit.HEARTS: 3, Suit.DIAMONDS: 4}
_SUIT_SYMBOLS = {Suit.CLUBS: "♣", Suit.SPADES: "♠", Suit.HEARTS: "♥", Suit.DIAMONDS: "♦"}


class Rank(str, Enum):
    THREE = "3"
    FOUR = "4"
    FIVE = "5"
    SIX = "6"
    SEVEN = "7"
    EIGHT = "8"
    NINE = "9"
    TEN = "10"
    JACK = "J"
    QUEEN = "Q"
    KING = "K"
    ACE = "A"
    TWO = "2"

    @property
    def numeric_value(self) -> int:
        """Comparison value. Two is the highest rank (15), three the lowest."""
        return _RANK_VALUES[self]

    def beats(self, other: "Rank") -> bool:
        return self.numeric_value > other.numeric_value


_RANK_VALUES = {
    Rank.THREE: 3, Rank.FOUR: 4, Rank.FIVE: 5, Rank.SIX: 6, Rank.SEVEN: 7,
    Rank.EIGHT: 8, Rank.NINE: 9, Rank.TEN: 10, Rank.JACK: 11, Rank.QUEEN: 12,
    Rank.KING: 13, Rank.ACE: 14, Rank.TWO: 15,
}


class HandType(str, Enum):
    SINGLE = "single"
    PAIR = "pair"
    STRAIGHT = "straight"
    FLUSH = "flush"
    FULL_HOUSE = "full_house"
    FOUR_OF_A_KIND = "four_of_a_kind"
    STRAIGHT_FLUSH = "straight_flush"

    @property
    def card_count(self) -> int:
        return _HAND_CARD_COUNTS.get(self, 5)

    @property
    def strength(self) -> int:
        """Ordinal used only when five-card hands of different types meet."""
        return _HAND_STRENGTH[self]

    @property
    def display_name(self) -> str:
        return self.value.replace("_", " ").title()


_HAND_CARD_COUNTS = {HandType.SINGLE: 1, HandType.PAIR: 2}

_HAND_STRENGTH = {
    HandType.SINGLE: 0,
    HandType.PAIR: 0,
    HandType.STRAIGHT: 1,
    HandType.FLUSH: 2,
    HandType.FULL_HOUSE: 3,
    HandType.FOUR_OF_A_KIND: 4,
    HandType.STRAIGHT_FLUSH: 5,
}


class GamePhase(str, Enum):
    WAITING = "waiting"
    DEALING = "dealing"
    ACTIVE = "active"
    COMPLETED = "completed"
    ABANDONED = "abandoned"

    @property
    def is_terminal(self) -> bool:
        return self in (GamePhase.COMPLETED, GamePhase.ABANDONED)


class GameVariant(str, Enum):
    CLASSIC = "classic"
    NO_PASS = "no_pass"              # must play when a legal response exists
    REVERSE_ORDER = "reverse_order"  # direction flips after every trick
    SPEED_MODE = "speed_mode"        # short turn timer


class Difficulty(str, Enum):
    EASY = "easy"
    MEDIUM = "medium"
    HARD = "hard"


class TransitionKind(str, Enum):
    PLAY = "play"
    PASS = "pass"
    TRICK_CLEARED = "trick_cleared"


@dataclass(frozen=True)
class Card:
    suit: Suit
    rank: Rank

    @property
    def code(self) -> str:
        return f"{self.rank.value}{self.suit.letter}"

    @property
    def display_name(self) -> str:
        return f"{self.rank.value}{self.suit.symbol}"

    def sort_key(self) -> Tuple[int, int]:
        return self.rank.numeric_value, self.suit.weight

    def beats(self, other: "Card") -> bool:
        """Rank decides; equal ranks fall back to suit weight."""
        if self.rank != other.rank:
            return self.rank.beats(other.rank)
        return self.suit.weight > other.suit.weight

    def __lt__(self, other: "Card") -> bool:
        return self.sort_key() < other.sort_key()

    def __str__(self) -> str:
        return self.display_name


@dataclass(frozen=True)
class Play:
    cards: Tuple[Card, ...]
    hand_type: HandType
    player_id: str
    timestamp: float = field(default_factory=time.time)

    @property
    def size(self) -> int:
        return len(self.cards)

    @property
    def max_rank_value(self) -> int:
        return max(card.rank.numeric_value for card in self.cards)


@dataclass(frozen=True)
class Transition:
    """One applied transition, logged in the order it happened."""
    kind: TransitionKind
    player_id: Optional[str] = None
    play: Optional[Play] = None


_FIXED_PLAYER_FIELDS = ("id", "name", "seat")


@dataclass
class Player:
    id: str
    name: str
    seat: int
    is_ready: bool = False
    is_connected: bool = True
    is_bot: bool = False
    cards_remaining: int = 0
    is_current_turn: bool = False

    def __setattr__(self, name, value):
        # Identity and seat are fixed once the player exists
        if name in _FIXED_PLAYER_FIELDS and name in self.__dict__:
            raise AttributeError(f"Player.{name} cannot be changed")
        super().__setattr__(name, value)

    def set_ready(self, ready: bool) -> None:
        self.is_ready = ready

    def set_connected(self, connected: bool) -> None:
        self.is_connected = connected

    def update_cards_remaining(self, count: int) -> None:
        if count < 0:
            raise ValueError(f"cards_remaining cannot be negative ({count})")
        self.cards_remaining = count

    def set_current_turn(self, is_current: bool) -> None:
        self.is_current_turn = is_current


@dataclass
class GameState:
    room_code: str
    id: str = field(default_factory=lambda: str(uuid.uuid4()))
    players: List[Player] = field(default_factory=list)  # ordered by seat
    current_trick: List[Card] = field(default_factory=list)
    turn_player: int = 0
    pass_count: int = 0
    phase: GamePhase = GamePhase.WAITING
    variant: GameVariant = GameVariant.CLASSIC
    last_play: Optional[Play] = None
    play_history: List[Play] = field(default_factory=list)
    winner: Optional[str] = None
    direction: int = 1  # +1 clockwise, -1 after a reverse_order flip
    total_passes: int = 0
    tricks_cleared: int = 0
    transitions: List[Transition] = field(default_factory=list)
    created_at: float = field(default_factory=time.time)
    started_at: Optional[float] = None
    completed_at: Optional[float] = None

    @property
    def is_ready_to_start(self) -> bool:
        return len(self.players) == 4 and all(p.is_ready for p in self.players)

    @property
    def is_active(self) -> bool:
        return self.phase == GamePhase.ACTIVE

    @property
    def current_player(self) -> Optional[Player]:
        if self.turn_player < len(self.players):
            return self.players[self.turn_player]
        return None

    def get_player(self, player_id: str) -> Optional[Player]:
        return next((p for p in self.players if p.id == player_id), None)
