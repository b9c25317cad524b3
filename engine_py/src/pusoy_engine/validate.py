"""
Play validation.
"""

from itertools import combinations
from typing import Iterator, List, Optional, Sequence

from . import errors
from .comparator import beats_play
from .hands import classify
from .models import Card, GamePhase, GameState, HandType, Play
from .rules import RuleConfig, default_rules


class ValidationResult:
    """Result of play validation."""

    def __init__(
        self,
        valid: bool,
        error_code: Optional[str] = None,
        error_message: Optional[str] = None,
        hand_type: Optional[HandType] = None
    ):
        self.valid = valid
        self.error_code = error_code
        self.error_message = error_message
        self.hand_type = hand_type

    @classmethod
    def success(cls, hand_type: Optional[HandType] = None) -> 'ValidationResult':
        """Create a successful validation result."""
        return cls(valid=True, hand_type=hand_type)

    @classmethod
    def error(cls, error_code: str, error_message: str) -> 'ValidationResult':
        """Create an error validation result."""
        return cls(valid=False, error_code=error_code, error_message=error_message)

    def raise_for_error(self) -> None:
        if not self.valid:
            errors.raise_error(self.error_code, self.error_message)

    def __repr__(self) -> str:
        if self.valid:
            return f"ValidationResult(valid, {self.hand_type})"
        return f"ValidationResult({self.error_code}: {self.error_message})"


def validate_ownership(hand: Sequence[Card], cards: Sequence[Card]) -> bool:
    """Check if every card is in the hand."""
    return all(card in hand for card in cards)


def validate_cards(
    cards: Sequence[Card],
    last_play: Optional[Play] = None,
    rules: RuleConfig = default_rules
) -> ValidationResult:
    """
    Validate a set of cards against the last play of the trick.

    Checks run in a fixed order and the first failure is reported.

    Args:
        cards: Cards being played
        last_play: Play to beat, or None when leading a trick
        rules: Active rule configuration

    Returns:
        ValidationResult carrying the hand type when valid
    """
    if not cards:
        return ValidationResult.error(errors.NO_CARDS, "No cards selected")

    if len(set(cards)) != len(cards):
        return ValidationResult.error(errors.DUPLICATE_CARDS, "Duplicate cards selected")

    hand_type = classify(cards)
    if hand_type is None:
        return ValidationResult.error(errors.INVALID_COMBINATION, "Invalid card combination")

    if hand_type.card_count != len(cards):
        return ValidationResult.error(
            errors.WRONG_CARD_COUNT,
            f"Incorrect number of cards for {hand_type.display_name}"
        )

    # Leading a trick: any valid hand
    if last_play is None:
        return ValidationResult.success(hand_type)

    if hand_type != last_play.hand_type and not beats_play(cards, hand_type, last_play, rules):
        return ValidationResult.error(
            errors.HAND_TYPE_MISMATCH,
            f"This play doesn't beat the last play (expected {last_play.hand_type.display_name})"
        )

    if not beats_play(cards, hand_type, last_play, rules):
        return ValidationResult.error(
            errors.DOES_NOT_BEAT,
            "This play doesn't beat the last play"
        )

    return ValidationResult.success(hand_type)


def _validate_turn(state: GameState, player_id: str) -> Optional[ValidationResult]:
    if state.phase != GamePhase.ACTIVE:
        return ValidationResult.error(
            errors.GAME_NOT_ACTIVE,
            f"Game is not active (current: {state.phase.value})"
        )

    player = state.get_player(player_id)
    if not player:
        return ValidationResult.error(errors.PLAYER_NOT_FOUND, "Player not found")

    if player.seat != state.turn_player:
        return ValidationResult.error(
            errors.NOT_YOUR_TURN,
            f"It's not your turn (current turn: seat {state.turn_player})"
        )
    return None


def validate_play(
    state: GameState,
    player_id: str,
    cards: Sequence[Card],
    rules: RuleConfig = default_rules
) -> ValidationResult:
    """
    Validate a play attempt: phase, turn, then the cards themselves.

    Args:
        state: Current game state
        player_id: ID of player attempting the play
        cards: Cards being played

    Returns:
        ValidationResult with validation outcome
    """
    turn_error = _validate_turn(state, player_id)
    if turn_error:
        return turn_error
    return validate_cards(cards, state.last_play, rules)


def iter_valid_plays(
    hand: Sequence[Card],
    last_play: Play,
    rules: RuleConfig = default_rules
) -> Iterator[List[Card]]:
    """
    Yield every combination from hand that beats last_play.

    Combinations come out in itertools order, which follows hand order.
    """
    for combo in combinations(hand, last_play.size):
        if validate_cards(combo, last_play, rules).valid:
            yield list(combo)


def find_valid_plays(
    hand: Sequence[Card],
    last_play: Play,
    rules: RuleConfig = default_rules
) -> List[List[Card]]:
    return list(iter_valid_plays(hand, last_play, rules))


def has_legal_response(
    hand: Sequence[Card],
    last_play: Optional[Play],
    rules: RuleConfig = default_rules
) -> bool:
    if last_play is None:
        return bool(hand)
    return next(iter_valid_plays(hand, last_play, rules), None) is not None


def validate_pass(
    state: GameState,
    player_id: str,
    hand: Optional[Sequence[Card]] = None,
    rules: RuleConfig = default_rules,
    forced: bool = False
) -> ValidationResult:
    """
    Validate a pass attempt.

    Under the no_pass variant the player's hand is needed to check
    whether a legal response exists. A forced pass (turn timeout) skips
    that check.

    Args:
        state: Current game state
        player_id: ID of player attempting to pass
        hand: The passing player's hand
        rules: Active rule configuration
        forced: Pass imposed by the caller rather than chosen

    Returns:
        ValidationResult with validation outcome
    """
    turn_error = _validate_turn(state, player_id)
    if turn_error:
        return turn_error

    if rules.forbids_optional_pass and not forced:
        if hand is None:
            return ValidationResult.error(
                errors.ACTION_NOT_ALLOWED,
                "Hand required to check a pass under no_pass"
            )
        if has_legal_response(hand, state.last_play, rules):
            return ValidationResult.error(
                errors.ACTION_NOT_ALLOWED,
                "Cannot pass while holding a legal play"
            )

    return ValidationResult.success()
