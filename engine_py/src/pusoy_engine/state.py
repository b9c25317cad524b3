"""
Match state transitions.

Every transition either applies fully or raises GameError and leaves the
state untouched. Hand contents are not kept here, only each player's
remaining-card count; see engine.PusoyEngine for hand ownership.
"""

import logging
import time
from typing import Dict, Optional

from . import errors
from .constants import NUM_PLAYERS, PASSES_TO_CLEAR
from .models import GamePhase, GameState, Play, Player, Transition, TransitionKind
from .rules import RuleConfig, default_rules
from .validate import validate_pass, validate_play

logger = logging.getLogger(__name__)


def seat_player(state: GameState, player: Player) -> GameState:
    """Seat a player while the match is waiting for its roster."""
    if state.phase != GamePhase.WAITING:
        errors.raise_error(errors.ACTION_NOT_ALLOWED, "Players can only join while waiting")
    if len(state.players) >= NUM_PLAYERS:
        errors.raise_error(errors.ROOM_FULL, "Room is full")
    if not 0 <= player.seat < NUM_PLAYERS or any(p.seat == player.seat for p in state.players):
        errors.raise_error(errors.ACTION_NOT_ALLOWED, f"Seat {player.seat} is not available")

    state.players.append(player)
    state.players.sort(key=lambda p: p.seat)
    return state


def begin_dealing(state: GameState) -> GameState:
    """waiting -> dealing, once four ready players are seated."""
    if state.phase != GamePhase.WAITING:
        errors.raise_error(
            errors.ACTION_NOT_ALLOWED,
            f"Cannot deal from phase {state.phase.value}"
        )
    if not state.is_ready_to_start:
        errors.raise_error(
            errors.ROSTER_INCOMPLETE,
            f"Need {NUM_PLAYERS} ready players (have {sum(p.is_ready for p in state.players)} "
            f"ready of {len(state.players)})"
        )
    state.phase = GamePhase.DEALING
    return state


def activate(state: GameState, hand_sizes: Dict[int, int], opening_seat: int) -> GameState:
    """
    dealing -> active.

    Args:
        state: Match in the dealing phase
        hand_sizes: Dealt card count per seat
        opening_seat: Seat that leads the first trick
    """
    if state.phase != GamePhase.DEALING:
        errors.raise_error(errors.ACTION_NOT_ALLOWED, "Match is not dealing")
    if len(state.players) != NUM_PLAYERS:
        errors.raise_error(errors.INTERNAL_ERROR, "Active match needs four players")

    for player in state.players:
        player.update_cards_remaining(hand_sizes[player.seat])

    state.current_trick = []
    state.last_play = None
    state.play_history = []
    state.transitions = []
    state.pass_count = 0
    state.direction = 1
    state.phase = GamePhase.ACTIVE
    state.started_at = time.time()
    _set_turn(state, opening_seat)
    return state


def next_seat(state: GameState) -> int:
    return (state.turn_player + state.direction) % NUM_PLAYERS


def _set_turn(state: GameState, seat: int):
    state.turn_player = seat
    for player in state.players:
        player.set_current_turn(player.seat == seat)


def apply_play(state: GameState, play: Play, rules: RuleConfig = default_rules) -> GameState:
    """
    Apply an accepted play.

    The play is revalidated against the current last play. On success the
    cards join the trick, the turn advances and the pass counter resets.
    A player reaching zero cards completes the match.

    Raises:
        GameError: phase, turn or validation failure
    """
    validation = validate_play(state, play.player_id, play.cards, rules)
    validation.raise_for_error()
    if validation.hand_type != play.hand_type:
        errors.raise_error(
            errors.INVALID_COMBINATION,
            f"Play is labelled {play.hand_type.value} but forms {validation.hand_type.value}"
        )

    player = state.get_player(play.player_id)
    if player.cards_remaining < play.size:
        errors.raise_error(
            errors.INTERNAL_ERROR,
            f"{player.name} has {player.cards_remaining} cards, cannot play {play.size}"
        )

    state.current_trick.extend(play.cards)
    state.last_play = play
    state.play_history.append(play)
    state.transitions.append(Transition(TransitionKind.PLAY, play.player_id, play))
    state.pass_count = 0
    player.update_cards_remaining(player.cards_remaining - play.size)
    logger.debug("%s played %s", player.name, play.hand_type.value)

    _set_turn(state, next_seat(state))
    detect_winner(state)
    return state


def apply_pass(
    state: GameState,
    player_id: str,
    rules: RuleConfig = default_rules,
    hand=None,
    forced: bool = False
) -> GameState:
    """
    Apply a pass by the turn holder.

    The third consecutive pass clears the trick. The turn advances in
    every case. Under no_pass the passing player's hand is required
    unless the pass is forced, as on a turn timeout.

    Raises:
        GameError: phase or turn failure, or a refused pass under no_pass
    """
    validate_pass(state, player_id, hand, rules, forced).raise_for_error()

    # Seat after the pass, taken before a reverse_order flip so the
    # trick winner still leads the next trick
    seat = next_seat(state)
    state.pass_count += 1
    state.total_passes += 1
    state.transitions.append(Transition(TransitionKind.PASS, player_id))
    if state.pass_count >= PASSES_TO_CLEAR:
        clear_trick(state, rules)

    _set_turn(state, seat)
    return state


def clear_trick(state: GameState, rules: RuleConfig = default_rules) -> GameState:
    state.current_trick = []
    state.pass_count = 0
    state.tricks_cleared += 1
    state.transitions.append(Transition(TransitionKind.TRICK_CLEARED))
    if rules.clear_last_play_on_trick_clear:
        state.last_play = None
    if rules.reverses_on_clear:
        state.direction = -state.direction
    logger.debug("Trick cleared in room %s", state.room_code)
    return state


def detect_winner(state: GameState) -> Optional[str]:
    """Complete the match if any player is out of cards."""
    if state.phase != GamePhase.ACTIVE:
        return state.winner
    finished = next((p for p in state.players if p.cards_remaining == 0), None)
    if finished:
        complete_game(state, finished.id)
        return finished.id
    return None


def complete_game(state: GameState, winner_id: str) -> GameState:
    state.phase = GamePhase.COMPLETED
    state.winner = winner_id
    state.completed_at = time.time()
    for player in state.players:
        player.set_current_turn(False)
    logger.info("Room %s completed, winner %s", state.room_code, winner_id)
    return state


def abandon_game(state: GameState) -> GameState:
    """Move any non-terminal match to abandoned."""
    if state.phase.is_terminal:
        errors.raise_error(
            errors.ACTION_NOT_ALLOWED,
            f"Match already {state.phase.value}"
        )
    state.phase = GamePhase.ABANDONED
    state.completed_at = time.time()
    for player in state.players:
        player.set_current_turn(False)
    logger.info("Room %s abandoned", state.room_code)
    return state
