"""Match controller: rooms, private hands, bots and turn serialization"""

import logging
import random
import threading
import uuid
from collections import defaultdict
from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional, Sequence, Tuple

from . import errors
from .actions import PassRequest, PlayRequest, Request
from .bots.base import BotAction
from .bots.tiered import TieredBot
from .constants import NUM_PLAYERS, ROOM_CODE_ALPHABET, ROOM_CODE_LENGTH, format_cards
from .models import Card, Difficulty, GamePhase, GameState, Play, Player
from .rules import RuleConfig, default_rules
from .serialization import sanitize_state
from .shuffle import find_opening_seat, setup_hands
from .state import abandon_game, activate, apply_pass, apply_play, begin_dealing, seat_player
from .validate import validate_ownership, validate_play

logger = logging.getLogger(__name__)

# Safety stop for run_bots when a retained last play cannot be beaten
MAX_BOT_TURNS = 1000


def generate_room_code(rng: Optional[random.Random] = None) -> str:
    """Random 6-character uppercase alphanumeric code."""
    rng = rng or random.Random()
    return "".join(rng.choice(ROOM_CODE_ALPHABET) for _ in range(ROOM_CODE_LENGTH))


@dataclass
class Match:
    state: GameState
    rules: RuleConfig
    rng: random.Random
    hands: Dict[int, List[Card]] = field(default_factory=dict)  # seat -> cards, never shared
    bots: Dict[str, TieredBot] = field(default_factory=dict)


class PusoyEngine:
    def __init__(self, rules: Optional[RuleConfig] = None, seed: Optional[int] = None):
        self.rules = rules or default_rules
        self.rooms: Dict[str, Match] = {}
        self.room_locks = defaultdict(threading.Lock)
        self._rng = random.Random(seed)

    def create_room(
        self,
        room_code: Optional[str] = None,
        rules: Optional[RuleConfig] = None,
        seed: Optional[int] = None
    ) -> GameState:
        """
        Create a room, or return the existing one with that code unchanged.

        Raises:
            GameError: ACTION_NOT_ALLOWED if the code exists and different
                rules or a seed are given for it
        """
        code = room_code or self._unused_room_code()
        with self.room_locks[code]:
            existing = self.rooms.get(code)
            if existing:
                if seed is not None or (rules is not None and rules != existing.rules):
                    errors.raise_error(
                        errors.ACTION_NOT_ALLOWED,
                        f"Room {code} already exists with its own rules and seed"
                    )
                return existing.state

            rules = rules or self.rules
            rng = random.Random(seed if seed is not None else self._rng.getrandbits(64))
            state = GameState(room_code=code, variant=rules.variant)
            self.rooms[code] = Match(state=state, rules=rules, rng=rng)
            logger.info("Created room %s (%s)", code, rules.variant.value)
            return state

    def _unused_room_code(self) -> str:
        code = generate_room_code(self._rng)
        while code in self.rooms:
            code = generate_room_code(self._rng)
        return code

    def get_room(self, room_code: str) -> Optional[GameState]:
        match = self.rooms.get(room_code)
        return match.state if match else None

    def _get_match(self, room_code: str) -> Match:
        match = self.rooms.get(room_code)
        if not match:
            errors.raise_error(errors.ROOM_NOT_FOUND, f"Room {room_code} not found")
        return match

    def _get_player(self, match: Match, player_id: str) -> Player:
        player = match.state.get_player(player_id)
        if not player:
            errors.raise_error(errors.PLAYER_NOT_FOUND, f"Player {player_id} not found")
        return player

    def remove_room(self, room_code: str):
        with self.room_locks[room_code]:
            self.rooms.pop(room_code, None)
        self.room_locks.pop(room_code, None)

    # Roster

    def add_player(
        self,
        room_code: str,
        player_name: str,
        is_bot: bool = False,
        difficulty: Optional[Difficulty] = None,
        player_id: Optional[str] = None
    ) -> Player:
        """Seat a player in the first free seat. Bots are ready immediately."""
        with self.room_locks[room_code]:
            match = self._get_match(room_code)
            taken = {p.seat for p in match.state.players}
            seat = next((s for s in range(NUM_PLAYERS) if s not in taken), len(taken))
            player = Player(
                id=player_id or str(uuid.uuid4())[:8],
                name=player_name,
                seat=seat,
                is_ready=is_bot,
                is_bot=is_bot
            )
            seat_player(match.state, player)
            if is_bot:
                match.bots[player.id] = TieredBot(
                    player.id,
                    difficulty or match.rules.bot_difficulty,
                    rng=random.Random(match.rng.getrandbits(64))
                )
            logger.info("%s joined room %s at seat %d", player_name, room_code, seat)
            return player

    def set_ready(self, room_code: str, player_id: str, ready: bool = True) -> Player:
        with self.room_locks[room_code]:
            match = self._get_match(room_code)
            if match.state.phase != GamePhase.WAITING:
                errors.raise_error(errors.ACTION_NOT_ALLOWED, "Ready state is fixed once dealing starts")
            player = self._get_player(match, player_id)
            player.set_ready(ready)
            return player

    def set_connected(self, room_code: str, player_id: str, connected: bool) -> Player:
        with self.room_locks[room_code]:
            player = self._get_player(self._get_match(room_code), player_id)
            player.set_connected(connected)
            return player

    # Lifecycle

    def start_game(self, room_code: str) -> GameState:
        """Deal and move the match to active with the opening seat on turn."""
        with self.room_locks[room_code]:
            match = self._get_match(room_code)
            state = match.state
            if state.phase != GamePhase.WAITING or not state.is_ready_to_start:
                begin_dealing(state)  # raises with the phase or roster problem

            # Deal before leaving waiting so a failed deal can be retried
            hands = setup_hands(match.rng)
            opening_seat = find_opening_seat([hands[seat] for seat in range(NUM_PLAYERS)])
            begin_dealing(state)
            match.hands = hands
            activate(state, {seat: len(hand) for seat, hand in hands.items()}, opening_seat)

            logger.info(
                "Room %s started, %s opens",
                room_code, state.players[opening_seat].name
            )
            return state

    def abandon(self, room_code: str) -> GameState:
        with self.room_locks[room_code]:
            return abandon_game(self._get_match(room_code).state)

    # Turns

    def play_cards(self, room_code: str, player_id: str, cards: Sequence[Card]) -> Play:
        """
        Play cards from a player's hand.

        Raises:
            GameError: phase, turn, ownership or validation failure
        """
        with self.room_locks[room_code]:
            return self._play(self._get_match(room_code), player_id, cards)

    def _play(self, match: Match, player_id: str, cards: Sequence[Card]) -> Play:
        state = match.state
        validation = validate_play(state, player_id, cards, match.rules)
        validation.raise_for_error()

        player = state.get_player(player_id)
        hand = match.hands[player.seat]
        if not validate_ownership(hand, cards):
            errors.raise_error(errors.OWNERSHIP_MISMATCH, "Player does not own all specified cards")

        play = Play(cards=tuple(cards), hand_type=validation.hand_type, player_id=player_id)
        apply_play(state, play, match.rules)
        for card in cards:
            hand.remove(card)

        if len(hand) != player.cards_remaining:
            errors.raise_error(
                errors.INTERNAL_ERROR,
                f"Seat {player.seat} holds {len(hand)} cards but reports {player.cards_remaining}"
            )
        logger.debug("%s played %s", player.name, format_cards(cards))
        return play

    def pass_turn(self, room_code: str, player_id: str) -> GameState:
        with self.room_locks[room_code]:
            return self._pass(self._get_match(room_code), player_id)

    def _pass(self, match: Match, player_id: str, forced: bool = False) -> GameState:
        player = self._get_player(match, player_id)
        return apply_pass(match.state, player_id, match.rules, match.hands.get(player.seat), forced)

    def timeout_turn(self, room_code: str) -> str:
        """
        Auto-pass for whoever holds the turn when the caller's timer expires.

        Returns:
            ID of the player who was passed
        """
        with self.room_locks[room_code]:
            match = self._get_match(room_code)
            if not match.state.is_active:
                errors.raise_error(errors.GAME_NOT_ACTIVE, "Game is not active")
            player = match.state.current_player
            self._pass(match, player.id, forced=True)
            logger.info("%s timed out in room %s", player.name, room_code)
            return player.id

    def run_bots(self, room_code: str, max_turns: int = MAX_BOT_TURNS) -> List[Tuple[str, BotAction]]:
        """
        Play consecutive bot turns until a human is on turn or the match ends.

        Returns:
            (player_id, action) for every bot turn taken
        """
        with self.room_locks[room_code]:
            match = self._get_match(room_code)
            state = match.state
            taken = []
            while state.is_active and state.current_player.id in match.bots:
                if len(taken) >= max_turns:
                    logger.warning("Room %s: stopping bots after %d turns", room_code, max_turns)
                    break
                player = state.current_player
                bot = match.bots[player.id]
                action = bot.choose_action(list(match.hands[player.seat]), state.last_play, match.rules)
                if action.is_pass:
                    self._pass(match, player.id)
                else:
                    self._play(match, player.id, action.cards)
                taken.append((player.id, action))
            return taken

    def handle_request(self, room_code: str, request: Request) -> Any:
        if isinstance(request, PlayRequest):
            return self.play_cards(room_code, request.player_id, request.to_cards())
        if isinstance(request, PassRequest):
            return self.pass_turn(room_code, request.player_id)
        raise ValueError(f"Unsupported request: {request!r}")

    # Views

    def get_hand(self, room_code: str, player_id: str) -> List[Card]:
        """A copy of the requesting player's own hand."""
        with self.room_locks[room_code]:
            match = self._get_match(room_code)
            player = self._get_player(match, player_id)
            return list(match.hands.get(player.seat, []))

    def get_view(self, room_code: str, viewer_id: Optional[str] = None) -> Dict[str, Any]:
        """Sanitized snapshot for one seat: own hand plus everyone's counts."""
        with self.room_locks[room_code]:
            match = self._get_match(room_code)
            return sanitize_state(match.state, match.hands, viewer_id, match.rules)
