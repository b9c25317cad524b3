"""
Tests for event derivation and feedback dispatch.
"""

import copy

import pytest

from pusoy_engine.constants import OPENING_CARD
from pusoy_engine.diff import EventType, compute_events
from pusoy_engine.engine import PusoyEngine
from pusoy_engine.feedback import FeedbackListener, dispatch_events
from pusoy_engine.models import GamePhase


class RecordingListener(FeedbackListener):
    def __init__(self):
        self.calls = []

    def on_card_played(self, event):
        self.calls.append(("card_played", event.data["cards"]))

    def on_pass(self, event):
        self.calls.append(("pass", None))

    def on_trick_cleared(self, event):
        self.calls.append(("trick_cleared", None))

    def on_game_won(self, event):
        self.calls.append(("game_won", event.data["winner"]))


@pytest.fixture
def room():
    engine = PusoyEngine(seed=11)
    engine.create_room("ROOM01")
    for seat in range(4):
        engine.add_player("ROOM01", f"Player {seat}", player_id=f"p{seat}")
        engine.set_ready("ROOM01", f"p{seat}")
    state = engine.start_game("ROOM01")
    return engine, state


def types(events):
    return [event.type for event in events]


def test_no_previous_state():
    engine = PusoyEngine()
    assert compute_events(None, engine.create_room()) == []


def test_play_emits_card_and_turn(room):
    engine, state = room
    before = copy.deepcopy(state)
    engine.play_cards("ROOM01", state.current_player.id, [OPENING_CARD])

    events = compute_events(before, state)
    assert types(events) == [EventType.CARD_PLAYED, EventType.TURN_CHANGED]
    assert events[0].data["cards"] == ["3C"]
    assert events[1].data["seat"] == state.turn_player


def test_third_pass_clears_trick(room):
    engine, state = room
    opener = state.current_player
    engine.play_cards("ROOM01", opener.id, [OPENING_CARD])

    before = copy.deepcopy(state)
    for _ in range(3):
        engine.pass_turn("ROOM01", state.current_player.id)

    events = compute_events(before, state)
    assert types(events) == [
        EventType.PASS, EventType.PASS, EventType.PASS,
        EventType.TRICK_CLEARED, EventType.TURN_CHANGED,
    ]


def test_single_pass_does_not_clear(room):
    engine, state = room
    engine.play_cards("ROOM01", state.current_player.id, [OPENING_CARD])

    before = copy.deepcopy(state)
    engine.pass_turn("ROOM01", state.current_player.id)
    assert types(compute_events(before, state)) == [EventType.PASS, EventType.TURN_CHANGED]


def test_win_is_relative_to_viewer(room):
    _, state = room
    before = copy.deepcopy(state)
    state.winner = "p1"
    state.phase = GamePhase.COMPLETED

    assert types(compute_events(before, state, "p1")) == [EventType.GAME_WON]
    assert types(compute_events(before, state, "p2")) == [EventType.GAME_LOST]


def test_dispatch_routes_to_hooks(room):
    engine, state = room
    engine.play_cards("ROOM01", state.current_player.id, [OPENING_CARD])
    before = copy.deepcopy(state)
    for _ in range(3):
        engine.pass_turn("ROOM01", state.current_player.id)

    listener = RecordingListener()
    count = dispatch_events(compute_events(before, state), listener)

    assert count == 5
    assert listener.calls == [("pass", None)] * 3 + [("trick_cleared", None)]


def test_base_listener_ignores_events(room):
    engine, state = room
    before = copy.deepcopy(state)
    engine.play_cards("ROOM01", state.current_player.id, [OPENING_CARD])
    assert dispatch_events(compute_events(before, state), FeedbackListener()) == 2


def test_events_keep_order_across_trick_boundary(room):
    """A play after a cleared trick comes after the passes and the clear."""
    engine, state = room
    opener = state.current_player
    engine.play_cards("ROOM01", opener.id, [OPENING_CARD])

    before = copy.deepcopy(state)
    for _ in range(3):
        engine.pass_turn("ROOM01", state.current_player.id)
    lead = engine.get_hand("ROOM01", opener.id)[0]
    engine.play_cards("ROOM01", opener.id, [lead])

    events = compute_events(before, state)
    assert types(events) == [
        EventType.PASS, EventType.PASS, EventType.PASS,
        EventType.TRICK_CLEARED, EventType.CARD_PLAYED,
    ]
    passers = [state.players[(opener.seat + offset) % 4].id for offset in (1, 2, 3)]
    assert [e.data["player_id"] for e in events[:3]] == passers
    assert events[-1].data["cards"] == [lead.code]
    assert state.tricks_cleared == 1


def test_clearing_an_empty_trick_is_reported(room):
    """The leader passing still lets three passes clear the trick."""
    engine, state = room
    before = copy.deepcopy(state)
    for _ in range(3):
        engine.pass_turn("ROOM01", state.current_player.id)

    assert types(compute_events(before, state))[3] == EventType.TRICK_CLEARED
    assert state.tricks_cleared == 1
