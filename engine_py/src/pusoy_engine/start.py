#!/usr/bin/env python3
"""Run a full match between four bots from the command line"""

import logging
import os

from .engine import PusoyEngine
from .models import Difficulty
from .rules import create_rules
from .stats import compute_game_stats

BOT_SEATS = [
    ("Alex", Difficulty.EASY),
    ("Sam", Difficulty.MEDIUM),
    ("Jordan", Difficulty.MEDIUM),
    ("Riley", Difficulty.HARD),
]


def main():
    logging.basicConfig(level=os.getenv("LOG_LEVEL", "INFO").upper())
    seed = os.getenv("PUSOY_SEED")
    rules = create_rules(variant=os.getenv("PUSOY_VARIANT", "classic"))

    engine = PusoyEngine(rules=rules, seed=int(seed) if seed else None)
    state = engine.create_room()
    for name, difficulty in BOT_SEATS:
        engine.add_player(state.room_code, name, is_bot=True, difficulty=difficulty)

    engine.start_game(state.room_code)
    engine.run_bots(state.room_code)

    if not state.winner:
        print(f"🛑 Room {state.room_code} stopped in phase {state.phase.value}")
        return 1

    stats = compute_game_stats(state)
    winner = state.get_player(stats.winner)
    print(f"🏆 {winner.name} wins room {state.room_code}")
    print(f"   {stats.total_plays} plays, {stats.total_passes} passes, {stats.tricks_cleared} tricks")
    for player in state.players:
        print(f"   {player.name}: {stats.final_scores[player.id]} cards left")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
