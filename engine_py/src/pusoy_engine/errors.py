# engine_py/src/pusoy_engine/errors.py

class GameError(Exception):
    """Base exception for game-related errors."""
    def __init__(self, code: str, message: str):
        self.code = code
        self.message = message
        super().__init__(f"[{code}] {message}")

# Play validation
NO_CARDS = "NO_CARDS"
DUPLICATE_CARDS = "DUPLICATE_CARDS"
INVALID_COMBINATION = "INVALID_COMBINATION"
WRONG_CARD_COUNT = "WRONG_CARD_COUNT"
HAND_TYPE_MISMATCH = "HAND_TYPE_MISMATCH"
DOES_NOT_BEAT = "DOES_NOT_BEAT"

# Turn order and phase
NOT_YOUR_TURN = "NOT_YOUR_TURN"
GAME_NOT_ACTIVE = "GAME_NOT_ACTIVE"
ACTION_NOT_ALLOWED = "ACTION_NOT_ALLOWED"

# Roster and ownership
ROOM_NOT_FOUND = "ROOM_NOT_FOUND"
ROOM_FULL = "ROOM_FULL"
ROSTER_INCOMPLETE = "ROSTER_INCOMPLETE"
PLAYER_NOT_FOUND = "PLAYER_NOT_FOUND"
OWNERSHIP_MISMATCH = "OWNERSHIP_MISMATCH"

INTERNAL_ERROR = "INTERNAL_ERROR"

# Helper function to raise common errors
def raise_error(code: str, message: str):
    raise GameError(code, message)
