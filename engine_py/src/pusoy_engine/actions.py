"""
Inbound play/pass request models and validation.
"""

from enum import Enum
from typing import Any, Dict, List, Union

from pydantic import BaseModel, Field, ValidationError, field_validator

from .constants import parse_card


class ActionType(str, Enum):
    """Inbound action types."""
    PLAY = "play"
    PASS = "pass"


class BaseAction(BaseModel):
    """Base action model."""
    type: ActionType
    player_id: str = Field(..., min_length=1)


class PlayRequest(BaseAction):
    """Play cards request. Empty or duplicate selections are left to the validator."""
    type: ActionType = ActionType.PLAY
    cards: List[str] = Field(default_factory=list, max_length=13)

    @field_validator('cards')
    @classmethod
    def validate_card_codes(cls, v):
        for code in v:
            parse_card(code)
        return [code.strip().upper() for code in v]

    def to_cards(self):
        return [parse_card(code) for code in self.cards]


class PassRequest(BaseAction):
    """Pass turn request."""
    type: ActionType = ActionType.PASS


Request = Union[PlayRequest, PassRequest]

_REQUEST_MODELS = {
    ActionType.PLAY: PlayRequest,
    ActionType.PASS: PassRequest,
}


def parse_request(data: Dict[str, Any]) -> Request:
    """
    Parse a raw request dict into its model.

    Raises:
        ValueError: unknown type or invalid fields
    """
    try:
        action_type = ActionType(data.get("type"))
    except ValueError:
        raise ValueError(f"Unknown request type: {data.get('type')!r}")

    try:
        return _REQUEST_MODELS[action_type](**data)
    except ValidationError as e:
        raise ValueError(f"Invalid {action_type.value} request: {e}") from e
