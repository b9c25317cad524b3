"""
Game rule configuration and validation.
"""

from pydantic import BaseModel, Field, field_validator

from .constants import SPEED_MODE_TIMEOUT
from .models import Difficulty, GameVariant


class RuleConfig(BaseModel):
    """Configuration for game rules and settings."""

    variant: GameVariant = Field(
        default=GameVariant.CLASSIC,
        description="Active rule variant layered on the baseline ruleset"
    )
    clear_last_play_on_trick_clear: bool = Field(
        default=True,
        description="Whether three passes also drop the last play, leaving the next trick unconstrained"
    )
    allow_cross_type_five_card: bool = Field(
        default=False,
        description="Allow a stronger five-card hand type to beat a weaker one"
    )
    pair_rank_first: bool = Field(
        default=False,
        description="Compare pair ranks before suits (baseline compares suits only)"
    )
    turn_timeout: int = Field(
        default=30,
        ge=0,
        le=120,
        description="Turn timeout in seconds (0 = no timeout), scheduled by the caller"
    )
    bot_difficulty: Difficulty = Field(
        default=Difficulty.MEDIUM,
        description="Difficulty used for bot seats that do not pick one"
    )

    @field_validator('turn_timeout')
    @classmethod
    def validate_turn_timeout(cls, v, info):
        """Speed mode needs a running timer."""
        if v == 0 and info.data.get('variant') == GameVariant.SPEED_MODE:
            raise ValueError('turn_timeout cannot be 0 in speed_mode')
        return v

    @property
    def effective_turn_timeout(self) -> int:
        """Turn timeout the caller should schedule for this variant."""
        if self.variant == GameVariant.SPEED_MODE:
            return min(self.turn_timeout, SPEED_MODE_TIMEOUT)
        return self.turn_timeout

    @property
    def reverses_on_clear(self) -> bool:
        return self.variant == GameVariant.REVERSE_ORDER

    @property
    def forbids_optional_pass(self) -> bool:
        return self.variant == GameVariant.NO_PASS


# Default configuration instance
default_rules = RuleConfig()


def create_rules(**overrides) -> RuleConfig:
    """Create a RuleConfig with optional overrides."""
    config_dict = default_rules.model_dump()
    config_dict.update(overrides)
    return RuleConfig(**config_dict)
