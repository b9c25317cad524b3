"""
Tests for rule configuration.
"""

import pytest
from pydantic import ValidationError

from pusoy_engine.models import Difficulty, GameVariant
from pusoy_engine.rules import RuleConfig, create_rules, default_rules


def test_defaults():
    assert default_rules.variant == GameVariant.CLASSIC
    assert default_rules.clear_last_play_on_trick_clear
    assert not default_rules.allow_cross_type_five_card
    assert default_rules.effective_turn_timeout == 30
    assert default_rules.bot_difficulty == Difficulty.MEDIUM


def test_create_rules_overrides():
    rules = create_rules(variant="speed_mode", bot_difficulty="hard")
    assert rules.variant == GameVariant.SPEED_MODE
    assert rules.bot_difficulty == Difficulty.HARD
    assert rules.effective_turn_timeout == 10
    assert default_rules.variant == GameVariant.CLASSIC


def test_variant_helpers():
    assert create_rules(variant="reverse_order").reverses_on_clear
    assert create_rules(variant="no_pass").forbids_optional_pass
    assert not default_rules.reverses_on_clear


@pytest.mark.parametrize("overrides", [
    {"turn_timeout": 121},
    {"turn_timeout": -1},
    {"variant": "joker_wild"},
    {"variant": "speed_mode", "turn_timeout": 0},
])
def test_invalid_rules(overrides):
    with pytest.raises(ValidationError):
        RuleConfig(**overrides)
