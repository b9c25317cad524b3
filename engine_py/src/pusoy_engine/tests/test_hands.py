"""
Tests for hand classification.
"""

import pytest

from pusoy_engine.constants import parse_cards
from pusoy_engine.hands import classify
from pusoy_engine.models import HandType


@pytest.mark.parametrize("codes, expected", [
    (["KH"], HandType.SINGLE),
    (["7C", "7D"], HandType.PAIR),
    (["3C", "4D", "5H", "6S", "7C"], HandType.STRAIGHT),
    (["JC", "QD", "KH", "AS", "2C"], HandType.STRAIGHT),
    (["3H", "7H", "9H", "JH", "KH"], HandType.FLUSH),
    (["8C", "8D", "8H", "4S", "4C"], HandType.FULL_HOUSE),
    (["9C", "9D", "9H", "9S", "3C"], HandType.FOUR_OF_A_KIND),
    (["5S", "6S", "7S", "8S", "9S"], HandType.STRAIGHT_FLUSH),
])
def test_classify_hand_types(codes, expected):
    assert classify(parse_cards(codes)) == expected


@pytest.mark.parametrize("codes, not_expected", [
    (["7C", "8C"], HandType.PAIR),
    (["3C", "4D", "5H", "6S", "8C"], HandType.STRAIGHT),
    (["3H", "7H", "9H", "JH", "KS"], HandType.FLUSH),
    (["8C", "8D", "4H", "4S", "5C"], HandType.FULL_HOUSE),
    (["9C", "9D", "9H", "3S", "3C"], HandType.FOUR_OF_A_KIND),
    (["5S", "6S", "7S", "8S", "9H"], HandType.STRAIGHT_FLUSH),
])
def test_near_misses(codes, not_expected):
    """One card changed breaks the hand type."""
    assert classify(parse_cards(codes)) != not_expected


def test_no_wraparound_straight():
    """Ace and two sit at 14 and 15, so they cannot join 3-4-5."""
    assert classify(parse_cards(["AC", "2D", "3H", "4S", "5C"])) is None
    assert classify(parse_cards(["QC", "KD", "AH", "2S", "3C"])) is None


def test_precedence_prefers_strongest_type():
    assert classify(parse_cards(["9C", "9D", "9H", "9S", "3C"])) == HandType.FOUR_OF_A_KIND
    assert classify(parse_cards(["8C", "8D", "8H", "4S", "4C"])) == HandType.FULL_HOUSE
    assert classify(parse_cards(["5S", "6S", "7S", "8S", "9S"])) == HandType.STRAIGHT_FLUSH


@pytest.mark.parametrize("codes", [
    [],
    ["3C", "3D", "3H"],
    ["3C", "3D", "3H", "3S"],
    ["3C", "4C", "5C", "6C", "7C", "8C"],
])
def test_unsupported_sizes(codes):
    assert classify(parse_cards(codes)) is None
