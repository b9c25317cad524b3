"""
Tests for play validation and comparison.
"""

from pusoy_engine import errors
from pusoy_engine.constants import parse_card, parse_cards
from pusoy_engine.models import HandType, Play
from pusoy_engine.rules import create_rules
from pusoy_engine.validate import has_legal_response, find_valid_plays, validate_cards


def make_play(codes, hand_type, player_id="p0"):
    return Play(cards=tuple(parse_cards(codes)), hand_type=hand_type, player_id=player_id)


def test_empty_selection():
    result = validate_cards([])
    assert not result.valid
    assert result.error_code == errors.NO_CARDS
    assert result.error_message == "No cards selected"


def test_duplicates_reported_before_classification():
    result = validate_cards(parse_cards(["3C", "3C", "4D"]))
    assert result.error_code == errors.DUPLICATE_CARDS


def test_invalid_combination():
    result = validate_cards(parse_cards(["3C", "4D"]))
    assert result.error_code == errors.INVALID_COMBINATION


def test_wrong_card_count_guard(monkeypatch):
    """A classification with the wrong size is still refused."""
    monkeypatch.setattr("pusoy_engine.validate.classify", lambda cards: HandType.FLUSH)
    result = validate_cards(parse_cards(["3C", "3D"]))
    assert result.error_code == errors.WRONG_CARD_COUNT
    assert "Flush" in result.error_message


def test_leading_accepts_any_hand():
    result = validate_cards(parse_cards(["8C", "8D", "8H", "4S", "4C"]))
    assert result.valid
    assert result.hand_type == HandType.FULL_HOUSE


def test_type_mismatch_doesnt_beat():
    last = make_play(["5H"], HandType.SINGLE)
    result = validate_cards(parse_cards(["9C", "9D"]), last)
    assert result.error_code == errors.HAND_TYPE_MISMATCH
    assert "doesn't beat" in result.error_message


def test_single_same_rank_higher_suit():
    last = make_play(["3C"], HandType.SINGLE)
    assert validate_cards([parse_card("3D")], last).valid


def test_single_two_beats_ace():
    last = make_play(["2S"], HandType.SINGLE)
    result = validate_cards([parse_card("AH")], last)
    assert result.error_code == errors.DOES_NOT_BEAT
    assert "doesn't beat" in result.error_message


def test_pairs_compare_highest_suit():
    """Baseline pair comparison ignores rank."""
    last = make_play(["9S", "9H"], HandType.PAIR)
    assert validate_cards(parse_cards(["7C", "7D"]), last).valid
    assert not validate_cards(parse_cards(["KC", "KS"]), last).valid


def test_pairs_rank_first_rule():
    last = make_play(["9S", "9H"], HandType.PAIR)
    rules = create_rules(pair_rank_first=True)
    assert not validate_cards(parse_cards(["7C", "7D"]), last, rules).valid
    assert validate_cards(parse_cards(["KC", "KS"]), last, rules).valid
    assert validate_cards(parse_cards(["9C", "9D"]), last, rules).valid


def test_five_card_same_type_highest_rank():
    last = make_play(["3C", "4D", "5H", "6S", "7C"], HandType.STRAIGHT)
    assert validate_cards(parse_cards(["4C", "5D", "6H", "7S", "8C"]), last).valid
    assert not validate_cards(parse_cards(["3D", "4H", "5S", "6C", "7D"]), last).valid


def test_full_house_compares_highest_rank():
    """Highest rank across all five cards, not the triple."""
    last = make_play(["8C", "8D", "8H", "4S", "4C"], HandType.FULL_HOUSE)
    assert validate_cards(parse_cards(["5C", "5D", "5H", "KS", "KC"]), last).valid


def test_cross_type_five_card():
    straight = make_play(["3C", "4D", "5H", "6S", "7C"], HandType.STRAIGHT)
    flush = parse_cards(["3H", "7H", "9H", "JH", "KH"])

    assert validate_cards(flush, straight).error_code == errors.HAND_TYPE_MISMATCH

    rules = create_rules(allow_cross_type_five_card=True)
    assert validate_cards(flush, straight, rules).valid

    flush_play = make_play(["3H", "7H", "9H", "JH", "KH"], HandType.FLUSH)
    result = validate_cards(parse_cards(["9C", "10D", "JH", "QS", "KC"]), flush_play, rules)
    assert result.error_code == errors.HAND_TYPE_MISMATCH


def test_find_valid_plays():
    hand = parse_cards(["3C", "7C", "7S", "9D"])
    last = make_play(["5H"], HandType.SINGLE)
    plays = find_valid_plays(hand, last)
    assert [[c.code for c in p] for p in plays] == [["7C"], ["7S"], ["9D"]]


def test_has_legal_response():
    last = make_play(["2D"], HandType.SINGLE)
    assert not has_legal_response(parse_cards(["3C", "AD"]), last)
    assert has_legal_response(parse_cards(["3C"]), None)
    assert not has_legal_response([], None)
