"""Tests for the evaluator cascade under the standard and fixed-size games.

Tests cover:
- Every standard category, its description and played cards
- Kicker suppression
- Three and four card games
- Rendering round-trips and repeat solving
"""

import random

import pytest

from poker_solver.engine.deck import RANKS, Suit, parse_cards
from poker_solver.engine.hand_types import HandType
from poker_solver.presets import get_preset
from poker_solver.solver import solve

STANDARD_CASES = [
    (HandType.STRAIGHT_FLUSH, ["9h", "Kh", "Qh", "Jh", "Th"], "Straight Flush, Kh High"),
    (HandType.FOUR_OF_A_KIND, ["As", "Ah", "Ad", "Ac", "Kd"], "Four of a Kind, A's"),
    (HandType.FULL_HOUSE, ["Qc", "Qd", "Qs", "9h", "9s"], "Full House, Q's over 9's"),
    (HandType.FLUSH, ["Ah", "Jh", "9h", "6h", "2h"], "Flush, Ah High"),
    (HandType.STRAIGHT, ["9h", "8d", "7c", "6s", "5h"], "Straight, 9 High"),
    (HandType.THREE_OF_A_KIND, ["8h", "8d", "8s", "Qd", "Js"], "Three of a Kind, 8's"),
    (HandType.TWO_PAIR, ["7h", "7d", "4s", "4c", "As"], "Two Pair, 7's & 4's"),
    (HandType.PAIR, ["6h", "6s", "Qh", "8d", "4c"], "Pair, 6's"),
    (HandType.HIGH_CARD, ["As", "Kd", "Jh", "9c", "4d"], "A High"),
]


def full_deck():
    return [f"{face}{suit.value}" for face in RANKS[1:] for suit in Suit]


class TestStandardCategories:
    """One hand per standard category."""

    @pytest.mark.parametrize("hand_type, cards, description", STANDARD_CASES)
    def test_category_and_description(self, hand_type, cards, description):
        hand = solve(cards, "standard")
        assert hand.hand_type == hand_type
        assert hand.description == description
        assert len(hand.cards) == 5

    def test_stronger_category_compares_greater(self):
        hands = [solve(cards, "standard") for _, cards, _ in STANDARD_CASES]
        for stronger, weaker in zip(hands, hands[1:]):
            assert stronger.beats(weaker)
            assert weaker.loses_to(stronger)

    def test_ten_renders_as_10(self):
        hand = solve(["Th", "9h", "8h", "7h", "6h"], "standard")
        assert hand.description == "Straight Flush, 10h High"
        assert hand.to_list()[0] == "10h"
        assert str(hand) == "10h, 9h, 8h, 7h, 6h"

    def test_two_pair_card_order(self):
        hand = solve(["AH", "AC", "3C", "3H", "TD"], "standard")
        assert hand.to_list() == ["Ah", "Ac", "3c", "3h", "10d"]
        assert hand.description == "Two Pair, A's & 3's"

    def test_full_house_prefers_highest_trips(self):
        hand = solve(["Ah", "Ac", "Ad", "Jh", "Js"], "standard")
        assert hand.description == "Full House, A's over J's"

    def test_pair_kickers_sorted(self):
        hand = solve(["4c", "6h", "Qh", "6s", "8d"], "standard")
        assert hand.to_list() == ["6h", "6s", "Qh", "8d", "4c"]

    def test_wheel_is_lowest_straight(self):
        wheel = solve(["Ah", "2c", "3c", "4h", "5d"], "standard")
        six_high = solve(["6h", "2c", "3c", "4h", "5d"], "standard")
        assert wheel.description == "Straight, 5 High"
        assert wheel.loses_to(six_high)

    def test_flush_is_not_a_straight_flush(self):
        hand = solve(["Ah", "Kh", "Qh", "Jh", "9h"], "standard")
        assert hand.hand_type == HandType.FLUSH


class TestProperties:
    """Properties that hold for any dealt hand."""

    def test_every_hand_classifies(self):
        deck = full_deck()
        rng = random.Random(1234)
        standard = get_preset("standard")
        for _ in range(300):
            cards = rng.sample(deck, 5)
            hand = solve(cards, "standard")
            assert hand.hand_type in standard.hand_types
            assert len(hand.cards) == 5

    def test_played_tokens_round_trip(self):
        deck = full_deck()
        rng = random.Random(99)
        for _ in range(100):
            hand = solve(rng.sample(deck, 5), "standard")
            reparsed = parse_cards(hand.to_list())
            assert [c.rank for c in reparsed] == [c.rank for c in hand.cards]

    def test_solving_twice_is_identical(self):
        cards = ["Kh", "Kd", "O", "9c", "9s"]
        assert solve(cards, "joker") == solve(cards, "joker")

    def test_same_ranks_compare_equal(self):
        a = solve(["Ah", "Kd", "Qc", "Js", "9h"], "standard")
        b = solve(["Ad", "Kh", "Qs", "Jc", "9d"], "standard")
        assert a.compare(b) == 0


class TestKickerSuppression:
    """Games that compare only the defining cards."""

    def test_pair_keeps_two_cards(self):
        hand = solve(["Jc", "Jd", "4h", "3s", "2c"], "jacksbetter")
        assert hand.to_list() == ["Jc", "Jd"]

    def test_high_card_keeps_one_card(self):
        hand = solve(["Kc", "Jd", "4h", "3s", "2c"], "jacksbetter")
        assert hand.to_list() == ["Kc"]

    def test_two_pair_keeps_four_cards(self):
        hand = solve(["Kc", "Kd", "4h", "4s", "2c"], "jacksbetter")
        assert len(hand.cards) == 4

    def test_trips_keep_three_cards(self):
        hand = solve(["Kc", "Kd", "Kh", "4s", "2c"], "jacksbetter")
        assert len(hand.cards) == 3

    def test_kickers_decide_without_suppression(self):
        a = solve(["Kc", "Kd", "Qh", "4s", "2c"], "standard")
        b = solve(["Ks", "Kh", "Jh", "4d", "2d"], "standard")
        assert a.beats(b)

    def test_kickers_ignored_with_suppression(self):
        a = solve(["Kc", "Kd", "Qh", "4s", "2c"], "jacksbetter")
        b = solve(["Ks", "Kh", "Jh", "4d", "2d"], "jacksbetter")
        assert a.compare(b) == 0


class TestShortHands:
    """Three and four card games."""

    def test_three_card_straight_outranks_flush(self):
        straight = solve(["9c", "8d", "7h"], "threecard")
        flush = solve(["Ah", "Jh", "4h"], "threecard")
        assert straight.name == "Straight"
        assert flush.name == "Flush"
        assert straight.beats(flush)

    def test_three_card_wheel(self):
        hand = solve(["Ah", "2d", "3c"], "threecard")
        assert hand.description == "Straight, 3 High"

    def test_three_card_straight_flush(self):
        hand = solve(["Qs", "Js", "Ts"], "threecard")
        assert hand.description == "Straight Flush, Qs High"

    def test_four_card_ranking(self):
        quads = solve(["9c", "9d", "9h", "9s"], "fourcard")
        straight_flush = solve(["8s", "7s", "6s", "5s"], "fourcard")
        assert quads.name == "Four of a Kind"
        assert straight_flush.name == "Straight Flush"
        assert quads.beats(straight_flush)
