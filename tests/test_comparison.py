"""Tests for hand comparison, qualification and winner selection."""

from poker_solver.engine.comparison import compare, qualifies_high, winners
from poker_solver.solver import solve, solve_all


def test_category_decides_first():
    flush = solve(["2h", "5h", "7h", "9h", "Jh"], "standard")
    straight = solve(["Ad", "Kc", "Qh", "Js", "Th"], "standard")
    assert compare(flush, straight) == 1
    assert compare(straight, flush) == -1


def test_equal_category_compares_cards_in_order():
    aces_up = solve(["Ah", "Ac", "3c", "3h", "Td"], "standard")
    kings_up = solve(["Kh", "Kc", "Qc", "Qh", "Td"], "standard")
    assert aces_up.beats(kings_up)


def test_kicker_breaks_tie():
    a = solve(["9h", "9c", "Ac", "4h", "3d"], "standard")
    b = solve(["9d", "9s", "Kc", "4d", "3h"], "standard")
    assert compare(a, b) == 1


def test_identical_ranks_tie():
    a = solve(["Ah", "Kh", "Qh", "Jh", "9h"], "standard")
    b = solve(["Ad", "Kd", "Qd", "Jd", "9d"], "standard")
    assert compare(a, b) == 0
    assert not a.beats(b)
    assert not a.loses_to(b)


def test_seven_card_hands_compare_first_five_cards():
    a = solve(["Ah", "Kd", "Qc", "Js", "Th", "4c", "3d"], "paigowpokerfull")
    b = solve(["Ad", "Kh", "Qs", "Jc", "Td", "6c", "5d"], "paigowpokerfull")
    assert compare(a, b) == 0


def test_no_reference_always_qualifies():
    hand = solve(["2h", "4c", "6d", "8s", "Th"], "standard")
    assert qualifies_high(hand, None)


def test_qualifies_against_reference():
    reference = solve(["Jc", "Jd", "4h", "3s", "2c"], "jacksbetter")
    queens = solve(["Qc", "Qd", "9h", "6s", "2d"], "jacksbetter")
    tens = solve(["Tc", "Td", "Ah", "Ks", "Qd"], "jacksbetter")
    assert qualifies_high(queens, reference)
    assert qualifies_high(reference, reference)
    assert not qualifies_high(tens, reference)


class TestWinners:
    """Showdown winner selection."""

    def test_single_winner(self):
        hands = solve_all([
            ["Ah", "Kh", "Qh", "Jh", "Th"],
            ["As", "Ad", "Ac", "7d", "7c"],
            ["9c", "8d", "7h", "6s", "5c"],
        ], "standard")
        assert [hand.id for hand in winners(hands)] == ["0"]

    def test_split_pot(self):
        hands = solve_all([
            ["Ah", "Kd", "Qc", "Js", "9h"],
            ["Ad", "Kh", "Qs", "Jc", "9d"],
            ["Ac", "Kc", "Qd", "Jh", "8d"],
        ], "standard")
        assert [hand.id for hand in winners(hands)] == ["0", "1"]

    def test_empty_input(self):
        assert winners([]) == []

    def test_unqualified_hands_are_dropped(self):
        hands = solve_all([
            ["Tc", "Td", "Ah", "Ks", "Qd"],
            ["Jc", "Jd", "4h", "3s", "2c"],
        ], "jacksbetter", can_disqualify=True)
        assert [hand.id for hand in winners(hands)] == ["1"]

    def test_nobody_qualifies(self):
        hands = solve_all([
            ["Tc", "Td", "Ah", "Ks", "Qd"],
            ["9c", "9d", "4h", "3s", "2c"],
        ], "jacksbetter", can_disqualify=True)
        assert winners(hands) == []

    def test_unqualified_hand_still_ranked(self):
        hands = solve_all([
            ["Tc", "Td", "Ah", "Ks", "Qd"],
            ["9c", "9d", "4h", "3s", "2c"],
        ], "jacksbetter")
        assert [hand.id for hand in winners(hands)] == ["0"]
