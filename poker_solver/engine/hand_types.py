"""
Hand types known to the solver.
Rulesets pick an ordered subset of these; the order sets their strength.
"""

from enum import Enum, auto


class HandType(Enum):
    """Every hand category an evaluator exists for."""
    ROYAL_FLUSH = auto()
    NATURAL_ROYAL_FLUSH = auto()
    WILD_ROYAL_FLUSH = auto()
    FIVE_OF_A_KIND = auto()
    FOUR_WILDS = auto()
    STRAIGHT_FLUSH = auto()
    FOUR_OF_A_KIND_PAIR_PLUS = auto()
    FOUR_OF_A_KIND = auto()
    TWO_THREE_OF_A_KIND = auto()
    THREE_OF_A_KIND_TWO_PAIR = auto()
    FULL_HOUSE = auto()
    FLUSH = auto()
    STRAIGHT = auto()
    THREE_OF_A_KIND = auto()
    THREE_PAIR = auto()
    TWO_PAIR = auto()
    PAIR = auto()
    HIGH_CARD = auto()
    STRAIGHT_FLUSH_DRAW_WITH_PAIR = auto()
    STRAIGHT_FLUSH_DRAW_NO_PAIR = auto()
    FLUSH_DRAW_WITH_PAIR = auto()
    FLUSH_DRAW_NO_PAIR = auto()
    STRAIGHT_DRAW_WITH_PAIR = auto()
    STRAIGHT_DRAW_NO_PAIR = auto()

    @property
    def display_name(self) -> str:
        return HAND_NAMES[self]

    @property
    def is_draw(self) -> bool:
        return self in DRAW_TYPES

    @property
    def needs_pair(self) -> bool:
        """Draw types that only count when the pool also holds a pair."""
        return self in PAIRED_DRAW_TYPES


HAND_NAMES = {
    HandType.ROYAL_FLUSH: "Royal Flush",
    HandType.NATURAL_ROYAL_FLUSH: "Royal Flush",
    HandType.WILD_ROYAL_FLUSH: "Wild Royal Flush",
    HandType.FIVE_OF_A_KIND: "Five of a Kind",
    HandType.FOUR_WILDS: "Four Wild Cards",
    HandType.STRAIGHT_FLUSH: "Straight Flush",
    HandType.FOUR_OF_A_KIND_PAIR_PLUS: "Four of a Kind with Pair or Better",
    HandType.FOUR_OF_A_KIND: "Four of a Kind",
    HandType.TWO_THREE_OF_A_KIND: "Two Three Of a Kind",
    HandType.THREE_OF_A_KIND_TWO_PAIR: "Three of a Kind with Two Pair",
    HandType.FULL_HOUSE: "Full House",
    HandType.FLUSH: "Flush",
    HandType.STRAIGHT: "Straight",
    HandType.THREE_OF_A_KIND: "Three of a Kind",
    HandType.THREE_PAIR: "Three Pair",
    HandType.TWO_PAIR: "Two Pair",
    HandType.PAIR: "Pair",
    HandType.HIGH_CARD: "High Card",
    HandType.STRAIGHT_FLUSH_DRAW_WITH_PAIR: "Straight Flush Draw With Pair",
    HandType.STRAIGHT_FLUSH_DRAW_NO_PAIR: "Straight Flush Draw No Pair",
    HandType.FLUSH_DRAW_WITH_PAIR: "Flush Draw With Pair",
    HandType.FLUSH_DRAW_NO_PAIR: "Flush Draw No Pair",
    HandType.STRAIGHT_DRAW_WITH_PAIR: "Straight Draw With Pair",
    HandType.STRAIGHT_DRAW_NO_PAIR: "Straight Draw No Pair",
}

DRAW_TYPES = frozenset({
    HandType.STRAIGHT_FLUSH_DRAW_WITH_PAIR,
    HandType.STRAIGHT_FLUSH_DRAW_NO_PAIR,
    HandType.FLUSH_DRAW_WITH_PAIR,
    HandType.FLUSH_DRAW_NO_PAIR,
    HandType.STRAIGHT_DRAW_WITH_PAIR,
    HandType.STRAIGHT_DRAW_NO_PAIR,
})

PAIRED_DRAW_TYPES = frozenset({
    HandType.STRAIGHT_FLUSH_DRAW_WITH_PAIR,
    HandType.FLUSH_DRAW_WITH_PAIR,
    HandType.STRAIGHT_DRAW_WITH_PAIR,
})


def hand_type_from_name(name: str) -> HandType:
    """Look up a hand type by enum name ("FULL_HOUSE") or display name ("Full House")."""
    key = name.strip()
    try:
        return HandType[key.upper().replace(" ", "_")]
    except KeyError:
        pass
    for hand_type, display in HAND_NAMES.items():
        if display.lower() == key.lower():
            return hand_type
    raise KeyError(f"Unknown hand type: {name}")
