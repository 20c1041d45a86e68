"""
Card model for the hand solver.
Handles the rank table, suits, and parsing/rendering of card tokens.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Iterable, Optional, Union

from .errors import InvalidCardError


class Suit(Enum):
    CLUBS = "c"
    DIAMONDS = "d"
    HEARTS = "h"
    SPADES = "s"


# Low to high. "1" is the low-ace slot, only reached by straights through the wheel.
RANKS = ["1", "2", "3", "4", "5", "6", "7", "8", "9", "T", "J", "Q", "K", "A"]
RANK_ORDER = {face: i for i, face in enumerate(RANKS)}

JOKER = "O"
ACE = RANK_ORDER["A"]
LOW_ACE = RANK_ORDER["1"]
UNRESOLVED = -1  # Wild card whose rank has not been assigned yet

CardLike = Union["Card", str]


def display_face(face: str) -> str:
    """Face as shown to players ("T" renders as "10")."""
    return "10" if face == "T" else face


def face_for_rank(rank: int) -> str:
    """Face character for a rank index."""
    return RANKS[rank]


@dataclass(frozen=True)
class Card:
    face: str
    suit: Optional[Suit] = None

    @property
    def is_joker(self) -> bool:
        return self.face == JOKER

    @property
    def rank(self) -> int:
        """Index in the rank table; jokers have no rank."""
        return RANK_ORDER.get(self.face, UNRESOLVED)

    @property
    def token(self) -> str:
        suit = self.suit.value if self.suit else ""
        return f"{display_face(self.face)}{suit}"

    def __str__(self) -> str:
        return self.token

    def __repr__(self) -> str:
        return f"Card({self.token})"


def _parse_suit(char: str, token: str) -> Suit:
    try:
        return Suit(char.lower())
    except ValueError:
        raise InvalidCardError(token, f"unknown suit {char!r}") from None


def parse_card(token: CardLike) -> Card:
    """
    Parse a card token such as "Ah", "TD", "10c" or "O" (joker).

    Rank characters are case-insensitive, as are suits. A joker's suit
    is optional and kept only when it names a real suit.
    """
    if isinstance(token, Card):
        return token
    if not isinstance(token, str):
        raise InvalidCardError(repr(token), "card tokens must be strings")

    text = token.strip()
    if not text:
        raise InvalidCardError(token, "empty token")

    if text.startswith("10"):
        face, rest = "T", text[2:]
    else:
        face, rest = text[0].upper(), text[1:]

    if face == JOKER:
        if len(rest) == 1 and rest.lower() in {s.value for s in Suit}:
            return Card(JOKER, Suit(rest.lower()))
        return Card(JOKER)

    if face not in RANK_ORDER:
        raise InvalidCardError(token, f"unknown rank {face!r}")
    if len(rest) != 1:
        raise InvalidCardError(token, "expected exactly one suit character")
    return Card(face, _parse_suit(rest, token))


def parse_cards(tokens: Iterable[CardLike]) -> list[Card]:
    """Parse a sequence of tokens; Card instances pass through unchanged."""
    return [parse_card(token) for token in tokens]


def sort_cards(cards: Iterable[Card]) -> list[Card]:
    """Sort cards high to low by rank. Equal ranks keep their input order."""
    return sorted(cards, key=lambda c: c.rank, reverse=True)
