"""
Hand detection for the poker solver.
Runs a ruleset's evaluator cascade over a set of cards.
"""

import logging
from collections import Counter
from dataclasses import dataclass, replace
from typing import Iterable, Optional

from .comparison import compare, qualifies_high
from .deck import Card, CardLike, parse_cards
from .errors import DuplicateCardError, InvalidCardError, NoMatchingHandError
from .evaluators import Match, evaluate
from .hand_types import HandType
from .pool import HandContext, PlayedCard
from .rules import Ruleset
from .straights import DrawShape

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class SolvedHand:
    """Result of hand detection."""
    hand_type: HandType
    name: str
    description: str
    cards: tuple[PlayedCard, ...]      # Played cards, in tie-break order
    source_cards: tuple[Card, ...]     # Everything that was dealt
    rank: int                          # Category strength within the ruleset
    ruleset: Ruleset
    qualifies: bool = True
    made_length: int = 0
    is_royal: bool = False
    is_wheel: bool = False
    draw_shape: Optional[DrawShape] = None
    id: str = ""

    def to_list(self) -> list[str]:
        return [card.token for card in self.cards]

    def __str__(self) -> str:
        return ", ".join(self.to_list())

    def to_dict(self) -> dict:
        return {
            "id": self.id,
            "game": self.ruleset.name,
            "hand_type": self.hand_type.name,
            "name": self.name,
            "description": self.description,
            "rank": self.rank,
            "cards": self.to_list(),
            "source_cards": [card.token for card in self.source_cards],
            "qualifies": self.qualifies,
            "made_length": self.made_length,
            "is_royal": self.is_royal,
            "is_wheel": self.is_wheel,
            "draw_shape": self.draw_shape.value if self.draw_shape else None,
        }

    def compare(self, other: "SolvedHand") -> int:
        return compare(self, other)

    def loses_to(self, other: "SolvedHand") -> bool:
        return compare(self, other) < 0

    def beats(self, other: "SolvedHand") -> bool:
        return compare(self, other) > 0


class HandDetector:
    """Detects the best hand a set of cards makes under one ruleset."""

    def __init__(self, ruleset: Ruleset):
        self.ruleset = ruleset
        self._reference: Optional[SolvedHand] = None

    @property
    def reference(self) -> Optional[SolvedHand]:
        """The game's lowest qualifying hand, solved once and cached."""
        if self.ruleset.lowest_qualifying is None:
            return None
        if self._reference is None:
            self._reference = self.detect(self.ruleset.lowest_qualifying, id="lowest-qualifying")
        return self._reference

    def check_duplicates(self, cards: list[Card]) -> None:
        counts = Counter(card.token for card in cards)
        duplicates = sorted(token for token, count in counts.items() if count > 1)
        if duplicates:
            raise DuplicateCardError(duplicates, self.ruleset.name)

    def detect(self, cards: Iterable[CardLike], can_disqualify: bool = False,
               id: str = "") -> SolvedHand:
        """
        Classify `cards`: the first hand type in the ruleset's order that
        matches wins.

        Every evaluator gets a fresh HandContext, so wild cards never
        carry ranks over from a failed attempt.
        """
        pool = parse_cards(cards)
        if not pool:
            raise InvalidCardError("", "no cards to solve")
        if self.ruleset.forbid_duplicates:
            self.check_duplicates(pool)

        for hand_type in self.ruleset.hand_types:
            ctx = HandContext(pool, self.ruleset)
            match = evaluate(hand_type, ctx)
            if match is None:
                logger.debug("%s: %s does not match %s", self.ruleset.name, hand_type.name, pool)
                continue
            logger.debug("%s: %s matches (%s)", self.ruleset.name, hand_type.name, match.description)
            return self._build(match, ctx, pool, can_disqualify, id)

        raise NoMatchingHandError(self.ruleset.name, [card.token for card in pool])

    def try_detect(self, cards: Iterable[CardLike], can_disqualify: bool = False,
                   id: str = "") -> Optional[SolvedHand]:
        """Like detect(), but None when no hand type matches (bonus-only games)."""
        try:
            return self.detect(cards, can_disqualify, id)
        except NoMatchingHandError:
            return None

    def _build(self, match: Match, ctx: HandContext, pool: list[Card],
               can_disqualify: bool, id: str) -> SolvedHand:
        hand = SolvedHand(
            hand_type=match.hand_type,
            name=match.display_name,
            description=match.description,
            cards=ctx.played(match.entries),
            source_cards=tuple(pool),
            rank=self.ruleset.category_rank(match.hand_type),
            ruleset=self.ruleset,
            made_length=match.made_length,
            is_royal=match.is_royal,
            is_wheel=match.is_wheel,
            draw_shape=match.draw_shape,
            id=id,
        )
        if can_disqualify and self.ruleset.lowest_qualifying is not None:
            qualifies = qualifies_high(hand, self.reference)
            if not qualifies:
                logger.debug("%s: %s does not qualify", self.ruleset.name, hand.description)
            hand = replace(hand, qualifies=qualifies)
        return hand


def detect_hand(cards: Iterable[CardLike], ruleset: Ruleset, can_disqualify: bool = False,
                id: str = "") -> SolvedHand:
    """Convenience function to classify one hand."""
    return HandDetector(ruleset).detect(cards, can_disqualify, id)
