"""
Ruleset definitions.
A ruleset says which hand types exist in a game, how strong each one is,
and how wild cards, wheels, qualifiers and kickers behave.
"""

from dataclasses import dataclass, field, replace
from enum import Enum
from typing import Optional

from .deck import Card, JOKER, RANK_ORDER
from .errors import RulesetError
from .hand_types import HandType


class WildPolicy(Enum):
    ANY_RANK = "any_rank"   # Wild stands for whatever rank completes the hand
    FIXED = "fixed"         # Wild joins rank groups only as the substitute face (Pai Gow "bug")


class WheelPolicy(Enum):
    LOW = "low"                        # A-2-3-4-5 is the lowest straight
    SECOND_HIGHEST = "second_highest"  # A-2-3-4-5 ranks just under A-K-Q-J-T


@dataclass(frozen=True)
class Ruleset:
    """Static configuration for one poker variant."""
    name: str
    cards_per_hand: int
    hand_types: tuple[HandType, ...]
    wild_face: Optional[str] = None
    wild_policy: WildPolicy = WildPolicy.ANY_RANK
    wild_substitute: str = "A"
    wheel_policy: WheelPolicy = WheelPolicy.LOW
    straight_flush_qualify: int = 5
    draw_qualify: Optional[int] = None   # Defaults to straight_flush_qualify - 1
    lowest_qualifying: Optional[tuple[str, ...]] = None
    suppress_kickers: bool = False
    forbid_duplicates: bool = False
    requires_fallback: bool = True       # False for bonus-bet rules with no High Card
    description: str = field(default="", compare=False)

    def __post_init__(self):
        # Frozen dataclass: normalise through object.__setattr__
        object.__setattr__(self, "hand_types", tuple(self.hand_types))
        if self.lowest_qualifying is not None:
            object.__setattr__(self, "lowest_qualifying", tuple(self.lowest_qualifying))
        if self.wild_face is not None:
            object.__setattr__(self, "wild_face", self.wild_face.upper())
        if self.draw_qualify is None:
            object.__setattr__(self, "draw_qualify", self.straight_flush_qualify - 1)
        self._validate()

    def _validate(self) -> None:
        if not self.name:
            raise RulesetError("Ruleset needs a name")
        if self.cards_per_hand < 1:
            raise RulesetError(f"{self.name}: cards_per_hand must be at least 1")
        if not self.hand_types:
            raise RulesetError(f"{self.name}: no hand types listed")
        if len(set(self.hand_types)) != len(self.hand_types):
            raise RulesetError(f"{self.name}: hand types listed more than once")
        if not 2 <= self.draw_qualify < self.straight_flush_qualify <= len(RANK_ORDER) - 1:
            raise RulesetError(
                f"{self.name}: need 2 <= draw_qualify ({self.draw_qualify}) "
                f"< straight_flush_qualify ({self.straight_flush_qualify}) <= 13"
            )
        if self.requires_fallback and HandType.HIGH_CARD not in self.hand_types:
            raise RulesetError(
                f"{self.name}: HIGH_CARD must be listed so every hand classifies "
                "(set requires_fallback=False for bonus-only rules)"
            )
        if self.wild_face is not None and self.wild_face != JOKER and self.wild_face not in RANK_ORDER:
            raise RulesetError(f"{self.name}: unknown wild face {self.wild_face!r}")
        if self.wild_substitute not in RANK_ORDER:
            raise RulesetError(f"{self.name}: unknown wild substitute {self.wild_substitute!r}")

    @property
    def wild_substitute_rank(self) -> int:
        return RANK_ORDER[self.wild_substitute]

    @property
    def has_draws(self) -> bool:
        return any(hand_type.is_draw for hand_type in self.hand_types)

    def is_wild(self, card: Card) -> bool:
        """Jokers are always wild; otherwise only cards showing the wild face."""
        return card.is_joker or (self.wild_face is not None and card.face == self.wild_face)

    def category_rank(self, hand_type: HandType) -> int:
        """Strength of a hand type in this game. Higher is stronger."""
        try:
            index = self.hand_types.index(hand_type)
        except ValueError:
            raise RulesetError(f"{self.name}: {hand_type.name} is not part of this game") from None
        return len(self.hand_types) - index

    def derive(self, **overrides) -> "Ruleset":
        """
        Copy this ruleset with some fields changed (validated again).

        A new straight_flush_qualify without an explicit draw_qualify
        brings the draw default back to one card less.
        """
        if "straight_flush_qualify" in overrides:
            overrides.setdefault("draw_qualify", None)
        return replace(self, **overrides)

    def to_dict(self) -> dict:
        return {
            "name": self.name,
            "description": self.description,
            "cards_per_hand": self.cards_per_hand,
            "hand_types": [hand_type.name for hand_type in self.hand_types],
            "wild_face": self.wild_face,
            "wild_policy": self.wild_policy.value,
            "wheel_policy": self.wheel_policy.value,
            "straight_flush_qualify": self.straight_flush_qualify,
            "draw_qualify": self.draw_qualify,
            "lowest_qualifying": list(self.lowest_qualifying) if self.lowest_qualifying else None,
            "suppress_kickers": self.suppress_kickers,
        }
