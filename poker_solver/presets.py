"""
Preset rulesets for the poker solver.
Named games with their hand rankings, wild cards and qualifiers.
"""

import logging
from typing import Iterable, Optional

from .engine.hand_types import HandType as H
from .engine.rules import Ruleset, WheelPolicy, WildPolicy

logger = logging.getLogger(__name__)

DEFAULT_GAME = "standard"

STANDARD_HANDS = (
    H.STRAIGHT_FLUSH,
    H.FOUR_OF_A_KIND,
    H.FULL_HOUSE,
    H.FLUSH,
    H.STRAIGHT,
    H.THREE_OF_A_KIND,
    H.TWO_PAIR,
    H.PAIR,
    H.HIGH_CARD,
)

FOUR_CARD_HANDS = (
    H.FOUR_OF_A_KIND,
    H.STRAIGHT_FLUSH,
    H.THREE_OF_A_KIND,
    H.FLUSH,
    H.STRAIGHT,
    H.TWO_PAIR,
    H.PAIR,
    H.HIGH_CARD,
)

# Pai Gow: one joker that completes straights and flushes, otherwise an ace.
PAI_GOW = dict(
    wild_face="O",
    wild_policy=WildPolicy.FIXED,
    wheel_policy=WheelPolicy.SECOND_HIGHEST,
)


# Built-in presets
PRESETS = {
    "standard": Ruleset(
        name="standard",
        description="Five-card poker, no wild cards, repeated cards rejected",
        cards_per_hand=5,
        hand_types=STANDARD_HANDS,
        forbid_duplicates=True,
    ),

    "boss": Ruleset(
        name="boss",
        description="Five-card poker that also ranks flush and straight draws",
        cards_per_hand=5,
        hand_types=(
            H.STRAIGHT_FLUSH,
            H.FOUR_OF_A_KIND,
            H.FULL_HOUSE,
            H.FLUSH,
            H.STRAIGHT_FLUSH_DRAW_WITH_PAIR,
            H.STRAIGHT,
            H.STRAIGHT_FLUSH_DRAW_NO_PAIR,
            H.THREE_OF_A_KIND,
            H.FLUSH_DRAW_WITH_PAIR,
            H.STRAIGHT_DRAW_WITH_PAIR,
            H.TWO_PAIR,
            H.FLUSH_DRAW_NO_PAIR,
            H.STRAIGHT_DRAW_NO_PAIR,
            H.PAIR,
            H.HIGH_CARD,
        ),
        draw_qualify=4,
    ),

    "jacksbetter": Ruleset(
        name="jacksbetter",
        description="Video poker, a pair of jacks or better to qualify",
        cards_per_hand=5,
        hand_types=STANDARD_HANDS,
        lowest_qualifying=("Jc", "Jd", "4h", "3s", "2c"),
        suppress_kickers=True,
    ),

    "joker": Ruleset(
        name="joker",
        description="Joker poker, one joker wild, two pair or better to qualify",
        cards_per_hand=5,
        hand_types=(
            H.NATURAL_ROYAL_FLUSH,
            H.FIVE_OF_A_KIND,
            H.WILD_ROYAL_FLUSH,
            H.STRAIGHT_FLUSH,
            H.FOUR_OF_A_KIND,
            H.FULL_HOUSE,
            H.FLUSH,
            H.STRAIGHT,
            H.THREE_OF_A_KIND,
            H.TWO_PAIR,
            H.HIGH_CARD,
        ),
        wild_face="O",
        lowest_qualifying=("4c", "3d", "3h", "2s", "2c"),
        suppress_kickers=True,
    ),

    "deuceswild": Ruleset(
        name="deuceswild",
        description="Deuces wild video poker, three of a kind to qualify",
        cards_per_hand=5,
        hand_types=(
            H.NATURAL_ROYAL_FLUSH,
            H.FOUR_WILDS,
            H.WILD_ROYAL_FLUSH,
            H.FIVE_OF_A_KIND,
            H.STRAIGHT_FLUSH,
            H.FOUR_OF_A_KIND,
            H.FULL_HOUSE,
            H.FLUSH,
            H.STRAIGHT,
            H.THREE_OF_A_KIND,
            H.HIGH_CARD,
        ),
        wild_face="2",
        lowest_qualifying=("5c", "4d", "3h", "3s", "3c"),
        suppress_kickers=True,
    ),

    "threecard": Ruleset(
        name="threecard",
        description="Three card poker, dealer qualifies with queen high",
        cards_per_hand=3,
        hand_types=(
            H.STRAIGHT_FLUSH,
            H.THREE_OF_A_KIND,
            H.STRAIGHT,
            H.FLUSH,
            H.PAIR,
            H.HIGH_CARD,
        ),
        straight_flush_qualify=3,
        lowest_qualifying=("Qh", "3s", "2c"),
    ),

    "fourcard": Ruleset(
        name="fourcard",
        description="Four card poker",
        cards_per_hand=4,
        hand_types=FOUR_CARD_HANDS,
        straight_flush_qualify=4,
        suppress_kickers=True,
    ),

    "fourcardbonus": Ruleset(
        name="fourcardbonus",
        description="Four card poker bonus bet, a pair of aces to qualify",
        cards_per_hand=4,
        hand_types=FOUR_CARD_HANDS,
        straight_flush_qualify=4,
        lowest_qualifying=("Ac", "Ad", "3h", "2s"),
        suppress_kickers=True,
    ),

    "paigowpokerfull": Ruleset(
        name="paigowpokerfull",
        description="Pai Gow poker, best hand from all seven cards",
        cards_per_hand=7,
        hand_types=(
            H.FIVE_OF_A_KIND,
            H.FOUR_OF_A_KIND_PAIR_PLUS,
            H.STRAIGHT_FLUSH,
            H.FLUSH,
            H.STRAIGHT,
            H.FOUR_OF_A_KIND,
            H.TWO_THREE_OF_A_KIND,
            H.THREE_OF_A_KIND_TWO_PAIR,
            H.FULL_HOUSE,
            H.THREE_OF_A_KIND,
            H.THREE_PAIR,
            H.TWO_PAIR,
            H.PAIR,
            H.HIGH_CARD,
        ),
        **PAI_GOW,
    ),

    "paigowpokeralt": Ruleset(
        name="paigowpokeralt",
        description="Pai Gow poker, seven cards ranked by rank groups only",
        cards_per_hand=7,
        hand_types=(
            H.FOUR_OF_A_KIND,
            H.FULL_HOUSE,
            H.THREE_OF_A_KIND,
            H.THREE_PAIR,
            H.TWO_PAIR,
            H.PAIR,
            H.HIGH_CARD,
        ),
        **PAI_GOW,
    ),

    "paigowpokersf6": Ruleset(
        name="paigowpokersf6",
        description="Pai Gow bonus: six-card straights and flushes",
        cards_per_hand=7,
        hand_types=(H.STRAIGHT_FLUSH, H.FLUSH, H.STRAIGHT),
        straight_flush_qualify=6,
        requires_fallback=False,
        **PAI_GOW,
    ),

    "paigowpokersf7": Ruleset(
        name="paigowpokersf7",
        description="Pai Gow bonus: seven-card straights and flushes",
        cards_per_hand=7,
        hand_types=(H.STRAIGHT_FLUSH, H.FLUSH, H.STRAIGHT),
        straight_flush_qualify=7,
        requires_fallback=False,
        **PAI_GOW,
    ),

    "paigowpokerhi": Ruleset(
        name="paigowpokerhi",
        description="Pai Gow poker, five-card high hand",
        cards_per_hand=5,
        hand_types=(
            H.FIVE_OF_A_KIND,
            H.STRAIGHT_FLUSH,
            H.FOUR_OF_A_KIND,
            H.FULL_HOUSE,
            H.FLUSH,
            H.STRAIGHT,
            H.THREE_OF_A_KIND,
            H.TWO_PAIR,
            H.PAIR,
            H.HIGH_CARD,
        ),
        **PAI_GOW,
    ),

    "paigowpokerlo": Ruleset(
        name="paigowpokerlo",
        description="Pai Gow poker, two-card low hand",
        cards_per_hand=2,
        hand_types=(H.PAIR, H.HIGH_CARD),
        **PAI_GOW,
    ),
}


class RulesetRegistry:
    """
    Lookup table of named rulesets.

    Solvers take a registry instead of reading PRESETS directly, so
    callers (and tests) can add their own games without touching the
    built-in table.
    """

    def __init__(self, rulesets: Optional[Iterable[Ruleset]] = None, default: str = DEFAULT_GAME):
        self._rulesets: dict[str, Ruleset] = {}
        for ruleset in PRESETS.values() if rulesets is None else rulesets:
            self.register(ruleset)
        if default not in self._rulesets:
            raise KeyError(f"Default game {default!r} is not registered")
        self.default = default

    def register(self, ruleset: Ruleset) -> Ruleset:
        """Add or replace a ruleset under its own name."""
        self._rulesets[ruleset.name.lower()] = ruleset
        return ruleset

    def get(self, name: Optional[str]) -> Ruleset:
        """Ruleset by name. Unknown or empty names fall back to the default game."""
        key = (name or "").strip().lower()
        ruleset = self._rulesets.get(key)
        if ruleset is None:
            logger.debug("Unknown game %r, using %s", name, self.default)
            ruleset = self._rulesets[self.default]
        return ruleset

    def names(self) -> list[str]:
        return list(self._rulesets)

    def info(self, name: str) -> Optional[dict]:
        """Summary of a registered ruleset, or None when the name is unknown."""
        ruleset = self._rulesets.get(name.strip().lower())
        if ruleset is None:
            return None
        return ruleset.to_dict()

    def __contains__(self, name: str) -> bool:
        return name.strip().lower() in self._rulesets

    def __len__(self) -> int:
        return len(self._rulesets)


DEFAULT_REGISTRY = RulesetRegistry()


def get_preset(name: Optional[str]) -> Ruleset:
    """Get a preset ruleset by name (unknown names give the standard game)."""
    return DEFAULT_REGISTRY.get(name)


def list_presets() -> list[str]:
    """List all available preset names."""
    return DEFAULT_REGISTRY.names()


def get_preset_info(name: str) -> Optional[dict]:
    """Get info about a preset."""
    return DEFAULT_REGISTRY.info(name)
