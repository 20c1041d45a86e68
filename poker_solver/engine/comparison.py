"""
Ordering over solved hands and winner selection.
"""

import logging

logger = logging.getLogger(__name__)

# Only the first five played cards break ties, whatever the hand size.
TIEBREAK_CARDS = 5


def compare(a, b) -> int:
    """
    Compare two solved hands: 1 if `a` is stronger, -1 if weaker, 0 on a tie.

    Category rank decides first, then the effective ranks of the played
    cards position by position. Both hands are assumed to come from the
    same ruleset; category ranks from different games are not comparable.
    """
    if a.rank != b.rank:
        return 1 if a.rank > b.rank else -1
    for card_a, card_b in zip(a.cards[:TIEBREAK_CARDS], b.cards[:TIEBREAK_CARDS]):
        if card_a.rank != card_b.rank:
            return 1 if card_a.rank > card_b.rank else -1
    return 0


def qualifies_high(hand, reference) -> bool:
    """A hand qualifies when it is at least as strong as the game's lowest qualifying hand."""
    if reference is None:
        return True
    return compare(hand, reference) >= 0


def winners(hands: list) -> list:
    """
    Best hands among `hands`; several when they tie.

    Hands that failed to qualify are dropped first, then everything below
    the best category, then every hand that loses to another survivor.
    """
    qualified = [hand for hand in hands if hand.qualifies]
    if not qualified:
        logger.debug("No qualifying hands among %d", len(hands))
        return []

    best_rank = max(hand.rank for hand in qualified)
    contenders = [hand for hand in qualified if hand.rank == best_rank]
    result = [
        hand for hand in contenders
        if not any(compare(hand, other) < 0 for other in contenders)
    ]
    logger.debug("%d of %d hands win (%s)", len(result), len(hands), result[0].name)
    return result
