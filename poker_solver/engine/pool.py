"""
Per-attempt view of a card pool.

The detector builds a fresh HandContext for every evaluator it tries, so
wild cards always start unresolved. Wild ranks are recorded in the
context's side-table, never on the Card objects themselves.
"""

from dataclasses import dataclass
from typing import Iterable, NamedTuple, Optional

from .deck import ACE, LOW_ACE, UNRESOLVED, Card, Suit, display_face, face_for_rank
from .rules import Ruleset, WildPolicy


@dataclass(frozen=True)
class Slot:
    """One card of the pool. `index` is its position in the caller's input."""
    index: int
    card: Card
    rank: int     # Natural rank; UNRESOLVED for wild cards
    wild: bool = False


class RankedSlot(NamedTuple):
    """A slot together with the rank it plays at in a candidate hand."""
    rank: int
    slot: Slot


@dataclass(frozen=True)
class PlayedCard:
    """A card as it counts in a solved hand (wilds show the face they stand for)."""
    card: Card
    rank: int
    face: str
    wild: bool = False

    @property
    def token(self) -> str:
        suit = self.card.suit.value if self.card.suit else ""
        return f"{display_face(self.face)}{suit}"

    def __str__(self) -> str:
        return self.token


def plural_face(rank: int) -> str:
    """Plural face label used in descriptions: "A's", "10's"."""
    return f"{display_face(face_for_rank(rank))}'s"


class HandContext:
    """Card pool grouped by suit and rank, plus the wild-card side-table."""

    def __init__(self, cards: list[Card], ruleset: Ruleset):
        self.ruleset = ruleset
        self.cards = cards

        slots = [
            Slot(i, card, UNRESOLVED if ruleset.is_wild(card) else card.rank, ruleset.is_wild(card))
            for i, card in enumerate(cards)
        ]
        # Stable sort: equal ranks keep input order, wilds sink to the end
        self.slots: list[Slot] = sorted(slots, key=lambda s: s.rank, reverse=True)
        self.wilds: list[Slot] = [s for s in self.slots if s.wild]
        self.naturals: list[Slot] = [s for s in self.slots if not s.wild]

        self.by_suit: dict[Suit, list[Slot]] = {}
        self.by_rank: dict[int, list[Slot]] = {}
        for slot in self.naturals:
            self.by_suit.setdefault(slot.card.suit, []).append(slot)
            self.by_rank.setdefault(slot.rank, []).append(slot)

        self.resolved: dict[int, int] = {}

    @property
    def hand_size(self) -> int:
        return self.ruleset.cards_per_hand

    # Wild side-table -------------------------------------------------

    def rank_of(self, slot: Slot) -> int:
        if slot.wild:
            return self.resolved.get(slot.index, UNRESOLVED)
        return slot.rank

    def resolve(self, slot: Slot, rank: int) -> None:
        self.resolved[slot.index] = rank

    def commit(self, entries: Iterable[RankedSlot]) -> None:
        """Record the ranks wild cards play at in a chosen candidate."""
        for entry in entries:
            if entry.slot.wild:
                self.resolve(entry.slot, entry.rank)

    def unresolved_wilds(self) -> list[Slot]:
        return [w for w in self.wilds if w.index not in self.resolved]

    def ranked(self, slot: Slot) -> RankedSlot:
        return RankedSlot(self.rank_of(slot), slot)

    # Rank groups -----------------------------------------------------

    def wild_can_be(self, rank: int) -> bool:
        """Whether an unresolved wild may join a group of this rank."""
        if self.ruleset.wild_policy == WildPolicy.ANY_RANK:
            return True
        return rank == self.ruleset.wild_substitute_rank

    def count_for_rank(self, rank: int) -> int:
        """Natural cards of a rank plus the wilds that could join them."""
        count = len(self.by_rank.get(rank, []))
        if self.wild_can_be(rank):
            count += len(self.unresolved_wilds())
        return count

    def find_group(self, size: int, exclude: Iterable[int] = ()) -> Optional[int]:
        """
        Highest rank that can form a group of `size` cards.

        Ranks with natural cards are preferred; a group made only of wilds
        takes the highest rank the wild policy allows.
        """
        excluded = set(exclude)
        for rank in self.by_rank:
            if rank not in excluded and self.count_for_rank(rank) >= size:
                return rank
        if len(self.unresolved_wilds()) >= size:
            for rank in range(ACE, LOW_ACE, -1):
                if rank not in excluded and self.wild_can_be(rank):
                    return rank
        return None

    def take_group(self, rank: int, size: int) -> list[RankedSlot]:
        """Take `size` cards of a rank, resolving wilds to fill the group."""
        group = [RankedSlot(rank, s) for s in self.by_rank.get(rank, [])[:size]]
        for wild in self.unresolved_wilds():
            if len(group) >= size:
                break
            self.resolve(wild, rank)
            group.append(RankedSlot(rank, wild))
        return group

    def collect_groups(self, sizes: Iterable[int]) -> Optional[list[list[RankedSlot]]]:
        """Take one group per size, each of a different rank, or None if any is missing."""
        groups = []
        used = []
        for size in sizes:
            rank = self.find_group(size, exclude=used)
            if rank is None:
                return None
            groups.append(self.take_group(rank, size))
            used.append(rank)
        return groups

    def has_pair(self) -> bool:
        if any(self.count_for_rank(rank) >= 2 for rank in self.by_rank):
            return True
        return len(self.unresolved_wilds()) >= 2

    # Suits -----------------------------------------------------------

    def suited_count(self, suit: Suit) -> int:
        return len(self.by_suit.get(suit, [])) + len(self.unresolved_wilds())

    def flush_cards(self, suit: Suit) -> list[RankedSlot]:
        """Cards of a suit plus every unresolved wild, each wild at the highest missing rank."""
        entries = [self.ranked(s) for s in self.by_suit.get(suit, [])]
        for wild in self.unresolved_wilds():
            present = {e.rank for e in entries}
            rank = next((r for r in range(ACE, LOW_ACE, -1) if r not in present), LOW_ACE)
            self.resolve(wild, rank)
            entries.append(RankedSlot(rank, wild))
        return sorted(entries, key=lambda e: e.rank, reverse=True)

    # Kickers ---------------------------------------------------------

    def _leftover_rank(self, used: set[int]) -> int:
        if self.ruleset.wild_policy == WildPolicy.FIXED:
            return self.ruleset.wild_substitute_rank
        return next((r for r in range(ACE, LOW_ACE, -1) if r not in used), ACE)

    def kickers(self, selected: list[RankedSlot], count: int) -> list[RankedSlot]:
        """Highest remaining cards; wilds left over take their policy rank."""
        if count <= 0:
            return []
        taken = {e.slot.index for e in selected}
        used = {e.rank for e in selected}
        rest = []
        for slot in self.slots:
            if slot.index in taken:
                continue
            if slot.wild and self.rank_of(slot) == UNRESOLVED:
                rank = self._leftover_rank(used)
                self.resolve(slot, rank)
                used.add(rank)
            rest.append(self.ranked(slot))
        rest.sort(key=lambda e: e.rank, reverse=True)
        return rest[:count]

    def fill(self, selected: list[RankedSlot]) -> list[RankedSlot]:
        """Pad a pattern with kickers up to the hand size."""
        return selected + self.kickers(selected, self.hand_size - len(selected))

    def played(self, entries: Iterable[RankedSlot]) -> tuple[PlayedCard, ...]:
        cards = []
        for rank, slot in entries:
            face = face_for_rank(rank) if rank != UNRESOLVED else slot.card.face
            cards.append(PlayedCard(slot.card, rank, face, slot.wild))
        return tuple(cards)
