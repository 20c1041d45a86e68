"""
Straight detection.

Every straight-family evaluator (straights, straight flushes, straight
draws) goes through find_straight(): wheel search for games where the
wheel ranks second, then the gap scan, then wild slotting.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Optional

from .deck import ACE, LOW_ACE, UNRESOLVED
from .pool import RankedSlot, Slot
from .rules import WheelPolicy


class DrawShape(Enum):
    OPEN_ENDED = "open_ended"
    GUTSHOT = "gutshot"


@dataclass
class StraightRun:
    """A candidate straight: cards high to low at the ranks they play."""
    entries: list[RankedSlot]
    is_wheel: bool = False

    def __len__(self) -> int:
        return len(self.entries)

    @property
    def top(self) -> int:
        return self.entries[0].rank

    @property
    def uses_wild(self) -> bool:
        return any(e.slot.wild for e in self.entries)


def with_low_aces(entries: list[RankedSlot]) -> list[RankedSlot]:
    """Add a low-ace entry for every ace so A-2-3-4-5 can be found; sorted high to low."""
    extended = list(entries)
    extended.extend(RankedSlot(LOW_ACE, e.slot) for e in entries if e.rank == ACE)
    return sorted(extended, key=lambda e: e.rank, reverse=True)


def scan_gaps(entries: list[RankedSlot], length: int, wild_count: int,
              qualify: int, top: Optional[int] = None) -> list[RankedSlot]:
    """
    Longest run of descending ranks whose span fits in `length` slots.

    Candidate ceilings are tried from the top down (one above the ace, or
    one above `top` when given). For each ceiling the run collects
    strictly lower ranks while cards plus skipped ranks stay within
    `length`. The longest run wins, ties going to the higher ceiling, and
    the scan stops as soon as the missing cards could be covered by
    `wild_count` wilds.
    """
    candidates = with_low_aces([e for e in entries if e.rank != UNRESOLVED])
    if not candidates:
        return []

    start = top + 1 if top is not None else ACE + 1
    best: list[RankedSlot] = []
    for ceiling in range(start, LOW_ACE, -1):
        run: list[RankedSlot] = []
        gaps = 0
        for entry in candidates:
            if entry.rank > ceiling:
                continue
            previous = run[-1].rank if run else ceiling
            diff = previous - entry.rank
            if length < gaps + diff + len(run):
                break
            if diff > 0:
                run.append(entry)
                gaps += diff - 1
        if len(run) > len(best):
            best = run
        if qualify - len(best) <= wild_count:
            break
    return best


def _first_gap(run: list[RankedSlot]) -> Optional[int]:
    for upper, lower in zip(run, run[1:]):
        if upper.rank - lower.rank > 1:
            return upper.rank - 1
    return None


def slot_wilds(run: list[RankedSlot], wilds: list[Slot], limit: int) -> list[RankedSlot]:
    """
    Place wilds into a run, one at a time, until the run reaches `limit`.

    The run is re-scanned at its own length to see whether it has an
    inside gap. A gapless run is extended at the open end (above the top
    card, or below the bottom when the top is an ace); otherwise the
    highest inside gap is filled.
    """
    run = list(run)
    for wild in wilds:
        if len(run) >= limit:
            break
        if not run:
            rank = ACE
        else:
            check = scan_gaps(run, len(run), 0, len(run), top=run[0].rank)
            if len(check) == len(run):
                rank = run[0].rank + 1 if run[0].rank < ACE else run[-1].rank - 1
            else:
                rank = _first_gap(run)
        if rank is None or rank < LOW_ACE:
            break
        run.append(RankedSlot(rank, wild))
        run.sort(key=lambda e: e.rank, reverse=True)
    return run


def find_wheel(naturals: list[RankedSlot], wilds: list[Slot], qualify: int) -> Optional[StraightRun]:
    """
    A-2-3-4-5 (or longer, for longer qualifiers) with wilds filling holes.

    Used by games where the wheel is the second-best straight: the ace
    (natural or wild) plays high in the returned run.
    """
    candidates = with_low_aces(naturals)
    wheel: list[RankedSlot] = []
    spare = list(wilds)
    for rank in range(qualify - 1, LOW_ACE - 1, -1):
        match = next((e for e in candidates if e.rank == rank), None)
        if match is not None:
            wheel.append(match)
        elif spare:
            wheel.append(RankedSlot(rank, spare.pop(0)))
        else:
            return None

    wheel = [RankedSlot(ACE, e.slot) if e.rank == LOW_ACE else e for e in wheel]
    wheel.sort(key=lambda e: e.rank, reverse=True)
    return StraightRun(wheel, is_wheel=True)


def find_straight(naturals: list[RankedSlot], wilds: list[Slot], qualify: int,
                  limit: int, wheel_policy: WheelPolicy = WheelPolicy.LOW) -> Optional[StraightRun]:
    """
    Best straight candidate from a set of cards, or None when there are no cards.

    The returned run may be shorter than `qualify`; callers decide whether
    it is a made straight or only a draw. Wild ranks are not committed.
    """
    if wheel_policy == WheelPolicy.SECOND_HIGHEST:
        wheel = find_wheel(naturals, wilds, qualify)
        if wheel is not None:
            return wheel

    run = scan_gaps(naturals, qualify, len(wilds), qualify)
    run = slot_wilds(run, wilds, limit)[:limit]
    if not run:
        return None
    return StraightRun(run, is_wheel=run[-1].rank == LOW_ACE)


def draw_shape(run: StraightRun) -> DrawShape:
    """
    Open-ended when the run is unbroken and no ace caps either end.

    This is a heuristic: an unbroken run capped by an ace can only be
    completed from one side, so it is counted as a gutshot.
    """
    ranks = [e.rank for e in run.entries]
    unbroken = ranks[0] - ranks[-1] == len(ranks) - 1
    capped = ranks[0] == ACE or ranks[-1] == LOW_ACE
    if unbroken and not capped:
        return DrawShape.OPEN_ENDED
    return DrawShape.GUTSHOT
