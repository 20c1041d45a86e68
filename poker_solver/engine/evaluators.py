"""
Hand-type evaluators.
Each evaluator looks at one HandContext and either returns a Match or None.
"""

from dataclasses import dataclass
from typing import Callable, Optional

from .deck import ACE, Suit, display_face, face_for_rank
from .hand_types import HandType
from .pool import HandContext, RankedSlot, plural_face
from .rules import WheelPolicy
from .straights import DrawShape, StraightRun, draw_shape, find_straight


@dataclass
class Match:
    """What an evaluator found: the selected cards plus structured flags."""
    hand_type: HandType
    entries: list[RankedSlot]
    description: str
    name: Optional[str] = None          # Overrides the hand type's display name
    made_length: int = 0                # Length of the straight/flush pattern, if any
    is_royal: bool = False
    is_wheel: bool = False
    draw_shape: Optional[DrawShape] = None
    suit: Optional[Suit] = None
    run: Optional[StraightRun] = None   # Straight the match was built on

    @property
    def display_name(self) -> str:
        return self.name or self.hand_type.display_name


Evaluator = Callable[[HandContext], Optional[Match]]


# Helpers ---------------------------------------------------------------

def _face(rank: int) -> str:
    return display_face(face_for_rank(rank))


def _trim(ctx: HandContext, entries: list[RankedSlot], size: int) -> list[RankedSlot]:
    """Drop kickers when the game compares only the defining cards."""
    if ctx.ruleset.suppress_kickers:
        return entries[:size]
    return entries


def _naturals(ctx: HandContext, suit: Optional[Suit] = None) -> list[RankedSlot]:
    slots = ctx.naturals if suit is None else ctx.by_suit.get(suit, [])
    return [ctx.ranked(s) for s in slots]


def _straight(ctx: HandContext, suit: Optional[Suit] = None) -> Optional[StraightRun]:
    rules = ctx.ruleset
    return find_straight(
        _naturals(ctx, suit),
        ctx.unresolved_wilds(),
        rules.straight_flush_qualify,
        ctx.hand_size,
        rules.wheel_policy,
    )


def _plays_as_wheel(run: StraightRun, ctx: HandContext) -> bool:
    return run.is_wheel and ctx.ruleset.wheel_policy == WheelPolicy.SECOND_HIGHEST


def _straight_label(run: StraightRun, ctx: HandContext) -> str:
    if _plays_as_wheel(run, ctx):
        return "Wheel"
    return f"{_face(run.top)} High"


def _flush_suit(ctx: HandContext, qualify: int) -> Optional[Suit]:
    """First suit (highest card first) holding at least `qualify` cards with wilds."""
    for suit in ctx.by_suit:
        if ctx.suited_count(suit) >= qualify:
            return suit
    return None


def _groups(ctx: HandContext, hand_type: HandType, sizes: list[int],
            describe: Callable[[list[int]], str], trim: Optional[int] = None) -> Optional[Match]:
    """Shared body of the rank-group evaluators (pairs, trips, quads, houses...)."""
    groups = ctx.collect_groups(sizes)
    if groups is None:
        return None
    selected = [entry for group in groups for entry in group]
    entries = ctx.fill(selected)
    if trim is not None:
        entries = _trim(ctx, entries, trim)
    ranks = [group[0].rank for group in groups]
    return Match(hand_type, entries, f"{hand_type.display_name}, {describe(ranks)}")


# Straight flush family -------------------------------------------------

def straight_flush(ctx: HandContext) -> Optional[Match]:
    qualify = ctx.ruleset.straight_flush_qualify
    for suit in ctx.by_suit:
        if ctx.suited_count(suit) < qualify:
            continue
        run = _straight(ctx, suit)
        if run is None or len(run) < qualify:
            continue

        ctx.commit(run.entries)
        entries = ctx.fill(list(run.entries))
        is_royal = run.top == ACE and not run.is_wheel
        if is_royal:
            return Match(HandType.STRAIGHT_FLUSH, entries, "Royal Flush", name="Royal Flush",
                         made_length=len(run), is_royal=True, suit=suit, run=run)

        if _plays_as_wheel(run, ctx):
            label = "Wheel"
        else:
            label = f"{_face(run.top)}{suit.value} High"
        return Match(HandType.STRAIGHT_FLUSH, entries, f"Straight Flush, {label}",
                     made_length=len(run), is_wheel=run.is_wheel, suit=suit, run=run)
    return None


def _royal(ctx: HandContext, hand_type: HandType, wild: Optional[bool]) -> Optional[Match]:
    match = straight_flush(ctx)
    if match is None or not match.is_royal:
        return None
    uses_wild = match.run.uses_wild
    if wild is not None and uses_wild != wild:
        return None
    description = "Wild Royal Flush" if uses_wild and wild else "Royal Flush"
    return Match(hand_type, match.entries, description, made_length=match.made_length,
                 is_royal=True, suit=match.suit, run=match.run)


def royal_flush(ctx: HandContext) -> Optional[Match]:
    return _royal(ctx, HandType.ROYAL_FLUSH, None)


def natural_royal_flush(ctx: HandContext) -> Optional[Match]:
    return _royal(ctx, HandType.NATURAL_ROYAL_FLUSH, False)


def wild_royal_flush(ctx: HandContext) -> Optional[Match]:
    return _royal(ctx, HandType.WILD_ROYAL_FLUSH, True)


# Rank groups -----------------------------------------------------------

def five_of_a_kind(ctx: HandContext) -> Optional[Match]:
    return _groups(ctx, HandType.FIVE_OF_A_KIND, [5], lambda r: plural_face(r[0]))


def four_of_a_kind_pair_plus(ctx: HandContext) -> Optional[Match]:
    return _groups(ctx, HandType.FOUR_OF_A_KIND_PAIR_PLUS, [4, 2],
                   lambda r: f"{plural_face(r[0])} over {plural_face(r[1])}")


def four_of_a_kind(ctx: HandContext) -> Optional[Match]:
    return _groups(ctx, HandType.FOUR_OF_A_KIND, [4], lambda r: plural_face(r[0]), trim=4)


def four_wilds(ctx: HandContext) -> Optional[Match]:
    """Exactly four wild cards, left unresolved."""
    if len(ctx.wilds) != 4:
        return None
    selected = [ctx.ranked(w) for w in ctx.wilds]
    entries = _trim(ctx, ctx.fill(selected), 4)
    return Match(HandType.FOUR_WILDS, entries, HandType.FOUR_WILDS.display_name)


def two_three_of_a_kind(ctx: HandContext) -> Optional[Match]:
    return _groups(ctx, HandType.TWO_THREE_OF_A_KIND, [3, 3],
                   lambda r: f"{plural_face(r[0])} & {plural_face(r[1])}")


def three_of_a_kind_two_pair(ctx: HandContext) -> Optional[Match]:
    return _groups(ctx, HandType.THREE_OF_A_KIND_TWO_PAIR, [3, 2, 2],
                   lambda r: f"{plural_face(r[0])} over {plural_face(r[1])} & {plural_face(r[2])}")


def full_house(ctx: HandContext) -> Optional[Match]:
    return _groups(ctx, HandType.FULL_HOUSE, [3, 2],
                   lambda r: f"{plural_face(r[0])} over {plural_face(r[1])}")


def three_of_a_kind(ctx: HandContext) -> Optional[Match]:
    return _groups(ctx, HandType.THREE_OF_A_KIND, [3], lambda r: plural_face(r[0]), trim=3)


def three_pair(ctx: HandContext) -> Optional[Match]:
    return _groups(ctx, HandType.THREE_PAIR, [2, 2, 2],
                   lambda r: " & ".join(plural_face(rank) for rank in r))


def two_pair(ctx: HandContext) -> Optional[Match]:
    return _groups(ctx, HandType.TWO_PAIR, [2, 2],
                   lambda r: f"{plural_face(r[0])} & {plural_face(r[1])}", trim=4)


def pair(ctx: HandContext) -> Optional[Match]:
    return _groups(ctx, HandType.PAIR, [2], lambda r: plural_face(r[0]), trim=2)


def high_card(ctx: HandContext) -> Optional[Match]:
    """Always matches. Unresolved wilds play as aces."""
    if not ctx.slots:
        return None
    for wild in ctx.unresolved_wilds():
        ctx.resolve(wild, ACE)
    entries = sorted((ctx.ranked(s) for s in ctx.slots), key=lambda e: e.rank, reverse=True)
    entries = _trim(ctx, entries[:ctx.hand_size], 1)
    return Match(HandType.HIGH_CARD, entries, f"{_face(entries[0].rank)} High")


# Flush and straight ----------------------------------------------------

def flush(ctx: HandContext) -> Optional[Match]:
    suit = _flush_suit(ctx, ctx.ruleset.straight_flush_qualify)
    if suit is None:
        return None
    cards = ctx.flush_cards(suit)[:ctx.hand_size]
    entries = ctx.fill(cards)
    return Match(HandType.FLUSH, entries, f"Flush, {_face(cards[0].rank)}{suit.value} High",
                 made_length=len(cards), suit=suit)


def straight(ctx: HandContext) -> Optional[Match]:
    run = _straight(ctx)
    if run is None or len(run) < ctx.ruleset.straight_flush_qualify:
        return None
    ctx.commit(run.entries)
    entries = ctx.fill(list(run.entries))
    return Match(HandType.STRAIGHT, entries, f"Straight, {_straight_label(run, ctx)}",
                 made_length=len(run), is_wheel=run.is_wheel)


# Draws -----------------------------------------------------------------

def _draw_name(hand_type: HandType, shape: DrawShape) -> str:
    if shape == DrawShape.GUTSHOT:
        return f"Gutshot {hand_type.display_name}"
    return hand_type.display_name


def _straight_draw(ctx: HandContext) -> Optional[StraightRun]:
    run = _straight(ctx)
    if run is None or len(run) < ctx.ruleset.draw_qualify:
        return None
    return run


def _straight_flush_draw(ctx: HandContext, hand_type: HandType) -> Optional[Match]:
    if hand_type.needs_pair and not ctx.has_pair():
        return None
    suit = _flush_suit(ctx, ctx.ruleset.draw_qualify)
    if suit is None:
        return None
    run = _straight_draw(ctx)
    if run is None:
        return None

    ctx.commit(run.entries)
    shape = draw_shape(run)
    name = _draw_name(hand_type, shape)
    return Match(hand_type, ctx.fill(list(run.entries)), f"{name}, {_face(run.top)}{suit.value} High",
                 name=name, made_length=len(run), is_wheel=run.is_wheel, draw_shape=shape, suit=suit)


def straight_flush_draw_with_pair(ctx: HandContext) -> Optional[Match]:
    return _straight_flush_draw(ctx, HandType.STRAIGHT_FLUSH_DRAW_WITH_PAIR)


def straight_flush_draw_no_pair(ctx: HandContext) -> Optional[Match]:
    return _straight_flush_draw(ctx, HandType.STRAIGHT_FLUSH_DRAW_NO_PAIR)


def _flush_draw(ctx: HandContext, hand_type: HandType) -> Optional[Match]:
    if hand_type.needs_pair and not ctx.has_pair():
        return None
    suit = _flush_suit(ctx, ctx.ruleset.draw_qualify)
    if suit is None:
        return None
    cards = ctx.flush_cards(suit)[:ctx.hand_size]
    return Match(hand_type, ctx.fill(cards),
                 f"{hand_type.display_name}, {_face(cards[0].rank)}{suit.value} High",
                 made_length=len(cards), suit=suit)


def flush_draw_with_pair(ctx: HandContext) -> Optional[Match]:
    return _flush_draw(ctx, HandType.FLUSH_DRAW_WITH_PAIR)


def flush_draw_no_pair(ctx: HandContext) -> Optional[Match]:
    return _flush_draw(ctx, HandType.FLUSH_DRAW_NO_PAIR)


def _open_straight_draw(ctx: HandContext, hand_type: HandType) -> Optional[Match]:
    if hand_type.needs_pair and not ctx.has_pair():
        return None
    run = _straight_draw(ctx)
    if run is None:
        return None

    ctx.commit(run.entries)
    shape = draw_shape(run)
    name = _draw_name(hand_type, shape)
    return Match(hand_type, ctx.fill(list(run.entries)), f"{name}, {_straight_label(run, ctx)}",
                 name=name, made_length=len(run), is_wheel=run.is_wheel, draw_shape=shape)


def straight_draw_with_pair(ctx: HandContext) -> Optional[Match]:
    return _open_straight_draw(ctx, HandType.STRAIGHT_DRAW_WITH_PAIR)


def straight_draw_no_pair(ctx: HandContext) -> Optional[Match]:
    return _open_straight_draw(ctx, HandType.STRAIGHT_DRAW_NO_PAIR)


EVALUATORS: dict[HandType, Evaluator] = {
    HandType.ROYAL_FLUSH: royal_flush,
    HandType.NATURAL_ROYAL_FLUSH: natural_royal_flush,
    HandType.WILD_ROYAL_FLUSH: wild_royal_flush,
    HandType.FIVE_OF_A_KIND: five_of_a_kind,
    HandType.FOUR_WILDS: four_wilds,
    HandType.STRAIGHT_FLUSH: straight_flush,
    HandType.FOUR_OF_A_KIND_PAIR_PLUS: four_of_a_kind_pair_plus,
    HandType.FOUR_OF_A_KIND: four_of_a_kind,
    HandType.TWO_THREE_OF_A_KIND: two_three_of_a_kind,
    HandType.THREE_OF_A_KIND_TWO_PAIR: three_of_a_kind_two_pair,
    HandType.FULL_HOUSE: full_house,
    HandType.FLUSH: flush,
    HandType.STRAIGHT: straight,
    HandType.THREE_OF_A_KIND: three_of_a_kind,
    HandType.THREE_PAIR: three_pair,
    HandType.TWO_PAIR: two_pair,
    HandType.PAIR: pair,
    HandType.HIGH_CARD: high_card,
    HandType.STRAIGHT_FLUSH_DRAW_WITH_PAIR: straight_flush_draw_with_pair,
    HandType.STRAIGHT_FLUSH_DRAW_NO_PAIR: straight_flush_draw_no_pair,
    HandType.FLUSH_DRAW_WITH_PAIR: flush_draw_with_pair,
    HandType.FLUSH_DRAW_NO_PAIR: flush_draw_no_pair,
    HandType.STRAIGHT_DRAW_WITH_PAIR: straight_draw_with_pair,
    HandType.STRAIGHT_DRAW_NO_PAIR: straight_draw_no_pair,
}


def evaluate(hand_type: HandType, ctx: HandContext) -> Optional[Match]:
    return EVALUATORS[hand_type](ctx)
