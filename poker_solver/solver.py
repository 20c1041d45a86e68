"""
Poker hand solver.
Resolves games by name, solves hands, and picks winners.
"""

import argparse
import json
import logging
import re
import sys
from typing import Iterable, Optional, Union

from .engine import comparison
from .engine.deck import CardLike
from .engine.errors import SolverError
from .engine.hand_detector import HandDetector, SolvedHand
from .engine.rules import Ruleset
from .presets import DEFAULT_REGISTRY, RulesetRegistry

logger = logging.getLogger(__name__)

Game = Union[str, Ruleset, None]


class Solver:
    """
    Main solver class.

    Usage:
        solver = Solver()
        hand = solver.solve(["Ah", "Kh", "Qh", "Jh", "Th"], "standard")
        print(hand.description)

        # Or find the winners of a showdown:
        hands = solver.solve_all([["Ah", "Ad"], ["Kh", "Kd"]], "paigowpokerlo")
        print(solver.winners(hands))
    """

    def __init__(self, registry: Optional[RulesetRegistry] = None):
        self.registry = registry or DEFAULT_REGISTRY
        self._detectors: dict[Ruleset, HandDetector] = {}

    def ruleset(self, game: Game) -> Ruleset:
        """Ruleset for a preset name, a Ruleset, or None (the default game)."""
        if isinstance(game, Ruleset):
            return game
        return self.registry.get(game)

    def detector(self, game: Game) -> HandDetector:
        """Cached detector per ruleset, so qualifying reference hands are solved once."""
        ruleset = self.ruleset(game)
        if ruleset not in self._detectors:
            self._detectors[ruleset] = HandDetector(ruleset)
        return self._detectors[ruleset]

    def solve(self, cards: Iterable[CardLike], game: Game = None,
              can_disqualify: bool = False, id: str = "") -> SolvedHand:
        """
        Solve one hand.

        Args:
            cards: Card tokens ("Ah", "10d", "O") or Card objects
            game: Preset name or Ruleset; unknown names give the standard game
            can_disqualify: Check the hand against the game's lowest qualifying hand
            id: Caller's label for the hand, copied onto the result

        Returns:
            SolvedHand for the best hand type the cards make

        Raises:
            InvalidCardError, DuplicateCardError, NoMatchingHandError
        """
        return self.detector(game).detect(cards, can_disqualify, id)

    def try_solve(self, cards: Iterable[CardLike], game: Game = None,
                  can_disqualify: bool = False, id: str = "") -> Optional[SolvedHand]:
        """Solve one hand, or None when a bonus-only game finds nothing."""
        return self.detector(game).try_detect(cards, can_disqualify, id)

    def solve_all(self, hands: Iterable[Iterable[CardLike]], game: Game = None,
                  can_disqualify: bool = False) -> list[SolvedHand]:
        """Solve several hands under the same game; ids are their positions."""
        return [
            self.solve(cards, game, can_disqualify, id=str(i))
            for i, cards in enumerate(hands)
        ]

    def winners(self, hands: list[SolvedHand]) -> list[SolvedHand]:
        return comparison.winners(hands)

    def compare(self, a: SolvedHand, b: SolvedHand) -> int:
        return comparison.compare(a, b)


# Convenience functions
_default_solver: Optional[Solver] = None


def default_solver() -> Solver:
    global _default_solver
    if _default_solver is None:
        _default_solver = Solver()
    return _default_solver


def solve(cards: Iterable[CardLike], game: Game = None, can_disqualify: bool = False,
          id: str = "") -> SolvedHand:
    """Quick solve with the default solver."""
    return default_solver().solve(cards, game, can_disqualify, id)


def try_solve(cards: Iterable[CardLike], game: Game = None, can_disqualify: bool = False,
              id: str = "") -> Optional[SolvedHand]:
    """Quick try_solve with the default solver."""
    return default_solver().try_solve(cards, game, can_disqualify, id)


def solve_all(hands: Iterable[Iterable[CardLike]], game: Game = None,
              can_disqualify: bool = False) -> list[SolvedHand]:
    """Quick solve_all with the default solver."""
    return default_solver().solve_all(hands, game, can_disqualify)


def winners(hands: list[SolvedHand]) -> list[SolvedHand]:
    """Best hands of a showdown (several on a tie)."""
    return comparison.winners(hands)


# Command line -------------------------------------------------------------

def split_tokens(text: str) -> list[str]:
    """Card tokens from a string such as "Ah Kd, 10c"."""
    return [token for token in re.split(r"[\s,]+", text) if token]


def format_hand(hand: SolvedHand) -> str:
    flag = "" if hand.qualifies else "  (does not qualify)"
    return f"{hand.name}: {hand.description} [{hand}]{flag}"


def parse_args(argv: Optional[list[str]] = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(prog="poker-solver", description="Rank poker hands under named game rules")
    parser.add_argument("--game", default="standard", help="Preset name (unknown names use standard)")
    parser.add_argument("--json", action="store_true", help="Print results as JSON")
    parser.add_argument("--verbose", action="store_true", help="Log every evaluator attempt")
    commands = parser.add_subparsers(dest="command", required=True)

    solve_cmd = commands.add_parser("solve", help="Solve one hand")
    solve_cmd.add_argument("cards", nargs="+", help="Card tokens, e.g. Ah Kh Qh Jh 10h")
    solve_cmd.add_argument("--disqualify", action="store_true", help="Check the game's qualifier")

    winners_cmd = commands.add_parser("winners", help="Solve several hands and print the winners")
    winners_cmd.add_argument("hands", nargs="+", help='One quoted hand per argument, e.g. "Ah Ad 3c 4d 9s"')
    winners_cmd.add_argument("--disqualify", action="store_true", help="Drop hands that do not qualify")

    commands.add_parser("presets", help="List the available games")
    return parser.parse_args(argv)


def run_command(args: argparse.Namespace, solver: Solver) -> None:
    if args.command == "presets":
        rows = [solver.registry.info(name) for name in solver.registry.names()]
        if args.json:
            print(json.dumps(rows, indent=2))
        else:
            for row in rows:
                print(f"{row['name']:<16} {row['cards_per_hand']} cards  {row['description']}")
        return

    if args.command == "solve":
        hand = solver.solve(args.cards, args.game, args.disqualify)
        print(json.dumps(hand.to_dict(), indent=2) if args.json else format_hand(hand))
        return

    hands = solver.solve_all([split_tokens(text) for text in args.hands], args.game, args.disqualify)
    best = solver.winners(hands)
    if args.json:
        print(json.dumps({
            "hands": [hand.to_dict() for hand in hands],
            "winners": [int(hand.id) for hand in best],
        }, indent=2))
        return
    winning_ids = {hand.id for hand in best}
    for hand in hands:
        marker = "*" if hand.id in winning_ids else " "
        print(f"{marker} {hand.id}: {format_hand(hand)}")


def main(argv: Optional[list[str]] = None) -> int:
    args = parse_args(argv)
    logging.basicConfig(level=logging.DEBUG if args.verbose else logging.INFO)
    try:
        run_command(args, Solver())
    except SolverError as exc:
        logger.error("%s", exc)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
