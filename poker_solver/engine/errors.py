"""
Exceptions raised by the hand solver.
"""


class SolverError(Exception):
    """Base class for every error raised by poker_solver."""


class InvalidCardError(SolverError, ValueError):
    """A card token has an unknown rank or suit character."""

    def __init__(self, token: str, reason: str):
        self.token = token
        super().__init__(f"Invalid card {token!r}: {reason}")


class DuplicateCardError(SolverError, ValueError):
    """The same card appears twice in a game that forbids it."""

    def __init__(self, duplicates: list[str], game: str):
        self.duplicates = duplicates
        self.game = game
        super().__init__(f"Duplicate cards in {game} game: {', '.join(duplicates)}")


class RulesetError(SolverError, ValueError):
    """A ruleset definition is inconsistent."""


class NoMatchingHandError(SolverError, LookupError):
    """No hand type in the ruleset matched the cards."""

    def __init__(self, game: str, cards: list[str]):
        self.game = game
        self.cards = cards
        super().__init__(f"No {game} hand type matches: {', '.join(cards)}")
