"""
Poker Hand Solver
"""

from .engine.deck import Card, Suit, parse_card, parse_cards
from .engine.errors import SolverError, InvalidCardError, DuplicateCardError, RulesetError, NoMatchingHandError
from .engine.hand_types import HandType
from .engine.hand_detector import SolvedHand, HandDetector, detect_hand
from .engine.rules import Ruleset, WildPolicy, WheelPolicy
from .presets import RulesetRegistry, get_preset, list_presets, get_preset_info
from .solver import Solver, solve, solve_all, try_solve, winners

__version__ = "0.1.0"
