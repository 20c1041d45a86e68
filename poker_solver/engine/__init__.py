"""
Poker hand solver engine components.
"""

from .deck import Card, Suit, RANKS, RANK_ORDER, parse_card, parse_cards, sort_cards
from .errors import SolverError, InvalidCardError, DuplicateCardError, RulesetError, NoMatchingHandError
from .hand_types import HandType, hand_type_from_name
from .rules import Ruleset, WildPolicy, WheelPolicy
from .straights import DrawShape
from .hand_detector import SolvedHand, HandDetector, detect_hand
from .comparison import compare, winners, qualifies_high
