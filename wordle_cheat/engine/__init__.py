from .guess import Guess, Feedback
from .rules import Rule, NotInPuzzle, Mismatch, Match, Count, derive_rules
from .search import search, find_candidates
from .scoring import grade

__all__ = [
    "Guess", "Feedback",
    "Rule", "NotInPuzzle", "Mismatch", "Match", "Count", "derive_rules",
    "search", "find_candidates", "grade",
]
