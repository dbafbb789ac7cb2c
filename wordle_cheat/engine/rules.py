"""
Constraints derived from guesses.

Every rule answers two questions during the search:
  apply(letter, position, state) -> (accepted, new_state)
      called for each letter placed; a False rejects the branch at once.
  satisfied(state) -> bool
      called once a full word has been built.

Rules are immutable. Per-branch state (only Count uses it) is passed in and
returned, never stored on the rule, so one rule list can drive any number of
searches or sibling branches at the same time.
"""

from __future__ import annotations

from collections import Counter
from dataclasses import dataclass
from typing import Any, Iterable, List, Tuple

from .guess import Feedback, Guess


@dataclass(frozen=True)
class Rule:
    letter: str

    def initial_state(self) -> Any:
        return None

    def apply(self, letter: str, position: int, state: Any) -> Tuple[bool, Any]:
        raise NotImplementedError("Override in subclass")

    def satisfied(self, state: Any) -> bool:
        return True


@dataclass(frozen=True)
class NotInPuzzle(Rule):
    """`letter` appears nowhere in the answer."""

    def apply(self, letter, position, state):
        return letter != self.letter, state


@dataclass(frozen=True)
class Mismatch(Rule):
    """`letter` is not at `position` (it was seen there and it was not green)."""
    position: int

    def apply(self, letter, position, state):
        return not (position == self.position and letter == self.letter), state


@dataclass(frozen=True)
class Match(Rule):
    """`letter` is exactly at `position`."""
    position: int

    def apply(self, letter, position, state):
        return position != self.position or letter == self.letter, state


@dataclass(frozen=True)
class Count(Rule):
    """The answer contains `letter` at least `count` times."""
    count: int

    def initial_state(self) -> int:
        return 0

    def apply(self, letter, position, state):
        return True, state + 1 if letter == self.letter else state

    def satisfied(self, state) -> bool:
        return state >= self.count


def rules_for_guess(guess: Guess) -> List[Rule]:
    """
    Rules implied by one guess on its own.

    An absent letter that is also marked present elsewhere in the same guess
    is a duplicate the answer holds fewer times; it is only excluded from that
    position, not from the whole word.
    """
    present = Counter(letter for letter, fb in guess.letters if fb.present)
    rules: List[Rule] = []

    for i, (letter, fb) in enumerate(guess.letters):
        if fb is Feedback.ABSENT:
            if letter in present:
                rules.append(Mismatch(letter, i))
            else:
                rules.append(NotInPuzzle(letter))
        elif fb is Feedback.CORRECT_POSITION:
            rules.append(Match(letter, i))
        else:
            rules.append(Mismatch(letter, i))

    # One count per distinct present letter; insertion order keeps this stable.
    rules.extend(Count(letter, n) for letter, n in present.items())
    return rules


def derive_rules(guesses: Iterable[Guess]) -> List[Rule]:
    """
    Rules for a list of guesses: the concatenation of each guess's rules.

    Nothing is merged across guesses. Two Count rules on the same letter
    both have to hold, which is the same as requiring the larger count.
    """
    rules: List[Rule] = []
    for g in guesses:
        rules.extend(rules_for_guess(g))
    return rules
