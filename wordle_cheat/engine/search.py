"""
Candidate search: walk the dictionary graph depth-first, one letter per
position, and keep only branches every rule accepts.

Only letters with an outgoing edge from the current node are tried, so the
search never leaves the dictionary. At the last position a word is kept if
the node is terminal and every rule is satisfied (this is where Count rules
reject words that never used a required letter often enough).

Per-rule state travels as a tuple rebuilt for each branch; sibling branches
never share mutable state.
"""

from __future__ import annotations

import logging
from typing import Any, List, Optional, Sequence, Set, Tuple

from wordle_cheat.config import WORD_LENGTH
from wordle_cheat.lexicon import Dictionary, DictionaryNode, get_dictionary
from .guess import Guess
from .rules import Rule, derive_rules

log = logging.getLogger(__name__)


def _advance(rules: Sequence[Rule], states: Tuple[Any, ...], letter: str,
             position: int) -> Optional[Tuple[Any, ...]]:
    """Apply every rule to `letter`; None as soon as one rejects it."""
    out = []
    for rule, state in zip(rules, states):
        ok, state = rule.apply(letter, position, state)
        if not ok:
            return None
        out.append(state)
    return tuple(out)


def search(dictionary: Dictionary, rules: Sequence[Rule], word_length: int = WORD_LENGTH) -> List[str]:
    """
    Every dictionary word of `word_length` letters that all `rules` accept,
    sorted and without duplicates. With no rules, every word of that length.
    """
    rules = list(rules)
    found: Set[str] = set()
    visited = 0

    def walk(node: DictionaryNode, prefix: str, states: Tuple[Any, ...]) -> None:
        nonlocal visited
        visited += 1
        i = len(prefix)
        if i == word_length:
            if dictionary.is_terminal(node) and all(
                    r.satisfied(s) for r, s in zip(rules, states)):
                found.add(prefix)
            return
        for letter in dictionary.next_letters(node):
            next_states = _advance(rules, states, letter, i)
            if next_states is None:
                continue
            walk(dictionary.lookup(node, letter), prefix + letter, next_states)

    walk(dictionary.root, "", tuple(r.initial_state() for r in rules))
    log.debug("search: %d rules, %d nodes visited, %d words", len(rules), visited, len(found))
    return sorted(found)


def find_candidates(
        guesses: Sequence[Guess],
        dictionary: Optional[Dictionary] = None,
        word_length: int = WORD_LENGTH,
) -> Optional[List[str]]:
    """
    Words consistent with all `guesses`.

    Returns None when no guess has been made yet (nothing to go on), which
    is different from an empty list (no word fits).
    Uses the process-wide dictionary unless one is passed in.
    """
    if not guesses:
        return None
    if dictionary is None:
        dictionary = get_dictionary()
    return search(dictionary, derive_rules(guesses), word_length)
