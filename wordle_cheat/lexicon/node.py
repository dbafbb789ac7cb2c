"""
Dictionary graph node.

A node has exactly 26 outgoing slots (index 0 == 'a'); a slot is either None
or another node. Several parents may share one child, so the nodes form a
DAG rather than a tree. Nodes are never modified after construction and can
be read from any number of threads at once.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Optional, Tuple

from wordle_cheat.config import ALPHABET

_A = ord("a")


def slot_of(letter: str) -> int:
    """Map a letter to its slot index ('a' -> 0). Raises ValueError otherwise."""
    pos = ord(letter.lower()) - _A if len(letter) == 1 else -1
    if not 0 <= pos < len(ALPHABET):
        raise ValueError(f"not a letter a-z: {letter!r}")
    return pos


@dataclass(frozen=True, eq=False)
class DictionaryNode:
    id: int
    terminal: bool
    children: Tuple[Optional["DictionaryNode"], ...]
    # Letters with an outgoing edge, ascending; derived once from `children`.
    next_letters: Tuple[str, ...] = field(init=False, repr=False)

    def __post_init__(self):
        if len(self.children) != len(ALPHABET):
            raise ValueError(f"node {self.id} must have {len(ALPHABET)} slots")
        letters = tuple(ALPHABET[i] for i, c in enumerate(self.children) if c is not None)
        object.__setattr__(self, "next_letters", letters)

    def lookup(self, letter: str) -> Optional["DictionaryNode"]:
        return self.children[slot_of(letter)]

    def is_terminal(self) -> bool:
        return self.terminal

    def __repr__(self) -> str:
        mark = " (terminal)" if self.terminal else ""
        return f"<DictionaryNode {self.id}{mark} {''.join(self.next_letters)!r}>"
