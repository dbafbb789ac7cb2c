"""
Compile a word list into the serialized dictionary graph.

Words must arrive in ascending order. After each insertion, the part of the
previous word that is no longer shared with the new word can never change
again, so its nodes are "minimized": a node equal to one already seen (same
terminal flag, same children) is replaced by that earlier node. This merges
common suffixes ("-ight", "-tion") into single nodes as we go, and the graph
never holds more than one unminimized branch.

Typical use:
    b = DictionaryBuilder()
    for w in sorted(words):
        b.insert(w)
    text = b.serialize()
"""

from __future__ import annotations

import logging
from typing import Dict, Iterable, List, Optional, Tuple

from wordle_cheat.config import ALPHABET
from .dictionary import Dictionary
from .node import slot_of

log = logging.getLogger(__name__)


class _Draft:
    """Mutable node used only while building."""
    __slots__ = ("terminal", "children")

    def __init__(self):
        self.terminal = False
        self.children: List[Optional[int]] = [None] * len(ALPHABET)

    def key(self) -> Tuple:
        return (self.terminal, tuple(self.children))


class DictionaryBuilder:
    def __init__(self):
        self._drafts: List[_Draft] = [_Draft()]  # index 0 is the root
        # (parent index, slot, child index) along the newest word, not yet minimized
        self._unchecked: List[Tuple[int, int, int]] = []
        self._minimized: Dict[Tuple, int] = {}
        self._previous = ""
        self._count = 0
        self._finished = False

    @property
    def word_count(self) -> int:
        return self._count

    def insert(self, word: str) -> None:
        """
        Add one word. Raises ValueError for an empty/non a-z word, a word that
        sorts before the previous one, or insertion after serialize().
        """
        if self._finished:
            raise ValueError("builder already serialized; create a new one")
        w = word.strip().lower()
        if not w or not w.isascii() or not w.isalpha():
            raise ValueError(f"not a word of letters a-z: {word!r}")
        if w == self._previous:
            return  # repeated word; nothing to add
        if w < self._previous:
            raise ValueError(f"words must be inserted in sorted order: {w!r} after {self._previous!r}")

        prefix = _common_prefix(self._previous, w)
        self._minimize(prefix)

        node = self._unchecked[-1][2] if self._unchecked else 0
        for letter in w[prefix:]:
            child = len(self._drafts)
            self._drafts.append(_Draft())
            slot = slot_of(letter)
            self._drafts[node].children[slot] = child
            self._unchecked.append((node, slot, child))
            node = child
        self._drafts[node].terminal = True

        self._previous = w
        self._count += 1

    def serialize(self) -> str:
        """
        Finish minimization and return the record stream.

        Reachable nodes are renumbered 0..n-1 in post-order so that every child
        is written before its parents; the root is the final record.
        """
        if not self._finished:
            self._minimize(0)
            self._finished = True

        ids: Dict[int, int] = {}
        records: List[str] = []

        def emit(idx: int) -> int:
            if idx in ids:
                return ids[idx]
            draft = self._drafts[idx]
            edges = []
            for slot, child in enumerate(draft.children):
                if child is not None:
                    edges.append(f" {slot}:{emit(child)}")
            new_id = len(records)
            ids[idx] = new_id
            records.append(f"[{new_id}{'!' if draft.terminal else ''}]{''.join(edges)};")
            return new_id

        emit(0)
        log.info("compiled %d words into %d nodes (%d drafted)",
                 self._count, len(records), len(self._drafts))
        return "".join(records)

    def build(self) -> Dictionary:
        return Dictionary.parse(self.serialize())

    def _minimize(self, down_to: int) -> None:
        merged = 0
        while len(self._unchecked) > down_to:
            parent, slot, child = self._unchecked.pop()
            key = self._drafts[child].key()
            existing = self._minimized.get(key)
            if existing is not None:
                self._drafts[parent].children[slot] = existing
                merged += 1
            else:
                self._minimized[key] = child
        if merged:
            log.debug("merged %d suffix node(s) after %r", merged, self._previous)


def _common_prefix(a: str, b: str) -> int:
    n = 0
    for x, y in zip(a, b):
        if x != y:
            break
        n += 1
    return n


def compile_words(words: Iterable[str]) -> str:
    """Sort, dedupe and compile `words`; returns the serialized dictionary."""
    builder = DictionaryBuilder()
    for w in sorted({w.strip().lower() for w in words if w.strip()}):
        builder.insert(w)
    return builder.serialize()
