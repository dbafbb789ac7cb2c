"""
Word dictionary stored as a shared-suffix graph (DAG).

Serialized form: a stream of node records, each terminated by ';'

    [<id>]( <slot>:<child id>)*;      non-terminal node
    [<id>!]( <slot>:<child id>)*;     terminal node (a word ends here)

<slot> is 0..25 ('a'..'z'). Records appear children-before-parents, so every
<child id> must already have been defined, and the LAST record is the root.

Example (the words "at" and "it"):

    [0!];[1] 19:0;[2] 0:1 8:1;

Usage:
    dict_ = Dictionary.load("data/dictionary")
    dict_.has_word("crane")

Process-wide instance:
    initialize(path)   -> load once (call at start-up; raises on a bad file)
    get_dictionary()   -> the loaded instance (loads lazily from config if
                          initialize() was never called)
"""

from __future__ import annotations

import logging
import re
import threading
from pathlib import Path
from typing import Dict, Iterator, List, Optional

from wordle_cheat.config import ALPHABET, dictionary_path
from wordle_cheat.errors import FormatError, NodeReferenceError
from .node import DictionaryNode

log = logging.getLogger(__name__)

_RECORD = re.compile(r"\[([0-9]+)(!?)\]((?: [0-9]+:[0-9]+)*)")


def _iter_records(text: str) -> Iterator[str]:
    """Yield each ';'-terminated record body (whitespace between records is ignored)."""
    start = 0
    while True:
        end = text.find(";", start)
        if end < 0:
            rest = text[start:].strip()
            if rest:
                raise FormatError(f"unterminated record: {rest[:40]!r}")
            return
        yield text[start:end].lstrip()
        start = end + 1


def _parse_node(record: str, nodes: Dict[int, DictionaryNode]) -> DictionaryNode:
    m = _RECORD.fullmatch(record)
    if m is None:
        raise FormatError(f"bad node record: {record[:40]!r}")
    node_id = int(m.group(1))
    terminal = m.group(2) == "!"

    children: List[Optional[DictionaryNode]] = [None] * len(ALPHABET)
    for edge in m.group(3).split():
        slot, child_id = (int(x) for x in edge.split(":"))
        if slot >= len(ALPHABET):
            raise FormatError(f"node {node_id}: edge slot {slot} out of range")
        try:
            children[slot] = nodes[child_id]
        except KeyError:
            raise NodeReferenceError(node_id, child_id) from None

    node = DictionaryNode(id=node_id, terminal=terminal, children=tuple(children))
    nodes[node_id] = node
    return node


class Dictionary:
    """Read-only view over a parsed dictionary graph."""

    def __init__(self, root: DictionaryNode, node_count: int):
        self._root = root
        self._node_count = node_count

    # ---- construction ----

    @classmethod
    def parse(cls, text: str) -> "Dictionary":
        """
        Parse the serialized record stream. The last record becomes the root.

        Raises:
            FormatError        : a record has the wrong shape, or the stream is empty
            NodeReferenceError : an edge names an id not defined by an earlier record
        """
        nodes: Dict[int, DictionaryNode] = {}
        root: Optional[DictionaryNode] = None
        count = 0
        for record in _iter_records(text):
            root = _parse_node(record, nodes)
            count += 1
        if root is None:
            raise FormatError("dictionary contains no node records")
        log.debug("parsed %d node records (%d distinct ids), root=%d", count, len(nodes), root.id)
        return cls(root, count)

    @classmethod
    def load(cls, path: Path | str) -> "Dictionary":
        p = Path(path)
        if not p.exists():
            raise FileNotFoundError(p)
        try:
            text = p.read_text(encoding="ascii")
        except UnicodeDecodeError as e:
            raise FormatError(f"dictionary {p} is not ASCII") from e
        dictionary = cls.parse(text)
        log.info("loaded dictionary %s: %d nodes, root=%d", p, dictionary.node_count, dictionary.root.id)
        return dictionary

    # ---- graph access ----

    @property
    def root(self) -> DictionaryNode:
        return self._root

    @property
    def node_count(self) -> int:
        return self._node_count

    @staticmethod
    def lookup(node: DictionaryNode, letter: str) -> Optional[DictionaryNode]:
        return node.lookup(letter)

    @staticmethod
    def next_letters(node: DictionaryNode):
        return node.next_letters

    @staticmethod
    def is_terminal(node: DictionaryNode) -> bool:
        return node.is_terminal()

    # ---- word-level helpers ----

    def has_word(self, word: str) -> bool:
        node: Optional[DictionaryNode] = self._root
        for c in word:
            if not c.isalpha() or not c.isascii():
                return False
            node = node.lookup(c)
            if node is None:
                return False
        return node.terminal

    def words(self, length: Optional[int] = None) -> Iterator[str]:
        """Yield every word in ascending order (only words of `length` if given)."""
        yield from _walk(self._root, "", length)

    def example_words(self, n: int) -> List[str]:
        out: List[str] = []
        for w in self.words():
            if len(out) >= n:
                break
            out.append(w)
        return out

    def __contains__(self, word: str) -> bool:
        return self.has_word(word)

    def __repr__(self) -> str:
        return f"<Dictionary root={self._root.id} nodes={self._node_count}>"


def _walk(node: DictionaryNode, prefix: str, length: Optional[int]) -> Iterator[str]:
    if node.terminal and (length is None or len(prefix) == length):
        yield prefix
    if length is not None and len(prefix) >= length:
        return
    for letter in node.next_letters:
        yield from _walk(node.lookup(letter), prefix + letter, length)


# ---- process-wide instance ----

_INSTANCE: Optional[Dictionary] = None
_LOCK = threading.Lock()


def initialize(path: Path | str | None = None) -> Dictionary:
    """
    Load the process-wide dictionary once and return it.

    Later calls return the already loaded instance regardless of `path`.
    A malformed file raises here and leaves the instance unset.
    """
    global _INSTANCE
    with _LOCK:
        if _INSTANCE is None:
            _INSTANCE = Dictionary.load(path if path is not None else dictionary_path())
        return _INSTANCE


def get_dictionary() -> Dictionary:
    if _INSTANCE is not None:
        return _INSTANCE
    return initialize()
