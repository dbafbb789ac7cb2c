"""
A guess together with the feedback received for each letter.

Text notation (case-insensitive in, lowercase out):
  - plain letters       : absent ('-' / gray)
  - letters inside [ ]  : correct position (green)
  - letters inside ( )  : present, wrong position (yellow)

Examples:
  "bl[i]nd"      -> b, l absent; i correct; n, d absent
  "tr[ic]k"      -> i and c both correct (serializes as "tr[i][c]k")
  "(th)[r](e)e"  -> t, h wrong position; r correct; e wrong position; e absent
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import List, Tuple

from wordle_cheat.config import WORD_LENGTH
from wordle_cheat.errors import FormatError


class Feedback(Enum):
    ABSENT = "absent"
    CORRECT_POSITION = "correct-position"
    WRONG_POSITION = "wrong-position"

    @property
    def present(self) -> bool:
        return self is not Feedback.ABSENT


_OPEN = {"[": Feedback.CORRECT_POSITION, "(": Feedback.WRONG_POSITION}
_CLOSE = {"]": "[", ")": "("}
_WRAP = {
    Feedback.ABSENT: "{}",
    Feedback.CORRECT_POSITION: "[{}]",
    Feedback.WRONG_POSITION: "({})",
}


@dataclass(frozen=True)
class Guess:
    letters: Tuple[Tuple[str, Feedback], ...]

    @classmethod
    def parse(cls, text: str, length: int = WORD_LENGTH) -> "Guess":
        """
        Parse bracket notation into a Guess.

        Raises FormatError on nested/unbalanced brackets, non-letter
        characters, or a letter count other than `length`.
        """
        letters: List[Tuple[str, Feedback]] = []
        mode = Feedback.ABSENT
        opened = None  # the bracket currently open, if any

        for c in text.strip():
            if c in _OPEN:
                if opened is not None:
                    raise FormatError(f"nested {c!r} inside {opened!r} in guess {text!r}")
                opened, mode = c, _OPEN[c]
            elif c in _CLOSE:
                if opened != _CLOSE[c]:
                    raise FormatError(f"unbalanced {c!r} in guess {text!r}")
                opened, mode = None, Feedback.ABSENT
            elif c.isascii() and c.isalpha():
                letters.append((c.lower(), mode))
            else:
                raise FormatError(f"unexpected character {c!r} in guess {text!r}")

        if opened is not None:
            raise FormatError(f"unclosed {opened!r} in guess {text!r}")
        if len(letters) != length:
            raise FormatError(f"guess {text!r} has {len(letters)} letters, expected {length}")
        return cls(tuple(letters))

    def serialize(self) -> str:
        return "".join(_WRAP[fb].format(letter) for letter, fb in self.letters)

    def with_feedback(self, index: int, feedback: Feedback) -> "Guess":
        """
        Return a copy with the feedback at `index` replaced.
        Raises IndexError unless 0 <= index < len(self).
        """
        if not 0 <= index < len(self.letters):
            raise IndexError(f"letter index {index} out of range for {self}")
        letters = list(self.letters)
        letters[index] = (letters[index][0], feedback)
        return Guess(tuple(letters))

    @property
    def word(self) -> str:
        return "".join(letter for letter, _ in self.letters)

    def __len__(self) -> int:
        return len(self.letters)

    def __str__(self) -> str:
        return self.serialize()
