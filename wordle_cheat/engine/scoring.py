"""
Feedback for a single (word, answer) pair, as a Guess.

This is what the puzzle itself shows a player, so it is handy for replaying
a game or for checking that a known answer survives the search:

    grade("belle", "level")  -> Guess for "b[e](l)(l)(e)"
    grade("lemon", "level")  -> Guess for "[l][e]mon"

Duplicate letters follow the puzzle's rules (two passes):
  1) mark every correct-position letter and count the answer letters left over;
  2) mark a letter wrong-position only while that letter still has a leftover
     count; otherwise it stays absent.
"""

from collections import Counter

from wordle_cheat.errors import FormatError
from .guess import Feedback, Guess


def grade(word: str, answer: str) -> Guess:
    """
    Raises FormatError if the two words differ in length or contain
    anything other than letters.
    """
    word = word.strip().lower()
    answer = answer.strip().lower()
    if len(word) != len(answer):
        raise FormatError(f"cannot grade {word!r} against {answer!r}: lengths differ")
    if not (word + answer).isascii() or not (word + answer).isalpha():
        raise FormatError(f"cannot grade {word!r} against {answer!r}: letters only")

    feedback = [Feedback.ABSENT] * len(word)

    # Pass 1: correct positions; leftover answer letters feed pass 2.
    remaining = Counter()
    for i, (g, a) in enumerate(zip(word, answer)):
        if g == a:
            feedback[i] = Feedback.CORRECT_POSITION
        else:
            remaining[a] += 1

    # Pass 2: wrong positions, capped by what the answer still has.
    for i, g in enumerate(word):
        if feedback[i] is Feedback.CORRECT_POSITION:
            continue
        if remaining[g] > 0:
            feedback[i] = Feedback.WRONG_POSITION
            remaining[g] -= 1

    return Guess(tuple(zip(word, feedback)))
