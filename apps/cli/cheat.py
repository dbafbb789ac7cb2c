# apps/cli/cheat.py
"""
CLI entry point for wordle-cheat.

Sub-commands:
  solve    GUESS...              list dictionary words consistent with the guesses
  compile  --in WORDS --out DICT build the serialized dictionary from a word list
  lookup   WORD...               is each word in the dictionary?
  grade    WORD ANSWER           feedback the puzzle would give for WORD
  toggle   GUESS INDEX FEEDBACK  re-mark one letter of a guess

Guesses use bracket notation: [x] correct position, (x) wrong position,
plain letters absent. Example:

    python -m apps.cli.cheat solve "g(r)oup" "(r)ails" "(th)[r](e)e"
"""

from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path
from typing import List, Optional

from tqdm import tqdm

from wordle_cheat.config import DICTIONARY_ENV_VAR, WORD_LENGTH, dictionary_path
from wordle_cheat.datasets import load_words, pretty_summary, validate_wordlist
from wordle_cheat.engine import Feedback, Guess, find_candidates, grade
from wordle_cheat.errors import FormatError
from wordle_cheat.lexicon import DictionaryBuilder, initialize

log = logging.getLogger("wordle_cheat.cli")

_FEEDBACK_CHOICES = {
    "absent": Feedback.ABSENT,
    "correct": Feedback.CORRECT_POSITION,
    "wrong": Feedback.WRONG_POSITION,
}


def _cmd_solve(args) -> int:
    guesses = [Guess.parse(g) for g in args.guesses]
    dictionary = initialize(args.dict) if guesses else None
    words = find_candidates(guesses, dictionary)
    if words is None:
        print("no result")
        return 0
    for w in words:
        print(w)
    print(f"{len(words)} word(s)")
    return 0


def _cmd_compile(args) -> int:
    # 1) Validate and print a one-liner summary (counts, SHA, sorted flag)
    rep = validate_wordlist(args.inp, args.length)
    print(pretty_summary(rep))
    for issue in rep["issues"]:
        log.warning("%s", issue)

    # 2) Load, normalise, sort + dedupe (the builder needs ascending order)
    words = sorted(set(load_words(args.inp, args.length)))
    words = [w for w in words if w.isascii() and w.isalpha()]

    # 3) Build with progress
    builder = DictionaryBuilder()
    iterator = tqdm(words, ncols=80, desc="Compiling", unit="word") if args.progress == "bar" else words
    for w in iterator:
        builder.insert(w)

    out = Path(args.out)
    out.parent.mkdir(parents=True, exist_ok=True)
    out.write_text(builder.serialize(), encoding="ascii")
    print(f"Wrote: {out} ({builder.word_count} words)")
    return 0


def _cmd_lookup(args) -> int:
    dictionary = initialize(args.dict)
    missing = 0
    for w in args.words:
        found = dictionary.has_word(w.strip().lower())
        missing += not found
        print(f"{w}: {'yes' if found else 'no'}")
    return 1 if missing else 0


def _cmd_grade(args) -> int:
    print(grade(args.word, args.answer))
    return 0


def _cmd_toggle(args) -> int:
    g = Guess.parse(args.guess)
    if not 0 <= args.index < len(g):
        raise FormatError(f"index {args.index} out of range for {g}")
    print(g.with_feedback(args.index, _FEEDBACK_CHOICES[args.feedback]))
    return 0


def build_parser() -> argparse.ArgumentParser:
    ap = argparse.ArgumentParser(prog="wordle-cheat",
                                 description="wordle-cheat — find words that fit your guesses")
    ap.add_argument("-v", "--verbose", action="count", default=0,
                    help="more logging (-v info, -vv debug)")
    sub = ap.add_subparsers(dest="command", required=True)

    dict_help = f"serialized dictionary (default: ${DICTIONARY_ENV_VAR} or {dictionary_path()})"

    p = sub.add_parser("solve", help="list words consistent with the guesses")
    p.add_argument("--dict", default=None, help=dict_help)
    p.add_argument("guesses", nargs="*", help='guesses in bracket notation, e.g. "bl[i]nd"')
    p.set_defaults(func=_cmd_solve)

    p = sub.add_parser("compile", help="compile a word list into a dictionary file")
    p.add_argument("--in", dest="inp", required=True, help="word list, one word per line")
    p.add_argument("--out", required=True, help="output dictionary path")
    p.add_argument("--length", type=int, default=WORD_LENGTH,
                   help=f"only keep words of this length (default {WORD_LENGTH}; 0 keeps all)")
    p.add_argument("--progress", choices=["bar", "off"], default="bar",
                   help="show a progress bar while compiling")
    p.set_defaults(func=_cmd_compile)

    p = sub.add_parser("lookup", help="check whether words are in the dictionary")
    p.add_argument("--dict", default=None, help=dict_help)
    p.add_argument("words", nargs="+")
    p.set_defaults(func=_cmd_lookup)

    p = sub.add_parser("grade", help="show the feedback WORD gets when ANSWER is hidden")
    p.add_argument("word")
    p.add_argument("answer")
    p.set_defaults(func=_cmd_grade)

    p = sub.add_parser("toggle", help="change one letter's feedback in a guess")
    p.add_argument("guess")
    p.add_argument("index", type=int, help="letter index, 0-based")
    p.add_argument("feedback", choices=sorted(_FEEDBACK_CHOICES))
    p.set_defaults(func=_cmd_toggle)

    return ap


def main(argv: Optional[List[str]] = None) -> int:
    ap = build_parser()
    args = ap.parse_args(argv)
    if getattr(args, "length", None) == 0:
        args.length = None

    level = {0: logging.WARNING, 1: logging.INFO}.get(args.verbose, logging.DEBUG)
    logging.basicConfig(level=level, format="%(levelname)s %(name)s: %(message)s")

    try:
        return args.func(args)
    except FileNotFoundError as e:
        print(f"wordle-cheat: file not found: {e}", file=sys.stderr)
        return 1
    except FormatError as e:
        print(f"wordle-cheat: {e}", file=sys.stderr)
        return 2


if __name__ == "__main__":
    sys.exit(main())
