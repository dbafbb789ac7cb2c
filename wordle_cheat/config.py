"""
Configuration constants.

Everything tunable lives here so the CLI, the dictionary singleton and the
engine agree on one value. The dictionary location can be overridden with
the WORDLE_CHEAT_DICTIONARY environment variable (and again by --dict on
the command line).
"""

from __future__ import annotations

import os

# Puzzle word length (Wordle rules).
WORD_LENGTH = 5

# Letter slots of a dictionary node, index 0 == 'a'.
ALPHABET = "abcdefghijklmnopqrstuvwxyz"

DEFAULT_DICTIONARY_PATH = "data/dictionary"
DICTIONARY_ENV_VAR = "WORDLE_CHEAT_DICTIONARY"


def dictionary_path() -> str:
    """Return the configured serialized dictionary path (env var wins)."""
    return os.environ.get(DICTIONARY_ENV_VAR) or DEFAULT_DICTIONARY_PATH
