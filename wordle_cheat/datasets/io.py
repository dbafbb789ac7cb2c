from __future__ import annotations
from pathlib import Path
from typing import List, Optional


def read_lines(p: Path | str) -> List[str]:
    """
    Read a UTF-8 text file into a list of lines, stripping trailing CR/LF.
    Raises FileNotFoundError if the path doesn't exist.
    """
    p = Path(p)
    if not p.exists():
        raise FileNotFoundError(p)
    return [ln.rstrip("\r\n") for ln in p.read_text(encoding="utf-8").splitlines()]


def load_words(p: Path | str, N: Optional[int] = None) -> List[str]:
    """
    Stripped, lower-cased, non-blank lines of a word list.
    With N, only words of exactly N letters are kept.
    """
    words = [ln.strip().lower() for ln in read_lines(p) if ln.strip()]
    if N is not None:
        words = [w for w in words if len(w) == N]
    return words
