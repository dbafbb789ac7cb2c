"""
Word-list validator for dictionary compilation.

What this module does:
- Check a source word list before it is compiled into a dictionary graph.
- Enforce formatting rules (lowercase, a–z only, one word per line, and exact
  length N when N is given).
- Detect duplicates, invalid lines and unsorted input; compute SHA-256 of the
  raw file so a compiled dictionary can be traced back to its source.
- Return a machine-readable dict and provide a pretty one-line summary.

Typical use:
    from wordle_cheat.datasets import validate_wordlist, pretty_summary
    rep = validate_wordlist("data/words.txt", N=5)
    print(pretty_summary(rep))

Unsorted or duplicated input is reported but does not fail validation:
the compiler sorts and dedupes before building.
"""

from __future__ import annotations

from dataclasses import dataclass, asdict
from pathlib import Path
from typing import Dict, List, Optional, Tuple
import hashlib


@dataclass
class WordlistReport:
    path: str            # file path (as given)
    exists: bool         # did the file exist on disk?
    N: Optional[int]     # required word length, or None for any length
    count: int           # number of VALID words after cleaning
    unique_count: int    # unique valid words (after dedupe)
    invalid_lines: int   # number of invalid lines encountered
    sorted: bool         # valid words already in ascending order?
    sha256: str          # SHA-256 of raw file bytes (empty string if missing)
    passed: bool
    issues: List[str]    # human-friendly list of problems (if any)


def _sha256_file(path: Path) -> str:
    """Compute SHA-256 of a file's raw bytes."""
    h = hashlib.sha256()
    with path.open("rb") as f:
        for chunk in iter(lambda: f.read(8192), b""):
            h.update(chunk)
    return h.hexdigest()


def _load_and_check(path: Path, N: Optional[int]) -> Tuple[List[str], int]:
    """
    Load words from a text file and validate them.

    Rules:
      - one token per line
      - must be lowercase a–z
      - must have exact length N (if N is given)
      - empty/whitespace-only lines are INVALID

    Returns:
      (valid_words, invalid_count)
    """
    valid: List[str] = []
    invalid = 0

    with path.open("r", encoding="utf-8") as f:
        for raw in f:
            w = raw.strip()
            if w and w.islower() and w.isascii() and w.isalpha() and (N is None or len(w) == N):
                valid.append(w)
            else:
                invalid += 1

    return valid, invalid


def validate_wordlist(path: str, N: Optional[int] = None) -> Dict:
    """
    Validate a word list that is about to be compiled.

    Returns a JSON-serializable dict (see WordlistReport); `passed` requires
    the file to exist, contain at least one valid word and no invalid lines.
    """
    p = Path(path)
    if not p.exists():
        rep = WordlistReport(path, False, N, 0, 0, 0, False, "", False,
                             [f"word list not found: {path}"])
        return asdict(rep)

    words, invalid = _load_and_check(p, N)
    unique = set(words)
    is_sorted = all(a <= b for a, b in zip(words, words[1:]))

    issues: List[str] = []
    if not words:
        issues.append("word list contains 0 valid words")
    if invalid:
        issues.append(f"word list has {invalid} invalid line(s)")
    if len(unique) != len(words):
        issues.append("word list contains duplicate lines")
    if not is_sorted:
        issues.append("word list is not sorted")

    rep = WordlistReport(
        path=str(p),
        exists=True,
        N=N,
        count=len(words),
        unique_count=len(unique),
        invalid_lines=invalid,
        sorted=is_sorted,
        sha256=_sha256_file(p),
        passed=bool(words) and invalid == 0,
        issues=issues,
    )
    return asdict(rep)


def pretty_summary(report: Dict) -> str:
    """
    Compact, human-friendly one-liner for the console.

    Example:
        words.txt | N=5 | words=12972 (uniq=12972, sha=abc123def456) | sorted=True | OK
    """
    status = "OK" if report["passed"] else "FAIL"
    n = report["N"] if report["N"] is not None else "any"
    sha = (report.get("sha256") or "")[:12]
    return (
        f"{report['path']} | N={n} | words={report['count']} "
        f"(uniq={report['unique_count']}, sha={sha}) "
        f"| sorted={report['sorted']} | {status}"
    )
