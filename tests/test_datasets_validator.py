from pathlib import Path
from wordle_cheat.datasets import load_words, pretty_summary, validate_wordlist


def _write(p: Path, lines):
    p.write_text("\n".join(lines) + "\n", encoding="utf-8")


def test_validate_wordlist_happy_path(tmp_path: Path):
    words = tmp_path / "words_5.txt"
    _write(words, ["crane", "raise", "stare"])

    rep = validate_wordlist(str(words), N=5)
    assert rep["passed"] is True
    assert rep["sorted"] is True
    assert rep["count"] == 3 and rep["issues"] == []
    s = pretty_summary(rep)
    assert "N=5" in s and "words=3" in s and s.endswith("OK")


def test_validate_wordlist_flags_errors(tmp_path: Path):
    # 'crane' (len 5) invalid for N=6, '???' and 'Raiser' invalid
    words = tmp_path / "words_6.txt"
    words.write_text("raiser\ncrane\n???\nRaiser\n\n", encoding="utf-8")

    rep = validate_wordlist(str(words), N=6)
    assert rep["passed"] is False
    assert rep["invalid_lines"] == 4
    assert any("invalid" in msg for msg in rep["issues"])


def test_unsorted_and_duplicates_are_reported_not_failed(tmp_path: Path):
    words = tmp_path / "words.txt"
    _write(words, ["stare", "crane", "crane", "at"])

    rep = validate_wordlist(str(words))
    assert rep["passed"] is True
    assert rep["sorted"] is False and rep["unique_count"] == 3
    assert "word list is not sorted" in rep["issues"]
    assert "word list contains duplicate lines" in rep["issues"]
    assert "N=any" in pretty_summary(rep)


def test_missing_wordlist(tmp_path: Path):
    rep = validate_wordlist(str(tmp_path / "nope.txt"), N=5)
    assert rep["passed"] is False and rep["exists"] is False
    assert "FAIL" in pretty_summary(rep)


def test_load_words(tmp_path: Path):
    words = tmp_path / "words.txt"
    words.write_text(" Crane \n\nat\nRAISE\r\n", encoding="utf-8")
    assert load_words(words) == ["crane", "at", "raise"]
    assert load_words(words, N=5) == ["crane", "raise"]
