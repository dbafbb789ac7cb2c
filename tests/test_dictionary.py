import pytest

import wordle_cheat.lexicon.dictionary as dictmod
from wordle_cheat.config import DICTIONARY_ENV_VAR
from wordle_cheat.errors import FormatError, NodeReferenceError
from wordle_cheat.lexicon import Dictionary, compile_words, get_dictionary, initialize
from conftest import WORDS

# "at" and "it" share the node for "t"
AT_IT = "[0!];[1] 19:0;[2] 0:1 8:1;"


def test_parse_small_graph():
    d = Dictionary.parse(AT_IT)
    assert d.root.id == 2
    assert d.node_count == 3
    assert d.next_letters(d.root) == ("a", "i")
    a, i = d.lookup(d.root, "a"), d.lookup(d.root, "i")
    assert a is i  # shared suffix node
    assert d.lookup(d.root, "b") is None
    t = d.lookup(a, "t")
    assert d.is_terminal(t) and not d.is_terminal(a)
    assert list(d.words()) == ["at", "it"]


def test_records_may_be_separated_by_newlines():
    d = Dictionary.parse(AT_IT.replace(";", ";\n"))
    assert d.has_word("it")


@pytest.mark.parametrize("text", [
    "",                 # no records
    "[0!]",             # missing terminator
    "[0!];[1] 19:0",    # last record unterminated
    "[x];",             # id not a number
    "[0] ;",            # separator with no edge
    "[0!];[1] 19-0;",   # bad edge
    "[0!];[1] 26:0;",   # slot past 'z'
    "0!;",              # no brackets
    "[\u0663!];",        # digits must be ASCII
])
def test_parse_rejects_malformed(text):
    with pytest.raises(FormatError):
        Dictionary.parse(text)


def test_forward_reference_is_rejected():
    with pytest.raises(NodeReferenceError) as exc:
        Dictionary.parse("[0!];[1] 0:5;")
    assert exc.value.child_id == 5
    # still a format problem as far as callers are concerned
    assert isinstance(exc.value, FormatError)


def test_membership(dictionary):
    for w in WORDS:
        assert dictionary.has_word(w), w
        assert w in dictionary
    for w in ["berthe", "bert", "zzzzz", "ca", "", "cat5", "berthx"]:
        assert not dictionary.has_word(w), w


def test_words_sorted_and_by_length(dictionary):
    assert list(dictionary.words()) == sorted(WORDS)
    assert list(dictionary.words(3)) == ["cat", "her", "mad"]
    assert dictionary.example_words(2) == sorted(WORDS)[:2]


def test_load_from_file(tmp_path):
    p = tmp_path / "dictionary"
    p.write_text(compile_words(["crane", "raise"]), encoding="ascii")
    d = Dictionary.load(p)
    assert list(d.words()) == ["crane", "raise"]
    with pytest.raises(FileNotFoundError):
        Dictionary.load(tmp_path / "missing")


def test_process_wide_instance(tmp_path, monkeypatch):
    first = tmp_path / "first"
    second = tmp_path / "second"
    first.write_text(compile_words(["crane"]), encoding="ascii")
    second.write_text(compile_words(["raise"]), encoding="ascii")

    monkeypatch.setattr(dictmod, "_INSTANCE", None)
    monkeypatch.setenv(DICTIONARY_ENV_VAR, str(first))

    d = get_dictionary()  # lazy load from the environment
    assert d.has_word("crane")
    assert initialize(second) is d  # already loaded; path ignored
    assert get_dictionary() is d


def test_failed_initialize_leaves_instance_unset(tmp_path, monkeypatch):
    bad = tmp_path / "bad"
    bad.write_text("[0!];[1] 0:7;", encoding="ascii")
    monkeypatch.setattr(dictmod, "_INSTANCE", None)

    with pytest.raises(NodeReferenceError):
        initialize(bad)
    assert dictmod._INSTANCE is None


@pytest.mark.parametrize("raw", [b"[0!];\xff", "[0!];[1] 4:0;é".encode("utf-8")])
def test_load_rejects_non_ascii_file(tmp_path, raw):
    p = tmp_path / "dictionary"
    p.write_bytes(raw)
    with pytest.raises(FormatError):
        Dictionary.load(p)


def test_terminal_flag_through_node_and_dictionary():
    d = Dictionary.parse(AT_IT)
    t = d.lookup(d.lookup(d.root, "a"), "t")
    assert t.is_terminal() and d.is_terminal(t)
    assert not d.root.is_terminal() and not d.is_terminal(d.root)
