import pytest

from wordle_cheat.lexicon import Dictionary, DictionaryBuilder, compile_words


def test_build_and_walk():
    words = ["cat", "cats", "facet", "facets", "fact", "facts"]
    d = Dictionary.parse(compile_words(words))
    assert list(d.words()) == sorted(words)
    for w in ["ca", "fac", "face", "facetss", "dog"]:
        assert not d.has_word(w)


def test_shared_suffixes_collapse():
    words = ["fight", "light", "might", "night", "right", "sight", "tight"]
    b = DictionaryBuilder()
    for w in words:
        b.insert(w)
    d = b.build()
    # root + one "ight" chain of five nodes
    assert d.node_count == 6
    children = {id(d.lookup(d.root, w[0])) for w in words}
    assert len(children) == 1
    assert list(d.words()) == words


def test_serialized_form():
    text = compile_words(["it", "at"])
    assert text == "[0!];[1] 19:0;[2] 0:1 8:1;"


def test_root_is_last_record():
    text = compile_words(["ab", "b"])
    d = Dictionary.parse(text)
    assert d.root.id == text.count(";") - 1
    assert list(d.words()) == ["ab", "b"]


def test_insert_normalizes_and_skips_repeats():
    b = DictionaryBuilder()
    b.insert("Crane")
    b.insert("crane")
    b.insert("raise")
    assert b.word_count == 2
    assert list(b.build().words()) == ["crane", "raise"]


@pytest.mark.parametrize("bad", ["", "   ", "cr4ne", "café", "two words"])
def test_insert_rejects_non_words(bad):
    with pytest.raises(ValueError):
        DictionaryBuilder().insert(bad)


def test_insert_requires_sorted_order():
    b = DictionaryBuilder()
    b.insert("raise")
    with pytest.raises(ValueError):
        b.insert("crane")


def test_no_insert_after_serialize():
    b = DictionaryBuilder()
    b.insert("crane")
    b.serialize()
    with pytest.raises(ValueError):
        b.insert("raise")


def test_empty_builder_gives_root_only():
    d = DictionaryBuilder().build()
    assert d.node_count == 1
    assert list(d.words()) == []
