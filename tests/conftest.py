import pytest

from wordle_cheat.lexicon import Dictionary, compile_words

# Small stand-in for the production word list. Besides the expected answers
# of the worked examples it holds near misses for each of them, plus a few
# words of other lengths that a 5-letter search must never return.
WORDS = [
    # bl[i]nd, (c)h[i]ps, tr[ic]k
    "voice", "juice", "slice", "price", "thick", "chick", "cinch", "dicey",
    # g(r)oup, (r)ails, (th)[r](e)e
    "berth", "hertz", "chert", "earth", "three", "there", "other", "heart",
    "north", "worth", "tenth", "where", "merit", "wrest", "berths", "her",
    # trie(d), (d)[a]ubs, c[a]n(d)y
    "gadjo", "hadal", "madam", "daddy", "panda", "badge", "laded", "madly",
    "dairy", "salad", "radar", "kayak", "cadet", "gaudy", "gonad", "plaid",
    "modal", "mad", "madams",
    # [e]ate(n)
    "emend", "ennui", "enrol", "elven", "elder", "event", "eaten",
    # misc
    "crane", "raise", "stare", "trace", "cared", "cat", "cats",
]


@pytest.fixture(scope="session")
def dictionary() -> Dictionary:
    return Dictionary.parse(compile_words(WORDS))
