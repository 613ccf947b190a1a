import pytest
from seqgame.datasets import load_word_source
from seqgame.lexicon import Lexicon, build_lexicon, rejection_reason, EXCLUDED_SUFFIXES


def test_build_lexicon_filters_and_uppercases():
    raw = ["plain", "walking", "cats", "ox", "x-ray", "Bright", "jumped",
           "quickly", "foolish", "tallest", "singer"]
    lex = build_lexicon(raw)
    assert list(lex) == ["PLAIN", "BRIGHT"]
    assert len(lex) == 2
    assert "plain" in lex and "WALKING" not in lex

@pytest.mark.parametrize("word,reason", [
    ("ox", "short"),
    ("x-ray", "non_alpha"),
    ("it's", "non_alpha"),
    ("café", "non_alpha"),
    ("cats", "suffix"),
    ("RUNNING", "suffix"),
    ("Lonely", "suffix"),
    ("plain", None),
    ("cat", None),
])
def test_rejection_reason(word, reason):
    assert rejection_reason(word) == reason

def test_build_lexicon_empty_input():
    lex = build_lexicon([])
    assert isinstance(lex, Lexicon)
    assert len(lex) == 0

def test_build_lexicon_is_deterministic():
    raw = ["zebra", "apple", "puzzle", "bottle"]
    assert build_lexicon(raw) == build_lexicon(raw)
    assert list(build_lexicon(raw)) == ["ZEBRA", "APPLE", "PUZZLE", "BOTTLE"]

def test_with_min_length():
    lex = build_lexicon(["cat", "plain", "elephant"])
    assert lex.with_min_length(5) == ("PLAIN", "ELEPHANT")
    assert lex.with_min_length(9) == ()

def test_bundled_word_source_builds_usable_lexicon():
    lex = build_lexicon(load_word_source())
    assert len(lex) > 1000
    assert all(w.isupper() and w.isalpha() and len(w) >= 3 for w in lex)
    assert not any(w.endswith(sfx) for w in lex for sfx in EXCLUDED_SUFFIXES)
    assert len(lex.with_min_length(8)) > 100
