import pytest
from seqgame.engine import contains_in_order, score_word, score_round, suggest

# --- order containment golden tests ---
@pytest.mark.parametrize("word,sequence,expected", [
    ("PLAIN", "LIN", True),    # non-contiguous
    ("LINK", "LIN", True),     # contiguous
    ("NAIL", "LIN", False),    # out of order
    ("plain", "lin", True),    # case-insensitive
    ("Blink", "LIN", True),
    ("cat", "ATX", False),     # no X at all
    ("ABAB", "AAB", True),     # repeated letters
    ("BANANA", "ANA", True),
    ("AB", "ABC", False),      # word shorter than sequence
    ("", "ABC", False),
    ("ABC", "", True),         # empty sequence is contained everywhere
])
def test_contains_in_order_golden(word, sequence, expected):
    assert contains_in_order(word, sequence) is expected

def test_contains_in_order_needs_distinct_positions():
    # a single 'A' cannot serve two sequence slots
    assert contains_in_order("CAT", "AAT") is False
    assert contains_in_order("CARAT", "AAT") is True

# --- scoring ---
def test_score_round_is_sum_of_lengths():
    assert score_round(["cat", "dog", "house"]) == 11
    assert score_round([]) == 0

def test_score_word_ignores_surrounding_whitespace():
    assert score_word(" house ") == 5

# --- hints ---
def test_suggest_sorts_by_length_then_alpha():
    lexicon = ["PLAIN", "LINK", "BLINK"]
    assert suggest(lexicon, "LIN", max=2) == ["LINK", "BLINK"]
    assert suggest(lexicon, "LIN", max=3) == ["LINK", "BLINK", "PLAIN"]

def test_suggest_filters_out_of_order_words():
    assert suggest(["NAIL", "LINEN", "LOIN"], "LIN") == ["LOIN", "LINEN"]

@pytest.mark.parametrize("sequence", ["", "LI", "LINK"])
def test_suggest_requires_three_letters(sequence):
    assert suggest(["PLAIN", "LINK"], sequence) == []

def test_suggest_nothing_found():
    assert suggest(["PLAIN", "LINK"], "XYZ") == []
    assert suggest([], "LIN") == []
