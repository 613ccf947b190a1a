import pytest
from seqgame.dictionary import BaseLookup, WordSetLookup
from seqgame.engine import WordValidator, Reason
from seqgame.errors import LookupUnavailable


class RecordingLookup(BaseLookup):
    """Canned answers; remembers which words were looked up."""
    id = "recording"

    def __init__(self, words=(), error=None):
        self.words = {w.lower() for w in words}
        self.error = error
        self.calls = []

    def exists(self, word):
        self.calls.append(word)
        if self.error is not None:
            raise self.error
        return word in self.words


def _validator(words=("plain", "link", "blink", "passage"), denylist=("damn", "ass"), **kw):
    lookup = RecordingLookup(words, **kw)
    return WordValidator(lookup, denylist), lookup


def test_accepts_word_with_sequence_in_dictionary():
    v, lookup = _validator()
    res = v.validate("  Plain ", "LIN")
    assert res.accepted is True
    assert res.word == "plain"
    assert res.reason is None
    assert res.points == 5
    assert lookup.calls == ["plain"]

@pytest.mark.parametrize("word", ["", "   ", "\t"])
def test_rejects_empty(word):
    v, lookup = _validator()
    res = v.validate(word, "LIN")
    assert res.reason is Reason.EMPTY
    assert res.message == "Please enter a word"
    assert lookup.calls == []

def test_rejects_duplicate_before_lookup():
    v, lookup = _validator(error=LookupUnavailable("down"))
    res = v.validate(" PLAIN", "LIN", accepted=["plain"])
    assert res.reason is Reason.DUPLICATE
    assert res.message == "Already guessed"
    assert lookup.calls == []

def test_rejects_hyphenated_without_lookup():
    v, lookup = _validator(words=["x-ray"])
    res = v.validate("x-ray", "XRY")
    assert res.accepted is False
    assert res.reason is Reason.HYPHENATED
    assert res.message == "Not a valid English word"
    assert lookup.calls == []

def test_denylist_is_exact_and_case_insensitive():
    v, lookup = _validator(words=["damn", "passage"])
    res = v.validate("DAMN", "DAN")
    assert res.reason is Reason.NOT_A_WORD
    assert res.message == "Not a valid English word"
    assert lookup.calls == []
    # substring of a denied token is fine
    assert v.validate("passage", "PSG").accepted is True

def test_rejects_out_of_order():
    v, lookup = _validator(words=["cat", "nail"])
    res = v.validate("cat", "ATX")
    assert res.reason is Reason.OUT_OF_ORDER
    assert res.message == "Word must contain 'ATX' in order"
    assert v.validate("nail", "lin").message == "Word must contain 'LIN' in order"
    assert lookup.calls == []

def test_rejects_dictionary_miss():
    v, _ = _validator(words=[])
    res = v.validate("plain", "LIN")
    assert res.reason is Reason.NOT_A_WORD
    assert res.points == 0

@pytest.mark.parametrize("error", [LookupUnavailable("timeout"), RuntimeError("boom"), KeyError("word")])
def test_lookup_failure_is_a_plain_rejection(error):
    v, lookup = _validator(error=error)
    res = v.validate("plain", "LIN")
    assert res.accepted is False
    assert res.reason is Reason.NOT_A_WORD
    assert lookup.calls == ["plain"]

def test_duplicate_wins_regardless_of_dictionary():
    v, _ = _validator()
    accepted = []
    first = v.validate("link", "LIN", accepted)
    assert first.accepted
    accepted.append(first.word)
    assert v.validate("LINK", "LIN", accepted).reason is Reason.DUPLICATE

def test_default_denylist_is_bundled():
    v = WordValidator(WordSetLookup(["hello"]))
    assert v.is_denied("Hell")
    assert not v.is_denied("hello")
