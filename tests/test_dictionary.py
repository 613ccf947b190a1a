from unittest.mock import Mock

import pytest
import requests
from seqgame.dictionary import (
    BaseLookup, DictionaryApiLookup, WordSetLookup, create_lookup, get_lookup_ids, register,
)
from seqgame.errors import LookupUnavailable


def _session(ok=True, status=200, payload=None, json_error=None, get_error=None):
    resp = Mock()
    resp.ok = ok
    resp.status_code = status
    if json_error is not None:
        resp.json.side_effect = json_error
    else:
        resp.json.return_value = payload
    session = Mock()
    if get_error is not None:
        session.get.side_effect = get_error
    else:
        session.get.return_value = resp
    return session


def test_api_lookup_found():
    s = _session(payload=[{"word": "Plain", "meanings": []}])
    lookup = DictionaryApiLookup(base_url="https://dict.test/en", timeout=2.0, session=s)
    assert lookup.exists("plain") is True
    s.get.assert_called_once_with("https://dict.test/en/plain", timeout=2.0)

@pytest.mark.parametrize("payload", [
    [{"word": "plains"}],                    # headword mismatch
    [],                                      # empty list
    {"title": "No Definitions Found"},       # not a list
    [{"meanings": []}],                      # no headword
    ["plain"],                               # entry not an object
])
def test_api_lookup_not_found_payloads(payload):
    lookup = DictionaryApiLookup(session=_session(payload=payload))
    assert lookup.exists("plain") is False

def test_api_lookup_non_success_status():
    lookup = DictionaryApiLookup(session=_session(ok=False, status=404))
    assert lookup.exists("qwzx") is False

@pytest.mark.parametrize("error", [requests.ConnectionError("down"), requests.Timeout("slow")])
def test_api_lookup_transport_errors(error):
    lookup = DictionaryApiLookup(session=_session(get_error=error))
    with pytest.raises(LookupUnavailable):
        lookup.exists("plain")

def test_api_lookup_malformed_json():
    lookup = DictionaryApiLookup(session=_session(json_error=ValueError("not json")))
    with pytest.raises(LookupUnavailable):
        lookup.exists("plain")

def test_api_lookup_quotes_word():
    lookup = DictionaryApiLookup(base_url="https://dict.test/en/", session=Mock())
    assert lookup.url_for("a b") == "https://dict.test/en/a%20b"
    assert lookup.url_for("a/b") == "https://dict.test/en/a%2Fb"

def test_local_lookup(tmp_path):
    p = tmp_path / "dict.txt"
    p.write_text("# comment\nPlain\nlink\n\n", encoding="utf-8")
    lookup = WordSetLookup.from_file(p)
    assert len(lookup) == 2
    assert lookup.exists("PLAIN") and lookup.exists(" link ")
    assert not lookup.exists("blink")

def test_registry_factory():
    assert get_lookup_ids() == ["api", "local"]
    lookup = create_lookup("local", words=["Plain"])
    assert isinstance(lookup, WordSetLookup) and lookup.exists("plain")
    with pytest.raises(ValueError):
        create_lookup("nope")

def test_register_rejects_duplicate_and_missing_ids():
    with pytest.raises(ValueError):
        @register
        class Again(BaseLookup):
            id = "local"

    with pytest.raises(ValueError):
        @register
        class Nameless(BaseLookup):
            id = ""
