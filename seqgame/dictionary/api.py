"""
Online dictionary lookup (dictionaryapi.dev style).

Contract:
  - GET <base_url><word>
  - found iff the response is 2xx and the JSON body is a non-empty list whose
    first entry has a "word" field equal to the query (case-insensitive)
  - non-2xx or a mismatched headword -> not found
  - transport errors, timeouts and undecodable JSON -> LookupUnavailable
"""

from __future__ import annotations

import logging
from urllib.parse import quote

import requests

from seqgame.config import DEFAULT_DICTIONARY_URL, DEFAULT_LOOKUP_TIMEOUT
from seqgame.errors import LookupUnavailable
from .base import BaseLookup, register

logger = logging.getLogger(__name__)


@register
class DictionaryApiLookup(BaseLookup):
    id = "api"
    name = "Free Dictionary API"

    def __init__(self, base_url: str = DEFAULT_DICTIONARY_URL,
                 timeout: float = DEFAULT_LOOKUP_TIMEOUT,
                 session: requests.Session | None = None):
        self.base_url = base_url if base_url.endswith("/") else base_url + "/"
        self.timeout = timeout
        self.session = session or requests.Session()

    def url_for(self, word: str) -> str:
        return self.base_url + quote(word.strip(), safe="")

    def exists(self, word: str) -> bool:
        url = self.url_for(word)
        logger.debug("GET %s", url)
        try:
            r = self.session.get(url, timeout=self.timeout)
        except requests.RequestException as e:
            raise LookupUnavailable(f"dictionary request failed: {e}") from e

        if not r.ok:
            logger.debug("lookup %r -> HTTP %s", word, r.status_code)
            return False

        try:
            data = r.json()
        except ValueError as e:
            raise LookupUnavailable(f"malformed dictionary payload for {word!r}") from e

        if not isinstance(data, list) or not data or not isinstance(data[0], dict):
            return False
        headword = data[0].get("word")
        return isinstance(headword, str) and headword.lower() == word.strip().lower()
