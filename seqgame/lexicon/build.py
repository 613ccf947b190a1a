"""
Lexicon construction.

The lexicon is the ground truth for sequence generation and hints. It is
built once from a raw word source and never changes afterwards.

Filter (a word is kept iff all hold):
  - length >= MIN_WORD_LENGTH (3)
  - ASCII letters only
  - does not end in one of EXCLUDED_SUFFIXES (case-insensitive)

Kept words are uppercased; input order is preserved (duplicates included,
the raw source is expected to be clean already).
"""

from __future__ import annotations

import logging
import re
from dataclasses import dataclass
from typing import Iterable, Iterator, Optional, Tuple

logger = logging.getLogger(__name__)

EXCLUDED_SUFFIXES: Tuple[str, ...] = ("ING", "ED", "S", "ER", "EST", "LY", "ISH")
MIN_WORD_LENGTH = 3

_ALPHA_RE = re.compile(r"^[A-Za-z]+$")
_SUFFIX_RE = re.compile(f"({'|'.join(EXCLUDED_SUFFIXES)})$", re.IGNORECASE)


def rejection_reason(word: str) -> Optional[str]:
    """
    Return why `word` would be dropped from the lexicon, or None if kept.

    Reasons: "short", "non_alpha", "suffix" (checked in that order).
    """
    if len(word) < MIN_WORD_LENGTH:
        return "short"
    if not _ALPHA_RE.match(word):
        return "non_alpha"
    if _SUFFIX_RE.search(word):
        return "suffix"
    return None


@dataclass(frozen=True)
class Lexicon:
    """Immutable ordered sequence of uppercase words."""
    words: Tuple[str, ...] = ()

    def __len__(self) -> int:
        return len(self.words)

    def __iter__(self) -> Iterator[str]:
        return iter(self.words)

    def __getitem__(self, i):
        return self.words[i]

    def __contains__(self, word: object) -> bool:
        return isinstance(word, str) and word.upper() in self.words

    def with_min_length(self, n: int) -> Tuple[str, ...]:
        """Words of at least `n` letters (order preserved)."""
        return tuple(w for w in self.words if len(w) >= n)


def build_lexicon(raw_words: Iterable[str]) -> Lexicon:
    """
    Filter and normalize a raw word source into a Lexicon.

    Deterministic for a given input; an empty input gives an empty Lexicon.
    """
    kept = tuple(w.upper() for w in raw_words if rejection_reason(w) is None)
    logger.info("lexicon built: %d word(s)", len(kept))
    return Lexicon(kept)
