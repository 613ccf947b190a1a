"""
Submission validation.

Answers "should this submission be accepted right now?" for a round with a
given sequence. Checks run in order and the first failure wins:

  1) empty / whitespace-only          -> EMPTY
  2) already accepted this round      -> DUPLICATE
  3) contains a hyphen                -> HYPHENATED
  4) exact denylist token             -> NOT_A_WORD
  5) sequence not contained in order  -> OUT_OF_ORDER
  6) dictionary lookup says no/fails  -> NOT_A_WORD

Steps 1-5 are local and cheap; only step 6 may touch the network. A lookup
that raises is logged and treated exactly like a dictionary miss.
"""

from __future__ import annotations

import enum
import logging
from dataclasses import dataclass
from typing import TYPE_CHECKING, Iterable, Optional, Set

from seqgame.datasets.io import load_denylist
from .matching import contains_in_order
from .scoring import score_word

if TYPE_CHECKING:
    from seqgame.dictionary.base import BaseLookup

logger = logging.getLogger(__name__)


class Reason(str, enum.Enum):
    EMPTY = "empty"
    DUPLICATE = "duplicate"
    HYPHENATED = "hyphenated"
    NOT_A_WORD = "not_a_word"
    OUT_OF_ORDER = "out_of_order"


NOT_A_WORD_MESSAGE = "Not a valid English word"

_MESSAGES = {
    Reason.EMPTY: "Please enter a word",
    Reason.DUPLICATE: "Already guessed",
    Reason.HYPHENATED: NOT_A_WORD_MESSAGE,
    Reason.NOT_A_WORD: NOT_A_WORD_MESSAGE,
}


def normalize(word: str) -> str:
    """Canonical form of a submission: trimmed, lowercase."""
    return word.strip().lower()


@dataclass(frozen=True)
class ValidationResult:
    word: str                         # normalized submission
    accepted: bool
    reason: Optional[Reason] = None   # None iff accepted
    message: str = ""
    points: int = 0

    @classmethod
    def accept(cls, word: str) -> "ValidationResult":
        return cls(word=word, accepted=True, points=score_word(word))

    @classmethod
    def reject(cls, word: str, reason: Reason, sequence: str = "") -> "ValidationResult":
        if reason is Reason.OUT_OF_ORDER:
            message = f"Word must contain '{sequence.upper()}' in order"
        else:
            message = _MESSAGES[reason]
        return cls(word=word, accepted=False, reason=reason, message=message)


class WordValidator:
    """
    Accept/reject player submissions.

    Args:
      lookup   : dictionary collaborator with exists(word) -> bool
      denylist : tokens never accepted (case-insensitive exact match);
                 defaults to the bundled list
    """

    def __init__(self, lookup: "BaseLookup", denylist: Optional[Iterable[str]] = None):
        self.lookup = lookup
        if denylist is None:
            denylist = load_denylist()
        self.denylist: Set[str] = {normalize(w) for w in denylist if w.strip()}

    def is_denied(self, word: str) -> bool:
        return normalize(word) in self.denylist

    def validate(self, word: str, sequence: str,
                 accepted: Iterable[str] = ()) -> ValidationResult:
        """
        Validate `word` against `sequence`, given the words already accepted
        this round.
        """
        w = normalize(word)

        if not w:
            return ValidationResult.reject(w, Reason.EMPTY)

        if w in {normalize(a) for a in accepted}:
            return ValidationResult.reject(w, Reason.DUPLICATE)

        # Checked before any lookup: saves a network round-trip.
        if "-" in w:
            return ValidationResult.reject(w, Reason.HYPHENATED)

        if w in self.denylist:
            return ValidationResult.reject(w, Reason.NOT_A_WORD)

        if not contains_in_order(w, sequence):
            return ValidationResult.reject(w, Reason.OUT_OF_ORDER, sequence)

        if not self._lookup_exists(w):
            return ValidationResult.reject(w, Reason.NOT_A_WORD)

        return ValidationResult.accept(w)

    def _lookup_exists(self, word: str) -> bool:
        try:
            return bool(self.lookup.exists(word))
        except Exception as e:  # any lookup failure is a plain "not a word"
            logger.warning("dictionary lookup failed for %r (%s): %s",
                           word, type(e).__name__, e)
            return False
