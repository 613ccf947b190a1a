"""
Hint resolver: example answers for a sequence.

Shown when a round ends with no accepted words. Candidates come from the
lexicon only (no dictionary calls), shortest first, then alphabetical.
"""

from __future__ import annotations

from typing import Iterable, List

from .matching import contains_in_order

SEQUENCE_LENGTH = 3
DEFAULT_MAX_HINTS = 2


def suggest(lexicon: Iterable[str], sequence: str, max: int = DEFAULT_MAX_HINTS) -> List[str]:
    """
    Up to `max` lexicon words containing `sequence` in order, sorted by
    (length, word).

    A sequence that is not exactly three letters yields no hints.

    Example:
      suggest(["PLAIN", "LINK", "BLINK"], "LIN") -> ["LINK", "PLAIN"]
    """
    if not sequence or len(sequence) != SEQUENCE_LENGTH or max <= 0:
        return []
    matches = [w for w in lexicon if contains_in_order(w, sequence)]
    matches.sort(key=lambda w: (len(w), w))
    return matches[:max]
