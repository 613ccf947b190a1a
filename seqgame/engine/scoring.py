"""
Round scoring: one point per letter of every accepted word.

No bonuses, no multipliers. score_word("house") -> 5;
score_round(["cat", "dog", "house"]) -> 11.
"""

from __future__ import annotations

from typing import Iterable


def score_word(word: str) -> int:
    """Points for one accepted word (its length after trimming)."""
    return len(word.strip())


def score_round(words: Iterable[str]) -> int:
    """Total points for a round's accepted words."""
    return sum(score_word(w) for w in words)
