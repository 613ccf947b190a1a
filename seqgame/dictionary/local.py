"""
Offline lookup backed by an in-memory word set.

Useful for tests, for playing without a network, or with a large local
dictionary file (one word per line).
"""

from __future__ import annotations

from pathlib import Path
from typing import Iterable, Set

from seqgame.datasets.io import load_word_source
from .base import BaseLookup, register


@register
class WordSetLookup(BaseLookup):
    id = "local"
    name = "Local word list"

    def __init__(self, words: Iterable[str] = ()):
        self.words: Set[str] = {w.strip().lower() for w in words if w.strip()}

    @classmethod
    def from_file(cls, path: Path | str | None = None) -> "WordSetLookup":
        """Build from a word-list file (the bundled list when `path` is None)."""
        return cls(load_word_source(path))

    def __len__(self) -> int:
        return len(self.words)

    def exists(self, word: str) -> bool:
        return word.strip().lower() in self.words
