"""
Feasibility cache: sequence -> number of sampled words containing it in order.

Write-once per key for the lifetime of the owning generator. Recomputing a
key stores a value computed from the same kind of sample, so concurrent
readers never need a lock.
"""

from __future__ import annotations

import logging
from typing import Callable, Dict, Iterator, Optional

logger = logging.getLogger(__name__)


class FeasibilityCache:
    def __init__(self) -> None:
        self._counts: Dict[str, int] = {}
        self.hits = 0
        self.misses = 0

    def __len__(self) -> int:
        return len(self._counts)

    def __contains__(self, sequence: object) -> bool:
        return sequence in self._counts

    def __iter__(self) -> Iterator[str]:
        return iter(self._counts)

    def get(self, sequence: str) -> Optional[int]:
        return self._counts.get(sequence)

    def count(self, sequence: str, compute: Callable[[], int]) -> int:
        """
        Cached count for `sequence`; `compute` runs only on a miss.
        A cached zero is still a hit.
        """
        cached = self._counts.get(sequence)
        if cached is not None:
            self.hits += 1
            return cached
        self.misses += 1
        n = compute()
        self._counts[sequence] = n
        logger.debug("feasibility %s = %d (cache size %d)", sequence, n, len(self._counts))
        return n
