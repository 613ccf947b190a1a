"""
Sequence generator.

Strategy (one call to generate()):
  1) Pick a difficulty: hard with probability `hard_probability`, else easy.
     Each difficulty sets a minimum source-word length and a minimum
     feasibility count.
  2) Up to `max_attempts` times:
       - pick a source word (long enough for the difficulty) at random
       - pick three strictly increasing positions in it
       - the letters at those positions form the candidate sequence
       - reject it if the third letter is forbidden (S, G, D) or if the
         three letters sit next to each other in the source word
       - count how many words in a random sample of the pool contain the
         sequence in order (memoized per sequence)
       - accept once the count reaches the difficulty's minimum
  3) Otherwise fall back to three distinct random letters, still honouring
     the forbidden-third-letter rule.

Notes:
  - Deterministic across runs with the same seed (self.rng).
  - The contiguity rule is what makes a round interesting: the sequence is
    never a plain substring of the word that produced it.
"""

from __future__ import annotations

import logging
import random
import string
from dataclasses import dataclass, field
from typing import FrozenSet, List, Optional, Sequence, Union

from seqgame.engine.hints import SEQUENCE_LENGTH
from seqgame.engine.matching import contains_in_order
from seqgame.errors import GenerationExhausted
from .cache import FeasibilityCache

logger = logging.getLogger(__name__)

FORBIDDEN_THIRD_LETTERS: FrozenSet[str] = frozenset({"S", "G", "D"})
ALPHABET = string.ascii_uppercase


@dataclass(frozen=True)
class Difficulty:
    name: str
    min_word_length: int   # shortest allowed source word
    min_count: int         # feasibility count needed to accept a sequence


HARD = Difficulty("hard", min_word_length=8, min_count=1)
EASY = Difficulty("easy", min_word_length=4, min_count=2)


@dataclass(frozen=True)
class GeneratorConfig:
    hard_probability: float = 0.75
    max_attempts: int = 1000
    sample_size: int = 10_000
    forbidden_third: FrozenSet[str] = FORBIDDEN_THIRD_LETTERS
    hard: Difficulty = HARD
    easy: Difficulty = EASY

    def difficulty(self, name: str) -> Difficulty:
        for d in (self.hard, self.easy):
            if d.name == name:
                return d
        raise ValueError(f"Unknown difficulty: {name!r}. Available: {[self.hard.name, self.easy.name]}")


@dataclass(frozen=True)
class Proposal:
    """An accepted sequence plus how it was found."""
    sequence: str
    difficulty: str
    source_word: Optional[str] = None   # None when the fallback fired
    feasibility: Optional[int] = None
    attempts: int = 0
    fallback: bool = False


DifficultyArg = Union[Difficulty, str, None]


@dataclass
class SequenceGenerator:
    config: GeneratorConfig = field(default_factory=GeneratorConfig)
    rng: random.Random = field(default_factory=random.Random)
    cache: FeasibilityCache = field(default_factory=FeasibilityCache)

    @classmethod
    def seeded(cls, seed: int | None, config: GeneratorConfig | None = None) -> "SequenceGenerator":
        return cls(config=config or GeneratorConfig(), rng=random.Random(seed))

    def reset(self, seed: int | None = None) -> None:
        """Reseed the RNG. The feasibility cache is kept."""
        self.rng.seed(seed)

    # ---- public API ----

    def generate(self, lexicon: Sequence[str], difficulty: DifficultyArg = None) -> str:
        """Return a 3-letter uppercase sequence for a new round."""
        return self.propose(lexicon, difficulty).sequence

    def propose(self, lexicon: Sequence[str], difficulty: DifficultyArg = None) -> Proposal:
        mode = self._resolve_difficulty(difficulty)
        try:
            return self._search(lexicon, mode)
        except GenerationExhausted as e:
            logger.warning("%s; using random letters", e)
            return Proposal(
                sequence=self.fallback_letters(),
                difficulty=mode.name,
                attempts=e.attempts,
                fallback=True,
            )

    def choose_difficulty(self) -> Difficulty:
        cfg = self.config
        return cfg.hard if self.rng.random() < cfg.hard_probability else cfg.easy

    def fallback_letters(self) -> str:
        """Three distinct random letters; the third is never forbidden."""
        letters = ""
        while len(letters) < SEQUENCE_LENGTH:
            ch = self.rng.choice(ALPHABET)
            if len(letters) == SEQUENCE_LENGTH - 1 and ch in self.config.forbidden_third:
                continue
            if ch not in letters:
                letters += ch
        return letters

    def feasibility(self, sequence: str, pool: Sequence[str]) -> int:
        """Memoized count of sampled pool words containing `sequence` in order."""
        return self.cache.count(sequence, lambda: self._sample_count(sequence, pool))

    # ---- internals ----

    def _resolve_difficulty(self, difficulty: DifficultyArg) -> Difficulty:
        if difficulty is None:
            return self.choose_difficulty()
        if isinstance(difficulty, Difficulty):
            return difficulty
        return self.config.difficulty(difficulty)

    def _search(self, lexicon: Sequence[str], mode: Difficulty) -> Proposal:
        cfg = self.config
        pool: List[str] = [w.upper() for w in lexicon if len(w) >= mode.min_word_length]
        if not pool:
            raise GenerationExhausted(0, mode.name)

        for attempt in range(1, cfg.max_attempts + 1):
            word = pool[self.rng.randrange(len(pool))]
            seq = self._pick_letters(word)
            if seq is None:
                continue
            if seq[-1] in cfg.forbidden_third:
                continue
            if seq in word:
                continue

            n = self.feasibility(seq, pool)
            if n >= mode.min_count:
                logger.debug("accepted %s from %s (count=%d, attempt=%d, %s)",
                             seq, word, n, attempt, mode.name)
                return Proposal(seq, mode.name, source_word=word, feasibility=n,
                                attempts=attempt)

        raise GenerationExhausted(cfg.max_attempts, mode.name)

    def _pick_letters(self, word: str) -> Optional[str]:
        """
        Letters at three random strictly increasing positions, or None when
        the word is too short to fit a third position.
        """
        n = len(word)
        if n < SEQUENCE_LENGTH:
            return None
        i1 = self.rng.randrange(n - 2)
        i2 = i1 + 1 + self.rng.randrange(n - i1 - 1)
        span = n - i2 - 1
        if span <= 0:
            return None
        i3 = i2 + 1 + self.rng.randrange(span)
        return word[i1] + word[i2] + word[i3]

    def _sample_count(self, sequence: str, pool: Sequence[str]) -> int:
        # Sampling with replacement bounds the cost on large pools.
        size = self.config.sample_size
        if len(pool) > size:
            sample = [pool[self.rng.randrange(len(pool))] for _ in range(size)]
        else:
            sample = pool
        return sum(1 for w in sample if contains_in_order(w, sequence))
