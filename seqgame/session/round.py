"""
Round and session state.

A Round holds one sequence and the words accepted for it. A Session strings
rounds together: it asks the generator for each new sequence and records
finished rounds in GameStats.

These classes are UI-agnostic so a terminal app, a web handler or a test
can drive them the same way.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import List, Optional, Sequence, Tuple

from seqgame.engine import WordValidator, ValidationResult, suggest, score_round
from seqgame.generator import SequenceGenerator
from seqgame.generator.sequence import SEQUENCE_LENGTH, DifficultyArg
from .stats import GameStats

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Submission:
    word: str
    length: int


@dataclass(frozen=True)
class RoundResult:
    sequence: str
    score: int
    submissions: Tuple[Submission, ...] = ()
    hints: Tuple[str, ...] = ()   # only filled when nothing was found

    @property
    def won(self) -> bool:
        return len(self.submissions) > 0

    @property
    def word_count(self) -> int:
        return len(self.submissions)

    @property
    def words(self) -> List[str]:
        return [s.word for s in self.submissions]

    def longest(self) -> List[Submission]:
        """This round's words, longest first (submission order for ties)."""
        return sorted(self.submissions, key=lambda s: -s.length)


class Round:
    def __init__(self, sequence: str, validator: WordValidator, lexicon: Sequence[str] = ()):
        if len(sequence) != SEQUENCE_LENGTH or not sequence.isalpha():
            raise ValueError(f"sequence must be {SEQUENCE_LENGTH} letters; got {sequence!r}")
        self.sequence = sequence.upper()
        self.validator = validator
        self.lexicon = lexicon
        self.submissions: List[Submission] = []
        self._result: Optional[RoundResult] = None

    @property
    def words(self) -> List[str]:
        return [s.word for s in self.submissions]

    @property
    def score(self) -> int:
        return score_round(self.words)

    @property
    def is_over(self) -> bool:
        return self._result is not None

    def submit(self, word: str) -> ValidationResult:
        """Validate a player's word; accepted words are recorded in order."""
        if self.is_over:
            raise RuntimeError("round is over; start a new round")
        res = self.validator.validate(word, self.sequence, accepted=self.words)
        if res.accepted:
            self.submissions.append(Submission(res.word, len(res.word)))
            logger.debug("accepted %r (+%d, total %d)", res.word, res.points, self.score)
        else:
            logger.debug("rejected %r: %s", res.word, res.reason.value)
        return res

    def end(self) -> RoundResult:
        """Finish the round (idempotent)."""
        if self._result is None:
            hints: Tuple[str, ...] = ()
            if not self.submissions:
                hints = tuple(suggest(self.lexicon, self.sequence))
            self._result = RoundResult(
                sequence=self.sequence,
                score=self.score,
                submissions=tuple(self.submissions),
                hints=hints,
            )
            logger.info("round %s over: %d word(s), score %d",
                        self.sequence, len(self.submissions), self._result.score)
        return self._result


@dataclass
class Session:
    generator: SequenceGenerator
    validator: WordValidator
    lexicon: Sequence[str]
    stats: GameStats = field(default_factory=GameStats)
    current: Optional[Round] = None

    def new_round(self, difficulty: DifficultyArg = None) -> Round:
        """
        Start a round with a fresh sequence. A round still in progress is
        counted as abandoned first.
        """
        if self.current is not None and not self.current.is_over:
            self.stats.record_abandoned(self.current.end())
        seq = self.generator.generate(self.lexicon, difficulty)
        self.current = Round(seq, self.validator, self.lexicon)
        logger.info("round started: %s", seq)
        return self.current

    def submit(self, word: str) -> ValidationResult:
        if self.current is None:
            raise RuntimeError("no round in progress; call new_round() first")
        return self.current.submit(word)

    def finish_round(self) -> RoundResult:
        if self.current is None:
            raise RuntimeError("no round in progress; call new_round() first")
        if self.current.is_over:
            return self.current.end()
        result = self.current.end()
        self.stats.record(result)
        return result
