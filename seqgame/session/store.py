"""
JSON-file persistence for statistics.

The file is a flat key-value document keyed by fixed identifiers:
  - sequenceGameStats        : GameStats.to_dict()
  - currentRoundScore        : score of the last finished round
  - currentRoundLongestWords : last round's words, longest first
  - currentRoundWordCount    : last round's word count
The "currentRound*" keys let a UI highlight the last round in the top lists.
"""

from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Dict, Optional

from .round import RoundResult
from .stats import GameStats

logger = logging.getLogger(__name__)

STATS_KEY = "sequenceGameStats"
ROUND_SCORE_KEY = "currentRoundScore"
ROUND_LONGEST_KEY = "currentRoundLongestWords"
ROUND_COUNT_KEY = "currentRoundWordCount"


class JsonStatsStore:
    def __init__(self, path: Path | str):
        self.path = Path(path)

    def read_all(self) -> Dict:
        """Raw key-value document ({} when the file doesn't exist yet)."""
        if not self.path.exists():
            return {}
        with self.path.open("r", encoding="utf-8") as f:
            data = json.load(f)
        if not isinstance(data, dict):
            raise ValueError(f"stats file {self.path} must hold a JSON object")
        return data

    def load(self) -> GameStats:
        return GameStats.from_dict(self.read_all().get(STATS_KEY, {}))

    def save(self, stats: GameStats, last_round: Optional[RoundResult] = None) -> str:
        """Write stats (and the last round's highlights, if given). Returns the path."""
        data = self.read_all()
        data[STATS_KEY] = stats.to_dict()
        if last_round is not None:
            data[ROUND_SCORE_KEY] = last_round.score
            if last_round.won:
                data[ROUND_LONGEST_KEY] = [{"word": s.word, "length": s.length}
                                           for s in last_round.longest()]
                data[ROUND_COUNT_KEY] = last_round.word_count
        self.path.parent.mkdir(parents=True, exist_ok=True)
        with self.path.open("w", encoding="utf-8") as f:
            json.dump(data, f, indent=2)
        logger.debug("stats saved to %s", self.path)
        return str(self.path)

    def clear(self) -> None:
        """Forget all statistics."""
        if self.path.exists():
            self.path.unlink()
