"""
Player statistics across rounds.

record() is used for rounds the player ends; record_abandoned() for rounds
left unfinished by starting a new game, which only touch the counters and
streaks, never the top lists.
"""

from __future__ import annotations

from dataclasses import dataclass, field, asdict
from typing import TYPE_CHECKING, Dict, List

if TYPE_CHECKING:
    from .round import RoundResult

TOP_SCORES = 5
TOP_LONGEST_WORDS = 3
TOP_WORD_COUNTS = 3


@dataclass
class GameStats:
    games_played: int = 0
    games_won: int = 0
    current_streak: int = 0
    max_streak: int = 0
    highest_scores: List[int] = field(default_factory=list)
    longest_words: List[Dict] = field(default_factory=list)  # [{"word", "length"}]
    most_words: List[int] = field(default_factory=list)

    @property
    def win_percentage(self) -> int:
        if not self.games_played:
            return 0
        return round(100 * self.games_won / self.games_played)

    def _count_game(self, won: bool) -> None:
        self.games_played += 1
        if won:
            self.games_won += 1
            self.current_streak += 1
            self.max_streak = max(self.max_streak, self.current_streak)
        else:
            self.current_streak = 0

    def record_abandoned(self, result: "RoundResult") -> None:
        self._count_game(result.won)

    def record(self, result: "RoundResult") -> None:
        self._count_game(result.won)

        if result.score > 0:
            self.highest_scores = sorted(self.highest_scores + [result.score],
                                         reverse=True)[:TOP_SCORES]

        if result.won:
            # This round's words go first so they win ties on length.
            fresh = [{"word": s.word, "length": s.length} for s in result.longest()]
            merged = sorted(fresh + self.longest_words, key=lambda d: -d["length"])
            seen = set()
            unique = []
            for item in merged:
                if item["word"] in seen:
                    continue
                seen.add(item["word"])
                unique.append(item)
            self.longest_words = unique[:TOP_LONGEST_WORDS]

            counts = set(self.most_words) | {result.word_count}
            self.most_words = sorted(counts, reverse=True)[:TOP_WORD_COUNTS]

    def to_dict(self) -> Dict:
        return asdict(self)

    @classmethod
    def from_dict(cls, data: Dict) -> "GameStats":
        """Tolerates missing keys (older saves) and ignores unknown ones."""
        data = data or {}
        return cls(
            games_played=int(data.get("games_played", 0)),
            games_won=int(data.get("games_won", 0)),
            current_streak=int(data.get("current_streak", 0)),
            max_streak=int(data.get("max_streak", 0)),
            highest_scores=[int(x) for x in data.get("highest_scores", [])],
            longest_words=[{"word": str(d["word"]), "length": int(d["length"])}
                           for d in data.get("longest_words", [])],
            most_words=[int(x) for x in data.get("most_words", [])],
        )
