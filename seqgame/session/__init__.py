from .stats import GameStats
from .round import Round, RoundResult, Session, Submission
from .store import JsonStatsStore

__all__ = ["GameStats", "Round", "RoundResult", "Session", "Submission", "JsonStatsStore"]
