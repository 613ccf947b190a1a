from .matching import contains_in_order
from .scoring import score_word, score_round
from .hints import suggest
from .validation import WordValidator, ValidationResult, Reason, normalize

__all__ = [
    "contains_in_order", "score_word", "score_round", "suggest",
    "WordValidator", "ValidationResult", "Reason", "normalize",
]
