from .cache import FeasibilityCache
from .sequence import (
    SequenceGenerator, GeneratorConfig, Difficulty, Proposal,
    HARD, EASY, FORBIDDEN_THIRD_LETTERS,
)

__all__ = [
    "FeasibilityCache", "SequenceGenerator", "GeneratorConfig", "Difficulty",
    "Proposal", "HARD", "EASY", "FORBIDDEN_THIRD_LETTERS",
]
