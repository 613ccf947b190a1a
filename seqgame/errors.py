"""
Exception types for the game core.

Rejected submissions are not exceptions; see engine.validation.ValidationResult.
"""


class SequenceGameError(Exception):
    """Base class for seqgame errors."""


class GenerationExhausted(SequenceGameError):
    """The generator spent its attempt budget without a qualifying sequence."""

    def __init__(self, attempts: int, difficulty: str):
        super().__init__(f"no sequence accepted after {attempts} attempt(s) ({difficulty})")
        self.attempts = attempts
        self.difficulty = difficulty


class LookupUnavailable(SequenceGameError):
    """A dictionary lookup could not be completed (network, timeout, bad payload)."""
