from .build import Lexicon, build_lexicon, rejection_reason, EXCLUDED_SUFFIXES

__all__ = ["Lexicon", "build_lexicon", "rejection_reason", "EXCLUDED_SUFFIXES"]
