"""
seqgame: the engine behind the Sequence word game.

Players get three letters and submit words containing them in order.
Subpackages:
  - lexicon    : filtered, normalized word list
  - generator  : fair 3-letter sequence selection
  - engine     : order matching, submission validation, scoring, hints
  - dictionary : pluggable "is this an English word?" lookups
  - session    : rounds, statistics and their persistence
"""

__version__ = "1.0.0"
