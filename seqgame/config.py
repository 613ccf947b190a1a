"""
Runtime settings and logging setup.

Game constants live next to the code that uses them (lexicon.build,
generator.sequence). This module only covers what varies per deployment:
where the word lists and stats file live, which dictionary endpoint to hit,
and how chatty the logs are. Values come from the environment, optionally
seeded from a local .env file.
"""

from __future__ import annotations

import logging
import os
from dataclasses import dataclass
from pathlib import Path

from dotenv import load_dotenv

DEFAULT_DICTIONARY_URL = "https://api.dictionaryapi.dev/api/v2/entries/en/"
DEFAULT_LOOKUP_TIMEOUT = 5.0
DEFAULT_STATS_PATH = Path.home() / ".seqgame" / "stats.json"
LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"


@dataclass(frozen=True)
class Settings:
    log_level: str = "INFO"
    dictionary_url: str = DEFAULT_DICTIONARY_URL
    lookup_timeout: float = DEFAULT_LOOKUP_TIMEOUT
    words_path: str | None = None      # None -> bundled list
    denylist_path: str | None = None   # None -> bundled list
    stats_path: str = str(DEFAULT_STATS_PATH)


def load_settings(env_file: str | None = None) -> Settings:
    """
    Build Settings from environment variables.

    A .env file (explicit path, or one found from the cwd) is loaded first
    without overriding variables that are already set.
    """
    load_dotenv(env_file, override=False)

    timeout_raw = os.getenv("SEQGAME_LOOKUP_TIMEOUT", "").strip()
    try:
        timeout = float(timeout_raw) if timeout_raw else DEFAULT_LOOKUP_TIMEOUT
    except ValueError as e:
        raise ValueError(f"SEQGAME_LOOKUP_TIMEOUT must be a number; got {timeout_raw!r}") from e

    return Settings(
        log_level=os.getenv("LOG_LEVEL", "INFO").strip().upper() or "INFO",
        dictionary_url=os.getenv("SEQGAME_DICTIONARY_URL", DEFAULT_DICTIONARY_URL),
        lookup_timeout=timeout,
        words_path=os.getenv("SEQGAME_WORDS") or None,
        denylist_path=os.getenv("SEQGAME_DENYLIST") or None,
        stats_path=os.getenv("SEQGAME_STATS") or str(DEFAULT_STATS_PATH),
    )


def configure_logging(level: str | int = "INFO") -> int:
    """
    Configure the root logger for CLI use. Unknown level names fall back to INFO.
    Returns the numeric level applied.
    """
    if isinstance(level, str):
        level = getattr(logging, level.strip().upper(), logging.INFO)
        if not isinstance(level, int):
            level = logging.INFO
    logging.basicConfig(level=level, format=LOG_FORMAT, force=True)
    logging.getLogger("seqgame").setLevel(level)
    # requests/urllib3 are noisy at DEBUG
    logging.getLogger("urllib3").setLevel(max(level, logging.WARNING))
    return level
