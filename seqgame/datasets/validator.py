"""
Word-source report for seqgame.

What this module does:
- Inspect a raw word list (one token per line) before it becomes a Lexicon.
- Count how many lines survive the lexicon filter and why the rest are dropped
  (too short, non-alphabetic, excluded suffix).
- Detect duplicate and blank lines; compute SHA-256 of the raw file.
- Return a machine-readable dict (for manifests) and a pretty one-line summary.

Typical use:
    from seqgame.datasets import inspect_word_source, pretty_summary
    rep = inspect_word_source("seqgame/datasets/data/words.txt")
    print(pretty_summary(rep))
"""

from __future__ import annotations

from collections import Counter
from dataclasses import dataclass, asdict, field
from pathlib import Path
from typing import Dict, List
import hashlib

from seqgame.lexicon import rejection_reason


@dataclass
class SourceReport:
    """Diagnostics and metadata for one raw word source."""
    path: str                      # file path (as given)
    exists: bool                   # did the file exist on disk?
    sha256: str                    # SHA-256 of raw file bytes (empty string if missing)
    total: int                     # non-blank, non-comment lines
    kept: int                      # words that pass the lexicon filter
    unique_kept: int               # distinct kept words (case-insensitive)
    long_words: int                # kept words with >= 8 letters (hard-mode sources)
    dropped: Dict[str, int] = field(default_factory=dict)  # reason -> count
    blank_lines: int = 0
    passed: bool = False
    issues: List[str] = field(default_factory=list)


def _sha256_file(path: Path) -> str:
    """Compute SHA-256 of a file's raw bytes."""
    h = hashlib.sha256()
    with path.open("rb") as f:
        for chunk in iter(lambda: f.read(8192), b""):
            h.update(chunk)
    return h.hexdigest()


def inspect_word_source(path: str, hard_min_length: int = 8) -> Dict:
    """
    Inspect a raw word list.

    `passed` is strict: the file exists, at least one word is kept, at least
    one kept word is long enough for hard mode, and there are no duplicates.
    Comment lines ('#') are ignored; blank lines are counted but harmless.
    """
    p = Path(path)
    if not p.exists():
        rep = SourceReport(path=path, exists=False, sha256="", total=0, kept=0,
                           unique_kept=0, long_words=0,
                           issues=[f"word source not found: {path}"])
        return asdict(rep)

    dropped: Counter = Counter()
    kept: List[str] = []
    blanks = 0
    total = 0

    with p.open("r", encoding="utf-8") as f:
        for raw in f:
            w = raw.strip()
            if not w:
                blanks += 1
                continue
            if w.startswith("#"):
                continue
            total += 1
            reason = rejection_reason(w)
            if reason is None:
                kept.append(w.upper())
            else:
                dropped[reason] += 1

    unique = set(kept)
    long_words = sum(1 for w in unique if len(w) >= hard_min_length)

    issues: List[str] = []
    if not kept:
        issues.append("word source contains 0 usable words")
    elif long_words == 0:
        issues.append(f"no words with >= {hard_min_length} letters (hard mode will fall back)")
    if len(unique) != len(kept):
        issues.append(f"word source has {len(kept) - len(unique)} duplicate word(s)")

    rep = SourceReport(
        path=str(p),
        exists=True,
        sha256=_sha256_file(p),
        total=total,
        kept=len(kept),
        unique_kept=len(unique),
        long_words=long_words,
        dropped=dict(sorted(dropped.items())),
        blank_lines=blanks,
        passed=not issues,
        issues=issues,
    )
    return asdict(rep)


def pretty_summary(report: Dict) -> str:
    """
    Produce a compact, human-friendly one-liner for console/docs.

    Example:
        words.txt | kept=1781/1838 (uniq=1781, long=512, sha=abc123...) | dropped short=16 suffix=38 | OK
    """
    name = Path(report["path"]).name
    status = "OK" if report["passed"] else "FAIL"
    dropped = " ".join(f"{k}={v}" for k, v in report["dropped"].items()) or "none"
    sha = (report.get("sha256") or "")[:12]
    return (
        f"{name} | kept={report['kept']}/{report['total']} "
        f"(uniq={report['unique_kept']}, long={report['long_words']}, sha={sha}) "
        f"| dropped {dropped} | {status}"
    )
