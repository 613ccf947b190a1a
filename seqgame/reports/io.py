"""
I/O utilities for batch generation runs.

Responsibilities:
- write_csv:      one row per generated sequence (tidy CSV).
- write_manifest: dump a JSON manifest with config, word-source report and metadata.
- timestamp_id:   stable UTC run ID string.
- git_commit_or_unknown: best-effort short commit hash for reproducibility.
"""

from __future__ import annotations

from pathlib import Path
from typing import Dict, List
import csv
import json
import subprocess
import datetime as dt

FIELDS = ["index", "sequence", "difficulty", "source_word", "feasibility",
          "attempts", "fallback", "hints"]


def write_csv(rows: List[Dict], path: str) -> str:
    """
    Serialize generated sequences to CSV.

    Schema (columns):
      index, sequence, difficulty, source_word, feasibility, attempts, fallback, hints

    `hints` is a list in each row and is written space-separated.
    Returns the path written (string).
    """
    p = Path(path)
    p.parent.mkdir(parents=True, exist_ok=True)

    with p.open("w", newline="", encoding="utf-8") as f:
        w = csv.DictWriter(f, fieldnames=FIELDS)
        w.writeheader()
        for r in rows:
            row = {k: r.get(k, "") for k in FIELDS}
            row["source_word"] = row["source_word"] or ""
            row["feasibility"] = "" if row["feasibility"] is None else row["feasibility"]
            row["hints"] = " ".join(r.get("hints") or [])
            w.writerow(row)

    return str(p)


def write_manifest(manifest: Dict, path: str) -> str:
    """
    Write a JSON manifest with run configuration and word-source summary.

    Typical keys:
      - run_id, git_commit
      - config: CLI args (count, seed, difficulty, words, outdir)
      - word_source: output of datasets.inspect_word_source(...)
      - summary: fallback count, cache size, difficulty split
    """
    p = Path(path)
    p.parent.mkdir(parents=True, exist_ok=True)
    with p.open("w", encoding="utf-8") as f:
        json.dump(manifest, f, indent=2)
    return str(p)


def timestamp_id() -> str:
    """
    Return a compact UTC timestamp suitable for filenames, e.g. 20250820T024121Z.
    """
    return dt.datetime.now(dt.timezone.utc).strftime("%Y%m%dT%H%M%SZ")


def git_commit_or_unknown() -> str:
    """
    Best-effort short git hash of the current repo state.
    Returns 'unknown' if git is not available or the call fails.
    """
    try:
        return (
            subprocess.check_output(
                ["git", "rev-parse", "--short", "HEAD"],
                stderr=subprocess.DEVNULL,
            )
            .decode()
            .strip()
        )
    except (OSError, subprocess.CalledProcessError):
        return "unknown"
