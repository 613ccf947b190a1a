# apps/cli/generate.py
"""
CLI entry point for batch sequence generation.

This script:
  1) Inspects the raw word source (prints counts + SHA, dropped-by-reason).
  2) Builds the lexicon and a seeded SequenceGenerator.
  3) Generates --count sequences with a progress bar and writes:
       - CSV:  one row per sequence (difficulty, source word, feasibility, hints)
       - JSON: manifest with config, word-source report, git commit, summary

Useful for eyeballing puzzle quality and tuning GeneratorConfig.

Usage:
    python -m apps.cli.generate --count 200 --seed 7 --outdir reports
"""

from __future__ import annotations

import argparse
import logging
from collections import Counter
from pathlib import Path
from typing import Dict, List

from tqdm import tqdm

from seqgame.config import configure_logging, load_settings
from seqgame.datasets import inspect_word_source, pretty_summary, load_word_source
from seqgame.datasets.io import DEFAULT_WORDS
from seqgame.engine import suggest
from seqgame.generator import SequenceGenerator, GeneratorConfig
from seqgame.lexicon import build_lexicon
from seqgame.reports import write_csv, write_manifest, timestamp_id, git_commit_or_unknown

logger = logging.getLogger("seqgame.cli.generate")


def generate_rows(generator: SequenceGenerator, lexicon, count: int,
                  difficulty: str | None = None, progress: bool = True) -> List[Dict]:
    """Generate `count` sequences and describe each as a CSV-ready dict."""
    rows: List[Dict] = []
    iterator = tqdm(range(1, count + 1), ncols=80, desc="Generating", unit="seq",
                    disable=not progress)
    for idx in iterator:
        prop = generator.propose(lexicon, difficulty)
        rows.append({
            "index": idx,
            "sequence": prop.sequence,
            "difficulty": prop.difficulty,
            "source_word": prop.source_word,
            "feasibility": prop.feasibility,
            "attempts": prop.attempts,
            "fallback": prop.fallback,
            "hints": suggest(lexicon, prop.sequence),
        })
    return rows


def main(argv: List[str] | None = None) -> None:
    settings = load_settings()

    ap = argparse.ArgumentParser(description="Sequence: batch-generate puzzles")
    ap.add_argument("--count", type=int, default=100, help="number of sequences to generate")
    ap.add_argument("--words", default=settings.words_path,
                    help="raw word list (default: bundled list)")
    ap.add_argument("--difficulty", choices=["auto", "hard", "easy"], default="auto",
                    help="force a difficulty (auto = random per sequence)")
    ap.add_argument("--hard-probability", type=float, default=GeneratorConfig.hard_probability)
    ap.add_argument("--max-attempts", type=int, default=GeneratorConfig.max_attempts)
    ap.add_argument("--sample-size", type=int, default=GeneratorConfig.sample_size)
    ap.add_argument("--seed", type=int, default=123, help="RNG seed (for reproducibility)")
    ap.add_argument("--outdir", default="reports", help="directory for output files")
    ap.add_argument("--no-progress", action="store_true", help="hide the progress bar")
    ap.add_argument("--log-level", default=settings.log_level)
    args = ap.parse_args(argv)

    configure_logging(args.log_level)

    # 1) Word-source report
    words_path = args.words or str(DEFAULT_WORDS)
    rep = inspect_word_source(words_path)
    print(pretty_summary(rep))

    # 2) Lexicon + generator
    lexicon = build_lexicon(load_word_source(words_path))
    config = GeneratorConfig(
        hard_probability=args.hard_probability,
        max_attempts=args.max_attempts,
        sample_size=args.sample_size,
    )
    generator = SequenceGenerator.seeded(args.seed, config)
    difficulty = None if args.difficulty == "auto" else args.difficulty

    # 3) Generate
    rows = generate_rows(generator, lexicon, args.count, difficulty,
                         progress=not args.no_progress)

    # 4) Outputs
    run_id = timestamp_id()
    outdir = Path(args.outdir)
    csv_path = outdir / f"sequences_{run_id}.csv"
    manifest_path = outdir / f"sequences_{run_id}_manifest.json"

    write_csv(rows, str(csv_path))
    manifest = {
        "run_id": run_id,
        "git_commit": git_commit_or_unknown(),
        "config": vars(args),
        "word_source": rep,
        "lexicon_size": len(lexicon),
        "summary": {
            "count": len(rows),
            "fallbacks": sum(1 for r in rows if r["fallback"]),
            "by_difficulty": dict(Counter(r["difficulty"] for r in rows)),
            "distinct_sequences": len({r["sequence"] for r in rows}),
            "cache_size": len(generator.cache),
            "cache_hits": generator.cache.hits,
        },
    }
    write_manifest(manifest, str(manifest_path))

    print(f"Wrote: {csv_path}")
    print(f"Wrote: {manifest_path}")


if __name__ == "__main__":
    main()
