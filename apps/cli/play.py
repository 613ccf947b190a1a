# apps/cli/play.py
"""
Play Sequence in the terminal.

Each round shows three letters; type words that contain them in order
(not necessarily next to each other). Every accepted word scores one point
per letter.

Commands during a round:
  /end    end the round (shows example answers if you found none)
  /stats  show your statistics
  /quit   leave (the current round is not recorded)

Usage:
    python -m apps.cli.play
    python -m apps.cli.play --lookup local --seed 1
"""

from __future__ import annotations

import argparse
import logging
from typing import List

from seqgame.config import configure_logging, load_settings
from seqgame.datasets import load_word_source, load_denylist
from seqgame.dictionary import create_lookup, get_lookup_ids, WordSetLookup
from seqgame.engine import WordValidator
from seqgame.generator import SequenceGenerator
from seqgame.lexicon import build_lexicon
from seqgame.session import GameStats, JsonStatsStore, RoundResult, Session

logger = logging.getLogger("seqgame.cli.play")


def format_stats(stats: GameStats) -> str:
    lines = [
        f"Played: {stats.games_played}  Win %: {stats.win_percentage}  "
        f"Streak: {stats.current_streak}  Max streak: {stats.max_streak}",
        "Highest scores: " + (", ".join(map(str, stats.highest_scores)) or "-"),
        "Longest words:  " + (", ".join(f"{d['word']} ({d['length']})"
                                        for d in stats.longest_words) or "-"),
        "Most words:     " + (", ".join(map(str, stats.most_words)) or "-"),
    ]
    return "\n".join(lines)


def format_result(result: RoundResult) -> str:
    if result.won:
        return (f"Round over: {result.word_count} word(s), score {result.score}\n"
                f"  {', '.join(result.words)}")
    hint = ", ".join(result.hints) if result.hints else "none in the word list"
    return f"Round over: no words found. Possible answers: {hint}"


def main(argv: List[str] | None = None) -> None:
    settings = load_settings()

    ap = argparse.ArgumentParser(description="Sequence: make words, tickle your brain")
    ap.add_argument("--words", default=settings.words_path,
                    help="raw word list (default: bundled list)")
    ap.add_argument("--denylist", default=settings.denylist_path)
    ap.add_argument("--lookup", default="api",
                    help=f"dictionary lookup (one of: {', '.join(get_lookup_ids())})")
    ap.add_argument("--dictionary", default=None,
                    help="word file for --lookup local (default: the raw word list)")
    ap.add_argument("--difficulty", choices=["auto", "hard", "easy"], default="auto")
    ap.add_argument("--seed", type=int, default=None)
    ap.add_argument("--stats", default=settings.stats_path, help="statistics JSON file")
    ap.add_argument("--log-level", default=settings.log_level)
    args = ap.parse_args(argv)

    configure_logging(args.log_level)

    raw = load_word_source(args.words)
    lexicon = build_lexicon(raw)

    if args.lookup == "api":
        lookup = create_lookup("api", base_url=settings.dictionary_url,
                               timeout=settings.lookup_timeout)
    elif args.lookup == "local":
        lookup = WordSetLookup.from_file(args.dictionary) if args.dictionary else WordSetLookup(raw)
    else:
        lookup = create_lookup(args.lookup)

    validator = WordValidator(lookup, load_denylist(args.denylist))
    store = JsonStatsStore(args.stats)
    session = Session(
        generator=SequenceGenerator.seeded(args.seed),
        validator=validator,
        lexicon=lexicon,
        stats=store.load(),
    )
    difficulty = None if args.difficulty == "auto" else args.difficulty

    while True:
        rnd = session.new_round(difficulty)
        print(f"\nLetters: {' '.join(rnd.sequence)}   (/end, /stats, /quit)")
        while not rnd.is_over:
            try:
                text = input("> ")
            except EOFError:
                return
            cmd = text.strip().lower()
            if cmd == "/quit":
                return
            if cmd == "/stats":
                print(format_stats(session.stats))
                continue
            if cmd == "/end":
                result = session.finish_round()
                store.save(session.stats, result)
                print(format_result(result))
                continue
            res = rnd.submit(text)
            if res.accepted:
                print(f"  +{res.points}  (score {rnd.score})")
            else:
                print(f"  {res.message}")

        try:
            again = input("Play again? [Y/n] ").strip().lower()
        except EOFError:
            return
        if again in ("n", "no"):
            return


if __name__ == "__main__":
    main()
