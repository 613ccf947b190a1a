"""
Normalize a raw word list into one word per line.

Features:
- Trims whitespace, drops blank and '#' comment lines.
- Lowercases (the lexicon uppercases at load time anyway).
- Removes duplicates, preserving original order (stable dedupe).
- Optional --filter: keep only words the lexicon would keep
  (>= 3 letters, alphabetic, no excluded suffix).
- Optional sorting AFTER dedupe (alphabetical); otherwise keep input order.
- Overwrite in place by default, or write to a separate --out path.

Usage:
    python -m script.build_wordlist --in raw_words.txt --out seqgame/datasets/data/words.txt --filter
"""

import argparse
from pathlib import Path

from seqgame.datasets.io import read_lines, write_lines
from seqgame.lexicon import rejection_reason


def unique_preserve_order(lines: list[str]) -> list[str]:
    seen, out = set(), []
    for s in lines:
        if s not in seen:
            seen.add(s)
            out.append(s)
    return out


def normalize(lines: list[str], apply_filter: bool = False) -> list[str]:
    words = [s.strip().lower() for s in lines]
    words = [w for w in words if w and not w.startswith("#")]
    if apply_filter:
        words = [w for w in words if rejection_reason(w) is None]
    return unique_preserve_order(words)


def main():
    ap = argparse.ArgumentParser(description="Normalize and dedupe a raw word list.")
    ap.add_argument("--in", dest="inp", required=True, help="input .txt file")
    ap.add_argument("--out", dest="out", help="output file (default: overwrite input)")
    ap.add_argument("--filter", action="store_true", help="apply the lexicon filter")
    ap.add_argument("--sort", action="store_true", help="sort alphabetically after dedupe (otherwise keep original order)")
    args = ap.parse_args()

    inp = Path(args.inp)
    outp = Path(args.out) if args.out else inp

    lines = read_lines(inp)
    out = normalize(lines, apply_filter=args.filter)
    if args.sort:
        out = sorted(out)

    write_lines(out, outp)
    print(f"Input: {inp} ({len(lines)} lines) -> Output: {outp} ({len(out)} words)")


if __name__ == "__main__":
    main()
