"""
Download a plain-text English word list and write a clean copy.

What it does:
- Downloads a newline-separated word list (default: dwyl/english-words, alpha only).
- Keeps alphabetic tokens, lowercases, de-duplicates while preserving order.
- Writes one word per line; run build_wordlist --filter afterwards to apply
  the lexicon filter if you want a smaller bundled file.

Usage:
    python -m script.fetch_wordlist --out data/raw_words.txt
"""

import argparse

import requests

from seqgame.datasets.io import write_lines

URL = "https://raw.githubusercontent.com/dwyl/english-words/master/words_alpha.txt"


def unique_preserve_order(words):
    seen = set()
    out = []
    for w in words:
        if w not in seen:
            seen.add(w)
            out.append(w)
    return out


def fetch_words(url: str = URL, timeout: float = 30) -> list[str]:
    r = requests.get(url, timeout=timeout)
    r.raise_for_status()
    words = [ln.strip().lower() for ln in r.text.splitlines()]
    return unique_preserve_order(w for w in words if w.isalpha())


def main():
    ap = argparse.ArgumentParser(description="Download a raw English word list")
    ap.add_argument("--url", default=URL)
    ap.add_argument("--out", default="data/raw_words.txt")
    ap.add_argument("--sort", action="store_true", help="sort alphabetically instead of keeping source order")
    args = ap.parse_args()

    words = fetch_words(args.url)
    if args.sort:
        words = sorted(words)

    write_lines(words, args.out)
    print(f"Wrote {len(words)} words -> {args.out}")


if __name__ == "__main__":
    main()
