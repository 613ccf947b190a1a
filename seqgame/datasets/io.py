from __future__ import annotations

from pathlib import Path
from typing import Iterable, List

DATA_DIR = Path(__file__).parent / "data"
DEFAULT_WORDS = DATA_DIR / "words.txt"
DEFAULT_DENYLIST = DATA_DIR / "denylist.txt"


def read_lines(p: Path | str) -> List[str]:
    """
    Read a UTF-8 text file into a list of lines, stripping trailing CR/LF.
    Raises FileNotFoundError if the path doesn't exist.
    """
    p = Path(p)
    if not p.exists():
        raise FileNotFoundError(p)
    return [ln.rstrip("\r\n") for ln in p.read_text(encoding="utf-8").splitlines()]


def write_lines(lines: Iterable[str], p: Path | str) -> str:
    """
    Write lines to a UTF-8 text file, ensuring a trailing newline.
    Returns the string path written.
    """
    p = Path(p)
    p.parent.mkdir(parents=True, exist_ok=True)
    p.write_text("\n".join(lines) + "\n", encoding="utf-8")
    return str(p)


def _tokens(p: Path | str) -> List[str]:
    # one token per line; blanks and '#' comments skipped
    out = []
    for ln in read_lines(p):
        s = ln.strip()
        if s and not s.startswith("#"):
            out.append(s)
    return out


def load_word_source(p: Path | str | None = None) -> List[str]:
    """Raw (unfiltered) word list; the bundled list when `p` is None."""
    return _tokens(p if p is not None else DEFAULT_WORDS)


def load_denylist(p: Path | str | None = None) -> List[str]:
    """Denylisted tokens; the bundled list when `p` is None."""
    return _tokens(p if p is not None else DEFAULT_DENYLIST)
