from pathlib import Path

import pytest
from seqgame.datasets import (
    inspect_word_source, pretty_summary, read_lines, write_lines, load_word_source, load_denylist,
)


def _write(p: Path, lines):
    p.write_text("\n".join(lines) + "\n", encoding="utf-8")


def test_inspect_word_source_happy_path(tmp_path: Path):
    src = tmp_path / "words.txt"
    _write(src, ["# header", "plain", "elephant", "puzzle", "", "cats", "ox", "x-ray"])

    rep = inspect_word_source(str(src))
    assert rep["passed"] is True
    assert rep["total"] == 6
    assert rep["kept"] == 3 and rep["unique_kept"] == 3
    assert rep["long_words"] == 1
    assert rep["dropped"] == {"non_alpha": 1, "short": 1, "suffix": 1}
    assert rep["blank_lines"] == 1
    assert len(rep["sha256"]) == 64
    s = pretty_summary(rep)
    assert "kept=3/6" in s and s.endswith("OK")


def test_inspect_word_source_flags_problems(tmp_path: Path):
    src = tmp_path / "words.txt"
    _write(src, ["plain", "PLAIN", "cat", "walking"])

    rep = inspect_word_source(str(src))
    assert rep["passed"] is False
    assert any("duplicate" in msg for msg in rep["issues"])
    assert any(">= 8 letters" in msg for msg in rep["issues"])
    assert pretty_summary(rep).endswith("FAIL")


def test_inspect_word_source_missing_file(tmp_path: Path):
    rep = inspect_word_source(str(tmp_path / "missing.txt"))
    assert rep["exists"] is False and rep["passed"] is False
    assert any("not found" in msg for msg in rep["issues"])


def test_read_write_lines(tmp_path: Path):
    p = tmp_path / "nested" / "out.txt"
    write_lines(["alpha", "beta"], p)
    assert p.read_text(encoding="utf-8") == "alpha\nbeta\n"
    assert read_lines(p) == ["alpha", "beta"]
    with pytest.raises(FileNotFoundError):
        read_lines(tmp_path / "nope.txt")


def test_loaders_skip_comments_and_blanks(tmp_path: Path):
    p = tmp_path / "deny.txt"
    _write(p, ["# words", "", "  Damn ", "heck"])
    assert load_denylist(p) == ["Damn", "heck"]
    assert load_word_source(p) == ["Damn", "heck"]


def test_bundled_lists_load():
    assert "elephant" in load_word_source()
    deny = load_denylist()
    assert "damn" in deny and not any(w.startswith("#") for w in deny)


def test_bundled_word_source_passes_inspection():
    from seqgame.datasets.io import DEFAULT_WORDS
    rep = inspect_word_source(str(DEFAULT_WORDS))
    assert rep["passed"] is True, rep["issues"]
