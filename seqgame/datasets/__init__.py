from .validator import inspect_word_source, pretty_summary
from .io import read_lines, write_lines, load_word_source, load_denylist

__all__ = [
    "inspect_word_source", "pretty_summary",
    "read_lines", "write_lines", "load_word_source", "load_denylist",
]
