"""
Order containment: does a word contain a letter sequence in order?

"PLAIN" contains "LIN" (P-L-A-I-N, letters need not be adjacent),
"LINK" contains "LIN", "NAIL" does not (wrong order).

Single left-to-right pass, case-insensitive. The scan only ever moves
forward through the sequence: each character of the word either matches
the next expected sequence letter (advance) or is skipped.
"""

from __future__ import annotations


def contains_in_order(word: str, sequence: str) -> bool:
    """
    True if the letters of `sequence` appear in `word` in the same relative
    order (leftmost-greedy scan, O(len(word))).

    Examples:
      contains_in_order("plain", "LIN") -> True
      contains_in_order("NAIL", "LIN")  -> False
    """
    target = sequence.upper()
    if not target:
        return True

    idx = 0
    for ch in word.upper():
        if ch == target[idx]:
            idx += 1
            if idx == len(target):
                return True
    return False
