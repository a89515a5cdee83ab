"""Substring search with Horspool's algorithm."""

from __future__ import annotations

__all__ = ["shift_table", "horspool_search"]


def shift_table(pattern: str) -> dict[str, int]:
    """Shift for each character in the pattern except its last position.

    Characters not in the table shift by the full pattern length.
    """
    m = len(pattern)
    return {ch: m - 1 - j for j, ch in enumerate(pattern[:-1])}


def horspool_search(text: str, pattern: str) -> int:
    """Index of the first occurrence of ``pattern`` in ``text``, or -1."""
    m, n = len(pattern), len(text)
    if m == 0:
        return 0
    table = shift_table(pattern)
    i = m - 1
    while i < n:
        k = 0
        while k < m and pattern[m - 1 - k] == text[i - k]:
            k += 1
        if k == m:
            return i - m + 1
        i += table.get(text[i], m)
    return -1