"""Knuth-Morris-Pratt pattern search."""

from __future__ import annotations

from collections.abc import Sequence
from itertools import islice

_SEPARATOR = object()


def prefix_function(text: Sequence) -> list[int]:
    """Length of the longest proper border of every prefix of ``text``."""
    borders = [0] * len(text)
    border = 0
    for i, item in enumerate(islice(text, 1, None), 1):
        while border > 0 and item != text[border]:
            border = borders[border - 1]
        border = border + 1 if item == text[border] else 0
        borders[i] = border
    return borders


def find_pattern(pattern: str, text: str) -> list[int]:
    """All start positions of ``pattern`` in ``text``, in increasing order."""
    if not pattern:
        raise ValueError("pattern must not be empty")
    length = len(pattern)
    combined = [*pattern, _SEPARATOR, *text]
    borders = prefix_function(combined)
    return [
        i - 2 * length
        for i, border in enumerate(borders[length + 1 :], length + 1)
        if border == length
    ]