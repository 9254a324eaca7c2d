"""Burrows-Wheeler transform, its inverse and pattern counting."""

from __future__ import annotations

from collections.abc import Iterable
from itertools import accumulate


def bwt(text: str) -> str:
    """Last column of the sorted cyclic rotations of ``text``."""
    order = sorted(range(len(text)), key=lambda i: text[i:] + text[:i])
    return "".join(text[i - 1] for i in order)


def inverse_bwt(transformed: str) -> str:
    """Recover the text whose transform is ``transformed``.

    The text must end with the ``$`` terminator.
    """
    index = transformed.rfind("$")
    if index < 0:
        raise ValueError("transformed text has no '$' terminator")
    successor = sorted(range(len(transformed)), key=transformed.__getitem__)
    symbols = []
    for _ in transformed:
        index = successor[index]
        symbols.append(transformed[index])
    return "".join(symbols)


class BWTIndex:
    """Counts pattern occurrences using only the transformed text."""

    def __init__(self, transformed: str) -> None:
        self.transformed = transformed
        self._starts: dict[str, int] = {}
        for position, symbol in enumerate(sorted(transformed)):
            self._starts.setdefault(symbol, position)
        self._occurrences: dict[str, list[int]] = {
            symbol: [0, *accumulate(int(c == symbol) for c in transformed)]
            for symbol in self._starts
        }

    def count(self, pattern: str) -> int:
        """Number of occurrences of ``pattern`` in the indexed text."""
        top, bottom = 0, len(self.transformed) - 1
        for symbol in reversed(pattern):
            if top > bottom:
                return 0
            start = self._starts.get(symbol)
            if start is None:
                return 0
            occurrences = self._occurrences[symbol]
            top = start + occurrences[top]
            bottom = start + occurrences[bottom + 1] - 1
        return max(bottom - top + 1, 0)


def count_occurrences(transformed: str, patterns: Iterable[str]) -> list[int]:
    """Count each pattern in the text whose transform is ``transformed``."""
    index = BWTIndex(transformed)
    return [index.count(pattern) for pattern in patterns]