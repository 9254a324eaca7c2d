"""Suffix arrays: construction and pattern search."""

from __future__ import annotations

from collections.abc import Iterable, Sequence
from itertools import pairwise

TERMINATED_DNA_ALPHABET = "$ACGT"
_RANK = {symbol: i for i, symbol in enumerate(TERMINATED_DNA_ALPHABET)}


def naive_suffix_array(text: str) -> list[int]:
    """Start positions of the suffixes of ``text`` in lexicographic order."""
    return sorted(range(len(text)), key=lambda i: text[i:])


def _check_symbols(text: str) -> None:
    unknown = set(text) - _RANK.keys()
    if unknown:
        raise ValueError(
            "text contains symbols outside "
            f"{TERMINATED_DNA_ALPHABET}: {''.join(sorted(unknown))}"
        )


def _sort_characters(text: str) -> list[int]:
    return sorted(range(len(text)), key=lambda i: _RANK[text[i]])


def _character_classes(text: str, order: list[int]) -> list[int]:
    classes = [0] * len(text)
    for previous, current in pairwise(order):
        classes[current] = classes[previous] + (text[current] != text[previous])
    return classes


def _sort_doubled(order: list[int], classes: list[int], length: int) -> list[int]:
    """Order cyclic shifts of twice ``length`` from an order of shifts of ``length``."""
    n = len(order)
    shifted = [(start - length) % n for start in order]
    # A stable sort on the first half keeps the already sorted second halves in order.
    return sorted(shifted, key=classes.__getitem__)


def _update_classes(order: list[int], classes: list[int], length: int) -> list[int]:
    n = len(order)
    updated = [0] * n
    for previous, current in pairwise(order):
        same = (
            classes[current] == classes[previous]
            and classes[(current + length) % n] == classes[(previous + length) % n]
        )
        updated[current] = updated[previous] + (not same)
    return updated


def build_suffix_array(text: str) -> list[int]:
    """Suffix array of ``text`` by prefix doubling of cyclic shifts.

    ``text`` may hold only ``$``, ``A``, ``C``, ``G`` and ``T``; the result
    is the order of its suffixes when it ends with a single ``$``.
    """
    if not text:
        raise ValueError("text must not be empty")
    _check_symbols(text)
    order = _sort_characters(text)
    classes = _character_classes(text, order)
    length = 1
    while length < len(text):
        order = _sort_doubled(order, classes, length)
        classes = _update_classes(order, classes, length)
        length *= 2
    return order


def find_occurrences(
    pattern: str, text: str, suffix_array: Sequence[int]
) -> list[int]:
    """Start positions of ``pattern`` in ``text``, in suffix array order."""
    n = len(text)
    m = len(pattern)

    low, high = 0, n
    while low < high:
        middle = (low + high) // 2
        start = suffix_array[middle]
        size = min(n - start, m)
        if text[start : start + size] < pattern[:size]:
            low = middle + 1
        else:
            high = middle
    first = low

    high = n
    while low < high:
        middle = (low + high) // 2
        start = suffix_array[middle]
        size = min(n - start, m)
        if pattern[:size] < text[start : start + size]:
            high = middle
        else:
            low = middle + 1

    return list(suffix_array[first:high])


def matching_positions(text: str, patterns: Iterable[str]) -> list[int]:
    """Sorted positions in ``text`` where at least one pattern starts."""
    terminated = text + "$"
    suffix_array = build_suffix_array(terminated)
    found: set[int] = set()
    for pattern in patterns:
        found.update(find_occurrences(pattern, terminated, suffix_array))
    return sorted(found)