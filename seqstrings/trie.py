"""Pattern tries and multi-pattern matching over DNA text."""

from __future__ import annotations

from collections.abc import Iterable, Iterator

Trie = list[dict[str, int]]

DNA_ALPHABET = frozenset("ACGT")


def build_trie(patterns: Iterable[str]) -> Trie:
    """Build a trie of the patterns.

    Node 0 is the root; node ``i`` is ``trie[i]``, a mapping from an edge
    symbol to the index of the child node.
    """
    trie: Trie = [{}]
    for pattern in patterns:
        _insert(trie, pattern)
    return trie


def _insert(trie: Trie, pattern: str) -> int:
    """Add one pattern to the trie and return the node where it ends."""
    node = 0
    for symbol in pattern:
        child = trie[node].get(symbol)
        if child is None:
            child = len(trie)
            trie[node][symbol] = child
            trie.append({})
        node = child
    return node


def trie_edges(trie: Trie) -> list[tuple[int, int, str]]:
    """Return ``(parent, child, symbol)`` for every edge.

    Edges are ordered by parent node, then by symbol.
    """
    return [
        (parent, child, symbol)
        for parent, edges in enumerate(trie)
        for symbol, child in sorted(edges.items())
    ]


def _check_dna(label: str, strings: Iterable[str]) -> None:
    for value in strings:
        unknown = set(value) - DNA_ALPHABET
        if unknown:
            raise ValueError(
                f"{label} contains symbols outside ACGT: {''.join(sorted(unknown))}"
            )


def _walk(trie: Trie, text: str, start: int) -> Iterator[int]:
    """Yield the nodes reached while reading ``text`` from ``start``."""
    node = 0
    for position in range(start, len(text)):
        child = trie[node].get(text[position])
        if child is None:
            return
        node = child
        yield node


def _deepest(trie: Trie, text: str, start: int) -> int:
    node = 0
    for node in _walk(trie, text, start):
        pass
    return node


def match_patterns(text: str, patterns: Iterable[str]) -> list[int]:
    """Positions in ``text`` where reading along the trie ends at a leaf.

    A pattern that is a proper prefix of another pattern does not end at
    a leaf and so is not reported on its own.
    """
    patterns = list(patterns)
    _check_dna("text", [text])
    _check_dna("pattern", patterns)
    trie = build_trie(patterns)
    return [
        start
        for start in range(len(text))
        if not trie[_deepest(trie, text, start)]
    ]


def match_patterns_extended(text: str, patterns: Iterable[str]) -> list[int]:
    """Positions in ``text`` where at least one pattern starts.

    Unlike :func:`match_patterns`, patterns that are prefixes of other
    patterns are found as well.
    """
    patterns = list(patterns)
    _check_dna("text", [text])
    _check_dna("pattern", patterns)
    trie: Trie = [{}]
    pattern_ends = {_insert(trie, pattern) for pattern in patterns if pattern}
    return [
        start
        for start in range(len(text))
        if any(node in pattern_ends for node in _walk(trie, text, start))
    ]