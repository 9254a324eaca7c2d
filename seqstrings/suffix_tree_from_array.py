"""Suffix trees built from a suffix array and its LCP array."""

from __future__ import annotations

from collections.abc import Iterator, Mapping, Sequence
from dataclasses import dataclass, replace

SuffixTree = dict[int, list["Edge"]]


@dataclass(frozen=True)
class Edge:
    """An edge into ``node`` labelled ``text[start:end]``."""

    node: int
    start: int
    end: int


def suffix_tree_from_suffix_array(
    suffix_array: Sequence[int], lcp_array: Sequence[int], text: str
) -> SuffixTree:
    """Build the suffix tree of ``text`` from its suffix and LCP arrays.

    The result maps a node ID to its outgoing edges, sorted by the first
    symbol of their labels. The root has ID 0 and leaves have no entry.
    ``lcp_array[i]`` is the longest common prefix of the suffixes at
    ``suffix_array[i]`` and ``suffix_array[i + 1]``.
    """
    n = len(text)
    if n == 0:
        raise ValueError("text must not be empty")
    if len(suffix_array) != n:
        raise ValueError("suffix array must have one entry per symbol of the text")
    if len(lcp_array) != n - 1:
        raise ValueError("LCP array must have one entry fewer than the suffix array")

    tree: SuffixTree = {}
    stack = [(0, 0)]
    node, depth = 0, 0
    lcp_previous = 0
    last_id = 0

    for i, suffix in enumerate(suffix_array):
        while depth > lcp_previous:
            stack.pop()
            node, depth = stack[-1]

        if depth < lcp_previous:
            # Split the most recently added edge of ``node`` at ``lcp_previous``.
            edge_start = suffix_array[i - 1] + depth
            offset = lcp_previous - depth
            last_id += 1
            middle = last_id
            existing = tree[node].pop()
            tree[node].append(Edge(middle, edge_start, edge_start + offset))
            tree[middle] = [replace(existing, start=existing.start + offset)]
            node, depth = middle, depth + offset
            stack.append((node, depth))

        last_id += 1
        leaf = last_id
        tree.setdefault(node, []).append(Edge(leaf, suffix + depth, n))
        node, depth = leaf, n - suffix
        stack.append((node, depth))

        if i < n - 1:
            lcp_previous = lcp_array[i]

    return tree


def iter_edges(tree: Mapping[int, Sequence[Edge]]) -> Iterator[Edge]:
    """Yield the edges of ``tree`` in depth-first order from the root 0."""
    stack = [iter(tree.get(0, ()))]
    while stack:
        edge = next(stack[-1], None)
        if edge is None:
            stack.pop()
            continue
        yield edge
        stack.append(iter(tree.get(edge.node, ())))