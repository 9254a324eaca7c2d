"""Shortest substring of one DNA string that does not occur in another."""

from __future__ import annotations

from seqstrings.suffix_tree import _build_suffix_tree, _Node, _preorder

_ALPHABET = "ACGT$#"
_DNA = frozenset("ACGT")


def _check_dna(label: str, value: str) -> None:
    unknown = set(value) - _DNA
    if unknown:
        raise ValueError(
            f"{label} contains symbols outside ACGT: {''.join(sorted(unknown))}"
        )


def _shared_with_second(root: _Node, separator: int) -> set[_Node]:
    """Nodes whose subtree holds a suffix that starts in the second string."""
    shared: set[_Node] = set()
    for node in reversed(_preorder(root)):
        if node.is_leaf:
            if node.start > separator:
                shared.add(node)
        elif any(child in shared for child in node.children.values()):
            shared.add(node)
    return shared


def shortest_non_shared_substring(first: str, second: str) -> str:
    """Shortest substring of ``first`` that is not a substring of ``second``.

    Among candidates of equal length the one met first in alphabetical
    order of the tree walk wins. When every substring of ``first`` occurs
    in ``second``, ``first`` itself is returned.
    """
    _check_dna("first", first)
    _check_dna("second", second)
    separator = len(first)
    text = f"{first}#{second}$"
    root = _build_suffix_tree(text, _ALPHABET)
    shared = _shared_with_second(root, separator)

    best = first
    stack = [(child, 0) for child in reversed(root.children.values())]
    while stack:
        node, depth = stack.pop()
        if node.start == separator:
            continue
        if node in shared:
            below = depth + node.length
            stack.extend((child, below) for child in reversed(node.children.values()))
            continue
        if depth + 1 < len(best):
            best = text[node.start - depth : node.start + 1]
    return best