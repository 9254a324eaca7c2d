"""Suffix trees built by compressing a suffix trie."""

from __future__ import annotations

from dataclasses import dataclass, field

DNA_TERMINATED_ALPHABET = "ACGT$"


@dataclass(eq=False)
class _Node:
    """A tree node; ``start``/``length`` locate the label of the edge into it."""

    start: int
    length: int
    children: dict[str, _Node] = field(default_factory=dict)

    @property
    def is_leaf(self) -> bool:
        return not self.children


def _check_symbols(text: str, alphabet: str) -> None:
    unknown = set(text) - set(alphabet)
    if unknown:
        raise ValueError(
            f"text contains symbols outside {alphabet}: {''.join(sorted(unknown))}"
        )


def _build_trie(text: str) -> _Node:
    root = _Node(-1, 0)
    for suffix_start in range(len(text)):
        node = root
        for position in range(suffix_start, len(text)):
            symbol = text[position]
            child = node.children.get(symbol)
            if child is None:
                child = _Node(position, 1)
                node.children[symbol] = child
            node = child
    return root


def _compress(node: _Node) -> _Node:
    """Merge a chain of single-child nodes into one edge."""
    start, length = node.start, node.length
    while len(node.children) == 1:
        (node,) = node.children.values()
        length += 1
    return _Node(start, length, node.children)


def _build_suffix_tree(text: str, alphabet: str) -> _Node:
    """Suffix tree of ``text`` with children ordered as in ``alphabet``."""
    if not text:
        raise ValueError("text must not be empty")
    _check_symbols(text, alphabet)
    rank = {symbol: i for i, symbol in enumerate(alphabet)}
    root = _build_trie(text)
    pending = [root]
    while pending:
        node = pending.pop()
        node.children = {
            symbol: _compress(node.children[symbol])
            for symbol in sorted(node.children, key=rank.__getitem__)
        }
        pending.extend(node.children.values())
    return root


def _preorder(root: _Node) -> list[_Node]:
    """Every node below the root, parents first, children in stored order."""
    nodes = []
    stack = list(reversed(root.children.values()))
    while stack:
        node = stack.pop()
        nodes.append(node)
        stack.extend(reversed(node.children.values()))
    return nodes


def suffix_tree_edges(text: str) -> list[str]:
    """Labels of all edges of the suffix tree of ``text``.

    ``text`` may hold only ``A``, ``C``, ``G``, ``T`` and ``$``. Labels are
    listed in depth-first order, children visited in the order A, C, G, T, $.
    """
    root = _build_suffix_tree(text, DNA_TERMINATED_ALPHABET)
    return [text[node.start : node.start + node.length] for node in _preorder(root)]