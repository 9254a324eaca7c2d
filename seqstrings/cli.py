"""Command-line entry point reading problem input from standard input."""

from __future__ import annotations

import argparse
import sys
from collections.abc import Sequence

from seqstrings.bwt import count_occurrences
from seqstrings.kmp import find_pattern
from seqstrings.suffix_tree_from_array import iter_edges, suffix_tree_from_suffix_array
from seqstrings.trie import build_trie, trie_edges


class _InputError(Exception):
    pass


def _take_int(tokens: list[str], position: int, what: str) -> int:
    try:
        return int(tokens[position])
    except (IndexError, ValueError):
        raise _InputError(f"expected an integer for {what}") from None


def _take(tokens: list[str], position: int, what: str) -> str:
    try:
        return tokens[position]
    except IndexError:
        raise _InputError(f"missing {what}") from None


def _run_trie(tokens: list[str]) -> str:
    count = _take_int(tokens, 0, "the number of patterns")
    patterns = [_take(tokens, 1 + i, "pattern") for i in range(count)]
    return "".join(
        f"{parent}->{child}:{symbol}\n"
        for parent, child, symbol in trie_edges(build_trie(patterns))
    )


def _run_bwmatching(tokens: list[str]) -> str:
    transformed = _take(tokens, 0, "transformed text")
    count = _take_int(tokens, 1, "the number of patterns")
    patterns = [_take(tokens, 2 + i, "pattern") for i in range(count)]
    counts = count_occurrences(transformed, patterns)
    return "".join(f"{value} " for value in counts) + "\n"


def _run_kmp(tokens: list[str]) -> str:
    pattern = _take(tokens, 0, "pattern")
    text = _take(tokens, 1, "text")
    return "".join(f"{i} " for i in find_pattern(pattern, text)) + "\n"


def _run_suffix_tree(tokens: list[str]) -> str:
    text = _take(tokens, 0, "text")
    n = len(text)
    suffix_array = [_take_int(tokens, 1 + i, "suffix array") for i in range(n)]
    lcp_array = [_take_int(tokens, 1 + n + i, "LCP array") for i in range(n - 1)]
    tree = suffix_tree_from_suffix_array(suffix_array, lcp_array, text)
    lines = [text] + [f"{edge.start} {edge.end}" for edge in iter_edges(tree)]
    return "\n".join(lines) + "\n"


_COMMANDS = {
    "trie": _run_trie,
    "bwmatching": _run_bwmatching,
    "kmp": _run_kmp,
    "suffix-tree-from-array": _run_suffix_tree,
}


def main(argv: Sequence[str] | None = None) -> int:
    """Run one string algorithm on whitespace-separated standard input."""
    parser = argparse.ArgumentParser(
        prog="seqstrings", description="String algorithms over DNA sequences."
    )
    parser.add_argument("command", choices=sorted(_COMMANDS))
    args = parser.parse_args(argv)
    tokens = sys.stdin.read().split()
    try:
        output = _COMMANDS[args.command](tokens)
    except (_InputError, ValueError) as error:
        print(f"seqstrings: {error}", file=sys.stderr)
        return 1
    sys.stdout.write(output)
    return 0


if __name__ == "__main__":
    sys.exit(main())