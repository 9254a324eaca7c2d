import pytest
from hypothesis import given
from hypothesis import strategies as st

from seqstrings.trie import (
    build_trie,
    match_patterns,
    match_patterns_extended,
    trie_edges,
)

dna = st.text(alphabet="ACGT", max_size=12)
nonempty_dna = st.text(alphabet="ACGT", min_size=1, max_size=6)


def test_trie_edges_for_single_pattern():
    assert trie_edges(build_trie(["ATA"])) == [(0, 1, "A"), (1, 2, "T"), (2, 3, "A")]


@given(st.lists(st.text(alphabet="ACGT", max_size=8), max_size=6))
def test_node_count_equals_distinct_prefixes(patterns):
    trie = build_trie(patterns)
    prefixes = {p[:k] for p in patterns for k in range(1, len(p) + 1)}
    assert len(trie) == len(prefixes) + 1
    assert len(trie_edges(trie)) == len(trie) - 1


@given(st.lists(st.text(alphabet="ACGT", max_size=8), max_size=6))
def test_every_node_but_root_has_one_parent(patterns):
    edges = trie_edges(build_trie(patterns))
    children = sorted(child for _, child, _ in edges)
    assert children == list(range(1, len(edges) + 1))
    assert all(parent < child for parent, child, _ in edges)


@given(st.lists(st.text(alphabet="xyz", max_size=8), max_size=6))
def test_every_pattern_can_be_spelled(patterns):
    trie = build_trie(patterns)
    for pattern in patterns:
        node = 0
        for symbol in pattern:
            assert symbol in trie[node]
            node = trie[node][symbol]


def test_repeated_pattern_shares_nodes():
    assert len(build_trie(["GATTACA", "GATTACA"])) == len(build_trie(["GATTACA"]))


def test_overlapping_matches():
    assert match_patterns("AAA", ["AA"]) == [0, 1]


def test_prefix_pattern_only_found_by_extended():
    assert match_patterns_extended("AC", ["AT", "A"]) == [0]
    assert not match_patterns("AC", ["AT", "A"])


@given(dna)
def test_no_patterns_matches_everywhere(text):
    assert match_patterns(text, []) == list(range(len(text)))
    assert match_patterns_extended(text, []) == []


@given(dna, st.lists(nonempty_dna, min_size=1, max_size=4))
def test_reported_positions_start_a_pattern(text, patterns):
    for position in match_patterns_extended(text, patterns):
        assert any(text.startswith(p, position) for p in patterns)
    for position in match_patterns(text, patterns):
        assert any(text.startswith(p, position) for p in patterns)


@given(dna, st.lists(nonempty_dna, min_size=1, max_size=4))
def test_basic_matches_are_extended_matches(text, patterns):
    basic = set(match_patterns(text, patterns))
    extended = set(match_patterns_extended(text, patterns))
    assert basic <= extended


@given(dna, nonempty_dna, dna)
def test_planted_pattern_is_found(before, pattern, after):
    text = before + pattern + after
    assert len(before) in match_patterns(text, [pattern])
    assert len(before) in match_patterns_extended(text, [pattern])


@given(dna, nonempty_dna)
def test_results_are_sorted_and_unique(text, pattern):
    result = match_patterns_extended(text, [pattern])
    assert result == sorted(set(result))


def test_unknown_symbol_in_text_is_rejected():
    with pytest.raises(ValueError):
        match_patterns("ACN", ["A"])


def test_unknown_symbol_in_pattern_is_rejected():
    with pytest.raises(ValueError):
        match_patterns_extended("ACG", ["AX"])