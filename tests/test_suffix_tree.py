import pytest
from hypothesis import given, strategies as st

from seqstrings.suffix_tree import suffix_tree_edges

dna = st.text(alphabet="ACGT", max_size=12)


def test_worked_example_labels():
    assert sorted(suffix_tree_edges("ACA$")) == ["$", "$", "A", "CA$", "CA$"]


def test_children_visited_in_alphabet_order():
    assert suffix_tree_edges("A$") == ["A$", "$"]


def test_single_symbol_without_terminator():
    assert suffix_tree_edges("A") == ["A"]


def test_repeated_symbol_chain_is_compressed():
    text = "AAAA"
    assert suffix_tree_edges(text) == [text]


@given(dna)
def test_labels_are_nonempty_substrings(body):
    text = body + "$"
    labels = suffix_tree_edges(text)
    assert all(label and label in text for label in labels)


@given(dna)
def test_one_leaf_per_suffix(body):
    text = body + "$"
    labels = suffix_tree_edges(text)
    assert sum(label.endswith("$") for label in labels) == len(text)


@given(dna)
def test_edge_count_bounds(body):
    text = body + "$"
    labels = suffix_tree_edges(text)
    assert len(text) <= len(labels) <= max(2 * len(text) - 1, 1)


@given(dna)
def test_root_terminator_edge_present(body):
    text = body + "$"
    assert "$" in suffix_tree_edges(text)


def test_rejects_unknown_symbol():
    with pytest.raises(ValueError):
        suffix_tree_edges("ACGX$")


def test_rejects_empty_text():
    with pytest.raises(ValueError):
        suffix_tree_edges("")