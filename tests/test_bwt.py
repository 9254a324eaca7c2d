import pytest
from hypothesis import given
from hypothesis import strategies as st

from seqstrings.bwt import BWTIndex, bwt, count_occurrences, inverse_bwt
from seqstrings.kmp import find_pattern

dna = st.text(alphabet="ACGT", max_size=20)


def test_bwt_of_short_text():
    assert bwt("AA$") == "AA$"


def test_bwt_of_repeated_text():
    assert bwt("ACACACAC$") == "CCCC$AAAA"


def test_bwt_of_empty_text():
    assert bwt("") == ""


@given(dna)
def test_bwt_is_a_permutation(text):
    text += "$"
    assert sorted(bwt(text)) == sorted(text)


@given(dna)
def test_inverse_round_trip(text):
    text += "$"
    assert inverse_bwt(bwt(text)) == text


def test_inverse_requires_terminator():
    with pytest.raises(ValueError):
        inverse_bwt("ACGT")


@given(dna, st.data())
def test_count_matches_search_positions(text, data):
    full = text + "$"
    index = BWTIndex(bwt(full))
    pattern = data.draw(st.text(alphabet="ACGT", min_size=1, max_size=4))
    assert index.count(pattern) == len(find_pattern(pattern, full))


@given(dna, st.data())
def test_substring_is_counted(text, data):
    full = text + "$"
    start = data.draw(st.integers(min_value=0, max_value=len(full) - 1))
    end = data.draw(st.integers(min_value=start + 1, max_value=len(full)))
    assert BWTIndex(bwt(full)).count(full[start:end]) >= 1


@given(dna)
def test_single_symbol_counts(text):
    full = text + "$"
    index = BWTIndex(bwt(full))
    for symbol in "ACGT$":
        assert index.count(symbol) == full.count(symbol)


@given(dna)
def test_whole_text_and_empty_pattern(text):
    full = text + "$"
    index = BWTIndex(bwt(full))
    assert index.count(full) == 1
    assert index.count("") == len(full)


@given(dna)
def test_unknown_symbol_is_not_counted(text):
    assert BWTIndex(bwt(text + "$")).count("N") == 0


def test_empty_index_counts_nothing():
    assert BWTIndex("").count("") == 0


@given(dna, st.lists(st.text(alphabet="ACGT", min_size=1, max_size=3), max_size=5))
def test_count_occurrences_matches_index(text, patterns):
    transformed = bwt(text + "$")
    index = BWTIndex(transformed)
    assert count_occurrences(transformed, patterns) == [index.count(p) for p in patterns]