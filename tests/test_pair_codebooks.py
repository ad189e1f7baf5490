from fractions import Fraction
from itertools import product

import pytest

from tvhkit.pair_codebooks import pair_codebook


PAIR_INDICES = range(5, 12)
VALUE_RANGES = {
    5: range(-4, 5),
    6: range(-4, 5),
    7: range(0, 8),
    8: range(0, 8),
    9: range(0, 13),
    10: range(0, 13),
    11: range(0, 17),
}


@pytest.mark.parametrize("index", PAIR_INDICES)
def test_entries_hold_two_values(index):
    assert all(len(entry.values) == 2 for entry in pair_codebook(index))


@pytest.mark.parametrize("index", PAIR_INDICES)
def test_codewords_fit_their_length(index):
    assert all(0 <= entry.codeword < (1 << entry.length) for entry in pair_codebook(index))


@pytest.mark.parametrize("index", PAIR_INDICES)
def test_entries_in_canonical_order(index):
    keys = [(entry.length, entry.codeword) for entry in pair_codebook(index)]
    assert keys == sorted(keys)


@pytest.mark.parametrize("index", PAIR_INDICES)
def test_code_is_complete(index):
    total = sum(Fraction(1, 1 << entry.length) for entry in pair_codebook(index))
    assert total == 1


@pytest.mark.parametrize("index", PAIR_INDICES)
def test_code_is_prefix_free(index):
    codes = [format(e.codeword, f"0{e.length}b") for e in pair_codebook(index)]
    for a in codes:
        assert sum(1 for b in codes if b.startswith(a)) == 1


@pytest.mark.parametrize("index", PAIR_INDICES)
def test_every_value_pair_appears_once(index):
    values = [entry.values for entry in pair_codebook(index)]
    expected = set(product(VALUE_RANGES[index], repeat=2))
    assert len(values) == len(expected)
    assert set(values) == expected


def test_first_entry_of_codebook_five():
    entry = pair_codebook(5)[0]
    assert (entry.length, entry.codeword, entry.values) == (1, 0, (0, 0))


def test_escape_entry_of_codebook_eleven():
    entry = pair_codebook(11)[2]
    assert (entry.length, entry.codeword, entry.values) == (5, 4, (16, 16))


@pytest.mark.parametrize("index", [0, 4, 12, "5", None])
def test_unknown_index_raises(index):
    with pytest.raises(ValueError):
        pair_codebook(index)