import random

import pytest

from readassembly.linear import brute_force_locate
from readassembly.pair_fm import PairFMIndex
from readassembly.simulate import random_reference


def _even(positions):
    return [p for p in positions if p % 2 == 0]


def test_worked_example():
    assert PairFMIndex("ACGTACGT").locate("ACGT", 0) == [0, 4]


@pytest.mark.parametrize("seed", [1, 2, 3])
@pytest.mark.parametrize("start", [40, 41, 100])
def test_exact_matches_agree_with_scan(seed, start):
    reference = random_reference(200, random.Random(seed))
    pattern = reference[start : start + 10]
    index = PairFMIndex(reference)
    assert index.locate(pattern, 0) == _even(brute_force_locate(reference, pattern, 0))


def test_mismatch_is_counted_per_pair():
    reference = "AAAAAAAA"
    index = PairFMIndex(reference)
    expected = _even(brute_force_locate(reference, "CCAA", 2))
    assert index.locate("CCAA", 1) == expected
    assert index.locate("CCAA", 0) == []


@pytest.mark.parametrize("max_err", [0, 1, 2])
def test_mismatch_hits_between_base_bounds(max_err):
    reference = random_reference(120, random.Random(7))
    pattern = "A" + reference[31:43]
    hits = set(PairFMIndex(reference).locate(pattern[:12], max_err))
    lower = set(_even(brute_force_locate(reference, pattern[:12], max_err)))
    upper = set(_even(brute_force_locate(reference, pattern[:12], 2 * max_err)))
    assert lower <= hits <= upper


def test_hits_grow_with_allowed_errors():
    reference = random_reference(100, random.Random(11))
    index = PairFMIndex(reference)
    pattern = reference[10:18]
    zero, one, two = (set(index.locate(pattern, k)) for k in range(3))
    assert zero <= one <= two
    assert 10 in zero


def test_results_are_sorted_and_unique():
    reference = random_reference(80, random.Random(5))
    hits = PairFMIndex(reference).locate(reference[:6], 2)
    assert hits == sorted(set(hits))


def test_odd_reference_drops_last_base():
    odd = PairFMIndex("ACGTAC" + "A")
    trimmed = PairFMIndex("ACGTAC")
    assert odd.locate("AC", 0) == trimmed.locate("AC", 0)
    assert 4 not in PairFMIndex("ACGTA").locate("AC", 0)
    assert PairFMIndex("ACGTA").locate("AC", 0) == PairFMIndex("ACGT").locate("AC", 0)


def test_odd_pattern_drops_last_base():
    index = PairFMIndex("ACGTACGA")
    assert index.locate("ACG", 0) == index.locate("AC", 0)


def test_empty_pattern_returns_every_pair_offset():
    reference = "ACGTAC"
    assert PairFMIndex(reference).locate("", 0) == list(range(0, len(reference) + 1, 2))


def test_negative_max_err_finds_nothing():
    assert PairFMIndex("ACGTACGT").locate("AC", -1) == []


def test_invalid_reference_raises():
    with pytest.raises(ValueError):
        PairFMIndex("ACNT")


def test_invalid_pattern_raises():
    index = PairFMIndex("ACGT")
    with pytest.raises(ValueError):
        index.locate("AX", 0)