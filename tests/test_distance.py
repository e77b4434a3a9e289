from __future__ import annotations

import pytest

from spelling.distance import check_bound, distance, distance_bounded
from spelling.exceptions import InvalidBoundError, SpellingError


def test_distance_known_values():
    assert distance("kitten", "sitting") == 3
    assert distance("saturday", "sunday") == 3
    assert distance("thinga", "thing") == 1
    assert distance("thinga", "thin") == 2
    assert distance("restaraunt", "restaurant") == 2


def test_distance_base_cases():
    assert distance("", "") == 0
    assert distance("", "test") == 4
    assert distance("test", "") == 4
    assert distance("abc", "abc") == 0


def test_distance_counts_code_points_not_bytes():
    assert distance("à", "a") == 1
    assert distance("café", "cafe") == 1
    assert distance("àéî", "") == 3


def test_distance_properties(word_sample):
    for a in word_sample:
        assert distance(a, a) == 0
        for b in word_sample:
            d_ab = distance(a, b)
            assert d_ab == distance(b, a)
            assert d_ab >= abs(len(a) - len(b))
            for c in word_sample:
                assert distance(a, c) <= d_ab + distance(b, c)


def test_distance_bounded_scenarios():
    assert distance_bounded("saturday", "sunday", 3) == 3
    assert distance_bounded("saturday", "sunday", 2) is None
    assert distance_bounded("kitten", "sitting", 3) == 3
    assert distance_bounded("kitten", "sitting", 5) == 3


def test_distance_bounded_rejects_on_length_gap():
    assert distance_bounded("a", "abcdefg", 2) is None
    assert distance_bounded("abcdefg", "a", 2) is None
    assert distance_bounded("a", "abcdefg", 6) == 6


def test_distance_bounded_zero_bound_accepts_only_identical():
    assert distance_bounded("", "", 0) == 0
    assert distance_bounded("thing", "thing", 0) == 0
    assert distance_bounded("thing", "thin", 0) is None
    assert distance_bounded("thing", "think", 0) is None


def test_distance_bounded_empty_operands():
    assert distance_bounded("", "abc", 3) == 3
    assert distance_bounded("abc", "", 5) == 3
    assert distance_bounded("", "abcd", 3) is None


def test_distance_bounded_off_diagonal_paths():
    # optimal alignments that leave the main diagonal
    assert distance_bounded("ab", "b", 1) == 1
    assert distance_bounded("b", "ab", 1) == 1
    assert distance_bounded("abcdef", "bcdefa", 2) == 2
    assert distance_bounded("abcdef", "bcdefa", 1) is None
    assert distance_bounded("xabc", "abcx", 2) == 2


def test_distance_bounded_agrees_with_distance(word_sample):
    for a in word_sample:
        for b in word_sample:
            exact = distance(a, b)
            for bound in range(0, 8):
                got = distance_bounded(a, b, bound)
                if exact <= bound:
                    assert got == exact, (a, b, bound)
                else:
                    assert got is None, (a, b, bound)


def test_distance_bounded_is_symmetric(word_sample):
    for a in word_sample:
        for b in word_sample:
            assert distance_bounded(a, b, 3) == distance_bounded(b, a, 3)


def test_distance_bounded_long_strings():
    a = "abcdefghij" * 20
    b = a[:50] + "X" + a[51:120] + a[121:] + "Y"
    assert distance(a, b) == 3
    assert distance_bounded(a, b, 3) == 3
    assert distance_bounded(a, b, 2) is None
    assert distance_bounded(a, "Z" * 200, 5) is None


@pytest.mark.parametrize("bad", [-1, 1.5, "3", None, True])
def test_distance_bounded_rejects_invalid_bound(bad):
    with pytest.raises(InvalidBoundError):
        distance_bounded("a", "b", bad)


def test_check_bound_error_hierarchy():
    assert check_bound(0) == 0
    with pytest.raises(ValueError):
        check_bound(-3)
    with pytest.raises(SpellingError):
        check_bound(-3)
