# coding: utf-8

# Copyright (c) Jupyter Development Team.
# Distributed under the terms of the Modified BSD License.

from datetime import datetime, timedelta
from decimal import Decimal
from fractions import Fraction
import copy
import itertools
import random

import pytest

from fieldpatch import NumericDistanceDiff, CopyDiff, DiffMergeError


def test_difference():
    assert NumericDistanceDiff.new(10, 15).difference == 5
    assert NumericDistanceDiff.new(15, 10).difference == -5
    assert NumericDistanceDiff.new(1.5, 2.5).difference == 1.0


@pytest.mark.parametrize("old,new", [
    (3, 3), (0, 0), (2.5, 2.5), (Decimal("1.10"), Decimal("1.1")),
    (Fraction(1, 3), Fraction(2, 6)),
    (datetime(2020, 1, 1), datetime(2020, 1, 1)),
])
def test_no_change_for_equal_values(old, new):
    d = NumericDistanceDiff.new(old, new)
    assert not d.contains_change()
    assert not d.changes_object(old)


def test_contains_change():
    assert NumericDistanceDiff.new(1, 2).contains_change()
    assert NumericDistanceDiff.new(Decimal("1.1"), Decimal("1.2")).contains_change()
    assert NumericDistanceDiff(timedelta(seconds=1)).contains_change()


def test_applies_to_any_value():
    d = NumericDistanceDiff.new(10, 15)
    assert d.applies_cleanly(10) is None
    assert d.applies_cleanly(-400) is None
    assert d.apply_into(10) == 15
    assert d.apply_into(100) == 105
    # Independent of the value it was created from
    assert d.changes_object(1000)


def test_apply_datetimes():
    d = NumericDistanceDiff.new(datetime(2020, 1, 1), datetime(2020, 1, 3))
    assert d.difference == timedelta(days=2)
    assert d.apply_into(datetime(2021, 5, 30)) == datetime(2021, 6, 1)


def test_merge_sums_differences():
    d = NumericDistanceDiff.new(10, 15)
    d.merge(NumericDistanceDiff.new(1, 3))
    assert d.difference == 7
    # The baselines do not need to chain
    d.merge(NumericDistanceDiff.new(-50, -60))
    assert d.difference == -3


def test_merge_other_kind():
    d = NumericDistanceDiff.new(1, 2)
    with pytest.raises(DiffMergeError):
        d.merge(CopyDiff.new(2, 3))
    assert d.difference == 1


def _merged(*diffs):
    result = copy.copy(diffs[0])
    for d in diffs[1:]:
        result.merge(d)
    return result


def test_merge_associative():
    values = [-7, 0, 3, 12, Fraction(1, 2)]
    for a, b, c in itertools.product(values, repeat=3):
        d1, d2, d3 = (NumericDistanceDiff(v) for v in (a, b, c))
        left = _merged(_merged(d1, d2), d3)
        right = _merged(d1, _merged(d2, d3))
        assert left.difference == right.difference


def test_merge_associative_bruteforce(slow):
    rng = random.Random(4711)
    for _ in range(2000):
        d1, d2, d3 = (NumericDistanceDiff.new(rng.randint(-10**6, 10**6),
                                              rng.randint(-10**6, 10**6))
                      for _ in range(3))
        left = _merged(_merged(d1, d2), d3)
        right = _merged(d1, _merged(d2, d3))
        assert left == right


def test_merged_diff_equals_sequential_application():
    d1 = NumericDistanceDiff.new(100, 130)
    d2 = NumericDistanceDiff.new(130, 90)
    merged = _merged(d1, d2)
    assert merged.apply_into(100) == d2.apply_into(d1.apply_into(100)) == 90


def test_merge_does_not_touch_copies():
    d = NumericDistanceDiff(2)
    c = copy.copy(d)
    c.merge(NumericDistanceDiff(3))
    assert d.difference == 2
    assert c == NumericDistanceDiff(5)
    assert repr(c) == "NumericDistanceDiff(difference=5)"
