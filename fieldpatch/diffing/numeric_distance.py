# coding: utf-8

# Copyright (c) Jupyter Development Team.
# Distributed under the terms of the Modified BSD License.

from ..mismatch import DiffMergeError
from .base import Diff


__all__ = ["NumericDistanceDiff"]


class NumericDistanceDiff(Diff):
    """Stores only the numeric distance between the old and new value.

    Works for any value type supporting subtraction, adding the
    difference back, and a zero test through truthiness (int, float,
    Decimal, Fraction, timedelta, ...).

    The difference is not tied to a baseline, so the diff applies to any
    value and merges by summing distances.
    """

    kind = "numeric_distance"

    def __init__(self, difference):
        self.difference = difference

    @classmethod
    def new(cls, old, new):
        return cls(new - old)

    def contains_change(self):
        return bool(self.difference)

    def changes_object(self, current):
        return self.contains_change()

    def applies_cleanly(self, obj, field_name=None):
        pass

    def apply_into(self, obj, field_name=None):
        return obj + self.difference

    def merge(self, rhs):
        if not isinstance(rhs, NumericDistanceDiff):
            raise DiffMergeError("Cannot merge %s into %s." % (
                type(rhs).__name__, type(self).__name__))
        self.difference = self.difference + rhs.difference

    def __copy__(self):
        return NumericDistanceDiff(self.difference)
