# coding: utf-8

# Copyright (c) Jupyter Development Team.
# Distributed under the terms of the Modified BSD License.

from ..comparing import compare, copy_value
from ..mismatch import MismatchError, MismatchType, DiffMergeError
from .base import Diff


__all__ = ["CopyDiff"]


class CopyDiff(Diff):
    """Stores copies of both the old and the new value.

    The old value acts as a safety check: the diff only applies to a
    field that still holds it, which detects concurrent modification.
    """

    kind = "copy"

    def __init__(self, old_value, new_value):
        self.old_value = old_value
        self.new_value = new_value

    @classmethod
    def new(cls, old, new):
        return cls(copy_value(old), copy_value(new))

    def contains_change(self):
        return not compare(self.new_value, self.old_value)

    def changes_object(self, current):
        # A real change whose target value `current` already holds
        return self.contains_change() and compare(current, self.new_value)

    def applies_cleanly(self, obj, field_name=None):
        if not compare(self.old_value, obj):
            raise MismatchError(field_name,
                                repr(self.old_value),
                                repr(obj),
                                MismatchType.PATCH_OLD_VALUE)

    def apply_into(self, obj, field_name=None):
        self.applies_cleanly(obj, field_name)
        return copy_value(self.new_value)

    def merge(self, rhs):
        if not isinstance(rhs, CopyDiff):
            raise DiffMergeError("Cannot merge %s into %s." % (
                type(rhs).__name__, type(self).__name__))
        if not compare(rhs.old_value, self.new_value):
            raise DiffMergeError("Diff does not continue from the new value of this diff.")
        self.new_value = copy_value(rhs.new_value)

    def __copy__(self):
        return CopyDiff(self.old_value, self.new_value)
