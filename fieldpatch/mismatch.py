# coding: utf-8

# Copyright (c) Jupyter Development Team.
# Distributed under the terms of the Modified BSD License.

"""Errors describing why a patch or partial could not be used.

A `MismatchError` describes one field that did not hold the expected
value. A `MultipleMismatchError` collects every mismatch found by a
single check, so a caller sees all problems of a patch at once.
"""

from enum import Enum


__all__ = [
    "MismatchType", "MismatchError", "MultipleMismatchError",
    "IncompleteError", "DiffMergeError",
]


class MismatchType(Enum):
    "The different reasons a field can mismatch."

    # An identity field of the patch differs from the target
    OBJECT_ID = "object_id"
    # The target value differs from the old value recorded by a diff
    PATCH_OLD_VALUE = "patch_old_value"

    @property
    def description(self):
        return _mismatch_descriptions[self]

    def __str__(self):
        return self.description


_mismatch_descriptions = {
    MismatchType.OBJECT_ID: "Object id didn't match patch id",
    MismatchType.PATCH_OLD_VALUE: "Current object value did not match old patch value",
}


class MismatchError(Exception):
    """A single field whose value differed from what an operation expected.

    `expected` and `received` are string representations of the values.
    """

    def __init__(self, field_name, expected, received, mismatch_type):
        self.field_name = field_name
        self.expected = str(expected)
        self.received = str(received)
        self.mismatch_type = MismatchType(mismatch_type)
        super(MismatchError, self).__init__(
            field_name, self.expected, self.received, self.mismatch_type)

    @property
    def name(self):
        return self.field_name

    def _key(self):
        return (self.field_name, self.expected, self.received, self.mismatch_type)

    def __eq__(self, other):
        if not isinstance(other, MismatchError):
            return NotImplemented
        return self._key() == other._key()

    def __hash__(self):
        return hash(self._key())

    def __repr__(self):
        return "MismatchError(%r, %r, %r, %s)" % (
            self.field_name, self.expected, self.received, self.mismatch_type.name)

    def __str__(self):
        return "{} - field {}: expected {}, got {}".format(
            self.mismatch_type, self.field_name, self.expected, self.received)


class MultipleMismatchError(Exception):
    """An ordered collection of mismatches found during one check.

    Mismatches are kept in the order they were added and are not
    deduplicated. An empty collection means the check passed.
    """

    def __init__(self, mismatches=()):
        self.mismatches = list(mismatches)
        super(MultipleMismatchError, self).__init__()

    def add_error(self, error):
        assert isinstance(error, MismatchError), 'can only add MismatchError instances'
        self.mismatches.append(error)

    def is_error_free(self):
        return not self.mismatches

    def has_errors(self):
        return bool(self.mismatches)

    def merge(self, other):
        "Append all mismatches of `other` to this collection."
        self.mismatches.extend(other.mismatches)

    def of_type(self, mismatch_type):
        mismatch_type = MismatchType(mismatch_type)
        return [m for m in self.mismatches if m.mismatch_type == mismatch_type]

    def __len__(self):
        return len(self.mismatches)

    def __iter__(self):
        return iter(self.mismatches)

    def __eq__(self, other):
        if not isinstance(other, MultipleMismatchError):
            return NotImplemented
        return self.mismatches == other.mismatches

    __hash__ = None

    def __repr__(self):
        return "MultipleMismatchError(%r)" % (self.mismatches,)

    def __str__(self):
        lines = ["{} mismatches:".format(len(self.mismatches))]
        lines.extend(str(m) for m in self.mismatches)
        return "\n".join(lines)


class IncompleteError(Exception):
    """An operation needed a fully populated record but got a partial one.

    `incomplete` holds the partial record itself so the caller can
    inspect which fields are missing and retry.
    """

    def __init__(self, operation, object_id, incomplete):
        self.operation = operation
        self.object_id = str(object_id)
        self.incomplete = incomplete
        super(IncompleteError, self).__init__(operation, self.object_id, incomplete)

    def __str__(self):
        return "IncompleteError: `{}` failed for {}.\nData:\n{!r}".format(
            self.operation, self.object_id, self.incomplete)


class DiffMergeError(ValueError):
    """Two diffs could not be composed into one.

    Carries no baseline details, only the fact that the second diff
    does not continue where the first one ends.
    """
    pass
