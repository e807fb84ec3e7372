# coding: utf-8

# Copyright (c) Jupyter Development Team.
# Distributed under the terms of the Modified BSD License.

"""Whole record patches.

A Patch holds the identity (forced) fields of the record it targets and
one optional Diff per other field. Before changing a record, `check`
verifies both that the record is the right one and that every diff
applies cleanly, and reports all problems at once::

    patch = PatchExample.from_objects(before, after)
    try:
        patch.check(record)
    except MultipleMismatchError as e:
        ...  # reject, e lists every mismatching field
    else:
        patch.apply(record)
"""

import copy

from .base import Base
from .comparing import compare, copy_value
from .log import debug
from .mismatch import (
    MismatchError, MismatchType, MultipleMismatchError, DiffMergeError)
from .schema import get_field, set_field


__all__ = ["Patch"]


class Patch(Base):
    """A conditional update of a target record."""

    @classmethod
    def from_objects(cls, old, new, keep_unchanged=False):
        """Create the patch transforming record `old` into record `new`.

        Fields that did not change get no diff unless `keep_unchanged`
        is given. Raises MultipleMismatchError if the identity fields of
        the two records differ.
        """
        schema = cls.schema
        errors = MultipleMismatchError()
        identity = {}
        for f in schema.forced_fields:
            a = get_field(old, f.name)
            b = get_field(new, f.name)
            if not compare(a, b):
                errors.add_error(MismatchError(f.name, repr(a), repr(b), MismatchType.OBJECT_ID))
            identity[f.name] = copy_value(a)
        if errors.has_errors():
            raise errors

        patch = cls(**identity)
        for f in schema.optional_fields:
            d = f.diff.new(get_field(old, f.name), get_field(new, f.name))
            if keep_unchanged or d.contains_change():
                patch._slots[f.name] = d
        return patch

    @classmethod
    def from_partial(cls, obj, partial):
        """Create the patch writing the set fields of `partial` onto `obj`.

        The identity of the patch is taken from `partial`.
        """
        if partial.schema is not cls.schema:
            raise TypeError("%s does not describe the same record as %s." % (
                type(partial).__name__, cls.__name__))
        patch = cls(**partial.identity())
        for name, value in partial._ordered_slots():
            d = cls.schema[name].diff.new(get_field(obj, name), value)
            patch._slots[name] = d
        return patch

    def _validate_slot(self, name, value):
        diff_type = self.schema[name].diff
        if not isinstance(value, diff_type):
            raise TypeError("Patch field %r needs a %s, not %r." % (
                name, diff_type.__name__, value))

    def diff(self, name, default=None):
        "Return the Diff for field `name`, or `default` if it has none."
        if not self._is_slot(name):
            raise KeyError(name)
        return self._slots.get(name, default)

    def set_diff(self, name, diff):
        "Set the Diff for field `name`, replacing any diff already set."
        self.set(name, diff)

    def diffs(self):
        "All set diffs, keyed on field name, in schema order."
        return dict(self._ordered_slots())

    def changed_fields(self):
        "Names of the fields whose diff contains a change."
        return [name for name, d in self._ordered_slots() if d.contains_change()]

    def cleanup(self):
        """Remove diffs that do not contain a change.

        Returns True if any diff was removed.
        """
        removed = [name for name, d in self._ordered_slots() if not d.contains_change()]
        for name in removed:
            del self._slots[name]
        if removed:
            debug('Removed unchanged fields %s from %s', removed, type(self).__name__)
        return bool(removed)

    # Checks

    def _identity_mismatches(self, obj):
        errors = MultipleMismatchError()
        for f in self.schema.forced_fields:
            expected = self._forced[f.name]
            received = get_field(obj, f.name)
            if not compare(expected, received):
                errors.add_error(MismatchError(
                    f.name, repr(expected), repr(received), MismatchType.OBJECT_ID))
        return errors

    def _old_value_mismatches(self, obj):
        errors = MultipleMismatchError()
        for name, d in self._ordered_slots():
            try:
                d.applies_cleanly(get_field(obj, name), name)
            except MismatchError as e:
                errors.add_error(e)
        return errors

    def mismatches(self, obj):
        """Return every reason this patch cannot be applied to `obj`.

        The result is empty if `check` would pass.
        """
        errors = self._identity_mismatches(obj)
        errors.merge(self._old_value_mismatches(obj))
        return errors

    def is_correct_target(self, obj):
        """Check that the identity fields of this patch match `obj`.

        Raises MultipleMismatchError listing all mismatching identity fields.
        Does not check the diffs, see `check` for that.
        """
        errors = self._identity_mismatches(obj)
        if errors.has_errors():
            raise errors

    def can_apply_cleanly(self, obj):
        """Check that every diff of this patch applies cleanly to `obj`.

        Raises MultipleMismatchError listing all conflicting fields.
        Does not check the target, see `check` for that.
        """
        errors = self._old_value_mismatches(obj)
        if errors.has_errors():
            raise errors

    def check(self, obj):
        """Run both `is_correct_target` and `can_apply_cleanly`.

        Raises a single MultipleMismatchError with the errors of both.
        """
        errors = self.mismatches(obj)
        if errors.has_errors():
            raise errors

    def is_same_target(self, other):
        "True if `other` has the same identity fields. Diffs are not compared."
        if other.schema is not self.schema:
            return False
        return all(compare(self._forced[f.name], other._forced[f.name])
                   for f in self.schema.forced_fields)

    # Changes

    def apply(self, obj):
        """Apply all diffs of this patch to `obj`.

        Runs `check` first and raises its MultipleMismatchError without
        touching `obj` if it fails.
        """
        self.check(obj)
        for name, d in self._ordered_slots():
            set_field(obj, name, d.apply_into(get_field(obj, name), name))
        debug('Applied %d fields of %s to %s', self.count(), type(self).__name__, self.object_id())

    def merge(self, other):
        """Compose the patch `other`, applied after this one, into this patch.

        Raises DiffMergeError if the patches target different records or
        any field's diffs cannot be merged; this patch is unchanged then.
        """
        if not self.is_same_target(other):
            raise DiffMergeError("Cannot merge patches for different targets.")
        merged = {name: copy.copy(d) for name, d in self._slots.items()}
        for name, d in other._ordered_slots():
            if name in merged:
                merged[name].merge(d)
            else:
                merged[name] = copy.copy(d)
        object.__setattr__(self, '_slots', merged)
