# coding: utf-8

# Copyright (c) Jupyter Development Team.
# Distributed under the terms of the Modified BSD License.

from abc import ABC, abstractmethod


__all__ = ["Diff"]


class Diff(ABC):
    """A recorded change of a single field value.

    Concrete diffs decide how much of the change they store, which
    in turn decides how strictly they check the value they are applied
    to and whether two of them can be merged.
    """

    #: Name used for this kind of diff when serialized
    kind = None

    @classmethod
    @abstractmethod
    def new(cls, old, new):
        "Create a diff describing the transition from `old` to `new`."

    @abstractmethod
    def contains_change(self):
        """Return True if applying this diff to its own baseline would
        change the value.
        """

    @abstractmethod
    def changes_object(self, current):
        "Return True if applying this diff would change `current`."

    @abstractmethod
    def applies_cleanly(self, obj, field_name=None):
        """Check that this diff can be applied to the field value `obj`.

        Returns None, or raises a MismatchError naming `field_name`.
        """

    @abstractmethod
    def apply_into(self, obj, field_name=None):
        """Return the result of applying this diff to the field value `obj`.

        Raises a MismatchError if `applies_cleanly` fails.
        """

    @abstractmethod
    def merge(self, rhs):
        """Compose `rhs` onto this diff, in place.

        Afterwards this diff describes the change of applying itself and
        then `rhs`. Raises a DiffMergeError if that cannot be expressed.
        """

    def _state(self):
        return vars(self)

    def __eq__(self, other):
        if type(self) is not type(other):
            return NotImplemented
        return self._state() == other._state()

    __hash__ = None

    def __repr__(self):
        args = ", ".join("%s=%r" % kv for kv in self._state().items())
        return "%s(%s)" % (type(self).__name__, args)
