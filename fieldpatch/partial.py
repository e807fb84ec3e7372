# coding: utf-8

# Copyright (c) Jupyter Development Team.
# Distributed under the terms of the Modified BSD License.

from .base import Base
from .comparing import compare, copy_value
from .log import debug
from .mismatch import IncompleteError
from .schema import get_field, set_field


__all__ = ["Partial"]


class Partial(Base):
    """A record where every non-forced field may be absent.

    Similar to a sparse update payload: only the fields that are set are
    written by `apply`, and `build` turns a complete partial into a full
    target record.
    """

    @classmethod
    def from_target(cls, obj):
        "Create a complete partial holding the values of target record `obj`."
        schema = cls.schema
        kwargs = {}
        for f in schema.forced_fields + schema.optional_fields:
            kwargs[f.name] = copy_value(get_field(obj, f.name))
        return cls(**kwargs)

    def merge_into(self, other):
        """Copy all fields set here into the partial `other`.

        Fields already set in `other` are overwritten.
        """
        if type(other) is not type(self):
            raise TypeError("Cannot merge %s into %s." % (
                type(self).__name__, type(other).__name__))
        for name, value in self._ordered_slots():
            other._slots[name] = copy_value(value)

    def is_partial_equal_existing(self, other):
        """Compare the fields present in both partials.

        Returns True if they are all equivalent, including when no field
        is present in both.
        """
        for name, value in self._ordered_slots():
            if name in other._slots and not compare(value, other._slots[name]):
                return False
        return True

    def build(self):
        """Construct the full target record.

        Ignored fields receive their default. Raises IncompleteError,
        holding this partial, if any optional slot is unset.
        """
        if not self.is_complete():
            raise IncompleteError("build", self.object_id(), self)
        values = {}
        for f in self.schema.fields:
            if f.ignored:
                values[f.name] = f.get_default()
            elif f.forced:
                values[f.name] = copy_value(self._forced[f.name])
            else:
                values[f.name] = copy_value(self._slots[f.name])
        return self.schema.construct(values)

    def apply(self, obj):
        "Write the set fields of this partial onto target record `obj`."
        for name, value in self._ordered_slots():
            set_field(obj, name, copy_value(value))
        debug('Applied %d fields of %s to %s', self.count(), type(self).__name__, self.object_id())

    def to_dict(self):
        "The forced and set fields as a dict."
        d = self.identity()
        d.update(self._ordered_slots())
        return d
