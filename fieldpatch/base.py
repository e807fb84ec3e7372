# coding: utf-8

# Copyright (c) Jupyter Development Team.
# Distributed under the terms of the Modified BSD License.

from abc import ABC, abstractmethod
import copy

from .diff_format import Missing


__all__ = ["Base"]


class Base(ABC):
    """Everything Partial and Patch records have in common.

    A record keeps the values of the forced fields of its schema, which
    are always present, and one optional slot per other (non-ignored)
    field. Concrete classes are created with `make_partial` and
    `make_patch`, which set the `schema` and `MAX_FIELDS` class attributes.

    Forced values can be passed positionally in schema order or by
    keyword; slot values are passed by keyword. Fields are also readable
    and writable as attributes, an unset slot reads as `Missing`.
    """

    #: The RecordSchema of the target record type
    schema = None

    #: The number of optional slots, the upper bound of `count()`
    MAX_FIELDS = 0

    def __init__(self, *args, **kwargs):
        schema = self.schema
        if schema is None:
            raise TypeError("%s has no schema, create record classes with "
                            "make_partial or make_patch." % type(self).__name__)
        forced = schema.forced_fields
        if len(args) > len(forced):
            raise TypeError("%s takes at most %d positional arguments (%d given)" % (
                type(self).__name__, len(forced), len(args)))
        object.__setattr__(self, '_forced', {})
        object.__setattr__(self, '_slots', {})

        for f, value in zip(forced, args):
            if f.name in kwargs:
                raise TypeError("%s got multiple values for field %r" % (
                    type(self).__name__, f.name))
            self._set_forced(f.name, value)
        for f in forced[len(args):]:
            if f.name in kwargs:
                self._set_forced(f.name, kwargs.pop(f.name))
            elif f.has_default():
                self._forced[f.name] = f.get_default()
            else:
                raise TypeError("%s missing forced field %r" % (type(self).__name__, f.name))

        for name, value in kwargs.items():
            if not self._is_slot(name):
                raise TypeError("%s got an unexpected field %r" % (type(self).__name__, name))
            if value is not Missing:
                self.set(name, value)

    # Field access

    def _is_slot(self, name):
        return name in self.schema and not (
            self.schema[name].forced or self.schema[name].ignored)

    def _is_forced(self, name):
        return name in self.schema and self.schema[name].forced

    def _set_forced(self, name, value):
        if value is Missing:
            raise ValueError("Forced field %r cannot be unset." % name)
        self._forced[name] = value

    def _validate_slot(self, name, value):
        "Hook for subclasses to restrict what a slot may hold."
        pass

    def get(self, name, default=Missing):
        "Return the value of field `name`, or `default` if it is unset."
        if self._is_forced(name):
            return self._forced[name]
        if not self._is_slot(name):
            raise KeyError(name)
        return self._slots.get(name, default)

    def set(self, name, value):
        if self._is_forced(name):
            self._set_forced(name, value)
            return
        if not self._is_slot(name):
            raise KeyError(name)
        if value is Missing:
            self.unset(name)
            return
        self._validate_slot(name, value)
        self._slots[name] = value

    def unset(self, name):
        "Clear slot `name`, return True if it was set."
        if not self._is_slot(name):
            raise KeyError(name)
        return self._slots.pop(name, Missing) is not Missing

    def is_set(self, name):
        if self._is_forced(name):
            return True
        if not self._is_slot(name):
            raise KeyError(name)
        return name in self._slots

    def __getattr__(self, name):
        # Only called when regular lookup fails
        if name.startswith('_') or self.schema is None:
            raise AttributeError(name)
        try:
            return self.get(name)
        except KeyError:
            raise AttributeError("%r object has no field %r" % (type(self).__name__, name))

    def __setattr__(self, name, value):
        if self.schema is not None and (self._is_forced(name) or self._is_slot(name)):
            self.set(name, value)
        else:
            raise AttributeError("%r object has no field %r" % (type(self).__name__, name))

    def __delattr__(self, name):
        try:
            self.unset(name)
        except KeyError:
            raise AttributeError(name)

    def identity(self):
        "Return the values of the forced fields as a dict."
        return dict(self._forced)

    def object_id(self):
        "A string identifying the record, built from its forced fields."
        if not self._forced:
            return self.schema.name
        return ",".join(str(self._forced[f.name]) for f in self.schema.forced_fields)

    def _ordered_slots(self):
        return [(f.name, self._slots[f.name])
                for f in self.schema.optional_fields if f.name in self._slots]

    # Completeness

    def is_complete(self):
        "True if every optional slot is set."
        return len(self._slots) == self.MAX_FIELDS

    def is_empty(self):
        "True if no optional slot is set."
        return not self._slots

    def count(self):
        "The number of set optional slots. Forced fields do not count."
        return len(self._slots)

    def missing_fields(self):
        "Names of the unset optional slots, in schema order."
        return [f.name for f in self.schema.optional_fields if f.name not in self._slots]

    @abstractmethod
    def apply(self, obj):
        "Write this record onto the target record `obj`."

    # Value semantics

    def copy(self):
        new = type(self).__new__(type(self))
        object.__setattr__(new, '_forced', copy.deepcopy(self._forced))
        object.__setattr__(new, '_slots', copy.deepcopy(self._slots))
        return new

    __copy__ = copy

    def __eq__(self, other):
        if type(self) is not type(other):
            return NotImplemented
        return self._forced == other._forced and self._slots == other._slots

    __hash__ = None

    def __repr__(self):
        items = [(f.name, self._forced[f.name]) for f in self.schema.forced_fields]
        items.extend(self._ordered_slots())
        return "%s(%s)" % (type(self).__name__, ", ".join("%s=%r" % kv for kv in items))
