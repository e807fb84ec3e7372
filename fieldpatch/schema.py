# coding: utf-8

# Copyright (c) Jupyter Development Team.
# Distributed under the terms of the Modified BSD License.

"""Declarative description of a record type, used to create its
Partial and Patch classes.

Example::

    @dataclass
    class Example:
        id: int
        food: float
        bard: Optional[str]
        something_special: int = 42

    schema = RecordSchema.from_dataclass(
        Example, forced=["id"], ignored=["something_special"])
    PartialExample = make_partial(schema)
    PatchExample = make_patch(schema)

Field kinds:

- forced: always present in a Partial and used as identity of a Patch.
- ignored: not carried by Partial or Patch, filled from its default when
  a Partial is built into a record.
- all others are optional slots of a Partial and diffable in a Patch.
"""

from collections.abc import Mapping, MutableMapping
import dataclasses

from .diff_format import Missing
from .diffing import Diff, CopyDiff


__all__ = ["SchemaError", "Field", "RecordSchema", "make_partial", "make_patch",
           "get_field", "set_field"]


class SchemaError(ValueError):
    pass


class Field(object):
    """Description of a single record field."""

    def __init__(self, name, forced=False, ignored=False, default=Missing,
                 default_factory=None, diff=CopyDiff):
        if not isinstance(name, str) or not name.isidentifier():
            raise SchemaError("Field name must be an identifier, not %r." % (name,))
        if forced and ignored:
            raise SchemaError("Field %r cannot be both forced and ignored." % name)
        if default is not Missing and default_factory is not None:
            raise SchemaError("Field %r cannot have both default and default_factory." % name)
        if not (isinstance(diff, type) and issubclass(diff, Diff)):
            raise SchemaError("Field %r: diff must be a Diff subclass, not %r." % (name, diff))
        if ignored and default is Missing and default_factory is None:
            raise SchemaError("Ignored field %r needs a default." % name)
        self.name = name
        self.forced = forced
        self.ignored = ignored
        self.default = default
        self.default_factory = default_factory
        self.diff = diff

    def has_default(self):
        return self.default is not Missing or self.default_factory is not None

    def get_default(self):
        if self.default_factory is not None:
            return self.default_factory()
        if self.default is Missing:
            raise SchemaError("Field %r has no default." % self.name)
        return self.default

    def __repr__(self):
        flags = [f for f in ("forced", "ignored") if getattr(self, f)]
        return "Field(%r%s)" % (self.name, "".join(", " + f for f in flags))


def get_field(obj, name):
    "Read field `name` from a record or mapping."
    if isinstance(obj, Mapping):
        return obj[name]
    return getattr(obj, name)


def set_field(obj, name, value):
    "Write field `name` of a record or mapping."
    if isinstance(obj, MutableMapping):
        obj[name] = value
    else:
        setattr(obj, name, value)


class RecordSchema(object):
    """The fields of a target record type.

    `target` is called with the field values as keyword arguments to
    construct a record; use `dict` for mapping records.
    """

    def __init__(self, target, fields, name=None):
        fields = list(fields)
        names = [f.name for f in fields]
        duplicates = sorted(set(n for n in names if names.count(n) > 1))
        if duplicates:
            raise SchemaError("Duplicate field names %r." % duplicates)
        self.target = target
        self.fields = fields
        self.name = name or getattr(target, '__name__', 'Record')
        self._by_name = {f.name: f for f in fields}

    @classmethod
    def from_dataclass(cls, target, forced=(), ignored=(), diffs=None, defaults=None):
        """Describe a dataclass.

        Dataclass defaults are used as field defaults unless overridden
        in `defaults`. `diffs` maps field names to the Diff type a Patch
        should use for them.
        """
        if not dataclasses.is_dataclass(target):
            raise SchemaError("%r is not a dataclass." % (target,))
        diffs = diffs or {}
        defaults = defaults or {}
        known = {f.name for f in dataclasses.fields(target)}
        unknown = (set(forced) | set(ignored) | set(diffs) | set(defaults)) - known
        if unknown:
            raise SchemaError("Unknown fields %r for %s." % (sorted(unknown), target.__name__))

        fields = []
        for f in dataclasses.fields(target):
            default, default_factory = Missing, None
            if f.name in defaults:
                default = defaults[f.name]
            elif f.default is not dataclasses.MISSING:
                default = f.default
            elif f.default_factory is not dataclasses.MISSING:
                default_factory = f.default_factory
            fields.append(Field(
                f.name,
                forced=f.name in forced,
                ignored=f.name in ignored,
                default=default,
                default_factory=default_factory,
                diff=diffs.get(f.name, CopyDiff),
            ))
        return cls(target, fields)

    def __getitem__(self, name):
        return self._by_name[name]

    def __contains__(self, name):
        return name in self._by_name

    @property
    def forced_fields(self):
        return [f for f in self.fields if f.forced]

    @property
    def ignored_fields(self):
        return [f for f in self.fields if f.ignored]

    @property
    def optional_fields(self):
        "Fields with an optional slot in a Partial, and a diff slot in a Patch."
        return [f for f in self.fields if not (f.forced or f.ignored)]

    @property
    def max_fields(self):
        return len(self.optional_fields)

    def construct(self, values):
        "Construct a target record from a complete dict of field values."
        return self.target(**values)

    def __repr__(self):
        return "RecordSchema(%s, %r)" % (self.name, self.fields)


def _make_class(base, schema, name):
    if not isinstance(schema, RecordSchema):
        raise SchemaError("Expecting a RecordSchema, not %r." % (schema,))
    name = name or base.__name__ + schema.name
    namespace = {
        "schema": schema,
        "MAX_FIELDS": schema.max_fields,
        "__module__": base.__module__,
    }
    return type(base)(name, (base,), namespace)


def make_partial(schema, name=None):
    "Create a Partial class for the record described by `schema`."
    from .partial import Partial
    return _make_class(Partial, schema, name)


def make_patch(schema, name=None):
    "Create a Patch class for the record described by `schema`."
    from .patch import Patch
    return _make_class(Patch, schema, name)
