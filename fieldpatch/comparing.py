# coding: utf-8

# Copyright (c) Jupyter Development Team.
# Distributed under the terms of the Modified BSD License.

"""Field value comparison used to decide whether a diff changes anything.

Values are compared through a `FieldComparable` looked up by the type of
the value. The default comparable uses plain equality; when the
`Compare.epsilon_compare` config option is set, floating point values
that differ by less than `Compare.float_epsilon` compare equal.

The comparables are resolved from configuration once, on first use.
Call `reset_comparables` to pick up changed configuration.
"""

import copy
import numbers

from .config import load_settings
from .log import debug


__all__ = [
    "FieldComparable", "FloatComparable",
    "register_comparable", "comparable_for", "reset_comparables",
    "compare", "copy_value",
]


class FieldComparable(object):
    "Compares field values by equality and copies them deeply."

    def compare(self, a, b):
        if isinstance(a, (list, tuple)) and isinstance(b, (list, tuple)):
            if type(a) is not type(b) or len(a) != len(b):
                return False
            return all(compare(x, y) for x, y in zip(a, b))
        if isinstance(a, dict) and isinstance(b, dict):
            if a.keys() != b.keys():
                return False
            return all(compare(a[k], b[k]) for k in a)
        return a == b

    def copy(self, a):
        return copy.deepcopy(a)

    def __repr__(self):
        return "%s()" % type(self).__name__


class FloatComparable(FieldComparable):
    "Treats real numbers closer than `epsilon` as equal."

    def __init__(self, epsilon):
        if epsilon < 0:
            raise ValueError("epsilon must be non-negative, got %r" % (epsilon,))
        self.epsilon = epsilon

    def compare(self, a, b):
        if _is_real(a) and _is_real(b):
            return abs(a - b) < self.epsilon or a == b
        return a == b

    def __repr__(self):
        return "FloatComparable(%r)" % (self.epsilon,)


def _is_real(x):
    return isinstance(x, numbers.Real) and not isinstance(x, bool)


_default_comparable = FieldComparable()

# Explicitly registered comparables, keyed on type
_registered = {}

# Comparables derived from configuration, None until first use
_configured = None


def _build_configured():
    settings = load_settings('compare')
    comparables = {}
    if settings.epsilon_compare:
        comparables[float] = FloatComparable(settings.float_epsilon)
    debug('Field comparables configured: %r', comparables)
    return comparables


def reset_comparables():
    """Drop the comparables derived from configuration.

    They are rebuilt on the next comparison.
    """
    global _configured
    _configured = None


def register_comparable(cls, comparable):
    """Use `comparable` for values of type `cls` and its subclasses.

    Explicit registrations take precedence over configured ones.
    Pass `None` to remove a registration.
    """
    if comparable is None:
        _registered.pop(cls, None)
    else:
        _registered[cls] = comparable


def comparable_for(value):
    "Return the FieldComparable to use for `value`."
    global _configured
    if _configured is None:
        _configured = _build_configured()
    for cls in type(value).__mro__:
        if cls in _registered:
            return _registered[cls]
        if cls in _configured:
            return _configured[cls]
    return _default_comparable


def compare(a, b):
    """Return True if the field values `a` and `b` are equivalent.

    The comparable of `a` is used. For two real numbers where `a` only
    has the default one, that of `b` is used, so mixing int and float
    gives the same result in either order.
    """
    comparable = comparable_for(a)
    if comparable is _default_comparable and _is_real(a) and _is_real(b):
        comparable = comparable_for(b)
    return comparable.compare(a, b)


def copy_value(a):
    "Return an independent copy of field value `a`."
    return comparable_for(a).copy(a)
