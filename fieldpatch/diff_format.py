# coding: utf-8

# Copyright (c) Jupyter Development Team.
# Distributed under the terms of the Modified BSD License.

"""Conversion of diffs and patches to and from json-like structures.

A serialized diff is a dict with a "kind" key naming the diff type::

    {"kind": "copy", "old_value": 1.5, "new_value": 2.5}
    {"kind": "numeric_distance", "difference": 3}

A serialized patch holds its identity values and its diffs::

    {"target": {"id": 1}, "diffs": {"food": {"kind": "copy", ...}}}

The format is described by diff_format.schema.json next to this module.
Mismatch and incomplete errors are diagnostics and are not serialized,
except for the mismatch type.
"""

import json
import numbers
import os

from .diffing import Diff, diff_types
from .log import PatchFormatError
from .mismatch import MismatchType


# Sentinel to allow None as a value
Missing = object()


SCHEMA_PATH = os.path.join(os.path.dirname(os.path.abspath(__file__)),
                           'diff_format.schema.json')


def validate_json_value(value, where):
    """Check that `value` is stored in json without changing type.

    Lists, str-keyed dicts, strings, numbers, booleans and None pass.
    Tuples would come back as lists and values such as Decimal or
    timedelta are not json at all. Raises a PatchFormatError naming
    `where` for those.
    """
    if value is None or isinstance(value, (bool, int, float, str)):
        return
    if isinstance(value, list):
        for v in value:
            validate_json_value(v, where)
        return
    if isinstance(value, dict):
        for k, v in value.items():
            if not isinstance(k, str):
                raise PatchFormatError(
                    "{} has dict key {!r}, json keys must be strings.".format(where, k))
            validate_json_value(v, where)
        return
    raise PatchFormatError(
        "{} holds a {} value, which json cannot represent.".format(
            where, type(value).__name__))


def diff_to_dict(diff):
    """Convert a Diff into a json-like dict.

    Raises a PatchFormatError if the diff holds values json cannot store.
    """
    if not isinstance(diff, Diff):
        raise PatchFormatError("Expecting a Diff, not '{}'.".format(type(diff).__name__))
    d = {"kind": diff.kind}
    for key, value in diff._state().items():
        validate_json_value(value, "{} diff '{}'".format(diff.kind, key))
        d[key] = value
    return d


def validate_diff_entry(e):
    """Check that e is a well formed serialized diff.

    Raises a PatchFormatError if not well formed.
    """
    if not isinstance(e, dict):
        raise PatchFormatError("Diff entry '{}' is not a dict.".format(e))
    kind = e.get("kind")
    if kind not in diff_types:
        raise PatchFormatError("Unknown diff kind '{}'.".format(kind))
    if kind == "copy":
        for key in ("old_value", "new_value"):
            if key not in e:
                raise PatchFormatError("copy diff is missing '{}'.".format(key))
        expected = {"kind", "old_value", "new_value"}
    elif kind == "numeric_distance":
        difference = e.get("difference", Missing)
        if difference is Missing:
            raise PatchFormatError("numeric_distance diff is missing 'difference'.")
        if isinstance(difference, bool) or not isinstance(difference, numbers.Number):
            raise PatchFormatError(
                "numeric_distance expects a number as difference, not '{}'.".format(
                    difference))
        expected = {"kind", "difference"}
    extra = set(e) - expected
    if extra:
        raise PatchFormatError("Unexpected keys {} in {} diff.".format(sorted(extra), kind))


def diff_from_dict(e):
    "Create a Diff from a serialized diff entry."
    validate_diff_entry(e)
    cls = diff_types[e["kind"]]
    state = {k: v for k, v in e.items() if k != "kind"}
    return cls(**state)


def mismatch_type_to_str(mismatch_type):
    return MismatchType(mismatch_type).value


def mismatch_type_from_str(value):
    try:
        return MismatchType(value)
    except ValueError:
        raise PatchFormatError("Unknown mismatch type '{}'.".format(value))


def patch_to_dict(patch):
    """Convert a Patch into a json-like dict.

    Raises a PatchFormatError if a field holds values json cannot store.
    """
    target = patch.identity()
    for name, value in target.items():
        validate_json_value(value, "Identity field '{}'".format(name))
    diffs = {}
    for name, d in patch.diffs().items():
        try:
            diffs[name] = diff_to_dict(d)
        except PatchFormatError as e:
            raise PatchFormatError("Field '{}': {}".format(name, e))
    return {"target": target, "diffs": diffs}


def patch_from_dict(patch_class, data):
    """Create an instance of `patch_class` from a serialized patch.

    Raises a PatchFormatError if `data` is not well formed or does not
    fit the fields of `patch_class`.
    """
    if not isinstance(data, dict):
        raise PatchFormatError("Patch must be a dict.")
    extra = set(data) - {"target", "diffs"}
    if extra:
        raise PatchFormatError("Unexpected keys {} in patch.".format(sorted(extra)))
    target = data.get("target", {})
    diffs = data.get("diffs", {})
    if not isinstance(target, dict) or not isinstance(diffs, dict):
        raise PatchFormatError("Patch 'target' and 'diffs' must be dicts.")

    schema = patch_class.schema
    forced = {f.name for f in schema.forced_fields}
    settable = {f.name for f in schema.optional_fields}
    unknown = set(target) - forced
    if unknown:
        raise PatchFormatError("Unknown identity fields {}.".format(sorted(unknown)))
    unknown = set(diffs) - settable
    if unknown:
        raise PatchFormatError("Unknown patch fields {}.".format(sorted(unknown)))

    kwargs = dict(target)
    for name, e in diffs.items():
        kwargs[name] = diff_from_dict(e)
    try:
        return patch_class(**kwargs)
    except TypeError as e:
        raise PatchFormatError(str(e))


def patch_to_json(patch, **kwargs):
    "Serialize a Patch to a json string, see `patch_to_dict`."
    return json.dumps(patch_to_dict(patch), **kwargs)


def patch_from_json(patch_class, text):
    try:
        data = json.loads(text)
    except ValueError as e:
        raise PatchFormatError("Patch is not valid json: {}".format(e))
    return patch_from_dict(patch_class, data)
