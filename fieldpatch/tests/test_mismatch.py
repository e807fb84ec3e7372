# coding: utf-8

# Copyright (c) Jupyter Development Team.
# Distributed under the terms of the Modified BSD License.

import pytest

from fieldpatch import (
    MismatchError, MismatchType, MultipleMismatchError, IncompleteError)


def _id_error(name="id"):
    return MismatchError(name, "1", "2", MismatchType.OBJECT_ID)


def _old_value_error(name="food"):
    return MismatchError(name, "1.5", "2.5", MismatchType.PATCH_OLD_VALUE)


def test_mismatch_error():
    e = _old_value_error()
    assert e.name == e.field_name == "food"
    assert e.expected == "1.5"
    assert e.received == "2.5"
    assert e.mismatch_type is MismatchType.PATCH_OLD_VALUE
    assert str(e) == ("Current object value did not match old patch value"
                      " - field food: expected 1.5, got 2.5")
    assert e == _old_value_error()
    assert hash(e) == hash(_old_value_error())
    assert e != _id_error()


def test_mismatch_type_by_value():
    e = MismatchError("id", 1, 2, "object_id")
    assert e.mismatch_type is MismatchType.OBJECT_ID
    assert e.expected == "1"
    with pytest.raises(ValueError):
        MismatchError("id", 1, 2, "unknown")


def test_multiple_mismatch_error_add():
    errors = MultipleMismatchError()
    assert errors.is_error_free()
    assert not errors.has_errors()
    assert len(errors) == 0

    errors.add_error(_id_error())
    assert not errors.is_error_free()
    assert errors.has_errors()
    assert list(errors) == [_id_error()]


def test_multiple_mismatch_error_merge_keeps_duplicates():
    a = MultipleMismatchError([_id_error()])
    b = MultipleMismatchError([_old_value_error(), _id_error()])
    a.merge(b)
    assert list(a) == [_id_error(), _old_value_error(), _id_error()]
    assert len(b) == 2
    assert a.of_type(MismatchType.OBJECT_ID) == [_id_error(), _id_error()]
    assert a.of_type("patch_old_value") == [_old_value_error()]


def test_multiple_mismatch_error_str():
    errors = MultipleMismatchError([_id_error(), _old_value_error("bard")])
    lines = str(errors).splitlines()
    assert lines[0] == "2 mismatches:"
    assert lines[1] == "Object id didn't match patch id - field id: expected 1, got 2"
    assert lines[2].endswith("field bard: expected 1.5, got 2.5")


def test_multiple_mismatch_error_is_raisable():
    with pytest.raises(MultipleMismatchError) as exc:
        raise MultipleMismatchError([_id_error()])
    assert exc.value.has_errors()


def test_incomplete_error():
    incomplete = {"food": 1.5}
    e = IncompleteError("build", 12, incomplete)
    assert e.operation == "build"
    assert e.object_id == "12"
    assert e.incomplete is incomplete
    assert str(e) == "IncompleteError: `build` failed for 12.\nData:\n{'food': 1.5}"
