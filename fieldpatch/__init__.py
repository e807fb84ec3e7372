# coding: utf-8

# Copyright (c) Jupyter Development Team.
# Distributed under the terms of the Modified BSD License.

from ._version import __version__, version_info

from .comparing import compare, copy_value, register_comparable
from .diff_format import Missing
from .diffing import Diff, CopyDiff, NumericDistanceDiff
from .mismatch import (
    MismatchType, MismatchError, MultipleMismatchError,
    IncompleteError, DiffMergeError)
from .schema import Field, RecordSchema, SchemaError, make_partial, make_patch
from .base import Base
from .partial import Partial
from .patch import Patch


__all__ = [
    "__version__", "version_info",
    "compare", "copy_value", "register_comparable",
    "Missing",
    "Diff", "CopyDiff", "NumericDistanceDiff",
    "MismatchType", "MismatchError", "MultipleMismatchError",
    "IncompleteError", "DiffMergeError",
    "Field", "RecordSchema", "SchemaError", "make_partial", "make_patch",
    "Base", "Partial", "Patch",
    ]
