# coding: utf-8

# Copyright (c) Jupyter Development Team.
# Distributed under the terms of the Modified BSD License.

"""Diff types describing the change of a single field.

`CopyDiff` records old and new value and refuses to apply to anything
but the old value. `NumericDistanceDiff` records only `new - old` and
applies to any value.
"""

from .base import Diff
from .copy_diff import CopyDiff
from .numeric_distance import NumericDistanceDiff


#: All diff types, keyed on their serialized kind
diff_types = {
    CopyDiff.kind: CopyDiff,
    NumericDistanceDiff.kind: NumericDistanceDiff,
}


__all__ = ["Diff", "CopyDiff", "NumericDistanceDiff", "diff_types"]
