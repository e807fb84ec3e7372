# coding: utf-8

# Copyright (c) Jupyter Development Team.
# Distributed under the terms of the Modified BSD License.

"""Record types and their Partial/Patch classes shared by the tests."""

from dataclasses import dataclass
from typing import Optional

from fieldpatch import (
    RecordSchema, Field, NumericDistanceDiff, make_partial, make_patch)


@dataclass
class Example:
    food: float
    bard: Optional[str]
    id: int = 5
    something_special: int = 42


@dataclass
class Account:
    id: int
    owner: str
    balance: int
    visits: int


example_schema = RecordSchema.from_dataclass(
    Example, forced=["id"], ignored=["something_special"])

PartialExample = make_partial(example_schema)
PatchExample = make_patch(example_schema)


account_schema = RecordSchema.from_dataclass(
    Account, forced=["id"],
    diffs={"balance": NumericDistanceDiff, "visits": NumericDistanceDiff})

PartialAccount = make_partial(account_schema)
PatchAccount = make_patch(account_schema)


# Mapping records, identified by two forced fields
inventory_schema = RecordSchema(dict, [
    Field("sku", forced=True),
    Field("store", forced=True),
    Field("name"),
    Field("stock", diff=NumericDistanceDiff),
], name="Inventory")

PartialInventory = make_partial(inventory_schema)
PatchInventory = make_patch(inventory_schema)
