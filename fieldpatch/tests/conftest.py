# -*- coding: utf-8 -*-

# Copyright (c) Jupyter Development Team.
# Distributed under the terms of the Modified BSD License.

import io
import json

from jsonschema import Draft4Validator as Validator
from pytest import fixture, skip

from fieldpatch.comparing import reset_comparables
from fieldpatch.diff_format import SCHEMA_PATH

from .fixtures import Example, Account


@fixture
def slow(request):
    if request.config.getoption('--quick', default=False):
        skip('skipping slow test')


@fixture(autouse=True)
def isolated_config(tmp_path, monkeypatch):
    """Run each test in an empty directory, without user jupyter config."""
    monkeypatch.setenv("JUPYTER_NO_CONFIG", "1")
    monkeypatch.chdir(tmp_path)
    reset_comparables()
    yield tmp_path
    reset_comparables()


@fixture
def write_config(isolated_config):
    """Write a fieldpatch config file picked up from the working directory."""
    def write(config):
        path = isolated_config / "fieldpatch_config.json"
        path.write_text(json.dumps(config), encoding="utf8")
        reset_comparables()
        return path
    return write


@fixture
def example():
    return Example(id=1, food=1.5, bard="x")


@fixture
def account():
    return Account(id=7, owner="ada", balance=100, visits=3)


@fixture
def inventory():
    return {"sku": "A-1", "store": 3, "name": "bolts", "stock": 40}


@fixture(scope='session')
def json_schema_patch():
    with io.open(SCHEMA_PATH, encoding="utf8") as f:
        schema_json = json.load(f)
    return schema_json


@fixture
def patch_validator(json_schema_patch):
    return Validator(json_schema_patch)
