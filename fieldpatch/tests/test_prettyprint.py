# -*- coding: utf-8 -*-

# Copyright (c) Jupyter Development Team.
# Distributed under the terms of the Modified BSD License.

from io import StringIO

import colorama
import pytest

from fieldpatch import prettyprint as pp
from fieldpatch import CopyDiff, NumericDistanceDiff

from .fixtures import PatchExample, PartialExample, PatchAccount


def TestConfig(use_color=False):
    return pp.PrettyPrintConfig(out=StringIO(), use_color=use_color)


def test_pretty_print_patch():
    config = TestConfig()
    patch = PatchExample(1, food=CopyDiff.new(1.5, 2.5), bard=CopyDiff.new("x", "x"))
    pp.pretty_print_patch(patch, config=config)
    text = config.out.getvalue()
    assert text == (
        "## patch PatchExample for 1\n"
        "  -  food: 1.5\n"
        "  +  food: 2.5\n"
        "     bard: 'x' (unchanged)\n"
    )


def test_pretty_print_numeric_patch():
    config = TestConfig()
    pp.pretty_print_patch(PatchAccount(7, balance=NumericDistanceDiff(-3)), config=config)
    assert "+  balance: += -3\n" in config.out.getvalue()


def test_pretty_print_empty_patch():
    config = TestConfig()
    pp.pretty_print_patch(PatchExample(1), config=config)
    assert "(no changes)" in config.out.getvalue()


def test_pretty_print_colored():
    config = TestConfig(use_color=True)
    pp.pretty_print_diff("food", CopyDiff.new(1, 2), config=config)
    text = config.out.getvalue()
    assert colorama.Fore.RED in text
    assert colorama.Fore.GREEN in text
    assert text.count(colorama.Style.RESET_ALL) == 2


def test_pretty_print_unknown_diff():
    with pytest.raises(ValueError):
        pp.pretty_print_diff("food", object(), config=TestConfig())


def test_pretty_print_partial():
    config = TestConfig()
    pp.pretty_print_partial(PartialExample(1, food=1.5), config=config)
    text = config.out.getvalue()
    assert "(1/2 fields)" in text
    assert "food: 1.5" in text
    assert "-  bard: <missing>" in text


def test_pretty_print_mismatches(example):
    example.id = 2
    errors = PatchExample(1, food=CopyDiff.new(0.5, 1.0)).mismatches(example)
    config = TestConfig()
    pp.pretty_print_mismatches(errors, config=config)
    lines = config.out.getvalue().splitlines()
    assert lines == [
        "## 2 mismatches",
        "  -  field id (object_id): expected 1, got 2",
        "  -  field food (patch_old_value): expected 0.5, got 1.5",
    ]


def test_color_from_config(write_config):
    write_config({"PrettyPrint": {"use_color": False}})
    assert pp.PrettyPrintConfig(out=StringIO()).use_color is False
