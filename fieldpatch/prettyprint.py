# -*- coding: utf-8 -*-

# Copyright (c) Jupyter Development Team.
# Distributed under the terms of the Modified BSD License.

from collections import namedtuple
import sys

import colorama

from .config import load_settings
from .diffing import CopyDiff, NumericDistanceDiff


# Indentation offset in pretty-print
IND = "  "


ColoredConstants = namedtuple('ColoredConstants', (
    'KEEP',
    'REMOVE',
    'ADD',
    'INFO',
    'RESET',
))


col_const = {
    True: ColoredConstants(
        KEEP   = '{color}   '.format(color=''),
        REMOVE = '{color}-  '.format(color=colorama.Fore.RED),
        ADD    = '{color}+  '.format(color=colorama.Fore.GREEN),
        INFO   = '{color}## '.format(color=colorama.Fore.BLUE + colorama.Style.BRIGHT),
        RESET  = colorama.Style.RESET_ALL,
    ),

    False: ColoredConstants(
        KEEP   = '   ',
        REMOVE = '-  ',
        ADD    = '+  ',
        INFO   = '## ',
        RESET  = '',
    )
}


class PrettyPrintConfig:
    def __init__(self, out=None, use_color=None):
        if use_color is None:
            use_color = load_settings('prettyprint').use_color
        self.out = sys.stdout if out is None else out
        self.use_color = use_color

    @property
    def KEEP(self):
        return col_const[self.use_color].KEEP

    @property
    def REMOVE(self):
        return col_const[self.use_color].REMOVE

    @property
    def ADD(self):
        return col_const[self.use_color].ADD

    @property
    def INFO(self):
        return col_const[self.use_color].INFO

    @property
    def RESET(self):
        return col_const[self.use_color].RESET


def pretty_print_diff(name, diff, prefix="", config=None):
    "Print the change a single field diff describes."
    config = config or PrettyPrintConfig()
    if isinstance(diff, CopyDiff):
        if not diff.contains_change():
            config.out.write("%s%s%s: %r (unchanged)%s\n" % (
                prefix, config.KEEP, name, diff.old_value, config.RESET))
            return
        config.out.write("%s%s%s: %r%s\n" % (
            prefix, config.REMOVE, name, diff.old_value, config.RESET))
        config.out.write("%s%s%s: %r%s\n" % (
            prefix, config.ADD, name, diff.new_value, config.RESET))
    elif isinstance(diff, NumericDistanceDiff):
        config.out.write("%s%s%s: += %r%s\n" % (
            prefix, config.ADD if diff.contains_change() else config.KEEP,
            name, diff.difference, config.RESET))
    else:
        raise ValueError("Cannot pretty print %r." % (diff,))


def pretty_print_patch(patch, prefix="", config=None):
    "Print the target and all diffs of a patch."
    config = config or PrettyPrintConfig()
    config.out.write("%s%spatch %s for %s%s\n" % (
        prefix, config.INFO, type(patch).__name__, patch.object_id(), config.RESET))
    if patch.is_empty():
        config.out.write("%s%s(no changes)\n" % (prefix, IND))
    for name, d in patch.diffs().items():
        pretty_print_diff(name, d, prefix + IND, config)


def pretty_print_partial(partial, prefix="", config=None):
    "Print the set fields of a partial and list the missing ones."
    config = config or PrettyPrintConfig()
    config.out.write("%s%spartial %s for %s (%d/%d fields)%s\n" % (
        prefix, config.INFO, type(partial).__name__, partial.object_id(),
        partial.count(), partial.MAX_FIELDS, config.RESET))
    for name, value in partial.to_dict().items():
        config.out.write("%s%s%s%s: %r\n" % (prefix, IND, config.KEEP, name, value))
    for name in partial.missing_fields():
        config.out.write("%s%s%s%s: <missing>%s\n" % (
            prefix, IND, config.REMOVE, name, config.RESET))


def pretty_print_mismatches(errors, prefix="", config=None):
    "Print each mismatch of a MultipleMismatchError on its own line."
    config = config or PrettyPrintConfig()
    config.out.write("%s%s%d mismatches%s\n" % (
        prefix, config.INFO, len(errors), config.RESET))
    for m in errors:
        config.out.write("%s%s%sfield %s (%s): expected %s, got %s%s\n" % (
            prefix, IND, config.REMOVE, m.field_name, m.mismatch_type.value,
            m.expected, m.received, config.RESET))
