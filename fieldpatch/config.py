# coding: utf-8

# Copyright (c) Jupyter Development Team.
# Distributed under the terms of the Modified BSD License.

"""Settings for fieldpatch.

Settings are traitlets on the classes below, one class per section.
Values can be overridden in `fieldpatch_config.json` files in the current
directory or any jupyter config directory, keyed on class name::

    {
        "Global": {"log_level": "DEBUG"},
        "Compare": {"epsilon_compare": true, "float_epsilon": 1e-9}
    }

A section inherits the settings of its base classes.
"""

import os
import sys

from jupyter_core.paths import jupyter_config_path

from traitlets import Enum, Bool, Float, HasTraits
from traitlets.config.loader import JSONFileConfigLoader, ConfigFileNotFound

from .log import debug


CONFIG_BASENAME = 'fieldpatch_config'


class FieldPatchConfigurable(HasTraits):
    """Base of all config sections."""


def config_search_path():
    """Directories searched for config files, highest priority first."""
    path = jupyter_config_path()
    path.insert(0, os.getcwd())
    return path


def recursive_update(target, new):
    """Recursively update dict `target` with the values of `new`.

    A None value in `new` removes the key from `target`.
    """
    for k, v in new.items():
        if v is None:
            target.pop(k, None)
        elif isinstance(v, dict):
            if not isinstance(target.get(k), dict):
                target[k] = {}
            recursive_update(target[k], v)
        else:
            target[k] = v


def load_config_files(path=None):
    """Merge all config files found on `path` into one dict.

    `path` defaults to `config_search_path()`.
    """
    if path is None:
        path = config_search_path()
    merged = {}
    # Lowest priority first, later files overwrite
    for directory in reversed(path):
        loader = JSONFileConfigLoader(CONFIG_BASENAME + '.json', path=directory)
        try:
            config = loader.load_config()
        except ConfigFileNotFound:
            continue
        debug('Loaded fieldpatch config from %s', directory)
        recursive_update(merged, config)
    return merged


def build_config(section):
    """Merge the trait defaults of a config section with any config on disk.

    Keys on disk that are not settings of the section are left out.
    """
    if section not in section_configurables:
        raise ValueError('Config for section name %r is not defined! Accepted values are %r.' % (
            section, list(section_configurables.keys())))

    disk_config = load_config_files()
    config = {}
    for cls in reversed(section_configurables[section].mro()):
        if not issubclass(cls, FieldPatchConfigurable):
            continue
        own = cls.class_own_traits(config=True)
        for name, trait in own.items():
            config[name] = trait.default()
        for name, value in disk_config.get(cls.__name__, {}).items():
            if name in own:
                config[name] = value
    return config


def load_settings(section):
    """Build a validated configurable instance for `section`.

    Raises traitlets.TraitError if a config file holds an invalid value.
    """
    cls = section_configurables[section]
    return cls(**build_config(section))


class Global(FieldPatchConfigurable):

    log_level = Enum(
        ('DEBUG', 'INFO', 'WARN', 'ERROR', 'CRITICAL'),
        'INFO',
        help="Log level of the fieldpatch logger.",
    ).tag(config=True)


class Compare(Global):

    epsilon_compare = Bool(
        False,
        help="Treat floating point field values as equal when they differ "
             "by less than `float_epsilon`.",
    ).tag(config=True)

    float_epsilon = Float(
        sys.float_info.epsilon,
        min=0.0,
        help="Tolerance used for floating point comparisons when "
             "`epsilon_compare` is enabled.",
    ).tag(config=True)


class PrettyPrint(Global):

    use_color = Bool(
        True,
        help="Whether to color pretty printed patches and mismatches.",
    ).tag(config=True)


section_configurables = {
    'global': Global,
    'compare': Compare,
    'prettyprint': PrettyPrint,
}
