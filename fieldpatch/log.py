# coding: utf-8

# Copyright (c) Jupyter Development Team.
# Distributed under the terms of the Modified BSD License.

import logging


class PatchFormatError(ValueError):
    """Raised when a serialized diff or patch is not well formed."""
    pass


def init_logging(level=None):
    """Sets up logging for applications embedding fieldpatch.

    Installs a stderr handler and sets the level of the fieldpatch
    loggers to `level`. Without `level`, the `Global.log_level` setting
    from the fieldpatch config files is used.
    """
    if level is None:
        # config logs through this module
        from .config import load_settings
        level = load_settings('global').log_level
    format = '[%(levelname)1.1s %(module)s:%(lineno)d] %(message)s'
    logging.basicConfig(format=format)
    logging.captureWarnings(True)
    set_fieldpatch_log_level(level)


def set_fieldpatch_log_level(level, set_main=False):
    """Set a log level for fieldpatch loggers.

    `level` is a logging level or its name.
    """
    if isinstance(level, str):
        level = getattr(logging, level.upper())
    logger.setLevel(level)
    if set_main:
        logging.getLogger().setLevel(level)


logger = logging.getLogger('fieldpatch')

debug = logger.debug
info = logger.info
warning = logger.warning
error = logger.error
exception = logger.exception
critical = logger.critical
