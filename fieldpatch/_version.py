# Copyright (c) Jupyter Development Team.
# Distributed under the terms of the Modified BSD License.

import re
from collections import namedtuple

VersionInfo = namedtuple("VersionInfo", ["major", "minor", "micro", "releaselevel", "serial"])

__version__ = "0.3.0"

_release_levels = {"a": "alpha", "b": "beta", "rc": "candidate", "": "final"}

_m = re.match(
    r"^(\d+)\.(\d+)\.(\d+)(?:([a-z]+)(\d+))?$", __version__)

version_info = VersionInfo(
    int(_m.group(1)),
    int(_m.group(2)),
    int(_m.group(3)),
    _release_levels.get(_m.group(4) or "", _m.group(4)),
    _m.group(5) or "",
)
