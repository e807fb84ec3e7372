# Copyright (c) Jupyter Development Team.
# Distributed under the terms of the Modified BSD License.

import pytest


pytest_plugins = ["pytester"]


def pytest_addoption(parser):
    parser.addoption("--quick", action="store_true", default=False,
                     help="skip brute force property tests")
    parser.addoption("--slow", action="store_true", default=False,
                     help="only run brute force property tests")


def pytest_collection_modifyitems(config, items):
    if not config.getoption("--slow"):
        return
    skip_fast = pytest.mark.skip(reason="--slow runs only the brute force tests")
    for item in items:
        if 'slow' not in getattr(item, 'fixturenames', ()):
            item.add_marker(skip_fast)
