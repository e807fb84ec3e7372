#!/usr/bin/env python
# coding: utf-8

# Copyright (c) Jupyter Development Team.
# Distributed under the terms of the Modified BSD License.
from setuptools import setup, find_packages
import pathlib
import re

HERE = pathlib.Path(__file__).parent.absolute()

FIELDPATCH_PATH = HERE / "fieldpatch"


def get_version(path):
    with open(path, encoding='utf8') as f:
        return re.search(r'^__version__ = "([^"]+)"', f.read(), re.M).group(1)


VERSION = get_version(FIELDPATCH_PATH / '_version.py')

with open(HERE / 'README.md', encoding='utf8') as f:
    LONG_DESCRIPTION = f.read()


if __name__ == '__main__':
    setup(
      name='fieldpatch',
      version=VERSION,
      description='Typed record diffs and patches with optimistic concurrency checks',
      long_description=LONG_DESCRIPTION,
      long_description_content_type='text/markdown',
      license='BSD',
      packages=find_packages(include=['fieldpatch', 'fieldpatch.*']),
      package_data={'fieldpatch': ['*.schema.json']},
      python_requires='>=3.8',
      install_requires=[
          'colorama',
          'jupyter_core',
          'traitlets>=5',
      ],
      extras_require={
          'test': [
              'jsonschema',
              'pytest>=7',
          ],
      },
      )
