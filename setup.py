#!/usr/bin/env python3

from setuptools import setup, find_packages

from orderedmap.version import VERSION_STRING

setup(
    name="orderedmap",
    version=VERSION_STRING,
    packages=find_packages(
        include=['orderedmap', 'orderedmap.*'],
    ),
    zip_safe=True,

    python_requires='>=3.7',

    test_suite='tests.unit',

    description='Mapping that preserves the insertion order of its keys',
)
