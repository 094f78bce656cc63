# -*- coding: utf-8 -*-
# -----------------------------------------------------------------------------
# Copyright (c) 2022- John Muradeli
#
# Distributed under the terms of the MIT License
# (see tfspread/__init__.py for details)
# -----------------------------------------------------------------------------

"""
TFSpread
========

Spreading function algebra of linear operators: twisted convolution,
operator <-> spreading function conversion, inverses and adjoints, with dense
and sparse code paths, in Python.
"""

import os
import re
from setuptools import setup, find_packages

current_path = os.path.abspath(os.path.dirname(__file__))


def read_file(*parts):
    with open(os.path.join(current_path, *parts), encoding='utf-8') as reader:
        return reader.read()


def get_requirements(*parts):
    with open(os.path.join(current_path, *parts), encoding='utf-8') as reader:
        return [line.strip() for line in reader.readlines() if line.strip()]


def find_version(*file_paths):
    version_file = read_file(*file_paths)
    version_matched = re.search(r"^__version__ = ['\"]([^'\"]*)['\"]",
                                version_file, re.M)
    if version_matched:
        return version_matched.group(1)
    raise RuntimeError('Unable to find version')


setup(
    name="TFSpread",
    version=find_version('tfspread', '__init__.py'),
    packages=find_packages(exclude=['tests', 'tests.*', 'examples']),
    license="MIT",
    author="John Muradeli",
    author_email="john.muradeli@gmail.com",
    description=("Spreading function algebra of linear operators: twisted "
                 "convolution, inverses, adjoints, dense and sparse"),
    long_description=read_file('README.md'),
    long_description_content_type="text/markdown",
    keywords=(
        "twisted-convolution spreading-function time-frequency gabor "
        "signal-processing python"
    ),
    install_requires=get_requirements('requirements.txt'),
    extras_require={'test': ["pytest>=4.0", "pytest-cov"]},
    python_requires=">=3.8",
    include_package_data=True,
    zip_safe=True,
    classifiers=[
        "Programming Language :: Python :: 3.8",
        "Programming Language :: Python :: 3.9",
        "Programming Language :: Python :: 3.10",
        "Programming Language :: Python :: 3.11",
        "Programming Language :: Python :: 3.12",
        "Operating System :: OS Independent",
        "Intended Audience :: Developers",
        "Intended Audience :: Science/Research",
        "Topic :: Scientific/Engineering",
        "Topic :: Scientific/Engineering :: Mathematics",
        "Topic :: Software Development :: Libraries :: Python Modules",
    ],
)
