# -*- coding: utf-8 -*-
# -----------------------------------------------------------------------------
# Copyright (c) 2022- John Muradeli
#
# Distributed under the terms of the MIT License
# (see tfspread/__init__.py for details)
# -----------------------------------------------------------------------------
"""PyTest configurations file."""
import os


def pytest_addoption(parser):
    parser.addoption("--skip_long", action="store_true")


def pytest_generate_tests(metafunc):
    # This is called for every test. Only get/set command line arguments
    # if the argument is specified in the list of test "fixturenames".
    opts = metafunc.config.option

    os.environ['CMD_SKIP_LONG'] = '1' if opts.skip_long else '0'
