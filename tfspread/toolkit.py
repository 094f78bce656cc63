# -*- coding: utf-8 -*-
# -----------------------------------------------------------------------------
# Copyright (c) 2022- John Muradeli
#
# Distributed under the terms of the MIT License
# (see tfspread/__init__.py for details)
# -----------------------------------------------------------------------------
"""Test matrix generation and measures."""

from .modules._toolkit import signals
from .modules._toolkit import misc

from .modules._toolkit.signals import (
    rand_spreadfun,
)
from .modules._toolkit.misc import (
    l2,
    rel_l2,
    energy,
    is_identity,
)
from .utils.gen_utils import density
