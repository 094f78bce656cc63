# -*- coding: utf-8 -*-
# -----------------------------------------------------------------------------
# Copyright (c) 2022- John Muradeli
#
# Distributed under the terms of the MIT License
# (see tfspread/__init__.py for details)
# -----------------------------------------------------------------------------
from .col2diag import col2diag
from .spreading import spreadfun, spread2op, spreadop, spreadinv, spreadadj
from .tconv import tconv, tconv_identity

__all__ = ['col2diag', 'spreadfun', 'spread2op', 'spreadop', 'spreadinv',
           'spreadadj', 'tconv', 'tconv_identity']
