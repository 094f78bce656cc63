# -*- coding: utf-8 -*-
# -----------------------------------------------------------------------------
# Copyright (c) 2022- John Muradeli
#
# Distributed under the terms of the MIT License
# (see tfspread/__init__.py for details)
# -----------------------------------------------------------------------------
"""
Global configurations for internal parameters.

Editable directly via `tfspread.CFG`, e.g.
`tfspread.CFG['TCONV']['sparse_chunk_size'] = 64`.

Supported
---------

    - 'TCONV':  see `help(tfspread.tconv)`
    - 'SPREAD': see `help(tfspread.spreadinv)`
    - 'FFT':    see `help(tfspread.backend.numpy_backend.NumPyBackend)`

Handling configs
----------------

    - Change defaults for all sessions: edit `CFG` in `tfspread/configs.py`.
    - Restore defaults: `tfspread.configs.restore_defaults()` (see its docs).
    - Get defaults: `tfspread.configs.get_defaults()` (see its docs).
"""
from copy import deepcopy

_README = "See `help(tfspread.configs)`. (This key-value pair does nothing.)"""
CFG = {'README': _README}

# Twisted convolution ########################################################
CFG['TCONV'] = dict(
    # number of non-zeros of `f` paired with all of `g` per accumulation step
    sparse_chunk_size=256,
    # warn if either sparse input is denser than this
    sparse_density_warn=0.05,
    prune_zeros=True,
)

# Spreading function operations ##############################################
CFG['SPREAD'] = dict(
    # `None` to skip the condition number check
    cond_warn=1e12,
)

# Transforms #################################################################
CFG['FFT'] = dict(
    workers=-1,
)

# Captured initial user defaults, DO NOT EDIT! ###############################
_USER_DEFAULTS = deepcopy(CFG)

# Library defaults, DO NOT EDIT! #############################################
_LIB_DEFAULTS = {
    'TCONV': dict(
        sparse_chunk_size=256,
        sparse_density_warn=0.05,
        prune_zeros=True,
    ),
    'SPREAD': dict(
        cond_warn=1e12,
    ),
    'FFT': dict(
        workers=-1,
    ),
}
_LIB_DEFAULTS['README'] = _README

# Methods ####################################################################
def restore_defaults(library=False):
    """Restores all configurations to their *user* defaults (i.e. what's set
    in `tfspread/configs.py`).

    `library=True` restores to library's defaults (doesn't change user defaults).
    """
    # first clear all keys
    names = list(CFG)
    for name in names:
        if name != 'README':
            keys = list(CFG[name])
            for k in keys:
                del CFG[name][k]
        del CFG[name]

    # now restore; copy so later edits to `CFG` don't leak into the defaults
    restorer = _LIB_DEFAULTS if library else _USER_DEFAULTS
    CFG.update(deepcopy(restorer))


def get_defaults(library=False):
    """Fetches copy of *user* configuration defaults.
    `library=True` fetches copy of library's defaults.
    """
    return deepcopy(_LIB_DEFAULTS if library else
                    _USER_DEFAULTS)
