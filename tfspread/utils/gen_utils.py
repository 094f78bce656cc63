# -*- coding: utf-8 -*-
# -----------------------------------------------------------------------------
# Copyright (c) 2022- John Muradeli
#
# Distributed under the terms of the MIT License
# (see tfspread/__init__.py for details)
# -----------------------------------------------------------------------------
from copy import deepcopy
from functools import lru_cache

import numpy as np
import scipy.sparse


def fill_default_args(cfg, defaults, copy_original=True,
                      check_against_defaults=False):
    """If a key is present in `defaults` but not in `cfg`, then copies
    the key-value pair from `defaults` onto `cfg`. Also applies to nests.

    `check_against_defaults` will raise Exception is there's keys in `cfg`
    that aren't in `defaults`.
    """
    # always copy defaults since they're assigned to `cfg` which may be modified
    defaults = deepcopy(defaults)

    # handle inputs
    if cfg is None or cfg == {}:
        return defaults
    elif not isinstance(cfg, dict):
        raise ValueError("`cfg` must be dict or None, got %s" % type(cfg))

    # don't affect external
    if copy_original:
        cfg = deepcopy(cfg)

    for k, v in defaults.items():
        if k not in cfg:
            cfg[k] = v
        else:
            if isinstance(v, dict):
                cfg[k] = fill_default_args(cfg[k], v)

    if check_against_defaults:
        for k in cfg:
            if k not in defaults:
                raise ValueError("unknown kwarg: '{}', supported are:\n{}".format(
                    k, '\n'.join(list(defaults))))
    return cfg

# roots of unity #############################################################
@lru_cache(maxsize=64)
def roots_of_unity(L):
    """`exp(-2j*pi*k/L)` for `k = 0, 1, ..., L - 1`.

    Memoized per `L`; the returned array is read-only and shared by all
    callers, so index into it rather than modifying it.

    Parameters
    ----------
    L : int
        Number of roots, `>= 1`.

    Returns
    -------
    w : np.ndarray, 1D, complex128
        `w[k] = exp(-2j*pi*k/L)`.
    """
    L = int(L)
    if L < 1:
        raise ValueError("`L` must be >= 1, got %s" % L)
    w = np.exp((-2j*np.pi / L) * np.arange(L))
    w.setflags(write=False)
    return w

# representations ############################################################
def is_sparse(x):
    """True if `x` is stored in a `scipy.sparse` format."""
    return scipy.sparse.issparse(x)


def to_dense(x):
    """`x` as `np.ndarray`. Dense inputs pass through without copying."""
    if is_sparse(x):
        return x.toarray()
    return np.asarray(x)


def to_sparse(x, keep_all=False):
    """`x` as `scipy.sparse.csr_array`.

    `keep_all=True` stores every entry of a dense `x`, including zeros, so
    that code iterating over stored entries sees all `L**2` of them.
    """
    if is_sparse(x):
        return scipy.sparse.csr_array(x)
    x = np.asarray(x)
    if not keep_all:
        return scipy.sparse.csr_array(x)

    rows, cols = np.indices(x.shape)
    return scipy.sparse.csr_array(
        (x.ravel(), (rows.ravel(), cols.ravel())), shape=x.shape)


def density(x):
    """Fraction of stored entries; `1.` for dense `x`."""
    if not is_sparse(x):
        return 1.
    size = np.prod(x.shape)
    return x.nnz / size if size else 0.
