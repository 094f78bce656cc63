# -*- coding: utf-8 -*-
# -----------------------------------------------------------------------------
# Copyright (c) 2022- John Muradeli
#
# Distributed under the terms of the MIT License
# (see tfspread/__init__.py for details)
# -----------------------------------------------------------------------------
"""Methods reused in testing."""
import os
import numpy as np
from tfspread.utils.gen_utils import to_dense

# should be `1` before committing
FORCED_PYTEST = 1
# tests to skip
SKIPS = {
  'long': 0,
}


def skip_long():
    return bool(SKIPS['long'] or os.environ.get('CMD_SKIP_LONG', '0') == '1')

# reference implementations ##################################################
def tconv_ref(f, g):
    """Twisted convolution straight from its definition, `O(L**4)`."""
    f, g = to_dense(f), to_dense(g)
    L = len(f)
    h = np.zeros((L, L), dtype='complex128')
    for m in range(L):
        for n in range(L):
            for k in range(L):
                for l in range(L):
                    h[m, n] += (f[k, l] * g[(m - k) % L, (n - l) % L] *
                                np.exp(-2j*np.pi * ((m - k) % L) * l / L))
    return h


def spreadop_ref(f, coef):
    """`sum_{m,n} coef[m,n] * exp(2j*pi*m*j/L) * f[(j-n) % L]`, for 1D `f`."""
    coef = to_dense(coef)
    L = len(coef)
    jj = np.arange(L)
    h = np.zeros(L, dtype='complex128')
    for m in range(L):
        for n in range(L):
            h += (coef[m, n] * np.exp(2j*np.pi * m * jj / L) *
                  f[(jj - n) % L])
    return h


def assert_close(x0, x1, rtol=1e-9, name=''):
    """Relative-to-norm closeness, tolerant of exact zeros in either input."""
    x0, x1 = to_dense(x0), to_dense(x1)
    assert x0.shape == x1.shape, (name, x0.shape, x1.shape)
    ref = max(np.linalg.norm(x0), np.linalg.norm(x1), 1.)
    err = np.linalg.norm(x1 - x0) / ref
    assert err < rtol, "{}: rel error {:.3e} > {:.1e}".format(name, err, rtol)
