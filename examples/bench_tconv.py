# -*- coding: utf-8 -*-
"""Timing sparse vs dense twisted convolution over input density, to locate
the density above which `method='dense'` wins.
"""
import numpy as np
from timeit import Timer
from functools import partial

from tfspread import tconv
from tfspread.toolkit import rand_spreadfun, rel_l2

def timeit(fn_partial, n_iters=5, n_repeats=5):
    _ = fn_partial()  # warmup
    return min(Timer(fn_partial).repeat(n_repeats, n_iters)) / n_iters

#%%
L = 128
densities = (.0005, .001, .002, .005, .01, .02)

for d in densities:
    f = rand_spreadfun(L, density=d, seed=0, sparse=True)
    g = rand_spreadfun(L, density=d, seed=1, sparse=True)

    fs = partial(tconv, f, g, method='sparse')
    fd = partial(tconv, f, g, method='dense')
    err = rel_l2(fd(), fs())
    assert err < 1e-9, err

    ts, td = timeit(fs), timeit(fd)
    print("density={:<6} nnz={:<4} sparse: {:.3g} sec | dense: {:.3g} sec".format(
        d, f.nnz, ts, td))
