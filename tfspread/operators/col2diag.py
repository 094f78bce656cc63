# -*- coding: utf-8 -*-
# -----------------------------------------------------------------------------
# Copyright (c) 2022- John Muradeli
#
# Distributed under the terms of the MIT License
# (see tfspread/__init__.py for details)
# -----------------------------------------------------------------------------
import numpy as np

from ..utils.checks import check_square
from ..utils.gen_utils import to_dense


def col2diag(cin):
    """Column-to-diagonal reshuffle of a square matrix.

    `cout[i, j] = cin[i, (i - j) % L]`, i.e. column `n` of `cin` is laid out
    along the `n`-th circular (sub)diagonal of `cout`.

    If `cin = L * ifft(coef, axis=0)` for spreading function `coef`, then
    `cout` is the matrix of the operator `coef` describes: each column of
    `cin` holds the multiplier applied after a time shift by the column's
    index, and a shift-then-multiply is exactly a weighted diagonal.

    The map is its own inverse, so it also takes an operator matrix back to
    its column form.

    Parameters
    ----------
    cin : np.ndarray / scipy.sparse matrix, 2D
        `L x L`. Sparse input is densified.

    Returns
    -------
    cout : np.ndarray, 2D
        `L x L`, same dtype as `cin`.
    """
    L = check_square(cin, 'cin')
    cin = to_dense(cin)

    ii = np.arange(L)[:, None]
    jj = np.arange(L)[None, :]
    return cin[ii, (ii - jj) % L]
