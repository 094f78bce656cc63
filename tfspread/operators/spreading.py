# -*- coding: utf-8 -*-
# -----------------------------------------------------------------------------
# Copyright (c) 2022- John Muradeli
#
# Distributed under the terms of the MIT License
# (see tfspread/__init__.py for details)
# -----------------------------------------------------------------------------
"""Spreading function representation of linear operators on `C^L`.

An `L x L` matrix `coef` describes the operator

::

    (T f)[j] = sum_{m, n} coef[m, n] * exp(2j*pi*m*j/L) * f[(j - n) % L]

that is, a weighted sum of time shifts by `n` followed by modulations by `m`.
Every `L x L` operator matrix has exactly one such `coef`.
"""
import warnings
import numpy as np
import scipy.sparse

from .col2diag import col2diag
from ..backend.numpy_backend import NumPyBackend as B
from ..configs import CFG
from ..utils.checks import check_square, check_signal_length
from ..utils.gen_utils import (fill_default_args, roots_of_unity, is_sparse,
                               to_dense)


def spreadfun(T):
    """Spreading function of the operator with matrix `T`.

    Parameters
    ----------
    T : np.ndarray / scipy.sparse matrix, 2D
        `L x L` operator matrix, acting as `T @ f`. Sparse input is densified.

    Returns
    -------
    coef : np.ndarray, 2D
        `L x L` spreading function, complex.
    """
    L = check_square(T, 'T')
    return B.fft(col2diag(to_dense(T)), axis=0) / L


def spread2op(coef):
    """Matrix of the operator with spreading function `coef`; inverse of
    `spreadfun`.
    """
    L = check_square(coef, 'coef')
    return col2diag(B.ifft(to_dense(coef), axis=0) * L)


def spreadop(f, coef):
    """Apply the operator with spreading function `coef` to `f`.

    Parameters
    ----------
    f : np.ndarray, 1D or 2D
        Signal of length `L`, or `L x W` with one signal per column.

    coef : np.ndarray / scipy.sparse matrix, 2D
        `L x L` spreading function. If sparse, the operator is applied one
        time-frequency shift at a time, costing `O(nnz * L * W)` rather than
        forming the `L x L` matrix.

    Returns
    -------
    h : np.ndarray
        Same shape as `f`, complex.
    """
    L = check_square(coef, 'coef')
    f = np.asarray(f)
    check_signal_length(f, L)

    if not is_sparse(coef):
        return B.matmul(spread2op(coef), f)

    c = scipy.sparse.coo_array(coef)
    c.sum_duplicates()
    w = roots_of_unity(L)
    jj = np.arange(L)

    h = np.zeros(f.shape, dtype=np.result_type(f, c.dtype, np.complex128))
    for m, n, v in zip(c.row, c.col, c.data):
        # exp(+2j*pi*m*j/L) from the exp(-2j*pi*k/L) table
        mod = w[(-int(m) * jj) % L]
        if f.ndim == 2:
            mod = mod[:, None]
        h += v * mod * np.roll(f, int(n), axis=0)
    return h


def spreadinv(coef, f=None, opts=None):
    """Spreading function of the inverse operator, or the inverse applied
    to `f`.

    `r = spreadinv(coef)` is the two-sided inverse of `coef` under twisted
    convolution: `tconv(r, coef)` and `tconv(coef, r)` both equal
    `tconv_identity(L)`. Consequently

    ::

        h = tconv(coef, g)
        tconv(spreadinv(coef), h)  # == g

    Parameters
    ----------
    coef : np.ndarray / scipy.sparse matrix, 2D
        `L x L` spreading function of an invertible operator.

    f : np.ndarray, 1D or 2D / None
        If provided, returns `T^-1 @ f` (via a linear solve) instead of the
        inverse's spreading function.

    opts : dict / None
        Overrides for `CFG['SPREAD']`:

            - `cond_warn`: warn if the operator's condition number exceeds
              this; `None` skips the check.

    Returns
    -------
    out : np.ndarray
        `L x L` spreading function if `f is None`, else same shape as `f`.

    Raises
    ------
    numpy.linalg.LinAlgError
        If the operator is singular.
    """
    opts = fill_default_args(opts, CFG['SPREAD'], check_against_defaults=True)
    T = spread2op(coef)
    L = T.shape[0]

    if opts['cond_warn'] is not None:
        cond = np.linalg.cond(T)
        if cond > opts['cond_warn']:
            warnings.warn(("Operator is ill-conditioned (cond = {:.3g}); "
                           "inverse may be inaccurate.").format(cond))

    if f is None:
        return spreadfun(np.linalg.inv(T))

    f = np.asarray(f)
    check_signal_length(f, L)
    return np.linalg.solve(T, f)


def spreadadj(coef):
    """Spreading function of the adjoint operator.

    `cadj[m, n] = conj(coef[-m % L, -n % L]) * exp(-2j*pi*m*n/L)`.
    Sparse in, sparse out.
    """
    L = check_square(coef, 'coef')
    w = roots_of_unity(L)

    if is_sparse(coef):
        c = scipy.sparse.coo_array(coef)
        c.sum_duplicates()
        rows = (-c.row.astype(np.int64)) % L
        cols = (-c.col.astype(np.int64)) % L
        data = np.conj(c.data) * w[(rows * cols) % L]
        return scipy.sparse.csr_array((data, (rows, cols)), shape=(L, L))

    coef = np.asarray(coef)
    neg = (-np.arange(L)) % L
    mm = np.arange(L)[:, None]
    nn = np.arange(L)[None, :]
    return np.conj(coef[neg][:, neg]) * w[(mm * nn) % L]
