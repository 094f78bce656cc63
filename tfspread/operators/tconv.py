# -*- coding: utf-8 -*-
# -----------------------------------------------------------------------------
# Copyright (c) 2022- John Muradeli
#
# Distributed under the terms of the MIT License
# (see tfspread/__init__.py for details)
# -----------------------------------------------------------------------------
import warnings
import numpy as np
import scipy.sparse

from .col2diag import col2diag
from .spreading import spreadfun
from ..backend.numpy_backend import NumPyBackend as B
from ..configs import CFG
from ..utils.checks import check_square_pair
from ..utils.gen_utils import (fill_default_args, roots_of_unity, is_sparse,
                               to_dense, to_sparse, density)


def tconv(f, g, method=None, opts=None):
    """Twisted convolution of square matrices `f` and `g`.

    For `L x L` inputs,

    ::

        h[m, n] = sum_{k=0}^{L-1} sum_{l=0}^{L-1}
                  f[k, l] * g[(m-k) % L, (n-l) % L] * exp(-2j*pi*((m-k) % L)*l/L)

    If `f` and `g` are spreading functions of operators `Tf` and `Tg`, then
    `h` is the spreading function of `Tf @ Tg`; twisted convolution is the
    composition law of spreading functions and is not commutative.

    Parameters
    ----------
    f, g : np.ndarray / scipy.sparse matrix, 2D
        Square matrices of identical shape. Not modified.

    method : None / str['sparse', 'dense']
        - `None`: sparse computation if both `f` and `g` are sparse, else
          dense (sparse inputs are densified).
        - `'sparse'`: force sparse computation; dense inputs are converted
          with every entry stored.
        - `'dense'`: force dense computation.

    opts : dict / None
        Overrides for `CFG['TCONV']`:

            - `sparse_chunk_size`: number of stored entries of `f` processed
              per accumulation step of the sparse computation. Bounds memory
              at `O(sparse_chunk_size * nnz(g))`.
            - `sparse_density_warn`: with `method=None`, warn if both inputs
              are sparse and either has density above this.
            - `prune_zeros`: drop exact zeros from the sparse output.

    Returns
    -------
    h : np.ndarray / scipy.sparse.csr_array, 2D
        `L x L`. Sparse if the sparse computation was used, else dense.

    Raises
    ------
    DimensionMismatchError
        If `f.shape != g.shape`.

    NotSquareError
        If the inputs aren't square.

    Notes
    -----
    The sparse computation pairs every stored entry of `f` with every stored
    entry of `g`, costing `O(nnz(f) * nnz(g))`, and its output usually holds
    many more non-zeros than either input. Unless `f` and `g` are very sparse,
    densifying them (`method='dense'`) is faster: the dense computation costs
    three `L x L` FFTs and one `L x L` matrix product.

    `spreadinv` computes inverses under twisted convolution:

    ::

        h = tconv(f, g)
        r = tconv(spreadinv(f), h)  # == g
    """
    L = check_square_pair(f, g)
    opts = fill_default_args(opts, CFG['TCONV'], check_against_defaults=True)

    if method is None:
        use_sparse = is_sparse(f) and is_sparse(g)
        if use_sparse:
            d = max(density(f), density(g))
            if d > opts['sparse_density_warn']:
                warnings.warn(("Sparse inputs to `tconv` have density {:.3g}; "
                               "`method='dense'` is likely faster.").format(d))
    elif method in ('sparse', 'dense'):
        use_sparse = bool(method == 'sparse')
    else:
        raise ValueError("`method` must be None, 'sparse', or 'dense', "
                         "got %s" % method)

    if use_sparse:
        return _tconv_sparse(to_sparse(f, keep_all=True),
                             to_sparse(g, keep_all=True), L, opts)
    return _tconv_dense(f, g, L)


def _tconv_sparse(f, g, L, opts):
    """Direct double sum over stored entries.

    With `k = rf, l = cf` and `g`'s entry at `(rg, cg) = (m - k, n - l)`, the
    output lands at `m = (rf + rg) % L, n = (cf + cg) % L` with twist
    `exp(-2j*pi*rg*cf/L)`.
    """
    rf, cf, vf = _stored_entries(f)
    rg, cg, vg = _stored_entries(g)
    w = roots_of_unity(L)
    dtype = np.result_type(vf, vg, np.complex128)

    rows, cols, data = [], [], []
    chunk = max(int(opts['sparse_chunk_size']), 1)
    for start in range(0, len(vf), chunk):
        end = start + chunk
        rfc = rf[start:end, None]
        cfc = cf[start:end, None]

        m = (rfc + rg) % L
        n = (cfc + cg) % L
        vals = vf[start:end, None] * vg * w[(rg * cfc) % L]

        # collapse to at most `L**2` entries before the next chunk
        hc = scipy.sparse.coo_array((vals.ravel().astype(dtype),
                                     (m.ravel(), n.ravel())), shape=(L, L))
        hc.sum_duplicates()
        rows.append(hc.row)
        cols.append(hc.col)
        data.append(hc.data)

    if not data:
        return scipy.sparse.csr_array((L, L), dtype=dtype)

    # sums duplicates across chunks; explicit zeros are kept
    h = scipy.sparse.coo_array(
        (np.concatenate(data), (np.concatenate(rows), np.concatenate(cols))),
        shape=(L, L)).tocsr()

    if opts['prune_zeros']:
        h.eliminate_zeros()
    return h


def _tconv_dense(f, g, L):
    """Compose the two operators as matrices, then take the spreading
    function of the product.
    """
    Ff = B.ifft(to_dense(f), axis=0) * L
    Fg = B.ifft(to_dense(g), axis=0) * L

    Tf = col2diag(Ff)
    Tg = col2diag(Fg)

    Th = B.matmul(Tf, Tg)
    return spreadfun(Th)


def _stored_entries(x):
    """`(rows, cols, values)` of every stored entry, explicit zeros included.
    Indices are int64 so `rows * cols` can't overflow for large `L`.
    """
    c = scipy.sparse.coo_array(x, copy=True)
    c.sum_duplicates()
    return c.row.astype(np.int64), c.col.astype(np.int64), c.data


def tconv_identity(L, sparse=False):
    """Identity element of twisted convolution: `1` at `(0, 0)`, else `0`.

    It is the spreading function of the identity operator, so
    `tconv(f, tconv_identity(L)) == tconv(tconv_identity(L), f) == f`.
    """
    L = int(L)
    if L < 1:
        raise ValueError("`L` must be >= 1, got %s" % L)
    if sparse:
        return scipy.sparse.csr_array(
            (np.ones(1, dtype=np.complex128), ([0], [0])), shape=(L, L))
    e = np.zeros((L, L), dtype=np.complex128)
    e[0, 0] = 1
    return e
