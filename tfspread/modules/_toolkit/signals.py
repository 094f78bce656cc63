# -*- coding: utf-8 -*-
# -----------------------------------------------------------------------------
# Copyright (c) 2022- John Muradeli
#
# Distributed under the terms of the MIT License
# (see tfspread/__init__.py for details)
# -----------------------------------------------------------------------------
"""Synthetic spreading function generation."""
import numpy as np
import scipy.sparse


def rand_spreadfun(L, density=1., seed=None, sparse=False, invertible=False,
                   complex_valued=True):
    """Random `L x L` spreading function.

    Parameters
    ----------
    L : int
        Operator size.

    density : float
        Fraction of entries that are non-zero, in `(0, 1]`. At least one
        entry is always non-zero.

    seed : int / None
        Seed for `np.random.default_rng`.

    sparse : bool
        Return `scipy.sparse.csr_array` instead of `np.ndarray`.

    invertible : bool
        Make the `(0, 0)` entry (the identity component) dominate: it's set
        to `1 + sum(abs(others))`. Since every time-frequency shift is
        unitary, the remaining terms have operator norm below the identity
        term's, so the operator is invertible with condition number at most
        `2*sum(abs(coef)) - 1`.

    complex_valued : bool
        Draw complex Gaussian entries; else real.

    Returns
    -------
    coef : np.ndarray / scipy.sparse.csr_array
        `L x L`, complex128 (or float64 if `complex_valued=False`).
    """
    if not 0 < density <= 1:
        raise ValueError("`density` must be in (0, 1], got %s" % density)
    rng = np.random.default_rng(seed)

    coef = rng.standard_normal((L, L))
    if complex_valued:
        coef = coef + 1j*rng.standard_normal((L, L))

    if density < 1:
        n_keep = max(int(round(density * L**2)), 1)
        keep = rng.choice(L**2, size=n_keep, replace=False)
        mask = np.zeros(L**2, dtype=bool)
        mask[keep] = True
        coef[~mask.reshape(L, L)] = 0

    if invertible:
        coef[0, 0] = 0
        coef[0, 0] = 1 + np.abs(coef).sum()

    if sparse:
        coef = scipy.sparse.csr_array(coef)
    return coef
