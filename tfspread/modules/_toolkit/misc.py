# -*- coding: utf-8 -*-
# -----------------------------------------------------------------------------
# Copyright (c) 2022- John Muradeli
#
# Distributed under the terms of the MIT License
# (see tfspread/__init__.py for details)
# -----------------------------------------------------------------------------
"""Miscellaneous measures on dense or sparse matrices."""
import numpy as np

from ...utils.gen_utils import to_dense
from ...operators.tconv import tconv_identity


def l2(x, axis=None, keepdims=False):
    """`sqrt(sum(abs(x)**2))`."""
    return np.linalg.norm(to_dense(x), axis=axis, keepdims=keepdims)


def rel_l2(x0, x1, axis=None, adj=False):
    """Relative Euclidean distance, i.e. distance w.r.t. own norm.

    `adj=True` references the mean of both norms instead of `x0`'s.
    """
    x0, x1 = to_dense(x0), to_dense(x1)
    ref = l2(x0, axis) if not adj else (l2(x0, axis) + l2(x1, axis)) / 2
    return l2(x1 - x0, axis) / ref


def energy(x, axis=None, keepdims=False):
    """`sum(abs(x)**2)`."""
    return np.sum(np.abs(to_dense(x))**2, axis=axis, keepdims=keepdims)


def is_identity(h, atol=1e-9):
    """Whether `h` is within `atol` (max abs error) of the twisted
    convolution identity.
    """
    h = to_dense(h)
    if h.ndim != 2 or h.shape[0] != h.shape[1]:
        return False
    return bool(np.max(np.abs(h - tconv_identity(len(h)))) <= atol)
