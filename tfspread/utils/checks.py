# -*- coding: utf-8 -*-
# -----------------------------------------------------------------------------
# Copyright (c) 2022- John Muradeli
#
# Distributed under the terms of the MIT License
# (see tfspread/__init__.py for details)
# -----------------------------------------------------------------------------
"""Input validation shared by all operators. Every check runs before any
computation, so a failed check never leaves a partial result."""


class DimensionMismatchError(ValueError):
    """Operands that must share a shape (or length) don't."""


class NotSquareError(ValueError):
    """A matrix operand isn't `L x L`."""


def _shape_of(x, name):
    shape = getattr(x, 'shape', None)
    if shape is None:
        raise TypeError("`%s` must be an array or sparse matrix, got %s" % (
            name, type(x)))
    return tuple(shape)


def check_square(x, name='x'):
    """Asserts `x` is a 2D square matrix, returns its `L`."""
    shape = _shape_of(x, name)
    if len(shape) != 2 or shape[0] != shape[1]:
        raise NotSquareError("`%s` must be a square matrix, got shape %s" % (
            name, shape))
    if shape[0] < 1:
        raise NotSquareError("`%s` must be at least 1x1, got shape %s" % (
            name, shape))
    return shape[0]


def check_square_pair(f, g):
    """Asserts `f` and `g` are square matrices of the same shape, returns `L`.

    Shapes are compared first, so `(2, 3)` vs `(3, 2)` is a
    `DimensionMismatchError` while `(2, 3)` vs `(2, 3)` is a `NotSquareError`.
    """
    shape_f, shape_g = _shape_of(f, 'f'), _shape_of(g, 'g')
    if shape_f != shape_g:
        raise DimensionMismatchError(
            "Input matrices must be same size, got %s and %s" % (
                shape_f, shape_g))
    check_square(f, 'f')
    return shape_f[0]


def check_signal_length(f, L):
    """Asserts `f`'s first dimension matches operator size `L`."""
    shape = _shape_of(f, 'f')
    if len(shape) not in (1, 2):
        raise ValueError("`f` must be 1D or 2D, got shape %s" % (shape,))
    if shape[0] != L:
        raise DimensionMismatchError(
            "`f` must have length %s along first dim (operator size), "
            "got shape %s" % (L, shape))
