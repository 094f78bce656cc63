# -*- coding: utf-8 -*-
# -----------------------------------------------------------------------------
# Copyright (c) 2022- John Muradeli
#
# Distributed under the terms of the MIT License
# (see tfspread/__init__.py for details)
# -----------------------------------------------------------------------------
"""Tests of operator <-> spreading function conversions, application,
inverses and adjoints.
"""
import pytest
import numpy as np
import scipy.sparse

from tfspread import (col2diag, spreadfun, spread2op, spreadop, spreadinv,
                      spreadadj, tconv, tconv_identity, roots_of_unity,
                      DimensionMismatchError, NotSquareError)
from tfspread.toolkit import rand_spreadfun, is_identity
from utils import spreadop_ref, assert_close, FORCED_PYTEST

# set True to execute all test functions without pytest
run_without_pytest = 0


#### Conversions #############################################################
@pytest.mark.parametrize("L", [1, 2, 3, 4])
def test_operator_roundtrip(L):
    """Spreading function -> operator -> spreading function is lossless,
    and so is the reverse.
    """
    for seed in range(3):
        M = rand_spreadfun(L, seed=seed)
        assert_close(M, spreadfun(spread2op(M)), name="coef L=%s" % L)

        T = np.random.default_rng(seed).standard_normal((L, L))
        assert_close(T, spread2op(spreadfun(T)), name="op L=%s" % L)


def test_col2diag():
    """Explicit values, involution, and dtype / sparse handling."""
    cin = np.arange(9).reshape(3, 3)
    # cout[i, j] = cin[i, (i - j) % 3]
    cout_expected = np.array([[0, 2, 1],
                              [4, 3, 5],
                              [8, 7, 6]])
    cout = col2diag(cin)
    assert np.array_equal(cout, cout_expected), cout
    assert cout.dtype == cin.dtype
    assert np.array_equal(col2diag(cout), cin)

    cin_s = scipy.sparse.csr_array(cin)
    assert np.array_equal(col2diag(cin_s), cout_expected)

    with pytest.raises(NotSquareError):
        _ = col2diag(np.zeros((2, 3)))


def test_spreadfun_known():
    """Identity, pure time shift, pure modulation."""
    L = 5
    # identity
    assert is_identity(spreadfun(np.eye(L)))

    # time shift by 2: (T f)[j] = f[j - 2]  ->  unit at (0, 2)
    T = np.roll(np.eye(L), 2, axis=0)
    expected = np.zeros((L, L))
    expected[0, 2] = 1
    assert_close(expected, spreadfun(T), name="shift")

    # modulation by 3: (T f)[j] = exp(2j*pi*3*j/L) f[j]  ->  unit at (3, 0)
    T = np.diag(np.exp(2j*np.pi * 3 * np.arange(L) / L))
    expected = np.zeros((L, L))
    expected[3, 0] = 1
    assert_close(expected, spreadfun(T), name="modulation")

    # sparse input
    assert_close(spreadfun(T), spreadfun(scipy.sparse.csr_array(T)))

    with pytest.raises(NotSquareError):
        _ = spreadfun(np.zeros((3, 4)))

#### Application #############################################################
def test_spreadop():
    """Dense and sparse application agree with the definition, for 1D and
    2D signals.
    """
    L = 7
    rng = np.random.default_rng(0)
    x = rng.standard_normal(L) + 1j*rng.standard_normal(L)
    X = rng.standard_normal((L, 3))

    for density in (1., .1):
        coef = rand_spreadfun(L, density=density, seed=1)
        coef_s = scipy.sparse.csr_array(coef)
        h_ref = spreadop_ref(x, coef)

        assert_close(h_ref, spreadop(x, coef), name="dense")
        assert_close(h_ref, spreadop(x, coef_s), name="sparse")

        H = spreadop(X, coef_s)
        assert H.shape == X.shape
        for w in range(X.shape[1]):
            assert_close(spreadop_ref(X[:, w], coef), H[:, w], name="2D")
        assert_close(spreadop(X, coef), H, name="2D dense-sparse")

    with pytest.raises(DimensionMismatchError):
        _ = spreadop(np.zeros(L + 1), coef)
    with pytest.raises(NotSquareError):
        _ = spreadop(np.zeros(L), np.zeros((L, L + 1)))


def test_spreadop_composition():
    """Applying `g` then `f` equals applying `tconv(f, g)`."""
    L = 6
    f = rand_spreadfun(L, seed=0)
    g = rand_spreadfun(L, density=.2, seed=1, sparse=True)
    x = np.random.default_rng(2).standard_normal(L)

    out0 = spreadop(spreadop(x, g), f)
    out1 = spreadop(x, tconv(f, g))
    assert_close(out0, out1)

#### Inverse #################################################################
def test_spreadinv():
    L = 8
    coef = rand_spreadfun(L, seed=0, invertible=True)
    cinv = spreadinv(coef)

    # two-sided
    assert is_identity(tconv(cinv, coef), atol=1e-9)
    assert is_identity(tconv(coef, cinv), atol=1e-9)
    # involution
    assert_close(coef, spreadinv(cinv))

    # applied to signals
    rng = np.random.default_rng(1)
    for x in (rng.standard_normal(L), rng.standard_normal((L, 2))):
        y = spreadop(x, coef)
        assert_close(x, spreadinv(coef, y), name="solve")
        assert_close(spreadop(y, cinv), spreadinv(coef, y), name="apply inv")

    # sparse input
    coef_s = rand_spreadfun(L, density=.05, seed=3, sparse=True,
                            invertible=True)
    assert is_identity(tconv(spreadinv(coef_s), coef_s.toarray()), atol=1e-9)

    with pytest.raises(DimensionMismatchError):
        _ = spreadinv(coef, np.zeros(L - 1))


def test_spreadinv_singular():
    L = 4
    with pytest.raises(np.linalg.LinAlgError):
        _ = spreadinv(np.zeros((L, L)), opts=dict(cond_warn=None))

    # near-singular warns
    T = np.diag([1., 1., 1., 1e-14])
    with pytest.warns(UserWarning, match="ill-conditioned"):
        _ = spreadinv(spreadfun(T))

#### Adjoint #################################################################
def test_spreadadj():
    """Matches the conjugate transpose of the operator matrix, for dense and
    sparse input; `<T x, y> == <x, T* y>`.
    """
    L = 6
    coef = rand_spreadfun(L, seed=0)
    cadj = spreadadj(coef)

    assert_close(spreadfun(spread2op(coef).conj().T), cadj, name="matrix")
    assert_close(coef, spreadadj(cadj), name="involution")

    rng = np.random.default_rng(1)
    x = rng.standard_normal(L) + 1j*rng.standard_normal(L)
    y = rng.standard_normal(L) + 1j*rng.standard_normal(L)
    lhs = np.vdot(y, spreadop(x, coef))
    rhs = np.vdot(spreadop(y, cadj), x)
    assert abs(lhs - rhs) < 1e-9 * abs(lhs), (lhs, rhs)

    coef_s = rand_spreadfun(L, density=.2, seed=2, sparse=True)
    cadj_s = spreadadj(coef_s)
    assert scipy.sparse.issparse(cadj_s)
    assert cadj_s.nnz == coef_s.nnz
    assert_close(spreadadj(coef_s.toarray()), cadj_s, name="sparse")

    with pytest.raises(NotSquareError):
        _ = spreadadj(np.zeros((2, 3)))

#### Roots of unity ##########################################################
def test_roots_of_unity():
    for L in (1, 2, 5, 16):
        w = roots_of_unity(L)
        assert w.shape == (L,)
        assert np.allclose(w, np.exp(-2j*np.pi * np.arange(L) / L))
        # cached, read-only
        assert roots_of_unity(L) is w
        with pytest.raises(ValueError):
            w[0] = 2

    with pytest.raises(ValueError):
        _ = roots_of_unity(0)


if __name__ == '__main__':
    if run_without_pytest and not FORCED_PYTEST:
        for L in (1, 2, 3, 4):
            test_operator_roundtrip(L)
        test_col2diag()
        test_spreadfun_known()
        test_spreadop()
        test_spreadop_composition()
        test_spreadinv()
        test_spreadinv_singular()
        test_spreadadj()
        test_roots_of_unity()
    else:
        pytest.main([__file__, "-s"])
