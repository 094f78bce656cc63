# -*- coding: utf-8 -*-
# -----------------------------------------------------------------------------
# Copyright (c) 2022- John Muradeli
#
# Distributed under the terms of the MIT License
# (see tfspread/__init__.py for details)
# -----------------------------------------------------------------------------
import numpy
import scipy.fft

from ..configs import CFG


class NumPyBackend:
    """NumPy / SciPy backend for transforms and matrix products.

    FFTs run through `scipy.fft` with `workers=CFG['FFT']['workers']`
    (`-1` uses all cores).
    """
    _np = numpy
    _fft = scipy.fft

    name = 'numpy'

    @classmethod
    def _fft_kwargs(cls):
        return {'workers': CFG['FFT']['workers']}

    @classmethod
    def fft(cls, x, axis=0):
        return cls._fft.fft(x, axis=axis, **cls._fft_kwargs())

    @classmethod
    def ifft(cls, x, axis=0):
        return cls._fft.ifft(x, axis=axis, **cls._fft_kwargs())

    @classmethod
    def matmul(cls, A, B):
        """Ordinary matrix product.

        This method exists in case of future optimizations.
        """
        return cls._np.matmul(A, B)
