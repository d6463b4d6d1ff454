#!/usr/bin/python
# -*- coding: utf-8 -*-
# Author: Andreas Buttenschoen
import numpy as np
from scipy.fft import ifft
from functools import lru_cache


def _frozen(array):
    # cached arrays are shared by every caller
    array.flags.writeable = False
    return array


def bary_weights(N):
    """ Barycentric weights of the N-point Chebyshev grid of the second kind """
    c = np.hstack((np.ones(N-1), 0.5))
    c[-2::-2] = -1
    c[0] *= 0.5
    return c


@lru_cache(maxsize=25)
def quadwts(N):
    """ Clenshaw-Curtis weights of the N-point Chebyshev grid on [-1, 1] """
    if N <= 1:
        return _frozen(2. * np.ones(N))

    # moments of the even Chebyshev polynomials, mirrored for the inverse FFT
    moments = 2. / (1. - np.arange(0, N, 2)**2)
    moments = np.hstack((moments, moments[1:N//2][::-1]))
    w = ifft(moments).real
    w[0] *= 0.5
    return _frozen(np.hstack((w, w[0])))


@lru_cache(maxsize=25)
def chebpts_type2_compute(N):
    """ Chebyshev points of the second kind ordered from -1 to 1. """
    if N <= 1:
        return _frozen(np.zeros(N))
    return _frozen(np.sin(np.pi * np.arange(-N+1, N, 2) / (2. * (N - 1))))
