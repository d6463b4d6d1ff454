#!/usr/bin/python
# -*- coding: utf-8 -*-
# Author: Andreas Buttenschoen
import numpy as np
from scipy.fft import ifft, fft, ifftshift, fftshift

from ..refine import expand


def wave_numbers(n):
    """ Wave numbers of n Fourier coefficients in increasing order.

        -(n-1)/2, ..., (n-1)/2 for n odd and -n/2, ..., n/2-1 for n even.
    """
    if n & 1:
        return np.arange(-(n-1)//2, (n+1)//2)
    return np.arange(-n//2, n//2)


def _shift_sign(n):
    # c_k -> (-1)^k c_k moves the grid from [0, 2) to [-1, 1)
    return np.expand_dims(np.where(np.remainder(wave_numbers(n), 2) == 0, 1., -1.), axis=1)


def _modulus(values):
    # hypot avoids the floating point warnings of abs on complex data
    return np.hypot(np.real(values), np.imag(values))


def isHerm(values):
    """ Columns with values(x) == conj(values(-x)) """
    return np.max(_modulus(values - np.conj(values[::-1, :])), axis=0) == 0.0


def isSkew(values):
    """ Columns with values(x) == -conj(values(-x)) """
    return np.max(_modulus(values + np.conj(values[::-1, :])), axis=0) == 0.0


def vals2coeffs(values):
    """ Convert values at N equally spaced points between [-1, 1) to N trigonometric coefficients

    If N is odd:
          F(x) = C(1)*z^(-(N-1)/2) + C(2)*z^(-(N-1)/2-1) + ... + C(N)*z^((N-1)/2)

    If N is even:
          F(x) = C(1)*z^(-N/2) + C(2)*z^(-N/2+1) + ... + C(N)*z^(N/2-1)

    where z = exp(1j pi x).

    F(x) interpolates the data [V(1) ; ... ; V(N)] at the N equally
    spaced points x_k = -1 + 2*k/N, k=0:N-1.
    """
    values = expand(values)
    n = values.shape[0]

    if n <= 1:
        return np.array(values, order='F', dtype=complex, copy=True)

    # test for symmetry about x = 0 of the periodic extension
    vals = np.vstack((values, values[0, :]))
    is_herm = isHerm(vals)
    is_skew = isSkew(vals)

    coeffs = (1/n) * fftshift(fft(values, axis=0), axes=0)
    coeffs = _shift_sign(n) * coeffs

    # correct if symmetric
    coeffs[:, is_herm] = np.real(coeffs[:, is_herm])
    coeffs[:, is_skew] = 1j * np.imag(coeffs[:, is_skew])
    return np.asfortranarray(coeffs)


def coeffs2vals(coeffs):
    """ Convert Fourier coefficients to values at N equally spaced points
        between [-1, 1), where N is the number of coefficients.
    """
    coeffs = expand(coeffs)
    n = coeffs.shape[0]

    if n <= 1:
        return np.array(coeffs, order='F', dtype=complex, copy=True)

    coeffs = _shift_sign(n) * coeffs

    # test for symmetry
    is_herm = np.max(np.abs(np.imag(coeffs)), axis=0) == 0.0
    is_skew = np.max(np.abs(np.real(coeffs)), axis=0) == 0.0

    values = ifft(ifftshift(n * coeffs, axes=0), axis=0)

    # correct if symmetric
    vals = np.vstack((values, values[0, :]))
    hermvals = (vals + np.flipud(np.conj(vals))) / 2
    skewvals = (vals - np.flipud(np.conj(vals))) / 2
    values[:, is_herm] = hermvals[:-1, is_herm]
    values[:, is_skew] = skewvals[:-1, is_skew]
    return np.asfortranarray(values)
