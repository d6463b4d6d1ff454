#!/usr/bin/python
# -*- coding: utf-8 -*-
# Author: Andreas Buttenschoen
import numpy as np

from ..refine import expand


def horner(x, c):
    """ Evaluate a Fourier series at the points x using Horner's scheme.

        The coefficients c are ordered by increasing wave number. For an even
        number of coefficients the first one multiplies cos(n/2 pi x).
        Returns a complex array of shape (x.size, m).
    """
    x = np.reshape(np.asarray(x, dtype=float), (-1, 1))
    c = expand(c)
    n, m = c.shape

    if n == 1:
        return np.tile(c[0, :], (x.shape[0], 1)).astype(complex)

    z = np.exp(1j * np.pi * x)
    q = np.tile(c[-1, :], (x.shape[0], 1)).astype(complex)

    for j in range(n-2, 0, -1):
        q = c[j, :] + z * q

    if n & 1:
        q = np.exp(-1j * np.pi * ((n-1)//2) * x) * (c[0, :] + z * q)
    else:
        q = np.exp(-1j * np.pi * (n//2 - 1) * x) * q + np.cos(n//2 * np.pi * x) * c[0, :]

    return q
