#!/usr/bin/python
# -*- coding: utf-8 -*-
# Author: Andreas Buttenschoen
import numpy as np


def computeDerCoeffs(c):
    """ Chebyshev coefficients of the derivative of each column of c.

    Uses the backward recurrence

        c'_{k-1} = c'_{k+1} + 2 k c_k,   c'_0 halved,

    evaluated as two cumulative sums over the odd and the even indices.
    """
    c = c if c.ndim > 1 else c[:, np.newaxis]
    n, m = c.shape
    if n <= 1:
        return np.zeros((1, m), dtype=c.dtype, order='F')

    weighted = np.arange(2, 2 * n, 2)[:, np.newaxis] * c[1:, :]
    cout = np.zeros((n - 1, m), dtype=c.dtype, order='F')
    for start in (n - 2, n - 3):
        if start >= 0:
            cout[start::-2, :] = np.cumsum(weighted[start::-2, :], axis=0)

    cout[0, :] *= 0.5
    return cout
