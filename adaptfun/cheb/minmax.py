#!/usr/bin/python
# -*- coding: utf-8 -*-
# Author: Andreas Buttenschoen
import numpy as np


def minmaxCol(f, fp, xpts):
    """ Global minimum and maximum of a scalar chebtech f on [-1, 1].

        fp is the derivative of f and xpts the grid of f. Returns the values
        and the positions, both ordered as (min, max).
    """
    pos = np.zeros(2)
    vals = np.zeros(2)

    # constant function
    if f.n == 1:
        vals[:] = np.real(f.coeffs[0, 0])
        return vals, pos

    # compute the turning points
    r = np.atleast_1d(fp.roots())
    r = np.concatenate(([-1.0], r, [1.0]))
    v = np.real(np.ravel(f(r)))
    values = np.real(np.ravel(f.values))

    # min
    idx = np.argmin(v)
    vals[0], pos[0] = v[idx], r[idx]

    # min with function values
    idx = np.argmin(values)
    if values[idx] < vals[0]:
        vals[0], pos[0] = values[idx], xpts[idx]

    # max
    idx = np.argmax(v)
    vals[1], pos[1] = v[idx], r[idx]

    # max with function values
    idx = np.argmax(values)
    if values[idx] > vals[1]:
        vals[1], pos[1] = values[idx], xpts[idx]

    return vals, pos
