#!/usr/bin/python
# -*- coding: utf-8 -*-
# Author: Andreas Buttenschoen
import numpy as np

from ..cheb.detail import standardChop
from ..refine import expand


def split_nyquist(coeffs):
    """ Odd length coefficients of the same function.

        The cos(n/2 pi x) mode of an even length series is split evenly
        between the wave numbers -n/2 and n/2.
    """
    coeffs = expand(coeffs)
    if np.remainder(coeffs.shape[0], 2) == 0:
        return np.vstack((0.5 * coeffs[0, :], coeffs[1:, :], 0.5 * coeffs[0, :]))
    return np.copy(coeffs)


def prolong(coeffs, Nout):
    # If Nout < length(self) -> compressed by chopping
    # If Nout > length(self) -> coefficients are padded by zero
    coeffs = expand(coeffs)
    Nin, m = coeffs.shape
    Nout = int(Nout)

    if Nout == Nin:  # Do nothing
        return np.array(coeffs, order='F', copy=True)

    coeffs = split_nyquist(coeffs)
    Nin = coeffs.shape[0]

    # Pad with zeros
    if Nout > Nin:
        kup = int(np.ceil((Nout-Nin)/2))
        kdown = int(np.floor((Nout-Nin)/2))
        coeffs = np.vstack((np.zeros((kup, m), dtype=coeffs.dtype),
                            coeffs,
                            np.zeros((kdown, m), dtype=coeffs.dtype)))

    # chop coefficients
    elif Nout < Nin:
        kup = int(np.floor((Nin-Nout)/2))
        kdown = int(np.ceil((Nin-Nout)/2))
        coeffs = coeffs[kup:Nin-kdown, :]
        if kup < kdown:
            coeffs[0, :] = 2*coeffs[0, :]

    return np.asfortranarray(coeffs)


def fold(coeffs):
    """ Coefficient magnitudes ordered by wave number.

        Returns |c_0|, |c_1| + |c_-1|, |c_1| + |c_-1|, |c_2| + |c_-2|, ...
        Each wave number appears twice so that the length of the sequence
        equals the number of coefficients after splitting the Nyquist mode.
    """
    c = np.abs(split_nyquist(coeffs))
    N = c.shape[0]
    mid = (N - 1) // 2

    folded = np.copy(c[mid:, :])
    folded[1:, :] += c[mid-1::-1, :]
    return np.vstack((folded[0, :], np.kron(folded[1:, :], np.ones((2, 1)))))


def length_from_cutoff(cutoff):
    """ Number of coefficients that keeps the first cutoff entries of fold """
    cutoff = int(cutoff)
    if np.remainder(cutoff, 2) == 0:
        k = cutoff//2
    else:
        k = (cutoff-1)//2
    return 2*k + 1


def simplify_coeffs(coeffs, eps=np.finfo(float).eps):
    """ Remove the high wave numbers that are below the noise level.

        The coefficients are padded with zeros first so that standardChop can
        also process short series.
    """
    coeffs = expand(coeffs)
    nold, m = coeffs.shape

    if nold <= 1:
        return np.array(coeffs, order='F', copy=True)

    folded = fold(coeffs)
    N = folded.shape[0]
    Npad = max(17, int(np.round(1.25 * N + 5)))
    folded = np.vstack((folded, np.zeros((Npad - N, m))))

    # relative tolerance per column
    vscale = np.max(folded, axis=0)
    vmax = np.max(vscale)
    tol = eps * np.ones(m)
    nonzero = vscale > 0
    tol[nonzero] = eps * vmax / vscale[nonzero]

    # loop through columns to compute cutoff
    cutoff = 1
    for k in range(m):
        cutoff = max(cutoff, standardChop(folded[:, k], tol[k]))

    # take the minimum cutoff.
    cutoff = min(cutoff, N)
    nout = length_from_cutoff(cutoff)
    if nout >= nold:
        return np.array(coeffs, order='F', copy=True)
    return prolong(coeffs, nout)
