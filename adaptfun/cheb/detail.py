#!/usr/bin/python
# -*- coding: utf-8 -*-
# Author: Andreas Buttenschoen
import numpy as np
import scipy.linalg as LA
from scipy.fft import fft, ifft
from scipy.special import comb

EPS = np.finfo(float).eps

# Split point of the recursive root finder; any point close to zero that is
# unlikely to be a root will do.
SPLIT_POINT = -0.004849834917525
MAX_COLLEAGUE_SIZE = 50
MAX_DEPTH = 32

# Series at least this long are evaluated through an oversampled FFT grid
FAST_EVAL_MIN = 1025
OVERSAMPLING = 8
STENCIL = 24


def expand(array):
    array = np.asarray(array)
    if array.ndim == 0:
        return np.reshape(array, (1, 1))
    elif array.ndim == 1:
        return np.expand_dims(array, axis=1)
    return array


def polyfit(values):
    """ Convert values at Chebyshev points of the second kind (ordered from -1
        to 1) into Chebyshev coefficients.

        The coefficients are computed by embedding the data into a periodic
        sequence and calling the FFT. Even or odd data produce coefficients
        whose odd or even entries are exactly zero.
    """
    values = expand(values)
    n = values.shape[0]

    if n <= 1:
        return np.array(values, order='F', copy=True)

    # Mirror the values
    tmp = np.vstack((values[:0:-1, :], values[:-1, :]))

    if np.isrealobj(values):
        coeffs = np.real(ifft(tmp, axis=0))
    else:
        coeffs = ifft(tmp, axis=0)

    coeffs = coeffs[:n, :]
    coeffs[1:n-1, :] *= 2

    # Enforce symmetry
    isEven = np.max(np.abs(values - values[::-1, :]), axis=0) == 0.0
    isOdd = np.max(np.abs(values + values[::-1, :]), axis=0) == 0.0
    coeffs[1::2, isEven] = 0
    coeffs[0::2, isOdd] = 0

    return np.asfortranarray(coeffs)


def polyval(coeffs):
    """ Convert Chebyshev coefficients into values at Chebyshev points of the
        second kind (ordered from -1 to 1). Inverse of polyfit.
    """
    coeffs = expand(coeffs)
    n = coeffs.shape[0]

    if n <= 1:
        return np.array(coeffs, order='F', copy=True)

    # Check for symmetry
    isEven = np.max(np.abs(coeffs[1::2, :]), axis=0) == 0.0
    isOdd = np.max(np.abs(coeffs[0::2, :]), axis=0) == 0.0

    c = np.array(coeffs, copy=True)
    c[1:n-1, :] /= 2
    tmp = np.vstack((c, c[n-2:0:-1, :]))

    if np.isrealobj(coeffs):
        values = np.real(fft(tmp, axis=0))
    else:
        values = fft(tmp, axis=0)

    # flip -> values are ordered from -1 to 1
    values = values[n-1::-1, :]

    values[:, isEven] = 0.5 * (values[:, isEven] + values[::-1, isEven])
    values[:, isOdd] = 0.5 * (values[:, isOdd] - values[::-1, isOdd])

    return np.asfortranarray(values)


def clenshaw(x, coeffs):
    """ Evaluate a Chebyshev series at the points x using Clenshaw's algorithm.

        Returns an array of shape (x.size, m).
    """
    x = np.reshape(np.asarray(x), (-1, 1))
    c = expand(coeffs)
    n, m = c.shape

    dtype = np.result_type(x, c, float)
    bk1 = np.zeros((x.shape[0], m), dtype=dtype)
    bk2 = np.zeros((x.shape[0], m), dtype=dtype)

    x2 = 2 * x
    for k in range(n-1, 0, -1):
        bk = c[k, :] + x2 * bk1 - bk2
        bk2 = bk1
        bk1 = bk

    return c[0, :] + x * bk1 - bk2


def _cosine_samples(c, L):
    """ g(t_j) = sum_k c_k cos(k t_j) at the L angles t_j = 2 pi j / L """
    padded = np.zeros(L, dtype=np.result_type(c, float))
    padded[:c.size] = c
    if np.isrealobj(padded):
        return np.real(fft(padded))
    return 0.5 * (fft(padded) + L * ifft(padded))


def fast_clenshaw(x, c):
    """ Evaluate a long Chebyshev series c (one column) at the points x.

        With x = cos(t) the series is a cosine series in t whose highest
        frequency is c.size - 1. It is sampled on a uniform grid in t,
        oversampled by OVERSAMPLING, with a single FFT; each point is then
        interpolated from the STENCIL nearest samples by barycentric Lagrange
        interpolation. The cost is O(n log n + STENCIL * x.size) instead of
        the O(n * x.size) of clenshaw.
    """
    c = np.ravel(c)
    L = 2 * OVERSAMPLING * c.size
    h = 2. * np.pi / L
    g = _cosine_samples(c, L)

    t = np.arccos(np.clip(np.ravel(np.asarray(x, dtype=float)), -1., 1.))
    offsets = np.arange(1 - STENCIL // 2, STENCIL // 2 + 1)
    idx = np.floor(t / h).astype(int)[:, np.newaxis] + offsets
    dt = t[:, np.newaxis] - h * idx

    # the samples are periodic in t
    vals = g[np.mod(idx, L)]

    # barycentric weights of equispaced nodes
    k = np.arange(STENCIL)
    w = (-1.)**k * comb(STENCIL - 1, k)

    with np.errstate(divide='ignore', invalid='ignore'):
        q = w / dt
        out = np.sum(q * vals, axis=1) / np.sum(q, axis=1)

    rows, cols = np.nonzero(dt == 0.)
    out[rows] = vals[rows, cols]
    return out


def evaluate(x, coeffs):
    """ Values of the Chebyshev series at the points x as an array of shape (x.size, m) """
    c = expand(coeffs)
    if c.shape[0] < FAST_EVAL_MIN:
        return clenshaw(x, c)

    return np.stack([fast_clenshaw(x, c[:, k]) for k in range(c.shape[1])], axis=1)


def prolong(coeffs, Nout):
    """ Chop (Nout < n) or zero-pad (Nout > n) a coefficient array. """
    coeffs = expand(coeffs)
    n, m = coeffs.shape
    Nout = int(Nout)

    if Nout <= n:
        return np.array(coeffs[:Nout, :], order='F', copy=True)

    out = np.zeros((Nout, m), dtype=coeffs.dtype, order='F')
    out[:n, :] = coeffs
    return out


def standardChop(coeffs, tol=EPS):
    """ Determine where a coefficient sequence can be chopped.

        Implements the algorithm of Aurentz & Trefethen, "Chopping a Chebyshev
        series" (2017). The sequence is expected to be ordered by increasing
        degree. The return value is the number of coefficients to keep; if it
        equals the length of the sequence no plateau was found, i.e. the
        sequence is not resolved.

        Step 1: compute the monotone envelope of the normalized magnitudes.
        Step 2: scan for a plateau, i.e. a point j after which the envelope
                does not decrease by more than a factor r(j) up to 1.25 j + 5.
        Step 3: chop at the point that minimizes the sum of the envelope and a
                slowly growing linear penalty in log scale.
    """
    b = np.abs(np.ravel(coeffs))
    n = b.size
    cutoff = n

    if n < 17:
        return cutoff

    tol = float(min(max(tol, EPS), 1.0 - EPS))

    # Step 1: running maximum from the tail of the sequence
    m = np.maximum.accumulate(b[::-1])[::-1]
    if m[0] == 0.0:
        return 1

    envelope = m / m[0]

    # Step 2: find the plateau; j is 1-based as in the paper
    js = np.arange(2, n + 1)
    j2s = np.floor(1.25 * js + 5.5).astype(int)
    valid = j2s <= n
    if not np.any(valid):
        return cutoff

    js = js[valid]
    j2s = j2s[valid]
    e1 = envelope[js - 1]
    e2 = envelope[j2s - 1]

    with np.errstate(divide='ignore', invalid='ignore'):
        r = 3.0 * (1.0 - np.log(e1) / np.log(tol))
        plateau = np.logical_or(e1 == 0.0, e2 / e1 > r)

    if not np.any(plateau):
        return cutoff

    first = np.argmax(plateau)
    plateauPoint = js[first] - 1
    j2 = j2s[first]

    # Step 3: fix the cutoff
    if envelope[plateauPoint - 1] == 0.0:
        return int(plateauPoint)

    envelope = np.copy(envelope)
    j3 = np.sum(envelope >= tol**(7./6.))
    if j3 < j2:
        j2 = j3 + 1
        envelope[j2 - 1] = tol**(7./6.)

    cc = np.log10(envelope[:j2])
    cc = cc + np.linspace(0, (-1./3.) * np.log10(tol), j2)
    d = np.argmin(cc) + 1
    return int(max(d - 1, 1))


def simplify_coeffs(coeffs, eps=EPS):
    """ Remove trailing coefficients that are below the noise level.

        The coefficients are padded with zeros first so that standardChop can
        also process short sequences; the result is never longer than the
        input.
    """
    coeffs = expand(coeffs)
    nold, m = coeffs.shape

    if nold <= 1:
        return np.array(coeffs, order='F', copy=True)

    N = max(17, int(np.floor(1.25 * nold + 5.5)))
    padded = prolong(coeffs, N)

    # relative tolerance per column
    vscale = np.max(np.abs(polyval(coeffs)), axis=0)
    vmax = np.max(vscale)
    tol = eps * np.ones(m)
    nonzero = vscale > 0
    tol[nonzero] = eps * vmax / vscale[nonzero]

    cutoff = 1
    for k in range(m):
        cutoff = max(cutoff, standardChop(padded[:, k], tol[k]))

    cutoff = min(cutoff, nold)
    return np.array(coeffs[:cutoff, :], order='F', copy=True)


def colleague_roots(c):
    """ Eigenvalues of the colleague matrix of the Chebyshev series c. """
    n = c.size - 1  # degree

    if n == 1:
        return np.asarray([-c[0] / c[1]])

    A = np.zeros((n, n), dtype=np.result_type(c, float))
    A[0, 1] = 1.0
    idx = np.arange(1, n - 1)
    A[idx, idx - 1] = 0.5
    A[idx, idx + 1] = 0.5
    A[n-1, n-2] = 0.5
    A[n-1, :] -= c[:n] / (2. * c[n])
    return LA.eigvals(A)


def _chop_tail(c, tol):
    """ Remove trailing coefficients with magnitude below tol. """
    big = np.nonzero(np.abs(c) > tol)[0]
    if big.size == 0:
        return c[:1]
    return c[:big[-1] + 1]


def _roots_rec(c, a, b, tol, htol, depth=0):
    """ Roots of the Chebyshev series c living on [a, b].

        Large series are restricted to two subintervals and solved recursively.
    """
    c = _chop_tail(c, tol)
    n = c.size

    if n <= 1:
        return np.zeros(0)

    if n <= MAX_COLLEAGUE_SIZE + 1 or depth >= MAX_DEPTH:
        r = colleague_roots(c)
        r = r[np.abs(np.imag(r)) <= htol]
        r = np.real(r)
        r = r[np.abs(r) <= 1. + htol]
        r = np.clip(r, -1., 1.)
        return 0.5 * (b - a) * (r + 1.) + a

    # Restrict the series to [-1, s] and [s, 1]
    x = np.sin(np.pi * np.arange(-n + 1, n, 2) / (2. * (n - 1)))
    out = []
    for lo, hi in ((-1., SPLIT_POINT), (SPLIT_POINT, 1.)):
        y = 0.5 * (hi - lo) * (x + 1.) + lo
        csub = np.ravel(polyfit(evaluate(y, c)))
        sa = 0.5 * (b - a) * (lo + 1.) + a
        sb = 0.5 * (b - a) * (hi + 1.) + a
        out.append(_roots_rec(csub, sa, sb, tol, htol, depth + 1))

    return np.concatenate(out)


def roots(f, eps=EPS, htol=None):
    """ Compute the roots in [-1, 1] of each column of the chebtech f.

        A zero column has the single root 0. Returns an array for a single
        column and a list of arrays for array-valued f.
    """
    coeffs = expand(f.coeffs)
    htol = 1e3 * max(eps, EPS) if htol is None else htol

    rts = []
    for k in range(coeffs.shape[1]):
        c = np.real_if_close(coeffs[:, k])
        scale = np.sum(np.abs(c))

        if scale == 0.0:
            rts.append(np.zeros(1))
            continue

        r = np.sort(_roots_rec(c, -1., 1., eps * scale, htol))

        # The recursion may find the same root on both sides of the split
        if r.size > 1:
            r = r[np.hstack((True, np.diff(r) > htol))]

        rts.append(r)

    return rts[0] if len(rts) == 1 else rts
