#!/usr/bin/python
# -*- coding: utf-8 -*-
# Author: Andreas Buttenschoen
import numpy as np

from ..cheb.chebtech import chebtech
from ..tech import Tech, hstack as tech_hstack, copy as tech_copy
from .eval import horner
from .refine import Refine
from .transform import coeffs2vals, vals2coeffs, wave_numbers
from .trig_simplify import prolong, simplify_coeffs, split_nyquist, fold, length_from_cutoff
from .trigpts import trigpts

# Directory for numpy implementation of functions
HANDLED_FUNCTIONS = {}


class trigtech(Tech):
    """ Trigonometric polynomials sampled at equispaced points in [-1, 1).

        The coefficients are ordered by increasing wave number; see
        vals2coeffs for the convention used for an even number of points.
    """
    techType = 'trig'
    periodic = True
    unsupportedChecks = ('strict', 'loose')
    HANDLED_FUNCTIONS = HANDLED_FUNCTIONS

    vals2coeffs = staticmethod(vals2coeffs)

    @staticmethod
    def points(n):
        x, _ = trigpts(n)
        return x

    def coeffs2vals(self, coeffs):
        values = coeffs2vals(coeffs)
        return self._real_columns(values, coeffs)

    def _real_columns(self, values, coeffs=None):
        """ Drops the imaginary part when all columns are real """
        coeffs = self.coeffs if coeffs is None else coeffs
        vscl = np.max(np.abs(values), axis=0)
        isReal = np.max(np.abs(np.imag(values)), axis=0) <= 3 * self.pref.eps * vscl
        if np.all(isReal):
            return np.asfortranarray(np.real(values))

        values = np.array(values, order='F', copy=True)
        values[:, isReal] = np.real(values[:, isReal])
        return values

    @property
    def isreal(self):
        values = coeffs2vals(self.coeffs)
        vscl = np.max(np.abs(values), axis=0)
        return np.max(np.abs(np.imag(values)), axis=0) <= 3 * self.pref.eps * vscl

    @property
    def const_index(self):
        if np.remainder(self.n, 2):  # n odd
            return (self.n+1)//2 - 1
        return self.n//2

    def refinement(self, op):
        return Refine(op=op, pref=self.pref)

    def prolong_coeffs(self, Nout):
        """ Return the prolonged coefficients only """
        return prolong(self.coeffs, Nout)

    @staticmethod
    def simplify_coeffs(coeffs, eps):
        return simplify_coeffs(coeffs, eps=eps)

    """ The sequence examined by the happiness checks """
    def _chop_sequence(self, coeffs):
        return fold(coeffs)

    def _length_from_cutoff(self, cutoff):
        return min(length_from_cutoff(cutoff), self.n + 1 - np.remainder(self.n, 2))

    def _refined_length(self, n):
        return 2 * n

    def _product_length(self, other):
        n1 = self.n + 1 - np.remainder(self.n, 2)
        n2 = other.n + 1 - np.remainder(other.n, 2)
        return n1 + n2 - 1

    def _add_constant(self, coeffs, c):
        coeffs[self.const_index, :] += c

    def feval(self, x):
        out = horner(np.ravel(x), self.coeffs)
        isReal = self.isreal
        if np.all(isReal):
            out = np.real(out)
        else:
            out[:, isReal] = np.real(out[:, isReal])
        return np.reshape(out, self._output_shape(x))

    """ Evaluates trigtech at x = -1 """
    def lval(self):
        return self.feval(-1.)

    """ Evaluates trigtech at x = 1 """
    def rval(self):
        return self.feval(1.)

    def conj(self):
        c = self.coeffs
        if np.remainder(self.n, 2):
            nc = np.conj(c[::-1, :])
        else:
            nc = np.vstack((np.conj(c[0, :]), np.conj(c[:0:-1, :])))
        return self.copy(coeffs=np.asfortranarray(nc))

    def to_chebtech(self):
        return self.convert(chebtech)

    def restrict(self, s):
        """ Restrict a trigtech to a subinterval; the result is not periodic """
        return self.to_chebtech().restrict(s)

    def roots(self, *args, **kwargs):
        return self.to_chebtech().roots(*args, **kwargs)

    def minandmax(self, *args, **kwargs):
        return self.to_chebtech().minandmax(*args, **kwargs)


def implements(np_function):
    """ Register an __array_function__ implementation """
    def decorator(func):
        HANDLED_FUNCTIONS[np_function] = func
        return func
    return decorator


implements(np.hstack)(tech_hstack)
implements(np.copy)(tech_copy)


@implements(np.real)
def real(trig):
    """ Returns real part of a trigtech """
    return trig.copy(coeffs=np.asfortranarray(0.5 * (trig.coeffs + trig.conj().coeffs)))


@implements(np.imag)
def imag(trig):
    """ Returns imaginary part of a trigtech """
    return trig.copy(coeffs=np.asfortranarray(-0.5j * (trig.coeffs - trig.conj().coeffs)))


@implements(np.diff)
def diff(trig, n=1, axis=0):
    """ Computes the n-th derivative of a trigtech """
    if axis != 0:
        raise NotImplementedError("Axis other than zero not implemented yet!")

    c = split_nyquist(trig.coeffs)
    waveNumber = np.expand_dims(wave_numbers(c.shape[0]), axis=1)

    # derivative in Fourier space
    c = c * (1j * np.pi * waveNumber)**n
    return trig.copy(coeffs=np.asfortranarray(c), simplify=True)


@implements(np.sum)
def sum(trig, axis=0, **kwargs):
    """ Definite integral of a trigtech on [-1, 1] """
    out = 2 * trig.coeffs[trig.const_index, :]
    if np.all(trig.isreal):
        out = np.real(out)
    return out.squeeze()


@implements(np.cumsum)
def cumsum(trig, **kwargs):
    """ Indefinite integral of a trigtech F, whose mean is zero, with the constant of
    integration chosen such as F(-1) = 0. If the mean is not zero, the result would no longer
    be periodic thus an error is thrown.

    If the trigtech of length n is represented by the truncated series

        sum_{k = -(n-1)/2}^{(n-1)/2} c_k exp(i*pi*kx)

    its integral is represented with a trigtech of length n given by

        sum_{k = -(n-1)/2}^{(n-1)/2} b_k exp(i*pi*kx)

    where b_0 is determined from the constant of integration as

        b_0 = - sum_{k != 0} (-1)^k b_k

    The other coefficients are given by

        b_k = c_k / (i pi k).

    """
    # check that the mean of the trigtech is zero
    mean = np.abs(trig.coeffs[trig.const_index, :])
    if np.any(mean > 1e1 * max(trig.vscale, 1.0) * trig.pref.eps):
        raise ValueError("Indefinite integrals are only possible for trigtech objects with zero mean!")

    c = split_nyquist(trig.coeffs).astype(complex)
    waveNumber = np.expand_dims(wave_numbers(c.shape[0]), axis=1)
    mid = (c.shape[0] - 1) // 2

    # zero out the one corresponding to the zeroth term
    factor = np.zeros(waveNumber.shape, dtype=complex)
    nonzero = waveNumber != 0
    factor[nonzero] = 1. / (1j * np.pi * waveNumber[nonzero])
    c = c * factor

    # fix the constant term
    c[mid, :] = -np.sum(c * np.where(np.remainder(waveNumber, 2) == 0, 1., -1.), axis=0)
    return trig.copy(coeffs=np.asfortranarray(c), simplify=True)
