#!/usr/bin/python
# -*- coding: utf-8 -*-
# Author: Andreas Buttenschoen
import numpy as np

from ..exceptions import DomainError
from ..tech import Tech, hstack as tech_hstack, copy as tech_copy
from .detail import polyfit, polyval, clenshaw, evaluate, roots
from .detail import prolong, simplify_coeffs
from .diff import computeDerCoeffs
from .minmax import minmaxCol
from .pts import bary_weights, chebpts_type2_compute, quadwts
from .refine import Refine

# Directory for numpy implementation of functions
HANDLED_FUNCTIONS = {}


class chebtech(Tech):
    """ Chebyshev polynomials of the first kind sampled at Chebyshev points of
        the second kind.
    """
    techType = 'cheb'
    HANDLED_FUNCTIONS = HANDLED_FUNCTIONS

    vals2coeffs = staticmethod(polyfit)
    coeffs2vals = staticmethod(polyval)
    points = staticmethod(chebpts_type2_compute)

    def refinement(self, op):
        return Refine(op=op, pref=self.pref)

    def _extrapolate(self, values):
        """ Replace the rows of values with non-finite entries by the
            polynomial interpolant of the remaining rows.

            The barycentric weights of the reduced grid follow from the
            weights of the full Chebyshev grid.
        """
        bad = np.logical_not(np.all(np.isfinite(values), axis=1))
        if not np.any(bad) or np.all(bad):
            return values

        n = values.shape[0]
        x = self.points(n)
        w = bary_weights(n)

        good = np.logical_not(bad)
        wgood = w[good]
        for xk in x[bad]:
            wgood = wgood * (x[good] - xk)
            wgood /= np.max(np.abs(wgood))

        q = wgood / (x[bad, np.newaxis] - x[good])
        out = np.array(values, order='F', copy=True)
        out[bad, :] = np.dot(q, values[good, :]) / np.sum(q, axis=1)[:, np.newaxis]
        return out

    def prolong_coeffs(self, Nout):
        """ Return the prolonged coefficients only """
        return np.asarray(prolong(self.coeffs, Nout), order='F')

    @staticmethod
    def simplify_coeffs(coeffs, eps):
        return simplify_coeffs(coeffs, eps=eps)

    """ The sequence examined by the happiness checks """
    def _chop_sequence(self, coeffs):
        return np.abs(coeffs)

    def _length_from_cutoff(self, cutoff):
        return min(int(cutoff), self.n)

    def _refined_length(self, n):
        return 2 * n - 1

    def _product_length(self, other):
        return self.n + other.n - 1

    def _add_constant(self, coeffs, c):
        coeffs[0, :] += c

    def feval(self, x):
        out = clenshaw(np.ravel(x), self.coeffs)
        return np.reshape(out, self._output_shape(x))

    """ Evaluates chebtech at x = -1 """
    def lval(self):
        c = np.copy(self.coeffs)
        c[1::2] *= -1
        return np.sum(c, axis=0).squeeze()

    """ Evaluate chebtech at x = 1 """
    def rval(self):
        return np.sum(self.coeffs, axis=0).squeeze()

    def restrict(self, s):
        """ Restrict the chebtech to a subinterval s of [-1, 1] """
        s = np.asarray(s, dtype=float)

        # check that we really have a subinterval
        if s.size != 2 or s[0] < -1 or s[1] > 1 or s[1] <= s[0]:
            raise DomainError("Not a valid subinterval {0} of [-1, 1]!".format(s))
        elif np.all(s == np.asarray([-1, 1])):
            # nothing to do here
            return self

        # compute values on new grid
        y = 0.5 * (s[1] - s[0]) * (self.x + 1.) + s[0]
        values = evaluate(y, self.coeffs)
        return self.copy(coeffs=polyfit(values), simplify=True)

    def flipud(self):
        """ Flip / reverse a chebtech object such that G(x) = F(-x) for all x in [-1, 1] """
        coeffs = np.copy(self.coeffs)
        coeffs[1::2] *= -1
        return self.copy(coeffs=coeffs)

    def conj(self):
        return self.copy(coeffs=np.conj(self.coeffs))

    def roots(self, *args, **kwargs):
        # If we don't simplify this may lead to crashes!
        f = self.simplify()
        return roots(f, eps=self.pref.eps)

    def minandmax(self, *args, **kwargs):
        """ Global minimum and maximum of each column.

            Returns the values and positions as arrays of shape (2, m) with
            the minimum in the first row; (2, ) for a scalar function.
        """
        fp = np.diff(self)
        x = self.x

        vals = np.zeros((2, self.m))
        pos = np.zeros((2, self.m))
        for i in range(self.m):
            vals[:, i], pos[:, i] = minmaxCol(self[i], fp[i], x)

        if self.m == 1:
            return vals[:, 0], pos[:, 0]
        return vals, pos


def implements(np_function):
    """ Register an __array_function__ implementation """
    def decorator(func):
        HANDLED_FUNCTIONS[np_function] = func
        return func
    return decorator


implements(np.hstack)(tech_hstack)
implements(np.copy)(tech_copy)


@implements(np.real)
def real(cheb):
    """ Returns real part of a chebtech """
    return cheb.copy(coeffs=np.real(cheb.coeffs))


@implements(np.imag)
def imag(cheb):
    """ Returns imaginary part of a chebtech """
    return cheb.copy(coeffs=np.imag(cheb.coeffs))


@implements(np.diff)
def diff(cheb, n=1, axis=0):
    """ Compute the n-th derivative of the chebtech f """
    if axis != 0:
        raise NotImplementedError("Axis other than zero not implemented yet!")

    # Simplify the coefficients prior to differentiating
    # Otherwise it seems errors may be accumulating.
    c = simplify_coeffs(cheb.coeffs, eps=cheb.pref.eps) if cheb.ishappy else cheb.coeffs

    # return zero if differentiating too much
    if n >= c.shape[0]:
        return cheb.copy(coeffs=np.zeros((1, cheb.m), dtype=c.dtype, order='F'))

    # Iteratively compute the coefficients of the derivatives
    for _ in range(n):
        c = computeDerCoeffs(c)

    return cheb.copy(coeffs=c)


@implements(np.sum)
def sum(cheb, axis=0, **kwargs):
    """ Definite integral of a chebtech f on the interval [-1, 1].

    If f is an array-valued chebtech, then the result is a row vector
    containing the definite integrals of each column.

    """
    n = cheb.n

    # Constant cheb function
    if n == 1:
        return (2 * cheb.coeffs[0, :]).squeeze()

    # Evaluate the integral by using the Chebyshev coefficients
    #
    # Int_{-1}^{1} T_k(x) dx = 2 / (1 - k^2)   if k even
    # Int_{-1}^{1} T_k(x) dx = 0               if k odd
    #
    # Thm 19.2 in Trefethen
    k = np.arange(2, n)
    w = np.hstack((2, 0, 2 / (1 - k**2)))
    w[3::2] = 0
    return (w @ cheb.coeffs).squeeze()


@implements(np.cumsum)
def cumsum(cheb, **kwargs):
    """ Indefinite integral of chebtech f, with the constant of integration
        chosen such that f(-1) = 0.

        Given a Chebyshev polynomial of length n, we have that

            f(x) = sum_{j = 0}^{n-1} c_j T_j(x)

        Its integral is represented by a polynomial of length n+1 given by

            g(x) = sum_{j = 0}^{n} b_j T_j(x)

        with b_0 = sum_{j = 1}^{n} (-1)^{j+1} b_j

        the other coefficients are:
            b_1 = c_0 - c_2 / 2
            b_r = (c_{r-1} - c_{r+1})/(2r) for r > 1

        with c_{n} = c_{n+1} = 0
    """
    n, m = cheb.shape
    c = np.vstack((cheb.coeffs, np.zeros((2, m))))  # pad with zeros
    b = np.zeros((n+1, m), dtype=c.dtype, order='F')

    # compute b_(2) ... b_(n)
    b[2:n+1, :] = (c[1:n, :] - c[3:n+2, :]) / np.expand_dims(2*np.arange(2, n+1), axis=1)
    # compute b(1)
    b[1, :] = c[0, :] - c[2, :] / 2
    v = np.ones(n)
    v[1::2] = -1
    b[0, :] = v @ b[1:, :]

    # Create the new chebtech
    g = cheb.copy(coeffs=b).simplify()

    # ensure that f(-1) = 0
    coeffs = np.copy(g.coeffs)
    coeffs[0, :] -= g.lval()
    return g.copy(coeffs=coeffs)


@implements(np.inner)
def inner(cheb1, cheb2):
    """ Computes the L2 inner product on [-1, 1] of two Chebyshev series """
    n = len(cheb1) + len(cheb2)

    fvalues = polyval(prolong(cheb1.coeffs, n))
    gvalues = polyval(prolong(cheb2.coeffs, n))

    # compute Clenshaw-Curtis quadrature weights
    w = quadwts(n)

    # compute the inner-product
    out = np.matmul(np.conj(fvalues).T * w, gvalues)

    # force non-negative output if the inputs are equal
    if cheb1 == cheb2:
        dout = np.diag(np.diag(out))
        out = out - dout + np.abs(dout)

    return out.squeeze()
