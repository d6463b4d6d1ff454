#!/usr/bin/python
# -*- coding: utf-8 -*-
# Author: Andreas Buttenschoen
import numpy as np
from numbers import Number

from .tech import Tech


def _result_type(*inputs):
    """ The tech type of an operation; mixing bases gives a non-periodic result """
    techs = [x for x in inputs if isinstance(x, Tech)]
    for f in techs:
        if not f.periodic:
            return type(f), f
    return type(techs[0]), techs[0]


def _as_type(f, ftype):
    if isinstance(f, ftype):
        return f
    return f.convert(ftype)


def by_value(numpy_ufunc, *inputs, **kwargs):
    """ Construct numpy_ufunc(inputs) adaptively from its values """
    ftype, f = _result_type(*inputs)

    def evaluate(x):
        args = [z(x) if isinstance(z, Tech) else z for z in inputs]
        return numpy_ufunc(*args, **kwargs)

    return ftype(op=evaluate, pref=f.pref, hscale=f.hscale)


def negative(x, **kwargs):
    return x.copy(coeffs=-1 * x.coeffs)


def positive(x, **kwargs):
    return x


def conjugate(x, **kwargs):
    return x.conj()


def add(x1, x2, **kwargs):
    # if we have one element that is a ndarray or Number we want that to be x2!
    if isinstance(x1, (np.ndarray, Number)):
        return add(x2, x1, **kwargs)

    if isinstance(x2, (np.ndarray, Number)):
        other = np.asarray(x2)
        if other.ndim > 1 or (other.ndim == 1 and other.size not in (1, x1.m) and x1.m != 1):
            return NotImplemented

        c = np.array(x1.coeffs, order='F', dtype=np.result_type(x1.coeffs, other), copy=True)
        if other.size > 1 and x1.m == 1:
            c = np.tile(c, (1, other.size))

        x1._add_constant(c, np.ravel(other))
        return x1.copy(coeffs=c)

    elif isinstance(x2, Tech):
        ftype, _ = _result_type(x1, x2)
        x1 = _as_type(x1, ftype)
        x2 = _as_type(x2, ftype)

        n = max(x1.n, x2.n)
        c1 = x1.prolong_coeffs(n)
        c2 = x2.prolong_coeffs(n)
        if c1.shape[1] != c2.shape[1] and min(c1.shape[1], c2.shape[1]) != 1:
            raise ValueError("Column mismatch {0:d} != {1:d}!".format(c1.shape[1], c2.shape[1]))

        c = np.asfortranarray(c1 + c2)

        # zero output collapses to a constant
        if not np.any(c):
            c = np.zeros((1, c.shape[1]), order='F', dtype=c.dtype)

        return x1.copy(coeffs=c, ishappy=x1.ishappy and x2.ishappy,
                       epslevel=max(x1.epslevel, x2.epslevel),
                       hscale=max(x1.hscale, x2.hscale), simplify=True)

    return NotImplemented


def subtract(x1, x2, **kwargs):
    return add(x1, np.negative(x2), **kwargs)


def multiply(x1, x2, **kwargs):
    # if we have one element that is a ndarray or Number we want that to be x2!
    if isinstance(x1, (np.ndarray, Number)):
        return multiply(x2, x1, **kwargs)

    if isinstance(x2, (np.ndarray, Number)):
        other = np.asarray(x2)
        if other.ndim > 1:
            return NotImplemented
        return x1.copy(coeffs=np.asfortranarray(x1.coeffs * np.ravel(other)))

    elif isinstance(x2, Tech):
        ftype, _ = _result_type(x1, x2)
        x1 = _as_type(x1, ftype)
        x2 = _as_type(x2, ftype)

        # Multiplication with a constant function
        if x1.n == 1:
            return multiply(x2, x1.coeffs[0, :] if x1.m > 1 else x1.coeffs[0, 0])
        elif x2.n == 1:
            return multiply(x1, x2.coeffs[0, :] if x2.m > 1 else x2.coeffs[0, 0])

        # multiply the values on a grid large enough for the product
        n = x1._product_length(x2)
        v1 = x1.coeffs2vals(x1.prolong_coeffs(n))
        v2 = x2.coeffs2vals(x2.prolong_coeffs(n))
        if v1.shape[1] != v2.shape[1] and min(v1.shape[1], v2.shape[1]) != 1:
            raise ValueError("Column mismatch {0:d} != {1:d}!".format(v1.shape[1], v2.shape[1]))

        c = x1.vals2coeffs(np.asfortranarray(v1 * v2))
        return x1.copy(coeffs=c, ishappy=x1.ishappy and x2.ishappy,
                       epslevel=max(x1.epslevel, x2.epslevel),
                       hscale=max(x1.hscale, x2.hscale), simplify=True)

    return NotImplemented


def true_divide(x1, x2, **kwargs):
    # only division by constants is exact
    if not isinstance(x1, Tech) or not isinstance(x2, (np.ndarray, Number)):
        return NotImplemented

    other = np.asarray(x2)
    if other.ndim > 1:
        return NotImplemented
    return x1.copy(coeffs=np.asfortranarray(x1.coeffs / np.ravel(other)))


def divide(x1, x2, **kwargs):
    return true_divide(x1, x2, **kwargs)
