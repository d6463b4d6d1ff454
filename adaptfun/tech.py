#!/usr/bin/python
# -*- coding: utf-8 -*-
# Author: Andreas Buttenschoen
import logging
import warnings
import numpy as np

from .exceptions import DimensionError, ResolutionWarning
from .happiness import get_checker, happiness_check
from .pref import TechPref
from .refine import RefineBase, FunctionContainer, expand

logger = logging.getLogger(__name__)


def column_index(idx, m):
    """ Converts a column selection into an integer array.

        ':' and slices select as usual; integers and integer sequences keep
        their order and repetitions. Raises a DimensionError for indices
        outside of [0, m).
    """
    if isinstance(idx, str):
        if idx != ':':
            raise TypeError("Invalid column index '{0}'!".format(idx))
        return np.arange(m)
    elif isinstance(idx, slice):
        return np.arange(m)[idx]

    idx = np.atleast_1d(np.asarray(idx))
    if idx.size > 0 and idx.dtype.kind not in 'iu':
        raise TypeError("Column indices must be integers not {0}!".format(idx.dtype))

    idx = idx.astype(int)
    if np.any(idx < 0) or np.any(idx >= m):
        raise DimensionError("Index {0} exceeds function dimensions ({1:d} columns)!".format(
            idx.tolist(), m))
    return idx


class Tech(np.lib.mixins.NDArrayOperatorsMixin):
    """ Spectral representation of a function on [-1, 1].

        The coefficients are stored as a Fortran ordered array of shape (n, m),
        one column per component of an array-valued function. The values at
        the grid are always computed from the coefficients.

        The basis is fixed by the variants chebtech and trigtech, which
        provide the grid, the transforms and the coefficient manipulations.

        Keyword arguments:
            op:         a callable, a list of callables or an array of values.
            coeffs:     coefficients.
            values:     values on the grid.
            pref:       a TechPref; eps=, maxLength=, ... override its fields.
            hscale:     horizontal scale of the function.
            vscale:     initial vertical scale of the construction.
            ishappy:    skip the happiness check and use this flag.
            epslevel:   noise level of the coefficients.
            simplify:   chop the coefficients after construction.
    """
    # happiness checks the basis has no implementation of
    unsupportedChecks = ()
    periodic = False
    techType = None
    HANDLED_FUNCTIONS = {}

    def __init__(self, op=None, *args, **kwargs):
        self.pref = TechPref.from_kwargs(kwargs.pop('pref', None), kwargs)
        self.hscale = kwargs.pop('hscale', 1.0)
        self.ishappy = kwargs.pop('ishappy', None)
        self.epslevel = kwargs.pop('epslevel', self.pref.eps)

        vscl = kwargs.pop('vscale', 0.0)
        coeffs = kwargs.pop('coeffs', None)
        values = kwargs.pop('values', None)
        simplify = kwargs.pop('simplify', True)
        self.coeffs = np.zeros((0, 0), order='F')

        if op is not None and not isinstance(op, np.ndarray):
            # Create callable container
            if isinstance(op, (list, tuple)):
                op = FunctionContainer(list(op)) if len(op) > 1 else op[0]

            refine = op if isinstance(op, RefineBase) else self.refinement(op)
            self.populate(refine, vscl)

        elif op is not None:
            values = op

        if coeffs is not None:
            self.coeffs = np.array(expand(coeffs), order='F', copy=True)
        elif values is not None:
            self.coeffs = self.vals2coeffs(np.asfortranarray(expand(values)))

        if self.coeffs.size == 0:
            raise ValueError("Cannot construct an empty {0}!".format(type(self).__name__))

        # Update the happiness status
        if self.ishappy is None:
            verdict = happiness_check(self, vscl=vscl)
            self.ishappy = verdict.ishappy
            self.epslevel = verdict.epslevel

        if simplify and self.ishappy:
            self.coeffs = self.simplify_coeffs(self.coeffs, self.pref.eps)

    def __repr__(self):
        return f"{self.__class__.__name__}(coeffs={self.coeffs.T})"

    def __str__(self):
        return '{0} of length {1:d} with {2:d} column(s)'.format(type(self).__name__, self.n, self.m)

    def __len__(self):
        return self.coeffs.shape[0]

    def __eq__(self, other):
        return isinstance(other, Tech) and self.shape == other.shape and \
                np.all(self.coeffs == other.coeffs)

    def __call__(self, x):
        return self.feval(x)

    def __getitem__(self, idx):
        """ Useful to select columns of a function """
        return self.extract_columns(idx)

    def __array_ufunc__(self, numpy_ufunc, method, *inputs, **kwargs):
        from . import ufuncs as tech_funcs

        # results are new objects; f += g rebinds f
        kwargs.pop('out', None)

        if method != "__call__":
            return NotImplemented

        name = numpy_ufunc.__name__
        try:
            tech_func = getattr(tech_funcs, name)
        except AttributeError:
            pass
        else:
            result = tech_func(*inputs, **kwargs)
            if result is not NotImplemented:
                return result

        # If we don't have a special implementation we default to evaluating by value!
        return tech_funcs.by_value(numpy_ufunc, *inputs, **kwargs)

    """ Implement array function support """
    def __array_function__(self, func, types, args, kwargs):
        if func not in self.HANDLED_FUNCTIONS:
            return NotImplemented
        if not all(issubclass(t, Tech) for t in types):
            return NotImplemented
        return self.HANDLED_FUNCTIONS[func](*args, **kwargs)

    @property
    def shape(self):
        return self.coeffs.shape

    """ This is the number of values or coefficients """
    @property
    def n(self):
        return self.shape[0]

    """ This is the number of columns """
    @property
    def m(self):
        return self.shape[1]

    @property
    def type(self):
        return self.techType

    """ Return the points at which the function is sampled at """
    @property
    def x(self):
        return np.copy(self.points(self.n))

    @property
    def values(self):
        return self.coeffs2vals(self.coeffs)

    @property
    def vscales(self):
        """ Largest absolute value of each column on the grid """
        if self.coeffs.size == 0:
            return np.zeros(0)
        return np.max(np.abs(self.values), axis=0)

    @property
    def vscale(self):
        """ Estimates the vertical scale of a function """
        if self.coeffs.size == 0:
            return 0.0
        return float(np.max(self.vscales))

    def copy(self, **kwargs):
        """ A new object of the same type; kwargs replace its attributes """
        kwargs.setdefault('coeffs', self.coeffs)
        kwargs.setdefault('pref', self.pref)
        kwargs.setdefault('hscale', self.hscale)
        kwargs.setdefault('ishappy', self.ishappy)
        kwargs.setdefault('epslevel', self.epslevel)
        kwargs.setdefault('simplify', False)
        return type(self)(**kwargs)

    def convert(self, ftype):
        """ Resample the function in the basis of ftype """
        return ftype(op=lambda x: self.feval(x), pref=self.pref.replace(tech=ftype.techType),
                     hscale=self.hscale, vscale=self.vscale)

    def refinement(self, op):
        """ The refinement strategy used to sample op """
        raise NotImplementedError

    def _extrapolate(self, values):
        """ Replace non-finite samples; the base class leaves them alone """
        return values

    def populate(self, refine, vscl=0.0):
        """ Construct the coefficients from a callable op """
        # fail on bad checks before sampling
        get_checker(self.pref.happinessCheck, self)
        vscl = 0.0 if vscl is None else vscl
        self.ishappy = False

        while True:
            values, giveUp = refine()
            if self.pref.extrapolate:
                values = self._extrapolate(values)

            finite = np.isfinite(values)

            if giveUp:
                # keep the best representation found so far
                self.coeffs = self.vals2coeffs(np.where(finite, values, 0))
                self.ishappy = False
                logger.debug("Giving up at n = %d.", values.shape[0])
                warnings.warn("Function not resolved using {0:d} pts.".format(values.shape[0]),
                              ResolutionWarning, stacklevel=3)
                break

            if not np.all(finite):
                logger.debug("Non-finite samples at n = %d.", values.shape[0])
                self.coeffs = self.vals2coeffs(np.where(finite, values, 0))
                self.epslevel = 1.0
                continue

            vscl = max(vscl, np.max(np.abs(values)))

            # compute coefficients
            self.coeffs = self.vals2coeffs(values)

            # check happiness
            ishappy, epslevel, cutoff = happiness_check(self, refine.op, values, vscl, self.pref)
            logger.debug("n = %d: happy = %s, epslevel = %.4g, cutoff = %d.",
                         values.shape[0], ishappy, epslevel, cutoff)
            self.epslevel = epslevel

            if ishappy:
                self.coeffs = self.prolong_coeffs(cutoff)
                self.ishappy = True
                break

        return self

    def happiness_check(self, op=None, values=None, vscl=None, pref=None):
        return happiness_check(self, op=op, values=values, vscl=vscl, pref=pref)

    def feval(self, x):
        raise NotImplementedError

    def prolong(self, Nout):
        """ Chop (Nout < n) or zero-pad (Nout > n) the coefficients """
        return self.copy(coeffs=self.prolong_coeffs(Nout))

    def simplify(self, eps=None):
        """ Remove the coefficients below the noise level """
        # if not happy simply do nothing
        if not self.ishappy:
            return self

        eps = self.pref.eps if eps is None else eps
        return self.copy(coeffs=self.simplify_coeffs(self.coeffs, eps))

    def extract_columns(self, idx):
        return self.copy(coeffs=self.coeffs[:, column_index(idx, self.m)])

    def _output_shape(self, x):
        return np.shape(x) if self.m == 1 else np.shape(x) + (self.m, )


def hstack(techs):
    """ Combines techs of one type into an array-valued one """
    n = max([len(f) for f in techs])
    coeffs = np.hstack([f.prolong_coeffs(n) for f in techs])

    return techs[0].copy(coeffs=np.asfortranarray(coeffs),
                         ishappy=all([f.ishappy for f in techs]),
                         epslevel=max([f.epslevel for f in techs]),
                         hscale=max([f.hscale for f in techs]))


def copy(f):
    return f.copy(coeffs=np.copy(f.coeffs))
