#!/usr/bin/python
# -*- coding: utf-8 -*-
# Author: Andreas Buttenschoen
import numpy as np

# Local imports
from .cheb import chebtech
from .domain import check_domain
from .exceptions import DomainError
from .mapping import Mapping
from .pref import TechPref
from .trig import trigtech

HANDLED_FUNCTIONS = {}
SMALL_EPS = 1e-8


class Fun(np.lib.mixins.NDArrayOperatorsMixin):
    r"""
        Wrapper for bounded functions on [a, b]

        The function is represented by a chebtech or a trigtech (the onefun)
        on [-1, 1], composed with a linear map from [-1, 1] to [a, b].
    """
    def __init__(self, *args, **kwargs):
        # the approximation on [-1, 1]
        self.onefun = kwargs.pop('onefun', None)

        # grab operator
        op = kwargs.pop('op', None)
        compose = kwargs.pop('compose', True)

        self.domain = check_domain(kwargs.pop('domain', [-1, 1]), npts=2)

        # mapping for [-1, 1] -> [a, b]
        self.mapping = kwargs.pop('mapping', Mapping(ends=self.domain))

        if compose and op is not None and not isinstance(op, np.ndarray):
            ops = op if isinstance(op, (list, tuple)) else [op]
            op = [self.__compose(o) for o in ops]

        # construct the function
        if self.onefun is None:
            self.__construct(op=op, *args, **kwargs)

    def __compose(self, op):
        # This will get its own scope so op won't be overwritten!
        def f(x):
            return op(self.mapping.fwd(x))
        return f

    def __construct(self, *args, **kwargs):
        pref = TechPref.from_kwargs(kwargs.pop('pref', None), kwargs)
        if pref.tech == 'trig':
            self.onefun = trigtech(pref=pref, *args, **kwargs)
        else:
            self.onefun = chebtech(pref=pref, *args, **kwargs)

    @property
    def istrig(self):
        return self.onefun.periodic

    @property
    def type(self):
        return self.onefun.type

    """ Return the points at which the onefun is sampled at """
    @property
    def x(self):
        return self.mapping.fwd(self.onefun.x)

    @property
    def hscale(self):
        return np.linalg.norm(self.domain, np.inf)

    def __eq__(self, other):
        return isinstance(other, Fun) and np.all(self.domain == other.domain) and \
                self.onefun == other.onefun

    def __len__(self):
        return len(self.onefun)

    def __str__(self):
        return '%sfun with %d column(s) on %s at %d points.' % (self.type, self.m, self.domain, len(self))

    def __repr__(self):
        with np.printoptions(precision=16):
            return f"{self.__class__.__name__}(coeffs={repr(self.onefun.coeffs)}, domain={repr(self.domain)}, type={repr(self.type)})"

    def __getattr__(self, name):
        if name == 'onefun' or not hasattr(self.onefun, name):
            raise AttributeError(name)
        return getattr(self.onefun, name)

    def __call__(self, x):
        """ x in [a, b] -> [-1, 1] """
        z = self.mapping.bwd(x)
        if np.size(z) > 0 and (np.min(z) < -1.0 - SMALL_EPS or np.max(z) > 1.0 + SMALL_EPS):
            raise DomainError("Points outside of the domain %s!" % self.domain)
        return self.onefun.feval(np.clip(z, -1.0, 1.0))

    """ Implement array function support """
    def __array_function__(self, func, types, args, kwargs):
        if func not in HANDLED_FUNCTIONS:
            return NotImplemented
        if not all(issubclass(t, self.__class__) for t in types):
            return NotImplemented
        return HANDLED_FUNCTIONS[func](*args, **kwargs)

    def __getitem__(self, idx):
        return self.extract_columns(idx)

    def __array_ufunc__(self, numpy_ufunc, method, *inputs, **kwargs):
        kwargs.pop('out', None)
        for x in inputs:
            # check domain
            if isinstance(x, Fun) and not np.all(np.abs(x.domain - self.domain) < SMALL_EPS):
                raise ValueError("Domain mismatch %s != %s!" % (x.domain, self.domain))

        if method != "__call__":
            return NotImplemented

        ipts = [x.onefun if isinstance(x, Fun) else x for x in inputs]
        new_fun = numpy_ufunc(*ipts, **kwargs)
        return Fun(domain=self.domain, mapping=self.mapping, onefun=new_fun)

    def extract_columns(self, idx):
        return Fun(domain=self.domain, mapping=self.mapping, onefun=self.onefun.extract_columns(idx))

    def simplify(self, *args, **kwargs):
        return Fun(domain=self.domain, mapping=self.mapping, onefun=self.onefun.simplify(*args, **kwargs))

    def prolong(self, Nout):
        return Fun(domain=self.domain, mapping=self.mapping, onefun=self.onefun.prolong(Nout))

    def restrict(self, s):
        return restrict(self, s)

    def roots(self, *args, **kwargs):
        return roots(self, *args, **kwargs)

    def minandmax(self, *args, **kwargs):
        return minandmax(self, *args, **kwargs)


def implements(np_function):
    """ Register an __array_function__ implementation """
    def decorator(func):
        HANDLED_FUNCTIONS[np_function] = func
        return func
    return decorator


@implements(np.real)
def real(f):
    return Fun(domain=f.domain, mapping=f.mapping, onefun=np.real(f.onefun))


@implements(np.imag)
def imag(f):
    return Fun(domain=f.domain, mapping=f.mapping, onefun=np.imag(f.onefun))


def get_composer(f, op, g=None):
    """ Returns a lambda generating the composition of the two functions """
    if g is None:
        return lambda x: op(f(x))
    else:
        return lambda x: op(f(x), g(x))


def compose(f, op, g=None, ftype=None):
    """ Constructs op(f) or op(f, g) on the domain of f """
    cop = get_composer(f, op, g)
    # if target type is the same as before we just move on
    if ftype is None:
        ftype = f.type

    pref = f.pref.replace(tech=ftype)
    return Fun(domain=f.domain, mapping=f.mapping, op=cop, pref=pref,
               hscale=f.onefun.hscale)


@implements(np.diff)
def diff(f, n=1, axis=0, *args, **kwargs):
    if axis != 0:
        return NotImplemented

    rescaleFactor = (0.5 * np.diff(f.domain).item())**n
    df = np.diff(f.onefun, n=n, axis=axis) / rescaleFactor
    return Fun(domain=f.domain, mapping=f.mapping, onefun=df)


@implements(np.sum)
def sum(f, axis=0, *args, **kwargs):
    """ Definite integral of a Fun on its interval [a, b] """
    rescaleFactor = 0.5 * np.diff(f.domain).item()
    return np.sum(f.onefun, axis=axis, *args, **kwargs) * rescaleFactor


@implements(np.cumsum)
def cumsum(f, *args, **kwargs):
    """ Indefinite integral of a Fun on its interval [a, b], zero at a """
    rescaleFactor = 0.5 * np.diff(f.domain).item()
    nf = np.cumsum(f.onefun, *args, **kwargs) * rescaleFactor
    return Fun(domain=f.domain, mapping=f.mapping, onefun=nf)


@implements(np.inner)
def inner(f, g):
    if not np.all(f.domain == g.domain):
        raise ValueError("Domain mismatch %s != %s!" % (f.domain, g.domain))

    rescaleFactor = 0.5 * np.diff(f.domain).item()
    return np.inner(f.onefun, g.onefun) * rescaleFactor


@implements(np.hstack)
def hstack(funs):
    nf = np.hstack([f.onefun for f in funs])
    return Fun(domain=funs[0].domain, mapping=funs[0].mapping, onefun=nf)


@implements(np.copy)
def copy(fun):
    nf = np.copy(fun.onefun)
    return Fun(domain=fun.domain, mapping=fun.mapping, onefun=nf)


def restrict(f, s):
    """ Restrict the Fun f to a subinterval s of its domain """
    s = check_domain(s, npts=2)
    if np.all(s == f.domain):
        return f

    z = np.clip(f.mapping.bwd(s), -1.0, 1.0)
    return Fun(domain=s, onefun=f.onefun.restrict(z))


def roots(f, *args, **kwargs):
    r = f.onefun.roots(*args, **kwargs)
    if isinstance(r, list):
        return [f.mapping(rr) for rr in r]
    return f.mapping(r)


def minandmax(f, *args, **kwargs):
    vals, pos = f.onefun.minandmax(*args, **kwargs)
    return vals, f.mapping(pos)
