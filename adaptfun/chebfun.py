#!/usr/bin/python
# -*- coding: utf-8 -*-
# Author: Andreas Buttenschoen
import logging
import numpy as np

from .cheb import chebtech
from .domain import check_domain
from .exceptions import DomainError
from .fun import Fun, compose as fun_compose
from .pref import EPS, TechPref
from .refine import FunctionContainer, expand, sample
from .tech import Tech, column_index
from .trig import trigtech

logger = logging.getLogger(__name__)

HANDLED_FUNCTIONS = {}
SMALL_EPS = 1e-8


def build(op, domain=None, vscale=0.0, hscale=None, pref=None):
    """ Adaptive construction of op.

        Without a domain the result is a single chebtech or trigtech on
        [-1, 1]. With a vector of breakpoints the result is a Chebfun with
        one piece per subinterval.
    """
    pref = TechPref() if pref is None else pref
    if domain is None:
        ftype = trigtech if pref.tech == 'trig' else chebtech
        return ftype(op=op, pref=pref, vscale=vscale, hscale=1.0 if hscale is None else hscale)

    return Chebfun(op=op, domain=domain, vscale=vscale, hscale=hscale, pref=pref)


def _limits(funs):
    """ One-sided limits at the breakpoints as (left, right) arrays of shape (npts, m) """
    m = funs[0].m
    lvals = [np.reshape(f.lval(), (1, m)) for f in funs]
    rvals = [np.reshape(f.rval(), (1, m)) for f in funs]
    lefts = np.vstack([lvals[0]] + rvals)
    rights = np.vstack(lvals + [rvals[-1]])
    return lefts, rights


class Chebfun(np.lib.mixins.NDArrayOperatorsMixin):
    r"""
        Piecewise smooth functions on [a, b]

        funs[k] represents the function on [domain[k], domain[k+1]]. The
        values at the breakpoints are kept separately in pointValues, one
        row per breakpoint, which allows for jumps.

        Keyword arguments:
            domain:         breakpoints, defaults to pref.domain.
            funs:           the pieces; skips the construction.
            pointValues:    values at the breakpoints.
            vscale:         initial vertical scale of the construction.
            hscale:         horizontal scale; scaled by the relative width of each piece.
            pref:           a TechPref; eps=, type=, ... override its fields.
    """
    def __init__(self, op=None, *args, **kwargs):
        funs = kwargs.pop('funs', None)
        pref = kwargs.pop('pref', None)
        if pref is None and funs is not None:
            pref = funs[0].pref

        self.pref = TechPref.from_kwargs(pref, kwargs)
        domain = kwargs.pop('domain', None)
        self.domain = check_domain(self.pref.domain if domain is None else domain)

        pointValues = kwargs.pop('pointValues', None)
        vscale = kwargs.pop('vscale', 0.0)
        hscale = kwargs.pop('hscale', None)

        if funs is None:
            if op is None:
                raise ValueError("Chebfun requires an operator or a list of funs!")
            funs = self.__construct(op, vscale, hscale, *args, **kwargs)

        elif len(funs) != self.domain.size - 1:
            raise DomainError("{0:d} funs do not fit the {1:d} breakpoints {2}!".format(
                len(funs), self.domain.size, self.domain))

        self.funs = list(funs)

        if pointValues is None and op is not None:
            pointValues = sample(FunctionContainer(list(op)) if isinstance(op, (list, tuple)) else op,
                                 self.domain)

        self.pointValues = self.__point_values(pointValues)

    def __construct(self, op, vscale, hscale, *args, **kwargs):
        hscale = 1.0 if hscale is None else hscale
        width = self.domain[-1] - self.domain[0]

        funs = []
        for a, b in zip(self.domain[:-1], self.domain[1:]):
            logger.debug("Constructing the piece on [%g, %g].", a, b)
            fun = Fun(op=op, domain=[a, b], pref=self.pref, vscale=vscale,
                      hscale=hscale * width / (b - a), *args, **kwargs)

            # the pieces share one vertical scale
            vscale = max(vscale, fun.vscale)
            funs.append(fun)

        return funs

    def __point_values(self, pointValues):
        """ Replaces missing or non-finite values by the average of the one-sided limits """
        lefts, rights = _limits(self.funs)
        average = 0.5 * (lefts + rights)
        if pointValues is None:
            return average

        pointValues = np.reshape(expand(pointValues), average.shape)
        return np.where(np.isfinite(pointValues), pointValues, average)

    @property
    def m(self):
        return self.funs[0].m

    @property
    def nfuns(self):
        return len(self.funs)

    @property
    def vscale(self):
        return max([f.vscale for f in self.funs])

    @property
    def hscale(self):
        return np.linalg.norm(self.domain, np.inf)

    @property
    def ishappy(self):
        return all([f.ishappy for f in self.funs])

    @property
    def epslevel(self):
        return max([f.epslevel for f in self.funs])

    @property
    def type(self):
        return self.funs[0].type

    def __len__(self):
        return np.sum([len(f) for f in self.funs])

    def __str__(self):
        return 'Chebfun with %d column(s) and %d piece(s) on %s.' % (self.m, self.nfuns, self.domain)

    def __repr__(self):
        return f"{self.__class__.__name__}(domain={repr(self.domain)}, funs={repr(self.funs)})"

    def __eq__(self, other):
        return isinstance(other, Chebfun) and np.array_equal(self.domain, other.domain) and \
                all([f == g for f, g in zip(self.funs, other.funs)]) and \
                np.array_equal(self.pointValues, other.pointValues)

    def __call__(self, x):
        x = np.asarray(x, dtype=float)
        xs = np.ravel(x)
        out = np.full((xs.size, self.m), np.nan, dtype=self.pointValues.dtype)

        a, b = self.domain[0], self.domain[-1]
        inside = (xs >= a) & (xs <= b)
        idx = np.minimum(np.searchsorted(self.domain, xs, side='right') - 1, self.nfuns - 1)

        for k, fun in enumerate(self.funs):
            mask = inside & (idx == k)
            if not np.any(mask):
                continue

            vals = np.reshape(fun(xs[mask]), (-1, self.m))
            if np.iscomplexobj(vals) and not np.iscomplexobj(out):
                out = out.astype(complex)
            out[mask, :] = vals

        # values at the breakpoints
        for j, d in enumerate(self.domain):
            out[xs == d, :] = self.pointValues[j, :]

        return np.reshape(out, np.shape(x) if self.m == 1 else np.shape(x) + (self.m, ))

    def __getitem__(self, idx):
        return self.extract_columns(idx)

    """ Implement array function support """
    def __array_function__(self, func, types, args, kwargs):
        if func not in HANDLED_FUNCTIONS:
            return NotImplemented
        if not all(issubclass(t, self.__class__) for t in types):
            return NotImplemented
        return HANDLED_FUNCTIONS[func](*args, **kwargs)

    def __array_ufunc__(self, numpy_ufunc, method, *inputs, **kwargs):
        kwargs.pop('out', None)

        if method != "__call__":
            return NotImplemented

        if any([isinstance(x, (Fun, Tech)) for x in inputs]):
            return NotImplemented

        # operate on the union of the breakpoints
        domain = common_domain(*[x for x in inputs if isinstance(x, Chebfun)])
        ipts = [x.restrict(domain) if isinstance(x, Chebfun) else x for x in inputs]

        funs = [numpy_ufunc(*[x.funs[k] if isinstance(x, Chebfun) else x for x in ipts], **kwargs)
                for k in range(domain.size - 1)]

        with np.errstate(all='ignore'):
            pointValues = numpy_ufunc(*[x.pointValues if isinstance(x, Chebfun) else x for x in ipts],
                                      **kwargs)

        return Chebfun(funs=funs, domain=domain, pointValues=pointValues, pref=self.pref)

    def extract_columns(self, idx):
        """ Select columns; indices keep their order and may repeat """
        cols = column_index(idx, self.m)
        funs = [f.extract_columns(cols) for f in self.funs]
        return Chebfun(funs=funs, domain=self.domain, pointValues=self.pointValues[:, cols],
                       pref=self.pref)

    def restrict(self, s):
        """ Restrict to [s[0], s[-1]] with additional breakpoints s """
        s = check_domain(s)
        a, b = self.domain[0], self.domain[-1]
        tol = SMALL_EPS * self.hscale
        if s[0] < a - tol or s[-1] > b + tol:
            raise DomainError("{0} is not a subinterval of {1}!".format(s, self.domain))

        s = np.clip(s, a, b)
        interior = self.domain[(self.domain > s[0]) & (self.domain < s[-1])]
        breaks = np.union1d(s, interior)
        if np.array_equal(breaks, self.domain):
            return self

        funs = []
        for lo, hi in zip(breaks[:-1], breaks[1:]):
            k = min(np.searchsorted(self.domain, 0.5 * (lo + hi), side='right') - 1, self.nfuns - 1)
            funs.append(self.funs[k].restrict([lo, hi]))

        pointValues = np.reshape(self(breaks), (breaks.size, self.m))
        return Chebfun(funs=funs, domain=breaks, pointValues=pointValues, pref=self.pref)

    def roots(self):
        return roots(self)

    def minandmax(self):
        return minandmax(self)


def implements(np_function):
    """ Register an __array_function__ implementation """
    def decorator(func):
        HANDLED_FUNCTIONS[np_function] = func
        return func
    return decorator


def common_domain(*fs):
    """ Union of the breakpoints of Chebfuns on the same interval """
    f = fs[0]
    tol = SMALL_EPS * f.hscale
    for g in fs[1:]:
        if abs(g.domain[0] - f.domain[0]) > tol or abs(g.domain[-1] - f.domain[-1]) > tol:
            raise ValueError("Domain mismatch %s != %s!" % (g.domain, f.domain))

    domain = f.domain
    for g in fs[1:]:
        domain = np.union1d(domain, g.domain[1:-1])

    # merge breakpoints that only differ by rounding
    keep = np.hstack(([True], np.diff(domain) > tol))
    return domain[keep]


@implements(np.real)
def real(f):
    return Chebfun(funs=[np.real(fun) for fun in f.funs], domain=f.domain,
                   pointValues=np.real(f.pointValues), pref=f.pref)


@implements(np.imag)
def imag(f):
    return Chebfun(funs=[np.imag(fun) for fun in f.funs], domain=f.domain,
                   pointValues=np.imag(f.pointValues), pref=f.pref)


@implements(np.copy)
def copy(f):
    return Chebfun(funs=[np.copy(fun) for fun in f.funs], domain=np.copy(f.domain),
                   pointValues=np.copy(f.pointValues), pref=f.pref)


@implements(np.sum)
def sum(f, axis=0, **kwargs):
    """ Definite integral of f over its domain """
    out = np.sum([np.sum(fun) for fun in f.funs], axis=0)
    return out


@implements(np.cumsum)
def cumsum(f, **kwargs):
    """ Indefinite integral of f vanishing at the left end of the domain.

        The constant of each piece is chosen such that the result is
        continuous at the breakpoints.
    """
    funs = []
    for k, fun in enumerate(f.funs):
        F = np.cumsum(fun)
        if k > 0:
            F = F + np.reshape(funs[-1].rval(), (f.m, ))
        funs.append(F)

    return Chebfun(funs=funs, domain=f.domain, pref=f.pref)


@implements(np.diff)
def diff(f, n=1, axis=0, **kwargs):
    """ n-th derivative of each piece; jumps at breakpoints are ignored """
    funs = [np.diff(fun, n=n, axis=axis) for fun in f.funs]
    return Chebfun(funs=funs, domain=f.domain, pref=f.pref)


@implements(np.inner)
def inner(f, g):
    domain = common_domain(f, g)
    f = f.restrict(domain)
    g = g.restrict(domain)
    return np.sum([np.inner(ff, gg) for ff, gg in zip(f.funs, g.funs)], axis=0)


def compose(f, op, g=None):
    """ Constructs op(f) or op(f, g) piece by piece """
    if g is None:
        funs = [fun_compose(fun, op) for fun in f.funs]
        with np.errstate(all='ignore'):
            pointValues = op(f.pointValues)
        return Chebfun(funs=funs, domain=f.domain, pointValues=pointValues, pref=f.pref)

    domain = common_domain(f, g)
    f = f.restrict(domain)
    g = g.restrict(domain)
    funs = [fun_compose(ff, op, gg) for ff, gg in zip(f.funs, g.funs)]
    with np.errstate(all='ignore'):
        pointValues = op(f.pointValues, g.pointValues)
    return Chebfun(funs=funs, domain=domain, pointValues=pointValues, pref=f.pref)


def coefficients(obj):
    """ The coefficients of a representation, one array per piece of a Chebfun """
    if isinstance(obj, Chebfun):
        return [fun.onefun.coeffs for fun in obj.funs]
    elif isinstance(obj, Fun):
        return obj.onefun.coeffs
    return obj.coeffs


def roots(f):
    """ Roots of f, including breakpoints at which a jump crosses zero """
    if f.m > 1:
        return [roots(f.extract_columns(j)) for j in range(f.m)]

    rts = [np.atleast_1d(fun.roots()) for fun in f.funs]

    lefts, rights = _limits(f.funs)
    for k in range(1, f.domain.size - 1):
        if np.real(lefts[k, 0]) * np.real(rights[k, 0]) < 0 or f.pointValues[k, 0] == 0:
            rts.append(f.domain[k:k+1])

    r = np.sort(np.real(np.hstack(rts)))
    if r.size == 0:
        return r

    # roots at breakpoints are found by both pieces
    keep = np.hstack(([True], np.diff(r) > SMALL_EPS * f.hscale))
    return r[keep]


def minandmax(f):
    """ Global minimum and maximum of f with their positions """
    if f.m > 1:
        res = [minandmax(f.extract_columns(j)) for j in range(f.m)]
        return np.stack([v for v, _ in res], axis=1), np.stack([p for _, p in res], axis=1)

    vals, pos = [], []
    for fun in f.funs:
        v, p = fun.minandmax()
        vals.extend(np.ravel(v))
        pos.extend(np.ravel(p))

    vals.extend(f.pointValues[:, 0])
    pos.extend(f.domain)

    vals = np.real(np.asarray(vals))
    pos = np.asarray(pos)
    imin, imax = np.argmin(vals), np.argmax(vals)
    return np.array([vals[imin], vals[imax]]), np.array([pos[imin], pos[imax]])


def global_min(f):
    vals, pos = minandmax(f)
    return vals[0], pos[0]


def global_max(f):
    vals, pos = minandmax(f)
    return vals[1], pos[1]


def _slope_sign(df, ddf, x, side):
    """ The sign of f' just right (side = 1) or just left (side = -1) of x """
    slope = np.real(df(x)).item()
    if abs(slope) > np.sqrt(EPS) * df.vscale:
        return np.sign(slope)

    # f' vanishes at x so the curvature decides
    return side * np.sign(np.real(ddf(x)).item())


def _local_extrema(f, kind):
    """ Local maxima (kind = 1) or minima (kind = -1) of f """
    if f.m > 1:
        cols = [_local_extrema(f.extract_columns(j), kind) for j in range(f.m)]
        k = max([v.size for v, _ in cols])
        vals = np.full((k, f.m), np.nan)
        pos = np.full((k, f.m), np.nan)
        for j, (v, p) in enumerate(cols):
            vals[:v.size, j] = v
            pos[:p.size, j] = p
        return vals, pos

    dfs = [np.diff(fun) for fun in f.funs]
    ddfs = [np.diff(df) for df in dfs]

    positions = []

    # critical points inside the pieces
    for fun, df, ddf in zip(f.funs, dfs, ddfs):
        a, b = fun.domain
        htol = SMALL_EPS * (b - a)
        for r in np.atleast_1d(df.roots()):
            if r - a <= htol or b - r <= htol:
                continue
            if kind * np.real(ddf(r)).item() < 0:
                positions.append(r)

    # breakpoints and the ends of the domain
    for j, x in enumerate(f.domain):
        left = None if j == 0 else _slope_sign(dfs[j-1], ddfs[j-1], x, -1)
        right = None if j == f.nfuns else _slope_sign(dfs[j], ddfs[j], x, 1)
        if (left is None or kind * left > 0) and (right is None or kind * right < 0):
            positions.append(x)

    positions = np.sort(np.asarray(positions, dtype=float))
    values = np.real(np.reshape(f(positions), (-1, )))
    return values, positions


def local_maxima(f):
    """ Values and positions of the local maxima of f, sorted by position """
    return _local_extrema(f, 1)


def local_minima(f):
    """ Values and positions of the local minima of f, sorted by position """
    return _local_extrema(f, -1)
