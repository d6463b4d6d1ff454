#!/usr/bin/python
# -*- coding: utf-8 -*-
# Author: Andreas Buttenschoen
"""
Resolution checks for spectral representations.

A checker decides whether the coefficients of a representation f have decayed
to the noise level. All checkers share the signature

    checker(f, op, values, vscl, pref) -> HappinessVerdict

f:      the representation (a chebtech or a trigtech)
op:     the operator that is being sampled, or None when an existing
        representation is checked.
values: the sampled values (f.values when None).
vscl:   the vertical scale of the construction so far.
pref:   a TechPref.

The verdict holds whether f is resolved, the estimated relative noise level
of its coefficients and the number of coefficients to keep. An unhappy
verdict carries the suggested length of the next attempt instead.

Checkers are looked up by name; new ones are added with register_checker.
"""
import logging
from collections import namedtuple

import numpy as np

from .cheb.detail import standardChop
from .exceptions import ConfigurationError
from .pref import EPS, TechPref
from .refine import expand, sample

logger = logging.getLogger(__name__)

HappinessVerdict = namedtuple('HappinessVerdict', 'ishappy epslevel cutoff')

# Registered checkers by lower case name
CHECKERS = {}


def register_checker(name):
    """ Register a happiness checker under a name """
    def decorator(func):
        CHECKERS[name.lower()] = func
        return func
    return decorator


def get_checker(name, tech=None):
    """ Returns the checker registered under name.

        Callables are returned as they are. Raises a ConfigurationError for
        unknown names, and for names that tech does not support.
    """
    if callable(name):
        return name

    if not isinstance(name, str):
        raise ConfigurationError("Happiness check must be a name or a callable not {0!r}!".format(name))

    key = name.lower()
    if tech is not None and key in getattr(tech, 'unsupportedChecks', ()):
        tname = tech.__name__ if isinstance(tech, type) else type(tech).__name__
        raise ConfigurationError("The {0} check is not implemented for {1}. Please use the classic check.".format(
            key, tname))

    try:
        return CHECKERS[key]
    except KeyError:
        raise ConfigurationError("Unknown happiness check '{0}'! Use one of {1}.".format(
            name, sorted(CHECKERS.keys()))) from None


def happiness_check(f, op=None, values=None, vscl=None, pref=None):
    """ Runs the configured checker and the sample test on f.

        The returned epslevel lies in [eps, 1].
    """
    pref = f.pref if pref is None else pref
    checker = get_checker(pref.happinessCheck, f)
    vscl = 0.0 if vscl is None else vscl

    ishappy, epslevel, cutoff = checker(f, op, values, vscl, pref)

    # Check also that the sample test is happy
    if ishappy and callable(op) and pref.sampleTest:
        if not sample_test(op, f, epslevel, vscl, pref):
            logger.debug("Sample test failed for n = %d.", f.n)
            ishappy = False
            cutoff = f.n

    epslevel = float(min(max(np.real(epslevel), EPS), 1.0))
    return HappinessVerdict(bool(ishappy), epslevel, int(cutoff))


def sample_test(op, f, epslevel, vscl=0.0, pref=None):
    """ Compare op and f at a few pseudo-random points.

        Detects representations that agree with op on the grid but not in
        between, e.g. aliased high frequencies.
    """
    pref = TechPref() if pref is None else pref
    rng = np.random.default_rng(pref.sampleSeed)
    x = rng.uniform(-1., 1., pref.samplePoints)

    vOp = sample(op, x)
    if not np.all(np.isfinite(vOp)):
        return False

    vFun = np.reshape(f.feval(x), (x.size, -1))
    vscale = max(vscl, f.vscale)
    tol = max(epslevel, 1e3 * EPS) * f.n * vscale
    return bool(np.all(np.abs(vOp - vFun) <= tol))


def _degenerate_verdict(f):
    """ Verdicts that do not depend on the checker """
    coeffs = f.coeffs
    n = coeffs.shape[0]

    if not np.all(np.isfinite(coeffs)):
        return HappinessVerdict(False, 1.0, f._refined_length(n))
    elif not np.any(coeffs):
        return HappinessVerdict(True, EPS, 1)
    elif n <= 2:
        return HappinessVerdict(True, EPS, n)

    return None


def _column_scales(f, values):
    """ Largest absolute value of each column, ones for zero columns """
    values = f.values if values is None else expand(values)
    vscaleF = np.max(np.abs(values), axis=0)
    return np.where(vscaleF > 0, vscaleF, 1.0), np.max(vscaleF)


def _discarded_level(seq, cutoff, scales):
    """ Largest discarded tail entry relative to the column scales """
    if cutoff >= seq.shape[0]:
        return EPS
    return np.max(seq[cutoff:, :] / scales)


@register_checker('standard')
def standard_check(f, op, values, vscl, pref):
    """ Aurentz & Trefethen's standardChop applied to each column.

        During construction (op given) sequences shorter than 17 are never
        resolved. An existing representation is padded with zeros instead, far
        enough that a truncated representation stays resolved.
    """
    verdict = _degenerate_verdict(f)
    if verdict is not None:
        return verdict

    n, m = f.coeffs.shape
    vscaleF, vmax = _column_scales(f, values)
    vscl = max(vscl, vmax)

    tol = pref.eps * np.maximum(f.hscale, vscl / vscaleF)

    seq = f._chop_sequence(f.coeffs)
    N = seq.shape[0]

    if op is not None and N < 17:
        return HappinessVerdict(False, 1.0, f._refined_length(n))
    elif op is None:
        Npad = max(17, int(np.floor(1.25 * (N + 1) + 5.5)))
        seq = np.vstack((seq, np.zeros((Npad - N, m))))

    cutoffs = np.array([standardChop(seq[:, k], tol[k]) for k in range(m)])
    ishappy = np.all(cutoffs < seq.shape[0])

    if not ishappy:
        testLength = min(N, max(5, int(np.round((N - 1) / 8))))
        epslevel = np.max(seq[N-testLength:N, :] / vscaleF)
        return HappinessVerdict(False, epslevel, f._refined_length(n))

    cutoff = min(int(np.max(cutoffs)), N)
    epslevel = _discarded_level(seq[:N, :], cutoff, vscaleF)
    return HappinessVerdict(True, epslevel, f._length_from_cutoff(cutoff))


def classic_tolerance(f, values, vscl, pref, factor):
    """ Chebfun v4 tolerance: eps * max(1, condition estimate, vscl / vscale) * factor """
    values = f.values if values is None else expand(values)
    vscaleF, vmax = _column_scales(f, values)
    vscl = max(vscl, vmax)

    # estimate of the condition number of evaluating f
    x = f.x
    if x.size > 1:
        dx = np.expand_dims(np.diff(x), axis=1)
        dy = np.abs(np.diff(values, axis=0))
        condEst = f.hscale / vscaleF * np.max(dy / dx, axis=0)
    else:
        condEst = np.zeros_like(vscaleF)

    return pref.eps * np.maximum(np.maximum(1.0, condEst), vscl / vscaleF) * factor, vscaleF


def _classic(f, op, values, vscl, pref, factor):
    verdict = _degenerate_verdict(f)
    if verdict is not None:
        return verdict

    n = f.coeffs.shape[0]
    tol, vscaleF = classic_tolerance(f, values, vscl, pref, factor(n))

    seq = f._chop_sequence(f.coeffs) / vscaleF
    N = seq.shape[0]
    testLength = min(N, max(5, int(np.round((N - 1) / 8))))
    tail = np.max(seq[N-testLength:, :], axis=0)

    if np.any(tail >= tol):
        return HappinessVerdict(False, np.max(tail), f._refined_length(n))

    # last coefficient above the tolerance
    above = np.nonzero(np.any(seq >= tol, axis=1))[0]
    cutoff = int(above[-1]) + 1 if above.size > 0 else 1
    epslevel = max(np.max(tail), _discarded_level(seq, cutoff, 1.0))
    return HappinessVerdict(True, epslevel, f._length_from_cutoff(cutoff))


@register_checker('classic')
def classic_check(f, op, values, vscl, pref):
    """ The happiness check of Chebfun v4 """
    return _classic(f, op, values, vscl, pref, lambda n: n**(2./3.))


@register_checker('strict')
def strict_check(f, op, values, vscl, pref):
    return _classic(f, op, values, vscl, pref, lambda n: 1.0)


@register_checker('loose')
def loose_check(f, op, values, vscl, pref):
    return _classic(f, op, values, vscl, pref, lambda n: float(n))


@register_checker('plateau')
def plateau_check(f, op, values, vscl, pref):
    """ Accepts coefficients that level out above machine precision.

        Useful for noisy functions: the classic check is tried first, then
        the coefficient envelope is tested for a plateau below sqrt(eps).
    """
    verdict = classic_check(f, op, values, vscl, pref)
    if verdict.ishappy:
        return verdict

    n, m = f.coeffs.shape
    seq = f._chop_sequence(f.coeffs)
    N = seq.shape[0]
    if N < 17:
        return verdict

    epslevel = 0.0
    cutoff = 1
    for k in range(m):
        envelope = np.maximum.accumulate(seq[::-1, k])[::-1]
        if envelope[0] == 0.0:
            continue

        envelope = envelope / envelope[0]
        plateau = envelope[N // 2]
        if envelope[(3 * N) // 4] < 0.1 * plateau or plateau > np.sqrt(pref.eps):
            return verdict

        epslevel = max(epslevel, plateau)
        cutoff = max(cutoff, int(np.argmax(envelope <= 10 * plateau)) + 1)

    logger.debug("Coefficients reached a plateau at %.4g.", epslevel)
    return HappinessVerdict(True, max(epslevel, EPS), f._length_from_cutoff(cutoff))
