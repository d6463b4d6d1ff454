#!/usr/bin/python
# -*- coding: utf-8 -*-
# Author: Andreas Buttenschoen
import dataclasses
from dataclasses import dataclass
from numbers import Number

import numpy as np

from .exceptions import ConfigurationError

EPS = np.finfo(float).eps

REFINEMENT_FUNCTIONS = ('nested', 'resample')
TECH_TYPES = ('cheb', 'trig')

# constructor keyword -> preference field
KWARG_ALIASES = {
    'eps': 'eps',
    'minSamples': 'minSamples',
    'maxLength': 'maxLength',
    'happinessCheck': 'happinessCheck',
    'sampleTest': 'sampleTest',
    'extrapolate': 'extrapolate',
    'resample': 'refinementFunction',
    'refinementFunction': 'refinementFunction',
    'type': 'tech',
    'tech': 'tech',
}


@dataclass(frozen=True)
class TechPref:
    """ Preferences of the adaptive constructor.

    An instance is passed by value into every construction and every
    happiness check; nothing reads global state in the middle of a call.
    Use replace() to derive modified preferences.

    eps:                target relative accuracy.
    minSamples:         grid size requested in the first sampling step.
    maxLength:          the constructor gives up beyond this grid size.
    happinessCheck:     'standard', 'classic', 'strict', 'loose', 'plateau',
                        the name of a registered checker, or a callable
                        checker(f, op, values, vscl, pref) -> HappinessVerdict.
    sampleTest:         cross-check a happy result at random points.
    samplePoints:       number of points used by the cross-check.
    extrapolate:        replace non-finite samples of a chebtech by the
                        interpolant of the finite ones. Otherwise such
                        samples keep the representation unresolved.
    sampleSeed:         seed of the cross-check random number generator.
    refinementFunction: 'nested' or 'resample'.
    tech:               'cheb' (non-periodic) or 'trig' (periodic).
    domain:             default domain of a Chebfun.
    """
    eps: float = EPS
    minSamples: int = 17
    maxLength: int = 2**16 + 1
    happinessCheck: object = 'standard'
    sampleTest: bool = True
    samplePoints: int = 3
    extrapolate: bool = False
    sampleSeed: int = 1729
    refinementFunction: str = 'nested'
    tech: str = 'cheb'
    domain: tuple = (-1.0, 1.0)

    def __post_init__(self):
        if not isinstance(self.eps, Number) or not 0 < self.eps < 1:
            raise ConfigurationError("eps must be a number in (0, 1) not {0!r}!".format(self.eps))

        if int(self.minSamples) < 1:
            raise ConfigurationError("minSamples must be positive not {0!r}!".format(self.minSamples))

        if int(self.maxLength) < 1:
            raise ConfigurationError("maxLength must be positive not {0!r}!".format(self.maxLength))

        if int(self.samplePoints) < 1:
            raise ConfigurationError("samplePoints must be positive not {0!r}!".format(self.samplePoints))

        if not (isinstance(self.happinessCheck, str) or callable(self.happinessCheck)):
            raise ConfigurationError("happinessCheck must be a name or a callable not {0!r}!".format(self.happinessCheck))

        if self.refinementFunction not in REFINEMENT_FUNCTIONS:
            raise ConfigurationError("Unknown refinement function '{0}'! Use one of {1}.".format(
                self.refinementFunction, REFINEMENT_FUNCTIONS))

        if self.tech not in TECH_TYPES:
            raise ConfigurationError("Unknown tech type '{0}'! Use one of {1}.".format(self.tech, TECH_TYPES))

        # frozen -> go through object.__setattr__
        object.__setattr__(self, 'minSamples', int(self.minSamples))
        object.__setattr__(self, 'maxLength', int(self.maxLength))
        object.__setattr__(self, 'samplePoints', int(self.samplePoints))
        object.__setattr__(self, 'domain', tuple(float(d) for d in np.ravel(self.domain)))

    def replace(self, **changes):
        return dataclasses.replace(self, **changes)

    @classmethod
    def from_kwargs(cls, pref, kwargs):
        """ Fold constructor keyword overrides (eps=, maxLength=, ...) into a
            preference. The consumed keys are removed from kwargs.
        """
        pref = cls() if pref is None else pref
        changes = {}
        for key, field in KWARG_ALIASES.items():
            if key in kwargs:
                changes[field] = kwargs.pop(key)

        return pref.replace(**changes) if changes else pref
