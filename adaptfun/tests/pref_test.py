#!/usr/bin/python
# -*- coding: utf-8 -*-
# Author: Andreas Buttenschoen
import numpy as np
from numpy.testing import assert_, assert_raises, assert_almost_equal

from adaptfun.domain import check_domain
from adaptfun.exceptions import BoundedDomainError, ConfigurationError, DomainError, DomainShapeError
from adaptfun.mapping import Mapping
from adaptfun.pref import EPS, TechPref


class TestTechPref:
    def test_defaults(self):
        pref = TechPref()
        assert_(pref.eps == EPS)
        assert_(pref.minSamples == 17)
        assert_(pref.maxLength == 2**16 + 1)
        assert_(pref.happinessCheck == 'standard')
        assert_(pref.refinementFunction == 'nested')
        assert_(pref.tech == 'cheb')
        assert_(pref.domain == (-1.0, 1.0))
        assert_(not pref.extrapolate)

    def test_invalid(self):
        assert_raises(ConfigurationError, TechPref, eps=2.)
        assert_raises(ConfigurationError, TechPref, maxLength=0)
        assert_raises(ConfigurationError, TechPref, refinementFunction='bogus')
        assert_raises(ConfigurationError, TechPref, tech='ultra')
        assert_raises(ConfigurationError, TechPref, happinessCheck=3)

    def test_replace(self):
        pref = TechPref()
        other = pref.replace(eps=1e-10, tech='trig')

        assert_(other.eps == 1e-10)
        assert_(other.tech == 'trig')
        # the original is unchanged
        assert_(pref.eps == EPS)

    def test_from_kwargs(self):
        kwargs = {'type': 'trig', 'resample': 'resample', 'maxLength': 129, 'hscale': 2.}
        pref = TechPref.from_kwargs(None, kwargs)

        assert_(pref.tech == 'trig')
        assert_(pref.refinementFunction == 'resample')
        assert_(pref.maxLength == 129)
        # unrelated keys are left alone
        assert_(kwargs == {'hscale': 2.})

        base = TechPref(eps=1e-8)
        assert_(TechPref.from_kwargs(base, {}) is base)


class TestDomain:
    def test_valid(self):
        d = check_domain([0, 1, 3])
        assert_(d.dtype == np.float64)
        assert_almost_equal(d, [0., 1., 3.])
        assert_almost_equal(check_domain((-1, 1), npts=2), [-1., 1.])

    def test_shape(self):
        assert_raises(DomainShapeError, check_domain, [0])
        assert_raises(DomainShapeError, check_domain, [[0, 1]])
        assert_raises(DomainShapeError, check_domain, [0, 1, 2], npts=2)
        assert_raises(DomainShapeError, check_domain, ['a', 'b'])

    def test_order(self):
        assert_raises(DomainShapeError, check_domain, [1, 0])
        assert_raises(DomainShapeError, check_domain, [0, 0, 1])

    def test_bounded(self):
        assert_raises(BoundedDomainError, check_domain, [0, np.inf])
        assert_raises(BoundedDomainError, check_domain, [-np.inf, 0])
        assert_raises(DomainError, check_domain, [0, np.nan])


class TestMapping:
    def test_linear(self):
        m = Mapping(ends=[0, 2])
        assert_almost_equal(m.fwd(np.array([-1., 0., 1.])), [0., 1., 2.])
        assert_almost_equal(m.bwd(np.array([0., 1., 2.])), [-1., 0., 1.])
        assert_(m == Mapping(ends=[0, 2]))
        assert_(not (m == Mapping(ends=[0, 1])))
