#!/usr/bin/python
# -*- coding: utf-8 -*-
# Author: Andreas Buttenschoen
import numpy as np
import pytest
from numpy.testing import assert_, assert_raises, assert_almost_equal, assert_allclose

from adaptfun.cheb import chebtech
from adaptfun.cheb.refine import Refine
from adaptfun.exceptions import ConfigurationError, ResolutionWarning
from adaptfun.pref import TechPref


class TestChebtechConstruct:
    def test_cos(self):
        pref = TechPref(minSamples=9)
        refine = Refine(op=np.cos, pref=pref)
        f = chebtech(op=refine, pref=pref)

        assert_(f.ishappy)
        assert_(abs(f(0.5) - np.cos(0.5)) < 1e-10)

        # at most two refinements of the initial grid
        assert_(refine.history[0] == 9)
        assert_(len(refine.history) <= 3)
        assert_(np.all(np.diff(refine.history) > 0))

    def test_resample(self):
        pref = TechPref(refinementFunction='resample')
        refine = Refine(op=lambda x: np.exp(np.sin(3 * x)), pref=pref)
        f = chebtech(op=refine, pref=pref)

        xs = np.linspace(-1, 1, 100)
        assert_(f.ishappy)
        assert_almost_equal(f(xs), np.exp(np.sin(3 * xs)))
        assert_(np.all(np.diff(refine.history) > 0))

    def test_kwargs(self):
        f = chebtech(op=np.exp, resample='resample', minSamples=9, type='cheb')
        assert_(f.pref.refinementFunction == 'resample')
        assert_(f.pref.minSamples == 9)
        assert_almost_equal(f(0.2), np.exp(0.2))

    def test_zero(self):
        f = chebtech(op=lambda x: np.zeros_like(x))
        assert_(f.ishappy)
        assert_(len(f) == 1)
        assert_(np.all(f.coeffs == 0))

    def test_constant_scalar(self):
        # scalar output is broadcast to all points
        f = chebtech(op=lambda x: 3.)
        assert_(f.ishappy)
        assert_(len(f) == 1)
        assert_almost_equal(f(0.1), 3.)

    def test_scale_invariance(self):
        f = chebtech(op=np.exp)
        g = chebtech(op=lambda x: 8 * np.exp(x))

        assert_(len(f) == len(g))
        assert_allclose(g.coeffs, 8 * f.coeffs, rtol=1e-14, atol=0)

    def test_pole_outside(self):
        f = chebtech(op=lambda x: 1. / (x - 2.))
        xs = np.linspace(-1, 1, 100)

        assert_(f.ishappy)
        assert_(len(f) < 64)
        assert_almost_equal(f(xs), 1. / (xs - 2.))

    def test_unresolved(self):
        with pytest.warns(ResolutionWarning):
            f = chebtech(op=np.abs, maxLength=257)

        assert_(not f.ishappy)
        assert_(len(f) == 257)

    def test_singular(self):
        # every odd sized grid contains x = 0
        with pytest.warns(ResolutionWarning):
            f = chebtech(op=lambda x: 1. / x, maxLength=65)

        assert_(not f.ishappy)
        assert_(np.all(np.isfinite(f.coeffs)))

    def test_removable_singularity(self):
        # x = 0 is on every grid; sin(x) / x is nan there
        with pytest.warns(ResolutionWarning):
            f = chebtech(op=lambda x: np.sin(x) / x, maxLength=257)
        assert_(not f.ishappy)

        g = chebtech(op=lambda x: np.sin(x) / x, extrapolate=True)
        xs = np.linspace(-1, 1, 101)

        assert_(g.ishappy)
        assert_(g.pref.extrapolate)
        assert_(len(g) < 33)
        assert_almost_equal(g(0.), 1.)
        assert_almost_equal(g(xs[xs != 0]), np.sin(xs[xs != 0]) / xs[xs != 0])

    def test_extrapolate_values(self):
        f = chebtech(op=np.exp)
        x = chebtech.points(17)
        values = np.exp(x)[:, np.newaxis]
        bad = np.copy(values)
        bad[[0, 8], 0] = [np.nan, np.inf]

        out = f._extrapolate(bad)
        assert_allclose(out, values, rtol=0, atol=1e-12)
        # the input is left alone
        assert_(np.isnan(bad[0, 0]))
        assert_(f._extrapolate(values) is values)

    def test_array_valued(self):
        f = chebtech(op=[np.sin, np.cos, lambda x: x**2])
        xs = np.linspace(-1, 1, 20)

        assert_(f.m == 3)
        assert_(f(xs).shape == (20, 3))
        assert_almost_equal(f(0.3), [np.sin(0.3), np.cos(0.3), 0.09])

    def test_values(self):
        x = chebtech.points(9)
        f = chebtech(values=x**2)
        assert_(f.ishappy)
        assert_(len(f) < 9)
        assert_almost_equal(f(0.5), 0.25)

    def test_grid_not_shared(self):
        h = chebtech(values=np.arange(17.), simplify=False)
        x = h.x
        x *= 0.5

        assert_almost_equal(h.x[-1], 1.)
        assert_almost_equal(chebtech.points(17)[-1], 1.)

        refine = Refine(op=np.exp, pref=TechPref())
        points = refine.points(17)
        points *= 0.5

        g = chebtech(op=np.exp)
        assert_(g.ishappy)
        assert_(len(g) < 20)
        assert_almost_equal(g(0.5), np.exp(0.5))

    def test_unknown_check(self):
        assert_raises(ConfigurationError, chebtech, op=np.sin, happinessCheck='bogus')

    def test_empty(self):
        assert_raises(ValueError, chebtech, coeffs=np.zeros((0, 1)))
