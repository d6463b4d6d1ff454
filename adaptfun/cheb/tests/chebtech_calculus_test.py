#!/usr/bin/python
# -*- coding: utf-8 -*-
# Author: Andreas Buttenschoen
import numpy as np
import pytest
from numpy.testing import assert_, assert_raises, assert_almost_equal, assert_allclose

from adaptfun.cheb import chebtech
from adaptfun.exceptions import DimensionError, DomainError, ResolutionWarning


class TestChebtechCalculus:
    def test_diff(self):
        f = chebtech(op=lambda x: np.sin(2 * np.pi * x))
        co = np.copy(f.coeffs)
        xs = np.linspace(-1, 1, 100)

        df = np.diff(f)

        # Make sure f is unchanged
        assert_almost_equal(co, f.coeffs)
        assert_almost_equal(df(xs) / (2 * np.pi), np.cos(2 * np.pi * xs))

    def test_diff_high_order(self):
        f = chebtech(op=lambda x: x**2)
        assert_almost_equal(np.diff(f, n=2)(0.3), 2.)

        # differentiating too often gives zero
        g = np.diff(f, n=5)
        assert_(len(g) == 1)
        assert_(np.all(g.coeffs == 0))

    def test_cumsum(self):
        f = chebtech(op=lambda x: np.sin(2 * np.pi * x))
        xs = np.linspace(-1, 1, 100)

        cf = np.cumsum(f)
        assert_almost_equal(cf(xs), (1 - np.cos(2 * np.pi * xs)) / (2 * np.pi))
        assert_almost_equal(cf.lval(), 0.)

    def test_sum(self):
        f = chebtech(op=lambda x: np.sin(2 * np.pi * x))
        g = chebtech(op=lambda x: x**2)
        h = chebtech(op=np.exp)

        assert_almost_equal(np.sum(f), 0)
        assert_almost_equal(np.sum(g), 2. / 3)
        assert_almost_equal(np.sum(h), np.exp(1) - np.exp(-1))

    def test_sum_array_valued(self):
        f = chebtech(op=[lambda x: x**2, lambda x: np.ones_like(x)])
        assert_almost_equal(np.sum(f), [2. / 3, 2.])

    def test_inner(self):
        f = chebtech(op=lambda x: np.sin(np.pi * x))
        g = chebtech(op=lambda x: x)

        assert_almost_equal(np.inner(f, f), 1.)
        assert_almost_equal(np.inner(f, g), 2. / np.pi)
        assert_(np.inner(f, f) >= 0)

    def test_roots(self):
        f = chebtech(op=lambda x: np.sin(np.pi * x))
        r = f.roots()

        assert_(len(r) == 3)
        assert_almost_equal(r, [-1., 0., 1.])

    def test_roots_zero(self):
        f = chebtech(op=lambda x: np.zeros_like(x))
        r = f.roots()

        assert_(len(r) == 1)
        assert_(r[0] == 0)

    def test_roots_constant(self):
        f = chebtech(op=lambda x: np.ones_like(x))
        assert_(len(f.roots()) == 0)

    def test_roots_many(self):
        # long series are split and restricted through the fast evaluation
        f = chebtech(op=lambda x: np.sin(1000 * np.pi * x))
        r = f.roots()

        assert_(len(f) > 1025)
        assert_(len(r) == 2001)
        assert_allclose(r, np.linspace(-1, 1, 2001), rtol=0, atol=1e-8)

    def test_roots_unresolved(self):
        with pytest.warns(ResolutionWarning):
            f = chebtech(op=lambda x: np.sign(x - 0.3), maxLength=4097)

        r = f.roots()
        assert_(len(f) == 4097)
        assert_(np.min(np.abs(r - 0.3)) < 1e-2)

    def test_roots_array_valued(self):
        f = chebtech(op=[lambda x: x - 0.5, lambda x: x**2 - 0.25])
        r = f.roots()

        assert_(len(r) == 2)
        assert_almost_equal(r[0], [0.5])
        assert_almost_equal(r[1], [-0.5, 0.5])

    def test_minandmax(self):
        f = chebtech(op=lambda x: np.sin(np.pi * x))
        vals, pos = f.minandmax()

        assert_almost_equal(vals, [-1., 1.])
        assert_almost_equal(pos, [-0.5, 0.5])

    def test_minandmax_array_valued(self):
        f = chebtech(op=[lambda x: x, lambda x: (x - 0.25)**2])
        vals, pos = f.minandmax()

        assert_(vals.shape == (2, 2))
        assert_almost_equal(vals[:, 0], [-1., 1.])
        assert_almost_equal(pos[:, 0], [-1., 1.])
        assert_almost_equal(vals[:, 1], [0., 1.5625])
        assert_almost_equal(pos[:, 1], [0.25, -1.])

    def test_endpoint_values(self):
        f = chebtech(op=np.exp)
        assert_almost_equal(f.lval(), np.exp(-1))
        assert_almost_equal(f.rval(), np.exp(1))

    def test_flipud(self):
        f = chebtech(op=np.exp)
        g = f.flipud()
        xs = np.linspace(-1, 1, 50)
        assert_almost_equal(g(xs), np.exp(-xs))

    def test_restrict(self):
        f = chebtech(op=np.exp)
        g = f.restrict([0, 1])
        xs = np.linspace(-1, 1, 50)

        assert_almost_equal(g(xs), np.exp(0.5 * (xs + 1)))
        assert_(f.restrict([-1, 1]) is f)
        assert_raises(DomainError, f.restrict, [0, 2])

    def test_conj(self):
        f = chebtech(op=lambda x: np.exp(1j * np.pi * x))
        g = np.conj(f)
        xs = np.linspace(-1, 1, 50)

        assert_almost_equal(g(xs), np.exp(-1j * np.pi * xs))
        assert_almost_equal(np.real(f)(xs), np.cos(np.pi * xs))
        assert_almost_equal(np.imag(f)(xs), np.sin(np.pi * xs))

    def test_hstack(self):
        f = chebtech(op=np.sin)
        g = chebtech(op=np.exp)
        h = np.hstack([f, g])

        assert_(h.m == 2)
        assert_almost_equal(h(0.4), [np.sin(0.4), np.exp(0.4)])

    def test_extract_columns(self):
        f = chebtech(op=[lambda x: x, lambda x: x**2, lambda x: x**3])
        g = f.extract_columns([2, 0])

        assert_(g.m == 2)
        assert_almost_equal(g(0.5), [0.125, 0.5])
        assert_almost_equal(f[1](0.5), 0.25)
        assert_(f[':'].m == 3)
        assert_raises(DimensionError, f.extract_columns, [3])
