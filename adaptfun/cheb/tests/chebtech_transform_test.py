#!/usr/bin/python
# -*- coding: utf-8 -*-
# Author: Andreas Buttenschoen
import numpy as np
from numpy.testing import assert_, assert_raises, assert_allclose, assert_almost_equal

from adaptfun.cheb import polyfit, polyval, clenshaw, standardChop, chebpts_type2_compute, quadwts, bary_weights
from adaptfun.cheb.detail import prolong, simplify_coeffs, evaluate, fast_clenshaw
from adaptfun.pref import EPS


class TestChebTransform:
    def test_roundtrip(self):
        rng = np.random.default_rng(42)
        values = rng.standard_normal((17, 3))
        assert_allclose(polyval(polyfit(values)), values, atol=1e-13)

    def test_cubic(self):
        x = chebpts_type2_compute(9)
        coeffs = polyfit(4 * x**3 - 3 * x)

        expected = np.zeros((9, 1))
        expected[3] = 1.
        assert_allclose(coeffs, expected, atol=1e-14)

    def test_symmetry(self):
        x = chebpts_type2_compute(17)
        even = polyfit(np.cos(x))
        odd = polyfit(np.sin(x))

        # exact zeros for symmetric data
        assert_(np.all(even[1::2] == 0))
        assert_(np.all(odd[0::2] == 0))

    def test_single_value(self):
        assert_(polyfit(np.array([[2.]])) == 2.)
        assert_(polyval(np.array([[2.]])) == 2.)

    def test_points(self):
        x = chebpts_type2_compute(5)
        w = quadwts(5)
        assert_almost_equal(x, [-1., -np.sqrt(0.5), 0., np.sqrt(0.5), 1.])
        assert_almost_equal(w, [1. / 15, 8. / 15, 0.8, 8. / 15, 1. / 15])
        assert_almost_equal(np.dot(w, x**2), 2. / 3)
        assert_almost_equal(bary_weights(5), [0.5, -1., 1., -1., 0.5])

    def test_cached_points_read_only(self):
        x = chebpts_type2_compute(17)
        w = quadwts(17)

        def scale(array):
            array *= 0.5

        assert_raises(ValueError, scale, x)
        assert_raises(ValueError, scale, w)
        assert_almost_equal(chebpts_type2_compute(17)[-1], 1.)
        assert_almost_equal(np.sum(quadwts(17)), 2.)

    def test_clenshaw(self):
        coeffs = np.zeros(5)
        coeffs[4] = 1.
        xs = np.linspace(-1, 1, 50)
        assert_almost_equal(clenshaw(xs, coeffs)[:, 0], np.cos(4 * np.arccos(xs)))

    def test_fast_clenshaw(self):
        rng = np.random.default_rng(7)
        coeffs = rng.standard_normal(2000)
        xs = np.hstack((-1., rng.uniform(-1, 1, 300), 0., 1.))
        tol = 1e-12 * np.sum(np.abs(coeffs))

        assert_allclose(fast_clenshaw(xs, coeffs), clenshaw(xs, coeffs)[:, 0], rtol=0, atol=tol)

    def test_fast_clenshaw_complex(self):
        rng = np.random.default_rng(8)
        coeffs = rng.standard_normal(1500) + 1j * rng.standard_normal(1500)
        xs = rng.uniform(-1, 1, 100)
        tol = 1e-12 * np.sum(np.abs(coeffs))

        assert_allclose(fast_clenshaw(xs, coeffs), clenshaw(xs, coeffs)[:, 0], rtol=0, atol=tol)

    def test_evaluate(self):
        rng = np.random.default_rng(9)
        xs = rng.uniform(-1, 1, 40)

        # short series are evaluated by clenshaw
        short = rng.standard_normal((20, 2))
        assert_(np.all(evaluate(xs, short) == clenshaw(xs, short)))

        long = rng.standard_normal((1100, 2))
        out = evaluate(xs, long)
        assert_(out.shape == (40, 2))
        assert_allclose(out, clenshaw(xs, long), rtol=0, atol=1e-12 * np.sum(np.abs(long)))

    def test_prolong(self):
        coeffs = np.arange(1., 5.)
        assert_(prolong(coeffs, 6).shape == (6, 1))
        assert_(np.all(prolong(coeffs, 6)[4:] == 0))
        assert_allclose(prolong(coeffs, 2)[:, 0], [1., 2.])


class TestStandardChop:
    def test_short(self):
        coeffs = 10.0**-np.arange(10)
        assert_(standardChop(coeffs) == 10)

    def test_zero(self):
        assert_(standardChop(np.zeros(20)) == 1)

    def test_geometric(self):
        coeffs = 10.0**-np.arange(30)
        cutoff = standardChop(coeffs, EPS)
        assert_(16 <= cutoff <= 19)

    def test_unresolved(self):
        coeffs = 1. / (1. + np.arange(50))**2
        assert_(standardChop(coeffs, EPS) == 50)

    def test_simplify(self):
        coeffs = np.hstack((10.0**-np.arange(30), np.zeros(4)))
        c = simplify_coeffs(coeffs)
        assert_(16 <= c.shape[0] <= 19)
        assert_allclose(c[:, 0], coeffs[:c.shape[0]])
