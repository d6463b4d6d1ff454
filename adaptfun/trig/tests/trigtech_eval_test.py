#!/usr/bin/python
# -*- coding: utf-8 -*-
# Author: Andreas Buttenschoen
import numpy as np
from numpy.testing import assert_, assert_almost_equal, assert_allclose

from adaptfun.trig import trigtech, vals2coeffs, coeffs2vals, horner, trigpts


class TesttrigtechEval:
    def test_eval(self):
        ff = lambda x: np.sin(2 * np.pi * x)
        f  = trigtech(op=lambda x: np.sin(2 * np.pi * x), type='trig')

        # test domain
        xs = np.linspace(-1, 1, 100)

        # Just check the values it returns
        assert_almost_equal(f(xs), ff(xs))

    def test_scalar_eval(self):
        ff = lambda x: np.sin(2 * np.pi * x)
        f  = trigtech(op=lambda x: np.sin(2 * np.pi * x), type='trig')

        # test domain
        xs = np.asarray([1.0])

        # Just check the values it returns
        assert_almost_equal(f(xs), ff(xs))

    def test_real_eval(self):
        ff = lambda x: np.sin(2 * np.pi * x)
        f  = trigtech(op=lambda x: np.sin(2 * np.pi * x), type='trig')

        # test domain
        xs = 1.0

        # Just check the values it returns
        assert_almost_equal(f(xs), ff(xs))
        assert_(np.isrealobj(f(xs)))

    def test_complex_eval(self):
        ff = lambda x: np.exp(1j * np.pi * x) + np.cos(2 * np.pi * x)
        f = trigtech(op=ff)
        xs = np.linspace(-1, 1, 100)

        assert_(np.iscomplexobj(f(xs)))
        assert_almost_equal(f(xs), ff(xs))


class TestTrigTransform:
    def test_roundtrip_even(self):
        rng = np.random.default_rng(7)
        values = rng.standard_normal((16, 2)) + 1j * rng.standard_normal((16, 2))
        assert_allclose(coeffs2vals(vals2coeffs(values)), values, atol=1e-13)

    def test_roundtrip_odd(self):
        rng = np.random.default_rng(7)
        values = rng.standard_normal((15, 2)) + 1j * rng.standard_normal((15, 2))
        assert_allclose(coeffs2vals(vals2coeffs(values)), values, atol=1e-13)

    def test_cos(self):
        x, _ = trigpts(8)
        coeffs = vals2coeffs(np.cos(np.pi * x))

        # wave numbers -4, ..., 3
        expected = np.zeros((8, 1))
        expected[3] = 0.5
        expected[5] = 0.5
        assert_allclose(coeffs, expected, atol=1e-14)

    def test_horner(self):
        x, _ = trigpts(9)
        values = np.exp(np.sin(np.pi * x))
        coeffs = vals2coeffs(values)

        # interpolates at the grid
        assert_allclose(horner(x, coeffs)[:, 0], values, atol=1e-13)

    def test_horner_nyquist(self):
        # the first of an even number of coefficients is a cosine
        coeffs = np.zeros((4, 1))
        coeffs[0] = 1.
        xs = np.linspace(-1, 1, 20)
        assert_allclose(horner(xs, coeffs)[:, 0], np.cos(2 * np.pi * xs), atol=1e-14)
