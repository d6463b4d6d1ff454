#!/usr/bin/python
# -*- coding: utf-8 -*-
# Author: Andreas Buttenschoen
import numpy as np
from numpy.testing import assert_, assert_raises, assert_almost_equal

from adaptfun.cheb import chebtech


class TestChebtechArithmetic:
    def test_addition(self):
        fun1 = chebtech(op=lambda x: np.ones_like(x), type='cheb')
        fun2 = chebtech(op=lambda x: np.ones_like(x), type='cheb')
        fun3 = fun1 + fun2

        assert_(fun3.values == 2)
        assert_(fun3.coeffs == 2)
        # make sure that original functions were unchanged!
        assert_(fun1.values == 1)
        assert_(fun2.values == 1)

    def test_addition_functions(self):
        fun1 = chebtech(op=lambda x: np.sin(2 * np.pi * x), type='cheb')
        fun2 = chebtech(op=lambda x: np.cos(2 * np.pi * x), type='cheb')
        fun3 = fun1 + fun2

        xs = np.linspace(-1, 1, 1000)
        assert_almost_equal(fun3(xs), np.sin(2 * np.pi * xs) + np.cos(2 * np.pi * xs))

    def test_addition_scalar(self):
        fun1 = chebtech(op=lambda x: np.ones_like(x), type='cheb')
        fun2 = fun1 + 2
        fun3 = 2 + fun1

        assert_(fun2.values == 3)
        assert_(fun3.values == 3)
        assert_(fun1.values == 1)

    def test_addition_assignment(self):
        fun1 = chebtech(op=lambda x: np.ones_like(x), type='cheb')
        fun2 = chebtech(op=lambda x: np.ones_like(x), type='cheb')
        fun1 += fun2

        assert_(fun1.values == 2)
        # make sure that original functions were unchanged!
        assert_(fun2.values == 1)

    def test_subtraction(self):
        fun1 = chebtech(op=np.exp)
        fun2 = fun1 - fun1

        assert_(len(fun2) == 1)
        assert_(np.all(fun2.coeffs == 0))
        assert_almost_equal((1 - fun1)(0.5), 1 - np.exp(0.5))

    def test_negative(self):
        fun1 = chebtech(op=np.exp)
        assert_almost_equal((-fun1)(0.3), -np.exp(0.3))

    def test_multiplication(self):
        fun1 = chebtech(op=lambda x: np.sin(2 * np.pi * x))
        fun2 = chebtech(op=lambda x: np.cos(2 * np.pi * x))
        fun3 = fun1 * fun2

        xs = np.linspace(-1, 1, 1000)
        assert_almost_equal(fun3(xs), 0.5 * np.sin(4 * np.pi * xs))
        assert_almost_equal((3 * fun1)(xs), 3 * np.sin(2 * np.pi * xs))

    def test_division(self):
        fun1 = chebtech(op=np.exp)
        xs = np.linspace(-1, 1, 100)

        assert_almost_equal((fun1 / 2)(xs), 0.5 * np.exp(xs))

        # division by a function is constructed from its values
        fun2 = chebtech(op=lambda x: 2 + x)
        assert_almost_equal((fun1 / fun2)(xs), np.exp(xs) / (2 + xs))

    def test_ufunc(self):
        fun1 = chebtech(op=lambda x: x)
        xs = np.linspace(-1, 1, 100)

        assert_almost_equal(np.sin(fun1)(xs), np.sin(xs))
        assert_almost_equal((fun1**2)(xs), xs**2)

    def test_array_valued(self):
        fun1 = chebtech(op=[lambda x: x, lambda x: x**2])
        fun2 = fun1 + np.array([1., 2.])

        assert_almost_equal(fun2(0.5), [1.5, 2.25])
        assert_raises(ValueError, lambda: fun1 + chebtech(op=[np.sin, np.cos, np.exp]))
