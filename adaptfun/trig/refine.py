#!/usr/bin/python
# -*- coding: utf-8 -*-
# Author: Andreas Buttenschoen
import numpy as np

from ..refine import RefineBase, sample
from .trigpts import trigpts


""" Class to refine trig polynomials in values """
class Refine(RefineBase):
    def initial_n(self):
        return int(2**np.ceil(np.log2(max(self.minSamples, 2) - 1)))

    def next_n(self, n):
        pow = np.log2(n)
        if pow == np.floor(pow) and pow > 5:
            n = 3*2**(pow-1)
        else:
            n = 2**(np.floor(pow) + 1)
        return int(n)

    def nested_n(self, n):
        return 2 * n

    def points(self, n):
        x, _ = trigpts(n)
        return x

    def sample_grid(self, n):
        """ Resample the function on a new domain """
        x = np.hstack((self.points(n), 1))
        values = sample(self.op, x)

        # compute the average values of f at -/+ 1 and then remove the +1 value
        values[0, :] = 0.5 * (values[0, :] + values[-1, :])
        return np.asfortranarray(values[:-1, :])

    def new_points(self, n):
        # take every 2nd entry
        return self.points(n)[1::2]

    def merge(self, new_values, n):
        values = np.zeros((n, self.values.shape[1]), order='F',
                          dtype=np.result_type(self.values, new_values))
        values[0:n:2, :] = self.values
        values[1::2, :] = new_values
        return values
