#!/usr/bin/python
# -*- coding: utf-8 -*-
# Author: Andreas Buttenschoen
import numpy as np

from ..refine import RefineBase
from .pts import chebpts_type2_compute


""" Class to refine polynomials in values """
class Refine(RefineBase):
    def __init__(self, *args, **kwargs):
        super().__init__(*args, **kwargs)
        self.minSamples = max(9, self.minSamples)

    def initial_n(self):
        return int(2**np.ceil(np.log2(self.minSamples - 1)) + 1)

    def next_n(self, n):
        pow = np.log2(n - 1)
        if pow == np.floor(pow) and pow > 5:
            n = np.round(2**(np.floor(pow) + 0.5)) + 1
            n = n - np.remainder(n, 2) + 1
        else:
            n = 2**(np.floor(pow) + 1) + 1
        return int(n)

    def nested_n(self, n):
        return 2 * n - 1

    def points(self, n):
        return np.copy(chebpts_type2_compute(n))

    def new_points(self, n):
        # take every 2nd entry
        return np.copy(chebpts_type2_compute(n)[1:-1:2])

    def merge(self, new_values, n):
        values = np.zeros((n, self.values.shape[1]), order='F',
                          dtype=np.result_type(self.values, new_values))
        values[0:n:2, :] = self.values
        values[1:-1:2, :] = new_values
        return values
