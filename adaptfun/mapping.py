#!/usr/bin/python
# -*- coding: utf-8 -*-
# Author: Andreas Buttenschoen
import numpy as np

class Mapping(object):
    """ Class mapping [-1, 1] to a bounded interval [a, b]. """
    def __init__(self, ends, *args, **kwargs):
        self.ends = np.asarray(ends, dtype=float)
        self.__linear()

    def __linear(self):
        """ Creates a linear map structure.

            fwd -> maps [-1, 1] to [ends[0], ends[1]]
            bwd -> is the inverse map
        """
        a, b = self.ends
        self.fwd = lambda y: (b * (np.asarray(y) + 1) + a * (1 - np.asarray(y))) / 2
        self.bwd = lambda x: (2 * np.asarray(x) - a - b) / (b - a)

    def __call__(self, x):
        return self.fwd(x)

    def __eq__(self, other):
        return isinstance(other, Mapping) and np.all(self.ends == other.ends)

    def __repr__(self):
        return f"{self.__class__.__name__}(ends={self.ends})"

    def __str__(self):
        return 'Map([-1, 1] -> [%.2f, %.2f])' % (self.ends[0], self.ends[1])
