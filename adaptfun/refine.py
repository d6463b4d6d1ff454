#!/usr/bin/python
# -*- coding: utf-8 -*-
# Author: Andreas Buttenschoen
import logging
import numpy as np

from .exceptions import ConfigurationError
from .pref import TechPref

logger = logging.getLogger(__name__)


def expand(array, axis=1):
    array = np.asarray(array)
    if array.ndim == 0:
        return np.reshape(array, (1, 1))
    elif array.ndim == 1:
        return np.expand_dims(array, axis=axis)
    return array


def sample(op, x):
    """ Evaluates op at the points x.

        Returns a Fortran ordered array of shape (x.size, m). Scalar results
        are broadcast to all points, integer results are promoted to float.
        Floating point errors are ignored, non-finite samples are dealt with
        by the caller.
    """
    x = np.asarray(x)
    with np.errstate(all='ignore'):
        values = np.asarray(op(x))

    if values.size == 1 and x.size != 1:
        values = np.full(x.size, values.item())

    values = np.reshape(expand(values), (x.size, -1))
    if not np.iscomplexobj(values):
        values = values.astype(np.float64)
    return np.asfortranarray(values)


class FunctionContainer:
    """ Turns a list of callables into one array-valued callable """
    def __init__(self, fs, dtype=np.float64, *args, **kwargs):
        self.fs = fs
        self.dtype = dtype

    def __len__(self):
        return len(self.fs)

    def __call__(self, x):
        x = np.asarray(x)
        cols = [np.ravel(np.broadcast_to(np.asarray(f(x)), x.shape)) for f in self.fs]
        dtype = np.result_type(self.dtype, *cols)

        r = np.empty((x.size, len(self.fs)), order='F', dtype=dtype)
        for i, col in enumerate(cols):
            r[:, i] = col
        return r


""" Base class for resampling and refining operations  """
class RefineBase:
    def __init__(self, op, *args, **kwargs):
        pref = kwargs.pop('pref', None)
        pref = TechPref() if pref is None else pref

        self.op = op
        self.minSamples = kwargs.pop('minSamples', pref.minSamples)
        self.maxLength = kwargs.pop('maxLength', pref.maxLength)
        self.strategy = kwargs.pop('strategy', pref.refinementFunction)
        self.values = np.zeros((0, 0), order='F')

        # every grid size at which op was sampled
        self.history = []

        if self.strategy == 'nested':
            self._call = self._nested
        elif self.strategy == 'resample':
            self._call = self._resample
        else:
            raise ConfigurationError("Unknown refinement strategy '{0}'!".format(self.strategy))

    def __call__(self):
        """ Returns the values of op on the next grid and whether to give up """
        return self._call()

    @property
    def n(self):
        return self.values.shape[0]

    def initial_n(self):
        raise NotImplementedError

    def next_n(self, n):
        """ Grid size after n when resampling """
        raise NotImplementedError

    def nested_n(self, n):
        """ Grid size after n when the grids are nested """
        raise NotImplementedError

    def points(self, n):
        raise NotImplementedError

    def new_points(self, n):
        """ Points of the grid of size n that are not on the current grid """
        raise NotImplementedError

    def merge(self, new_values, n):
        raise NotImplementedError

    def sample_grid(self, n):
        return sample(self.op, self.points(n))

    """ Guess the next domain size to use """
    def get_n(self):
        if self.values.size == 0:
            n = self.initial_n()
        else:
            n = self.next_n(self.n)

        return self._clamp(n)

    def _clamp(self, n):
        # the last attempt is made at exactly maxLength
        if n > self.maxLength:
            if self.values.size > 0 and self.n >= self.maxLength:
                return self.n, True
            n = self.maxLength

        return int(n), False

    """ Resample the function on a new domain """
    def _resample(self):
        n, giveUp = self.get_n()

        if giveUp:
            return self.values, giveUp

        logger.debug("Sampling %d points.", n)
        self.values = self.sample_grid(n)
        self.history.append(n)
        return self.values, giveUp

    """ Resample the function on a nested domain """
    def _nested(self):
        if self.values.size == 0:
            return self._resample()

        n = self.nested_n(self.n)

        if n > self.maxLength:
            n, giveUp = self._clamp(n)
            if giveUp:
                return self.values, giveUp

            logger.debug("Resampling %d points at the maximum length.", n)
            self.values = self.sample_grid(n)
            self.history.append(n)
            return self.values, giveUp

        logger.debug("Sampling %d new points for a grid of %d points.", n - self.n, n)
        new_values = sample(self.op, self.new_points(n))
        self.values = self.merge(new_values, n)
        self.history.append(n)
        return self.values, False
