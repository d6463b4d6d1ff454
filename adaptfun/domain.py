#!/usr/bin/python
# -*- coding: utf-8 -*-
# Author: Andreas Buttenschoen
import numpy as np

from .exceptions import BoundedDomainError, DomainShapeError


def check_domain(domain, npts=None):
    """ Validates a vector of breakpoints and returns it as a float array.

        The breakpoints must be finite and strictly increasing. With npts
        given exactly that many are required, otherwise at least two.
    """
    try:
        d = np.asarray(domain, dtype=float)
    except (TypeError, ValueError):
        raise DomainShapeError("Domain should be a vector of numbers not {0!r}!".format(domain)) from None

    if d.ndim != 1:
        raise DomainShapeError("Domain should be a row vector not an array of shape {0}!".format(d.shape))

    if npts is not None and d.size != npts:
        raise DomainShapeError("Domain should be a row vector with {0:d} entries not {1:d}!".format(npts, d.size))
    elif d.size < 2:
        raise DomainShapeError("Domain should have at least two entries!")

    if not np.all(np.isfinite(d)):
        raise BoundedDomainError("Domain {0} is not bounded!".format(d))

    if np.any(np.diff(d) <= 0):
        raise DomainShapeError("Breakpoints {0} are not strictly increasing!".format(d))

    return d
