#!/usr/bin/python
# -*- coding: utf-8 -*-
# Author: Andreas Buttenschoen


class ConfigurationError(ValueError):
    """ Raised for unknown or unsupported preferences, e.g. happiness checks. """


class DomainError(ValueError):
    """ Base class of all domain related errors. """


class BoundedDomainError(DomainError):
    """ The domain has an end point that is not finite. """


class DomainShapeError(DomainError):
    """ The domain is not a vector of strictly increasing break points. """


class DimensionError(IndexError):
    """ A column index exceeds the number of columns of a function. """


class ResolutionWarning(RuntimeWarning):
    """ The constructor gave up before the function was resolved. """
