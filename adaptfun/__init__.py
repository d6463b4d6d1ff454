import logging

from . import exceptions
from . import pref

# cheb first, the techs and the happiness checks import each other through it
from . import cheb

from . import trig

from . import happiness
from . import tech
from . import fun
from . import chebfun

from .exceptions import ConfigurationError, DomainError, BoundedDomainError
from .exceptions import DomainShapeError, DimensionError, ResolutionWarning

from .pref import TechPref

from .cheb import chebtech
from .trig import trigtech

from .happiness import HappinessVerdict
from .happiness import happiness_check, sample_test
from .happiness import register_checker, get_checker

from .domain import check_domain
from .mapping import Mapping

from .fun import Fun

from .chebfun import Chebfun
from .chebfun import build, compose, coefficients
from .chebfun import roots, minandmax, global_max, global_min
from .chebfun import local_maxima, local_minima

logging.getLogger(__name__).addHandler(logging.NullHandler())
