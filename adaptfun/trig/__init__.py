from . trigtech import trigtech

from . transform import vals2coeffs
from . transform import coeffs2vals

from . eval import horner

from . trigpts import trigpts
