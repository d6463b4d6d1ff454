from . chebtech import chebtech
from . chebtech import inner

from . detail import polyfit
from . detail import polyval
from . detail import clenshaw

from . detail import standardChop

from . pts import bary_weights
from . pts import quadwts
from . pts import chebpts_type2_compute
