from .exceptions import *  # NOQA
from .types import *  # NOQA
from .value_object import *  # NOQA
