from .headers import *  # NOQA
from .mime import *  # NOQA
from .response import *  # NOQA
from .status import *  # NOQA
