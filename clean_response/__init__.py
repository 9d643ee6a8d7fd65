# -*- coding: utf-8 -*-
# (c) Nelen & Schuurmans

from .base.domain.exceptions import *  # NOQA
from .base.domain.types import *  # NOQA
from .base.domain.value_object import *  # NOQA
from .http.headers import *  # NOQA
from .http.mime import *  # NOQA
from .http.response import *  # NOQA
from .http.status import *  # NOQA

# fmt: off
__version__ = '0.0.1.dev0'
# fmt: on
