#
# Arbitrary-precision numbers in positional numeral systems of bases 2 to 62
#
# (c) The polyradix authors 2026.  All rights reserved.
#

import logging

from .errors import *
from .digits import *
from .sequence import *
from .notation import TextFormat, DefaultFormat
from .context import *
from .number import *

from . import errors, digits, sequence, context, number

__version__ = '0.1.0'

__all__ = (errors.__all__ + digits.__all__ + sequence.__all__ + ('TextFormat', 'DefaultFormat')
           + context.__all__ + number.__all__)

logging.getLogger(__name__).addHandler(logging.NullHandler())
