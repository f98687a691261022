"""
Immutable, codepoint-aware string values with a fluent API 🧵.
"""

# std
from importlib.metadata import version

# third-party
from loguru import logger

# silence logging by default
logger.disable('stringent')

# relative
from . import string
from .string import regex
from .string.entities import HtmlFlags
from .value import StringValue, create
from .errors import (ImmutableViolation, InvalidArgument, OutOfBounds,
                     StringValueError, UnsupportedEncoding)


# ---------------------------------------------------------------------------- #

# version
__version__ = version('stringent')


# alias
S = StringValue
