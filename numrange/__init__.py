"""numrange: expand range expressions like `1-3,5-8` into value lists."""

__version__ = "0.1.0"

import logging

from numrange.config import RangeOptions, load_options
from numrange.exceptions import (
    AmbiguousRange,
    ConfigError,
    InvalidRangeSyntax,
    InvalidSeparator,
    NotANumber,
    NumrangeError,
    RangeError,
    SeparatorsMustBeDifferent,
    StartBiggerThanEnd,
)
from numrange.numeric import NumericRegistry, Steppable
from numrange.parser import parse, parse_options, parse_with

logging.getLogger(__name__).addHandler(logging.NullHandler())
