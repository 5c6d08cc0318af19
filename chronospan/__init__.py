from .duration import Duration, DurationComponents
from .errors import DivisionByZeroError, DurationError, FormatError
from .formatting import DEFAULT_MAX_UNITS, FormatOptions, format_duration
from .units import UNITS, Unit, parse_duration
from .util import DAY, HOUR, MILLISECOND, MINUTE, MONTH, SECOND, WEEK, YEAR

__all__ = [
    "Duration",
    "DurationComponents",
    "DurationError",
    "FormatError",
    "DivisionByZeroError",
    "FormatOptions",
    "format_duration",
    "DEFAULT_MAX_UNITS",
    "parse_duration",
    "Unit",
    "UNITS",
    "MILLISECOND",
    "SECOND",
    "MINUTE",
    "HOUR",
    "DAY",
    "WEEK",
    "MONTH",
    "YEAR",
]
