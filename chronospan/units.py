"""Parser for compact unit-suffixed duration strings such as ``"90s"``.

The accepted grammar is ``<digits><unit>`` or ``<digits> <unit>`` where the
unit is one of ``ms``, ``s``, ``m``, ``h``, ``d``, ``w`` or ``y``. Static type
checkers only see ``str`` here; the grammar is enforced at runtime.
"""

import re
from typing import Literal, TypeAlias

from chronospan.errors import FormatError
from chronospan.util import DAY, HOUR, MILLISECOND, MINUTE, SECOND, WEEK, YEAR

Unit: TypeAlias = Literal["ms", "s", "m", "h", "d", "w", "y"]

UNITS: dict[Unit, int] = {
    "ms": MILLISECOND,
    "s": SECOND,
    "m": MINUTE,
    "h": HOUR,
    "d": DAY,
    "w": WEEK,
    "y": YEAR,
}

_PATTERN = re.compile(r"(?P<value>[0-9]+)\s?(?P<unit>ms|s|m|h|d|w|y)", re.ASCII)


def parse_duration(text: str) -> int:
    """Parse a unit-suffixed string into a number of milliseconds.

    Args:
        text: A string like ``"1s"``, ``"250ms"`` or ``"2 h"``.

    Returns:
        The duration in milliseconds.

    Raises:
        FormatError: If ``text`` does not match the grammar.

    Example:
        >>> parse_duration("1m")
        60000
    """
    if not isinstance(text, str):
        raise FormatError(text)

    match = _PATTERN.fullmatch(text)
    if match is None:
        raise FormatError(text)

    return int(match["value"]) * UNITS[match["unit"]]  # type: ignore[index]
