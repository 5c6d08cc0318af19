"""Human-readable rendering of durations.

A duration is read out as a fixed cascade of seven buckets, most significant
first: years, months within the year, days within the month, hours within the
day, minutes within the hour, seconds within the minute and milliseconds
within the second. Each bucket is taken from the matching conversion accessor
(floored, then reduced modulo the next unit up), so the cascade is a readout
rather than a subtracting reduction.

Negative durations are rendered as the absolute value with a leading ``-``.
Infinite durations render as ``inf years`` and NaN as ``nan milliseconds``.
"""

import math
from collections.abc import Callable
from dataclasses import dataclass
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from chronospan.duration import Duration

DEFAULT_MAX_UNITS = 2


@dataclass(frozen=True, kw_only=True)
class FormatOptions:
    """Options for `format_duration`.

    Attributes:
        max_units: Maximum number of non-zero unit terms to render.
        short: Use abbreviated labels (``"1d 2h"``) instead of full names
            (``"1 day, 2 hours"``).
    """

    max_units: int = DEFAULT_MAX_UNITS
    short: bool = False

    def __post_init__(self) -> None:
        if isinstance(self.max_units, bool) or not isinstance(self.max_units, int):
            raise TypeError(
                f"max_units must be an int.\n"
                f"Got {type(self.max_units).__name__!r}: {self.max_units!r}"
            )
        if self.max_units < 1:
            raise ValueError(f"max_units must be >= 1, got {self.max_units}")
        if not isinstance(self.short, bool):
            raise TypeError(
                f"short must be a bool.\n"
                f"Got {type(self.short).__name__!r}: {self.short!r}"
            )


@dataclass(frozen=True)
class _Bucket:
    singular: str
    plural: str
    abbreviation: str
    read: "Callable[[Duration], float]"

    def render(self, value: float, short: bool) -> str:
        if short:
            return f"{value}{self.abbreviation}"
        label = self.singular if value == 1 else self.plural
        return f"{value} {label}"


_MILLISECONDS = _Bucket(
    "millisecond", "milliseconds", "ms", lambda d: d.milliseconds % 1000
)

_BUCKETS: tuple[_Bucket, ...] = (
    _Bucket("year", "years", "y", lambda d: d.years),
    _Bucket("month", "months", "mo", lambda d: d.months % 12),
    _Bucket("day", "days", "d", lambda d: d.days % 30),
    _Bucket("hour", "hours", "h", lambda d: d.hours % 24),
    _Bucket("minute", "minutes", "m", lambda d: d.minutes % 60),
    _Bucket("second", "seconds", "s", lambda d: d.seconds % 60),
    _MILLISECONDS,
)


def format_duration(duration: "Duration", options: FormatOptions | None = None) -> str:
    """Render a duration as human-readable text.

    Args:
        duration: The duration to render.
        options: Formatting options; defaults to ``FormatOptions()``.

    Returns:
        Text such as ``"2 hours, 30 minutes"`` or ``"1d 2h"``.

    Example:
        >>> format_duration(Duration(1500))
        '1 second, 500 milliseconds'
        >>> format_duration(Duration(1500), FormatOptions(short=True))
        '1s 500ms'
    """
    options = options or FormatOptions()

    if duration.milliseconds == 0:
        return "0ms" if options.short else "0 milliseconds"

    sign = "-" if duration.milliseconds < 0 else ""
    magnitude = abs(duration)

    # Non-finite values have no cascade; inf reads as years, nan as milliseconds
    if math.isinf(magnitude.milliseconds):
        return sign + _BUCKETS[0].render(magnitude.milliseconds, options.short)
    if math.isnan(magnitude.milliseconds):
        return _MILLISECONDS.render(magnitude.milliseconds, options.short)

    terms = [
        (bucket, value)
        for bucket in _BUCKETS
        if (value := math.floor(bucket.read(magnitude))) > 0
    ][: options.max_units]

    if not terms:
        # Only reachable for magnitudes below one millisecond
        value = math.floor(magnitude.milliseconds)
        return _MILLISECONDS.render(value, options.short)

    separator = " " if options.short else ", "
    return sign + separator.join(
        bucket.render(value, options.short) for bucket, value in terms
    )
