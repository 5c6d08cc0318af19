from dataclasses import dataclass
from datetime import timedelta
from numbers import Real
from typing import Any, TypedDict

from dateutil.relativedelta import relativedelta
from typing_extensions import Unpack, override

from chronospan.errors import DivisionByZeroError
from chronospan.formatting import DEFAULT_MAX_UNITS, FormatOptions, format_duration
from chronospan.units import parse_duration
from chronospan.util import DAY, HOUR, MILLISECOND, MINUTE, MONTH, SECOND, WEEK, YEAR


class DurationComponents(TypedDict, total=False):
    """Named unit counts aggregated into a duration at construction time."""

    years: float
    months: float
    days: float
    hours: float
    minutes: float
    seconds: float
    milliseconds: float


SCALES: dict[str, int] = {
    "years": YEAR,
    "months": MONTH,
    "days": DAY,
    "hours": HOUR,
    "minutes": MINUTE,
    "seconds": SECOND,
    "milliseconds": MILLISECOND,
}

# relativedelta fields that pin a calendar position rather than measure a span
_ABSOLUTE_FIELDS = (
    "year",
    "month",
    "day",
    "weekday",
    "hour",
    "minute",
    "second",
    "microsecond",
)


def _is_real(value: Any) -> bool:
    return isinstance(value, Real) and not isinstance(value, bool)


@dataclass(frozen=True, order=True)
class Duration:
    """An immutable span of time stored as a signed count of milliseconds.

    Every operation that looks like a modification returns a new instance.
    Months are 30 days and years are 365 days throughout; no calendar is
    consulted.

    Example:
        >>> Duration.from_string("90s").minutes
        1.5
        >>> Duration.from_components(hours=2, minutes=30).format()
        '2 hours, 30 minutes'
    """

    milliseconds: float

    def __post_init__(self) -> None:
        if not _is_real(self.milliseconds):
            raise TypeError(
                f"Duration requires a real number of milliseconds.\n"
                f"Got {type(self.milliseconds).__name__!r}: {self.milliseconds!r}\n"
                f"Hint: use Duration.from_string('5s') to parse text"
            )

    # Construction

    @classmethod
    def from_components(
        cls,
        components: DurationComponents | None = None,
        /,
        **kwargs: Unpack[DurationComponents],
    ) -> "Duration":
        """Aggregate named unit counts into a duration.

        Absent (or ``None``) and zero components contribute nothing, so an
        empty aggregate is a zero duration. Keyword arguments take precedence
        over entries of ``components``.

        Raises:
            TypeError: For unknown component names or non-numeric values.
        """
        merged: dict[str, Any] = {**(components or {}), **kwargs}

        unknown = sorted(set(merged) - SCALES.keys())
        if unknown:
            valid = ", ".join(SCALES)
            raise TypeError(
                f"Unknown duration component(s): {', '.join(unknown)}. "
                f"Valid components: {valid}"
            )

        total: float = 0
        for name, scale in SCALES.items():
            value = merged.get(name)
            if value is None:
                continue
            if not _is_real(value):
                raise TypeError(
                    f"Duration component {name!r} must be a real number, "
                    f"got {type(value).__name__!r}: {value!r}"
                )
            if value:
                total += value * scale
        return cls(total)

    @classmethod
    def of(
        cls,
        components: DurationComponents | None = None,
        /,
        **kwargs: Unpack[DurationComponents],
    ) -> "Duration":
        """Alias for `from_components`."""
        return cls.from_components(components, **kwargs)

    @classmethod
    def from_string(cls, text: str) -> "Duration":
        """Parse a unit-suffixed string such as ``"5s"`` or ``"2 h"``.

        The grammar is checked at parse time, not by the type checker.

        Raises:
            FormatError: If ``text`` is not a valid duration string.
        """
        return cls(parse_duration(text))

    @classmethod
    def from_milliseconds(cls, milliseconds: float) -> "Duration":
        return cls(milliseconds)

    @classmethod
    def from_seconds(cls, seconds: float) -> "Duration":
        return cls(seconds * SECOND)

    @classmethod
    def from_minutes(cls, minutes: float) -> "Duration":
        return cls(minutes * MINUTE)

    @classmethod
    def from_hours(cls, hours: float) -> "Duration":
        return cls(hours * HOUR)

    @classmethod
    def from_days(cls, days: float) -> "Duration":
        return cls(days * DAY)

    @classmethod
    def from_weeks(cls, weeks: float) -> "Duration":
        return cls(weeks * WEEK)

    @classmethod
    def from_months(cls, months: float) -> "Duration":
        """Create a duration of ``months`` 30-day months."""
        return cls(months * MONTH)

    @classmethod
    def from_years(cls, years: float) -> "Duration":
        """Create a duration of ``years`` 365-day years."""
        return cls(years * YEAR)

    of_milliseconds = from_milliseconds
    of_seconds = from_seconds
    of_minutes = from_minutes
    of_hours = from_hours
    of_days = from_days
    of_weeks = from_weeks
    of_months = from_months
    of_years = from_years

    @classmethod
    def from_timedelta(cls, delta: timedelta) -> "Duration":
        """Convert a `datetime.timedelta` without losing sub-millisecond parts."""
        if not isinstance(delta, timedelta):
            raise TypeError(
                f"Expected datetime.timedelta, got {type(delta).__name__!r}"
            )
        whole = delta.days * DAY + delta.seconds * SECOND
        if delta.microseconds % 1000 == 0:
            return cls(whole + delta.microseconds // 1000)
        return cls(whole + delta.microseconds / 1000)

    @classmethod
    def from_relativedelta(cls, delta: relativedelta) -> "Duration":
        """Convert a relative `relativedelta` using the fixed unit lengths.

        Months count as 30 days and years as 365 days, exactly as in
        `from_components`.

        Raises:
            ValueError: If ``delta`` carries absolute fields (``year=``,
                ``weekday=`` and so on) or leap days, which do not describe
                a fixed-length span.
        """
        if not isinstance(delta, relativedelta):
            raise TypeError(
                f"Expected dateutil.relativedelta, got {type(delta).__name__!r}"
            )
        absolute = [
            name for name in _ABSOLUTE_FIELDS if getattr(delta, name) is not None
        ]
        if absolute or delta.leapdays:
            raise ValueError(
                f"Cannot convert a relativedelta with absolute fields to a "
                f"Duration: {', '.join(absolute) or 'leapdays'}"
            )
        return cls.from_components(
            years=delta.years,
            months=delta.months,
            days=delta.days,
            hours=delta.hours,
            minutes=delta.minutes,
            seconds=delta.seconds,
            milliseconds=delta.microseconds / 1000 if delta.microseconds else 0,
        )

    # Conversion

    @property
    def seconds(self) -> float:
        return self.milliseconds / SECOND

    @property
    def minutes(self) -> float:
        return self.milliseconds / MINUTE

    @property
    def hours(self) -> float:
        return self.milliseconds / HOUR

    @property
    def days(self) -> float:
        return self.milliseconds / DAY

    @property
    def weeks(self) -> float:
        return self.milliseconds / WEEK

    @property
    def months(self) -> float:
        """Duration in 30-day months."""
        return self.milliseconds / MONTH

    @property
    def years(self) -> float:
        """Duration in 365-day years."""
        return self.milliseconds / YEAR

    def to_timedelta(self) -> timedelta:
        return timedelta(milliseconds=self.milliseconds)

    def to_relativedelta(self) -> relativedelta:
        """Return an equivalent `relativedelta` in days and smaller units.

        Months and years are left at zero so that adding the result to a date
        moves it by exactly this many milliseconds.
        """
        return relativedelta(microseconds=round(self.milliseconds * 1000))

    # Arithmetic

    def add(self, other: "Duration") -> "Duration":
        _require_duration(other, "add")
        return Duration(self.milliseconds + other.milliseconds)

    def subtract(self, other: "Duration") -> "Duration":
        """Return the difference, which may be negative."""
        _require_duration(other, "subtract")
        return Duration(self.milliseconds - other.milliseconds)

    def multiply(self, factor: float) -> "Duration":
        _require_factor(factor, "multiply")
        return Duration(self.milliseconds * factor)

    def divide(self, factor: float) -> "Duration":
        """Divide by a real factor.

        Raises:
            DivisionByZeroError: If ``factor`` is zero.
        """
        _require_factor(factor, "divide")
        if factor == 0:
            raise DivisionByZeroError()
        return Duration(self.milliseconds / factor)

    def __add__(self, other: object) -> "Duration":
        if not isinstance(other, Duration):
            return NotImplemented
        return self.add(other)

    def __sub__(self, other: object) -> "Duration":
        if not isinstance(other, Duration):
            return NotImplemented
        return self.subtract(other)

    def __mul__(self, factor: object) -> "Duration":
        if not _is_real(factor):
            return NotImplemented
        return self.multiply(factor)  # type: ignore[arg-type]

    def __rmul__(self, factor: object) -> "Duration":
        return self.__mul__(factor)

    def __truediv__(self, factor: object) -> "Duration":
        if not _is_real(factor):
            return NotImplemented
        return self.divide(factor)  # type: ignore[arg-type]

    def __neg__(self) -> "Duration":
        return Duration(-self.milliseconds)

    def __abs__(self) -> "Duration":
        return Duration(abs(self.milliseconds))

    # Comparison

    def equals(self, other: "Duration") -> bool:
        _require_duration(other, "compare")
        return self.milliseconds == other.milliseconds

    def greater_than(self, other: "Duration") -> bool:
        _require_duration(other, "compare")
        return self.milliseconds > other.milliseconds

    def less_than(self, other: "Duration") -> bool:
        _require_duration(other, "compare")
        return self.milliseconds < other.milliseconds

    def greater_than_or_equal(self, other: "Duration") -> bool:
        _require_duration(other, "compare")
        return self.milliseconds >= other.milliseconds

    def less_than_or_equal(self, other: "Duration") -> bool:
        _require_duration(other, "compare")
        return self.milliseconds <= other.milliseconds

    # Formatting

    def format(self, *, max_units: int = DEFAULT_MAX_UNITS, short: bool = False) -> str:
        """Render as human-readable text.

        Args:
            max_units: Maximum number of non-zero unit terms to show.
            short: Use abbreviated labels joined by spaces (``"1d 2h"``)
                instead of full names joined by commas (``"1 day, 2 hours"``).

        Raises:
            ValueError: If ``max_units`` is less than 1.
        """
        return format_duration(self, FormatOptions(max_units=max_units, short=short))

    @override
    def __str__(self) -> str:
        return self.format()


def _require_duration(other: Any, action: str) -> None:
    if not isinstance(other, Duration):
        raise TypeError(
            f"Cannot {action} Duration and {type(other).__name__!r}.\n"
            f"Hint: wrap plain numbers first, e.g. Duration.from_seconds(5)"
        )


def _require_factor(factor: Any, action: str) -> None:
    if not _is_real(factor):
        raise TypeError(
            f"Cannot {action} a Duration by {type(factor).__name__!r}; "
            f"expected a real number"
        )
