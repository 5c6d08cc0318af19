"""Tests for human-readable duration formatting."""

import pytest

from chronospan import Duration, FormatOptions, format_duration


def test_zero_duration():
    assert Duration(0).format() == "0 milliseconds"
    assert Duration(0).format(short=True) == "0ms"


def test_single_unit_is_singular():
    assert Duration.from_string("1s").format() == "1 second"
    assert Duration(1).format() == "1 millisecond"
    assert Duration.from_months(1).format() == "1 month"


def test_plural_units():
    assert Duration(2).format() == "2 milliseconds"
    assert Duration.from_days(3).format() == "3 days"


def test_default_max_units_is_two():
    duration = Duration.from_components(hours=2, minutes=30, seconds=45)
    assert duration.format() == "2 hours, 30 minutes"


def test_short_format():
    duration = Duration.from_components(days=1, hours=2, minutes=30)
    assert duration.format(short=True) == "1d 2h"
    assert Duration(1500).format(short=True) == "1s 500ms"


def test_mixed_seconds_and_milliseconds():
    assert Duration(1500).format() == "1 second, 500 milliseconds"


def test_max_units():
    duration = Duration.from_components(days=2, hours=3, minutes=45, seconds=30)

    assert duration.format(max_units=4) == "2 days, 3 hours, 45 minutes, 30 seconds"
    assert duration.format(max_units=1) == "2 days"
    assert duration.format(max_units=10, short=True) == "2d 3h 45m 30s"


def test_zero_buckets_are_skipped():
    """Only non-zero buckets count towards max_units."""
    duration = Duration.from_components(hours=1, seconds=5)
    assert duration.format() == "1 hour, 5 seconds"


def test_cascade_is_a_readout():
    """Buckets come from the accessors, so 365 days reads as a year plus 5 days."""
    assert Duration.from_string("1y").format() == "1 year, 5 days"
    assert Duration.from_string("1w").format(short=True) == "7d"


def test_sub_millisecond_falls_back_to_raw_count():
    assert Duration(0.5).format() == "0 milliseconds"
    assert Duration(0.5).format(short=True) == "0ms"
    assert Duration(-0.5).format() == "0 milliseconds"


def test_negative_durations_are_prefixed():
    assert Duration(-1500).format() == "-1 second, 500 milliseconds"
    assert Duration(-1500).format(short=True) == "-1s 500ms"
    assert Duration.from_hours(-2).format() == "-2 hours"


def test_fractional_milliseconds_are_floored():
    assert Duration(1500.75).format() == "1 second, 500 milliseconds"


def test_str_uses_default_format():
    assert str(Duration.from_seconds(90)) == "1 minute, 30 seconds"


def test_format_duration_with_options():
    duration = Duration.from_components(days=1, hours=2, minutes=30)
    options = FormatOptions(max_units=3, short=True)

    assert format_duration(duration, options) == "1d 2h 30m"
    assert format_duration(duration) == "1 day, 2 hours"


@pytest.mark.parametrize("max_units", [0, -1])
def test_max_units_must_be_positive(max_units: int):
    with pytest.raises(ValueError, match="max_units must be >= 1"):
        Duration(1000).format(max_units=max_units)


def test_max_units_must_be_int():
    with pytest.raises(TypeError, match="max_units must be an int"):
        FormatOptions(max_units=1.5)  # pyright: ignore[reportArgumentType]

    with pytest.raises(TypeError):
        FormatOptions(max_units=True)


def test_short_must_be_bool():
    with pytest.raises(TypeError, match="short must be a bool"):
        Duration(1000).format(short="no")  # pyright: ignore[reportArgumentType]


def test_infinite_durations_render_as_years():
    """Overflowing arithmetic still formats instead of raising."""
    huge = Duration(1e308).multiply(10)

    assert huge.format() == "inf years"
    assert huge.format(short=True) == "infy"
    assert (-huge).format() == "-inf years"


def test_nan_duration_renders_as_milliseconds():
    assert Duration(float("nan")).format() == "nan milliseconds"
    assert Duration(float("nan")).format(short=True) == "nanms"
