"""Tests for the unit-suffixed duration string parser."""

import pytest

from chronospan import UNITS, FormatError, parse_duration
from chronospan.util import DAY, HOUR, MINUTE, SECOND, WEEK, YEAR


@pytest.mark.parametrize(
    ("text", "expected"),
    [
        ("0ms", 0),
        ("250ms", 250),
        ("1s", SECOND),
        ("90s", 90 * SECOND),
        ("5m", 5 * MINUTE),
        ("2h", 2 * HOUR),
        ("3d", 3 * DAY),
        ("1w", WEEK),
        ("1y", YEAR),
        ("10 m", 10 * MINUTE),
        ("007s", 7 * SECOND),
    ],
)
def test_parse_valid_strings(text: str, expected: int) -> None:
    assert parse_duration(text) == expected


def test_unit_multipliers():
    """Multipliers are fixed: 365-day years, no leap-year adjustment."""
    assert UNITS == {
        "ms": 1,
        "s": 1000,
        "m": 60_000,
        "h": 3_600_000,
        "d": 86_400_000,
        "w": 604_800_000,
        "y": 31_536_000_000,
    }


def test_single_whitespace_separator_is_allowed():
    assert parse_duration("1\ts") == SECOND


@pytest.mark.parametrize(
    "text",
    [
        "",
        "1",
        "ms",
        "10z",
        "1.5s",
        "-1s",
        "+1s",
        "1S",
        "1MS",
        "1  s",
        " 1s",
        "1s ",
        "1s\n",
        "1e3ms",
        "1mo",
        "1 hour",
        "1s2m",
        "١s",  # Arabic-Indic digit one
    ],
)
def test_parse_rejects_malformed_strings(text: str) -> None:
    with pytest.raises(FormatError, match="Invalid duration format"):
        parse_duration(text)


def test_format_error_carries_input():
    with pytest.raises(FormatError) as excinfo:
        parse_duration("10z")

    assert excinfo.value.text == "10z"
    assert "'10z'" in str(excinfo.value)


def test_format_error_is_a_value_error():
    """Callers catching ValueError also see malformed durations."""
    with pytest.raises(ValueError):
        parse_duration("soon")


def test_parse_rejects_non_string_input():
    with pytest.raises(FormatError) as excinfo:
        parse_duration(5)  # pyright: ignore[reportArgumentType]

    assert excinfo.value.text == 5
