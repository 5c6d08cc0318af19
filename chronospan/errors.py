"""Exception hierarchy for duration parsing and arithmetic."""


class DurationError(Exception):
    """Base exception for chronospan errors."""


class FormatError(DurationError, ValueError):
    """Raised when text does not match the unit-suffixed duration grammar.

    The offending input is kept on ``text`` for diagnostics.
    """

    def __init__(self, text: object) -> None:
        super().__init__(f"Invalid duration format: {text!r}")
        self.text = text


class DivisionByZeroError(DurationError, ZeroDivisionError):
    """Raised when a duration is divided by a zero factor."""

    def __init__(self, message: str = "Cannot divide by zero") -> None:
        super().__init__(message)
