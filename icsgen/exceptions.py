"""Exceptions for icsgen library."""


class CalendarError(Exception):
    """Base exception for all icsgen errors."""


class CalendarValidationError(CalendarError):
    """Exception raised when a calendar component model is invalid.

    The 'message' attribute contains a human-readable message about the
    error that occurred. The 'detailed_error' attribute can provide additional
    information about the error, such as the full pydantic validation
    output, useful for debugging purposes.
    """

    def __init__(self, message: str, *, detailed_error: str | None = None) -> None:
        """Initialize the CalendarValidationError with a message."""
        super().__init__(message)
        self.message = message
        self.detailed_error = detailed_error


class CalendarEncodeError(CalendarError):
    """Exception raised when a value can't be written as rfc5545 text.

    Errors raised by the destination the calendar is written to, such as an
    OSError from a file, are not wrapped in this exception.
    """
