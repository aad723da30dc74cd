class InvalidTimeFormat(ValueError):
    """Raised when a time-of-day string is not a valid "HH:MM" value."""

    pass


class InvalidDateFormat(ValueError):
    """Raised when a calendar date is not a valid "YYYY-MM-DD" value."""

    pass


class InvalidTimeRange(ValueError):
    """Raised when a block or lunch window does not end after it starts."""

    pass
