"""Exceptions raised when a calculation is given unusable input."""


class InvalidArgumentError(ValueError):
    """A precondition on a numeric argument or timestamp was violated."""


class InvalidTimestampError(InvalidArgumentError):
    """The instant could not be interpreted as a UTC timestamp."""
