"""Errors raised by CountMap."""


class InvalidArgument(ValueError):
    """Raised when a count amount is negative where it is not allowed."""
