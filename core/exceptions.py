"""Custom exceptions for the people demo."""


class PeopleError(Exception):
    """Base exception for people-related errors."""
    pass


class InvalidPersonError(PeopleError):
    """Exception raised when person data cannot be loaded."""
    pass
