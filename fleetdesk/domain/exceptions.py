"""Domain exceptions."""


class DomainError(Exception):
    """Base exception for domain errors."""


class InvalidTripCodeError(DomainError):
    """Raised when a string is not a well-formed trip code."""
