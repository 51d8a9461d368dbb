"""Application layer exceptions."""


class ApplicationError(Exception):
    """Base exception for application errors."""


class RecordStoreError(ApplicationError):
    """Raised when record store operations fail."""


class TripCodeConflictError(RecordStoreError):
    """Raised when the trip store rejects a duplicate trip code."""


class TripCodeExhaustedError(ApplicationError):
    """Raised when no unique trip code could be generated."""


class NotificationError(ApplicationError):
    """Raised when notification sending fails."""


class ConfigurationError(ApplicationError):
    """Raised when configuration is invalid."""


class AuthenticationError(ApplicationError):
    """Raised when a request has no valid session."""
