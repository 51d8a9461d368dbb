"""Tracked document kind value object."""

from enum import StrEnum, auto


class DocumentKind(StrEnum):
    """Dated document tracked on a vehicle or driver record."""

    REGISTRATION = auto()
    INSURANCE = auto()
    MAINTENANCE = auto()
    LICENSE = auto()
    HEALTH_CHECK = auto()

    def __str__(self) -> str:
        return self.value

    @property
    def display_name(self) -> str:
        """Human-readable display name."""
        match self:
            case DocumentKind.REGISTRATION:
                return "Registration"
            case DocumentKind.INSURANCE:
                return "Insurance"
            case DocumentKind.MAINTENANCE:
                return "Next maintenance"
            case DocumentKind.LICENSE:
                return "Driving license"
            case DocumentKind.HEALTH_CHECK:
                return "Health check"
