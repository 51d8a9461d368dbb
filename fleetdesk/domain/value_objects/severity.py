"""Severity colour token value object."""

from enum import StrEnum, auto


class SeverityToken(StrEnum):
    """Presentation token for an expiry status (not a colour value)."""

    NEUTRAL = auto()
    DANGER = auto()
    CAUTION = auto()
    OK = auto()

    def __str__(self) -> str:
        return self.value

    @property
    def css_class(self) -> str:
        """Utility classes used by the dashboard badges."""
        match self:
            case SeverityToken.NEUTRAL:
                return "bg-gray-100 text-gray-800"
            case SeverityToken.DANGER:
                return "bg-red-100 text-red-800"
            case SeverityToken.CAUTION:
                return "bg-yellow-100 text-yellow-800"
            case SeverityToken.OK:
                return "bg-green-100 text-green-800"
