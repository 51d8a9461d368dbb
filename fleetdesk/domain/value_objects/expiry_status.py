"""Expiry status value objects."""

from dataclasses import dataclass
from enum import StrEnum, auto

from .severity import SeverityToken


class ExpiryStatusKind(StrEnum):
    """Bucket describing how urgently a dated document needs attention."""

    UNKNOWN = auto()
    EXPIRED = auto()
    CRITICAL = auto()
    WARNING = auto()
    SAFE = auto()

    @property
    def requires_attention(self) -> bool:
        """Check if this status requires attention."""
        return self is not ExpiryStatusKind.SAFE

    @property
    def severity(self) -> SeverityToken:
        """Presentation token for this status."""
        return SEVERITY_BY_STATUS[self]

    def __str__(self) -> str:
        return self.value


# Expired and critical share the same token.
SEVERITY_BY_STATUS: dict[ExpiryStatusKind, SeverityToken] = {
    ExpiryStatusKind.UNKNOWN: SeverityToken.NEUTRAL,
    ExpiryStatusKind.EXPIRED: SeverityToken.DANGER,
    ExpiryStatusKind.CRITICAL: SeverityToken.DANGER,
    ExpiryStatusKind.WARNING: SeverityToken.CAUTION,
    ExpiryStatusKind.SAFE: SeverityToken.OK,
}


@dataclass(frozen=True, slots=True)
class ExpiryStatus:
    """Result of classifying a single document date."""

    status: ExpiryStatusKind
    color_class: SeverityToken
    label: str
    days_left: int | None = None

    @property
    def requires_attention(self) -> bool:
        """Check if this result requires attention."""
        return self.status.requires_attention
