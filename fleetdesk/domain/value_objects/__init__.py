"""Domain value objects - Immutable objects defined by their attributes."""

from .document_kind import DocumentKind
from .expiry_labels import ExpiryLabels
from .expiry_status import SEVERITY_BY_STATUS, ExpiryStatus, ExpiryStatusKind
from .notification_level import NotificationLevel
from .session import GateDecision, Session, SessionState
from .severity import SeverityToken
from .thresholds import ExpiryThresholds
from .trip_code import TRIP_CODE_ALPHABET, TRIP_CODE_SUFFIX_LENGTH, TripCode

__all__ = [
    "SEVERITY_BY_STATUS",
    "TRIP_CODE_ALPHABET",
    "TRIP_CODE_SUFFIX_LENGTH",
    "DocumentKind",
    "ExpiryLabels",
    "ExpiryStatus",
    "ExpiryStatusKind",
    "ExpiryThresholds",
    "GateDecision",
    "NotificationLevel",
    "Session",
    "SessionState",
    "SeverityToken",
    "TripCode",
]
