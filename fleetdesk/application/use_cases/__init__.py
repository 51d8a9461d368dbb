"""Application use cases."""

from .check_document_expiry import CheckDocumentExpiry, CheckResult
from .create_trip import CreateTrip, TripDraft

__all__ = [
    "CheckDocumentExpiry",
    "CheckResult",
    "CreateTrip",
    "TripDraft",
]
