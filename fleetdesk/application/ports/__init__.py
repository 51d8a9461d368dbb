"""Application ports - Interfaces for external adapters."""

from .fleet_repository import DriverRepository, TripRepository, VehicleRepository
from .notification_sender import NotificationSender
from .session_provider import SessionProvider

__all__ = [
    "DriverRepository",
    "NotificationSender",
    "SessionProvider",
    "TripRepository",
    "VehicleRepository",
]
