"""Domain entities - Objects with identity and lifecycle."""

from .driver import Driver
from .expiry_alert_report import ExpiryAlert, ExpiryAlertReport
from .trip import Trip
from .vehicle import Vehicle

__all__ = [
    "Driver",
    "ExpiryAlert",
    "ExpiryAlertReport",
    "Trip",
    "Vehicle",
]
