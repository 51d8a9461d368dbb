"""Infrastructure adapters - Implementations of application ports."""

from .notifications import WebhookNotificationSender
from .supabase import (
    SupabaseClient,
    SupabaseDriverRepository,
    SupabaseSessionProvider,
    SupabaseTripRepository,
    SupabaseVehicleRepository,
)

__all__ = [
    "SupabaseClient",
    "SupabaseDriverRepository",
    "SupabaseSessionProvider",
    "SupabaseTripRepository",
    "SupabaseVehicleRepository",
    "WebhookNotificationSender",
]
