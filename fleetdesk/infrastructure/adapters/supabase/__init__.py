"""Supabase adapters for the fleet record store and auth."""

from .client import SupabaseClient, SupabaseClientConfig, UniqueViolationError
from .repository import (
    SupabaseDriverRepository,
    SupabaseSessionProvider,
    SupabaseTripRepository,
    SupabaseVehicleRepository,
)

__all__ = [
    "SupabaseClient",
    "SupabaseClientConfig",
    "SupabaseDriverRepository",
    "SupabaseSessionProvider",
    "SupabaseTripRepository",
    "SupabaseVehicleRepository",
    "UniqueViolationError",
]
