"""Ports for the fleet record store - driven/secondary ports."""

from typing import Protocol

from ...domain.entities import Driver, Trip, Vehicle


class VehicleRepository(Protocol):
    """
    Port for reading vehicle records.

    Implementations exclude soft-deleted rows.
    """

    async def list_vehicles(self) -> list[Vehicle]:
        """
        Retrieve all active vehicle records.

        Raises:
            RecordStoreError: If retrieval fails.
        """
        ...


class DriverRepository(Protocol):
    """Port for reading driver records."""

    async def list_drivers(self) -> list[Driver]:
        """
        Retrieve all active driver records.

        Raises:
            RecordStoreError: If retrieval fails.
        """
        ...


class TripRepository(Protocol):
    """Port for persisting trips."""

    async def insert(self, trip: Trip) -> Trip:
        """
        Insert a trip and return the stored row.

        Raises:
            TripCodeConflictError: If the trip code is already taken.
            RecordStoreError: If the insert fails for any other reason.
        """
        ...
