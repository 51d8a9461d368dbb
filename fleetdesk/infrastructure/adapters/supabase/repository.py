"""Supabase-backed fleet repositories."""

from __future__ import annotations

import logging

from ....application.exceptions import TripCodeConflictError
from ....domain.entities import Driver, Trip, Vehicle
from ....domain.value_objects import Session
from .client import SupabaseClient, UniqueViolationError

logger = logging.getLogger(__name__)

ACTIVE_ONLY = {"is_deleted": "not.is.true"}


class SupabaseVehicleRepository:
    """Implements the VehicleRepository port on the ``vehicles`` table."""

    def __init__(self, client: SupabaseClient) -> None:
        self._client = client

    async def list_vehicles(self) -> list[Vehicle]:
        rows = await self._client.select("vehicles", filters=ACTIVE_ONLY, order="created_at.desc")
        return [Vehicle.from_row(row) for row in rows]


class SupabaseDriverRepository:
    """Implements the DriverRepository port on the ``drivers`` table."""

    def __init__(self, client: SupabaseClient) -> None:
        self._client = client

    async def list_drivers(self) -> list[Driver]:
        rows = await self._client.select("drivers", filters=ACTIVE_ONLY, order="created_at.desc")
        return [Driver.from_row(row) for row in rows]


class SupabaseTripRepository:
    """Implements the TripRepository port on the ``trips`` table."""

    TRIP_CODE_CONSTRAINT = "trips_trip_code_key"

    def __init__(self, client: SupabaseClient, *, access_token: str | None = None) -> None:
        self._client = client
        self._access_token = access_token

    async def insert(self, trip: Trip) -> Trip:
        try:
            row = await self._client.insert(
                "trips", trip.to_row(), access_token=self._access_token
            )
        except UniqueViolationError as e:
            if e.constraint in (None, self.TRIP_CODE_CONSTRAINT):
                msg = f"Trip code {trip.trip_code} already exists"
                raise TripCodeConflictError(msg) from e
            raise
        return Trip.from_row(row)


class SupabaseSessionProvider:
    """Implements the SessionProvider port against the GoTrue user endpoint."""

    def __init__(self, client: SupabaseClient) -> None:
        self._client = client

    async def get_session(self, access_token: str) -> Session | None:
        if not access_token:
            return None
        user = await self._client.get_user(access_token)
        if not user or not user.get("id"):
            logger.info("Rejected access token")
            return None
        return Session(
            user_id=str(user["id"]),
            email=user.get("email"),
            access_token=access_token,
        )
