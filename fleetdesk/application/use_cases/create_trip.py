"""Use case for creating trips with a generated trip code."""

import logging
from collections.abc import Callable
from dataclasses import dataclass
from datetime import UTC, datetime

from ...domain.entities import Trip
from ...domain.services import TripCodeGenerator
from ..exceptions import TripCodeConflictError, TripCodeExhaustedError
from ..ports import TripRepository

logger = logging.getLogger(__name__)

DEFAULT_MAX_ATTEMPTS = 5


@dataclass(frozen=True, slots=True)
class TripDraft:
    """Caller-supplied trip fields; ``trip_code`` is generated when empty."""

    vehicle_id: str
    driver_id: str
    departure_date: str
    trip_code: str | None = None
    route_id: str | None = None
    customer_id: str | None = None
    notes: str | None = None


class CreateTrip:
    """Persist a new trip, regenerating its code if the store reports a collision."""

    def __init__(
        self,
        trip_repository: TripRepository,
        generator: TripCodeGenerator,
        *,
        clock: Callable[[], datetime] | None = None,
        max_attempts: int = DEFAULT_MAX_ATTEMPTS,
    ) -> None:
        if max_attempts < 1:
            msg = f"max_attempts must be at least 1, got {max_attempts}"
            raise ValueError(msg)
        self._trips = trip_repository
        self._generator = generator
        self._clock = clock or (lambda: datetime.now(UTC))
        self._max_attempts = max_attempts

    async def execute(self, draft: TripDraft, now: datetime | None = None) -> Trip:
        """
        Insert the trip described by ``draft``.

        Raises:
            TripCodeConflictError: If a caller-supplied code is already taken.
            TripCodeExhaustedError: If every generated code collided.
        """
        if draft.trip_code:
            return await self._trips.insert(self._build(draft, draft.trip_code))

        when = now or self._clock()
        for attempt in range(1, self._max_attempts + 1):
            code = str(self._generator.generate(when))
            try:
                trip = await self._trips.insert(self._build(draft, code))
            except TripCodeConflictError:
                logger.warning(
                    "Trip code %s already taken (attempt %d/%d)",
                    code,
                    attempt,
                    self._max_attempts,
                )
                continue
            logger.info("Created trip %s", trip.trip_code)
            return trip

        msg = f"Could not generate a unique trip code after {self._max_attempts} attempts"
        raise TripCodeExhaustedError(msg)

    @staticmethod
    def _build(draft: TripDraft, code: str) -> Trip:
        return Trip(
            trip_code=code,
            vehicle_id=draft.vehicle_id,
            driver_id=draft.driver_id,
            departure_date=draft.departure_date,
            route_id=draft.route_id,
            customer_id=draft.customer_id,
            notes=draft.notes,
        )
