"""Tests for the CheckDocumentExpiry use case."""

from __future__ import annotations

from datetime import UTC, datetime
from zoneinfo import ZoneInfo

import pytest

from fleetdesk.application.use_cases import CheckDocumentExpiry
from fleetdesk.domain.entities import Driver, Vehicle
from fleetdesk.domain.services import ExpiryClassifier
from tests.fakes import InMemoryDriverRepository, InMemoryVehicleRepository, RecordingSender


def _use_case(
    classifier: ExpiryClassifier,
    vehicles: list[Vehicle],
    drivers: list[Driver],
    now: datetime,
    senders: list[RecordingSender],
    *,
    dry_run: bool = False,
) -> CheckDocumentExpiry:
    return CheckDocumentExpiry(
        vehicle_repository=InMemoryVehicleRepository(vehicles),
        driver_repository=InMemoryDriverRepository(drivers),
        notification_senders=senders,
        classifier=classifier,
        clock=lambda: now,
        dry_run=dry_run,
    )


class TestCheckDocumentExpiry:
    """Tests for CheckDocumentExpiry."""

    @pytest.mark.asyncio
    async def test_sends_to_configured_senders(
        self,
        classifier: ExpiryClassifier,
        vehicles: list[Vehicle],
        drivers: list[Driver],
        now: datetime,
    ) -> None:
        configured = RecordingSender()
        disabled = RecordingSender(configured=False)
        use_case = _use_case(classifier, vehicles, drivers, now, [configured, disabled])

        result = await use_case.execute()

        assert result.success is True
        assert result.notifications_sent == 1
        assert len(configured.reports) == 1
        assert disabled.reports == []
        assert result.report.expired_count == 1

    @pytest.mark.asyncio
    async def test_failed_sender_is_counted(
        self,
        classifier: ExpiryClassifier,
        vehicles: list[Vehicle],
        drivers: list[Driver],
        now: datetime,
    ) -> None:
        use_case = _use_case(
            classifier, vehicles, drivers, now, [RecordingSender(result=False), RecordingSender()]
        )

        result = await use_case.execute()

        assert result.notifications_sent == 1
        assert result.notifications_failed == 1
        assert result.success is False

    @pytest.mark.asyncio
    async def test_dry_run_does_not_send(
        self,
        classifier: ExpiryClassifier,
        vehicles: list[Vehicle],
        drivers: list[Driver],
        now: datetime,
    ) -> None:
        sender = RecordingSender()
        use_case = _use_case(classifier, vehicles, drivers, now, [sender], dry_run=True)

        result = await use_case.execute()

        assert result.dry_run is True
        assert result.notifications_sent == 0
        assert sender.reports == []

    @pytest.mark.asyncio
    async def test_nothing_to_report(self, classifier: ExpiryClassifier, now: datetime) -> None:
        sender = RecordingSender()
        use_case = _use_case(classifier, [], [], now, [sender])

        result = await use_case.execute()

        assert result.report.requires_notification is False
        assert sender.reports == []
        assert result.success is True

    @pytest.mark.asyncio
    async def test_build_report_uses_clock(
        self,
        classifier: ExpiryClassifier,
        vehicles: list[Vehicle],
        now: datetime,
    ) -> None:
        later = now.replace(year=2027)
        use_case = _use_case(classifier, vehicles, [], later, [])

        report = await use_case.build_report()

        # Every dated document has lapsed by 2027-01-15
        assert report.expired_count == 9


class TestLocalCalendarDay:
    """The evaluation day follows the fleet's time zone, not UTC."""

    @pytest.mark.asyncio
    async def test_local_morning_sees_yesterday_as_expired(self, classifier: ExpiryClassifier) -> None:
        # 23:00 UTC on the 14th is 06:00 on the 15th in Ho Chi Minh City
        instant = datetime(2026, 1, 14, 23, 0, tzinfo=UTC)
        vehicle = Vehicle(
            id="v-9",
            vehicle_code="XE09",
            license_plate="79C-999.99",
            registration_expiry_date="2026-01-14",
            insurance_expiry_date="2026-12-31",
            next_maintenance_date="2026-12-31",
        )
        use_case = _use_case(classifier, [vehicle], [], instant.astimezone(ZoneInfo("Asia/Ho_Chi_Minh")), [])

        report = await use_case.build_report()

        assert report.expired_count == 1
        assert report.critical_count == 0
        assert report.alerts[0].status.days_left == -1
