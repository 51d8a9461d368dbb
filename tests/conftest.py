"""Pytest configuration and shared fixtures."""

from __future__ import annotations

from datetime import UTC, date, datetime

import pytest

from fleetdesk.domain.entities import Driver, Vehicle
from fleetdesk.domain.services import ExpiryClassifier, TripCodeGenerator
from fleetdesk.domain.value_objects import ExpiryLabels, ExpiryThresholds
from tests.fakes import fixed_suffixes


@pytest.fixture
def now() -> datetime:
    """Pinned evaluation time."""
    return datetime(2026, 1, 15, 9, 30, tzinfo=UTC)


@pytest.fixture
def today(now: datetime) -> date:
    return now.date()


@pytest.fixture
def default_thresholds() -> ExpiryThresholds:
    """Default expiry thresholds."""
    return ExpiryThresholds(critical=7, warning=30)


@pytest.fixture
def classifier(default_thresholds: ExpiryThresholds) -> ExpiryClassifier:
    """Classifier with English labels."""
    return ExpiryClassifier(default_thresholds, ExpiryLabels.english())


@pytest.fixture
def generator() -> TripCodeGenerator:
    """Generator with a deterministic suffix sequence."""
    return TripCodeGenerator("CH", suffix_source=fixed_suffixes("A7F4E", "B8G5F", "C9H6G"))


@pytest.fixture
def vehicles() -> list[Vehicle]:
    """A small fleet relative to 2026-01-15."""
    return [
        Vehicle(
            id="v-1",
            vehicle_code="XE01",
            license_plate="79C-123.45",
            latitude=12.2388,
            longitude=109.1967,
            registration_expiry_date="2026-01-10",
            insurance_expiry_date="2026-06-30",
            next_maintenance_date="2026-01-20",
        ),
        Vehicle(
            id="v-2",
            vehicle_code="XE02",
            license_plate="79C-678.90",
            registration_expiry_date="2026-12-31",
            insurance_expiry_date="2026-12-31",
            next_maintenance_date="2026-12-31",
        ),
        Vehicle(
            id="v-3",
            vehicle_code="XE03",
            license_plate="79C-111.11",
            registration_expiry_date="2026-02-01",
            insurance_expiry_date="2026-12-31",
            next_maintenance_date="2026-12-31",
        ),
    ]


@pytest.fixture
def drivers() -> list[Driver]:
    """Drivers relative to 2026-01-15."""
    return [
        Driver(
            id="d-1",
            driver_code="TX01",
            full_name="Nguyen Van A",
            license_expiry="2026-12-31",
            health_check_expiry=None,
        ),
        Driver(
            id="d-2",
            driver_code="TX02",
            full_name="Tran Thi B",
            license_expiry="2026-12-31",
            health_check_expiry="2026-12-31",
        ),
    ]
