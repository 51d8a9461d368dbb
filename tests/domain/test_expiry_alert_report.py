"""Tests for the expiry alert analyzer and report aggregate."""

from __future__ import annotations

from datetime import datetime

from fleetdesk.domain.entities import Driver, ExpiryAlertReport, Vehicle
from fleetdesk.domain.services import ExpiryAlertAnalyzer, ExpiryClassifier
from fleetdesk.domain.value_objects import DocumentKind, ExpiryStatusKind, NotificationLevel


def _analyze(
    classifier: ExpiryClassifier,
    vehicles: list[Vehicle],
    drivers: list[Driver],
    now: datetime,
) -> ExpiryAlertReport:
    return ExpiryAlertAnalyzer(classifier).analyze(vehicles, drivers, now)


class TestExpiryAlertAnalyzer:
    """Tests for ExpiryAlertAnalyzer."""

    def test_collects_non_safe_documents(
        self,
        classifier: ExpiryClassifier,
        vehicles: list[Vehicle],
        drivers: list[Driver],
        now: datetime,
    ) -> None:
        report = _analyze(classifier, vehicles, drivers, now)

        assert len(report.alerts) == 4
        assert report.vehicles_checked == 3
        assert report.drivers_checked == 2
        assert {(a.subject_id, a.document) for a in report.alerts} == {
            ("v-1", DocumentKind.REGISTRATION),
            ("v-1", DocumentKind.MAINTENANCE),
            ("v-3", DocumentKind.REGISTRATION),
            ("d-1", DocumentKind.HEALTH_CHECK),
        }

    def test_empty_fleet(self, classifier: ExpiryClassifier, now: datetime) -> None:
        report = _analyze(classifier, [], [], now)
        assert report.alerts == []
        assert report.requires_notification is False
        assert report.notification_level == NotificationLevel.INFO
        assert report.get_summary() == "All documents are up to date"
        assert report.badge_text == ""


class TestExpiryAlertReport:
    """Tests for ExpiryAlertReport aggregate."""

    def test_counts(
        self,
        classifier: ExpiryClassifier,
        vehicles: list[Vehicle],
        drivers: list[Driver],
        now: datetime,
    ) -> None:
        report = _analyze(classifier, vehicles, drivers, now)

        assert report.expired_count == 1
        assert report.critical_count == 1
        assert report.warning_count == 1
        assert report.unknown_count == 1
        assert report.vehicle_warning_count == 2
        assert report.driver_warning_count == 1
        assert report.maintenance_warning_count == 1
        assert report.license_warning_count == 0
        assert report.total_warnings == 3
        assert report.badge_text == "3"

    def test_level_and_summary(
        self,
        classifier: ExpiryClassifier,
        vehicles: list[Vehicle],
        drivers: list[Driver],
        now: datetime,
    ) -> None:
        report = _analyze(classifier, vehicles, drivers, now)

        assert report.notification_level == NotificationLevel.CRITICAL
        assert report.requires_notification is True
        assert report.get_summary() == (
            "4 documents requiring attention: 1 expired, 1 critical, 1 warning, 1 unknown"
        )

    def test_sorted_by_urgency(
        self,
        classifier: ExpiryClassifier,
        vehicles: list[Vehicle],
        drivers: list[Driver],
        now: datetime,
    ) -> None:
        report = _analyze(classifier, vehicles, drivers, now)
        ordered = report.sorted_by_urgency()

        assert [a.status.days_left for a in ordered] == [-5, 5, 17, None]
        assert ordered[0].kind == ExpiryStatusKind.EXPIRED
        assert ordered[-1].subject_id == "d-1"

    def test_unknown_only_does_not_notify(self, classifier: ExpiryClassifier, now: datetime) -> None:
        """Unrecorded dates count on the badge but do not trigger a notification."""
        driver = Driver(id="d-9", driver_code="TX09", full_name="C", license_expiry="2027-01-01")
        report = _analyze(classifier, [], [driver], now)

        assert report.total_warnings == 1
        assert report.requires_notification is False
        assert report.notification_level == NotificationLevel.INFO

    def test_warning_level(self, classifier: ExpiryClassifier, now: datetime) -> None:
        vehicle = Vehicle(
            id="v-9",
            vehicle_code="XE09",
            license_plate="P",
            registration_expiry_date="2026-02-01",
            insurance_expiry_date="2027-01-01",
            next_maintenance_date="2027-01-01",
        )
        report = _analyze(classifier, [vehicle], [], now)
        assert report.notification_level == NotificationLevel.WARNING

    def test_badge_caps_at_99(self, classifier: ExpiryClassifier, now: datetime) -> None:
        drivers = [
            Driver(id=f"d-{i}", driver_code=f"TX{i}", full_name="X", license_expiry="2026-01-01")
            for i in range(120)
        ]
        report = _analyze(classifier, [], drivers, now)
        assert report.driver_warning_count == 120
        assert report.license_warning_count == 120
        assert report.badge_text == "99+"
