"""Expiry alert report aggregate root."""

from dataclasses import dataclass, field
from datetime import UTC, datetime
from typing import Literal

from ..value_objects import (
    DocumentKind,
    ExpiryStatus,
    ExpiryStatusKind,
    NotificationLevel,
)

SubjectType = Literal["vehicle", "driver"]

BADGE_LIMIT = 99


@dataclass(frozen=True, slots=True)
class ExpiryAlert:
    """A single document on a vehicle or driver that needs attention."""

    subject_type: SubjectType
    subject_id: str
    subject_name: str
    document: DocumentKind
    status: ExpiryStatus

    @property
    def kind(self) -> ExpiryStatusKind:
        return self.status.status


@dataclass(slots=True)
class ExpiryAlertReport:
    """Aggregate root representing one pass over the fleet's document dates."""

    alerts: list[ExpiryAlert]
    vehicles_checked: int = 0
    drivers_checked: int = 0
    generated_at: datetime = field(default_factory=lambda: datetime.now(UTC))

    _categorized: dict[ExpiryStatusKind, list[ExpiryAlert]] = field(
        init=False, repr=False, default_factory=dict
    )

    def __post_init__(self) -> None:
        """Categorize alerts by status."""
        self._categorized = {status: [] for status in ExpiryStatusKind}
        for alert in self.alerts:
            self._categorized[alert.kind].append(alert)

    @property
    def expired_count(self) -> int:
        return len(self._categorized[ExpiryStatusKind.EXPIRED])

    @property
    def critical_count(self) -> int:
        return len(self._categorized[ExpiryStatusKind.CRITICAL])

    @property
    def warning_count(self) -> int:
        return len(self._categorized[ExpiryStatusKind.WARNING])

    @property
    def unknown_count(self) -> int:
        return len(self._categorized[ExpiryStatusKind.UNKNOWN])

    @property
    def vehicle_warning_count(self) -> int:
        """Distinct vehicles with at least one document needing attention."""
        return self._distinct_subjects("vehicle")

    @property
    def driver_warning_count(self) -> int:
        """Distinct drivers with at least one document needing attention."""
        return self._distinct_subjects("driver")

    @property
    def maintenance_warning_count(self) -> int:
        """Vehicles whose next maintenance needs attention."""
        return self._distinct_subjects("vehicle", DocumentKind.MAINTENANCE)

    @property
    def license_warning_count(self) -> int:
        """Drivers whose license needs attention."""
        return self._distinct_subjects("driver", DocumentKind.LICENSE)

    @property
    def total_warnings(self) -> int:
        """Count shown on the header bell."""
        return self.vehicle_warning_count + self.driver_warning_count

    @property
    def badge_text(self) -> str:
        """Bell badge text, empty when nothing needs attention."""
        total = self.total_warnings
        if not total:
            return ""
        if total > BADGE_LIMIT:
            return f"{BADGE_LIMIT}+"
        return str(total)

    @property
    def notification_level(self) -> NotificationLevel:
        """Determine the overall notification level for this report."""
        if self.expired_count or self.critical_count:
            return NotificationLevel.CRITICAL
        if self.warning_count:
            return NotificationLevel.WARNING
        return NotificationLevel.INFO

    @property
    def requires_notification(self) -> bool:
        """Check if this report warrants sending a notification."""
        return bool(self.expired_count or self.critical_count or self.warning_count)

    def get_summary(self) -> str:
        """Generate a human-readable summary of the report."""
        parts: list[str] = []
        if self.expired_count:
            parts.append(f"{self.expired_count} expired")
        if self.critical_count:
            parts.append(f"{self.critical_count} critical")
        if self.warning_count:
            parts.append(f"{self.warning_count} warning")
        if self.unknown_count:
            parts.append(f"{self.unknown_count} unknown")

        if not parts:
            return "All documents are up to date"

        return f"{len(self.alerts)} documents requiring attention: {', '.join(parts)}"

    def sorted_by_urgency(self) -> list[ExpiryAlert]:
        """Alerts ordered by days left, undated documents last."""
        return sorted(
            self.alerts,
            key=lambda a: (a.status.days_left is None, a.status.days_left or 0),
        )

    def _distinct_subjects(
        self, subject_type: SubjectType, document: DocumentKind | None = None
    ) -> int:
        return len({
            a.subject_id
            for a in self.alerts
            if a.subject_type == subject_type and (document is None or a.document == document)
        })
