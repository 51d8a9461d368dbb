"""Use case for checking and reporting expiring fleet documents."""

import logging
from collections.abc import Callable
from dataclasses import dataclass
from datetime import UTC, datetime

from ...domain.entities import ExpiryAlertReport
from ...domain.services import ExpiryAlertAnalyzer, ExpiryClassifier
from ..ports import DriverRepository, NotificationSender, VehicleRepository

logger = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class CheckResult:
    """Result of the document expiry check use case."""

    report: ExpiryAlertReport
    notifications_sent: int
    notifications_failed: int
    dry_run: bool

    @property
    def success(self) -> bool:
        """Check if the operation was successful."""
        return self.notifications_failed == 0


class CheckDocumentExpiry:
    """
    Use case for checking vehicle and driver documents and sending alerts.

    Orchestrates the domain analyzer and the infrastructure adapters.
    """

    def __init__(
        self,
        vehicle_repository: VehicleRepository,
        driver_repository: DriverRepository,
        notification_senders: list[NotificationSender],
        classifier: ExpiryClassifier,
        *,
        clock: Callable[[], datetime] | None = None,
        dry_run: bool = False,
    ) -> None:
        """
        Initialize the use case.

        Args:
            vehicle_repository: Adapter for retrieving vehicles.
            driver_repository: Adapter for retrieving drivers.
            notification_senders: List of notification adapters.
            classifier: Expiry classifier used for every document.
            clock: Source of the evaluation time.
            dry_run: If True, don't actually send notifications.
        """
        self._vehicles = vehicle_repository
        self._drivers = driver_repository
        self._senders = [s for s in notification_senders if s.is_configured()]
        self._analyzer = ExpiryAlertAnalyzer(classifier)
        self._clock = clock or (lambda: datetime.now(UTC))
        self._dry_run = dry_run

    async def build_report(self) -> ExpiryAlertReport:
        """Load records and analyze them without notifying."""
        vehicles = await self._vehicles.list_vehicles()
        drivers = await self._drivers.list_drivers()
        logger.info("Retrieved %d vehicles and %d drivers", len(vehicles), len(drivers))

        report = self._analyzer.analyze(vehicles, drivers, self._clock())
        logger.info("Analysis complete: %s", report.get_summary())
        return report

    async def execute(self) -> CheckResult:
        """
        Execute the document expiry check.

        Returns:
            CheckResult containing the report and notification status.
        """
        logger.info("Starting document expiry check...")
        report = await self.build_report()

        sent = 0
        failed = 0

        if not report.requires_notification:
            logger.info("No documents require notification")
        elif self._dry_run:
            logger.info("DRY RUN: Would send notifications for %d alerts", len(report.alerts))
            self._log_dry_run_report(report)
        elif not self._senders:
            logger.warning("No notification senders configured")
        else:
            sent, failed = await self._send_notifications(report)

        return CheckResult(
            report=report,
            notifications_sent=sent,
            notifications_failed=failed,
            dry_run=self._dry_run,
        )

    async def _send_notifications(self, report: ExpiryAlertReport) -> tuple[int, int]:
        """Send notifications through all configured senders."""
        sent = 0
        failed = 0

        for sender in self._senders:
            try:
                if await sender.send(report):
                    sent += 1
                    logger.info("Notification sent via %s", sender.__class__.__name__)
                else:
                    failed += 1
                    logger.warning("Notification failed via %s", sender.__class__.__name__)
            except Exception:
                failed += 1
                logger.exception("Error sending notification via %s", sender.__class__.__name__)

        return sent, failed

    def _log_dry_run_report(self, report: ExpiryAlertReport) -> None:
        """Log report details in dry run mode."""
        logger.info("  Level: %s", report.notification_level.value)
        logger.info("  Summary: %s", report.get_summary())
        logger.info("  Vehicles affected: %d", report.vehicle_warning_count)
        logger.info("  Drivers affected: %d", report.driver_warning_count)
        for alert in report.sorted_by_urgency():
            logger.info(
                "  %s %s: %s",
                alert.subject_name,
                alert.document.display_name,
                alert.status.label,
            )
