"""Generic webhook notification sender."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import UTC, datetime
from typing import TYPE_CHECKING, Any

import httpx

from .base import BaseNotificationSender

if TYPE_CHECKING:
    from ....domain.entities import ExpiryAlert, ExpiryAlertReport


@dataclass(frozen=True, slots=True)
class WebhookConfig:
    """Webhook notification configuration."""

    enabled: bool = False
    url: str = ""
    timeout: float = 30.0


class WebhookNotificationSender(BaseNotificationSender):
    """Send expiry alerts via generic HTTP webhook with JSON payload."""

    def __init__(
        self,
        config: WebhookConfig,
        *,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        """Initialize the webhook sender."""
        super().__init__()
        self._config = config
        self._transport = transport

    def is_configured(self) -> bool:
        """Check if webhook is properly configured."""
        return self._config.enabled and bool(self._config.url)

    async def send(self, report: ExpiryAlertReport) -> bool:
        """Send webhook notification with JSON payload."""
        if not self.is_configured():
            self._logger.warning("Webhook sender not configured")
            return False

        try:
            payload = self.build_payload(report)

            async with httpx.AsyncClient(
                timeout=self._config.timeout, transport=self._transport
            ) as client:
                response = await client.post(self._config.url, json=payload)
                response.raise_for_status()

            self._logger.info("Webhook notification sent to %s", self._config.url)
            return True

        except Exception:
            self._logger.exception("Failed to send webhook notification")
            return False

    def build_payload(self, report: ExpiryAlertReport) -> dict[str, Any]:
        """Build the JSON payload for the webhook."""
        return {
            "event_type": "fleet_document_expiry_alert",
            "timestamp": datetime.now(UTC).isoformat(),
            "level": report.notification_level.value,
            "summary": report.get_summary(),
            "text": self.format_alert_list(report.sorted_by_urgency()),
            "statistics": {
                "vehicles_checked": report.vehicles_checked,
                "drivers_checked": report.drivers_checked,
                "vehicles_affected": report.vehicle_warning_count,
                "drivers_affected": report.driver_warning_count,
                "expired_count": report.expired_count,
                "critical_count": report.critical_count,
                "warning_count": report.warning_count,
                "unknown_count": report.unknown_count,
            },
            "alerts": [self._format_alert(a) for a in report.sorted_by_urgency()],
        }

    @staticmethod
    def _format_alert(alert: ExpiryAlert) -> dict[str, Any]:
        return {
            "subject_type": alert.subject_type,
            "subject_id": alert.subject_id,
            "subject_name": alert.subject_name,
            "document": str(alert.document),
            "status": alert.status.status.value,
            "color_class": alert.status.color_class.value,
            "label": alert.status.label,
            "days_left": alert.status.days_left,
        }
