"""Port for notification sending - driven/secondary port."""

from typing import Protocol

from ...domain.entities import ExpiryAlertReport


class NotificationSender(Protocol):
    """
    Port for sending notifications.

    This is a driven (secondary) port that defines how the application
    sends expiry alerts to external systems.
    """

    async def send(self, report: ExpiryAlertReport) -> bool:
        """
        Send a notification based on the alert report.

        Returns:
            True if notification was sent successfully.
        """
        ...

    def is_configured(self) -> bool:
        """Check if this notification sender is properly configured."""
        ...
