"""Base notification sender with common functionality."""

from __future__ import annotations

import logging
from abc import ABC, abstractmethod
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from ....domain.entities import ExpiryAlert, ExpiryAlertReport


class BaseNotificationSender(ABC):
    """Abstract base class for notification senders."""

    def __init__(self) -> None:
        """Initialize the notification sender."""
        self._logger = logging.getLogger(self.__class__.__name__)

    @abstractmethod
    async def send(self, report: ExpiryAlertReport) -> bool:
        """Send notification for the given report."""
        ...

    @abstractmethod
    def is_configured(self) -> bool:
        """Check if the sender is properly configured."""
        ...

    def format_alert_list(
        self,
        alerts: list[ExpiryAlert],
        *,
        max_items: int = 10,
    ) -> str:
        """Format a list of alerts for display."""
        lines = [
            f"• {alert.subject_name} - {alert.document.display_name}: {alert.status.label}"
            for alert in alerts[:max_items]
        ]

        if len(alerts) > max_items:
            lines.append(f"... and {len(alerts) - max_items} more")

        return "\n".join(lines)
