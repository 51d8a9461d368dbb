"""Notification level value object."""

from enum import StrEnum, auto


class NotificationLevel(StrEnum):
    """Severity level for alert notifications."""

    CRITICAL = auto()
    WARNING = auto()
    INFO = auto()

    @property
    def emoji(self) -> str:
        """Get emoji representation for this level."""
        match self:
            case NotificationLevel.CRITICAL:
                return "🔴"
            case NotificationLevel.WARNING:
                return "🟡"
            case NotificationLevel.INFO:
                return "🟢"
