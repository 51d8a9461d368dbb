"""Notification sender adapter implementations."""

from .base import BaseNotificationSender
from .webhook import WebhookConfig, WebhookNotificationSender

__all__ = [
    "BaseNotificationSender",
    "WebhookConfig",
    "WebhookNotificationSender",
]
