"""Application settings loaded from environment variables."""

import os
from dataclasses import dataclass, field
from functools import cached_property
from zoneinfo import ZoneInfo, ZoneInfoNotFoundError

from ...domain.value_objects import ExpiryLabels, ExpiryThresholds
from ..adapters.notifications.webhook import WebhookConfig
from ..adapters.supabase.client import SupabaseClientConfig


def _env_bool(key: str, default: bool = False) -> bool:
    """Get boolean from environment variable."""
    return os.environ.get(key, str(default)).lower() in ("true", "1", "yes")


def _env_int(key: str, default: int) -> int:
    """Get integer from environment variable."""
    return int(os.environ.get(key, str(default)))


def _env_str(key: str, default: str = "") -> str:
    """Get string from environment variable."""
    return os.environ.get(key, default)


@dataclass
class Settings:
    """Application settings container."""

    # Supabase
    supabase_url: str = field(default_factory=lambda: _env_str("SUPABASE_URL"))
    supabase_key: str = field(default_factory=lambda: _env_str("SUPABASE_KEY"))
    supabase_timeout: int = field(default_factory=lambda: _env_int("SUPABASE_TIMEOUT", 30))

    # Expiry classification
    critical_threshold_days: int = field(default_factory=lambda: _env_int("CRITICAL_THRESHOLD_DAYS", 7))
    warning_threshold_days: int = field(default_factory=lambda: _env_int("WARNING_THRESHOLD_DAYS", 30))
    label_locale: str = field(default_factory=lambda: _env_str("LABEL_LOCALE", "en"))

    # Trip codes
    trip_code_prefix: str = field(default_factory=lambda: _env_str("TRIP_CODE_PREFIX", "CH"))
    trip_code_max_attempts: int = field(default_factory=lambda: _env_int("TRIP_CODE_MAX_ATTEMPTS", 5))

    # Run configuration
    run_mode: str = field(default_factory=lambda: _env_str("RUN_MODE", "once"))
    cron_schedule: str = field(default_factory=lambda: _env_str("CRON_SCHEDULE", "0 7 * * *"))
    log_level: str = field(default_factory=lambda: _env_str("LOG_LEVEL", "INFO"))
    timezone: str = field(default_factory=lambda: _env_str("TIMEZONE", "Asia/Ho_Chi_Minh"))
    dry_run: bool = field(default_factory=lambda: _env_bool("DRY_RUN"))

    # Webhook settings
    webhook_enabled: bool = field(default_factory=lambda: _env_bool("WEBHOOK_ENABLED"))
    webhook_url: str = field(default_factory=lambda: _env_str("WEBHOOK_URL"))

    # API settings
    api_enabled: bool = field(default_factory=lambda: _env_bool("API_ENABLED"))
    api_host: str = field(default_factory=lambda: _env_str("API_HOST", "0.0.0.0"))  # noqa: S104
    api_port: int = field(default_factory=lambda: _env_int("API_PORT", 8080))

    def validate(self) -> None:
        """Validate required settings."""
        missing: list[str] = []

        if not self.supabase_url:
            missing.append("SUPABASE_URL")
        if not self.supabase_key:
            missing.append("SUPABASE_KEY")

        if missing:
            msg = f"Missing required environment variables: {', '.join(missing)}"
            raise ValueError(msg)

        # Surface bad values at startup rather than on first use
        _ = self.thresholds
        _ = self.labels
        _ = self.tzinfo
        if self.trip_code_max_attempts < 1:
            msg = f"TRIP_CODE_MAX_ATTEMPTS must be at least 1, got {self.trip_code_max_attempts}"
            raise ValueError(msg)

    @cached_property
    def supabase_config(self) -> SupabaseClientConfig:
        """Get Supabase client configuration."""
        return SupabaseClientConfig(
            url=self.supabase_url,
            api_key=self.supabase_key,
            timeout=float(self.supabase_timeout),
        )

    @cached_property
    def thresholds(self) -> ExpiryThresholds:
        """Get expiry thresholds."""
        return ExpiryThresholds(
            critical=self.critical_threshold_days,
            warning=self.warning_threshold_days,
        )

    @cached_property
    def labels(self) -> ExpiryLabels:
        """Get the expiry label catalog."""
        return ExpiryLabels.for_locale(self.label_locale)

    @cached_property
    def tzinfo(self) -> ZoneInfo:
        """Get the fleet's local time zone."""
        try:
            return ZoneInfo(self.timezone)
        except (ZoneInfoNotFoundError, ValueError) as e:
            msg = f"Unknown TIMEZONE: {self.timezone!r}"
            raise ValueError(msg) from e

    @cached_property
    def webhook_config(self) -> WebhookConfig:
        """Get webhook configuration."""
        return WebhookConfig(
            enabled=self.webhook_enabled,
            url=self.webhook_url,
        )


def load_settings() -> Settings:
    """Load and validate settings from environment."""
    settings = Settings()
    settings.validate()
    return settings
