#!/usr/bin/env python3
"""
FleetDesk

Composition root and application entry point.
Wires together all layers following hexagonal architecture principles.
"""

from __future__ import annotations

import asyncio
import logging
import sys
from datetime import datetime
from typing import TYPE_CHECKING

from croniter import croniter

from .application.use_cases import CheckDocumentExpiry, CreateTrip
from .domain.services import ExpiryClassifier, TripCodeGenerator
from .infrastructure.adapters import (
    SupabaseClient,
    SupabaseDriverRepository,
    SupabaseSessionProvider,
    SupabaseTripRepository,
    SupabaseVehicleRepository,
    WebhookNotificationSender,
)
from .infrastructure.config import Settings, load_settings

if TYPE_CHECKING:
    from collections.abc import Callable

    from .application.ports import NotificationSender
    from .application.use_cases import CheckResult, TripDraft
    from .domain.entities import ExpiryAlertReport, Trip
    from .domain.value_objects import Session

# Configure logging
logging.basicConfig(
    level=logging.INFO,
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    handlers=[logging.StreamHandler(sys.stdout)],
)
logger = logging.getLogger(__name__)

# Application version
__version__ = "1.0.0"


class ApplicationContainer:
    """
    Dependency injection container.

    Responsible for creating and wiring all application components.
    """

    def __init__(self, settings: Settings) -> None:
        """Initialize container with settings."""
        self._settings = settings
        self._supabase = SupabaseClient(settings.supabase_config)
        self._tz = settings.tzinfo

    def create_clock(self) -> Callable[[], datetime]:
        """Create the clock giving the current time in the fleet's time zone."""
        tz = self._tz
        return lambda: datetime.now(tz)

    def create_classifier(self) -> ExpiryClassifier:
        """Create the expiry classifier from configured thresholds and locale."""
        return ExpiryClassifier(self._settings.thresholds, self._settings.labels)

    def create_trip_code_generator(self) -> TripCodeGenerator:
        """Create the trip code generator."""
        return TripCodeGenerator(self._settings.trip_code_prefix)

    def create_session_provider(self) -> SupabaseSessionProvider:
        """Create the auth session adapter."""
        return SupabaseSessionProvider(self._supabase)

    def create_notification_senders(self) -> list[NotificationSender]:
        """Create all configured notification sender adapters."""
        senders: list[NotificationSender] = [
            WebhookNotificationSender(self._settings.webhook_config),
        ]

        configured = [s for s in senders if s.is_configured()]
        logger.info(
            "Configured notification senders: %s",
            [s.__class__.__name__ for s in configured] or "None",
        )

        return senders

    def create_check_use_case(self) -> CheckDocumentExpiry:
        """Create the expiry check use case with all dependencies."""
        return CheckDocumentExpiry(
            vehicle_repository=SupabaseVehicleRepository(self._supabase),
            driver_repository=SupabaseDriverRepository(self._supabase),
            notification_senders=self.create_notification_senders(),
            classifier=self.create_classifier(),
            clock=self.create_clock(),
            dry_run=self._settings.dry_run,
        )

    def create_trip_use_case(self, access_token: str | None = None) -> CreateTrip:
        """Create the trip creation use case, scoped to a user token."""
        return CreateTrip(
            trip_repository=SupabaseTripRepository(self._supabase, access_token=access_token),
            generator=self.create_trip_code_generator(),
            clock=self.create_clock(),
            max_attempts=self._settings.trip_code_max_attempts,
        )


class Application:
    """
    Main application orchestrator.

    Handles run modes (single execution, scheduled, or API) and lifecycle.
    """

    def __init__(self, settings: Settings) -> None:
        """Initialize application with settings."""
        self._settings = settings
        self._container = ApplicationContainer(settings)

    async def run_once(self) -> CheckResult:
        """Execute a single document expiry check."""
        use_case = self._container.create_check_use_case()
        return await use_case.execute()

    async def build_report(self) -> ExpiryAlertReport:
        """Build an alert report without sending notifications."""
        use_case = self._container.create_check_use_case()
        return await use_case.build_report()

    async def create_trip(self, session: Session, draft: TripDraft) -> Trip:
        """Create a trip on behalf of an authenticated user."""
        use_case = self._container.create_trip_use_case(session.access_token)
        return await use_case.execute(draft)

    async def run_scheduled(self) -> None:
        """Run in scheduled mode with cron expression."""
        logger.info("Starting scheduled mode with cron: %s", self._settings.cron_schedule)

        # Run immediately on startup
        logger.info("Running initial check on startup...")
        await self.run_once()

        cron = croniter(self._settings.cron_schedule, datetime.now(self._settings.tzinfo))

        while True:
            next_run = cron.get_next(datetime)
            now = datetime.now(self._settings.tzinfo)

            # Handle timezone-naive datetime from croniter
            if next_run.tzinfo is None:
                next_run = next_run.replace(tzinfo=self._settings.tzinfo)

            sleep_seconds = (next_run - now).total_seconds()

            if sleep_seconds > 0:
                logger.info("Next check scheduled for %s", next_run.isoformat())
                await asyncio.sleep(sleep_seconds)

            logger.info("Running scheduled check...")
            await self.run_once()

    async def run_api(self) -> None:
        """Run in API server mode on the current event loop."""
        import uvicorn

        from .infrastructure.adapters.api import ApiDependencies, create_app

        logger.info(
            "Starting API server on %s:%d",
            self._settings.api_host,
            self._settings.api_port,
        )

        app = create_app(
            ApiDependencies(
                classifier=self._container.create_classifier(),
                trip_code_generator=self._container.create_trip_code_generator(),
                session_provider=self._container.create_session_provider(),
                check_func=self.run_once,
                report_func=self.build_report,
                create_trip_func=self.create_trip,
                clock=self._container.create_clock(),
            ),
            version=__version__,
        )

        config = uvicorn.Config(
            app,
            host=self._settings.api_host,
            port=self._settings.api_port,
            log_level=self._settings.log_level.lower(),
        )
        await uvicorn.Server(config).serve()

    async def run(self) -> int:
        """
        Run the application based on configured mode.

        Returns:
            Exit code (0 for success, 1 for failure).
        """
        # API mode takes precedence if enabled
        if self._settings.api_enabled:
            await self.run_api()
            return 0

        match self._settings.run_mode.lower():
            case "once":
                logger.info("Running in single-execution mode")
                result = await self.run_once()
                return 0 if result.success else 1

            case "scheduled":
                await self.run_scheduled()
                return 0  # Never reached in scheduled mode

            case _:
                logger.error(
                    "Invalid RUN_MODE: %s (use 'once', 'scheduled', or set API_ENABLED=true)",
                    self._settings.run_mode,
                )
                return 1


async def async_main() -> int:
    """Async entry point."""
    try:
        logger.info("FleetDesk starting...")

        settings = load_settings()
        logging.getLogger().setLevel(settings.log_level.upper())

        app = Application(settings)
        return await app.run()

    except ValueError as e:
        logger.error("Configuration error: %s", e)
        return 1
    except KeyboardInterrupt:
        logger.info("Shutting down...")
        return 0
    except Exception:
        logger.exception("Unexpected error")
        return 1


def main() -> None:
    """Main entry point."""
    exit_code = asyncio.run(async_main())
    sys.exit(exit_code)


if __name__ == "__main__":
    main()
