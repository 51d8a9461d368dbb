"""FastAPI application factory."""

from __future__ import annotations

import logging
from collections.abc import Callable, Coroutine
from contextlib import asynccontextmanager
from dataclasses import dataclass, field
from datetime import UTC, datetime
from typing import TYPE_CHECKING, Annotated

from fastapi import Depends, FastAPI, Header, HTTPException, status
from fastapi.responses import JSONResponse

from ....application.exceptions import (
    RecordStoreError,
    TripCodeConflictError,
    TripCodeExhaustedError,
)
from ....application.use_cases import TripDraft
from ....domain.services import SessionGate
from ....domain.value_objects import GateDecision, Session, SessionState
from .models import (
    AlertReportResponse,
    AlertResponse,
    AlertStatisticsResponse,
    CheckResponse,
    ClassifyRequest,
    ErrorResponse,
    ExpiryStatusResponse,
    HealthResponse,
    TripCodeRequest,
    TripCodeResponse,
    TripCreateRequest,
    TripResponse,
)

if TYPE_CHECKING:
    from collections.abc import AsyncGenerator

    from ....application.ports import SessionProvider
    from ....application.use_cases import CheckResult
    from ....domain.entities import ExpiryAlertReport, Trip
    from ....domain.services import ExpiryClassifier, TripCodeGenerator
    from ....domain.value_objects import ExpiryStatus

logger = logging.getLogger(__name__)


def _utcnow() -> datetime:
    return datetime.now(UTC)


@dataclass
class ApiDependencies:
    """Services the HTTP endpoints delegate to."""

    classifier: ExpiryClassifier
    trip_code_generator: TripCodeGenerator
    session_provider: SessionProvider
    check_func: Callable[[], Coroutine[None, None, CheckResult]]
    report_func: Callable[[], Coroutine[None, None, ExpiryAlertReport]]
    create_trip_func: Callable[[Session, TripDraft], Coroutine[None, None, Trip]]
    clock: Callable[[], datetime] = field(default=_utcnow)


def _status_to_response(result: ExpiryStatus) -> ExpiryStatusResponse:
    return ExpiryStatusResponse(
        status=result.status.value,
        color_class=result.color_class.value,
        css_class=result.color_class.css_class,
        label=result.label,
        days_left=result.days_left,
    )


def _report_to_response(report: ExpiryAlertReport) -> AlertReportResponse:
    """Convert domain report to API response."""
    return AlertReportResponse(
        generated_at=report.generated_at,
        notification_level=report.notification_level.value,
        summary=report.get_summary(),
        badge_text=report.badge_text,
        statistics=AlertStatisticsResponse(
            vehicles_checked=report.vehicles_checked,
            drivers_checked=report.drivers_checked,
            vehicle_warnings=report.vehicle_warning_count,
            driver_warnings=report.driver_warning_count,
            maintenance_warnings=report.maintenance_warning_count,
            license_warnings=report.license_warning_count,
            expired_count=report.expired_count,
            critical_count=report.critical_count,
            warning_count=report.warning_count,
            unknown_count=report.unknown_count,
        ),
        alerts=[
            AlertResponse(
                subject_type=alert.subject_type,
                subject_id=alert.subject_id,
                subject_name=alert.subject_name,
                document=str(alert.document),
                expiry=_status_to_response(alert.status),
            )
            for alert in report.sorted_by_urgency()
        ],
    )


def _bearer_token(authorization: str | None) -> str:
    if not authorization:
        return ""
    scheme, _, token = authorization.partition(" ")
    return token.strip() if scheme.lower() == "bearer" else ""


def create_app(deps: ApiDependencies, version: str = "1.0.0") -> FastAPI:
    """
    Create FastAPI application.

    Args:
        deps: Services backing the endpoints.
        version: Application version string.

    Returns:
        Configured FastAPI application.
    """

    @asynccontextmanager
    async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
        """Application lifespan handler."""
        logger.info("API server starting...")
        yield
        logger.info("API server shutting down...")

    app = FastAPI(
        title="FleetDesk API",
        description="Document expiry classification, alert reports and trip code "
        "generation for the fleet dashboard.",
        version=version,
        lifespan=lifespan,
        responses={
            500: {"model": ErrorResponse, "description": "Internal server error"},
        },
    )

    async def require_session(
        authorization: Annotated[str | None, Header()] = None,
    ) -> Session:
        token = _bearer_token(authorization)
        session = await deps.session_provider.get_session(token) if token else None
        decision = SessionGate.evaluate(SessionState(session=session, loading=False))
        if decision is not GateDecision.RENDER or session is None:
            raise HTTPException(
                status_code=status.HTTP_401_UNAUTHORIZED,
                detail={"error": "Authentication required", "redirect_to": SessionGate.redirect_to},
                headers={"WWW-Authenticate": "Bearer"},
            )
        return session

    @app.get(
        "/health",
        response_model=HealthResponse,
        tags=["Health"],
        summary="Health check",
    )
    async def health_check() -> HealthResponse:
        return HealthResponse(
            status="healthy",
            version=version,
            timestamp=datetime.now(UTC),
        )

    @app.post(
        "/api/v1/expiry/classify",
        response_model=ExpiryStatusResponse,
        tags=["Expiry"],
        summary="Classify a document date",
        description="Never fails on bad input: missing or invalid dates yield status 'unknown'.",
    )
    async def classify_expiry(body: ClassifyRequest) -> ExpiryStatusResponse:
        now = body.now or deps.clock()
        return _status_to_response(deps.classifier.classify(body.date, now))

    @app.post(
        "/api/v1/trip-codes",
        response_model=TripCodeResponse,
        tags=["Trips"],
        summary="Generate a trip code",
    )
    async def generate_trip_code(body: TripCodeRequest | None = None) -> TripCodeResponse:
        now = (body.now if body else None) or deps.clock()
        code = deps.trip_code_generator.generate(now)
        return TripCodeResponse(
            trip_code=str(code),
            prefix=code.prefix,
            period=code.period,
            suffix=code.suffix,
        )

    @app.get(
        "/api/v1/alerts",
        response_model=AlertReportResponse,
        tags=["Expiry"],
        summary="Current expiry alerts",
        responses={401: {"description": "No valid session"}},
    )
    async def get_alerts(
        session: Session = Depends(require_session),
    ) -> AlertReportResponse:
        logger.info("API: Building alert report for user %s", session.user_id)
        report = await deps.report_func()
        return _report_to_response(report)

    @app.post(
        "/api/v1/trips",
        response_model=TripResponse,
        status_code=status.HTTP_201_CREATED,
        tags=["Trips"],
        summary="Create a trip",
        responses={
            401: {"description": "No valid session"},
            409: {"model": ErrorResponse, "description": "Trip code already exists"},
        },
    )
    async def create_trip(
        body: TripCreateRequest,
        session: Session = Depends(require_session),
    ) -> TripResponse:
        draft = TripDraft(**body.model_dump())
        trip = await deps.create_trip_func(session, draft)
        return TripResponse(
            id=trip.id,
            trip_code=trip.trip_code,
            vehicle_id=trip.vehicle_id,
            driver_id=trip.driver_id,
            departure_date=trip.departure_date,
            status=trip.status,
        )

    @app.post(
        "/api/v1/check",
        response_model=CheckResponse,
        tags=["Operations"],
        summary="Trigger document expiry check",
        description="Scan vehicles and drivers and optionally send notifications.",
        responses={401: {"description": "No valid session"}},
    )
    async def trigger_check(
        session: Session = Depends(require_session),
    ) -> CheckResponse:
        logger.info("API: Triggering expiry check for user %s", session.user_id)
        result = await deps.check_func()
        return CheckResponse(
            success=result.success,
            message="Check completed successfully" if result.success else "Check completed with errors",
            report=_report_to_response(result.report),
            notifications_sent=result.notifications_sent,
            notifications_failed=result.notifications_failed,
            dry_run=result.dry_run,
        )

    @app.exception_handler(TripCodeConflictError)
    async def trip_code_conflict_handler(request, exc: TripCodeConflictError) -> JSONResponse:  # noqa: ARG001
        return JSONResponse(
            status_code=status.HTTP_409_CONFLICT,
            content={"error": "Trip code already exists", "detail": str(exc)},
        )

    @app.exception_handler(TripCodeExhaustedError)
    async def trip_code_exhausted_handler(request, exc: TripCodeExhaustedError) -> JSONResponse:  # noqa: ARG001
        logger.error("API: %s", exc)
        return JSONResponse(
            status_code=status.HTTP_503_SERVICE_UNAVAILABLE,
            content={"error": "Could not allocate a trip code", "detail": str(exc)},
        )

    @app.exception_handler(RecordStoreError)
    async def record_store_handler(request, exc: RecordStoreError) -> JSONResponse:  # noqa: ARG001
        logger.error("API: Record store failure: %s", exc)
        return JSONResponse(
            status_code=status.HTTP_502_BAD_GATEWAY,
            content={"error": "Record store unavailable", "detail": str(exc)},
        )

    @app.exception_handler(Exception)
    async def global_exception_handler(request, exc: Exception) -> JSONResponse:  # noqa: ARG001
        """Handle uncaught exceptions."""
        logger.exception("Unhandled exception in API")
        return JSONResponse(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            content={"error": "Internal server error", "detail": str(exc)},
        )

    return app
