"""API request and response models."""

from datetime import datetime
from typing import Any, Literal

from pydantic import BaseModel, Field


class HealthResponse(BaseModel):
    """Health check response."""

    status: Literal["healthy", "unhealthy"]
    version: str
    timestamp: datetime


class ClassifyRequest(BaseModel):
    """Document date to classify."""

    date: Any = Field(default=None, description="ISO-8601 date; empty or invalid values yield 'unknown'")
    now: datetime | None = Field(default=None, description="Evaluation time, defaults to the server clock")


class ExpiryStatusResponse(BaseModel):
    """Classification of a single document date."""

    status: Literal["unknown", "expired", "critical", "warning", "safe"]
    color_class: Literal["neutral", "danger", "caution", "ok"]
    css_class: str
    label: str
    days_left: int | None = None


class TripCodeRequest(BaseModel):
    """Optional evaluation time for trip code generation."""

    now: datetime | None = None


class TripCodeResponse(BaseModel):
    """A generated trip code."""

    trip_code: str
    prefix: str
    period: str
    suffix: str


class AlertResponse(BaseModel):
    """A document needing attention."""

    subject_type: Literal["vehicle", "driver"]
    subject_id: str
    subject_name: str
    document: str
    expiry: ExpiryStatusResponse


class AlertStatisticsResponse(BaseModel):
    """Alert counts, matching the dashboard tabs."""

    vehicles_checked: int
    drivers_checked: int
    vehicle_warnings: int = Field(description="Vehicles with any document needing attention")
    driver_warnings: int = Field(description="Drivers with any document needing attention")
    maintenance_warnings: int
    license_warnings: int
    expired_count: int
    critical_count: int
    warning_count: int
    unknown_count: int


class AlertReportResponse(BaseModel):
    """Expiry alert report."""

    generated_at: datetime
    notification_level: str = Field(description="Overall severity: critical, warning, or info")
    summary: str
    badge_text: str = Field(description="Header bell badge, e.g. '12' or '99+'")
    statistics: AlertStatisticsResponse
    alerts: list[AlertResponse]


class TripCreateRequest(BaseModel):
    """Trip fields supplied by the dispatcher."""

    vehicle_id: str
    driver_id: str
    departure_date: str
    trip_code: str | None = Field(default=None, description="Generated when omitted")
    route_id: str | None = None
    customer_id: str | None = None
    notes: str | None = None


class TripResponse(BaseModel):
    """A stored trip."""

    id: str | None
    trip_code: str
    vehicle_id: str
    driver_id: str
    departure_date: str
    status: str


class CheckResponse(BaseModel):
    """Response from triggering a check."""

    success: bool
    message: str
    report: AlertReportResponse | None = None
    notifications_sent: int = 0
    notifications_failed: int = 0
    dry_run: bool = False


class ErrorResponse(BaseModel):
    """Error response."""

    error: str
    detail: str | None = None
