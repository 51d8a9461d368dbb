"""API adapter for HTTP endpoints."""

from .app import ApiDependencies, create_app
from .models import AlertReportResponse, CheckResponse, ExpiryStatusResponse, HealthResponse

__all__ = [
    "AlertReportResponse",
    "ApiDependencies",
    "CheckResponse",
    "ExpiryStatusResponse",
    "HealthResponse",
    "create_app",
]
