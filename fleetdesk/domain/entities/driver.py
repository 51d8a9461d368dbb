"""Driver entity."""

from dataclasses import dataclass
from typing import Any, Self

from ..value_objects import DocumentKind


@dataclass(slots=True)
class Driver:
    """A driver record with license and health check dates."""

    id: str
    driver_code: str
    full_name: str
    license_expiry: str | None = None
    health_check_expiry: str | None = None

    @property
    def display_name(self) -> str:
        return f"{self.driver_code} - {self.full_name}"

    def document_dates(self) -> dict[DocumentKind, str | None]:
        """Raw document dates keyed by document kind."""
        return {
            DocumentKind.LICENSE: self.license_expiry,
            DocumentKind.HEALTH_CHECK: self.health_check_expiry,
        }

    @classmethod
    def from_row(cls, row: dict[str, Any]) -> Self:
        """Factory method to create a Driver from a store row."""
        return cls(
            id=str(row["id"]),
            driver_code=row.get("driver_code") or "",
            full_name=row.get("full_name") or "",
            # Older rows carry the legacy column name
            license_expiry=row.get("license_expiry") or row.get("license_expiry_date"),
            health_check_expiry=row.get("health_check_expiry"),
        )
