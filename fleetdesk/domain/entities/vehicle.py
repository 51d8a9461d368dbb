"""Vehicle entity representing a fleet truck."""

from dataclasses import dataclass
from typing import Any, Self

from ..value_objects import DocumentKind


@dataclass(slots=True)
class Vehicle:
    """A vehicle record with its position and dated documents."""

    id: str
    vehicle_code: str
    license_plate: str
    status: str = "active"
    latitude: float | None = None
    longitude: float | None = None
    registration_expiry_date: str | None = None
    insurance_expiry_date: str | None = None
    next_maintenance_date: str | None = None

    @property
    def display_name(self) -> str:
        """Label shown on map markers and alert rows."""
        return f"{self.vehicle_code} - {self.license_plate}"

    @property
    def has_location(self) -> bool:
        """Check if the vehicle can be plotted on the map."""
        return self.latitude is not None and self.longitude is not None

    def document_dates(self) -> dict[DocumentKind, str | None]:
        """Raw document dates keyed by document kind."""
        return {
            DocumentKind.MAINTENANCE: self.next_maintenance_date,
            DocumentKind.REGISTRATION: self.registration_expiry_date,
            DocumentKind.INSURANCE: self.insurance_expiry_date,
        }

    @classmethod
    def from_row(cls, row: dict[str, Any]) -> Self:
        """Factory method to create a Vehicle from a store row."""
        return cls(
            id=str(row["id"]),
            vehicle_code=row.get("vehicle_code") or "",
            license_plate=row.get("license_plate") or "",
            status=row.get("status") or "active",
            latitude=_optional_float(row.get("latitude")),
            longitude=_optional_float(row.get("longitude")),
            registration_expiry_date=row.get("registration_expiry_date"),
            insurance_expiry_date=row.get("insurance_expiry_date"),
            next_maintenance_date=row.get("next_maintenance_date"),
        )


def _optional_float(value: Any) -> float | None:
    if value is None or value == "":
        return None
    try:
        return float(value)
    except (TypeError, ValueError):
        return None
