"""Trip entity."""

from dataclasses import dataclass
from typing import Any, Self


@dataclass(slots=True)
class Trip:
    """A trip record. ``id`` is assigned by the store on insert."""

    trip_code: str
    vehicle_id: str
    driver_id: str
    departure_date: str
    status: str = "draft"
    id: str | None = None
    route_id: str | None = None
    customer_id: str | None = None
    notes: str | None = None

    def to_row(self) -> dict[str, Any]:
        """Serialize to an insertable row (``id`` left to the store)."""
        row: dict[str, Any] = {
            "trip_code": self.trip_code,
            "vehicle_id": self.vehicle_id,
            "driver_id": self.driver_id,
            "departure_date": self.departure_date,
            "status": self.status,
        }
        for key in ("route_id", "customer_id", "notes"):
            value = getattr(self, key)
            if value is not None:
                row[key] = value
        return row

    @classmethod
    def from_row(cls, row: dict[str, Any]) -> Self:
        """Factory method to create a Trip from a store row."""
        return cls(
            id=str(row["id"]) if row.get("id") is not None else None,
            trip_code=row["trip_code"],
            vehicle_id=str(row["vehicle_id"]),
            driver_id=str(row["driver_id"]),
            departure_date=row["departure_date"],
            status=row.get("status") or "draft",
            route_id=row.get("route_id"),
            customer_id=row.get("customer_id"),
            notes=row.get("notes"),
        )
