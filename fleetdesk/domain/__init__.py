"""FleetDesk domain layer."""
