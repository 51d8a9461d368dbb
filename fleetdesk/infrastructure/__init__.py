"""FleetDesk infrastructure layer."""
