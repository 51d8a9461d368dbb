"""FleetDesk application layer."""
