"""FleetDesk - fleet document expiry alerts and trip codes."""
