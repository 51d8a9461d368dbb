"""Expiry thresholds value object."""

from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class ExpiryThresholds:
    """Thresholds for determining expiry status (in days, inclusive)."""

    critical: int = 7
    warning: int = 30

    def __post_init__(self) -> None:
        """Validate thresholds are in correct order."""
        if not (0 < self.critical < self.warning):
            msg = (
                f"Thresholds must be: 0 < critical({self.critical}) "
                f"< warning({self.warning})"
            )
            raise ValueError(msg)
